"""Reusable GUI components for the SCARA control panel.

This package exposes classes such as `ArmCanvas`, `AxisControlPanel`,
`StatusBar` and `LogViewer`.  Each component is implemented as a PyQt
widget and can be integrated into different subsystems with minimal
modification.
"""

from .arm_canvas import ArmCanvas
from .axis_control_panel import AxisControlPanel
from .frame_ticker import FrameTicker
from .status_bar import StatusBar
from .log_viewer import LogViewer, QtLogHandler

__all__ = [
    "ArmCanvas",
    "AxisControlPanel",
    "FrameTicker",
    "StatusBar",
    "LogViewer",
    "QtLogHandler",
]
