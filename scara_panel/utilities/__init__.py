"""Non-widget helpers for the SCARA control panel.

This package holds the MQTT connection, the command mapping and the
arm kinematics.  See ``connection_manager.py`` and ``kinematics.py``
for more information.
"""

from .axis_state import AxisState, AxisStateCell
from .command_mapper import CommandMapper, amplify
from .connection_manager import ConnectionManager, MqttConfig
from .kinematics import ArmGeometry, DerivedPose, compute_pose
from .scara_controller import ScaraController

__all__ = [
    "AxisState",
    "AxisStateCell",
    "CommandMapper",
    "amplify",
    "ConnectionManager",
    "MqttConfig",
    "ArmGeometry",
    "DerivedPose",
    "compute_pose",
    "ScaraController",
]
