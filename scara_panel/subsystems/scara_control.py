"""SCARA control subsystem tab.

This module implements the core of the SCARA control GUI.  It combines
the axis slider panel, the arm simulation canvas and a log viewer, and
owns the broker connection and the axis state shared between them.
"""

from __future__ import annotations

import logging
from typing import Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QSplitter

from ..components import ArmCanvas, AxisControlPanel, LogViewer
from ..utilities.axis_state import AxisStateCell
from ..utilities.command_mapper import CommandMapper
from ..utilities.connection_manager import ConnectionManager
from ..utilities.scara_controller import ScaraController

logger = logging.getLogger(__name__)


class ScaraControlWidget(QWidget):
    """Widget containing all GUI elements for controlling the arm."""

    # Re-emitted from paho's network thread; Qt queues them onto the GUI thread
    brokerConnected = pyqtSignal()
    brokerDisconnected = pyqtSignal()
    brokerConnectFailed = pyqtSignal()
    statusReceived = pyqtSignal(str, object)
    connectionChanged = pyqtSignal(bool)

    def __init__(
        self,
        connection: Optional[ConnectionManager] = None,
        parent: Optional[QWidget] = None,
        autoconnect: bool = True,
    ) -> None:
        super().__init__(parent)

        self.state = AxisStateCell()
        self.connection = connection or ConnectionManager()
        self.connection.on_connected = self.brokerConnected.emit
        self.connection.on_disconnected = self.brokerDisconnected.emit
        self.connection.on_connect_failed = self.brokerConnectFailed.emit
        self.connection.on_message = self.statusReceived.emit
        self.mapper = CommandMapper(self.connection)
        self.controller = ScaraController(self.state, self.mapper, self.connection)

        self.control_panel = AxisControlPanel()
        self.canvas = ArmCanvas(self.state)
        self.log_viewer = LogViewer()

        # Layout configuration
        top_widget = QWidget()
        top_layout = QHBoxLayout()
        top_layout.setContentsMargins(1, 1, 1, 1)
        top_layout.addWidget(self.control_panel, stretch=1)
        top_layout.addWidget(self.canvas, stretch=2)
        top_widget.setLayout(top_layout)

        splitter = QSplitter(Qt.Vertical)
        splitter.addWidget(top_widget)
        splitter.addWidget(self.log_viewer)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)
        splitter.setCollapsible(0, False)
        splitter.setCollapsible(1, True)

        main_layout = QVBoxLayout()
        main_layout.addWidget(splitter)
        self.setLayout(main_layout)

        self.control_panel.axisChanged.connect(self.on_axis_changed)
        self.control_panel.homeRequested.connect(self.on_home)
        self.brokerConnected.connect(self._on_broker_connected)
        self.brokerDisconnected.connect(self._on_broker_disconnected)
        self.brokerConnectFailed.connect(self._on_broker_connect_failed)
        self.statusReceived.connect(self._on_status_received)

        if autoconnect:
            self.start_session()

    def start_session(self) -> None:
        if self.connection.connect():
            self.log_viewer.append(f"Connecting to {self.connection.config.host} ...")
        else:
            self.log_viewer.append("Failed to start broker connection")

    def shutdown(self) -> None:
        """Stop rendering and release the broker connection."""
        self.canvas.stop_rendering()
        self.connection.disconnect()

    # Slot implementations
    def on_axis_changed(self, channel: str, value: int) -> None:
        self.controller.set_axis(channel, value)

    def on_home(self) -> None:
        self.controller.home()
        self.control_panel.set_values(self.state.get())
        self.canvas.update()
        self.log_viewer.append("Home: all axes set to 0")

    def _on_broker_connected(self) -> None:
        self.controller.on_connected()
        self.connectionChanged.emit(True)
        self.log_viewer.append("Connected to broker")

    def _on_broker_disconnected(self) -> None:
        self.connectionChanged.emit(False)
        self.log_viewer.append("Disconnected from broker")

    def _on_broker_connect_failed(self) -> None:
        self.connectionChanged.emit(False)
        self.log_viewer.append(
            f"Could not reach broker {self.connection.config.host}, retrying"
        )

    def _on_status_received(self, topic: str, payload: bytes) -> None:
        # No payload schema is defined; show it verbatim
        text = payload.decode("utf-8", errors="replace")
        logger.debug("Status %s: %s", topic, text)
        self.log_viewer.append(f"{topic}: {text}")
