"""Slider panel for the four SCARA axes.

One slider per command channel plus a Home button.  The panel emits
signals when values change so the subsystem widget can forward them to
the controller.
"""

from typing import Dict, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QSlider,
    QPushButton,
    QGroupBox,
)

from .. import config
from ..utilities.axis_state import AxisState


class AxisControlPanel(QWidget):
    """Sliders for x/y/z/gripper and the Home action."""

    axisChanged = pyqtSignal(str, int)
    homeRequested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout()
        group = QGroupBox("Axis Control")
        group_layout = QVBoxLayout()

        self.sliders: Dict[str, QSlider] = {}
        self._value_labels: Dict[str, QLabel] = {}
        for channel in config.PANEL_CHANNELS:
            axis = config.SCARA_AXES[channel]
            group_layout.addWidget(QLabel(axis["name"]))

            row = QHBoxLayout()
            slider = QSlider(Qt.Horizontal)
            slider.setRange(axis["min"], axis["max"])
            slider.setValue(0)
            # default arg binds the channel per slider
            slider.valueChanged.connect(lambda v, ch=channel: self._on_slider_changed(ch, v))
            value_label = QLabel("0")
            value_label.setMinimumWidth(32)
            row.addWidget(slider)
            row.addWidget(value_label)
            group_layout.addLayout(row)

            self.sliders[channel] = slider
            self._value_labels[channel] = value_label

        self.home_button = QPushButton("Home (Stop && Reset)")
        self.home_button.clicked.connect(lambda: self.homeRequested.emit())
        group_layout.addWidget(self.home_button)

        group.setLayout(group_layout)
        layout.addWidget(group)
        layout.addStretch(1)
        self.setLayout(layout)

    def _on_slider_changed(self, channel: str, value: int) -> None:
        self._value_labels[channel].setText(str(value))
        self.axisChanged.emit(channel, int(value))

    def set_values(self, state: AxisState) -> None:
        """Move the sliders to ``state`` without emitting axisChanged."""
        for channel, slider in self.sliders.items():
            value = state.value_for(channel)
            slider.blockSignals(True)
            try:
                slider.setValue(value)
            finally:
                slider.blockSignals(False)
            self._value_labels[channel].setText(str(value))
