"""Operator actions for the SCARA arm.

Ties the axis state cell to the command mapper so that every operator
edit updates the local simulation and the remote actuator together.
"""

from __future__ import annotations

import logging

from .. import config
from .axis_state import AxisStateCell
from .command_mapper import CommandMapper

logger = logging.getLogger(__name__)


class ScaraController:
    def __init__(self, state: AxisStateCell, mapper: CommandMapper, transport) -> None:
        self.state = state
        self.mapper = mapper
        self.transport = transport

    def set_axis(self, channel: str, raw_value: float) -> int:
        """Apply an operator edit and forward it. Returns the stored value."""
        value = self.state.set(channel, raw_value)
        self.mapper.send(channel, value)
        return value

    def home(self) -> None:
        # State first so the next frame already shows the home pose
        self.state.reset()
        self.mapper.send_zero_burst()
        logger.info("Home: all axes reset")

    def on_connected(self) -> None:
        """Session-start sequence run after every successful connect."""
        self.transport.subscribe(config.STATUS_TOPIC)
        self.mapper.send_zero_burst()
