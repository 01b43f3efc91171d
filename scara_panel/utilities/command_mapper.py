"""Translate axis values into outbound actuator commands.

The slider domain and the wire domain only differ for the vertical axis,
whose actuator expects values on a 0..1023 scale.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .. import config

logger = logging.getLogger(__name__)


class CommandTransport(Protocol):
    def publish(self, topic: str, payload: str) -> bool: ...


def amplify(channel: str, raw_value: int) -> int:
    """Return the wire value for ``raw_value`` on ``channel``.

    >>> amplify("zSpeed", 600)
    1023
    >>> amplify("xSpeed", 600)
    600
    """
    axis = config.get_axis_config(channel)
    value = int(raw_value) * axis.get("gain", 1)
    cap = axis.get("cap")
    if cap is not None:
        value = min(value, cap)
    return value


class CommandMapper:
    """Publish one command per axis change, fire-and-forget."""

    def __init__(self, transport: CommandTransport) -> None:
        self.transport = transport

    def send(self, channel: str, raw_value: int) -> bool:
        """Publish the command for ``channel``.

        Returns ``False`` when the transport dropped it.
        """
        value = amplify(channel, raw_value)
        return self.transport.publish(config.command_topic(channel), str(value))

    def send_zero_burst(self) -> None:
        """Send zero on every channel in the fixed channel order."""
        for channel in config.COMMAND_CHANNELS:
            self.send(channel, 0)
        logger.info("Zero command burst sent")
