"""Operator axis values and the cell that owns them.

``AxisState`` is an immutable snapshot of the four control channels.
``AxisStateCell`` is the single place the current snapshot lives; the
controller writes it and the canvas reads it on every frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from .. import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisState:
    x_axis: int = 0
    y_axis: int = 0
    z_axis: int = 0
    gripper: int = 0

    def value_for(self, channel: str) -> int:
        """Return the value stored for a command channel name."""
        return getattr(self, config.get_axis_config(channel)["field"])


HOME = AxisState()


def clamp_axis(channel: str, value: float) -> int:
    """Round ``value`` and clamp it into the channel's declared range."""
    axis = config.get_axis_config(channel)
    lo, hi = axis["min"], axis["max"]
    return int(max(lo, min(hi, round(value))))


class AxisStateCell:
    """Owned holder of the current ``AxisState``.

    Writes replace the snapshot, so a reader always sees either the old
    or the new state, never a partially updated one.
    """

    def __init__(self, initial: AxisState = HOME) -> None:
        self._state = initial

    def get(self) -> AxisState:
        return self._state

    def set(self, channel: str, value: float) -> int:
        """Store a clamped value for ``channel`` and return it."""
        clamped = clamp_axis(channel, value)
        field = config.get_axis_config(channel)["field"]
        self._state = replace(self._state, **{field: clamped})
        return clamped

    def reset(self) -> None:
        """Return every axis to the home (all zero) position."""
        self._state = HOME
        logger.debug("Axis state reset to home")
