"""Cancellable periodic tick for the canvas redraw loop."""

from typing import Callable, Optional

from PyQt5.QtCore import QObject, QTimer

from .. import config


class FrameTicker(QObject):
    """Call ``callback`` every ``interval_ms`` until cancelled.

    ``cancel`` stops the timer and also guards the slot, so a timeout
    already queued in the event loop does not reach the callback.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval_ms: int = config.FRAME_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._callback = callback
        self._cancelled = False
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    def start(self) -> None:
        if self._cancelled:
            return
        self._timer.start()

    def cancel(self) -> None:
        """Stop ticking for good. Idempotent."""
        self._cancelled = True
        self._timer.stop()

    def is_active(self) -> bool:
        return not self._cancelled and self._timer.isActive()

    def _on_timeout(self) -> None:
        if self._cancelled:
            return
        self._callback()
