"""2D simulation view of the SCARA arm.

The canvas reads the shared axis state on every paint, builds the frame
with ``build_frame`` and draws it with ``QPainter``.  A ``FrameTicker``
requests a repaint on every tick for as long as the widget is alive.
"""

from typing import Optional

from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QBrush, QColor, QFont, QPainter, QPen
from PyQt5.QtWidgets import QSizePolicy, QWidget

from .. import config
from ..utilities.axis_state import AxisStateCell
from ..utilities.render_plan import (
    CircleOp,
    FONT_FAMILY,
    FONT_PIXEL_SIZE,
    LineOp,
    RectOp,
    TextOp,
    build_frame,
)
from .frame_ticker import FrameTicker


class ArmCanvas(QWidget):
    """Widget drawing the current arm pose."""

    def __init__(self, state: AxisStateCell, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.state = state
        self.setMinimumHeight(config.CANVAS_MIN_HEIGHT)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.ticker = FrameTicker(self.update, parent=self)
        self.ticker.start()

    def stop_rendering(self) -> None:
        """Cancel the redraw loop. Called on teardown."""
        self.ticker.cancel()

    def closeEvent(self, event):  # type: ignore[override]
        self.stop_rendering()
        super().closeEvent(event)

    def paintEvent(self, event):  # type: ignore[override]
        """Draw background then every frame operation in order."""
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing)
            painter.fillRect(self.rect(), QBrush(QColor(config.COLORS["background"])))
            for op in build_frame(self.state.get(), self.width(), self.height()):
                self._draw(painter, op)
        finally:
            painter.end()

    def _draw(self, painter: QPainter, op) -> None:
        if isinstance(op, RectOp):
            painter.fillRect(QRectF(op.x, op.y, op.width, op.height), QColor(op.color))
        elif isinstance(op, LineOp):
            pen = QPen(QColor(op.color))
            pen.setWidth(op.width)
            painter.setPen(pen)
            painter.drawLine(QPointF(op.x1, op.y1), QPointF(op.x2, op.y2))
        elif isinstance(op, CircleOp):
            painter.setPen(Qt.NoPen)
            painter.setBrush(QBrush(QColor(op.color)))
            painter.drawEllipse(QPointF(op.cx, op.cy), op.radius, op.radius)
        elif isinstance(op, TextOp):
            font = QFont(FONT_FAMILY)
            font.setPixelSize(FONT_PIXEL_SIZE)
            painter.setFont(font)
            painter.setPen(QPen(QColor(op.color)))
            painter.drawText(QPointF(op.x, op.y), op.text)
