"""Log viewer widget.

Provides a scrollable text area for operator-facing messages:
connection events, inbound status messages and errors.  Other parts of
the program can call ``append`` directly, or attach a ``QtLogHandler``
so records from the ``scara_panel`` logger show up here.
"""

import logging
from typing import Optional

from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtWidgets import QWidget, QVBoxLayout, QPlainTextEdit

from ..logging_config import DATE_FORMAT


class LogViewer(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._edit = QPlainTextEdit()
        self._edit.setReadOnly(True)
        self._edit.setMaximumBlockCount(1000)

        layout = QVBoxLayout()
        layout.addWidget(self._edit)
        self.setLayout(layout)

    def append(self, message: str) -> None:
        """Append a line of text to the log viewer."""
        self._edit.appendPlainText(message)
        # Scroll to bottom
        cursor = self._edit.textCursor()
        cursor.movePosition(cursor.End)
        self._edit.setTextCursor(cursor)

    def text(self) -> str:
        return self._edit.toPlainText()


class _LogBridge(QObject):
    message = pyqtSignal(str)


class QtLogHandler(logging.Handler):
    """Forward log records to a ``LogViewer``.

    Records may come from paho's network thread; the signal hop queues
    them onto the GUI thread.
    """

    def __init__(self, viewer: LogViewer, level: int = logging.INFO) -> None:
        super().__init__(level)
        self.setFormatter(logging.Formatter("[%(asctime)s] %(message)s", datefmt=DATE_FORMAT))
        self._bridge = _LogBridge()
        self._bridge.message.connect(viewer.append)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._bridge.message.emit(self.format(record))
        except RuntimeError:
            # viewer already deleted during shutdown
            pass
