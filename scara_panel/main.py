"""Main entry point for the SCARA control panel.

This module creates the top-level window, wires logging into the
on-screen log viewer and runs the Qt event loop.  To launch the
application simply run:

    python -m scara_panel.main
"""

import logging
import sys
from typing import Optional

from PyQt5.QtWidgets import QApplication, QMainWindow

from .components import StatusBar, QtLogHandler
from .logging_config import setup_logging
from .subsystems import ScaraControlWidget
from .utilities.connection_manager import ConnectionManager


class MainWindow(QMainWindow):
    def __init__(self, connection: Optional[ConnectionManager] = None, autoconnect: bool = True) -> None:
        super().__init__()
        self.setWindowTitle("SCARA Control Panel")
        self.resize(1100, 700)
        self.setMinimumSize(800, 500)

        self.scara = ScaraControlWidget(connection=connection, autoconnect=autoconnect)
        self.setCentralWidget(self.scara)

        self.status_bar = StatusBar()
        self.setStatusBar(self.status_bar)
        self.scara.connectionChanged.connect(self.status_bar.set_connection_status)

        self._log_handler = QtLogHandler(self.scara.log_viewer, level=logging.WARNING)
        logging.getLogger("scara_panel").addHandler(self._log_handler)

    def closeEvent(self, event):  # type: ignore[override]
        """Stop the render loop and release the broker connection."""
        logging.getLogger("scara_panel").removeHandler(self._log_handler)
        self.scara.shutdown()
        super().closeEvent(event)


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    window = MainWindow()
    window.show()
    try:
        code = app.exec_()
    finally:
        window.scara.shutdown()
    sys.exit(code)


if __name__ == "__main__":
    main()
