"""
Application Initialization
==========================
Builds the QApplication, wires logging and settings, and starts the Qt
event loop.

Run with: python -m matrix_solver
"""
import logging
import sys
from typing import List, Optional

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QApplication

from matrix_solver.config import Config
from matrix_solver.logging_config import setup_logging
from matrix_solver.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def create_app(argv: Optional[List[str]] = None) -> QApplication:
    # QSettings() without arguments resolves to these names
    QCoreApplication.setOrganizationName(Config.ORG_NAME)
    QCoreApplication.setApplicationName(Config.APP_NAME)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(argv if argv is not None else sys.argv)
    app.setStyle("Fusion")
    app.setFont(QFont("Segoe UI", 10))
    return app


def main() -> int:
    setup_logging()

    app = create_app()
    window = MainWindow()
    window.show()
    logger.info("Matrix Solver started")
    return app.exec()
