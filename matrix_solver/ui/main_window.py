from typing import Optional

from PySide6.QtWidgets import QMainWindow, QScrollArea

from matrix_solver.config import Config
from matrix_solver.state import SolverState
from matrix_solver.ui.main_widget import MatrixSolverWidget
from matrix_solver.ui.theme import ThemeStore


class MainWindow(QMainWindow):
    def __init__(self, state: Optional[SolverState] = None, theme_store: Optional[ThemeStore] = None):
        super().__init__()

        self.setWindowTitle(Config.APP_NAME)
        self.setMinimumSize(900, 700)

        self.main_widget = MatrixSolverWidget(state, theme_store)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.main_widget)
        self.setCentralWidget(scroll)
