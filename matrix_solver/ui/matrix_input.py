from typing import List

import numpy as np
from PySide6.QtCore import QEvent, QLocale, Qt, Signal
from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import QApplication, QGridLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from matrix_solver.config import Config
from matrix_solver.ui.formatting import format_number, parse_cell


# ===== MATRIX INPUT =====
class MatrixInput(QWidget):
    cell_edited = Signal(int, int, str)

    def __init__(self, rows: int, cols: int, label: str = "", readonly: bool = False, parent=None):
        super().__init__(parent)
        self.rows = rows
        self.cols = cols
        self.label = label
        self.readonly = readonly
        self.inputs: List[List[QLineEdit]] = []

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        if label:
            title = QLabel(label)
            title.setObjectName("MatrixTitle")
            self.layout.addWidget(title)

        grid_widget = QWidget()
        self.grid = QGridLayout(grid_widget)
        self.grid.setSpacing(6)

        self.validator = QDoubleValidator(-1e12, 1e12, 6, self)
        self.validator.setNotation(QDoubleValidator.ScientificNotation)
        self.validator.setLocale(QLocale.c())

        self.layout.addWidget(grid_widget)
        self.layout.addStretch()
        self.build_cells()

    def build_cells(self):
        for i in range(self.rows):
            row = []
            for j in range(self.cols):
                box = QLineEdit("0")
                box.setFixedSize(Config.CELL_WIDTH, Config.CELL_HEIGHT)
                box.setAlignment(Qt.AlignCenter)
                box.setObjectName("MatrixCell")
                box.setReadOnly(self.readonly)
                if not self.readonly:
                    box.setValidator(self.validator)
                    box.textEdited.connect(
                        lambda text, i=i, j=j: self.cell_edited.emit(i, j, text)
                    )
                    box.textChanged.connect(self.on_cell_changed)
                    box.installEventFilter(self)
                self.grid.addWidget(box, i, j)
                row.append(box)
            self.inputs.append(row)

    def set_dimensions(self, rows: int, cols: int):
        """Recreate the cell grid with new dimensions; every cell resets to 0."""
        for row in self.inputs:
            for cell in row:
                self.grid.removeWidget(cell)
                cell.deleteLater()
        self.inputs = []
        self.rows = rows
        self.cols = cols
        self.build_cells()

    def eventFilter(self, obj, event):
        if event.type() == QEvent.KeyPress:
            if event.key() in (Qt.Key_Tab, Qt.Key_Backtab):
                self.navigate_cells(event.key() == Qt.Key_Tab)
                return True
        return super().eventFilter(obj, event)

    def navigate_cells(self, forward: bool):
        current = QApplication.focusWidget()
        if not isinstance(current, QLineEdit):
            return

        all_cells = [cell for row in self.inputs for cell in row]
        if current not in all_cells:
            return

        idx = all_cells.index(current)
        if forward:
            next_idx = (idx + 1) % len(all_cells)
        else:
            next_idx = (idx - 1) % len(all_cells)

        all_cells[next_idx].setFocus()
        all_cells[next_idx].selectAll()

    def on_cell_changed(self):
        sender = self.sender()
        if sender and sender.text():
            try:
                float(sender.text())
                sender.setStyleSheet("")
            except ValueError:
                sender.setStyleSheet("background-color: rgba(244, 71, 71, 0.3);")
        elif sender:
            sender.setStyleSheet("")

    def get_matrix(self) -> np.ndarray:
        return np.array([
            [parse_cell(cell.text()) for cell in row]
            for row in self.inputs
        ])

    def set_matrix(self, matrix: np.ndarray):
        for i in range(min(self.rows, len(matrix))):
            for j in range(min(self.cols, len(matrix[0]))):
                self.inputs[i][j].setText(format_number(matrix[i][j]))

    def set_values(self, matrix: np.ndarray):
        """Show editable values without rounding them to the display precision."""
        for i in range(min(self.rows, len(matrix))):
            for j in range(min(self.cols, len(matrix[0]))):
                self.inputs[i][j].setText(f"{matrix[i][j]:g}")

    def clear(self):
        for row in self.inputs:
            for cell in row:
                cell.setText("0")
