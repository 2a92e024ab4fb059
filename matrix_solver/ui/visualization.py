from typing import Dict, Optional

import numpy as np
from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QWidget

from matrix_solver.config import Config
from matrix_solver.ui.formatting import format_number


# ===== MATRIX VISUALIZATION =====
class MatrixVisualization(QWidget):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.matrix: Optional[np.ndarray] = None
        self.color_map: Optional[np.ndarray] = None
        self.palette_colors: Dict[str, str] = Config.LIGHT
        self.setMinimumSize(160, 120)

    def set_matrix(self, matrix: Optional[np.ndarray]):
        self.matrix = matrix
        self.normalize_matrix()
        self.update()

    def set_palette_colors(self, colors: Dict[str, str]):
        self.palette_colors = colors
        self.update()

    def normalize_matrix(self):
        if self.matrix is None:
            self.color_map = None
            return

        abs_matrix = np.abs(self.matrix)
        if abs_matrix.max() > 0:
            self.color_map = abs_matrix / abs_matrix.max()
        else:
            self.color_map = np.zeros_like(self.matrix)

    @staticmethod
    def cell_color(value: float, intensity: float) -> QColor:
        # Blue for non-negative values, orange for negative ones
        if value >= 0:
            return QColor(
                int(255 - 200 * intensity),
                int(255 - 107 * intensity),
                255
            )
        return QColor(
            255,
            int(255 - 148 * intensity),
            int(255 - 200 * intensity)
        )

    def paintEvent(self, event):
        if self.matrix is None or self.matrix.size == 0:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        rows, cols = self.matrix.shape
        cell_width = self.width() / cols
        cell_height = self.height() / rows

        for i in range(rows):
            for j in range(cols):
                value = self.matrix[i][j]
                rect = QRectF(j * cell_width, i * cell_height, cell_width, cell_height)
                painter.fillRect(rect, self.cell_color(value, self.color_map[i][j]))
                painter.setPen(QColor(self.palette_colors["border"]))
                painter.drawRect(rect)

                painter.setPen(QColor(Config.LIGHT["text"]))
                painter.drawText(rect, Qt.AlignCenter, format_number(value))

        painter.end()
