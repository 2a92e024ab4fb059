import logging
from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QApplication, QComboBox, QFormLayout, QGroupBox, QHBoxLayout,
    QLabel, QPushButton, QSpinBox, QVBoxLayout, QWidget
)

from matrix_solver.config import Config
from matrix_solver.core.operations import Operation
from matrix_solver.state import SolverState
from matrix_solver.ui.matrix_input import MatrixInput
from matrix_solver.ui.theme import Theme, ThemeStore, build_stylesheet
from matrix_solver.ui.visualization import MatrixVisualization

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "1. Set the dimensions for both matrices (1-5 rows/cols)\n"
    "2. Enter numeric values into the matrix cells\n"
    "3. Select an operation (add, subtract, multiply, or scalar)\n"
    "4. Click \"Calculate\" to see the result\n"
    "5. Use \"Clear All\" to reset everything"
)


class MatrixSolverWidget(QWidget):
    theme_changed = Signal(object)

    def __init__(self, state: Optional[SolverState] = None, theme_store: Optional[ThemeStore] = None):
        super().__init__()

        self.state = state if state is not None else SolverState()
        self.theme_store = theme_store if theme_store is not None else ThemeStore()
        self.theme = self.theme_store.load()

        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(30, 30, 30, 30)
        self.main_layout.setSpacing(20)

        self.setup_header()
        self.setup_instructions()
        self.setup_controls()
        self.setup_error()
        self.setup_matrices()
        self.setup_result()
        self.main_layout.addStretch()

        self.apply_theme(self.theme)

    # =========================
    # Header
    # =========================
    def setup_header(self):
        header = QHBoxLayout()

        title = QLabel("🧮 Matrix Solver")
        title.setObjectName("AppTitle")

        self.theme_btn = QPushButton()
        self.theme_btn.setObjectName("OutlineButton")
        self.theme_btn.clicked.connect(self.toggle_theme)

        header.addWidget(title)
        header.addStretch()
        header.addWidget(self.theme_btn)
        self.main_layout.addLayout(header)

    def setup_instructions(self):
        box = QGroupBox("How to Use")
        layout = QVBoxLayout(box)
        text = QLabel(INSTRUCTIONS)
        text.setObjectName("Instructions")
        layout.addWidget(text)
        self.main_layout.addWidget(box)

    # =========================
    # Dimensions / Operation / Actions
    # =========================
    def setup_controls(self):
        controls = QHBoxLayout()

        rows_a, cols_a = self.state.shape_a
        rows_b, cols_b = self.state.shape_b
        self.rows_a, self.cols_a = self.create_size_spin(rows_a), self.create_size_spin(cols_a)
        self.rows_b, self.cols_b = self.create_size_spin(rows_b), self.create_size_spin(cols_b)
        controls.addWidget(self.create_dimension_box("Matrix A Dimensions", self.rows_a, self.cols_a))
        controls.addWidget(self.create_dimension_box("Matrix B Dimensions", self.rows_b, self.cols_b))

        for spin in (self.rows_a, self.cols_a):
            spin.valueChanged.connect(self.on_dimensions_a_changed)
        for spin in (self.rows_b, self.cols_b):
            spin.valueChanged.connect(self.on_dimensions_b_changed)

        op_box = QGroupBox("Operation")
        op_layout = QVBoxLayout(op_box)
        self.operation_combo = QComboBox()
        for op in Operation:
            self.operation_combo.addItem(op.label, op.value)
        self.operation_combo.setCurrentIndex(list(Operation).index(self.state.operation))
        self.operation_combo.currentIndexChanged.connect(self.on_operation_changed)
        op_layout.addWidget(self.operation_combo)
        controls.addWidget(op_box)

        actions = QGroupBox("Actions")
        actions_layout = QVBoxLayout(actions)
        self.calculate_btn = QPushButton("Calculate")
        self.clear_btn = QPushButton("✖ Clear All")
        self.clear_btn.setObjectName("OutlineButton")
        self.calculate_btn.clicked.connect(self.calculate)
        self.clear_btn.clicked.connect(self.clear_all)
        actions_layout.addWidget(self.calculate_btn)
        actions_layout.addWidget(self.clear_btn)
        controls.addWidget(actions)

        self.main_layout.addLayout(controls)

    def create_size_spin(self, value: int) -> QSpinBox:
        spin = QSpinBox()
        spin.setRange(Config.MIN_MATRIX_SIZE, Config.MAX_MATRIX_SIZE)
        spin.setValue(value)
        return spin

    def create_dimension_box(self, title: str, rows: QSpinBox, cols: QSpinBox) -> QGroupBox:
        box = QGroupBox(title)
        form = QFormLayout(box)
        form.addRow("Rows", rows)
        form.addRow("Columns", cols)
        return box

    def setup_error(self):
        self.error_label = QLabel()
        self.error_label.setObjectName("ErrorLabel")
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        self.main_layout.addWidget(self.error_label)

    # =========================
    # Matrices
    # =========================
    def setup_matrices(self):
        matrix_layout = QHBoxLayout()
        matrix_layout.setSpacing(20)

        self.input_a = MatrixInput(*self.state.shape_a, label="Matrix A")
        self.input_b = MatrixInput(*self.state.shape_b, label="Matrix B")
        self.input_a.set_values(self.state.matrix_a)
        self.input_b.set_values(self.state.matrix_b)
        self.input_a.cell_edited.connect(
            lambda i, j, text: self.state.set_cell("A", i, j, text)
        )
        self.input_b.cell_edited.connect(
            lambda i, j, text: self.state.set_cell("B", i, j, text)
        )

        self.symbol_label = QLabel(self.state.operation.symbol)
        self.symbol_label.setObjectName("MathSymbol")
        self.symbol_label.setAlignment(Qt.AlignCenter)

        matrix_layout.addWidget(self.input_a)
        matrix_layout.addWidget(self.symbol_label)
        matrix_layout.addWidget(self.input_b)
        matrix_layout.addStretch()
        self.main_layout.addLayout(matrix_layout)

    def setup_result(self):
        self.result_box = QGroupBox("Result")
        layout = QHBoxLayout(self.result_box)

        self.result_input = MatrixInput(1, 1, readonly=True)
        self.result_viz = MatrixVisualization()

        layout.addWidget(self.result_input)
        layout.addWidget(self.result_viz, 1)
        self.result_box.setVisible(False)
        self.main_layout.addWidget(self.result_box)

    # =========================
    # Handlers
    # =========================
    def on_dimensions_a_changed(self):
        self.state.resize_a(self.rows_a.value(), self.cols_a.value())
        self.input_a.set_dimensions(*self.state.shape_a)
        self.input_b.clear()
        self.refresh()

    def on_dimensions_b_changed(self):
        self.state.resize_b(self.rows_b.value(), self.cols_b.value())
        self.input_b.set_dimensions(*self.state.shape_b)
        self.input_a.clear()
        self.refresh()

    def on_operation_changed(self, index: int):
        self.state.set_operation(self.operation_combo.itemData(index))
        self.symbol_label.setText(self.state.operation.symbol)

    def calculate(self):
        # Cells set programmatically emit no textEdited; read the grids back
        self.state.set_matrix("A", self.input_a.get_matrix())
        self.state.set_matrix("B", self.input_b.get_matrix())
        if self.state.calculate():
            logger.debug("Calculated %s", self.state.operation.value)
        self.refresh()

    def clear_all(self):
        self.state.clear()
        self.input_a.clear()
        self.input_b.clear()
        self.refresh()

    def refresh(self):
        """Sync the error label and result panel with the state."""
        self.error_label.setText(self.state.error or "")
        self.error_label.setVisible(self.state.error is not None)

        if self.state.has_result:
            result = self.state.result
            self.result_input.set_dimensions(*result.shape)
            self.result_input.set_matrix(result)
            self.result_viz.set_matrix(result)
            self.result_box.setVisible(True)
        else:
            self.result_viz.set_matrix(None)
            self.result_box.setVisible(False)

    # =========================
    # Theme
    # =========================
    def toggle_theme(self):
        self.theme = self.theme.toggled()
        self.theme_store.save(self.theme)
        self.apply_theme(self.theme)

    def apply_theme(self, theme: Theme):
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(build_stylesheet(theme))
        self.theme_btn.setText(theme.toggle_text)
        self.result_viz.set_palette_colors(theme.palette)
        self.theme_changed.emit(theme)
