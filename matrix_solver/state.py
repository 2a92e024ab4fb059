"""
Solver State (Data Model)
=========================
Everything the window shows lives here: both matrices, their dimensions,
the selected operation, and the last result or error. The widgets write to
this object and read back from it; the arithmetic core only ever receives
copies of its matrices.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

import numpy as np

from matrix_solver.config import Config
from matrix_solver.core.errors import InvalidOperands
from matrix_solver.core.matrix import compute, validate, zeros
from matrix_solver.core.operations import Operation
from matrix_solver.ui.formatting import parse_cell

logger = logging.getLogger(__name__)


def clamp_size(value: int) -> int:
    return max(Config.MIN_MATRIX_SIZE, min(Config.MAX_MATRIX_SIZE, int(value)))


def _default_matrix() -> np.ndarray:
    return zeros(Config.DEFAULT_MATRIX_SIZE, Config.DEFAULT_MATRIX_SIZE)


@dataclass
class SolverState:
    matrix_a: np.ndarray = field(default_factory=_default_matrix)
    matrix_b: np.ndarray = field(default_factory=_default_matrix)
    operation: Operation = Operation.ADD
    result: Optional[np.ndarray] = None
    error: Optional[str] = None

    @property
    def shape_a(self) -> Tuple[int, int]:
        rows, cols = self.matrix_a.shape
        return rows, cols

    @property
    def shape_b(self) -> Tuple[int, int]:
        rows, cols = self.matrix_b.shape
        return rows, cols

    @property
    def has_result(self) -> bool:
        return self.result is not None and self.result.size > 0

    def matrix(self, which: str) -> np.ndarray:
        if which == "A":
            return self.matrix_a
        if which == "B":
            return self.matrix_b
        raise ValueError(f"Unknown matrix: {which!r}")

    # ----- Dimensions -----
    # Any dimension change starts both matrices over from zeros
    def resize_a(self, rows: int, cols: int) -> None:
        self.matrix_a = zeros(clamp_size(rows), clamp_size(cols))
        self.clear()

    def resize_b(self, rows: int, cols: int) -> None:
        self.matrix_b = zeros(clamp_size(rows), clamp_size(cols))
        self.clear()

    # ----- Cells -----
    def set_cell(self, which: str, row: int, col: int, text) -> float:
        """Store the coerced value of `text`; returns the value stored."""
        value = parse_cell(text)
        updated = self.matrix(which).copy()
        updated[row, col] = value
        if which == "A":
            self.matrix_a = updated
        else:
            self.matrix_b = updated
        return value

    def set_matrix(self, which: str, values) -> None:
        """Replace a matrix with cell texts or numbers, keeping its shape."""
        current = self.matrix(which)
        updated = zeros(*current.shape)
        for i in range(current.shape[0]):
            for j in range(current.shape[1]):
                updated[i, j] = parse_cell(values[i][j])
        if which == "A":
            self.matrix_a = updated
        else:
            self.matrix_b = updated

    def set_operation(self, operation) -> None:
        self.operation = Operation.coerce(operation)

    # ----- Actions -----
    def calculate(self) -> bool:
        self.error = None
        check = validate(self.operation, self.shape_a, self.shape_b)
        if not check.ok:
            logger.info("Validation failed: %s", check.message)
            self.error = check.message
            return False

        try:
            self.result = compute(self.operation, self.matrix_a, self.matrix_b)
        except InvalidOperands:
            logger.exception("Calculation failed after validation")
            self.error = "An error occurred during calculation"
            return False
        return True

    def clear(self) -> None:
        self.matrix_a = zeros(*self.shape_a)
        self.matrix_b = zeros(*self.shape_b)
        self._invalidate()

    def _invalidate(self) -> None:
        self.result = None
        self.error = None
