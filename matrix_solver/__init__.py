"""Matrix Solver: validate and compute small matrix operations."""
from matrix_solver.core.errors import DimensionMismatch, InvalidOperands, MatrixError
from matrix_solver.core.matrix import compute, validate, ValidationResult
from matrix_solver.core.operations import Operation

__version__ = "1.0.0"

__all__ = [
    "Operation",
    "ValidationResult",
    "validate",
    "compute",
    "MatrixError",
    "DimensionMismatch",
    "InvalidOperands",
]
