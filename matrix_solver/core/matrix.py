import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Union

import numpy as np

from matrix_solver.core.errors import DimensionMismatch, InvalidOperands, Shape, format_shape
from matrix_solver.core.operations import Operation

logger = logging.getLogger(__name__)

MatrixLike = Union[np.ndarray, Sequence[Sequence[float]]]


# ===== HELPERS =====
def as_matrix(values: MatrixLike, name: str = "matrix") -> np.ndarray:
    """Copy `values` into a new 2-D float64 array, rejecting malformed input."""
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise InvalidOperands(f"{name} is not a rectangular numeric matrix: {e}") from e

    # Text cells are the caller's job to parse; only numbers get through
    if raw.size and raw.dtype.kind not in "iufb":
        raise InvalidOperands(f"{name} must contain numbers, got {raw.dtype} cells")
    matrix = np.array(raw, dtype=np.float64)

    if matrix.ndim != 2:
        raise InvalidOperands(f"{name} must be 2-dimensional, got {matrix.ndim} dimension(s)")
    if matrix.shape[0] < 1 or matrix.shape[1] < 1:
        raise InvalidOperands(f"{name} must have at least one row and one column")
    return matrix


def shape_of(matrix: MatrixLike) -> Shape:
    rows, cols = as_matrix(matrix).shape
    return rows, cols


def zeros(rows: int, cols: int) -> np.ndarray:
    return np.zeros((rows, cols), dtype=np.float64)


def scalar_of(b) -> float:
    """The (0, 0) cell of B, or 0.0 when B has no such cell."""
    try:
        value = b[0][0]
    except (IndexError, TypeError, KeyError):
        return 0.0
    if value is None:
        return 0.0
    if isinstance(value, (str, bytes)):
        raise InvalidOperands(f"scalar cell B[0][0] is not numeric: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidOperands(f"scalar cell B[0][0] is not numeric: {value!r}") from e


# ===== VALIDATION =====
@dataclass(frozen=True)
class ValidationResult:
    error: Optional[DimensionMismatch] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error

    def __bool__(self) -> bool:
        return self.ok


def _as_shape(shape: Sequence[int]) -> Shape:
    rows, cols = shape
    return int(rows), int(cols)


def validate(operation: Union[Operation, str], shape_a: Sequence[int], shape_b: Sequence[int]) -> ValidationResult:
    """Check that shapes (rows, cols) of A and B are compatible with `operation`.

    Pure function: nothing is raised for incompatible shapes, the
    DimensionMismatch is returned inside the result instead.
    """
    op = Operation.coerce(operation)
    rows_a, cols_a = _as_shape(shape_a)
    rows_b, cols_b = _as_shape(shape_b)

    if op in (Operation.ADD, Operation.SUBTRACT):
        if rows_a != rows_b or cols_a != cols_b:
            message = (
                "For addition and subtraction, both matrices must have the same dimensions "
                f"(A is {format_shape((rows_a, cols_a))}, B is {format_shape((rows_b, cols_b))})"
            )
            return ValidationResult(DimensionMismatch(op, (rows_a, cols_a), (rows_b, cols_b), message))

    elif op is Operation.MULTIPLY:
        if cols_a != rows_b:
            message = (
                f"For multiplication, columns of A ({cols_a}) "
                f"must equal rows of B ({rows_b})"
            )
            return ValidationResult(DimensionMismatch(op, (rows_a, cols_a), (rows_b, cols_b), message))

    # Operation.SCALAR only reads B[0][0]; any shape is accepted
    return ValidationResult()


def _require_valid(op: Operation, a: np.ndarray, b: np.ndarray) -> None:
    result = validate(op, a.shape, b.shape)
    if not result.ok:
        raise InvalidOperands(
            f"Invalid operands for {op.value}: {result.message}"
        ) from result.error


# ===== ARITHMETIC =====
def add(a: MatrixLike, b: MatrixLike) -> np.ndarray:
    A, B = as_matrix(a, "A"), as_matrix(b, "B")
    _require_valid(Operation.ADD, A, B)
    return A + B


def subtract(a: MatrixLike, b: MatrixLike) -> np.ndarray:
    A, B = as_matrix(a, "A"), as_matrix(b, "B")
    _require_valid(Operation.SUBTRACT, A, B)
    return A - B


def multiply(a: MatrixLike, b: MatrixLike) -> np.ndarray:
    """Row-by-column product, accumulated with k innermost for a fixed evaluation order."""
    A, B = as_matrix(a, "A"), as_matrix(b, "B")
    _require_valid(Operation.MULTIPLY, A, B)

    rows_a, cols_a = A.shape
    cols_b = B.shape[1]
    result = zeros(rows_a, cols_b)
    for i in range(rows_a):
        for j in range(cols_b):
            total = 0.0
            for k in range(cols_a):
                total += A[i, k] * B[k, j]
            result[i, j] = total
    return result


def scalar_multiply(a: MatrixLike, b) -> np.ndarray:
    A = as_matrix(a, "A")
    return A * scalar_of(b)


_OPERATIONS: Dict[Operation, Callable[..., np.ndarray]] = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
    Operation.SCALAR: scalar_multiply,
}


def compute(operation: Union[Operation, str], a: MatrixLike, b: MatrixLike) -> np.ndarray:
    """Apply `operation` to A and B and return a new matrix.

    Callers must run `validate` first; incompatible or malformed operands
    raise InvalidOperands rather than producing a partial result.
    """
    op = Operation.coerce(operation)
    result = _OPERATIONS[op](a, b)
    logger.debug("Computed %s -> %s result", op.value, format_shape(result.shape))
    return result
