from typing import Optional, Tuple

Shape = Tuple[int, int]


class MatrixError(Exception):
    """Base class for matrix solver errors."""


class DimensionMismatch(MatrixError):
    """Operand shapes are incompatible with the requested operation.

    Raised (or returned inside a ValidationResult) for user-correctable
    input; the message is meant to be shown as-is.
    """

    def __init__(self, operation, shape_a: Shape, shape_b: Shape, message: Optional[str] = None):
        self.operation = operation
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)
        self.message = message or (
            f"Matrix shapes {format_shape(self.shape_a)} and "
            f"{format_shape(self.shape_b)} are incompatible"
        )
        super().__init__(self.message)


class InvalidOperands(MatrixError, ValueError):
    """compute() was called with operands that are malformed or failed validation."""


def format_shape(shape: Shape) -> str:
    rows, cols = shape
    return f"{rows}×{cols}"
