from enum import Enum
from typing import Union


class Operation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    SCALAR = "scalar"

    @classmethod
    def coerce(cls, value: Union["Operation", str]) -> "Operation":
        """Accept an Operation or its string value ("add", "multiply", ...)"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown operation: {value!r}") from None

    @property
    def label(self) -> str:
        labels = {
            Operation.ADD: "Addition (A + B)",
            Operation.SUBTRACT: "Subtraction (A - B)",
            Operation.MULTIPLY: "Multiplication (A × B)",
            Operation.SCALAR: "Scalar Multiplication (A × scalar)",
        }
        return labels[self]

    @property
    def title(self) -> str:
        titles = {
            Operation.ADD: "Matrix Addition",
            Operation.SUBTRACT: "Matrix Subtraction",
            Operation.MULTIPLY: "Matrix Multiplication",
            Operation.SCALAR: "Scalar Multiplication",
        }
        return titles[self]

    @property
    def symbol(self) -> str:
        symbols = {
            Operation.ADD: "+",
            Operation.SUBTRACT: "−",
            Operation.MULTIPLY: "×",
            Operation.SCALAR: "× k",
        }
        return symbols[self]
