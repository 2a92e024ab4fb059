"""Conversions between cell text and matrix values."""
import math
import re
from typing import List

import numpy as np

from matrix_solver.config import Config

# Longest numeric prefix, e.g. "3.5abc" -> "3.5", "-2e3x" -> "-2e3"
_LEADING_FLOAT = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_cell(text) -> float:
    """Read a cell's text as a float; empty or non-numeric text becomes 0."""
    if text is None:
        return 0.0
    match = _LEADING_FLOAT.match(str(text))
    if not match:
        return 0.0
    value = float(match.group(0))
    if not math.isfinite(value):
        return 0.0
    return value


def format_number(value: float, decimals: int = Config.DECIMALS) -> str:
    text = f"{float(value):.{decimals}f}"
    # Avoid "-0.00" for tiny negative results
    if float(text) == 0.0:
        text = f"{0.0:.{decimals}f}"
    return text


def format_matrix(matrix: np.ndarray, decimals: int = Config.DECIMALS) -> List[List[str]]:
    return [[format_number(value, decimals) for value in row] for row in matrix]
