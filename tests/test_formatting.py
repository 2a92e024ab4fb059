"""
Tests for cell parsing and result formatting.
"""

import numpy as np
import pytest

from matrix_solver.ui.formatting import format_matrix, format_number, parse_cell


class TestParseCell:
    @pytest.mark.parametrize("text, expected", [
        ("3", 3.0),
        ("-2.5", -2.5),
        (" 4 ", 4.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("3.5abc", 3.5),
        ("+7", 7.0),
    ])
    def test_numbers(self, text, expected):
        assert parse_cell(text) == expected

    @pytest.mark.parametrize("text", ["", "abc", "-", ".", None, "nan", "1e999"])
    def test_fallback_to_zero(self, text):
        assert parse_cell(text) == 0.0

    def test_accepts_numbers(self):
        assert parse_cell(2) == 2.0


class TestFormatNumber:
    def test_two_decimals(self):
        assert format_number(1) == "1.00"
        assert format_number(2.346) == "2.35"
        assert format_number(-19.5) == "-19.50"

    def test_negative_zero(self):
        assert format_number(-0.001) == "0.00"
        assert format_number(-0.0) == "0.00"

    def test_custom_decimals(self):
        assert format_number(1 / 3, decimals=4) == "0.3333"

    def test_format_matrix(self):
        assert format_matrix(np.array([[19.0, 22.0], [43.0, 50.0]])) == [
            ["19.00", "22.00"],
            ["43.00", "50.00"],
        ]
