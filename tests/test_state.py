"""
Tests for SolverState, the caller-held presentation state.
"""

import numpy as np
import pytest

from matrix_solver.config import Config
from matrix_solver.core.operations import Operation
from matrix_solver.state import SolverState, clamp_size


def filled(state, which, rows):
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            state.set_cell(which, i, j, str(value))


class TestDefaults:
    def test_initial_state(self):
        state = SolverState()
        size = Config.DEFAULT_MATRIX_SIZE
        assert state.shape_a == (size, size)
        assert state.shape_b == (size, size)
        assert state.operation is Operation.ADD
        assert not state.has_result
        assert state.error is None
        assert not state.matrix_a.any()

    def test_instances_do_not_share_matrices(self):
        first, second = SolverState(), SolverState()
        first.set_cell("A", 0, 0, "5")
        assert second.matrix_a[0, 0] == 0.0


class TestCells:
    def test_set_cell_coerces(self):
        state = SolverState()
        assert state.set_cell("A", 0, 1, "2.5") == 2.5
        assert state.set_cell("B", 1, 0, "oops") == 0.0
        assert state.set_cell("B", 1, 1, "") == 0.0
        assert state.matrix_a[0, 1] == 2.5

    def test_set_cell_replaces_matrix(self):
        state = SolverState()
        before = state.matrix_a
        state.set_cell("A", 0, 0, "1")
        assert state.matrix_a is not before
        assert before[0, 0] == 0.0

    def test_set_matrix(self):
        state = SolverState()
        state.set_matrix("B", [["1", "x"], [3, "4.5"]])
        np.testing.assert_array_equal(state.matrix_b, [[1, 0], [3, 4.5]])

    def test_unknown_matrix(self):
        with pytest.raises(ValueError):
            SolverState().set_cell("C", 0, 0, "1")


class TestDimensions:
    def test_resize_reinitialises(self):
        state = SolverState()
        filled(state, "A", [[1, 2], [3, 4]])
        state.resize_a(3, 1)
        assert state.shape_a == (3, 1)
        assert not state.matrix_a.any()

    def test_resize_resets_the_other_matrix_too(self):
        state = SolverState()
        state.set_cell("B", 0, 0, "7")
        state.resize_a(2, 3)
        assert state.shape_b == (2, 2)
        assert not state.matrix_b.any()

        state.set_cell("A", 1, 2, "4")
        state.resize_b(3, 3)
        assert state.shape_a == (2, 3)
        assert not state.matrix_a.any()

    def test_resize_clears_result(self):
        state = SolverState()
        state.calculate()
        assert state.has_result
        state.resize_b(2, 3)
        assert not state.has_result

    @pytest.mark.parametrize("value, expected", [(0, 1), (1, 1), (5, 5), (9, 5), (-3, 1)])
    def test_clamp(self, value, expected):
        assert clamp_size(value) == expected


class TestCalculate:
    def test_example_multiply(self):
        state = SolverState()
        filled(state, "A", [[1, 2], [3, 4]])
        filled(state, "B", [[5, 6], [7, 8]])
        state.set_operation("multiply")
        assert state.calculate()
        np.testing.assert_array_equal(state.result, [[19, 22], [43, 50]])
        assert state.error is None

    def test_scalar_with_unset_cell(self):
        state = SolverState()
        filled(state, "A", [[1, 2], [3, 4]])
        state.set_operation(Operation.SCALAR)
        assert state.calculate()
        assert not state.result.any()

    def test_mismatch_sets_error(self):
        state = SolverState()
        state.resize_b(3, 2)
        state.set_operation(Operation.MULTIPLY)
        assert not state.calculate()
        assert state.error == "For multiplication, columns of A (2) must equal rows of B (3)"
        assert state.shape_b == (3, 2)

    def test_error_cleared_on_success(self):
        state = SolverState()
        state.resize_b(3, 3)
        assert not state.calculate()
        state.resize_b(2, 2)
        state.set_operation(Operation.SUBTRACT)
        assert state.calculate()
        assert state.error is None

    def test_failed_calculate_keeps_previous_result(self):
        state = SolverState()
        filled(state, "A", [[1, 1], [1, 1]])
        assert state.calculate()
        previous = state.result
        state.set_operation(Operation.MULTIPLY)
        state.matrix_b = np.zeros((3, 2))
        assert not state.calculate()
        assert state.result is previous


class TestClear:
    def test_clear_keeps_dimensions(self):
        state = SolverState()
        state.resize_a(3, 4)
        filled(state, "A", [[1, 2, 3, 4]])
        state.calculate()
        state.clear()
        assert state.shape_a == (3, 4)
        assert not state.matrix_a.any()
        assert not state.has_result
        assert state.error is None
