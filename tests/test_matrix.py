"""
Matrix Reconciliation Tests
===========================

Tests for scattering cycle counts back onto the candidate grid.
"""

import dataclasses

import pytest

from m68k_timing.cpu.m68000 import OperandSize
from m68k_timing.errors import ReconcileError
from m68k_timing.generator import generate_candidates, grid_shape
from m68k_timing.isa.registry import find_instruction
from m68k_timing.matrix import ResultMatrix, reconcile
from m68k_timing.oracles.base import Accepted, Rejected

A = Accepted(b"\x4e\x71")
R = Rejected()


@pytest.fixture
def clr_candidates():
    return generate_candidates(find_instruction("clr"), OperandSize.WORD)


class TestResultMatrix:
    """Tests for the ResultMatrix container."""

    def test_size_checked(self):
        with pytest.raises(ValueError):
            ResultMatrix(rows=2, columns=2, cells=(1, 2, 3))

    def test_rows(self):
        matrix = ResultMatrix(rows=2, columns=3, cells=(1, None, 3, None, None, None))
        assert matrix.row(0) == (1, None, 3)
        assert matrix.cell(0, 2) == 3
        assert list(matrix.iter_rows()) == [(1, None, 3), (None, None, None)]
        assert not matrix.row_is_empty(0)
        assert matrix.row_is_empty(1)
        assert matrix.accepted_count == 2
        assert not matrix.is_empty

    def test_empty(self):
        assert ResultMatrix(rows=1, columns=2, cells=(None, None)).is_empty


class TestReconcile:
    """Tests for reconcile()."""

    def test_scatter_by_linear_index(self, clr_candidates):
        outcomes = [R, A, R, R, A, A, R, R, R]
        matrix = reconcile(clr_candidates, outcomes, [8, 12, 14], 1, 9)

        assert matrix.cells == (None, 8, None, None, 12, 14, None, None, None)

    def test_rejected_cells_are_holes(self, clr_candidates):
        matrix = reconcile(clr_candidates, [R] * 9, [], 1, 9)
        assert matrix.is_empty
        assert len(matrix) == 9

    def test_idempotent(self, clr_candidates):
        outcomes = [A, R] * 4 + [A]
        cycles = [4, 12, 14, 18, 20]
        first = reconcile(clr_candidates, outcomes, cycles, 1, 9)
        second = reconcile(clr_candidates, outcomes, cycles, 1, 9)
        assert first == second

    def test_outcome_count_mismatch(self, clr_candidates):
        with pytest.raises(ReconcileError, match="legality results"):
            reconcile(clr_candidates, [A] * 8, [4] * 8, 1, 9)

    def test_cycle_count_mismatch(self, clr_candidates):
        with pytest.raises(ReconcileError, match="cycle counts"):
            reconcile(clr_candidates, [A] * 9, [4] * 8, 1, 9)

    def test_index_out_of_range(self, clr_candidates):
        broken = list(clr_candidates)
        broken[0] = dataclasses.replace(broken[0], linear_index=42)

        with pytest.raises(ReconcileError) as exc_info:
            reconcile(broken, [A] + [R] * 8, [4], 1, 9)
        assert exc_info.value.index == 42

    def test_two_operand_grid(self):
        add = find_instruction("add")
        candidates = generate_candidates(add, OperandSize.WORD)
        rows, columns = grid_shape(add)

        # Only #xxx (last source) to Dn (first destination) is accepted
        outcomes = [R] * len(candidates)
        outcomes[11 * 9] = A
        matrix = reconcile(candidates, outcomes, [8], rows, columns)

        assert matrix.cell(11, 0) == 8
        assert matrix.accepted_count == 1
        assert all(matrix.row_is_empty(r) for r in range(11))
