"""
Result Matrix Reconciliation
============================

Scatters oracle results back onto the dense candidate grid.

The cost model only sees accepted candidates, so its cycle list is shorter
than the candidate list and is indexed over accepted candidates alone, in
their original relative order. Reconciliation walks the candidates in
order, consumes one cycle count per accepted candidate and stores it at
that candidate's saved linear index. Rejected candidates leave a hole
(None).

Example (3x3 grid, candidates 1, 4 and 5 accepted):

    outcomes: [R, A, R, R, A, A, R, R, R]
    cycles:   [8, 12, 14]
    cells:    [None, 8, None, None, 12, 14, None, None, None]
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from m68k_timing.errors import ReconcileError
from m68k_timing.generator import CandidateStatement
from m68k_timing.oracles.base import OracleResult

Cell = Optional[int]


@dataclass(frozen=True)
class ResultMatrix:
    """
    Dense grid of cycle counts with None at every rejected position.

    Invariant: len(cells) == rows * columns, and cell(i, j) is always the
    pairing (source[i], destination[j]) whatever the rejection pattern.
    """
    rows: int
    columns: int
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != self.rows * self.columns:
            raise ValueError(
                f"matrix of {self.rows}x{self.columns} needs "
                f"{self.rows * self.columns} cells, got {len(self.cells)}"
            )

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def cell(self, row: int, column: int) -> Cell:
        return self.cells[row * self.columns + column]

    def row(self, row: int) -> tuple[Cell, ...]:
        start = row * self.columns
        return self.cells[start:start + self.columns]

    def iter_rows(self) -> Iterator[tuple[Cell, ...]]:
        for r in range(self.rows):
            yield self.row(r)

    def row_is_empty(self, row: int) -> bool:
        return all(c is None for c in self.row(row))

    @property
    def is_empty(self) -> bool:
        """True when every candidate was rejected."""
        return all(c is None for c in self.cells)

    @property
    def accepted_count(self) -> int:
        return sum(1 for c in self.cells if c is not None)


def reconcile(
    candidates: Sequence[CandidateStatement],
    outcomes: Sequence[OracleResult],
    cycles: Sequence[int],
    rows: int,
    columns: int,
) -> ResultMatrix:
    """
    Build the result matrix for one batch.

    Args:
        candidates: Generated candidates, in generation order
        outcomes: One legality result per candidate, same order
        cycles: One count per accepted candidate, in candidate order
        rows: Grid rows
        columns: Grid columns

    Returns:
        ResultMatrix with counts at accepted indices and None elsewhere

    Raises:
        ReconcileError: If the three inputs do not line up
    """
    if len(outcomes) != len(candidates):
        raise ReconcileError(
            f"{len(outcomes)} legality results for {len(candidates)} candidates"
        )

    accepted = sum(1 for outcome in outcomes if outcome.accepted)
    if len(cycles) != accepted:
        raise ReconcileError(
            f"{len(cycles)} cycle counts for {accepted} accepted candidates"
        )

    cells: list[Cell] = [None] * (rows * columns)
    pending = iter(cycles)

    for candidate, outcome in zip(candidates, outcomes):
        if not outcome.accepted:
            continue
        if not 0 <= candidate.linear_index < len(cells):
            raise ReconcileError(
                f"linear index outside the {rows}x{columns} grid",
                index=candidate.linear_index,
            )
        cells[candidate.linear_index] = next(pending)

    return ResultMatrix(rows=rows, columns=columns, cells=tuple(cells))
