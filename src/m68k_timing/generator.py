"""
Candidate Statement Generator
=============================

Builds the ordered list of candidate statements for one instruction and
operand size: the Cartesian product of the instruction's operand catalogs.

Ordering
--------
For a two-operand instruction with a source catalog of I entries and a
destination catalog of J entries, the outer loop runs over the source and
the inner loop over the destination. Candidate (i, j) gets

    linear_index = i * J + j

which is also its cell index in the result grid. One-operand instructions
loop over their single catalog, and no-operand instructions produce exactly
one candidate with index 0.

No legality checking happens here. Illegal pairings are generated on
purpose; the assembler rejects them later.
"""

import itertools
from dataclasses import dataclass
from typing import Optional

from m68k_timing.cpu.m68000 import OperandSize, OperandSpec
from m68k_timing.isa.registry import InstructionDef


@dataclass(frozen=True)
class CandidateStatement:
    """
    One (instruction, operands, size) combination awaiting evaluation.

    Attributes:
        instruction: Registry entry the candidate belongs to
        size: Operand size variant
        operands: Operand assignment, source first
        linear_index: Position in the dense result grid
        text: Statement text handed to the assembler
    """
    instruction: InstructionDef
    size: OperandSize
    operands: tuple[OperandSpec, ...]
    linear_index: int
    text: str

    @property
    def source(self) -> Optional[OperandSpec]:
        """Source operand; only two-operand candidates have one."""
        return self.operands[0] if len(self.operands) == 2 else None

    @property
    def destination(self) -> Optional[OperandSpec]:
        """Destination operand (the only operand of a one-operand candidate)."""
        return self.operands[-1] if self.operands else None


def format_statement(mnemonic: str, size: OperandSize, operands: tuple[OperandSpec, ...]) -> str:
    """
    Build assembler source text for a statement.

    Example:
        >>> format_statement("add", OperandSize.LONG, (DN, AN))
        'add.l d0,a0'
    """
    text = f"{mnemonic}{size.suffix}"
    if operands:
        text += " " + ",".join(op.source_text for op in operands)
    return text


def generate_candidates(instruction: InstructionDef, size: OperandSize) -> list[CandidateStatement]:
    """
    Generate every candidate statement for an instruction and size.

    Args:
        instruction: Registry entry to expand
        size: Operand size variant

    Returns:
        Candidates ordered by linear index (source-major)
    """
    catalogs = [catalog.operands for catalog in instruction.operand_catalogs]

    # product() of zero catalogs yields one empty tuple: the no-operand candidate
    return [
        CandidateStatement(
            instruction=instruction,
            size=size,
            operands=operands,
            linear_index=index,
            text=format_statement(instruction.mnemonic, size, operands),
        )
        for index, operands in enumerate(itertools.product(*catalogs))
    ]


def grid_shape(instruction: InstructionDef) -> tuple[int, int]:
    """
    Return (rows, columns) of an instruction's result grid.

    Two operands: (sources, destinations). One operand: (1, operands).
    No operands: (1, 1).
    """
    sizes = [len(catalog) for catalog in instruction.operand_catalogs]
    if len(sizes) == 2:
        return sizes[0], sizes[1]
    if len(sizes) == 1:
        return 1, sizes[0]
    return 1, 1
