"""
Analytical Cycle Rules
======================

Ordered base-cost rules used by the analytical cost model. The engine in
`m68k_timing.oracles.rules` picks the FIRST rule whose source and
destination classes match a candidate, then adds the effective address
times of the operands:

    cycles = rule.cycles_for(size)
           + source.base_extra_cycles + destination.base_extra_cycles
           + 4 for each MEMORY operand when the size is long

Immediate operands add their own extension-word time but never the long
penalty, so long immediates are folded into the rule's long base cost.

Every table ends with an (ANY, ANY) catch-all. InstructionDef refuses a
table without one, so a legal but unforeseen operand pairing can never
reach the engine unmatched.

Reference
---------
- M68000 User's Manual, section 8 (Instruction Execution Times)
"""

from dataclasses import dataclass

from m68k_timing.cpu.m68000 import AddressingClass, OperandSize

ANY = AddressingClass.ANY
DATA = AddressingClass.DATA_REGISTER
ADDR = AddressingClass.ADDRESS_REGISTER
MEM = AddressingClass.MEMORY
IMM = AddressingClass.IMMEDIATE


@dataclass(frozen=True)
class CycleRule:
    """
    One base-cost rule.

    Attributes:
        source_class: Class the source operand must have (or ANY)
        dest_class: Class the destination operand must have (or ANY)
        word_cycles: Base cost of the word form
        long_cycles: Base cost of the long form
    """
    source_class: AddressingClass
    dest_class: AddressingClass
    word_cycles: int
    long_cycles: int

    def cycles_for(self, size: OperandSize) -> int:
        return self.long_cycles if size is OperandSize.LONG else self.word_cycles

    def matches(self, source, destination) -> bool:
        """
        Check the rule against the classes of a candidate's operands.

        A missing operand (None) only matches the ANY wildcard.
        """
        return (_class_matches(self.source_class, source)
                and _class_matches(self.dest_class, destination))

    @property
    def is_catch_all(self) -> bool:
        return self.source_class is ANY and self.dest_class is ANY


def _class_matches(pattern: AddressingClass, actual) -> bool:
    if actual is None:
        return pattern is ANY
    return pattern.matches(actual)


def _rules(*entries: tuple) -> tuple[CycleRule, ...]:
    return tuple(CycleRule(*entry) for entry in entries)


# =============================================================================
# Two-Operand Instructions
# =============================================================================

ADD_SUB_RULES = _rules(
    (IMM, DATA, 4, 12),
    (IMM, MEM, 8, 8),
    (DATA, DATA, 4, 8),
    (ADDR, DATA, 4, 8),
    (DATA, MEM, 8, 12),
    (ANY, ADDR, 8, 8),
    (ANY, DATA, 4, 6),
    (ANY, ANY, 8, 12),
)

ADDQ_SUBQ_RULES = _rules(
    (IMM, DATA, 0, 4),
    (IMM, ADDR, 4, 4),
    (IMM, MEM, 4, 8),
    (ANY, ANY, 4, 8),
)

ADDX_SUBX_RULES = _rules(
    (DATA, DATA, 4, 8),
    (MEM, MEM, 6, 10),
    (ANY, ANY, 4, 8),
)

ABCD_RULES = _rules(
    (DATA, DATA, 6, 6),
    (MEM, MEM, 6, 6),
    (ANY, ANY, 6, 6),
)

AND_OR_RULES = _rules(
    (IMM, DATA, 4, 12),
    (IMM, MEM, 8, 16),
    (DATA, DATA, 4, 8),
    (DATA, MEM, 8, 12),
    (ANY, DATA, 4, 6),
    (ANY, ANY, 8, 12),
)

EOR_RULES = _rules(
    (IMM, DATA, 4, 12),
    (IMM, MEM, 8, 16),
    (DATA, DATA, 4, 8),
    (DATA, MEM, 8, 12),
    (ANY, ANY, 8, 12),
)

CMP_RULES = _rules(
    (IMM, DATA, 4, 10),
    (IMM, MEM, 4, 8),
    (MEM, MEM, 4, 4),
    (ANY, ADDR, 6, 6),
    (ANY, DATA, 4, 6),
    (ANY, ANY, 4, 6),
)

MOVE_RULES = _rules(
    (IMM, ANY, 4, 8),
    (ANY, ANY, 4, 4),
)

BTST_RULES = _rules(
    (IMM, DATA, 6, 6),
    (IMM, MEM, 4, 4),
    (DATA, DATA, 6, 6),
    (DATA, MEM, 4, 4),
    (ANY, ANY, 4, 4),
)

BCHG_BSET_RULES = _rules(
    (IMM, DATA, 8, 8),
    (IMM, MEM, 8, 8),
    (DATA, DATA, 8, 8),
    (DATA, MEM, 8, 8),
    (ANY, ANY, 8, 8),
)

BCLR_RULES = _rules(
    (IMM, DATA, 10, 10),
    (IMM, MEM, 8, 8),
    (DATA, DATA, 10, 10),
    (DATA, MEM, 8, 8),
    (ANY, ANY, 8, 8),
)

# Worst-case times; the real cost depends on the operand values
MULU_MULS_RULES = _rules((ANY, ANY, 70, 70))
DIVU_RULES = _rules((ANY, ANY, 140, 140))
DIVS_RULES = _rules((ANY, ANY, 158, 158))

EXG_RULES = _rules((ANY, ANY, 6, 6))


# =============================================================================
# Single-Operand Instructions
# =============================================================================
# The single operand is the destination; the source side only matches ANY.
# =============================================================================

CLR_NEG_NOT_RULES = _rules(
    (ANY, DATA, 4, 6),
    (ANY, MEM, 8, 12),
    (ANY, ANY, 4, 6),
)

TST_RULES = _rules(
    (ANY, MEM, 4, 4),
    (ANY, ANY, 4, 4),
)

SCC_RULES = _rules(
    (ANY, DATA, 6, 6),
    (ANY, MEM, 8, 8),
    (ANY, ANY, 6, 6),
)

REGISTER_ONLY_RULES = _rules((ANY, ANY, 4, 4))


# =============================================================================
# No-Operand Instructions
# =============================================================================

NOP_RULES = _rules((ANY, ANY, 4, 4))
RTS_RULES = _rules((ANY, ANY, 16, 16))
RTE_RULES = _rules((ANY, ANY, 20, 20))
ILLEGAL_RULES = _rules((ANY, ANY, 34, 34))
