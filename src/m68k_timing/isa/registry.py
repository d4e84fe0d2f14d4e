"""
M68000 Instruction Registry
===========================

The master list of instructions the timing report covers, in report order.

Each entry names the operand catalogs its candidates are drawn from and
where its timings come from:

- **Measured**: candidates are generated, checked by the assembler and
  costed by the configured cost model (cycle-accurate core or cycle rules).
- **Documented**: timings are printed from pre-written tables. Nothing is
  generated, assembled or measured.

The registry is built once at import time and validated immediately, so an
authoring mistake (duplicate mnemonic, wrong catalog count, rule table
without catch-all) stops the program before any external tool runs.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from m68k_timing.cpu.m68000 import (
    DESTINATION_OPERANDS,
    SOURCE_OPERANDS,
    OperandCatalog,
    OperandSize,
)
from m68k_timing.errors import RegistryError
from m68k_timing.isa import cycle_rules as rules
from m68k_timing.isa import descriptions as desc
from m68k_timing.isa import tables
from m68k_timing.isa.cycle_rules import CycleRule
from m68k_timing.isa.descriptions import Description
from m68k_timing.isa.tables import DocumentedTable, ReferenceTable


# =============================================================================
# Timing Sources
# =============================================================================

@dataclass(frozen=True)
class Measured:
    """Timings come from the run's cost model."""


@dataclass(frozen=True)
class Documented:
    """
    Timings come from pre-written tables.

    Attributes:
        word: Table printed under the plain mnemonic
        long: Table printed under "<mnemonic>.l" (optional)
    """
    word: DocumentedTable
    long: Optional[DocumentedTable] = None

    def tables(self) -> list[tuple[OperandSize, DocumentedTable]]:
        result = [(OperandSize.WORD, self.word)]
        if self.long is not None:
            result.append((OperandSize.LONG, self.long))
        return result


TimingSource = Union[Measured, Documented]

MEASURED = Measured()

BOTH_SIZES = (OperandSize.WORD, OperandSize.LONG)
UNSIZED = (OperandSize.WORD,)


# =============================================================================
# Instruction Definition
# =============================================================================

@dataclass(frozen=True)
class InstructionDef:
    """
    Immutable definition of one instruction.

    Attributes:
        mnemonic: Lower-case mnemonic as written to the assembler
        operand_catalogs: One catalog per operand, source first
        timing_source: Measured or Documented
        sizes: Size variants generated for measured instructions
        description: Reference text (optional)
        cc_table: Condition code reference table (optional)
        cycle_rules: Ordered rules for the analytical cost model
    """
    mnemonic: str
    operand_catalogs: tuple[OperandCatalog, ...] = ()
    timing_source: TimingSource = MEASURED
    sizes: tuple[OperandSize, ...] = BOTH_SIZES
    description: Optional[Description] = None
    cc_table: Optional[ReferenceTable] = None
    cycle_rules: tuple[CycleRule, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.mnemonic or self.mnemonic != self.mnemonic.lower():
            raise RegistryError("mnemonic must be non-empty lower case", self.mnemonic)
        if self.arity > 2:
            raise RegistryError(f"arity {self.arity} not supported", self.mnemonic)
        if not self.sizes:
            raise RegistryError("at least one operand size required", self.mnemonic)
        if self.is_measured:
            if not self.cycle_rules:
                raise RegistryError("measured instruction needs cycle rules", self.mnemonic)
            if not self.cycle_rules[-1].is_catch_all:
                raise RegistryError(
                    "cycle rule table must end with an (ANY, ANY) catch-all",
                    self.mnemonic,
                )

    @property
    def arity(self) -> int:
        return len(self.operand_catalogs)

    @property
    def is_measured(self) -> bool:
        return isinstance(self.timing_source, Measured)

    @property
    def is_documented(self) -> bool:
        return isinstance(self.timing_source, Documented)

    def table_name(self, size: OperandSize) -> str:
        """Name printed in a timing table's corner cell, e.g. "add.l"."""
        return f"{self.mnemonic}{size.suffix}"


def validate_registry(instructions: tuple[InstructionDef, ...]) -> None:
    """
    Check registry-wide invariants.

    Raises:
        RegistryError: On duplicate mnemonics
    """
    seen: set[str] = set()
    for inst in instructions:
        if inst.mnemonic in seen:
            raise RegistryError("duplicate registry entry", inst.mnemonic)
        seen.add(inst.mnemonic)


# =============================================================================
# Registry
# =============================================================================

TWO_OPS = (SOURCE_OPERANDS, DESTINATION_OPERANDS)
ONE_OP = (DESTINATION_OPERANDS,)

_SHIFTS = Documented(word=tables.SHIFT_WORD, long=tables.SHIFT_LONG)


def _two(mnemonic, description, rule_table, sizes=BOTH_SIZES):
    return InstructionDef(mnemonic, TWO_OPS, description=description,
                          cycle_rules=rule_table, sizes=sizes)


def _one(mnemonic, description, rule_table, sizes=BOTH_SIZES, cc_table=None):
    return InstructionDef(mnemonic, ONE_OP, description=description,
                          cycle_rules=rule_table, sizes=sizes, cc_table=cc_table)


def _none(mnemonic, description, rule_table):
    return InstructionDef(mnemonic, (), description=description,
                          cycle_rules=rule_table, sizes=UNSIZED)


def _documented(mnemonic, description, source, catalogs=(), cc_table=None):
    return InstructionDef(mnemonic, catalogs, timing_source=source,
                          description=description, cc_table=cc_table, sizes=UNSIZED)


INSTRUCTIONS: tuple[InstructionDef, ...] = (
    _two("abcd", desc.ABCD_DESC, rules.ABCD_RULES, sizes=UNSIZED),
    _two("add", desc.ADD_DESC, rules.ADD_SUB_RULES),
    _two("addq", desc.ADDQ_DESC, rules.ADDQ_SUBQ_RULES),
    _two("addx", desc.ADDX_DESC, rules.ADDX_SUBX_RULES),
    _two("and", desc.AND_DESC, rules.AND_OR_RULES),
    _documented("asl", desc.ASL_ASR_DESC, _SHIFTS, TWO_OPS),
    _documented("asr", desc.ASL_ASR_DESC, _SHIFTS, TWO_OPS),
    _documented("bcc", desc.BCC_DESC, Documented(tables.BCC_TIMES),
                cc_table=tables.CONDITION_CODES),
    _two("bchg", desc.BCHG_DESC, rules.BCHG_BSET_RULES),
    _two("bclr", desc.BCLR_DESC, rules.BCLR_RULES),
    _two("bset", desc.BSET_DESC, rules.BCHG_BSET_RULES),
    _documented("bsr", desc.BSR_DESC, Documented(tables.BSR_TIMES)),
    _two("btst", desc.BTST_DESC, rules.BTST_RULES),
    _documented("dbcc", desc.DBCC_DESC, Documented(tables.DBCC_TIMES),
                cc_table=tables.CONDITION_CODES),
    _one("clr", desc.CLR_DESC, rules.CLR_NEG_NOT_RULES),
    _two("cmp", desc.CMP_DESC, rules.CMP_RULES),
    _two("divu", desc.DIVS_DIVU_DESC, rules.DIVU_RULES, sizes=UNSIZED),
    _two("divs", desc.DIVS_DIVU_DESC, rules.DIVS_RULES, sizes=UNSIZED),
    _two("eor", desc.EOR_DESC, rules.EOR_RULES),
    _two("exg", desc.EXG_DESC, rules.EXG_RULES, sizes=UNSIZED),
    _one("ext", desc.EXT_DESC, rules.REGISTER_ONLY_RULES),
    _none("illegal", desc.ILLEGAL_DESC, rules.ILLEGAL_RULES),
    _documented("jmp", desc.JMP_DESC, Documented(tables.JMP_TIMES), ONE_OP),
    _documented("jsr", desc.JSR_DESC, Documented(tables.JSR_TIMES), ONE_OP),
    _documented("lea", desc.LEA_DESC, Documented(tables.LEA_TIMES), TWO_OPS),
    _documented("lsl", desc.LSL_LSR_DESC, _SHIFTS, TWO_OPS),
    _documented("lsr", desc.LSL_LSR_DESC, _SHIFTS, TWO_OPS),
    _two("move", desc.MOVE_DESC, rules.MOVE_RULES),
    _two("muls", desc.MULS_DESC, rules.MULU_MULS_RULES, sizes=UNSIZED),
    _two("mulu", desc.MULU_DESC, rules.MULU_MULS_RULES, sizes=UNSIZED),
    _one("neg", desc.NEG_DESC, rules.CLR_NEG_NOT_RULES),
    _one("negx", desc.NEGX_DESC, rules.CLR_NEG_NOT_RULES),
    _none("nop", desc.NOP_DESC, rules.NOP_RULES),
    _one("not", desc.NOT_DESC, rules.CLR_NEG_NOT_RULES),
    _two("or", desc.OR_DESC, rules.AND_OR_RULES),
    _documented("pea", desc.PEA_DESC, Documented(tables.PEA_TIMES), ONE_OP),
    _documented("rol", desc.ROL_ROR_DESC, _SHIFTS, TWO_OPS),
    _documented("ror", desc.ROL_ROR_DESC, _SHIFTS, TWO_OPS),
    _documented("roxl", desc.ROXL_ROXR_DESC, _SHIFTS, TWO_OPS),
    _documented("roxr", desc.ROXL_ROXR_DESC, _SHIFTS, TWO_OPS),
    _none("rte", desc.RTE_DESC, rules.RTE_RULES),
    _none("rts", desc.RTS_DESC, rules.RTS_RULES),
    _one("scc", desc.SCC_DESC, rules.SCC_RULES, sizes=UNSIZED,
         cc_table=tables.CONDITION_CODES),
    _two("sub", desc.SUB_DESC, rules.ADD_SUB_RULES),
    _two("subq", desc.SUBQ_DESC, rules.ADDQ_SUBQ_RULES),
    _two("subx", desc.SUBX_DESC, rules.ADDX_SUBX_RULES),
    _one("swap", desc.SWAP_DESC, rules.REGISTER_ONLY_RULES, sizes=UNSIZED),
    _one("tst", desc.TST_DESC, rules.TST_RULES),
)

validate_registry(INSTRUCTIONS)

MNEMONICS: tuple[str, ...] = tuple(inst.mnemonic for inst in INSTRUCTIONS)


# =============================================================================
# Lookup Functions
# =============================================================================

def find_instruction(mnemonic: str) -> Optional[InstructionDef]:
    """
    Look up an instruction by mnemonic (case-insensitive).

    Returns:
        The InstructionDef, or None if the mnemonic is not registered
    """
    key = mnemonic.lower()
    for inst in INSTRUCTIONS:
        if inst.mnemonic == key:
            return inst
    return None


def select_instructions(mnemonics=None) -> list[InstructionDef]:
    """
    Return registry entries in report order, optionally filtered.

    Args:
        mnemonics: Iterable of mnemonics to keep, or None for all

    Raises:
        RegistryError: If a requested mnemonic is not registered
    """
    if not mnemonics:
        return list(INSTRUCTIONS)

    wanted = {m.lower() for m in mnemonics}
    unknown = sorted(wanted - set(MNEMONICS))
    if unknown:
        raise RegistryError(f"unknown instruction(s): {', '.join(unknown)}")
    return [inst for inst in INSTRUCTIONS if inst.mnemonic in wanted]
