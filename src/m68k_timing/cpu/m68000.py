"""
M68000 Operand Definitions
==========================

This module defines the operand addressing modes that the timing generator
combines into candidate statements, together with the bus-cycle cost of
each effective-address calculation.

Addressing Classes
------------------
Operands are bucketed into coarse classes for cost-rule matching:

1. **DATA_REGISTER**: Dn
2. **ADDRESS_REGISTER**: An
3. **MEMORY**: every mode that reaches memory through the bus
   ((An), (An)+, -(An), d(An), d(An,Dn), xxx.W, xxx.L, d(PC), d(PC,Dn))
4. **IMMEDIATE**: #xxx, fetched from the instruction stream
5. **ANY**: wildcard used only by cycle rules, never by an operand

Effective Address Calculation Times
-----------------------------------
Word/byte operand times from the M68000 User's Manual (table 8-1). Long
operands cost four more clock periods on every mode that touches memory,
which the cycle rule engine adds on its own.

    Dn, An          0
    (An), (An)+     4
    -(An)           6
    d(An), d(PC)    8
    d(An,Dn)       10
    d(PC,Dn)       10
    xxx.W           8
    xxx.L          12
    #xxx            4

Reference
---------
- M68000 Family Programmer's Reference Manual (Motorola)
- M68000 8-/16-/32-Bit Microprocessors User's Manual, section 8
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator


# =============================================================================
# Enumerations
# =============================================================================

class AddressingClass(Enum):
    """
    Coarse addressing-mode class of an operand.

    ANY is a wildcard for rule matching and must never be assigned to an
    OperandSpec.
    """
    DATA_REGISTER = auto()
    ADDRESS_REGISTER = auto()
    MEMORY = auto()
    IMMEDIATE = auto()
    ANY = auto()

    def __str__(self) -> str:
        """Return human-readable name for error messages."""
        return {
            AddressingClass.DATA_REGISTER: "data register",
            AddressingClass.ADDRESS_REGISTER: "address register",
            AddressingClass.MEMORY: "memory",
            AddressingClass.IMMEDIATE: "immediate",
            AddressingClass.ANY: "any",
        }[self]

    def matches(self, other: "AddressingClass") -> bool:
        """Check whether this (possibly wildcard) class accepts `other`."""
        return self is AddressingClass.ANY or self is other


class OperandSize(Enum):
    """
    Operand size variant of a generated statement.

    WORD is the assembler's default size, so word statements carry no
    suffix. LONG statements are written with ".l".
    """
    WORD = "w"
    LONG = "l"

    @property
    def suffix(self) -> str:
        """Suffix appended to the mnemonic in generated source text."""
        return ".l" if self is OperandSize.LONG else ""

    @property
    def label(self) -> str:
        """Name used in the attributes line of the report."""
        return "Word" if self is OperandSize.WORD else "Long"


# =============================================================================
# Operand Definitions
# =============================================================================

@dataclass(frozen=True)
class OperandSpec:
    """
    One concrete operand used when building candidate statements.

    Attributes:
        source_text: Text handed to the assembler, e.g. "2(a0,d0)"
        display_name: Column/row header in the report, e.g. "d(An,Dn)"
        addressing_class: Class used for cycle-rule matching
        base_extra_cycles: Word-size effective address calculation time
    """
    source_text: str
    display_name: str
    addressing_class: AddressingClass
    base_extra_cycles: int = 0

    def __post_init__(self) -> None:
        if self.addressing_class is AddressingClass.ANY:
            raise ValueError(f"operand {self.display_name!r} cannot use the ANY class")
        if self.base_extra_cycles < 0:
            raise ValueError(f"operand {self.display_name!r} has negative extra cycles")

    @property
    def is_memory(self) -> bool:
        """True when the operand goes through a memory bus access."""
        return self.addressing_class is AddressingClass.MEMORY

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class OperandCatalog:
    """
    Ordered, immutable list of operand specs for one operand position.

    The order is significant: it fixes the row/column order of the timing
    grid and therefore every candidate's linear index.
    """
    name: str
    operands: tuple[OperandSpec, ...]

    def __len__(self) -> int:
        return len(self.operands)

    def __iter__(self) -> Iterator[OperandSpec]:
        return iter(self.operands)

    def __getitem__(self, index: int) -> OperandSpec:
        return self.operands[index]

    @property
    def display_names(self) -> list[str]:
        """Header names in catalog order."""
        return [op.display_name for op in self.operands]


# =============================================================================
# Operand Tables
# =============================================================================
# Register numbers and displacements are fixed so every generated statement
# assembles to the same instruction length for a given mode.
# =============================================================================

DN = OperandSpec("d0", "Dn", AddressingClass.DATA_REGISTER)
AN = OperandSpec("a0", "An", AddressingClass.ADDRESS_REGISTER)
AN_INDIRECT = OperandSpec("(a0)", "(An)", AddressingClass.MEMORY, 4)
AN_POSTINC = OperandSpec("(a0)+", "(An)+", AddressingClass.MEMORY, 4)
AN_PREDEC = OperandSpec("-(a0)", "-(An)", AddressingClass.MEMORY, 6)
AN_DISP = OperandSpec("2(a0)", "d(An)", AddressingClass.MEMORY, 8)
AN_INDEX = OperandSpec("2(a0,d0)", "d(An,Dn)", AddressingClass.MEMORY, 10)
ABS_WORD = OperandSpec("$4.W", "xxx.W", AddressingClass.MEMORY, 8)
ABS_LONG = OperandSpec("$4.L", "xxx.L", AddressingClass.MEMORY, 12)
PC_DISP = OperandSpec("2(pc)", "d(PC)", AddressingClass.MEMORY, 8)
PC_INDEX = OperandSpec("2(pc,d0)", "d(PC,Dn)", AddressingClass.MEMORY, 10)
IMMEDIATE = OperandSpec("#8", "#xxx", AddressingClass.IMMEDIATE, 4)

# Alterable modes: everything a destination operand can be
DESTINATION_OPERANDS = OperandCatalog(
    "destination",
    (DN, AN, AN_INDIRECT, AN_POSTINC, AN_PREDEC, AN_DISP, AN_INDEX, ABS_WORD, ABS_LONG),
)

# Destination modes plus the PC-relative and immediate forms
SOURCE_OPERANDS = OperandCatalog(
    "source",
    DESTINATION_OPERANDS.operands + (PC_DISP, PC_INDEX, IMMEDIATE),
)


def get_operand(display_name: str) -> OperandSpec:
    """
    Look up an operand spec by its display name.

    Args:
        display_name: Report name, e.g. "(An)+"

    Returns:
        The matching OperandSpec

    Raises:
        KeyError: If no operand has that display name
    """
    for op in SOURCE_OPERANDS:
        if op.display_name == display_name:
            return op
    raise KeyError(display_name)
