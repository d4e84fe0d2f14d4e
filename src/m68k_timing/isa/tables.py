"""
Documented Timing Tables
========================

Execution times that are copied from the M68000 User's Manual instead of
being generated. They cover instructions whose cost depends on something
the operand grid cannot express: a shift count, whether a branch is taken,
or a loop counter.

Table Layout
------------
`header` holds the column names. Every row has one more entry than the
header: the first entry is the row label printed under the instruction
name column.

    | asl  | Dn   | An | (An) | ...
    |------|------|----|------|
    | #1   | 8    | *  | 12   | ...
"""

from dataclasses import dataclass

from m68k_timing.errors import RegistryError


@dataclass(frozen=True)
class DocumentedTable:
    """Pre-written timing table: column headers plus labelled rows."""
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        for row in self.rows:
            if len(row) != len(self.header) + 1:
                raise RegistryError(
                    f"documented row {row!r} has {len(row)} entries, "
                    f"expected {len(self.header) + 1}"
                )


@dataclass(frozen=True)
class ReferenceTable:
    """Plain table whose first row is the header (condition code list)."""
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        for row in self.rows:
            if len(row) != len(self.header):
                raise RegistryError(
                    f"reference row {row!r} has {len(row)} entries, "
                    f"expected {len(self.header)}"
                )


# =============================================================================
# Condition Codes (Bcc, DBcc, Scc)
# =============================================================================

CONDITION_CODES = ReferenceTable(
    header=("Mnemonic", "Condition", "Mnemonic", "Condition"),
    rows=(
        ("CC (HS)", "Carry Clear", "LS", "Low or Same"),
        ("CS (LO)", "Carry Set", "LT", "Less Than"),
        ("EQ", "Equal", "MI", "Minus"),
        ("GE", "Greater or Equal", "NE", "Not Equal"),
        ("GT", "Greater Than", "PL", "Plus"),
        ("HI", "High", "VC", "Overflow Clear"),
        ("LE", "Less or Equal", "VS", "Overflow Set"),
    ),
)


# =============================================================================
# Shift and Rotate
# =============================================================================

_SHIFT_DESTINATIONS = ("Dn", "An", "(An)", "(An)+", "-(An)", "d(An)", "d(An,Dn)", "xxx.W", "xxx.L")

SHIFT_WORD = DocumentedTable(
    header=_SHIFT_DESTINATIONS,
    rows=(
        ("#1", "8", "*", "12", "12", "14", "16", "18", "16", "20"),
        ("#1-8", "6+2n", "*", "*", "*", "*", "*", "*", "*", "*"),
        ("Dn", "6+2n", "*", "*", "*", "*", "*", "*", "*", "*"),
    ),
)

SHIFT_LONG = DocumentedTable(
    header=_SHIFT_DESTINATIONS,
    rows=(
        ("#1-8", "8+2n", "*", "*", "*", "*", "*", "*", "*", "*"),
        ("Dn", "8+2n", "*", "*", "*", "*", "*", "*", "*", "*"),
    ),
)


# =============================================================================
# Program Flow
# =============================================================================

BCC_TIMES = DocumentedTable(
    header=("Displacement", "Branch Taken", "Branch Not Taken"),
    rows=(
        ("", "Byte", "10", "8"),
        ("", "Word", "10", "12"),
    ),
)

BSR_TIMES = DocumentedTable(
    header=("Displacement", "Branch Taken", "Branch Not Taken"),
    rows=(
        ("", "Byte", "18", "-"),
        ("", "Word", "18", "-"),
    ),
)

DBCC_TIMES = DocumentedTable(
    header=("Displacement", "Branch Taken", "Branch Not Taken"),
    rows=(
        ("", "cc true", "-", "12"),
        ("", "cc false, Count not Expired", "10", "-"),
        ("", "cc false, Counter Expired", "-", "14"),
    ),
)

# Control addressing modes
_CONTROL_MODES = ("(An)", "(d16,An)", "(d8,An,Xn)", "(xxx).W", "(xxx).L", "(d16,PC)", "(d8,PC,Xn)")

JMP_TIMES = DocumentedTable(
    header=_CONTROL_MODES,
    rows=(("", "8", "10", "14", "10", "12", "10", "14"),),
)

JSR_TIMES = DocumentedTable(
    header=_CONTROL_MODES,
    rows=(("", "16", "18", "22", "18", "20", "18", "22"),),
)

LEA_TIMES = DocumentedTable(
    header=_CONTROL_MODES,
    rows=(("", "4", "8", "12", "8", "12", "8", "12"),),
)

PEA_TIMES = DocumentedTable(
    header=_CONTROL_MODES,
    rows=(("", "12", "16", "20", "16", "20", "16", "20"),),
)
