"""
M68K Timing Instruction Set Package
===================================

Static, validated-at-import reference data:

- **registry**: instruction definitions in report order
- **cycle_rules**: analytical base-cost rules
- **descriptions**: operation, syntax and condition-code prose
- **tables**: documented timing tables and the condition-code list
"""

from m68k_timing.isa.cycle_rules import CycleRule
from m68k_timing.isa.descriptions import Description, Flag, FlagEffect, FlagsDesc
from m68k_timing.isa.registry import (
    INSTRUCTIONS,
    MNEMONICS,
    Documented,
    InstructionDef,
    Measured,
    TimingSource,
    find_instruction,
    select_instructions,
    validate_registry,
)
from m68k_timing.isa.tables import DocumentedTable, ReferenceTable

__all__ = [
    "CycleRule",
    "Description",
    "Flag",
    "FlagEffect",
    "FlagsDesc",
    "INSTRUCTIONS",
    "MNEMONICS",
    "Documented",
    "InstructionDef",
    "Measured",
    "TimingSource",
    "find_instruction",
    "select_instructions",
    "validate_registry",
    "DocumentedTable",
    "ReferenceTable",
]
