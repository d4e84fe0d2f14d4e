"""
M68K Timing CPU Package
=======================

Operand definitions for the Motorola 68000 shared by the candidate
generator, the cycle rule engine and the report renderer.

Modules:
    m68000: Addressing classes, operand sizes, operand specs and the
            source/destination operand catalogs.

Usage:
    from m68k_timing.cpu import (
        AddressingClass,
        OperandSize,
        SOURCE_OPERANDS,
        DESTINATION_OPERANDS,
    )
"""

# =============================================================================
# Public API Exports
# =============================================================================

from m68k_timing.cpu.m68000 import (
    # Core types
    AddressingClass,
    OperandSize,
    OperandSpec,
    OperandCatalog,
    # Operand catalogs
    SOURCE_OPERANDS,
    DESTINATION_OPERANDS,
    # Lookup functions
    get_operand,
)

__all__ = [
    # Core types
    "AddressingClass",
    "OperandSize",
    "OperandSpec",
    "OperandCatalog",
    # Operand catalogs
    "SOURCE_OPERANDS",
    "DESTINATION_OPERANDS",
    # Lookup functions
    "get_operand",
]
