"""
M68K Timing - Instruction Timing Reference Generator for the Motorola 68000
==========================================================================

This package produces a Markdown reference of 68000 instruction execution
times. Instead of transcribing the manual's tables by hand it derives them:

1. every (source, destination) addressing-mode combination of an
   instruction is generated as an assembler statement;
2. an external assembler (vasm) decides which combinations are legal;
3. the legal encodings are priced by a cycle-accurate core (Musashi) or by
   the built-in analytical cycle rules;
4. the results are laid out as grids and rendered next to each
   instruction's description and condition-code effects.

Main Components
---------------
- **cpu**: operand specs, addressing classes and operand catalogs
- **isa**: instruction registry, descriptions, documented tables, cycle rules
- **generator**: candidate statements (Cartesian product of catalogs)
- **oracles**: assembler legality oracle, measured and analytical cost models
- **matrix**: scatter of oracle results back onto the grid
- **pipeline**: parallel batch execution
- **render**: Markdown output
- **cli**: the `m68ktimes` command

Quick Start
-----------
Generate the reference for ADD with the analytical model:
    >>> from m68k_timing import GeneratorConfig, build_pipeline, find_instruction
    >>> from m68k_timing import TableRenderer
    >>> pipeline = build_pipeline(GeneratorConfig(cost_model="analytical"))
    >>> add = find_instruction("add")
    >>> timings = pipeline.run_instruction(add)
    >>> print(TableRenderer().render_instruction(add, timings.matrices))

Or use the command-line tool:
    $ m68ktimes generate -i add -i move -o timings.md
    $ m68ktimes generate --core libmusashi.so

Reference Documentation
-----------------------
- M68000 Family Programmer's Reference Manual (Motorola)
- M68000 8-/16-/32-Bit Microprocessors User's Manual, section 8
- vasm: http://sun.hasenbraten.de/vasm/
- Musashi: https://github.com/kstenerud/Musashi

Version History
---------------
1.0.0 - Initial release with measured and analytical cost models
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from m68k_timing.config import GeneratorConfig
from m68k_timing.cpu import AddressingClass, OperandCatalog, OperandSize, OperandSpec
from m68k_timing.errors import (
    TimingError,
    RegistryError,
    RuleMatchError,
    OracleError,
    AssemblerNotFoundError,
    ScratchFileError,
    OracleTimeoutError,
    MeasurementError,
    ReconcileError,
)
from m68k_timing.generator import CandidateStatement, generate_candidates, grid_shape
from m68k_timing.isa import (
    INSTRUCTIONS,
    InstructionDef,
    find_instruction,
    select_instructions,
)
from m68k_timing.matrix import ResultMatrix, reconcile
from m68k_timing.oracles import (
    Accepted,
    Rejected,
    VasmOracle,
    MusashiCore,
    MeasuredCostModel,
    CycleRuleEngine,
    RuleCostModel,
)
from m68k_timing.pipeline import InstructionTimings, TimingPipeline, build_pipeline
from m68k_timing.render import TableRenderer

__all__ = [
    "__version__",
    # Configuration
    "GeneratorConfig",
    # Operands
    "AddressingClass",
    "OperandCatalog",
    "OperandSize",
    "OperandSpec",
    # Errors
    "TimingError",
    "RegistryError",
    "RuleMatchError",
    "OracleError",
    "AssemblerNotFoundError",
    "ScratchFileError",
    "OracleTimeoutError",
    "MeasurementError",
    "ReconcileError",
    # Registry and generation
    "INSTRUCTIONS",
    "InstructionDef",
    "find_instruction",
    "select_instructions",
    "CandidateStatement",
    "generate_candidates",
    "grid_shape",
    # Oracles
    "Accepted",
    "Rejected",
    "VasmOracle",
    "MusashiCore",
    "MeasuredCostModel",
    "CycleRuleEngine",
    "RuleCostModel",
    # Pipeline and output
    "ResultMatrix",
    "reconcile",
    "InstructionTimings",
    "TimingPipeline",
    "build_pipeline",
    "TableRenderer",
]
