"""
M68K Timing Error Hierarchy
===========================

This module defines the exception hierarchy for the timing generator.
All exceptions inherit from TimingError, allowing callers to catch every
generator-related error with a single except clause.

Exception Hierarchy
-------------------
TimingError (base)
├── RegistryError - defect in the static instruction tables
├── RuleMatchError - no cycle rule matched an operand pairing
└── OracleError (external tool failures, always fatal)
    ├── AssemblerNotFoundError - assembler missing or not launchable
    ├── ScratchFileError - cannot create/write/read a scratch file
    ├── OracleTimeoutError - assembler did not finish in time
    ├── MeasurementError - cycle-accurate core missing or failed
    └── ReconcileError - result counts disagree with the candidates

Legality rejections are NOT errors. An assembler that refuses a statement
is the expected signal for an illegal operand combination and becomes a
hole in the timing grid.

Oracle errors carry the batch context (mnemonic, operand size and
candidate index) so that a fatal abort can say exactly where it happened:

    add.l [candidate 37]: error: assembler timed out after 30.0s
    hint: raise --timeout or check the assembler installation
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TimingError(Exception):
    """
    Base exception for all timing generator errors.

        try:
            pipeline.run_batch(instruction, OperandSize.WORD)
        except TimingError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Static Table Exceptions
# =============================================================================

class RegistryError(TimingError):
    """
    Defect in the static instruction registry.

    Raised while the registry is being built (at import time), so a broken
    table stops the program before any assembler is launched.

    Examples:
        - duplicate mnemonic
        - operand catalog count does not match the arity
        - analytical rule table without a trailing (ANY, ANY) catch-all
    """

    def __init__(self, message: str, mnemonic: Optional[str] = None):
        self.mnemonic = mnemonic
        if mnemonic:
            message = f"{mnemonic}: {message}"
        super().__init__(message)


class RuleMatchError(TimingError):
    """No cycle rule matched the given source/destination classes."""

    def __init__(self, mnemonic: str, source: str, destination: str):
        self.mnemonic = mnemonic
        self.source = source
        self.destination = destination
        super().__init__(
            f"{mnemonic}: no cycle rule matches source={source}, "
            f"destination={destination}"
        )


# =============================================================================
# Oracle Exceptions
# =============================================================================

class OracleError(TimingError):
    """
    Base exception for failures of the external oracles.

    Every subclass is fatal: skipping a candidate would shift every later
    result onto the wrong grid cell.

    Attributes:
        message: The error description
        mnemonic: Instruction being generated (optional)
        size: Operand size suffix, e.g. "w" or "l" (optional)
        index: Linear index of the failing candidate (optional)
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(
        self,
        message: str,
        mnemonic: Optional[str] = None,
        size: Optional[str] = None,
        index: Optional[int] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.mnemonic = mnemonic
        self.size = size
        self.index = index
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error with its batch context and hint.

        Example output:
            add.l [candidate 37]: error: assembler timed out after 30.0s
            hint: raise --timeout or check the assembler installation
        """
        parts = []

        prefix = ""
        if self.mnemonic:
            prefix = self.mnemonic
            if self.size:
                prefix += f".{self.size}"
        if self.index is not None:
            prefix = f"{prefix} [candidate {self.index}]".strip()

        if prefix:
            parts.append(f"{prefix}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def with_context(
        self,
        mnemonic: Optional[str] = None,
        size: Optional[str] = None,
        index: Optional[int] = None,
    ) -> "OracleError":
        """
        Return a copy of this error with missing context fields filled in.

        Oracles raise without knowing which batch they serve; the pipeline
        adds the instruction and size on the way out.
        """
        return type(self)(
            self.message,
            mnemonic=self.mnemonic or mnemonic,
            size=self.size or size,
            index=self.index if self.index is not None else index,
            hint=self.hint,
        )


class AssemblerNotFoundError(OracleError):
    """The assembler executable is missing or could not be launched."""
    pass


class ScratchFileError(OracleError):
    """
    A scratch file could not be created, written or read.

    This points at a misconfigured environment (full disk, unwritable
    scratch directory) and aborts the run.
    """
    pass


class OracleTimeoutError(OracleError):
    """The assembler exceeded the configured per-statement timeout."""
    pass


class MeasurementError(OracleError):
    """
    The cycle-accurate core is unavailable or returned a failure.

    No retry policy exists; the run is aborted.
    """
    pass


class ReconcileError(OracleError):
    """Oracle outputs cannot be lined up with the generated candidates."""
    pass
