"""
Oracle Interfaces
=================

Narrow interfaces between the pipeline and the external tools.

- **LegalityOracle**: one operation, `check_legality`, answered by the
  assembler. It is the only authority on whether a statement encodes.
- **MeasurementCore**: `init` once per process, then `measure` a buffer of
  concatenated encodings. Cores are exclusive resources; implementations
  serialise access themselves so callers never have to.
- **CostModel**: turns the accepted candidates of one batch into cycle
  counts, one per candidate in submission order. The measured model wraps
  a MeasurementCore; the analytical model evaluates cycle rules.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from m68k_timing.cpu.m68000 import OperandSize
from m68k_timing.generator import CandidateStatement


# =============================================================================
# Oracle Results
# =============================================================================

@dataclass(frozen=True)
class Accepted:
    """The assembler accepted the statement and produced these bytes."""
    encoded: bytes

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """The assembler refused the statement (illegal operand combination)."""
    reason: str = ""

    @property
    def accepted(self) -> bool:
        return False


OracleResult = Union[Accepted, Rejected]

# (candidate, encoded bytes) pairs handed to a cost model
AcceptedCandidate = tuple[CandidateStatement, bytes]


# =============================================================================
# Interfaces
# =============================================================================

class LegalityOracle(ABC):
    """Decides whether a candidate statement is a legal encoding."""

    @abstractmethod
    def check_legality(self, candidate: CandidateStatement, workdir: Path) -> OracleResult:
        """
        Assemble one candidate.

        Args:
            candidate: Statement to check
            workdir: Batch scratch directory; file names derived from the
                     candidate's linear index are unique within it

        Returns:
            Accepted(bytes) or Rejected()

        Raises:
            OracleError: On environment failures (never for illegal input)
        """


class MeasurementCore(ABC):
    """Cycle-accurate core that executes encoded instructions."""

    @abstractmethod
    def init(self) -> None:
        """One-time process-wide setup; must precede `measure`."""

    @abstractmethod
    def measure(self, buffer: bytes, count: int) -> list[int]:
        """
        Execute `count` instructions from `buffer` sequentially.

        Returns:
            One cycle count per instruction, in submission order
        """


class CostModel(ABC):
    """Assigns a cycle count to every accepted candidate of a batch."""

    name: str = "cost model"

    @abstractmethod
    def measure(self, accepted: list[AcceptedCandidate], size: OperandSize) -> list[int]:
        """
        Cost the accepted candidates of one batch.

        Args:
            accepted: (candidate, encoding) pairs in submission order
            size: Operand size of the batch

        Returns:
            Cycle counts, same length and order as `accepted`
        """
