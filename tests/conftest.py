"""
Shared Test Fixtures
====================

Fake oracles so that no test needs vasm or a compiled Musashi core.

- FakeAssembler: accepts candidates chosen by a predicate and records
  every call; an optional delay makes later candidates finish first.
- FakeCore: measurement core returning predictable cycle counts.
- IndexCostModel: prices each candidate with its own linear index, which
  makes misplaced cells easy to spot.
"""

import threading
import time
from pathlib import Path
from typing import Callable, Optional

import pytest

from m68k_timing.cpu.m68000 import OperandSize
from m68k_timing.generator import CandidateStatement
from m68k_timing.oracles.base import (
    Accepted,
    AcceptedCandidate,
    CostModel,
    LegalityOracle,
    MeasurementCore,
    OracleResult,
    Rejected,
)


def accept_all(candidate: CandidateStatement) -> bool:
    return True


class FakeAssembler(LegalityOracle):
    """Legality oracle driven by a predicate."""

    def __init__(
        self,
        predicate: Callable[[CandidateStatement], bool] = accept_all,
        delay: float = 0.0,
        fail_at: Optional[int] = None,
        error: Optional[Exception] = None,
    ):
        self.predicate = predicate
        self.delay = delay
        self.fail_at = fail_at
        self.error = error
        self.calls: list[CandidateStatement] = []
        self.workdirs: set[Path] = set()
        self._lock = threading.Lock()

    def check_legality(self, candidate: CandidateStatement, workdir: Path) -> OracleResult:
        with self._lock:
            self.calls.append(candidate)
            self.workdirs.add(workdir)

        if self.delay:
            # Lower indices sleep longer, so completion order is reversed
            time.sleep(self.delay / (candidate.linear_index + 1))

        if self.fail_at is not None and candidate.linear_index == self.fail_at:
            raise self.error

        if self.predicate(candidate):
            return Accepted(candidate.linear_index.to_bytes(2, "big"))
        return Rejected("illegal operand combination")


class FakeCore(MeasurementCore):
    """Core returning 100, 101, 102 ... for each measured instruction."""

    def __init__(self, short_by: int = 0):
        self.init_calls = 0
        self.buffers: list[tuple[bytes, int]] = []
        self.short_by = short_by

    def init(self) -> None:
        self.init_calls += 1

    def measure(self, buffer: bytes, count: int) -> list[int]:
        self.buffers.append((buffer, count))
        return [100 + i for i in range(count - self.short_by)]


class IndexCostModel(CostModel):
    """Cost model that returns each candidate's linear index."""

    name = "index"

    def __init__(self):
        self.batches: list[tuple[OperandSize, int]] = []

    def measure(self, accepted: list[AcceptedCandidate], size: OperandSize) -> list[int]:
        self.batches.append((size, len(accepted)))
        return [candidate.linear_index for candidate, _ in accepted]


@pytest.fixture
def fake_assembler() -> FakeAssembler:
    return FakeAssembler()


@pytest.fixture
def fake_core() -> FakeCore:
    return FakeCore()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every M68K_TIMING_* variable for the duration of a test."""
    for name in (
        "M68K_TIMING_ASSEMBLER",
        "M68K_TIMING_JOBS",
        "M68K_TIMING_TIMEOUT",
        "M68K_TIMING_CORE",
        "M68K_TIMING_MODEL",
        "M68K_TIMING_SCRATCH_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
