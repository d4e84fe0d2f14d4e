"""
Timing Pipeline
===============

Runs one (instruction, size) batch end to end:

1. generate every candidate statement (CandidateGenerator)
2. check legality of all candidates in parallel (LegalityOracle)
3. wait for every check to finish (join barrier)
4. cost the accepted candidates in one call (CostModel)
5. scatter the costs back onto the grid (MatrixReconciler)

Parallel Collection
-------------------
Legality results are written into a pre-sized list, one slot per
candidate, addressed by the candidate's linear index. Completion order of
the worker threads never matters. The cost model only starts after the
executor has shut down, because a measured batch is one concatenated
buffer whose framing assumes a final set of accepted candidates.

Each batch gets a fresh scratch directory, and the word and long batches
of an instruction are evaluated independently.
"""

import logging
import tempfile
from concurrent import futures
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from m68k_timing.config import GeneratorConfig
from m68k_timing.cpu.m68000 import OperandSize
from m68k_timing.errors import MeasurementError, OracleError, ScratchFileError
from m68k_timing.generator import CandidateStatement, generate_candidates, grid_shape
from m68k_timing.isa.registry import InstructionDef
from m68k_timing.matrix import ResultMatrix, reconcile
from m68k_timing.oracles.assembler import VasmOracle
from m68k_timing.oracles.base import CostModel, LegalityOracle, OracleResult
from m68k_timing.oracles.core import MeasuredCostModel, MusashiCore
from m68k_timing.oracles.rules import RuleCostModel

logger = logging.getLogger(__name__)


@dataclass
class InstructionTimings:
    """Result matrices of one instruction, keyed by operand size."""
    instruction: InstructionDef
    matrices: dict[OperandSize, ResultMatrix] = field(default_factory=dict)


class TimingPipeline:
    """
    Coordinates generator, oracles and reconciler for each batch.

    Args:
        legality: Oracle deciding which candidates encode
        cost_model: Model pricing accepted candidates
        jobs: Worker threads for legality checks
        scratch_dir: Parent for per-batch scratch directories (None: system temp)
    """

    def __init__(
        self,
        legality: LegalityOracle,
        cost_model: CostModel,
        jobs: int = 1,
        scratch_dir: Optional[Path] = None,
    ):
        self.legality = legality
        self.cost_model = cost_model
        self.jobs = max(1, jobs)
        self.scratch_dir = scratch_dir

    # =========================================================================
    # Batch Execution
    # =========================================================================

    def run_batch(self, instruction: InstructionDef, size: OperandSize) -> ResultMatrix:
        """
        Produce the result matrix for one instruction and size.

        Raises:
            OracleError: On any oracle failure, with instruction, size and
                         candidate index filled in
        """
        candidates = generate_candidates(instruction, size)
        rows, columns = grid_shape(instruction)

        try:
            outcomes = self._check_all(candidates)

            accepted = [
                (candidate, outcome.encoded)
                for candidate, outcome in zip(candidates, outcomes)
                if outcome.accepted
            ]
            cycles = self.cost_model.measure(accepted, size)
            matrix = reconcile(candidates, outcomes, cycles, rows, columns)
        except OracleError as e:
            raise e.with_context(mnemonic=instruction.mnemonic, size=size.value) from e

        logger.info(
            f"{instruction.table_name(size)}: {matrix.accepted_count}/{len(candidates)} "
            f"legal combinations"
        )
        return matrix

    def _check_all(self, candidates: list[CandidateStatement]) -> list[OracleResult]:
        """Run legality checks in parallel into index-addressed slots."""
        slots: list[Optional[OracleResult]] = [None] * len(candidates)

        try:
            workdir_ctx = tempfile.TemporaryDirectory(prefix="m68k_timing_", dir=self.scratch_dir)
        except OSError as e:
            raise ScratchFileError(
                f"cannot create scratch directory: {e}",
                hint="check --scratch-dir or the system temp directory",
            ) from e

        with workdir_ctx as workdir:
            with futures.ThreadPoolExecutor(max_workers=self.jobs) as executor:
                pending = {
                    executor.submit(self.legality.check_legality, candidate, Path(workdir)):
                        candidate.linear_index
                    for candidate in candidates
                }

                for future in futures.as_completed(pending):
                    index = pending[future]
                    try:
                        slots[index] = future.result()
                    except OracleError as e:
                        for other in pending:
                            other.cancel()
                        raise e.with_context(index=index) from e
            # Executor shutdown is the join barrier

        missing = [i for i, slot in enumerate(slots) if slot is None]
        if missing:
            raise OracleError(f"legality results missing for candidates {missing}")

        return slots

    # =========================================================================
    # Instruction Execution
    # =========================================================================

    def run_instruction(self, instruction: InstructionDef) -> InstructionTimings:
        """
        Evaluate every supported size of a measured instruction.

        Documented instructions are returned without matrices.
        """
        timings = InstructionTimings(instruction)
        if not instruction.is_measured:
            return timings

        for size in instruction.sizes:
            timings.matrices[size] = self.run_batch(instruction, size)
        return timings


def build_pipeline(config: GeneratorConfig) -> TimingPipeline:
    """
    Create a pipeline from a configuration.

    Raises:
        MeasurementError: If the measured model is selected but the core
                          cannot be loaded
    """
    legality = VasmOracle(
        executable=config.assembler,
        flags=config.assembler_flags,
        timeout=config.timeout,
    )

    model_name = config.resolve_cost_model()
    if model_name == "measured":
        if config.core_library is None:
            raise MeasurementError(
                "measured cost model selected but no core library configured",
                hint="pass --core PATH or use --model analytical",
            )
        cost_model: CostModel = MeasuredCostModel(MusashiCore(config.core_library))
    else:
        cost_model = RuleCostModel()

    logger.info(f"Using {cost_model.name} cost model with {config.jobs} assembler job(s)")

    return TimingPipeline(
        legality=legality,
        cost_model=cost_model,
        jobs=config.jobs,
        scratch_dir=config.ensure_scratch_dir(),
    )
