"""
Timing Pipeline Tests
=====================

Tests for batch execution with fake oracles: parallel collection order,
size independence, error context and scratch directory handling.
"""

import pytest

from conftest import FakeAssembler, FakeCore, IndexCostModel
from m68k_timing.config import GeneratorConfig
from m68k_timing.cpu.m68000 import OperandSize
from m68k_timing.errors import MeasurementError, OracleTimeoutError, ScratchFileError
from m68k_timing.isa.registry import find_instruction
from m68k_timing.oracles.assembler import VasmOracle
from m68k_timing.oracles.core import MeasuredCostModel
from m68k_timing.oracles.rules import RuleCostModel
from m68k_timing.pipeline import TimingPipeline, build_pipeline

WORD = OperandSize.WORD
LONG = OperandSize.LONG


def no_address_register_source(candidate) -> bool:
    return candidate.source is None or candidate.source.display_name != "An"


# =============================================================================
# Batch Execution
# =============================================================================

class TestRunBatch:
    """Tests for TimingPipeline.run_batch()."""

    def test_analytical_values(self, fake_assembler):
        pipeline = TimingPipeline(fake_assembler, RuleCostModel(), jobs=4)
        add = find_instruction("add")

        word = pipeline.run_batch(add, WORD)
        long = pipeline.run_batch(add, LONG)

        # Dn,An and #xxx,(An)+
        assert word.cell(0, 1) == 8
        assert long.cell(0, 1) == 8
        assert word.cell(11, 3) == 16
        assert long.cell(11, 3) == 20

    def test_grid_size(self, fake_assembler):
        pipeline = TimingPipeline(fake_assembler, RuleCostModel())
        matrix = pipeline.run_batch(find_instruction("add"), WORD)
        assert (matrix.rows, matrix.columns) == (12, 9)
        assert len(matrix) == 108

    def test_order_independent_of_completion(self):
        oracle = FakeAssembler(predicate=no_address_register_source, delay=0.02)
        pipeline = TimingPipeline(oracle, IndexCostModel(), jobs=8)

        matrix = pipeline.run_batch(find_instruction("add"), WORD)

        for index, cell in enumerate(matrix.cells):
            if 9 <= index < 18:
                assert cell is None
            else:
                assert cell == index

    def test_rejections_leave_holes(self):
        oracle = FakeAssembler(predicate=no_address_register_source)
        pipeline = TimingPipeline(oracle, RuleCostModel(), jobs=2)

        matrix = pipeline.run_batch(find_instruction("add"), WORD)

        assert matrix.row_is_empty(1)
        assert matrix.accepted_count == 108 - 9

    def test_cost_model_called_once_per_batch(self, fake_assembler):
        model = IndexCostModel()
        pipeline = TimingPipeline(fake_assembler, model, jobs=4)

        pipeline.run_batch(find_instruction("tst"), LONG)

        assert model.batches == [(LONG, 9)]

    def test_measured_model(self, fake_assembler, fake_core):
        pipeline = TimingPipeline(fake_assembler, MeasuredCostModel(fake_core))
        matrix = pipeline.run_batch(find_instruction("nop"), WORD)

        assert matrix.cells == (100,)
        assert fake_core.buffers == [(b"\x00\x00", 1)]

    def test_error_carries_context(self):
        oracle = FakeAssembler(fail_at=5, error=OracleTimeoutError("assembler timed out"))
        pipeline = TimingPipeline(oracle, RuleCostModel(), jobs=4)

        with pytest.raises(OracleTimeoutError) as exc_info:
            pipeline.run_batch(find_instruction("add"), LONG)

        error = exc_info.value
        assert (error.mnemonic, error.size, error.index) == ("add", "l", 5)
        assert str(error).startswith("add.l [candidate 5]: error: assembler timed out")

    def test_measurement_error_carries_batch(self, fake_assembler):
        pipeline = TimingPipeline(fake_assembler, MeasuredCostModel(FakeCore(short_by=1)))

        with pytest.raises(MeasurementError) as exc_info:
            pipeline.run_batch(find_instruction("clr"), WORD)
        assert exc_info.value.mnemonic == "clr"

    def test_scratch_dir_used_and_cleaned(self, tmp_path, fake_assembler):
        pipeline = TimingPipeline(fake_assembler, RuleCostModel(), scratch_dir=tmp_path)

        pipeline.run_batch(find_instruction("clr"), WORD)

        assert len(fake_assembler.workdirs) == 1
        assert next(iter(fake_assembler.workdirs)).parent == tmp_path
        assert list(tmp_path.iterdir()) == []

    def test_missing_scratch_parent(self, tmp_path, fake_assembler):
        pipeline = TimingPipeline(fake_assembler, RuleCostModel(), scratch_dir=tmp_path / "nope")

        with pytest.raises(ScratchFileError):
            pipeline.run_batch(find_instruction("clr"), WORD)


# =============================================================================
# Instruction Execution
# =============================================================================

class TestRunInstruction:
    """Tests for TimingPipeline.run_instruction()."""

    def test_sizes_checked_separately(self, fake_assembler):
        pipeline = TimingPipeline(fake_assembler, RuleCostModel(), jobs=4)

        timings = pipeline.run_instruction(find_instruction("add"))

        assert set(timings.matrices) == {WORD, LONG}
        sizes = [c.size for c in fake_assembler.calls]
        assert sizes.count(WORD) == 108
        assert sizes.count(LONG) == 108

    def test_separate_scratch_per_batch(self, fake_assembler):
        pipeline = TimingPipeline(fake_assembler, RuleCostModel())
        pipeline.run_instruction(find_instruction("tst"))
        assert len(fake_assembler.workdirs) == 2

    def test_unsized_instruction(self, fake_assembler):
        pipeline = TimingPipeline(fake_assembler, RuleCostModel())
        timings = pipeline.run_instruction(find_instruction("swap"))
        assert list(timings.matrices) == [WORD]

    def test_documented_instruction_not_assembled(self, fake_assembler):
        pipeline = TimingPipeline(fake_assembler, RuleCostModel())

        timings = pipeline.run_instruction(find_instruction("lsl"))

        assert timings.matrices == {}
        assert fake_assembler.calls == []


# =============================================================================
# Pipeline Construction
# =============================================================================

class TestBuildPipeline:
    """Tests for build_pipeline()."""

    def test_analytical(self):
        config = GeneratorConfig(assembler="vasm", jobs=3, timeout=5.0, cost_model="analytical")
        pipeline = build_pipeline(config)

        assert isinstance(pipeline.legality, VasmOracle)
        assert pipeline.legality.executable == "vasm"
        assert pipeline.legality.timeout == 5.0
        assert isinstance(pipeline.cost_model, RuleCostModel)
        assert pipeline.jobs == 3

    def test_measured_without_core(self):
        with pytest.raises(MeasurementError, match="no core library"):
            build_pipeline(GeneratorConfig(cost_model="measured"))

    def test_measured_with_missing_core(self, tmp_path):
        config = GeneratorConfig(core_library=tmp_path / "libmusashi.so")
        with pytest.raises(MeasurementError, match="cannot load"):
            build_pipeline(config)

    def test_scratch_dir_created(self, tmp_path):
        scratch = tmp_path / "scratch" / "m68k"
        pipeline = build_pipeline(GeneratorConfig(cost_model="analytical", scratch_dir=scratch))
        assert scratch.is_dir()
        assert pipeline.scratch_dir == scratch
