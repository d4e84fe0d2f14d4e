"""
Configuration Tests
===================

Tests for GeneratorConfig defaults, environment overrides and cost model
selection.
"""

import os
from pathlib import Path

import pytest

from m68k_timing.config import GeneratorConfig
from m68k_timing.errors import ScratchFileError


class TestDefaults:
    """Tests for built-in defaults."""

    def test_defaults(self):
        config = GeneratorConfig()

        assert config.assembler == "vasmm68k_mot"
        assert config.assembler_flags == ("-no-opt", "-m68000")
        assert config.timeout == 30.0
        assert config.jobs == (os.cpu_count() or 1)
        assert config.core_library is None
        assert config.scratch_dir is None

    def test_analytical_without_core(self):
        assert GeneratorConfig().resolve_cost_model() == "analytical"

    def test_measured_with_core(self):
        config = GeneratorConfig(core_library=Path("libmusashi.so"))
        assert config.resolve_cost_model() == "measured"

    def test_explicit_model_wins(self):
        config = GeneratorConfig(core_library=Path("libmusashi.so"), cost_model="analytical")
        assert config.resolve_cost_model() == "analytical"


class TestFromEnv:
    """Tests for GeneratorConfig.from_env()."""

    def test_empty_environment(self, clean_env):
        assert GeneratorConfig.from_env() == GeneratorConfig()

    def test_all_variables(self, clean_env, tmp_path):
        clean_env.setenv("M68K_TIMING_ASSEMBLER", "/opt/vasm/vasmm68k_mot")
        clean_env.setenv("M68K_TIMING_JOBS", "6")
        clean_env.setenv("M68K_TIMING_TIMEOUT", "2.5")
        clean_env.setenv("M68K_TIMING_CORE", str(tmp_path / "libmusashi.so"))
        clean_env.setenv("M68K_TIMING_MODEL", "analytical")
        clean_env.setenv("M68K_TIMING_SCRATCH_DIR", str(tmp_path / "scratch"))

        config = GeneratorConfig.from_env()

        assert config.assembler == "/opt/vasm/vasmm68k_mot"
        assert config.jobs == 6
        assert config.timeout == 2.5
        assert config.core_library == tmp_path / "libmusashi.so"
        assert config.cost_model == "analytical"
        assert config.scratch_dir == tmp_path / "scratch"

    def test_invalid_numbers_ignored(self, clean_env):
        clean_env.setenv("M68K_TIMING_JOBS", "many")
        clean_env.setenv("M68K_TIMING_TIMEOUT", "soon")

        config = GeneratorConfig.from_env()

        assert config.jobs == GeneratorConfig().jobs
        assert config.timeout == 30.0

    @pytest.mark.parametrize("value", ["0", "-5"])
    def test_non_positive_timeout_ignored(self, clean_env, value):
        clean_env.setenv("M68K_TIMING_TIMEOUT", value)
        assert GeneratorConfig.from_env().timeout == 30.0

    def test_jobs_at_least_one(self, clean_env):
        clean_env.setenv("M68K_TIMING_JOBS", "0")
        assert GeneratorConfig.from_env().jobs == 1

    def test_unknown_model_ignored(self, clean_env):
        clean_env.setenv("M68K_TIMING_MODEL", "guess")
        assert GeneratorConfig.from_env().cost_model is None


class TestHelpers:
    """Tests for the scratch directory helper."""

    def test_ensure_scratch_dir(self, tmp_path):
        config = GeneratorConfig(scratch_dir=tmp_path / "a" / "b")
        assert config.ensure_scratch_dir() == tmp_path / "a" / "b"
        assert (tmp_path / "a" / "b").is_dir()

    def test_ensure_scratch_dir_unset(self):
        assert GeneratorConfig().ensure_scratch_dir() is None

    def test_scratch_dir_is_a_file(self, tmp_path):
        target = tmp_path / "scratch"
        target.write_text("")

        with pytest.raises(ScratchFileError, match="cannot create scratch directory") as exc_info:
            GeneratorConfig(scratch_dir=target).ensure_scratch_dir()
        assert "--scratch-dir" in str(exc_info.value)
