"""
M68K Timing Configuration
=========================

Generator settings: where the external tools live, how many assembler
processes run in parallel and which cost model prices the results.
Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied on top by the CLI)

Cost Models
-----------
- "analytical": cycle rules from the registry (no core needed)
- "measured": the Musashi core loaded from `core_library`

When no model is chosen explicitly, a configured core library selects the
measured model and its absence selects the analytical one.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from m68k_timing.errors import ScratchFileError
from m68k_timing.oracles.assembler import (
    DEFAULT_ASSEMBLER,
    DEFAULT_ASSEMBLER_FLAGS,
    DEFAULT_TIMEOUT,
)

COST_MODELS = ("measured", "analytical")


@dataclass
class GeneratorConfig:
    """
    Configuration for a timing generation run.

    Attributes:
        assembler: Assembler command or path (default: vasmm68k_mot)
        assembler_flags: Options passed before the source file
        jobs: Parallel assembler processes (default: CPU count)
        timeout: Seconds allowed per assembler run (default: 30)
        core_library: Shared library of the cycle-accurate core
        cost_model: "measured", "analytical" or None for automatic
        scratch_dir: Parent directory for per-batch scratch files
                     (default: system temp directory)
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # LEGALITY ORACLE
    # ═══════════════════════════════════════════════════════════════════════════

    assembler: str = DEFAULT_ASSEMBLER
    assembler_flags: tuple[str, ...] = DEFAULT_ASSEMBLER_FLAGS
    jobs: int = field(default_factory=lambda: os.cpu_count() or 1)
    timeout: Optional[float] = DEFAULT_TIMEOUT

    # ═══════════════════════════════════════════════════════════════════════════
    # COST MODEL
    # ═══════════════════════════════════════════════════════════════════════════

    core_library: Optional[Path] = None
    cost_model: Optional[str] = None

    # ═══════════════════════════════════════════════════════════════════════════
    # PATHS
    # ═══════════════════════════════════════════════════════════════════════════

    scratch_dir: Optional[Path] = None

    # ═══════════════════════════════════════════════════════════════════════════
    # FACTORY METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """
        Create GeneratorConfig from environment variables.

        Environment variables (all optional):
            M68K_TIMING_ASSEMBLER: Assembler command or path
            M68K_TIMING_JOBS: Parallel assembler processes (integer)
            M68K_TIMING_TIMEOUT: Seconds per assembler run (number)
            M68K_TIMING_CORE: Path to the core shared library
            M68K_TIMING_MODEL: "measured" or "analytical"
            M68K_TIMING_SCRATCH_DIR: Scratch parent directory

        Returns:
            GeneratorConfig with values from environment variables
        """
        config = cls()

        if assembler := os.environ.get("M68K_TIMING_ASSEMBLER"):
            config.assembler = assembler

        if jobs := os.environ.get("M68K_TIMING_JOBS"):
            try:
                config.jobs = max(1, int(jobs))
            except ValueError:
                pass  # Ignore invalid values

        if timeout := os.environ.get("M68K_TIMING_TIMEOUT"):
            try:
                value = float(timeout)
            except ValueError:
                value = 0.0
            if value > 0:
                config.timeout = value

        if core := os.environ.get("M68K_TIMING_CORE"):
            config.core_library = Path(core)

        if model := os.environ.get("M68K_TIMING_MODEL"):
            if model in COST_MODELS:
                config.cost_model = model

        if scratch := os.environ.get("M68K_TIMING_SCRATCH_DIR"):
            config.scratch_dir = Path(scratch)

        return config

    # ═══════════════════════════════════════════════════════════════════════════
    # HELPER METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    def resolve_cost_model(self) -> str:
        """
        Return the effective cost model name.

        An explicit choice wins; otherwise a configured core library means
        "measured".
        """
        if self.cost_model:
            return self.cost_model
        return "measured" if self.core_library else "analytical"

    def ensure_scratch_dir(self) -> Optional[Path]:
        """
        Create the scratch parent directory if one is configured.

        Returns:
            The directory, or None to use the system default
        """
        if self.scratch_dir is None:
            return None
        try:
            self.scratch_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ScratchFileError(
                f"cannot create scratch directory {self.scratch_dir}: {e}",
                hint="point --scratch-dir at a writable directory",
            ) from e
        return self.scratch_dir
