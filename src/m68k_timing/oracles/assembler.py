"""
Assembler Legality Oracle
=========================

Adapter around the vasm Motorola-syntax assembler (`vasmm68k_mot`). Each
candidate is written to its own scratch source file and assembled to a raw
binary:

    vasmm68k_mot -no-opt -m68000 cand_37.s -Fbin -o cand_37.bin

Exit status 0 with a non-empty output file means the statement is a legal
encoding and the file holds its bytes. Any other outcome is a rejection.

`-no-opt` keeps vasm from silently rewriting a statement into a different
instruction (ADD #1 into ADDQ, MOVE #0 into MOVEQ ...), which would time
the wrong encoding.

Failures of the environment are not rejections. A missing executable, an
unwritable scratch directory or a hung assembler raise an OracleError and
abort the run.
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from m68k_timing.errors import AssemblerNotFoundError, OracleTimeoutError, ScratchFileError
from m68k_timing.generator import CandidateStatement
from m68k_timing.oracles.base import Accepted, LegalityOracle, OracleResult, Rejected

logger = logging.getLogger(__name__)

DEFAULT_ASSEMBLER = "vasmm68k_mot"
DEFAULT_ASSEMBLER_FLAGS = ("-no-opt", "-m68000")
DEFAULT_TIMEOUT = 30.0


class VasmOracle(LegalityOracle):
    """
    Legality oracle backed by the vasm assembler.

    Instances are stateless apart from their settings and can be shared by
    all worker threads of a batch.

    Attributes:
        executable: Assembler command or path
        flags: Options placed before the source file
        timeout: Seconds allowed per statement (None waits forever)
    """

    def __init__(
        self,
        executable: str = DEFAULT_ASSEMBLER,
        flags: Sequence[str] = DEFAULT_ASSEMBLER_FLAGS,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
    ):
        self.executable = executable
        self.flags = tuple(flags)
        self.timeout = timeout

    def build_command(self, source: Path, output: Path) -> list[str]:
        """Return the argument vector for assembling `source` into `output`."""
        return [self.executable, *self.flags, str(source), "-Fbin", "-o", str(output)]

    def check_legality(self, candidate: CandidateStatement, workdir: Path) -> OracleResult:
        source = workdir / f"cand_{candidate.linear_index}.s"
        output = workdir / f"cand_{candidate.linear_index}.bin"

        # A token in column 0 is a label in Motorola syntax
        try:
            source.write_text(f" {candidate.text}\n")
        except OSError as e:
            raise ScratchFileError(
                f"cannot write scratch file {source}: {e}",
                index=candidate.linear_index,
                hint="check that the scratch directory is writable",
            ) from e

        cmd = self.build_command(source, output)

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise AssemblerNotFoundError(
                f"assembler '{self.executable}' not found",
                index=candidate.linear_index,
                hint="install vasm (vasmm68k_mot) or pass --assembler",
            ) from e
        except OSError as e:
            raise AssemblerNotFoundError(
                f"cannot launch assembler '{self.executable}': {e}",
                index=candidate.linear_index,
                hint="check that the assembler is an executable vasmm68k_mot binary",
            ) from e
        except subprocess.TimeoutExpired as e:
            raise OracleTimeoutError(
                f"assembler timed out after {self.timeout}s on '{candidate.text}'",
                index=candidate.linear_index,
                hint="raise --timeout or check the assembler installation",
            ) from e

        if result.returncode != 0:
            logger.debug(f"rejected '{candidate.text}' (exit {result.returncode})")
            return Rejected(result.stderr.strip())

        if not output.exists():
            logger.debug(f"rejected '{candidate.text}' (no output file)")
            return Rejected("no output produced")

        try:
            encoded = output.read_bytes()
        except OSError as e:
            raise ScratchFileError(
                f"cannot read assembler output {output}: {e}",
                index=candidate.linear_index,
            ) from e

        if not encoded:
            logger.debug(f"rejected '{candidate.text}' (empty output)")
            return Rejected("empty output")

        logger.debug(f"accepted '{candidate.text}' -> {encoded.hex()}")
        return Accepted(encoded)
