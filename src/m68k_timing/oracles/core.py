"""
Cycle-Accurate Core Adapter
===========================

Measured cost model backed by a Musashi-based 68000 core compiled as a
shared library. The library must export the two wrapper entry points:

    void m68k_wrapper_init(void);
    void m68k_run_instructions(void *data, int inst_count, int *cycle_result);

`m68k_run_instructions` maps `data` as the core's ROM, pulses reset and
executes `inst_count` instructions, writing one cycle count per executed
instruction into `cycle_result`. Instruction boundaries inside the buffer
are the core's business.

Exclusivity
-----------
The core keeps its CPU state in C globals, so there is exactly one per
process. `init()` runs once per library no matter how many MusashiCore
objects exist, and every call into the library holds a process-wide lock.
Legality checks may run in parallel; measurements never do.

Failure Policy
--------------
There is no recovery path. A missing library, a missing symbol, a buffer
that does not fit the ROM window or a result of the wrong length raises
MeasurementError and the run is aborted. An in-process call cannot be
timed out.
"""

import ctypes
import logging
import threading
from pathlib import Path
from typing import Union

from m68k_timing.cpu.m68000 import OperandSize
from m68k_timing.errors import MeasurementError
from m68k_timing.oracles.base import AcceptedCandidate, CostModel, MeasurementCore

logger = logging.getLogger(__name__)

# The wrapper aborts the process on reads past address $FFF
ROM_SIZE = 0x1000

_CORE_LOCK = threading.Lock()
_LOADED: dict[str, ctypes.CDLL] = {}


class MusashiCore(MeasurementCore):
    """
    ctypes binding to the Musashi wrapper library.

    Args:
        library: Path to the shared library (.so / .dylib / .dll)
    """

    def __init__(self, library: Union[str, Path]):
        self.library = Path(library)
        self._lib = None

    def init(self) -> None:
        key = str(self.library.resolve())
        with _CORE_LOCK:
            lib = _LOADED.get(key)
            if lib is None:
                try:
                    lib = ctypes.CDLL(key)
                    lib.m68k_wrapper_init.argtypes = []
                    lib.m68k_wrapper_init.restype = None
                    lib.m68k_run_instructions.argtypes = [
                        ctypes.c_void_p,
                        ctypes.c_int,
                        ctypes.POINTER(ctypes.c_int),
                    ]
                    lib.m68k_run_instructions.restype = None
                except (OSError, AttributeError) as e:
                    raise MeasurementError(
                        f"cannot load core library {self.library}: {e}",
                        hint="build the Musashi wrapper as a shared library or use --model analytical",
                    ) from e

                lib.m68k_wrapper_init()
                _LOADED[key] = lib
                logger.info(f"Initialised cycle-accurate core from {self.library}")
            self._lib = lib

    def measure(self, buffer: bytes, count: int) -> list[int]:
        if self._lib is None:
            raise MeasurementError("core used before init()")
        if count == 0:
            return []
        if len(buffer) > ROM_SIZE:
            raise MeasurementError(
                f"instruction buffer of {len(buffer)} bytes exceeds the "
                f"{ROM_SIZE}-byte ROM window"
            )

        rom = ctypes.create_string_buffer(bytes(buffer), ROM_SIZE)
        cycles = (ctypes.c_int * count)()

        with _CORE_LOCK:
            self._lib.m68k_run_instructions(
                ctypes.cast(rom, ctypes.c_void_p),
                count,
                cycles,
            )

        result = list(cycles)
        if any(c < 0 for c in result):
            raise MeasurementError(f"core returned negative cycle counts: {result}")
        return result


class MeasuredCostModel(CostModel):
    """
    Cost model that runs accepted encodings on a MeasurementCore.

    All encodings of a batch are concatenated in submission order and
    measured with a single core call.
    """

    name = "measured"

    def __init__(self, core: MeasurementCore):
        self.core = core
        self.core.init()

    def measure(self, accepted: list[AcceptedCandidate], size: OperandSize) -> list[int]:
        if not accepted:
            return []

        buffer = b"".join(encoded for _, encoded in accepted)
        logger.debug(
            f"measuring {len(accepted)} {size.label.lower()} instructions "
            f"({len(buffer)} bytes)"
        )
        cycles = self.core.measure(buffer, len(accepted))

        if len(cycles) != len(accepted):
            raise MeasurementError(
                f"core returned {len(cycles)} cycle counts for {len(accepted)} instructions"
            )
        return cycles
