"""
M68K Timing Oracles
===================

Adapters to the authorities this tool consults but does not implement:

- **assembler**: VasmOracle decides legality of each candidate
- **core**: MusashiCore / MeasuredCostModel measure accepted encodings
- **rules**: CycleRuleEngine / RuleCostModel price them analytically
"""

from m68k_timing.oracles.base import (
    Accepted,
    AcceptedCandidate,
    CostModel,
    LegalityOracle,
    MeasurementCore,
    OracleResult,
    Rejected,
)
from m68k_timing.oracles.assembler import VasmOracle
from m68k_timing.oracles.core import MeasuredCostModel, MusashiCore
from m68k_timing.oracles.rules import CycleRuleEngine, RuleCostModel

__all__ = [
    "Accepted",
    "AcceptedCandidate",
    "CostModel",
    "LegalityOracle",
    "MeasurementCore",
    "OracleResult",
    "Rejected",
    "VasmOracle",
    "MeasuredCostModel",
    "MusashiCore",
    "CycleRuleEngine",
    "RuleCostModel",
]
