"""
Cycle Rule Engine
=================

Analytical cost model: prices accepted candidates from the ordered cycle
rules in the instruction registry instead of running them on a core.

    cost = rule.cycles_for(size)
         + source.base_extra_cycles + destination.base_extra_cycles
         + 4 per MEMORY operand when the size is long

The first matching rule wins. Register operands add nothing; immediate
operands add their extension-word time but no long penalty.
"""

from typing import Optional, Sequence

from m68k_timing.cpu.m68000 import OperandSize, OperandSpec
from m68k_timing.errors import RuleMatchError
from m68k_timing.isa.cycle_rules import CycleRule
from m68k_timing.oracles.base import AcceptedCandidate, CostModel

# Extra bus cycles for the second word of a long memory access
LONG_MEMORY_PENALTY = 4


class CycleRuleEngine:
    """Evaluates ordered cycle rules against operand addressing classes."""

    def match(
        self,
        rules: Sequence[CycleRule],
        source: Optional[OperandSpec],
        destination: Optional[OperandSpec],
        mnemonic: str = "?",
    ) -> CycleRule:
        """
        Return the first rule matching the operands.

        Raises:
            RuleMatchError: If no rule matches
        """
        src_class = source.addressing_class if source else None
        dst_class = destination.addressing_class if destination else None

        for rule in rules:
            if rule.matches(src_class, dst_class):
                return rule

        raise RuleMatchError(mnemonic, str(source or "none"), str(destination or "none"))

    def cost(
        self,
        rules: Sequence[CycleRule],
        source: Optional[OperandSpec],
        destination: Optional[OperandSpec],
        size: OperandSize,
        mnemonic: str = "?",
    ) -> int:
        """Cycle count of one operand pairing at the given size."""
        rule = self.match(rules, source, destination, mnemonic)
        cycles = rule.cycles_for(size)

        for operand in (source, destination):
            if operand is None:
                continue
            cycles += operand.base_extra_cycles
            if size is OperandSize.LONG and operand.is_memory:
                cycles += LONG_MEMORY_PENALTY

        return cycles


class RuleCostModel(CostModel):
    """Cost model backed by the CycleRuleEngine; needs no external core."""

    name = "analytical"

    def __init__(self, engine: Optional[CycleRuleEngine] = None):
        self.engine = engine or CycleRuleEngine()

    def measure(self, accepted: list[AcceptedCandidate], size: OperandSize) -> list[int]:
        return [
            self.engine.cost(
                candidate.instruction.cycle_rules,
                candidate.source,
                candidate.destination,
                size,
                candidate.instruction.mnemonic,
            )
            for candidate, _ in accepted
        ]
