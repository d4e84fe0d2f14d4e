"""
Candidate Generator Tests
=========================

Tests for candidate statement generation and grid addressing.
"""

from m68k_timing.cpu.m68000 import DESTINATION_OPERANDS, SOURCE_OPERANDS, AN, DN, OperandSize
from m68k_timing.generator import format_statement, generate_candidates, grid_shape
from m68k_timing.isa.registry import find_instruction


class TestFormatStatement:
    """Tests for assembler source text."""

    def test_word_has_no_suffix(self):
        assert format_statement("add", OperandSize.WORD, (DN, AN)) == "add d0,a0"

    def test_long_suffix(self):
        assert format_statement("add", OperandSize.LONG, (DN, AN)) == "add.l d0,a0"

    def test_single_operand(self):
        assert format_statement("clr", OperandSize.WORD, (DN,)) == "clr d0"

    def test_no_operands(self):
        assert format_statement("nop", OperandSize.WORD, ()) == "nop"


class TestGenerateCandidates:
    """Tests for the Cartesian product and linear indices."""

    def test_two_operand_count(self):
        candidates = generate_candidates(find_instruction("add"), OperandSize.WORD)
        assert len(candidates) == len(SOURCE_OPERANDS) * len(DESTINATION_OPERANDS)

    def test_linear_index_resolves_to_pair(self):
        candidates = generate_candidates(find_instruction("add"), OperandSize.LONG)
        columns = len(DESTINATION_OPERANDS)

        for i, source in enumerate(SOURCE_OPERANDS):
            for j, destination in enumerate(DESTINATION_OPERANDS):
                candidate = candidates[i * columns + j]
                assert candidate.linear_index == i * columns + j
                assert candidate.source is source
                assert candidate.destination is destination

    def test_texts(self):
        candidates = generate_candidates(find_instruction("add"), OperandSize.LONG)
        assert candidates[0].text == "add.l d0,d0"
        assert candidates[1].text == "add.l d0,a0"
        assert candidates[-1].text == "add.l #8,$4.L"

    def test_one_operand(self):
        candidates = generate_candidates(find_instruction("clr"), OperandSize.WORD)
        assert len(candidates) == len(DESTINATION_OPERANDS)
        assert candidates[2].text == "clr (a0)"
        assert candidates[2].source is None
        assert candidates[2].destination.display_name == "(An)"

    def test_no_operands(self):
        candidates = generate_candidates(find_instruction("nop"), OperandSize.WORD)
        assert len(candidates) == 1
        assert candidates[0].linear_index == 0
        assert candidates[0].text == "nop"
        assert candidates[0].source is None
        assert candidates[0].destination is None

    def test_candidates_carry_size(self):
        candidates = generate_candidates(find_instruction("tst"), OperandSize.LONG)
        assert all(c.size is OperandSize.LONG for c in candidates)


class TestGridShape:
    """Tests for result grid dimensions."""

    def test_two_operands(self):
        assert grid_shape(find_instruction("move")) == (12, 9)

    def test_one_operand(self):
        assert grid_shape(find_instruction("tst")) == (1, 9)

    def test_no_operands(self):
        assert grid_shape(find_instruction("rts")) == (1, 1)
