"""
Operand and Registry Tests
==========================

Tests for the static tables: operand catalogs, instruction registry,
documented tables and their import-time validation.

Test Categories
---------------
1. Operands: catalogs, classes and lookup
2. Registry: order, lookup, filtering
3. Validation: malformed definitions are refused
"""

import pytest

from m68k_timing.cpu.m68000 import (
    AN,
    DESTINATION_OPERANDS,
    DN,
    IMMEDIATE,
    SOURCE_OPERANDS,
    AddressingClass,
    OperandSize,
    OperandSpec,
    get_operand,
)
from m68k_timing.errors import RegistryError
from m68k_timing.isa.cycle_rules import ADD_SUB_RULES, CycleRule
from m68k_timing.isa.registry import (
    INSTRUCTIONS,
    MNEMONICS,
    Documented,
    InstructionDef,
    find_instruction,
    select_instructions,
    validate_registry,
)
from m68k_timing.isa.tables import SHIFT_WORD, DocumentedTable, ReferenceTable


# =============================================================================
# Operands
# =============================================================================

class TestOperands:
    """Tests for operand specs and catalogs."""

    def test_destination_catalog_order(self):
        assert DESTINATION_OPERANDS.display_names == [
            "Dn", "An", "(An)", "(An)+", "-(An)", "d(An)", "d(An,Dn)", "xxx.W", "xxx.L",
        ]

    def test_source_catalog_extends_destinations(self):
        assert len(SOURCE_OPERANDS) == 12
        assert SOURCE_OPERANDS.operands[:9] == DESTINATION_OPERANDS.operands
        assert SOURCE_OPERANDS.display_names[9:] == ["d(PC)", "d(PC,Dn)", "#xxx"]

    def test_classes(self):
        assert DN.addressing_class is AddressingClass.DATA_REGISTER
        assert AN.addressing_class is AddressingClass.ADDRESS_REGISTER
        assert IMMEDIATE.addressing_class is AddressingClass.IMMEDIATE
        assert get_operand("(An)+").is_memory
        assert not IMMEDIATE.is_memory

    def test_registers_have_no_extra_cycles(self):
        assert DN.base_extra_cycles == 0
        assert AN.base_extra_cycles == 0

    def test_any_class_refused(self):
        with pytest.raises(ValueError):
            OperandSpec("d0", "Dn", AddressingClass.ANY)

    def test_negative_extra_cycles_refused(self):
        with pytest.raises(ValueError):
            OperandSpec("d0", "Dn", AddressingClass.DATA_REGISTER, -2)

    def test_unknown_operand(self):
        with pytest.raises(KeyError):
            get_operand("(An,Xn)")

    def test_size_suffix(self):
        assert OperandSize.WORD.suffix == ""
        assert OperandSize.LONG.suffix == ".l"


# =============================================================================
# Registry
# =============================================================================

class TestRegistry:
    """Tests for the instruction registry."""

    def test_mnemonics_unique(self):
        assert len(MNEMONICS) == len(set(MNEMONICS))

    def test_report_order(self):
        assert MNEMONICS[0] == "abcd"
        assert MNEMONICS[-1] == "tst"
        assert MNEMONICS.index("bcc") < MNEMONICS.index("bchg")

    def test_find_instruction_case_insensitive(self):
        assert find_instruction("ADD") is find_instruction("add")
        assert find_instruction("movem") is None

    def test_add_is_measured_two_operand(self):
        add = find_instruction("add")
        assert add.is_measured
        assert add.arity == 2
        assert add.sizes == (OperandSize.WORD, OperandSize.LONG)
        assert add.cycle_rules == ADD_SUB_RULES

    def test_unsized_instructions(self):
        for mnemonic in ("nop", "rts", "rte", "illegal", "swap", "exg", "mulu", "divs"):
            assert find_instruction(mnemonic).sizes == (OperandSize.WORD,), mnemonic

    def test_no_operand_instructions(self):
        for mnemonic in ("nop", "rts", "rte", "illegal"):
            assert find_instruction(mnemonic).arity == 0

    def test_shifts_are_documented_with_long_table(self):
        for mnemonic in ("asl", "asr", "lsl", "lsr", "rol", "ror", "roxl", "roxr"):
            inst = find_instruction(mnemonic)
            assert inst.is_documented
            sizes = [size for size, _ in inst.timing_source.tables()]
            assert sizes == [OperandSize.WORD, OperandSize.LONG]

    def test_branch_tables_word_only(self):
        bcc = find_instruction("bcc")
        assert isinstance(bcc.timing_source, Documented)
        assert len(bcc.timing_source.tables()) == 1
        assert bcc.cc_table is not None

    def test_every_entry_has_description(self):
        assert all(inst.description is not None for inst in INSTRUCTIONS)

    def test_measured_rules_end_with_catch_all(self):
        for inst in INSTRUCTIONS:
            if inst.is_measured:
                assert inst.cycle_rules[-1].is_catch_all, inst.mnemonic

    def test_table_name(self):
        add = find_instruction("add")
        assert add.table_name(OperandSize.WORD) == "add"
        assert add.table_name(OperandSize.LONG) == "add.l"

    def test_select_all(self):
        assert select_instructions() == list(INSTRUCTIONS)
        assert select_instructions(()) == list(INSTRUCTIONS)

    def test_select_keeps_registry_order(self):
        selected = select_instructions(["tst", "ADD", "abcd"])
        assert [inst.mnemonic for inst in selected] == ["abcd", "add", "tst"]

    def test_select_unknown(self):
        with pytest.raises(RegistryError, match="movem"):
            select_instructions(["add", "movem"])


# =============================================================================
# Validation
# =============================================================================

class TestValidation:
    """Malformed definitions are rejected when they are built."""

    CATCH_ALL = (CycleRule(AddressingClass.ANY, AddressingClass.ANY, 4, 4),)

    def test_upper_case_mnemonic(self):
        with pytest.raises(RegistryError):
            InstructionDef("ADD", cycle_rules=self.CATCH_ALL)

    def test_too_many_operands(self):
        with pytest.raises(RegistryError, match="arity"):
            InstructionDef(
                "foo",
                (DESTINATION_OPERANDS,) * 3,
                cycle_rules=self.CATCH_ALL,
            )

    def test_measured_needs_rules(self):
        with pytest.raises(RegistryError, match="cycle rules"):
            InstructionDef("foo", (DESTINATION_OPERANDS,))

    def test_rules_need_catch_all(self):
        rules = (CycleRule(AddressingClass.ANY, AddressingClass.DATA_REGISTER, 4, 4),)
        with pytest.raises(RegistryError, match="catch-all"):
            InstructionDef("foo", (DESTINATION_OPERANDS,), cycle_rules=rules)

    def test_documented_needs_no_rules(self):
        inst = InstructionDef("foo", timing_source=Documented(SHIFT_WORD))
        assert inst.is_documented

    def test_duplicate_mnemonic(self):
        inst = InstructionDef("foo", cycle_rules=self.CATCH_ALL)
        with pytest.raises(RegistryError, match="duplicate"):
            validate_registry((inst, inst))

    def test_documented_row_length(self):
        with pytest.raises(RegistryError):
            DocumentedTable(header=("Dn", "An"), rows=(("#1", "8"),))

    def test_reference_row_length(self):
        with pytest.raises(RegistryError):
            ReferenceTable(header=("Mnemonic", "Condition"), rows=(("EQ",),))
