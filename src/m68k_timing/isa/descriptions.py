"""
M68000 Instruction Descriptions
===============================

Static reference text printed above each timing table: the operation
formula, the assembler syntax forms, the supported sizes, a description
paragraph and the effect on each condition code.

This module is pure data. Nothing here influences legality or timing; the
renderer only copies these strings into the report.

Condition Code Markers
----------------------
Each flag is rendered in the condition-code table with one marker:

    *   set according to the result
    0   always cleared
    -   not affected
    U   undefined after the operation

Reference
---------
- M68000 Family Programmer's Reference Manual (Motorola), section 4
"""

from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Condition Code Effects
# =============================================================================

class FlagEffect(Enum):
    """How an instruction changes one condition-code bit."""
    SET = auto()            # Set according to the result
    CLEAR = auto()          # Always cleared / cleared under a condition
    NOT_AFFECTED = auto()   # Left unchanged
    UNDEFINED = auto()      # Value undefined afterwards

    @property
    def marker(self) -> str:
        """Single-character marker used in the flag table."""
        return {
            FlagEffect.SET: "*",
            FlagEffect.CLEAR: "0",
            FlagEffect.NOT_AFFECTED: "-",
            FlagEffect.UNDEFINED: "U",
        }[self]


@dataclass(frozen=True)
class Flag:
    """
    Effect of an instruction on one condition code.

    Attributes:
        effect: Kind of change
        text: Explanation line, e.g. "Z — Set if the result is zero."
              Empty for UNDEFINED, where the renderer writes its own line.
    """
    effect: FlagEffect
    text: str = ""

    @property
    def is_affected(self) -> bool:
        return self.effect is not FlagEffect.NOT_AFFECTED


def _set(text: str) -> Flag:
    return Flag(FlagEffect.SET, text)


def _clear(text: str) -> Flag:
    return Flag(FlagEffect.CLEAR, text)


def _unaffected(name: str) -> Flag:
    return Flag(FlagEffect.NOT_AFFECTED, f"{name} — Not affected.")


UNDEFINED = Flag(FlagEffect.UNDEFINED)


@dataclass(frozen=True)
class FlagsDesc:
    """Effects on the five user condition codes X, N, Z, V, C."""
    x: Flag
    n: Flag
    z: Flag
    v: Flag
    c: Flag

    def items(self) -> list[tuple[str, Flag]]:
        """Flags in report order, paired with their letters."""
        return [("X", self.x), ("N", self.n), ("Z", self.z), ("V", self.v), ("C", self.c)]

    @property
    def any_affected(self) -> bool:
        return any(flag.is_affected for _, flag in self.items())


# =============================================================================
# Description Record
# =============================================================================

@dataclass(frozen=True)
class Description:
    """
    Reference text for one instruction.

    Attributes:
        description: Description paragraph
        operation: Operation formula, e.g. "Source + Destination → Destination"
        assembler: Assembler syntax forms
        attributes: Supported sizes, e.g. "Byte, Word, Long"
        flags: Condition code effects
    """
    description: str
    operation: str
    assembler: tuple[str, ...]
    attributes: str
    flags: FlagsDesc


# =============================================================================
# Shared Flag Sets
# =============================================================================

_N_RESULT = _set("N — Set if the result is negative; cleared otherwise.")
_Z_RESULT = _set("Z — Set if the result is zero; cleared otherwise.")
_V_CLEAR = _clear("V — Always cleared.")
_C_CLEAR = _clear("C — Always cleared.")

FLAGS_ARITH = FlagsDesc(
    x=_set("X — Set the same as the carry bit."),
    n=_N_RESULT,
    z=_Z_RESULT,
    v=_set("V — Set if an overflow is generated; cleared otherwise."),
    c=_set("C — Set if a carry is generated; cleared otherwise."),
)

FLAGS_SUB = FlagsDesc(
    x=_set("X — Set to the value of the carry bit."),
    n=_N_RESULT,
    z=_Z_RESULT,
    v=_set("V — Set if an overflow is generated; cleared otherwise."),
    c=_set("C — Set if a borrow is generated; cleared otherwise."),
)

FLAGS_EXTENDED = FlagsDesc(
    x=_set("X — Set the same as the carry bit."),
    n=_N_RESULT,
    z=_clear("Z — Cleared if the result is nonzero; unchanged otherwise."),
    v=_set("V — Set if an overflow is generated; cleared otherwise."),
    c=_set("C — Set if a carry or borrow is generated; cleared otherwise."),
)

FLAGS_BCD = FlagsDesc(
    x=_set("X — Set the same as the carry bit."),
    n=UNDEFINED,
    z=_clear("Z — Cleared if the result is nonzero; unchanged otherwise."),
    v=UNDEFINED,
    c=_set("C — Set if a decimal carry was generated; cleared otherwise."),
)

FLAGS_LOGIC = FlagsDesc(
    x=_unaffected("X"),
    n=_set("N — Set if the most significant bit of the result is set; cleared otherwise."),
    z=_Z_RESULT,
    v=_V_CLEAR,
    c=_C_CLEAR,
)

FLAGS_CLR = FlagsDesc(
    x=_unaffected("X"),
    n=_clear("N — Always cleared."),
    z=_set("Z — Always set."),
    v=_V_CLEAR,
    c=_C_CLEAR,
)

FLAGS_CMP = FlagsDesc(
    x=_unaffected("X"),
    n=_N_RESULT,
    z=_Z_RESULT,
    v=_set("V — Set if an overflow occurs; cleared otherwise."),
    c=_set("C — Set if a borrow occurs; cleared otherwise."),
)

FLAGS_BIT = FlagsDesc(
    x=_unaffected("X"),
    n=_unaffected("N"),
    z=_set("Z — Set if the bit tested is zero; cleared otherwise."),
    v=_unaffected("V"),
    c=_unaffected("C"),
)

FLAGS_NONE = FlagsDesc(
    x=_unaffected("X"),
    n=_unaffected("N"),
    z=_unaffected("Z"),
    v=_unaffected("V"),
    c=_unaffected("C"),
)

FLAGS_MUL = FlagsDesc(
    x=_unaffected("X"),
    n=_N_RESULT,
    z=_Z_RESULT,
    v=_V_CLEAR,
    c=_C_CLEAR,
)

FLAGS_DIV = FlagsDesc(
    x=_unaffected("X"),
    n=_set("N — Set if the quotient is negative; cleared otherwise; undefined if overflow or divide by zero occurs."),
    z=_set("Z — Set if the quotient is zero; cleared otherwise; undefined if overflow or divide by zero occurs."),
    v=_set("V — Set if division overflow occurs; undefined if divide by zero occurs; cleared otherwise."),
    c=_C_CLEAR,
)

FLAGS_ARITH_SHIFT = FlagsDesc(
    x=_set("X — Set according to the last bit shifted out of the operand; unaffected for a shift count of zero."),
    n=_set("N — Set if the most significant bit of the result is set; cleared otherwise."),
    z=_Z_RESULT,
    v=_set("V — Set if the most significant bit is changed at any time during the shift operation; cleared otherwise."),
    c=_set("C — Set according to the last bit shifted out of the operand; cleared for a shift count of zero."),
)

FLAGS_LOGICAL_SHIFT = FlagsDesc(
    x=_set("X — Set according to the last bit shifted out of the operand; unaffected for a shift count of zero."),
    n=_N_RESULT,
    z=_Z_RESULT,
    v=_V_CLEAR,
    c=_set("C — Set according to the last bit shifted out of the operand; cleared for a shift count of zero."),
)

FLAGS_ROTATE = FlagsDesc(
    x=_unaffected("X"),
    n=_set("N — Set if the most significant bit of the result is set; cleared otherwise."),
    z=_Z_RESULT,
    v=_V_CLEAR,
    c=_set("C — Set according to the last bit rotated out of the operand; cleared when the rotate count is zero."),
)

FLAGS_ROTATE_EXTEND = FlagsDesc(
    x=_set("X — Set to the value of the last bit rotated out of the operand; unaffected when the rotate count is zero."),
    n=_set("N — Set if the most significant bit of the result is set; cleared otherwise."),
    z=_Z_RESULT,
    v=_V_CLEAR,
    c=_set("C — Set according to the last bit rotated out of the operand; when the rotate count is zero, set to the value of the extend bit."),
)

FLAGS_FROM_STACK = FlagsDesc(
    x=_set("X — Set according to the condition code bits in the word popped from the stack."),
    n=_set("N — Set according to the condition code bits in the word popped from the stack."),
    z=_set("Z — Set according to the condition code bits in the word popped from the stack."),
    v=_set("V — Set according to the condition code bits in the word popped from the stack."),
    c=_set("C — Set according to the condition code bits in the word popped from the stack."),
)


# =============================================================================
# Instruction Descriptions
# =============================================================================

ABCD_DESC = Description(
    description=(
        "Adds the source operand to the destination operand along with the extend bit, "
        "and stores the result in the destination location. The addition is performed "
        "using binary-coded decimal arithmetic. The operands, which are packed "
        "binary-coded decimal numbers, can be addressed in two different ways:\n\n"
        "1. Data Register to Data Register: The operands are contained in the data "
        "registers specified in the instruction.\n\n"
        "2. Memory to Memory: The operands are addressed with the predecrement "
        "addressing mode using the address registers specified in the instruction.\n\n"
        "This operation is a byte operation only."
    ),
    operation="Source10 + Destination10 + X → Destination",
    assembler=("ABCD Dy,Dx", "ABCD -(Ay),-(Ax)"),
    attributes="Byte",
    flags=FLAGS_BCD,
)

ADD_DESC = Description(
    description=(
        "Adds the source operand to the destination operand using binary addition and "
        "stores the result in the destination location. The size of the operation may "
        "be specified as byte, word, or long. The mode of the instruction indicates "
        "which operand is the source and which is the destination, as well as the "
        "operand size."
    ),
    operation="Source + Destination → Destination",
    assembler=("ADD < ea > ,Dn", "ADD Dn, < ea >"),
    attributes="Byte, Word, Long",
    flags=FLAGS_ARITH,
)

ADDQ_DESC = Description(
    description=(
        "Adds an immediate value of one to eight to the operand at the destination "
        "location. The size of the operation may be specified as byte, word, or long. "
        "Word and long operations are also allowed on the address registers. When "
        "adding to address registers, the condition codes are not altered, and the "
        "entire destination address register is used regardless of the operation size."
    ),
    operation="Immediate Data + Destination → Destination",
    assembler=("ADDQ # < data > , < ea >",),
    attributes="Byte, Word, Long",
    flags=FLAGS_ARITH,
)

ADDX_DESC = Description(
    description=(
        "Adds the source operand and the extend bit to the destination operand and "
        "stores the result in the destination location. The operands can be addressed "
        "as data register to data register or as memory to memory using the "
        "predecrement addressing mode. The size of the operation can be byte, word, "
        "or long."
    ),
    operation="Source + Destination + X → Destination",
    assembler=("ADDX Dy,Dx", "ADDX -(Ay),-(Ax)"),
    attributes="Byte, Word, Long",
    flags=FLAGS_EXTENDED,
)

AND_DESC = Description(
    description=(
        "Performs an AND operation of the source operand with the destination operand "
        "and stores the result in the destination location. The size of the operation "
        "can be specified as byte, word, or long. The contents of an address register "
        "may not be used as an operand."
    ),
    operation="Source Λ Destination → Destination",
    assembler=("AND < ea > ,Dn", "AND Dn, < ea >"),
    attributes="Byte, Word, Long",
    flags=FLAGS_LOGIC,
)

ASL_ASR_DESC = Description(
    description=(
        "Arithmetically shifts the bits of the operand in the direction (L or R) "
        "specified. The carry bit receives the last bit shifted out of the operand. "
        "The shift count for the shifting of a register may be specified as an "
        "immediate count of 1 to 8 or as a data register holding the count modulo 64. "
        "A memory operand is shifted by one bit only and must be word sized. For ASL "
        "zeros are shifted into the low-order bit; for ASR the sign bit is replicated "
        "into the high-order bit."
    ),
    operation="Destination Shifted By Count → Destination",
    assembler=("ASd Dx,Dy", "ASd # < data > ,Dy", "ASd < ea >"),
    attributes="Byte, Word, Long",
    flags=FLAGS_ARITH_SHIFT,
)

BCC_DESC = Description(
    description=(
        "If the specified condition is true, program execution continues at location "
        "(PC) + displacement. The program counter contains the address of the "
        "instruction word for the Bcc instruction plus two. The displacement is a "
        "two's-complement integer that represents the relative distance in bytes from "
        "the current program counter to the destination program counter. If the 8-bit "
        "displacement field in the instruction word is zero, a 16-bit displacement "
        "(the word immediately following the instruction) is used."
    ),
    operation="If Condition True Then PC + dn → PC",
    assembler=("Bcc < label >",),
    attributes="Byte, Word",
    flags=FLAGS_NONE,
)

BCHG_DESC = Description(
    description=(
        "Tests a bit in the destination operand and sets the Z condition code "
        "appropriately, then inverts the specified bit in the destination. When the "
        "destination is a data register, any of the 32 bits can be specified by the "
        "modulo 32-bit number. When the destination is a memory location, the "
        "operation is a byte operation, and the bit number is modulo 8."
    ),
    operation="TEST ( < bit number > of Destination) → Z; ~ ( < bit number > of Destination) → < bit number > of Destination",
    assembler=("BCHG Dn, < ea >", "BCHG # < data > , < ea >"),
    attributes="Byte, Long",
    flags=FLAGS_BIT,
)

BCLR_DESC = Description(
    description=(
        "Tests a bit in the destination operand and sets the Z condition code "
        "appropriately, then clears the specified bit in the destination. When the "
        "destination is a data register, any of the 32 bits can be specified by a "
        "modulo 32-bit number. When the destination is a memory location, the "
        "operation is a byte operation, and the bit number is modulo 8."
    ),
    operation="TEST ( < bit number > of Destination) → Z; 0 → < bit number > of Destination",
    assembler=("BCLR Dn, < ea >", "BCLR # < data > , < ea >"),
    attributes="Byte, Long",
    flags=FLAGS_BIT,
)

BSET_DESC = Description(
    description=(
        "Tests a bit in the destination operand and sets the Z condition code "
        "appropriately, then sets the specified bit in the destination operand. When "
        "the destination is a data register, any of the 32 bits can be specified by "
        "a modulo 32-bit number. When the destination is a memory location, the "
        "operation is a byte operation, and the bit number is modulo 8."
    ),
    operation="TEST ( < bit number > of Destination) → Z; 1 → < bit number > of Destination",
    assembler=("BSET Dn, < ea >", "BSET # < data > , < ea >"),
    attributes="Byte, Long",
    flags=FLAGS_BIT,
)

BSR_DESC = Description(
    description=(
        "Pushes the long-word address of the instruction immediately following the "
        "BSR instruction onto the system stack. The program counter contains the "
        "address of the instruction word plus two. Program execution then continues "
        "at location (PC) + displacement."
    ),
    operation="SP - 4 → SP; PC → (SP); PC + dn → PC",
    assembler=("BSR < label >",),
    attributes="Byte, Word",
    flags=FLAGS_NONE,
)

BTST_DESC = Description(
    description=(
        "Tests a bit in the destination operand and sets the Z condition code "
        "appropriately. When the destination is a data register, any of the 32 bits "
        "can be specified by a modulo 32-bit number. When the destination is a memory "
        "location, the operation is a byte operation, and the bit number is modulo 8."
    ),
    operation="TEST ( < bit number > of Destination) → Z",
    assembler=("BTST Dn, < ea >", "BTST # < data > , < ea >"),
    attributes="Byte, Long",
    flags=FLAGS_BIT,
)

CLR_DESC = Description(
    description=(
        "Clears the destination operand to zero. The size of the operation may be "
        "specified as byte, word, or long."
    ),
    operation="0 → Destination",
    assembler=("CLR < ea >",),
    attributes="Byte, Word, Long",
    flags=FLAGS_CLR,
)

CMP_DESC = Description(
    description=(
        "Subtracts the source operand from the destination data register and sets the "
        "condition codes according to the result; the data register is not changed. "
        "The size of the operation can be byte, word, or long."
    ),
    operation="Destination - Source → cc",
    assembler=("CMP < ea > , Dn",),
    attributes="Byte, Word, Long",
    flags=FLAGS_CMP,
)

DBCC_DESC = Description(
    description=(
        "Controls a loop of instructions. The parameters are a condition code, a data "
        "register (counter), and a displacement value. The instruction first tests the "
        "condition for termination; if it is true, no operation is performed. If the "
        "termination condition is not true, the low-order 16 bits of the counter data "
        "register decrement by one. If the result is -1, execution continues with the "
        "next instruction. If the result is not equal to -1, execution continues at "
        "the location indicated by the current value of the program counter plus the "
        "sign-extended 16-bit displacement."
    ),
    operation="If Condition False Then (Dn - 1 → Dn; If Dn ≠ -1 Then PC + dn → PC)",
    assembler=("DBcc Dn, < label >",),
    attributes="Word",
    flags=FLAGS_NONE,
)

DIVS_DIVU_DESC = Description(
    description=(
        "Divides the destination operand by the source operand and stores the result "
        "in the destination. The destination operand is a long operand (32 bits) and "
        "the source operand is a word (16-bit) operand. The operation is performed "
        "using signed (DIVS) or unsigned (DIVU) arithmetic. The result is a 32-bit "
        "result: the quotient is in the lower word and the remainder is in the upper "
        "word. Two special conditions may arise: division by zero causes a trap, and "
        "overflow may be detected and set before the instruction completes, in which "
        "case the operands are unaffected."
    ),
    operation="Destination / Source → Destination",
    assembler=("DIVS.W < ea > ,Dn", "DIVU.W < ea > ,Dn"),
    attributes="Word",
    flags=FLAGS_DIV,
)

EOR_DESC = Description(
    description=(
        "Performs an exclusive-OR operation on the destination operand using the "
        "source operand and stores the result in the destination location. The size "
        "of the operation may be specified to be byte, word, or long. The source "
        "operand must be a data register. The destination operand is specified in "
        "the effective address field."
    ),
    operation="Source ⊕ Destination → Destination",
    assembler=("EOR Dn, < ea >",),
    attributes="Byte, Word, Long",
    flags=FLAGS_LOGIC,
)

EXG_DESC = Description(
    description=(
        "Exchanges the contents of two 32-bit registers. The instruction performs "
        "three types of exchanges: exchange data registers, exchange address "
        "registers, and exchange a data register and an address register."
    ),
    operation="Rx ←→ Ry",
    assembler=("EXG Dx,Dy", "EXG Ax,Ay", "EXG Dx,Ay"),
    attributes="Long",
    flags=FLAGS_NONE,
)

EXT_DESC = Description(
    description=(
        "Extends a byte in a data register to a word or a long word, or a word in a "
        "data register to a long word, by replicating the sign bit to the left. If "
        "the operation extends a byte to a word, bit 7 of the designated data "
        "register is copied to bits 15 – 8 of that data register. If the operation "
        "extends a word to a long word, bit 15 of the designated data register is "
        "copied to bits 31 – 16 of the data register."
    ),
    operation="Destination Sign-Extended → Destination",
    assembler=("EXT.W Dn", "EXT.L Dn"),
    attributes="Word, Long",
    flags=FLAGS_LOGIC,
)

ILLEGAL_DESC = Description(
    description=(
        "Forces an illegal instruction exception, vector number 4. All other illegal "
        "instruction bit patterns are reserved for future extension of the instruction "
        "set and should not be used to force an exception."
    ),
    operation="SSP - 4 → SSP; PC → (SSP); SSP - 2 → SSP; SR → (SSP); Illegal Instruction Vector Address → PC",
    assembler=("ILLEGAL",),
    attributes="Unsized",
    flags=FLAGS_NONE,
)

JMP_DESC = Description(
    description=(
        "Program execution continues at the effective address specified by the "
        "instruction. The addressing mode for the effective address must be a control "
        "addressing mode."
    ),
    operation="Destination Address → PC",
    assembler=("JMP < ea >",),
    attributes="Unsized",
    flags=FLAGS_NONE,
)

JSR_DESC = Description(
    description=(
        "Pushes the long-word address of the instruction immediately following the "
        "JSR instruction onto the system stack. Program execution then continues at "
        "the address specified in the instruction."
    ),
    operation="SP - 4 → SP; PC → (SP); Destination Address → PC",
    assembler=("JSR < ea >",),
    attributes="Unsized",
    flags=FLAGS_NONE,
)

LEA_DESC = Description(
    description=(
        "Loads the effective address into the specified address register. All 32 bits "
        "of the address register are affected by this instruction."
    ),
    operation="< ea > → An",
    assembler=("LEA < ea > ,An",),
    attributes="Long",
    flags=FLAGS_NONE,
)

LSL_LSR_DESC = Description(
    description=(
        "Shifts the bits of the destination operand in the direction (L or R) "
        "specified. The carry bit receives the last bit shifted out of the operand. "
        "The shift count for the shifting of a register may be specified as an "
        "immediate count of 1 to 8 or as a data register holding the count modulo 64. "
        "A memory operand is shifted by one bit only and must be word sized. Zeros "
        "are shifted into the vacated bit positions."
    ),
    operation="Destination Shifted By Count → Destination",
    assembler=("LSd Dx,Dy", "LSd # < data > ,Dy", "LSd < ea >"),
    attributes="Byte, Word, Long",
    flags=FLAGS_LOGICAL_SHIFT,
)

MOVE_DESC = Description(
    description=(
        "Moves the data at the source to the destination location, and sets the "
        "condition codes according to the data. The size of the operation may be "
        "specified as byte, word, or long."
    ),
    operation="Source → Destination",
    assembler=("MOVE < ea > , < ea >",),
    attributes="Byte, Word, Long",
    flags=FLAGS_LOGIC,
)

MULS_DESC = Description(
    description=(
        "Multiplies two signed 16-bit operands yielding a 32-bit signed result. The "
        "multiplier and multiplicand are both word operands, and the result is a "
        "long-word operand stored in the destination data register."
    ),
    operation="Source x Destination → Destination",
    assembler=("MULS.W < ea > ,Dn",),
    attributes="Word",
    flags=FLAGS_MUL,
)

MULU_DESC = Description(
    description=(
        "Multiplies two unsigned 16-bit operands yielding a 32-bit unsigned result. "
        "The multiplier and multiplicand are both word operands, and the result is a "
        "long-word operand stored in the destination data register."
    ),
    operation="Source x Destination → Destination",
    assembler=("MULU.W < ea > ,Dn",),
    attributes="Word",
    flags=FLAGS_MUL,
)

NEG_DESC = Description(
    description=(
        "Subtracts the destination operand from zero and stores the result in the "
        "destination location. The size of the operation is specified as byte, word, "
        "or long."
    ),
    operation="0 - Destination → Destination",
    assembler=("NEG < ea >",),
    attributes="Byte, Word, Long",
    flags=FLAGS_SUB,
)

NEGX_DESC = Description(
    description=(
        "Subtracts the destination operand and the extend bit from zero. Stores the "
        "result in the destination location. The size of the operation is specified "
        "as byte, word, or long."
    ),
    operation="0 - Destination - X → Destination",
    assembler=("NEGX < ea >",),
    attributes="Byte, Word, Long",
    flags=FLAGS_EXTENDED,
)

NOP_DESC = Description(
    description=(
        "Performs no operation. The processor state, other than the program counter, "
        "is unaffected. Execution continues with the instruction following the NOP "
        "instruction. The NOP instruction does not begin execution until all pending "
        "bus cycles have completed."
    ),
    operation="None",
    assembler=("NOP",),
    attributes="Unsized",
    flags=FLAGS_NONE,
)

NOT_DESC = Description(
    description=(
        "Calculates the ones complement of the destination operand and stores the "
        "result in the destination location. The size of the operation is specified "
        "as byte, word, or long."
    ),
    operation="~ Destination → Destination",
    assembler=("NOT < ea >",),
    attributes="Byte, Word, Long",
    flags=FLAGS_LOGIC,
)

OR_DESC = Description(
    description=(
        "Performs an inclusive-OR operation on the source operand and the destination "
        "operand and stores the result in the destination location. The size of the "
        "operation is specified as byte, word, or long. The contents of an address "
        "register may not be used as an operand."
    ),
    operation="Source V Destination → Destination",
    assembler=("OR < ea > ,Dn", "OR Dn, < ea >"),
    attributes="Byte, Word, Long",
    flags=FLAGS_LOGIC,
)

PEA_DESC = Description(
    description=(
        "Computes the effective address and pushes it onto the stack. The effective "
        "address is a long address."
    ),
    operation="SP - 4 → SP; < ea > → (SP)",
    assembler=("PEA < ea >",),
    attributes="Long",
    flags=FLAGS_NONE,
)

ROL_ROR_DESC = Description(
    description=(
        "Rotates the bits of the operand in the direction (L or R) specified. The "
        "extend bit is not included in the rotation. The rotate count for the "
        "rotation of a register may be specified as an immediate count of 1 to 8 or "
        "as a data register holding the count modulo 64. A memory operand is rotated "
        "by one bit only and must be word sized."
    ),
    operation="Destination Rotated By Count → Destination",
    assembler=("ROd Dx,Dy", "ROd # < data > ,Dy", "ROd < ea >"),
    attributes="Byte, Word, Long",
    flags=FLAGS_ROTATE,
)

ROXL_ROXR_DESC = Description(
    description=(
        "Rotates the bits of the operand in the direction (L or R) specified. The "
        "extend bit is included in the rotation. The rotate count for the rotation of "
        "a register may be specified as an immediate count of 1 to 8 or as a data "
        "register holding the count modulo 64. A memory operand is rotated by one bit "
        "only and must be word sized."
    ),
    operation="Destination Rotated With X By Count → Destination",
    assembler=("ROXd Dx,Dy", "ROXd # < data > ,Dy", "ROXd < ea >"),
    attributes="Byte, Word, Long",
    flags=FLAGS_ROTATE_EXTEND,
)

RTE_DESC = Description(
    description=(
        "Loads the processor state information stored in the exception stack frame "
        "located at the top of the stack into the processor. The instruction examines "
        "the stack format field in the format/offset word to determine how much "
        "information must be restored. This is a privileged instruction."
    ),
    operation="If Supervisor State Then (SP) → SR; SP + 2 → SP; (SP) → PC; SP + 4 → SP Else TRAP",
    assembler=("RTE",),
    attributes="Unsized",
    flags=FLAGS_FROM_STACK,
)

RTS_DESC = Description(
    description=(
        "Pulls the program counter value from the stack. The previous program counter "
        "value is lost."
    ),
    operation="(SP) → PC; SP + 4 → SP",
    assembler=("RTS",),
    attributes="Unsized",
    flags=FLAGS_NONE,
)

SCC_DESC = Description(
    description=(
        "Tests the specified condition code; if the condition is true, sets the byte "
        "specified by the effective address to TRUE (all ones). Otherwise, sets that "
        "byte to FALSE (all zeros)."
    ),
    operation="If Condition True Then 1s → Destination Else 0s → Destination",
    assembler=("Scc < ea >",),
    attributes="Byte",
    flags=FLAGS_NONE,
)

SUB_DESC = Description(
    description=(
        "Subtracts the source operand from the destination operand and stores the "
        "result in the destination. The size of the operation is specified as byte, "
        "word, or long. The mode of the instruction indicates which operand is the "
        "source, which is the destination, and which is the operand size."
    ),
    operation="Destination - Source → Destination",
    assembler=("SUB < ea > ,Dn", "SUB Dn, < ea >"),
    attributes="Byte, Word, Long",
    flags=FLAGS_SUB,
)

SUBQ_DESC = Description(
    description=(
        "Subtracts the immediate data (1 – 8) from the destination operand. The size "
        "of the operation is specified as byte, word, or long. Only word and long "
        "operations can be used with address registers, and the condition codes are "
        "not affected. When subtracting from address registers, the entire "
        "destination address register is used, despite the operation size."
    ),
    operation="Destination - Immediate Data → Destination",
    assembler=("SUBQ # < data > , < ea >",),
    attributes="Byte, Word, Long",
    flags=FLAGS_SUB,
)

SUBX_DESC = Description(
    description=(
        "Subtracts the source operand and the extend bit from the destination operand "
        "and stores the result in the destination location. The instruction has two "
        "modes: data register to data register, and memory to memory using the "
        "predecrement addressing mode. The size of the operand is specified as byte, "
        "word, or long."
    ),
    operation="Destination - Source - X → Destination",
    assembler=("SUBX Dx,Dy", "SUBX -(Ax),-(Ay)"),
    attributes="Byte, Word, Long",
    flags=FLAGS_EXTENDED,
)

SWAP_DESC = Description(
    description="Exchange the 16-bit words (halves) of a data register.",
    operation="Register 31 – 16 ←→ Register 15 – 0",
    assembler=("SWAP Dn",),
    attributes="Word",
    flags=FLAGS_LOGIC,
)

TST_DESC = Description(
    description=(
        "Compares the operand with zero and sets the condition codes according to the "
        "results of the test. The size of the operation is specified as byte, word, "
        "or long."
    ),
    operation="Destination Tested → Condition Codes",
    assembler=("TST < ea >",),
    attributes="Byte, Word, Long",
    flags=FLAGS_LOGIC,
)


def describe_flag(name: str, flag: Flag) -> str:
    """
    Return the prose line for one flag.

    Undefined flags carry no text of their own.
    """
    if flag.effect is FlagEffect.UNDEFINED:
        return f"{name} — Undefined."
    return flag.text
