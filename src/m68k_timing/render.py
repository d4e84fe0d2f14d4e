"""
Markdown Report Renderer
========================

Turns registry descriptions and result matrices into the Markdown timing
reference. One section per instruction:

    ## ADD

    **Operation:**      Source + Destination → Destination

    | Assembler Syntax | ADD < ea > ,Dn | ADD Dn, < ea > |
    |------------------|----------------|----------------|

    **Attributes:** Size = (Byte, Word, Long)

    **Description:** ...

    ### Condition Codes:
    ...

    ### Instruction Execution Times:

    | add      | Dn | An | (An) | ...
    |----------|----|----|------|
    | Dn       | 4  | 8  |  12  | ...

Grid cells are centred on their column header; a rejected operand pairing
prints as "*". Source rows without a single legal pairing are left out,
and a grid with no legal pairing at all is not printed.

The renderer performs no I/O. It returns strings and the CLI decides where
they go.
"""

from typing import Mapping, Optional, Sequence

from m68k_timing.cpu.m68000 import OperandSize
from m68k_timing.isa.descriptions import Description, FlagsDesc, describe_flag
from m68k_timing.isa.registry import InstructionDef
from m68k_timing.isa.tables import DocumentedTable, ReferenceTable
from m68k_timing.matrix import Cell, ResultMatrix

# Mnemonics whose heading is not simply the upper-case mnemonic
HEADING_OVERRIDES = {
    "bcc": "Bcc",
    "scc": "Scc",
    "dbcc": "DBcc",
}

# Minimum width of the first (row label) column
NAME_WIDTH = 9

HOLE = "*"


def heading_name(mnemonic: str) -> str:
    """Section heading for a mnemonic, e.g. "add" -> "ADD", "dbcc" -> "DBcc"."""
    return HEADING_OVERRIDES.get(mnemonic, mnemonic.upper())


def format_cell(cell: Cell) -> str:
    return HOLE if cell is None else str(cell)


class TableRenderer:
    """
    Markdown renderer for instruction sections.

    Each public method returns a complete block of text ending in a newline;
    the renderer keeps its output buffer only for the duration of one call.
    """

    def __init__(self):
        self._output: list[str] = []

    # =========================================================================
    # Output Buffer
    # =========================================================================

    def _emit(self, line: str = "") -> None:
        self._output.append(line)

    def _take(self) -> str:
        text = "\n".join(self._output) + "\n"
        self._output = []
        return text

    # =========================================================================
    # Public API
    # =========================================================================

    def render_report(
        self,
        sections: Sequence[tuple[InstructionDef, Mapping[OperandSize, ResultMatrix]]],
    ) -> str:
        """Render several instruction sections in the given order."""
        return "".join(
            self.render_instruction(instruction, matrices)
            for instruction, matrices in sections
        )

    def render_instruction(
        self,
        instruction: InstructionDef,
        matrices: Optional[Mapping[OperandSize, ResultMatrix]] = None,
    ) -> str:
        """
        Render the full section for one instruction.

        Args:
            instruction: Registry entry
            matrices: Result matrix per size (ignored for documented
                      instructions)
        """
        matrices = matrices or {}

        self._emit(f"## {heading_name(instruction.mnemonic)}")
        self._emit()

        if instruction.description is not None:
            self._emit_description(instruction.description)
            if instruction.cc_table is not None:
                self._emit_reference_table(instruction.cc_table)
            self._emit_flags(instruction.description.flags)
        else:
            self._emit("__No Description__")
            self._emit()

        self._emit("### Instruction Execution Times:")
        self._emit()

        if instruction.is_documented:
            for size, table in instruction.timing_source.tables():
                self._emit_documented_table(instruction.table_name(size), table)
        else:
            for size in instruction.sizes:
                matrix = matrices.get(size)
                if matrix is not None:
                    self._emit_timing_table(instruction, size, matrix)

        return self._take()

    def render_matrix(
        self,
        instruction: InstructionDef,
        size: OperandSize,
        matrix: ResultMatrix,
    ) -> str:
        """Render only the execution time table of one batch."""
        self._emit_timing_table(instruction, size, matrix)
        return self._take()

    # =========================================================================
    # Description Blocks
    # =========================================================================

    def _emit_description(self, desc: Description) -> None:
        self._emit(f"**Operation:**      {desc.operation}")
        self._emit()

        header = "| Assembler Syntax "
        rule = "|------------------"
        for form in desc.assembler:
            header += f"| {form} "
            rule += "|" + "-" * (len(form) + 2)
        self._emit(header + "|")
        self._emit(rule + "|")
        self._emit()

        self._emit(f"**Attributes:** Size = ({desc.attributes})")
        self._emit()
        self._emit(f"**Description:** {desc.description}")
        self._emit()

    def _emit_flags(self, flags: FlagsDesc) -> None:
        self._emit("### Condition Codes:")
        self._emit()

        if not flags.any_affected:
            self._emit("Not affected.")
            self._emit()
            return

        items = flags.items()
        self._emit("| " + " | ".join(letter for letter, _ in items) + " |")
        self._emit("|" + "---|" * len(items))
        self._emit("| " + " | ".join(flag.effect.marker for _, flag in items) + " |")

        # Two trailing spaces force a Markdown line break
        for letter, flag in items:
            self._emit(f"{describe_flag(letter, flag)}  ")
        self._emit()

    def _emit_reference_table(self, table: ReferenceTable) -> None:
        widths = [len(h) for h in table.header]

        self._emit("".join(f"| {h} " for h in table.header) + "|")
        self._emit("".join("|" + "-" * (w + 2) for w in widths) + "|")
        for row in table.rows:
            self._emit("".join(f"| {entry:<{w + 1}}" for entry, w in zip(row, widths)) + "|")
        self._emit()

    # =========================================================================
    # Timing Tables
    # =========================================================================

    def _emit_timing_table(
        self,
        instruction: InstructionDef,
        size: OperandSize,
        matrix: ResultMatrix,
    ) -> None:
        name = instruction.table_name(size)
        catalogs = instruction.operand_catalogs

        if len(catalogs) == 2:
            self._emit_grid(name, catalogs[0].display_names, catalogs[1].display_names, matrix)
        elif len(catalogs) == 1:
            self._emit_single_row(name, catalogs[0].display_names, matrix)
        else:
            self._emit_no_operands(name, matrix[0])

    def _emit_header(self, name: str, columns: Sequence[str]) -> None:
        width = max(NAME_WIDTH, len(name))
        self._emit(f"| {name:<{width}}" + "".join(f"| {c} " for c in columns) + "|")
        self._emit("|" + "-" * (width + 1) + "".join("|" + "-" * (len(c) + 2) for c in columns) + "|")

    def _format_row(self, label: str, columns: Sequence[str], cells: Sequence[Cell]) -> str:
        width = max(NAME_WIDTH, len(label))
        line = f"| {label:<{width}}"
        for column, cell in zip(columns, cells):
            line += f"|{format_cell(cell):^{len(column) + 2}}"
        return line + "|"

    def _emit_grid(
        self,
        name: str,
        sources: Sequence[str],
        destinations: Sequence[str],
        matrix: ResultMatrix,
    ) -> None:
        if matrix.is_empty:
            return

        self._emit_header(name, destinations)
        for row, source in enumerate(sources):
            if matrix.row_is_empty(row):
                continue
            self._emit(self._format_row(source, destinations, matrix.row(row)))
        self._emit()

    def _emit_single_row(self, name: str, destinations: Sequence[str], matrix: ResultMatrix) -> None:
        self._emit_header(name, destinations)
        self._emit(self._format_row(" ", destinations, matrix.row(0)))
        self._emit()

    def _emit_no_operands(self, name: str, cell: Cell) -> None:
        value = format_cell(cell)
        self._emit(f"| {name} | {value} |")
        self._emit("|" + "-" * (len(name) + 2) + "|" + "-" * (len(value) + 2) + "|")
        self._emit()

    def _emit_documented_table(self, name: str, table: DocumentedTable) -> None:
        widths = [len(name)] + [len(h) for h in table.header]

        self._emit(f"| {name} " + "".join(f"| {h} " for h in table.header) + "|")
        self._emit("".join("|" + "-" * (w + 2) for w in widths) + "|")
        for row in table.rows:
            self._emit("".join(f"| {entry:<{w + 1}}" for entry, w in zip(row, widths)) + "|")
        self._emit()
