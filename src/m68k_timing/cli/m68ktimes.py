"""
m68ktimes - Instruction Timing Reference Command-Line Interface
===============================================================

Generates the Markdown timing reference for the Motorola 68000.

Every operand combination of a measured instruction is handed to the vasm
assembler; the combinations it accepts are priced by either the Musashi
core (--core) or the built-in cycle rules (--model analytical).

Usage Examples
--------------
Generate the full reference with the analytical model:
    $ m68ktimes generate -o timings.md

Measure with a compiled Musashi core:
    $ m68ktimes generate --core ./libmusashi.so -o timings.md

Only ADD and MOVE, eight assembler processes:
    $ m68ktimes generate -i add -i move -j 8

List the instruction registry:
    $ m68ktimes instructions

Environment
-----------
M68K_TIMING_ASSEMBLER, M68K_TIMING_JOBS, M68K_TIMING_TIMEOUT,
M68K_TIMING_CORE, M68K_TIMING_MODEL and M68K_TIMING_SCRATCH_DIR supply
defaults; command-line options override them.

Exit Codes
----------
0 - Success
1 - Generation error (assembler, core or table failure)
2 - Invalid arguments
3 - Internal error
"""

import logging
from pathlib import Path
from typing import Optional

import click

from m68k_timing import __version__
from m68k_timing.cli.errors import handle_cli_exception
from m68k_timing.config import COST_MODELS, GeneratorConfig
from m68k_timing.isa.registry import INSTRUCTIONS, select_instructions
from m68k_timing.pipeline import build_pipeline
from m68k_timing.render import TableRenderer

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores the verbosity flag set on the command group.
    """

    def __init__(self) -> None:
        self.verbose: bool = False

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else logging.INFO
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(message)s" if self.verbose else "%(message)s",
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def build_config(
    assembler: Optional[str],
    jobs: Optional[int],
    timeout: Optional[float],
    core: Optional[str],
    model: Optional[str],
    scratch_dir: Optional[str],
) -> GeneratorConfig:
    """Environment configuration with command-line overrides applied."""
    config = GeneratorConfig.from_env()

    if assembler:
        config.assembler = assembler
    if jobs is not None:
        config.jobs = jobs
    if timeout is not None:
        config.timeout = timeout
    if core:
        config.core_library = Path(core)
    if model:
        config.cost_model = model
    if scratch_dir:
        config.scratch_dir = Path(scratch_dir)

    return config


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output (per-candidate decisions, tracebacks)",
)
@click.version_option(version=__version__, prog_name="m68ktimes")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    Generate a Motorola 68000 instruction timing reference.

    Legality of each operand combination comes from the vasm assembler;
    cycle counts come from the Musashi core or from the analytical
    cycle rules.
    """
    ctx.verbose = verbose
    ctx.setup_logging()


# =============================================================================
# Generate Command
# =============================================================================

@main.command()
@click.option(
    "-i", "--instruction", "mnemonics",
    multiple=True,
    help="Only generate this instruction (repeatable)",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the report to a file instead of stdout",
)
@click.option(
    "-a", "--assembler",
    type=str,
    default=None,
    help="Assembler command or path (default: vasmm68k_mot)",
)
@click.option(
    "-j", "--jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Parallel assembler processes (default: CPU count)",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds allowed per assembler run (default: 30)",
)
@click.option(
    "--core",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Musashi shared library; selects the measured cost model",
)
@click.option(
    "--model",
    type=click.Choice(COST_MODELS),
    default=None,
    help="Cost model (default: measured with --core, otherwise analytical)",
)
@click.option(
    "--scratch-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Parent directory for scratch files (default: system temp)",
)
@pass_context
def generate(
    ctx: Context,
    mnemonics: tuple[str, ...],
    output: Optional[str],
    assembler: Optional[str],
    jobs: Optional[int],
    timeout: Optional[float],
    core: Optional[str],
    model: Optional[str],
    scratch_dir: Optional[str],
) -> None:
    """
    Generate the Markdown timing reference.

    Instructions are processed in registry order. Any assembler or core
    failure aborts the run with a message naming the instruction, size
    and candidate.

    Example:
        m68ktimes generate -o timings.md
        m68ktimes generate -i add -i sub --model analytical
    """
    try:
        instructions = select_instructions(mnemonics)
        config = build_config(assembler, jobs, timeout, core, model, scratch_dir)
        pipeline = build_pipeline(config)
        renderer = TableRenderer()

        sections = []
        for instruction in instructions:
            logger.info(f"Generating {instruction.mnemonic}")
            timings = pipeline.run_instruction(instruction)
            sections.append(renderer.render_instruction(instruction, timings.matrices))

        report = "".join(sections)

        if output:
            Path(output).write_text(report, encoding="utf-8")
            logger.info(f"Wrote {len(instructions)} instruction(s) to {output}")
        else:
            click.echo(report, nl=False)

    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Generation")


# =============================================================================
# Instructions Command
# =============================================================================

@main.command()
def instructions() -> None:
    """
    List the instruction registry.

    Shows each mnemonic with its operand count, generated sizes and where
    its timings come from.

    Example:
        m68ktimes instructions
    """
    click.echo(f"{'Mnemonic':<10} {'Operands':<9} {'Sizes':<6} Timing")
    click.echo("-" * 40)

    for inst in INSTRUCTIONS:
        if inst.is_documented:
            sizes = ",".join(size.value for size, _ in inst.timing_source.tables())
            source = "documented"
        else:
            sizes = ",".join(size.value for size in inst.sizes)
            source = "measured"
        click.echo(f"{inst.mnemonic:<10} {inst.arity:<9} {sizes:<6} {source}")

    click.echo(f"\n{len(INSTRUCTIONS)} instructions")


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
