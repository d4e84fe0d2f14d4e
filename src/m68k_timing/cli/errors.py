"""
Unified CLI Error Handling
==========================

Consistent error messages and exit codes for the m68ktimes commands.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    GENERATION_ERROR = 1  # Oracle failure or broken static tables
    INVALID_ARGS = 2      # Invalid arguments or missing files
    INTERNAL_ERROR = 3    # Unexpected internal error


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    error_type: str | None = None
) -> NoReturn:
    """
    Report an exception and exit with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors
        error_type: Optional prefix for the error message (e.g., "Generation")

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from m68k_timing.errors import OracleError, RegistryError, TimingError

    if isinstance(error, OracleError):
        # Oracle errors already carry "<mnemonic>.<size> [candidate N]: error:"
        click.echo(str(error), err=True)
        sys.exit(ExitCode.GENERATION_ERROR)

    elif isinstance(error, RegistryError) and error.mnemonic is None:
        # Unknown mnemonic on the command line
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, TimingError):
        prefix = f"{error_type} error: " if error_type else "Error: "
        click.echo(f"{prefix}{error}", err=True)
        sys.exit(ExitCode.GENERATION_ERROR)

    elif isinstance(error, click.BadParameter):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    elif isinstance(error, (FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
