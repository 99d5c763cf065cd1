"""
Unified CLI Error Handling
==========================

Provides consistent error reporting and exit codes for the command-line
tools. Disassembly errors exit with a code derived from their response
category, so scripts can tell "not supported" apart from "bad input".

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from polydisasm.errors import DisasmError, ErrorCategory, classify


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    NOT_IMPLEMENTED = 1  # Unsupported option or unimplemented architecture
    INVALID_ARGS = 2     # Bad width, syntax, options or missing files
    INTERNAL_ERROR = 3   # Engine failure or unexpected internal error


_CATEGORY_EXIT_CODES = {
    ErrorCategory.NOT_IMPLEMENTED: ExitCode.NOT_IMPLEMENTED,
    ErrorCategory.BAD_REQUEST: ExitCode.INVALID_ARGS,
    ErrorCategory.INTERNAL_ERROR: ExitCode.INTERNAL_ERROR,
}


def exit_code_for(category: ErrorCategory) -> ExitCode:
    """Exit code for a response category."""
    return _CATEGORY_EXIT_CODES[category]


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI tools.

    Formats the error message appropriately, optionally prints traceback
    in verbose mode, and exits with the correct exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, DisasmError):
        category = classify(error)
        click.echo(f"Error ({category}): {error}", err=True)
        sys.exit(exit_code_for(category))

    elif isinstance(error, (click.BadParameter, FileNotFoundError, PermissionError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
