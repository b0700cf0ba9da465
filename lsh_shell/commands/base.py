"""
Base utilities for command implementations.

This module provides common helper functions that command modules can use
to keep their error output consistent.
"""

from ..exceptions import MissingArgumentError, format_os_error
from ..process import Process


def write_error(process: Process, message: str):
    """
    Write an error message to stderr, prefixed with the interpreter name.

    Args:
        process: The process object
        message: The error message
    """
    process.write_error(message)


def validate_arg_count(process: Process, min_args: int = 0) -> bool:
    """
    Validate that the required arguments are present.

    Extra arguments are never an error; builtins ignore what they
    do not need.

    Args:
        process: The process object
        min_args: Minimum required arguments after the command name

    Returns:
        True if valid, False if invalid (error already written to stderr)
    """
    if len(process.args) < min_args:
        write_error(process, str(MissingArgumentError(process.command)))
        return False

    return True


def handle_os_error(process: Process, error: OSError):
    """
    Report an operating-system error the way perror does.

    Example:
        try:
            os.chdir(path)
        except OSError as e:
            handle_os_error(process, e)
    """
    process.stderr.write(format_os_error(process.context.program_name, error) + "\n")


__all__ = [
    'write_error',
    'validate_arg_count',
    'handle_os_error',
]
