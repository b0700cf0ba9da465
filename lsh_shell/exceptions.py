"""
Custom exception hierarchy for lsh.

This module defines a structured exception hierarchy that provides:
- Clear error categorization (fatal, command, process)
- Consistent, perror-style error messages
- Proper exit codes

Usage:
    from lsh_shell.exceptions import ForkError, format_os_error

    try:
        pid = launcher.spawn(argv)
    except ForkError as e:
        stderr.write(format_os_error("lsh", e) + "\\n")
"""

from typing import Optional


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Error message
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Fatal Errors
# =============================================================================

class FatalError(ShellError):
    """
    Base class for errors that terminate the interpreter.

    These are never caught by the dispatch loop.
    """
    pass


class AllocationError(FatalError):
    """
    Raised when memory runs out while reading or tokenizing a line.

    Example:
        raise AllocationError()
    """

    def __init__(self, message: str = "allocation error"):
        super().__init__(message, exit_code=1)


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when a builtin cannot carry out its work.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class MissingArgumentError(CommandError):
    """
    Raised when a builtin is invoked without a required argument.

    Example:
        raise MissingArgumentError("cd")
    """

    def __init__(self, command: str, message: Optional[str] = None):
        if message is None:
            message = f'expected argument to "{command}"'
        super().__init__(command, message, exit_code=1)


# =============================================================================
# Process Errors
# =============================================================================

class ProcessError(ShellError):
    """
    Base class for errors creating or loading an external program.

    Attributes:
        errno: Operating-system error number, if known
    """

    def __init__(self, message: str, errno: Optional[int] = None):
        super().__init__(message, exit_code=1)
        self.errno = errno


class ForkError(ProcessError):
    """
    Raised when the execution context cannot be duplicated.

    Example:
        raise ForkError.from_os_error(exc)
    """

    @classmethod
    def from_os_error(cls, error: OSError) -> 'ForkError':
        return cls(error.strerror or str(error), errno=error.errno)


class ExecError(ProcessError):
    """
    Raised in the child when the requested executable cannot be loaded.

    Example:
        raise ExecError("nonexistent", exc)
    """

    def __init__(self, program: str, error: Exception):
        # ValueError (embedded null byte) carries no strerror or errno
        strerror = getattr(error, "strerror", None)
        super().__init__(strerror or str(error), errno=getattr(error, "errno", None))
        self.program = program


# =============================================================================
# Utility Functions
# =============================================================================

def format_os_error(name: str, error: BaseException) -> str:
    """
    Render an error the way perror(3) does.

    Args:
        name: Prefix, normally the interpreter name
        error: The exception to describe

    Returns:
        A single line without trailing newline

    Example:
        >>> format_os_error('lsh', FileNotFoundError(2, 'No such file or directory'))
        'lsh: No such file or directory'
    """
    if isinstance(error, OSError) and error.strerror:
        return f"{name}: {error.strerror}"
    return f"{name}: {error}"
