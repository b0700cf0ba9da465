"""
CommandContext - Encapsulates what a builtin may see of the interpreter.

This module provides the CommandContext dataclass that decouples builtins
from the Shell class, making them testable without a running loop.
"""

from dataclasses import dataclass, field
from typing import List

from .config import PROGRAM_NAME


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for builtin execution.

    This provides builtins with access to:
    - The interpreter name used to prefix error messages
    - The names of all registered builtins, in registration order

    Example:
        >>> from lsh_shell.context import CommandContext
        >>> ctx = CommandContext(builtin_names=['cd', 'help', 'exit'])
        >>> ctx.format_error('expected argument to "cd"')
        'lsh: expected argument to "cd"'
    """

    program_name: str = PROGRAM_NAME
    builtin_names: List[str] = field(default_factory=list)

    def format_error(self, message: str) -> str:
        """
        Prefix a message with the interpreter name.

        Args:
            message: Error text without trailing newline

        Returns:
            The prefixed message
        """
        return f"{self.program_name}: {message}"

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(program_name={self.program_name!r}, "
            f"builtins={len(self.builtin_names)})"
        )
