"""Builtin command registry.

This module provides the BuiltinRegistry class which handles:
- Exact-name lookup of builtin handlers
- Invocation of a handler with the current argument vector
- Listing builtin names in registration order (used by help)

The handlers themselves live in the commands/ directory.
"""

from types import MappingProxyType
from typing import Callable, Iterator, List, Mapping, Optional

from .commands import load_all_commands, BUILTINS as COMMANDS
from .context import CommandContext
from .exit_codes import Status
from .process import Process

# Load all command modules to populate the table
load_all_commands()

# Read-only view; the table is fixed once the command modules are loaded
BUILTINS: Mapping[str, Callable[[Process], Status]] = MappingProxyType(COMMANDS)


class BuiltinRegistry:
    """Registry of in-process commands.

    The mapping is copied on construction and never modified afterwards.

    Example:
        >>> registry = BuiltinRegistry()
        >>> registry.names()
        ['cd', 'help', 'exit']
        >>> 'cd' in registry
        True

    Attributes:
        _handlers: Read-only mapping from builtin name to handler
    """

    def __init__(self, handlers: Optional[Mapping[str, Callable[[Process], Status]]] = None):
        """Initialize from a name→handler mapping (defaults to BUILTINS)."""
        if handlers is None:
            handlers = BUILTINS
        self._handlers = MappingProxyType(dict(handlers))

    def lookup(self, name: str) -> Optional[Callable[[Process], Status]]:
        """Get a handler by exact name.

        Args:
            name: Command name (element 0 of the argument vector)

        Returns:
            The handler, or None if name is not a builtin
        """
        return self._handlers.get(name)

    def names(self) -> List[str]:
        """List builtin names in registration order."""
        return list(self._handlers)

    def invoke(self, argv: List[str], context: Optional[CommandContext] = None,
               stdout=None, stderr=None) -> Status:
        """Run the builtin named by argv[0].

        Args:
            argv: Non-empty argument vector whose first element is a builtin
            context: Context passed to the handler
            stdout: Output stream for the handler
            stderr: Error stream for the handler

        Returns:
            The handler's Status

        Raises:
            KeyError: If argv[0] is not a builtin
        """
        handler = self._handlers[argv[0]]
        if context is None:
            context = CommandContext(builtin_names=self.names())
        process = Process.from_argv(
            argv, stdout=stdout, stderr=stderr, executor=handler, context=context
        )
        return process.execute()

    def __contains__(self, name: str) -> bool:
        return name in self._handlers

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def __repr__(self) -> str:
        return f"BuiltinRegistry({', '.join(self._handlers)})"
