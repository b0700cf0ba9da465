"""
Builtin command modules.

Each module defines one handler and registers it with ``register_command``.
Handlers take a Process and return a Status.
"""

import importlib
from typing import Callable, Dict

from ..exit_codes import Status

# Registration order is the order help lists builtins in
BUILTINS: Dict[str, Callable] = {}

COMMAND_MODULES = ('cd', 'help', 'exit_cmd')


def register_command(name: str):
    """
    Decorator that registers a handler under a builtin name.

    Example:
        @register_command('cd')
        def cmd_cd(process: Process) -> Status:
            ...
    """
    def decorator(func: Callable[..., Status]) -> Callable[..., Status]:
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands():
    """Import every command module so its handler is registered."""
    for module_name in COMMAND_MODULES:
        importlib.import_module(f'.{module_name}', __name__)
