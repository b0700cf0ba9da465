"""
EXIT command - leave the interpreter.

Note: Module name is exit_cmd.py to avoid shadowing the exit builtin.
"""

from ..exit_codes import Status
from ..process import Process
from . import register_command


@register_command('exit')
def cmd_exit(process: Process) -> Status:
    """
    Terminate the interpreter with success status

    Usage: exit
    """
    return Status.STOP
