"""
HELP command - list the builtins.
"""

from ..exit_codes import Status
from ..process import Process
from . import register_command

HELP_HEADER = (
    "My own LSH.\n"
    "Type program names and args, and hit enter.\n"
    "The following are built in:\n"
)
HELP_FOOTER = "Use the man command for info on other programs.\n"


@register_command('help')
def cmd_help(process: Process) -> Status:
    """
    Print usage text

    Usage: help
    """
    process.stdout.write(HELP_HEADER)
    for name in process.context.builtin_names:
        process.stdout.write(f"  {name}\n")
    process.stdout.write(HELP_FOOTER)
    return Status.CONTINUE
