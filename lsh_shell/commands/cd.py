"""
CD command - change the working directory.
"""

import os

from ..exit_codes import Status
from ..process import Process
from . import register_command
from .base import handle_os_error, validate_arg_count


@register_command('cd')
def cmd_cd(process: Process) -> Status:
    """
    Change the interpreter's working directory

    Usage: cd <path>

    Arguments after the path are ignored. Errors are reported and the
    loop continues.
    """
    if not validate_arg_count(process, min_args=1):
        return Status.CONTINUE

    path = process.args[0]

    try:
        os.chdir(path)
    except OSError as e:
        handle_os_error(process, e)

    return Status.CONTINUE
