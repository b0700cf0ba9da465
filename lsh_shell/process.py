"""Process class for builtin command execution"""

import logging
import sys
from typing import List, Optional, Callable, TextIO

from .context import CommandContext
from .exceptions import FatalError
from .exit_codes import Status

logger = logging.getLogger(__name__)


class Process:
    """Represents a single builtin invocation"""

    def __init__(
        self,
        command: str,
        args: List[str],
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        executor: Optional[Callable[['Process'], Status]] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name (element 0 of the argument vector)
            args: Arguments following the command name
            stdout: Output stream (defaults to sys.stdout)
            stderr: Error stream (defaults to sys.stderr)
            executor: Callable that executes the command
            context: CommandContext with interpreter name and builtin names
        """
        self.command = command
        self.args = args
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.executor = executor
        self.context = context if context is not None else CommandContext()

        self.status = Status.CONTINUE

    @classmethod
    def from_argv(cls, argv: List[str], **kwargs) -> 'Process':
        """Build a process from a non-empty argument vector."""
        return cls(command=argv[0], args=list(argv[1:]), **kwargs)

    @property
    def argv(self) -> List[str]:
        """Full argument vector, command name included"""
        return [self.command] + self.args

    def write_error(self, message: str):
        """Write one prefixed line to stderr"""
        self.stderr.write(self.context.format_error(message) + "\n")

    def execute(self) -> Status:
        """
        Execute the process

        Returns:
            Status.STOP to end the loop, Status.CONTINUE otherwise
        """
        if self.executor is None:
            self.write_error(f"{self.command}: no such builtin")
            self.status = Status.CONTINUE
            return self.status

        try:
            self.status = self.executor(self)
        except KeyboardInterrupt:
            # Let KeyboardInterrupt propagate for proper Ctrl-C handling
            raise
        except FatalError:
            raise
        except Exception as e:
            logger.debug("builtin %r raised", self.command, exc_info=True)
            self.write_error(f"{self.command}: {e}")
            self.status = Status.CONTINUE

        self.stdout.flush()
        self.stderr.flush()

        return self.status

    def __repr__(self):
        return f"Process({' '.join(self.argv)})"
