"""
Dispatch loop.

Each cycle prompts, reads one line, splits it into an argument vector and
hands the vector to a builtin or to the process launcher. The Status that
comes back decides whether the loop prompts again.
"""

import logging
import sys
from enum import Enum
from typing import List, Optional, TextIO

from .builtins import BuiltinRegistry
from .config import ShellConfig
from .context import CommandContext
from .exit_codes import EXIT_SUCCESS, Status
from .launcher import ProcessLauncher
from .line_reader import LineReader
from .tokenizer import split_line

logger = logging.getLogger(__name__)


class ShellState(Enum):
    PROMPTING = "prompting"
    TERMINATED = "terminated"


class Shell:
    """Interactive command interpreter.

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> Shell(stdin=io.StringIO("exit\\n"), stdout=out).repl()
        0
        >>> out.getvalue()
        '> '
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        registry: Optional[BuiltinRegistry] = None,
        launcher: Optional[ProcessLauncher] = None,
    ):
        """
        Initialize the interpreter

        Args:
            config: Interpreter settings (defaults to ShellConfig())
            stdin: Operator input stream (defaults to sys.stdin)
            stdout: Prompt and builtin output stream (defaults to sys.stdout)
            stderr: Error stream (defaults to sys.stderr)
            registry: Builtin table (defaults to cd, help and exit)
            launcher: External program launcher
        """
        self.config = config if config is not None else ShellConfig()
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.reader = LineReader(stdin)
        self.registry = registry if registry is not None else BuiltinRegistry()
        self.launcher = launcher if launcher is not None else ProcessLauncher(
            stdout=self.stdout, stderr=self.stderr, program_name=self.config.name
        )
        self.context = CommandContext(
            program_name=self.config.name,
            builtin_names=self.registry.names(),
        )
        self.state = ShellState.PROMPTING

    def prompt(self):
        """Write the prompt and make sure the operator sees it."""
        self.stdout.write(self.config.prompt)
        self.stdout.flush()

    def execute(self, argv: List[str]) -> Status:
        """
        Dispatch one argument vector.

        Args:
            argv: Tokens of one command line; may be empty

        Returns:
            Status from the builtin or launcher; CONTINUE for no command
        """
        if not argv:
            return Status.CONTINUE

        if argv[0] in self.registry:
            logger.debug("builtin: %r", argv)
            return self.registry.invoke(
                argv, context=self.context, stdout=self.stdout, stderr=self.stderr
            )

        logger.debug("external: %r", argv)
        return self.launcher.launch(argv)

    def execute_line(self, line: str) -> Status:
        """Tokenize a raw line and dispatch it."""
        return self.execute(split_line(line))

    def step(self) -> Status:
        """
        Run one prompt/read/dispatch cycle.

        Returns:
            The Status of this cycle; STOP once the loop has terminated
        """
        if self.state is ShellState.TERMINATED:
            return Status.STOP

        self.prompt()
        try:
            line = self.reader.read_line()
        except KeyboardInterrupt:
            self.stdout.write("\n")
            return Status.CONTINUE

        try:
            status = self.execute_line(line)
        except KeyboardInterrupt:
            # Ctrl-C inside a builtin, or before the child is waited on
            logger.debug("interrupt while executing %r", line)
            self.stdout.write("\n")
            status = Status.CONTINUE

        if status is Status.CONTINUE and self.reader.eof and self.config.exit_on_eof:
            logger.debug("input exhausted, terminating")
            self.stdout.write("\n")
            status = Status.STOP

        if status is Status.STOP:
            self.state = ShellState.TERMINATED
        return status

    def repl(self) -> int:
        """
        Prompt until a command returns STOP.

        Returns:
            Exit status for the interpreter process
        """
        while self.state is ShellState.PROMPTING:
            self.step()

        self.stdout.flush()
        return EXIT_SUCCESS
