"""
External program launcher.

Runs one executable in the foreground: fork, replace the child's image
with execvp, and block until the child has exited or been killed.
A stopped (suspended) child is not finished; the wait continues.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, TextIO, Tuple

from .config import PROGRAM_NAME
from .exceptions import ExecError, ForkError, format_os_error
from .exit_codes import EXIT_FAILURE, Status

logger = logging.getLogger(__name__)

STDERR_FILENO = 2


@dataclass
class ChildStatus:
    """Terminal state of a child process.

    Exactly one of exit_code and signal is set.
    """

    pid: int
    exit_code: Optional[int] = None
    signal: Optional[int] = None

    @property
    def exited(self) -> bool:
        return self.exit_code is not None

    @property
    def killed(self) -> bool:
        return self.signal is not None


class ProcessLauncher:
    """Runs external programs as synchronous children of the interpreter.

    The operating-system primitives are injectable so the wait loop can be
    driven with scripted statuses in tests.
    """

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        program_name: str = PROGRAM_NAME,
        fork: Callable[[], int] = os.fork,
        execvp: Callable[[str, List[str]], None] = os.execvp,
        waitpid: Callable[[int, int], Tuple[int, int]] = os.waitpid,
        exit_child: Callable[[int], None] = os._exit,
    ):
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.program_name = program_name
        self._fork = fork
        self._execvp = execvp
        self._waitpid = waitpid
        self._exit_child = exit_child

    def launch(self, argv: List[str]) -> Status:
        """
        Run argv[0] to completion with argv as its arguments.

        The child's exit code is not surfaced; only completion matters.

        Args:
            argv: Non-empty argument vector

        Returns:
            Status.CONTINUE, always
        """
        try:
            pid = self.spawn(argv)
        except ForkError as e:
            self.stderr.write(format_os_error(self.program_name, e) + "\n")
            self.stderr.flush()
            return Status.CONTINUE

        status = self.wait(pid)
        logger.debug("child %d finished: %s", pid, status)
        return Status.CONTINUE

    def spawn(self, argv: List[str]) -> int:
        """
        Fork and exec argv in the child.

        Returns:
            The child's pid (in the parent only; the child never returns)

        Raises:
            ForkError: If the execution context cannot be duplicated
        """
        # Buffered output would otherwise be inherited and written twice
        self.stdout.flush()
        self.stderr.flush()

        try:
            pid = self._fork()
        except OSError as e:
            raise ForkError.from_os_error(e) from e

        if pid == 0:
            self._exec_child(argv)

        logger.debug("forked child %d for %r", pid, argv[0])
        return pid

    def _exec_child(self, argv: List[str]):
        """Replace the child's image; on failure report and exit."""
        try:
            self._execvp(argv[0], argv)
        except (OSError, ValueError) as e:
            message = format_os_error(self.program_name, ExecError(argv[0], e)) + "\n"
            os.write(STDERR_FILENO, message.encode('utf-8', errors='replace'))
        finally:
            # The child must never fall back into the interpreter loop
            self._exit_child(EXIT_FAILURE)

    def wait(self, pid: int) -> ChildStatus:
        """
        Block until the child has exited or been killed.

        Stop notifications (WIFSTOPPED) are ignored and the wait resumes.

        Args:
            pid: Child process id

        Returns:
            ChildStatus describing how the child ended
        """
        while True:
            try:
                _, status = self._waitpid(pid, os.WUNTRACED)
            except KeyboardInterrupt:
                # Ctrl-C reaches the whole foreground group; the child
                # decides whether to die, so keep waiting for it
                logger.debug("interrupt while waiting for %d", pid)
                continue

            if os.WIFEXITED(status):
                return ChildStatus(pid, exit_code=os.WEXITSTATUS(status))
            if os.WIFSIGNALED(status):
                return ChildStatus(pid, signal=os.WTERMSIG(status))
            if os.WIFSTOPPED(status):
                logger.debug("child %d stopped by signal %d",
                             pid, os.WSTOPSIG(status))
