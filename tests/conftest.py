"""
Pytest configuration and shared fixtures for lsh tests.

This module provides reusable test fixtures for:
- Captured output streams
- Shell instances fed from in-memory input
- Scripted process primitives for the launcher
"""

import io
import os
from typing import Iterable, List, Tuple

import pytest


# ============================================================================
# Wait-status encoding (Linux layout, as returned by waitpid)
# ============================================================================

def exited_status(code: int) -> int:
    """Raw status for a child that exited with code."""
    return (code & 0xff) << 8


def signaled_status(signum: int) -> int:
    """Raw status for a child killed by signum."""
    return signum & 0x7f


def stopped_status(signum: int) -> int:
    """Raw status for a child stopped by signum."""
    return ((signum & 0xff) << 8) | 0x7f


# ============================================================================
# Fake process primitives
# ============================================================================

class ChildExited(Exception):
    """Raised by FakeProcessPrimitives.exit_child instead of leaving the test."""

    def __init__(self, code: int):
        super().__init__(code)
        self.code = code


class FakeProcessPrimitives:
    """
    Scripted replacements for fork, execvp, waitpid and _exit.

    waitpid returns the queued statuses in order.
    """

    def __init__(self, pid: int = 4242, statuses: Iterable[int] = (0,)):
        self.pid = pid
        self.statuses: List[int] = list(statuses)
        self.fork_calls = 0
        self.exec_calls: List[Tuple[str, List[str]]] = []
        self.wait_calls: List[Tuple[int, int]] = []
        self.fork_error = None
        self.exec_error = None

    def fork(self) -> int:
        self.fork_calls += 1
        if self.fork_error is not None:
            raise self.fork_error
        return self.pid

    def execvp(self, file: str, args: List[str]):
        self.exec_calls.append((file, list(args)))
        if self.exec_error is not None:
            raise self.exec_error

    def waitpid(self, pid: int, options: int) -> Tuple[int, int]:
        self.wait_calls.append((pid, options))
        return pid, self.statuses.pop(0)

    def exit_child(self, code: int):
        raise ChildExited(code)

    def launcher_kwargs(self) -> dict:
        return {
            'fork': self.fork,
            'execvp': self.execvp,
            'waitpid': self.waitpid,
            'exit_child': self.exit_child,
        }


# ============================================================================
# Pytest Fixtures
# ============================================================================

@pytest.fixture
def capture_output():
    """
    Provides StringIO objects for capturing interpreter output.

    Returns:
        tuple: (stdout, stderr) StringIO objects

    Example:
        def test_command_output(capture_output):
            stdout, stderr = capture_output
            shell = Shell(stdout=stdout, stderr=stderr, ...)
            # ... run commands ...
            assert "> " in stdout.getvalue()
    """
    return io.StringIO(), io.StringIO()


@pytest.fixture
def fake_primitives():
    """
    Provides scripted process primitives.

    Example:
        def test_wait(fake_primitives):
            fake_primitives.statuses = [exited_status(0)]
            launcher = ProcessLauncher(**fake_primitives.launcher_kwargs())
    """
    return FakeProcessPrimitives()


@pytest.fixture
def make_shell(capture_output):
    """
    Factory for shells whose input comes from a string.

    Example:
        def test_exit(make_shell):
            shell = make_shell("exit\\n")
            assert shell.repl() == 0
    """
    from lsh_shell.shell import Shell

    stdout, stderr = capture_output

    def factory(text: str, **kwargs):
        return Shell(stdin=io.StringIO(text), stdout=stdout, stderr=stderr, **kwargs)

    return factory


@pytest.fixture
def in_tmp_dir(tmp_path, monkeypatch):
    """
    Runs the test inside tmp_path and restores the working directory after.

    Returns:
        pathlib.Path: The temporary directory
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ============================================================================
# Helper Functions
# ============================================================================

def real_path(path) -> str:
    """Resolve symlinks so /tmp vs /private/tmp compares equal."""
    return os.path.realpath(str(path))
