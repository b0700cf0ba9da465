"""
Line acquisition for the dispatch loop.

The reader pulls one line at a time from a text stream. There is no fixed
maximum length: ``readline()`` grows its buffer as needed.

When the stream has a binary layer (``sys.stdin.buffer``), raw bytes are
read from it and decoded with ``os.fsdecode``. Bytes that are not valid in
the filesystem encoding survive as surrogate escapes, so ``os.chdir`` and
``os.execvp`` receive exactly the bytes the operator typed.
"""

import logging
import os
import sys
from typing import Optional, TextIO

from .exceptions import AllocationError

logger = logging.getLogger(__name__)


class LineReader:
    """Reads operator input one line at a time.

    Attributes:
        stream: Text stream to read from (defaults to sys.stdin)
        eof: True once the stream has reported end-of-input
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.eof = False

    def _readline(self) -> str:
        raw = getattr(self.stream, "buffer", None)
        if raw is None:
            return self.stream.readline()
        return os.fsdecode(raw.readline())

    def read_line(self) -> str:
        """Block until a full line or end-of-input is available.

        Returns:
            The line without its trailing newline. On end-of-input with
            nothing read, an empty string.

        Raises:
            AllocationError: If memory runs out while buffering the line
        """
        try:
            line = self._readline()
        except MemoryError as e:
            raise AllocationError() from e

        if not line.endswith("\n"):
            # readline() only returns without a newline at end-of-input
            self.eof = True
            logger.debug("end of input reached (%d trailing chars)", len(line))
            return line

        return line[:-1]

    def __repr__(self):
        return f"LineReader(stream={self.stream!r}, eof={self.eof})"
