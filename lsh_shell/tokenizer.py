"""
Whitespace tokenizer.

Splits a command line into an argument vector. There is no quoting or
escaping: quote characters are ordinary characters, so ``echo "a b"``
yields ``['echo', '"a', 'b"']``.
"""

from typing import List

from .exceptions import AllocationError

# Space, tab, carriage return, newline, bell
TOKEN_DELIMITERS = " \t\r\n\a"


def split_line(line: str, delimiters: str = TOKEN_DELIMITERS) -> List[str]:
    """
    Split a line on runs of delimiter characters.

    Args:
        line: Raw command line
        delimiters: Characters that separate tokens

    Returns:
        Ordered list of tokens; empty for blank input. Element 0, if
        present, is the command name.

    Raises:
        AllocationError: If memory runs out while building the vector

    Examples:
        >>> split_line('  ls   -l /tmp ')
        ['ls', '-l', '/tmp']
        >>> split_line('\\t\\r\\n')
        []
    """
    tokens: List[str] = []
    start = None

    try:
        for i, ch in enumerate(line):
            if ch in delimiters:
                if start is not None:
                    tokens.append(line[start:i])
                    start = None
            elif start is None:
                start = i

        if start is not None:
            tokens.append(line[start:])
    except MemoryError as e:
        raise AllocationError() from e

    return tokens
