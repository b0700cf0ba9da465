"""Exit codes and the continuation signal shared by builtins and the launcher."""

from enum import Enum

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class Status(Enum):
    """Result of one dispatch, consumed only by the dispatch loop."""

    CONTINUE = "continue"
    STOP = "stop"
