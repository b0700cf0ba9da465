"""Interpreter settings."""

from dataclasses import dataclass

PROGRAM_NAME = "lsh"
PROMPT = "> "


@dataclass
class ShellConfig:
    """
    Settings for one interpreter instance.

    Attributes:
        name: Prefix for every error message written to the error stream
        prompt: Text written before each read
        exit_on_eof: Terminate the loop once input is exhausted instead of
            re-prompting forever on an empty line
        log_level: Name of the logging level installed by the CLI
    """

    name: str = PROGRAM_NAME
    prompt: str = PROMPT
    exit_on_eof: bool = True
    log_level: str = "WARNING"
