"""Command-line entry point for lsh."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import PROGRAM_NAME, ShellConfig
from .exceptions import FatalError
from .exit_codes import EXIT_FAILURE
from .shell import Shell

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def configure_logging(level: str = "WARNING"):
    """Send log records to stderr at the given level."""
    root = logging.getLogger(__package__)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Minimal interactive command interpreter",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="logging level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--debug",
        action="store_const",
        const="DEBUG",
        dest="log_level",
        help="shorthand for --log-level DEBUG",
    )
    parser.add_argument(
        "--no-exit-on-eof",
        action="store_false",
        dest="exit_on_eof",
        help="keep prompting after end of input instead of exiting",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = ShellConfig(exit_on_eof=args.exit_on_eof, log_level=args.log_level)
    configure_logging(config.log_level)

    try:
        return Shell(config=config).repl()
    except FatalError as e:
        sys.stderr.write(f"{config.name}: {e}\n")
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
