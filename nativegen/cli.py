"""Command line entry point for nativegen."""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .codegen.cli_integration import create_export_subparsers, run_command
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="nativegen",
        description="Generate native function bindings from a natives catalog",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    create_export_subparsers(subparsers)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    Args:
        argv: Arguments without the program name (defaults to sys.argv)

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger.debug("Running command %s", args.command)

    return run_command(args)


if __name__ == "__main__":
    sys.exit(main())
