"""Logging setup shared by the whole package."""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "nativegen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the ``nativegen`` hierarchy."""
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: Union[int, str] = logging.WARNING, console: Optional[Console] = None
) -> logging.Logger:
    """
    Attach a rich handler to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates.

    Args:
        level: Logging level name or number
        console: Console to log to (stderr by default)

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger
