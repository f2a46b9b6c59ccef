"""Logging setup shared by all builder_gen modules."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "builder_gen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger in the builder_gen hierarchy.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    level: int | str = logging.WARNING, console: Optional[Console] = None
) -> logging.Logger:
    """Configure the builder_gen logger with a rich handler.

    Calling it again replaces the previously installed handler.

    Args:
        level: Logging level name or number.
        console: Console to log to (defaults to stderr).

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_builder_gen_handler", False):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    handler._builder_gen_handler = True
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
