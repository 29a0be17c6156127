"""
Logging setup for cellquill.

Library modules only call ``logging.getLogger(__name__)``; applications and
the CLI call ``setup_logging`` to get colored output through rich.
"""

import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "cellquill"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``cellquill`` namespace."""
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def resolve_level(level: Union[str, int]) -> int:
    """Translate a level name (``"debug"``, ``"INFO"`` ...) into its number."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level: Union[str, int] = "WARNING",
                  console: Optional[Console] = None) -> logging.Logger:
    """
    Attach a RichHandler to the ``cellquill`` logger.

    Args:
        level: Log level name or number
        console: Console to log to (stderr by default)

    Returns:
        The configured package logger
    """
    logger = get_logger()
    logger.setLevel(resolve_level(level))

    # Replace handlers installed by an earlier call
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    logger.addHandler(rich_handler)
    return logger
