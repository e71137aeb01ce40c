"""
Logging configuration for Class Insight.

Library modules only ever call :func:`get_logger`; handlers are installed
by the command line entry points once the configuration (and with it the
``verbosity`` setting) is known.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Verbosity

ROOT_LOGGER = "class_insight"

LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}


def level_for(verbosity: Verbosity) -> int:
    """Logging level for a configured verbosity (unknown values act as normal)."""
    return LEVELS.get(verbosity, logging.WARNING)


def setup_logging(verbosity: Verbosity = "normal", log_file: Optional[str] = None) -> logging.Logger:
    """
    Route class_insight log records to a rich handler on stderr.

    Args:
        verbosity: ``quiet`` (errors only), ``normal`` (warnings, such as
            skipped files) or ``verbose`` (per-stage debug counts with
            source paths)
        log_file: Optional file path to append plain-text logs to

    Returns:
        Configured logger instance for class_insight
    """
    level = level_for(verbosity)
    verbose = level <= logging.DEBUG

    handlers: list[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            markup=False,
            show_time=verbose,
            show_path=verbose,
        )
    ]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=level, format="%(message)s", datefmt="[%X]", handlers=handlers, force=True
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the class_insight namespace.

    Args:
        name: Module name (e.g., 'class_insight.scanning.declarations');
              a bare name such as 'scanning' is prefixed with the namespace.
              If None, returns the root class_insight logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
