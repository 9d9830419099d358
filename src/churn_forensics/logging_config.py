"""
Logging for Churn Forensics.

Everything logs under the ``churn_forensics`` namespace. The CLI attaches a
rich handler on stderr to that namespace once settings are resolved; library
callers that never call :func:`setup_logging` keep Python's defaults.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import ForensicsConfig

ROOT_LOGGER = "churn_forensics"

_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.WARNING,
    "verbose": logging.DEBUG,
}

_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(config: ForensicsConfig) -> logging.Logger:
    """
    Route the package's log records according to ``config``.

    ``config.verbosity`` picks the level and ``config.log_file``, when set,
    adds a plain-text copy of every record. Handlers from an earlier call are
    replaced, so the CLI can be invoked repeatedly in one process.

    Returns:
        The ``churn_forensics`` logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # commit records carry user text, so no rich markup in messages
    logger.addHandler(
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=config.verbose,
            markup=False,
            show_path=config.verbose,
        )
    )
    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.setLevel(_LEVELS[config.verbosity])
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``churn_forensics`` or a logger nested under it."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
