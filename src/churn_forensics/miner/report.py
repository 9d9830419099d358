"""Reporting collector passed into the statistics code by its caller."""

from __future__ import annotations

import logging
from typing import Optional


class ReportLog:
    """Collects informational and error lines for one aggregation run.

    Each run owns its own collector, so reports never leak between runs.
    When a logger is given, every line is forwarded to it as well.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger
        self._info: list[str] = []
        self._errors: list[str] = []

    def log_info(self, fmt: str, *args: object) -> None:
        message = fmt % args if args else fmt
        self._info.append(message)
        if self._logger is not None:
            self._logger.info(message)

    def log_error(self, fmt: str, *args: object) -> None:
        message = fmt % args if args else fmt
        self._errors.append(message)
        if self._logger is not None:
            self._logger.error(message)

    @property
    def info_messages(self) -> list[str]:
        return list(self._info)

    @property
    def error_messages(self) -> list[str]:
        return list(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)
