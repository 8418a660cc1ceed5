# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Structured error types raised by the checker aggregation engine."""

from __future__ import annotations

from enum import Enum
from typing import Final

IGNORE_PARSING_STAGE: Final[str] = "ignore parsing"
CHECKER_SELECTION_STAGE: Final[str] = "checker selection"


class ErrorKind(str, Enum):
    """Enumerate the failure categories callers may branch on."""

    CONFIG = "config"
    CHECKER = "checker"


class MegacheckError(Exception):
    """Base error carrying an explicit kind and the failing component.

    Attributes:
        kind: Category describing whether configuration or a checker failed.
        message: Human-readable description of the failure.
        checker: Name of the checker that failed, when a checker is at fault.
        stage: Processing stage that failed when no checker is involved.
    """

    kind: ErrorKind = ErrorKind.CONFIG

    def __init__(self, message: str, *, checker: str | None = None, stage: str | None = None) -> None:
        """Initialise the error with context describing the failing component.

        Args:
            message: Description of the failure.
            checker: Optional name of the checker that raised the failure.
            stage: Optional processing stage used when ``checker`` is absent.
        """

        self.message = message
        self.checker = checker
        self.stage = stage
        super().__init__(self.__str__())

    @property
    def context(self) -> str | None:
        """Return the checker name or stage that prefixes the rendered message."""

        return self.checker or self.stage

    def __str__(self) -> str:
        context = self.context
        if context:
            return f"{context}: {self.message}"
        return self.message


class ConfigError(MegacheckError):
    """Raised when options such as the ignore specification are invalid."""

    kind = ErrorKind.CONFIG


class CheckerError(MegacheckError):
    """Raised when an individual checker fails while analysing packages."""

    kind = ErrorKind.CHECKER

    def __init__(self, message: str, *, checker: str, stage: str | None = None) -> None:
        """Initialise the error ensuring the failing checker is always named.

        Args:
            message: Description of the failure.
            checker: Name of the checker that failed.
            stage: Optional processing stage within the checker.
        """

        super().__init__(message, checker=checker, stage=stage)


__all__ = [
    "CHECKER_SELECTION_STAGE",
    "IGNORE_PARSING_STAGE",
    "CheckerError",
    "ConfigError",
    "ErrorKind",
    "MegacheckError",
]
