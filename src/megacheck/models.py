# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the megacheck package."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import TypeAliasType

JsonScalar = TypeAliasType("JsonScalar", "str | int | float | bool | None")
JsonValue = TypeAliasType("JsonValue", "JsonScalar | list[JsonValue] | dict[str, JsonValue]")


class Severity(str, Enum):
    """Severity levels normalising different checker vocabularies."""

    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    NOTE = "note"


class Position(BaseModel):
    """Source location reported by a checker."""

    model_config = ConfigDict(frozen=True)

    file: str
    line: int = Field(default=0, ge=0)
    column: int = Field(default=0, ge=0)

    @field_validator("file", mode="before")
    @classmethod
    def _normalize_file(cls, value: str | PurePath) -> str:
        """Render path objects using forward slashes.

        Args:
            value: File path supplied by the checker.

        Returns:
            str: Path rendered as a POSIX-style string.
        """

        if isinstance(value, PurePath):
            return value.as_posix()
        return value

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class Problem(BaseModel):
    """Raw defect report produced by exactly one checker.

    Problems are immutable. When ignore rules suppress a problem but the caller
    asked to keep ignored problems, the engine stores a copy with
    :attr:`ignored` set.
    """

    model_config = ConfigDict(frozen=True)

    position: Position
    message: str
    check: str
    severity: Severity | None = None
    ignored: bool = False

    def mark_ignored(self) -> Problem:
        """Return a copy of the problem flagged as suppressed.

        Returns:
            Problem: Copy of ``self`` with :attr:`ignored` set to ``True``.
        """

        return self.model_copy(update={"ignored": True})


class Issue(BaseModel):
    """Externally visible defect record emitted by the aggregated linter."""

    model_config = ConfigDict(frozen=True)

    position: Position
    text: str
    from_linter: str
    ignored: bool = False


@dataclass(slots=True)
class PerfStats:
    """Thread-safe accumulator of per-checker timings measured in seconds."""

    _durations: dict[str, float] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def record(self, checker: str, seconds: float) -> None:
        """Add ``seconds`` to the running total for ``checker``.

        Args:
            checker: Name of the checker that was timed.
            seconds: Elapsed wall-clock duration.
        """

        with self._lock:
            self._durations[checker] = self._durations.get(checker, 0.0) + seconds

    def snapshot(self) -> Mapping[str, float]:
        """Return a read-only copy of the timings collected so far.

        Returns:
            Mapping[str, float]: Checker names mapped to elapsed seconds.
        """

        with self._lock:
            return MappingProxyType(dict(self._durations))

    def total(self) -> float:
        """Return the sum of all recorded durations."""

        with self._lock:
            return sum(self._durations.values())


__all__ = [
    "Issue",
    "JsonScalar",
    "JsonValue",
    "PerfStats",
    "Position",
    "Problem",
    "Severity",
]
