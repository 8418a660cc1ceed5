# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models controlling a megacheck run."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .models import JsonValue

DEFAULT_TARGET_VERSION: Final[int] = 11


def default_parallel_jobs() -> int:
    """Return the checker bound applied when ``max_concurrent_jobs`` is ``0``.

    Returns:
        int: Three quarters of the available CPU cores, never below one.
    """

    return max(1, (os.cpu_count() or 1) * 3 // 4)


class UnusedSettings(BaseModel):
    """Settings forwarded to the unused-code checker factory."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    check_exported: bool = False


class Options(BaseModel):
    """Options shared by every checker participating in a run.

    ``max_concurrent_jobs`` bounds how many checkers execute simultaneously;
    ``0`` falls back to :func:`default_parallel_jobs`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    target_version: int = DEFAULT_TARGET_VERSION
    ignores: str = ""
    max_concurrent_jobs: int = Field(default=0, ge=0)
    return_ignored: bool = False
    print_stats: bool = False
    checker_config: dict[str, JsonValue] = Field(default_factory=dict)
    unused: UnusedSettings = Field(default_factory=UnusedSettings)

    def with_overrides(self, **updates: object) -> Options:
        """Return a validated copy of the options with ``updates`` applied.

        Args:
            **updates: Field values replacing those on ``self``.

        Returns:
            Options: New options instance validated against the schema.
        """

        payload = self.model_dump()
        payload.update(updates)
        return Options.model_validate(payload)

    def analysis_config(self) -> AnalysisConfig:
        """Return the read-only configuration view handed to checkers."""

        return AnalysisConfig(
            target_version=self.target_version,
            settings=MappingProxyType(dict(self.checker_config)),
        )


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Immutable configuration each checker receives alongside the packages."""

    target_version: int
    settings: Mapping[str, JsonValue]


__all__ = [
    "DEFAULT_TARGET_VERSION",
    "AnalysisConfig",
    "Options",
    "UnusedSettings",
    "default_parallel_jobs",
]
