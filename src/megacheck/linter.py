# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Aggregated linter combining the enabled checkers into one analyzer."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .config import Options
from .engine import DebugLogger, run_checkers
from .interfaces import CheckerFactory, ProgramPackage
from .mapper import map_problems
from .models import Issue, PerfStats
from .registry import CheckerRegistry, build_checkers
from .selection import CheckerKind, EnablementFlags, GroupIdentity, group_identity


class Megacheck:
    """Run the enabled checkers as a single linter and report issues."""

    def __init__(
        self,
        flags: EnablementFlags,
        *,
        registry: Mapping[CheckerKind, CheckerFactory] | None = None,
        debug_logger: DebugLogger | None = None,
    ) -> None:
        """Create the aggregated linter.

        Args:
            flags: Switches selecting which checkers participate.
            registry: Checker factories; defaults to installed entry points,
                loaded lazily on the first run.
            debug_logger: Optional callable receiving tracing messages.
        """

        self._flags = flags
        self._identity = group_identity(flags)
        self._registry = registry
        self._debug_logger = debug_logger
        self._last_stats: Mapping[str, float] = MappingProxyType({})

    @property
    def flags(self) -> EnablementFlags:
        """Return the enablement switches supplied at construction."""

        return self._flags

    @property
    def identity(self) -> GroupIdentity:
        """Return the derived identity of the checker group."""

        return self._identity

    @property
    def last_stats(self) -> Mapping[str, float]:
        """Return per-checker durations recorded by the most recent run."""

        return self._last_stats

    def name(self) -> str:
        """Return the composite name of the enabled checkers."""

        return self._identity.name

    def desc(self) -> str:
        """Return the description of the enabled checkers."""

        return self._identity.description

    def run(self, packages: Sequence[ProgramPackage], options: Options | None = None) -> list[Issue]:
        """Run the enabled checkers over ``packages``.

        Args:
            packages: Type-checked packages to analyse.
            options: Run options; defaults to :class:`Options` defaults.

        Returns:
            list[Issue]: Issues attributed to :meth:`name`, empty when nothing
            was found or nothing is enabled.

        Raises:
            ConfigError: If the options are invalid or a checker is unavailable.
            CheckerError: If a checker cannot be built or fails; no partial
                issues are returned.
        """

        if self._identity.is_empty:
            return []
        resolved = options or Options()
        checkers = build_checkers(self._flags, self._resolve_registry(), resolved)
        stats = PerfStats()
        try:
            problems = run_checkers(
                checkers,
                packages,
                resolved,
                stats=stats,
                debug_logger=self._debug_logger,
            )
        finally:
            self._last_stats = stats.snapshot()
        return map_problems(problems, self._identity)

    def _resolve_registry(self) -> Mapping[CheckerKind, CheckerFactory]:
        if self._registry is None:
            self._registry = CheckerRegistry.from_entry_points()
        return self._registry


__all__ = ["Megacheck"]
