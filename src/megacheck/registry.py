# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry mapping checker kinds to the factories that build them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from importlib import metadata
from importlib.metadata import EntryPoint
from typing import Final, cast

from .config import Options
from .errors import CHECKER_SELECTION_STAGE, CheckerError, ConfigError, MegacheckError
from .interfaces import Checker, CheckerFactory
from .selection import ACTIVATION_TABLE, CheckerKind, EnablementFlags, active_kinds

CHECKER_PLUGIN_GROUP: Final[str] = "megacheck.checkers"


class CheckerRegistry(Mapping[CheckerKind, CheckerFactory]):
    """Read-only mapping from :class:`CheckerKind` to checker factories.

    Factories are usually contributed through the ``megacheck.checkers``
    entry-point group, where each entry point is named after the kind it
    provides (``unused``, ``simple``, ...).
    """

    def __init__(self, factories: Mapping[CheckerKind, CheckerFactory] | None = None) -> None:
        """Initialise the registry with optional pre-registered factories.

        Args:
            factories: Factories keyed by the kind they construct.
        """

        self._factories: dict[CheckerKind, CheckerFactory] = {}
        for kind, factory in (factories or {}).items():
            self.register(kind, factory)

    @classmethod
    def from_entry_points(cls, entries: Iterable[EntryPoint] | None = None) -> CheckerRegistry:
        """Build a registry from installed ``megacheck.checkers`` entry points.

        Entries whose name is not a known kind, or that fail to import, are
        skipped.

        Args:
            entries: Entry points to load; defaults to the installed group.

        Returns:
            CheckerRegistry: Registry populated with the discovered factories.
        """

        selected = entries if entries is not None else metadata.entry_points(group=CHECKER_PLUGIN_GROUP)
        registry = cls()
        for entry in selected:
            try:
                kind = CheckerKind(entry.name)
            except ValueError:
                continue
            if kind in registry:
                continue
            try:
                factory = cast(CheckerFactory, entry.load())
            except (AttributeError, ImportError, ValueError, RuntimeError):
                continue
            registry.register(kind, factory)
        return registry

    def register(self, kind: CheckerKind, factory: CheckerFactory) -> None:
        """Register ``factory`` as the builder for ``kind``.

        Args:
            kind: Checker kind provided by ``factory``.
            factory: Callable constructing the checker from run options.

        Raises:
            ValueError: If a factory for ``kind`` is already registered.
        """

        if kind in self._factories:
            raise ValueError(f"Checker '{kind.value}' already registered")
        self._factories[kind] = factory

    def __len__(self) -> int:
        return len(self._factories)

    def __iter__(self) -> Iterator[CheckerKind]:
        return (row.kind for row in ACTIVATION_TABLE if row.kind in self._factories)

    def __getitem__(self, kind: CheckerKind) -> CheckerFactory:
        return self._factories[kind]


def build_checkers(
    flags: EnablementFlags,
    registry: Mapping[CheckerKind, CheckerFactory],
    options: Options,
) -> list[Checker]:
    """Instantiate one checker per enabled kind in priority order.

    Args:
        flags: Enablement switches selecting the checkers.
        registry: Factories keyed by checker kind.
        options: Run options forwarded to each factory.

    Returns:
        list[Checker]: Checkers ready for execution.

    Raises:
        ConfigError: If an enabled kind has no registered factory.
        CheckerError: If a factory fails to construct its checker.
    """

    checkers: list[Checker] = []
    for kind in active_kinds(flags):
        factory = registry.get(kind)
        if factory is None:
            raise ConfigError(f"no checker registered for '{kind.value}'", stage=CHECKER_SELECTION_STAGE)
        try:
            checker = factory(options)
        except MegacheckError as exc:
            raise CheckerError(exc.message, checker=exc.checker or kind.value, stage=CHECKER_SELECTION_STAGE) from exc
        except Exception as exc:
            raise CheckerError(
                f"{type(exc).__name__}: {exc}", checker=kind.value, stage=CHECKER_SELECTION_STAGE
            ) from exc
        checkers.append(checker)
    return checkers


__all__ = ["CHECKER_PLUGIN_GROUP", "CheckerRegistry", "build_checkers"]
