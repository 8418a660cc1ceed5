# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Contracts implemented by pluggable checkers and their inputs."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .config import AnalysisConfig, Options
    from .models import Problem


@runtime_checkable
class ProgramPackage(Protocol):
    """Type-checked compilation unit produced by an external loading front end."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Return the import path identifying the package.

        Returns:
            str: Import path of the package.
        """
        raise NotImplementedError


@runtime_checkable
class Checker(Protocol):
    """Independent analyzer producing problems for a package set."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the stable short name of the checker.

        Returns:
            str: Identifier used in diagnostics and timing statistics.
        """
        raise NotImplementedError

    @abstractmethod
    def analyze(self, packages: Sequence[ProgramPackage], config: AnalysisConfig) -> Sequence[Problem]:
        """Analyse ``packages`` and return the problems found.

        Implementations must treat ``packages`` as read-only and must not rely
        on state shared with other checkers.

        Args:
            packages: Packages to inspect.
            config: Configuration shared by every checker in the run.

        Returns:
            Sequence[Problem]: Problems in the order the checker produced them.
        """
        raise NotImplementedError


CheckerFactory = Callable[["Options"], Checker]

__all__ = ["Checker", "CheckerFactory", "ProgramPackage"]
