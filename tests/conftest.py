# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures and fake checkers."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import pytest

from megacheck.config import AnalysisConfig, Options
from megacheck.models import Position, Problem


@dataclass(frozen=True)
class FakePackage:
    """Minimal stand-in for a loaded, type-checked package."""

    path: str


@dataclass
class FakeChecker:
    """Checker returning canned problems and recording how it was invoked."""

    name: str
    problems: Sequence[Problem] = ()
    error: Exception | None = None
    delay: float = 0.0
    calls: list[tuple[tuple[FakePackage, ...], AnalysisConfig]] = field(default_factory=list)

    def analyze(self, packages: Sequence[FakePackage], config: AnalysisConfig) -> Sequence[Problem]:
        self.calls.append((tuple(packages), config))
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return list(self.problems)


@dataclass
class ConcurrencyTracker:
    """Track the peak number of checkers executing at the same time."""

    active: int = 0
    peak: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)

    def enter(self) -> None:
        with self.lock:
            self.active += 1
            self.peak = max(self.peak, self.active)

    def leave(self) -> None:
        with self.lock:
            self.active -= 1


@dataclass
class TrackedChecker(FakeChecker):
    """Fake checker reporting entry and exit to a :class:`ConcurrencyTracker`."""

    tracker: ConcurrencyTracker = field(default_factory=ConcurrencyTracker)

    def analyze(self, packages: Sequence[FakePackage], config: AnalysisConfig) -> Sequence[Problem]:
        self.tracker.enter()
        try:
            return super().analyze(packages, config)
        finally:
            self.tracker.leave()


def make_problem(file: str, line: int, message: str, check: str = "SA0000", column: int = 1) -> Problem:
    return Problem(position=Position(file=file, line=line, column=column), message=message, check=check)


@pytest.fixture
def packages() -> list[FakePackage]:
    """Return a small package set shared by engine tests."""
    return [FakePackage("example.com/app"), FakePackage("example.com/app/internal")]


@pytest.fixture
def options() -> Options:
    """Return default run options."""
    return Options()


@pytest.fixture
def problem_factory() -> Callable[..., Problem]:
    """Expose :func:`make_problem` to tests."""
    return make_problem
