# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Parsing and application of user-supplied ignore rules."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Final

from .errors import IGNORE_PARSING_STAGE, ConfigError
from .models import Problem

PATH_CHECK_SEPARATOR: Final[str] = ":"
CHECK_SEPARATOR: Final[str] = ","
MATCH_ALL_PATTERN: Final[str] = "*"


@dataclass(frozen=True, slots=True)
class IgnoreRule:
    """Suppress problems whose path matches ``pattern`` and check is listed."""

    pattern: str
    checks: frozenset[str]

    def matches(self, problem: Problem) -> bool:
        """Return ``True`` when ``problem`` falls under this rule.

        Args:
            problem: Problem reported by a checker.

        Returns:
            bool: ``True`` when both the path and the check identifier match.
        """

        if problem.check not in self.checks:
            return False
        if self.pattern == MATCH_ALL_PATTERN:
            return True
        return fnmatchcase(problem.position.file, self.pattern)


def parse_ignores(spec: str) -> list[IgnoreRule]:
    """Parse a whitespace-separated ignore specification.

    Each entry has the form ``path-glob:CHECK1,CHECK2``. The whole
    specification is rejected when any entry is malformed.

    Args:
        spec: Raw ignore specification.

    Returns:
        list[IgnoreRule]: Rules in the order they were written.

    Raises:
        ConfigError: If an entry does not contain exactly one ``:``.
    """

    rules: list[IgnoreRule] = []
    for entry in spec.split():
        parts = entry.split(PATH_CHECK_SEPARATOR)
        if len(parts) != 2:
            raise ConfigError(f"malformed ignore string {entry!r}", stage=IGNORE_PARSING_STAGE)
        pattern, raw_checks = parts
        checks = frozenset(check for check in raw_checks.split(CHECK_SEPARATOR) if check)
        rules.append(IgnoreRule(pattern=pattern, checks=checks))
    return rules


def is_ignored(rules: Iterable[IgnoreRule], problem: Problem) -> bool:
    """Return ``True`` when any rule suppresses ``problem``."""

    return any(rule.matches(problem) for rule in rules)


def apply_ignores(
    rules: Sequence[IgnoreRule],
    problems: Iterable[Problem],
    *,
    return_ignored: bool,
) -> list[Problem]:
    """Filter ``problems`` through ``rules`` preserving their order.

    Args:
        rules: Parsed ignore rules.
        problems: Problems collected from the checkers.
        return_ignored: Keep suppressed problems, flagged as ignored, instead of
            dropping them.

    Returns:
        list[Problem]: Problems that survive filtering.
    """

    if not rules:
        return list(problems)
    kept: list[Problem] = []
    for problem in problems:
        if not is_ignored(rules, problem):
            kept.append(problem)
        elif return_ignored:
            kept.append(problem.mark_ignored())
    return kept


__all__ = [
    "IgnoreRule",
    "apply_ignores",
    "is_ignored",
    "parse_ignores",
]
