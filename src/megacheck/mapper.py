# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Convert raw checker problems into externally visible issues."""

from __future__ import annotations

from collections.abc import Iterable

from .identifiers import mark_identifiers
from .models import Issue, Problem
from .selection import GroupIdentity


def map_problem(problem: Problem, identity: GroupIdentity) -> Issue:
    """Return the issue reported for ``problem``.

    The issue is attributed to the group rather than the individual checker so
    every issue from one invocation shares the same ``from_linter`` tag.
    """

    return Issue(
        position=problem.position,
        text=mark_identifiers(problem.message),
        from_linter=identity.name,
        ignored=problem.ignored,
    )


def map_problems(problems: Iterable[Problem], identity: GroupIdentity) -> list[Issue]:
    """Map ``problems`` to issues preserving their order.

    Args:
        problems: Problems surviving ignore filtering.
        identity: Identity of the checker group that produced them.

    Returns:
        list[Issue]: One issue per problem; empty when there are no problems.
    """

    return [map_problem(problem, identity) for problem in problems]


__all__ = ["map_problem", "map_problems"]
