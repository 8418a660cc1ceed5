# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checker activation and composite naming for the aggregated linter.

Activation, naming, and descriptions are all driven by
:data:`ACTIVATION_TABLE`. The table fixes the priority order of the checkers,
so derived names never depend on keyword or attribute order at the call site.
Adding a checker means adding one :class:`CheckerKind` member and one row.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict

COMBINED_NAME: Final[str] = "megacheck"
COMBINED_DESCRIPTION: Final[str] = (
    "4 checkers in one: unused, simple, staticcheck and stylecheck"
)
COMPOSITE_NAME_TEMPLATE: Final[str] = COMBINED_NAME + ".{{{members}}}"
MEMBER_SEPARATOR: Final[str] = ","
DESCRIPTION_SEPARATOR: Final[str] = "; "


class CheckerKind(str, Enum):
    """Closed set of checkers the aggregated linter knows how to activate."""

    UNUSED = "unused"
    SIMPLE = "simple"
    STATICCHECK = "staticcheck"
    STYLECHECK = "stylecheck"

    @property
    def description(self) -> str:
        """Return the fixed description associated with the checker."""

        return _KIND_DESCRIPTIONS[self]


_KIND_DESCRIPTIONS: Final[dict[CheckerKind, str]] = {
    CheckerKind.UNUSED: "Checks code for unused constants, variables, functions and types",
    CheckerKind.SIMPLE: "Specializes in simplifying code",
    CheckerKind.STATICCHECK: "Applies a large set of static analysis checks for bugs and performance issues",
    CheckerKind.STYLECHECK: "Enforces style rules and naming conventions",
}


class EnablementFlags(BaseModel):
    """Per-checker switches selecting which checkers run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    unused: bool = False
    simple: bool = False
    staticcheck: bool = False
    stylecheck: bool = False

    @classmethod
    def all_enabled(cls) -> EnablementFlags:
        """Return flags enabling every known checker."""

        return cls(unused=True, simple=True, staticcheck=True, stylecheck=True)

    @classmethod
    def only(cls, *kinds: CheckerKind) -> EnablementFlags:
        """Return flags enabling just ``kinds``.

        Args:
            *kinds: Checker kinds to enable.

        Returns:
            EnablementFlags: Flags with the matching switches set.
        """

        wanted = set(kinds)
        return cls(**{row.flag: row.kind in wanted for row in ACTIVATION_TABLE})


@dataclass(frozen=True, slots=True)
class ActivationRow:
    """Bind a checker kind to the flag that enables it."""

    kind: CheckerKind
    flag: str

    def enabled(self, flags: EnablementFlags) -> bool:
        """Return whether ``flags`` switch this row on."""

        return bool(getattr(flags, self.flag))


ACTIVATION_TABLE: Final[tuple[ActivationRow, ...]] = (
    ActivationRow(CheckerKind.UNUSED, "unused"),
    ActivationRow(CheckerKind.SIMPLE, "simple"),
    ActivationRow(CheckerKind.STATICCHECK, "staticcheck"),
    ActivationRow(CheckerKind.STYLECHECK, "stylecheck"),
)


@dataclass(frozen=True, slots=True)
class GroupIdentity:
    """Derived name and description for a set of active checkers."""

    name: str
    description: str
    kinds: tuple[CheckerKind, ...]

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when no checker is active."""

        return not self.kinds


def active_kinds(flags: EnablementFlags) -> tuple[CheckerKind, ...]:
    """Return the enabled checker kinds in priority order.

    Args:
        flags: Enablement switches supplied by the caller.

    Returns:
        tuple[CheckerKind, ...]: Active kinds following :data:`ACTIVATION_TABLE`.
    """

    return tuple(row.kind for row in ACTIVATION_TABLE if row.enabled(flags))


def group_identity(flags: EnablementFlags) -> GroupIdentity:
    """Return the composite identity for the checkers enabled by ``flags``.

    Args:
        flags: Enablement switches supplied by the caller.

    Returns:
        GroupIdentity: Name, description, and ordered kinds for the group.
    """

    kinds = active_kinds(flags)
    return GroupIdentity(name=_group_name(kinds), description=_group_description(kinds), kinds=kinds)


def describe(name: str) -> str:
    """Return the description for a canonical checker or group name.

    Args:
        name: Checker kind name or :data:`COMBINED_NAME`.

    Returns:
        str: Matching description, or an empty string for unknown names.
    """

    if name == COMBINED_NAME:
        return COMBINED_DESCRIPTION
    try:
        return CheckerKind(name).description
    except ValueError:
        return ""


def _group_name(kinds: Sequence[CheckerKind]) -> str:
    if not kinds:
        return ""
    if len(kinds) == 1:
        return kinds[0].value
    if len(kinds) == len(ACTIVATION_TABLE):
        return COMBINED_NAME
    return COMPOSITE_NAME_TEMPLATE.format(members=MEMBER_SEPARATOR.join(kind.value for kind in kinds))


def _group_description(kinds: Sequence[CheckerKind]) -> str:
    if not kinds:
        return ""
    if len(kinds) == 1:
        return kinds[0].description
    if len(kinds) == len(ACTIVATION_TABLE):
        return COMBINED_DESCRIPTION
    members = ", ".join(kind.value for kind in kinds)
    details = DESCRIPTION_SEPARATOR.join(kind.description for kind in kinds)
    return f"{len(kinds)} checkers in one ({members}): {details}"


__all__ = [
    "ACTIVATION_TABLE",
    "COMBINED_DESCRIPTION",
    "COMBINED_NAME",
    "ActivationRow",
    "CheckerKind",
    "EnablementFlags",
    "GroupIdentity",
    "active_kinds",
    "describe",
    "group_identity",
]
