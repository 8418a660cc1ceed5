# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Wrap code identifiers found in checker messages with inline-code markup."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class IdentifierRewrite:
    """Regex rewrite applied to a whole checker message."""

    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        """Return ``text`` with the rewrite applied."""

        return self.pattern.sub(self.replacement, text)


def _rewrite(pattern: str, replacement: str) -> IdentifierRewrite:
    return IdentifierRewrite(re.compile(pattern), replacement)


# Order matters: the first rewrite that changes the message wins.
IDENTIFIER_REWRITES: Final[tuple[IdentifierRewrite, ...]] = (
    # unused
    _rewrite(r"^(func|const|field|type|var|method|class) (\S+) is unused$", r"\1 `\2` is unused"),
    _rewrite(r"^(\S+) - (\S+) is unused$", r"`\1` - `\2` is unused"),
    _rewrite(r"^(\S+) declared but not used$", r"`\1` declared but not used"),
    _rewrite(r"^(\S+) redeclared in this block", r"`\1` redeclared in this block"),
    _rewrite(r"^undeclared name: (\S+)$", r"undeclared name: `\1`"),
    _rewrite(r"^unknown field (\S+) in struct literal$", r"unknown field `\1` in struct literal"),
    # simple
    _rewrite(r"^should replace loop with (.+)$", r"should replace loop with `\1`"),
    _rewrite(
        r"^should omit comparison to bool constant, can be simplified to (.+)$",
        r"should omit comparison to bool constant, can be simplified to `\1`",
    ),
    _rewrite(r"^should write (.+) instead of (.+)$", r"should write `\1` instead of `\2`"),
    _rewrite(r"^should use (\S+) instead of (\S+)$", r"should use `\1` instead of `\2`"),
    _rewrite(r"^should replace (.+) with (.+)$", r"should replace `\1` with `\2`"),
    # staticcheck
    _rewrite(r"^this value of (\S+) is never used$", r"this value of `\1` is never used"),
    _rewrite(r"^(\S+) is deprecated: (.+)$", r"`\1` is deprecated: \2"),
    _rewrite(r"^the argument to (\S+) is always (.+)$", r"the argument to `\1` is always `\2`"),
    # stylecheck
    _rewrite(
        r"^exported (type|method|function|var|const) (\S+) should have comment or be unexported$",
        r"exported \1 `\2` should have comment or be unexported",
    ),
    _rewrite(
        r"^comment on exported (type|method|function|var|const) (\S+) should be of the form \"(\S+) ...\"$",
        r"comment on exported \1 `\2` should be of the form `\3 ...`",
    ),
    _rewrite(
        r"^(struct field|var|range var|const|type|(?:func|method|interface method) (?:parameter|result)) (\S+) should be (\S+)$",
        r"\1 `\2` should be `\3`",
    ),
    _rewrite(r"^don't use underscores in names; (\w+) (\S+) should be (\S+)$", r"don't use underscores in names; \1 `\2` should be `\3`"),
    _rewrite(r"^receiver name (\S+) should be consistent with previous receiver name (\S+)", r"receiver name `\1` should be consistent with previous receiver name `\2`"),
)


def mark_identifiers(text: str) -> str:
    """Return ``text`` with recognised identifiers wrapped in backticks.

    Args:
        text: Message emitted by a checker.

    Returns:
        str: Message rewritten by the first matching rule, or ``text`` unchanged.
    """

    for rewrite in IDENTIFIER_REWRITES:
        rewritten = rewrite.apply(text)
        if rewritten != text:
            return rewritten
    return text


__all__ = ["IDENTIFIER_REWRITES", "IdentifierRewrite", "mark_identifiers"]
