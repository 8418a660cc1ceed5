# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing console helpers built on Rich."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from functools import cache
from typing import Literal

from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text


def detect_tty() -> bool:
    """Return ``True`` when stdout appears to be backed by a terminal.

    Returns:
        bool: ``True`` when ``sys.stdout`` reports TTY support, ``False`` otherwise.
    """

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@cache
def get_console(*, color: bool, emoji: bool, tty: bool) -> Console:
    """Return a cached Rich console configured for the presentation flags.

    Args:
        color: ``True`` when ANSI colour output should be enabled.
        emoji: ``True`` when Rich should render emoji glyphs.
        tty: Whether stdout is attached to a terminal.

    Returns:
        Console: Console matching the requested preferences.
    """

    color_system: Literal["auto"] | None = "auto" if color and tty else None
    return Console(
        color_system=color_system,
        force_terminal=tty,
        no_color=not (color and tty),
        emoji=emoji,
        soft_wrap=True,
    )


def _console(use_color: bool | None, use_emoji: bool) -> tuple[Console, bool]:
    tty = detect_tty()
    color_enabled = tty if use_color is None else use_color
    return get_console(color=color_enabled, emoji=use_emoji, tty=tty), color_enabled


def section(title: str, *, use_color: bool) -> None:
    """Render a section header to delineate console output blocks.

    Args:
        title: Section title displayed to the user.
        use_color: Flag indicating whether ANSI colour support is desired.
    """

    console, _ = _console(use_color, True)
    if use_color:
        console.print()
        console.print(Rule(title))
    else:
        console.print(f"\n--- {title} ---")


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message.

    Args:
        msg: Message text to display.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    console, color_enabled = _console(use_color, use_emoji)
    prefix = "ℹ️ " if use_emoji else ""
    text = Text(f"{prefix}{msg}")
    if color_enabled:
        text.stylize("cyan")
    console.print(text)


def build_perf_table(durations: Mapping[str, float]) -> Table:
    """Return a table listing per-checker durations, slowest first.

    Args:
        durations: Checker names mapped to elapsed seconds.

    Returns:
        Table: Rich table ready for rendering.
    """

    table = Table(title="Checker timings", show_footer=True)
    table.add_column("Checker", footer="total")
    table.add_column("Seconds", justify="right", footer=f"{sum(durations.values()):.3f}")
    for name, seconds in sorted(durations.items(), key=lambda item: (-item[1], item[0])):
        table.add_row(name, f"{seconds:.3f}")
    return table


def render_perf_stats(durations: Mapping[str, float], *, use_color: bool | None = None) -> None:
    """Print the per-checker timing table to the console.

    Args:
        durations: Checker names mapped to elapsed seconds.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    console, color_enabled = _console(use_color, False)
    section("megacheck performance", use_color=color_enabled)
    console.print(build_perf_table(durations))
    info(
        f"{len(durations)} checker(s) finished in {sum(durations.values()):.3f}s",
        use_emoji=False,
        use_color=color_enabled,
    )


__all__ = [
    "build_perf_table",
    "detect_tty",
    "get_console",
    "info",
    "render_perf_stats",
    "section",
]
