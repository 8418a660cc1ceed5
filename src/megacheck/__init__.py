# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Aggregate independent static-analysis checkers into a single linter."""

from __future__ import annotations

from .config import AnalysisConfig, Options, UnusedSettings, default_parallel_jobs
from .engine import run_checkers
from .errors import CheckerError, ConfigError, ErrorKind, MegacheckError
from .identifiers import mark_identifiers
from .ignores import IgnoreRule, apply_ignores, is_ignored, parse_ignores
from .interfaces import Checker, CheckerFactory, ProgramPackage
from .linter import Megacheck
from .mapper import map_problems
from .models import Issue, PerfStats, Position, Problem, Severity
from .registry import CHECKER_PLUGIN_GROUP, CheckerRegistry, build_checkers
from .selection import (
    COMBINED_NAME,
    CheckerKind,
    EnablementFlags,
    GroupIdentity,
    active_kinds,
    describe,
    group_identity,
)

__all__ = [
    "CHECKER_PLUGIN_GROUP",
    "COMBINED_NAME",
    "AnalysisConfig",
    "Checker",
    "CheckerError",
    "CheckerFactory",
    "CheckerKind",
    "CheckerRegistry",
    "ConfigError",
    "EnablementFlags",
    "ErrorKind",
    "GroupIdentity",
    "IgnoreRule",
    "Issue",
    "Megacheck",
    "MegacheckError",
    "Options",
    "PerfStats",
    "Position",
    "Problem",
    "ProgramPackage",
    "Severity",
    "UnusedSettings",
    "active_kinds",
    "apply_ignores",
    "build_checkers",
    "default_parallel_jobs",
    "describe",
    "group_identity",
    "is_ignored",
    "map_problems",
    "mark_identifiers",
    "parse_ignores",
    "run_checkers",
]
