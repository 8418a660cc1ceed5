# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Bounded-concurrency execution of checkers over a shared package set."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass

from .config import AnalysisConfig, Options, default_parallel_jobs
from .errors import CheckerError, MegacheckError
from .ignores import apply_ignores, parse_ignores
from .interfaces import Checker, ProgramPackage
from .logging import render_perf_stats
from .models import PerfStats, Problem

DebugLogger = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class _CheckerRun:
    """Everything a worker needs to execute one checker."""

    packages: Sequence[ProgramPackage]
    config: AnalysisConfig
    stats: PerfStats

    def __call__(self, checker: Checker) -> list[Problem]:
        """Run ``checker`` and record its duration.

        Args:
            checker: Checker to execute against the shared packages.

        Returns:
            list[Problem]: Problems in the order the checker produced them.

        Raises:
            CheckerError: If the checker fails for any reason.
        """

        name = checker.name
        started = time.perf_counter()
        try:
            problems = list(checker.analyze(self.packages, self.config))
        except MegacheckError as exc:
            raise CheckerError(exc.message, checker=exc.checker or name, stage=exc.stage) from exc
        except Exception as exc:
            raise CheckerError(f"{type(exc).__name__}: {exc}", checker=name) from exc
        finally:
            self.stats.record(name, time.perf_counter() - started)
        return problems


def resolve_workers(options: Options, checker_count: int) -> int:
    """Return the number of checkers allowed to run at the same time.

    Args:
        options: Run options carrying ``max_concurrent_jobs``.
        checker_count: Number of checkers scheduled for the run.

    Returns:
        int: Worker count between ``1`` and ``checker_count``.
    """

    bound = options.max_concurrent_jobs or default_parallel_jobs()
    return max(1, min(bound, checker_count))


def run_checkers(
    checkers: Sequence[Checker],
    packages: Sequence[ProgramPackage],
    options: Options,
    *,
    stats: PerfStats | None = None,
    debug_logger: DebugLogger | None = None,
) -> list[Problem]:
    """Execute ``checkers`` against ``packages`` and filter their problems.

    The run is atomic: when any checker fails no problems are returned and the
    failure propagates as a :class:`CheckerError` naming the checker.

    Args:
        checkers: Checkers to execute, in priority order.
        packages: Packages shared read-only by every checker.
        options: Run options controlling ignores, concurrency and statistics.
        stats: Optional accumulator receiving per-checker durations.
        debug_logger: Optional callable receiving tracing messages.

    Returns:
        list[Problem]: Problems grouped by checker, each group in the order the
        checker produced it. Callers should not rely on the grouping order.

    Raises:
        ConfigError: If the ignore specification is malformed.
        CheckerError: If any checker fails.
    """

    if not checkers:
        return []
    rules = parse_ignores(options.ignores)
    if not packages:
        return []

    perf = stats if stats is not None else PerfStats()
    worker = _CheckerRun(packages=packages, config=options.analysis_config(), stats=perf)
    workers = resolve_workers(options, len(checkers))
    if debug_logger:
        debug_logger(f"running {len(checkers)} checker(s) on {len(packages)} package(s) with {workers} worker(s)")

    if workers > 1:
        grouped = _execute_in_parallel(worker, checkers, workers)
    else:
        grouped = [worker(checker) for checker in checkers]

    problems = [problem for group in grouped for problem in group]
    kept = apply_ignores(rules, problems, return_ignored=options.return_ignored)
    if debug_logger:
        debug_logger(f"collected {len(problems)} problem(s), {len(kept)} after ignore rules")
    if options.print_stats:
        render_perf_stats(perf.snapshot())
    return kept


def _execute_in_parallel(
    worker: _CheckerRun,
    checkers: Sequence[Checker],
    workers: int,
) -> list[list[Problem]]:
    """Run ``checkers`` on a thread pool, aborting on the first failure.

    Args:
        worker: Callable executing a single checker.
        checkers: Checkers to execute.
        workers: Maximum number of concurrently running checkers.

    Returns:
        list[list[Problem]]: Problems for each checker in ``checkers`` order.

    Raises:
        CheckerError: Re-raised from the first checker that failed.
    """

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="megacheck") as executor:
        futures: list[Future[list[Problem]]] = [executor.submit(worker, checker) for checker in checkers]
        done, _ = wait(futures, return_when=FIRST_EXCEPTION)
        for future in futures:
            error = future.exception() if future in done else None
            if error is None:
                continue
            for pending in futures:
                pending.cancel()
            raise error
        return [future.result() for future in futures]


__all__ = ["DebugLogger", "resolve_workers", "run_checkers"]
