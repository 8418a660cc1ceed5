# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Behavioural tests for :mod:`megacheck.engine`."""

from __future__ import annotations

import pytest
from conftest import ConcurrencyTracker, FakeChecker, FakePackage, TrackedChecker, make_problem

from megacheck.config import Options
from megacheck.engine import resolve_workers, run_checkers
from megacheck.errors import CheckerError, ConfigError, ErrorKind
from megacheck.models import PerfStats


def _problem_keys(problems) -> set[tuple[str, int, str]]:
    return {(p.position.file, p.position.line, p.message) for p in problems}


def test_no_checkers_returns_empty_without_parsing(packages: list[FakePackage]) -> None:
    assert run_checkers([], packages, Options(ignores="malformed")) == []


def test_no_packages_returns_empty_without_running(options: Options) -> None:
    checker = FakeChecker("unused", problems=[make_problem("a.go", 1, "x")])

    assert run_checkers([checker], [], options) == []
    assert checker.calls == []


def test_malformed_ignores_fail_before_checkers_run(packages: list[FakePackage]) -> None:
    checker = FakeChecker("unused")

    with pytest.raises(ConfigError):
        run_checkers([checker], packages, Options(ignores="a:b:c"))
    assert checker.calls == []


def test_checkers_receive_all_packages_and_shared_config(packages: list[FakePackage]) -> None:
    checker = FakeChecker("staticcheck")
    options = Options(target_version=12, checker_config={"checks": ["all"]})

    run_checkers([checker], packages, options)

    (received, config), = checker.calls
    assert received == tuple(packages)
    assert config.target_version == 12
    assert config.settings["checks"] == ["all"]


def test_problems_keep_per_checker_order(packages: list[FakePackage]) -> None:
    first = FakeChecker("unused", problems=[make_problem("a.go", line, "u") for line in (5, 1, 3)])
    second = FakeChecker("simple", problems=[make_problem("b.go", line, "s") for line in (9, 2)])

    problems = run_checkers([first, second], packages, Options(max_concurrent_jobs=2))

    assert [p.position.line for p in problems if p.position.file == "a.go"] == [5, 1, 3]
    assert [p.position.line for p in problems if p.position.file == "b.go"] == [9, 2]


def test_serial_and_parallel_runs_yield_same_set(packages: list[FakePackage]) -> None:
    def build() -> list[FakeChecker]:
        return [
            FakeChecker(name, problems=[make_problem(f"{name}.go", line, name) for line in range(1, 4)], delay=0.01)
            for name in ("unused", "simple", "staticcheck", "stylecheck")
        ]

    serial = run_checkers(build(), packages, Options(max_concurrent_jobs=1))
    parallel = run_checkers(build(), packages, Options(max_concurrent_jobs=4))

    assert len(serial) == len(parallel) == 12
    assert _problem_keys(serial) == _problem_keys(parallel)


@pytest.mark.parametrize("jobs", [1, 2])
def test_concurrency_bound_is_respected(packages: list[FakePackage], jobs: int) -> None:
    tracker = ConcurrencyTracker()
    checkers = [TrackedChecker(f"c{index}", delay=0.05, tracker=tracker) for index in range(4)]

    run_checkers(checkers, packages, Options(max_concurrent_jobs=jobs))

    assert 1 <= tracker.peak <= jobs


def test_resolve_workers_defaults_to_cpu_bound(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("megacheck.engine.default_parallel_jobs", lambda: 2)
    assert resolve_workers(Options(), 3) == 2
    assert resolve_workers(Options(), 1) == 1
    monkeypatch.setattr("megacheck.engine.default_parallel_jobs", lambda: 6)
    assert resolve_workers(Options(), 3) == 3
    assert resolve_workers(Options(max_concurrent_jobs=8), 3) == 3
    assert resolve_workers(Options(max_concurrent_jobs=2), 3) == 2
    assert resolve_workers(Options(), 0) == 1


@pytest.mark.parametrize("jobs", [1, 3])
def test_checker_failure_is_atomic(packages: list[FakePackage], jobs: int) -> None:
    good = FakeChecker("unused", problems=[make_problem("a.go", 1, "kept?")])
    bad = FakeChecker("simple", error=RuntimeError("boom"))
    other = FakeChecker("stylecheck", problems=[make_problem("b.go", 2, "kept?")])

    with pytest.raises(CheckerError) as excinfo:
        run_checkers([good, bad, other], packages, Options(max_concurrent_jobs=jobs))

    error = excinfo.value
    assert error.kind is ErrorKind.CHECKER
    assert error.checker == "simple"
    assert isinstance(error.__cause__, RuntimeError)
    assert str(error) == "simple: RuntimeError: boom"


def test_checker_raising_checker_error_keeps_its_message(packages: list[FakePackage]) -> None:
    bad = FakeChecker("staticcheck", error=CheckerError("type info missing", checker="SA1019"))

    with pytest.raises(CheckerError) as excinfo:
        run_checkers([bad], packages, Options())

    assert excinfo.value.checker == "SA1019"
    assert excinfo.value.message == "type info missing"


def test_ignore_rules_drop_or_flag_problems(packages: list[FakePackage]) -> None:
    problems = [
        make_problem("gen/api.go", 4, "func x is unused", check="U1000"),
        make_problem("main.go", 7, "func y is unused", check="U1000"),
    ]

    dropped = run_checkers([FakeChecker("unused", problems=problems)], packages, Options(ignores="gen/*:U1000"))
    flagged = run_checkers(
        [FakeChecker("unused", problems=problems)],
        packages,
        Options(ignores="gen/*:U1000", return_ignored=True),
    )

    assert [p.position.file for p in dropped] == ["main.go"]
    assert [(p.position.file, p.ignored) for p in flagged] == [("gen/api.go", True), ("main.go", False)]


def test_stats_record_each_checker(packages: list[FakePackage]) -> None:
    stats = PerfStats()
    checkers = [FakeChecker("unused"), FakeChecker("simple", error=ValueError("bad"))]

    with pytest.raises(CheckerError):
        run_checkers(checkers, packages, Options(max_concurrent_jobs=1), stats=stats)

    snapshot = stats.snapshot()
    assert set(snapshot) == {"unused", "simple"}
    assert all(seconds >= 0 for seconds in snapshot.values())
    with pytest.raises(TypeError):
        snapshot["unused"] = 1.0  # type: ignore[index]


def test_print_stats_renders_table(monkeypatch: pytest.MonkeyPatch, packages: list[FakePackage]) -> None:
    rendered: list[dict[str, float]] = []
    monkeypatch.setattr("megacheck.engine.render_perf_stats", lambda durations: rendered.append(dict(durations)))

    run_checkers([FakeChecker("unused")], packages, Options(print_stats=True))
    run_checkers([FakeChecker("unused")], packages, Options())

    assert len(rendered) == 1
    assert set(rendered[0]) == {"unused"}


def test_debug_logger_receives_trace(packages: list[FakePackage]) -> None:
    messages: list[str] = []

    run_checkers([FakeChecker("unused")], packages, Options(), debug_logger=messages.append)

    assert messages[0] == "running 1 checker(s) on 2 package(s) with 1 worker(s)"
    assert messages[-1] == "collected 0 problem(s), 0 after ignore rules"
