"""Tests for CallableWorkUnit and CallableWorkUnitFactory."""

from typing import Any

import pytest

from matrix_runner.case.domain.context import CaseContext
from matrix_runner.case.domain.result import CaseResult
from matrix_runner.case.infrastructure.factory import CallableWorkUnitFactory
from matrix_runner.case.infrastructure.work_unit import CallableWorkUnit
from matrix_runner.config.domain.client import ClientConfig
from matrix_runner.config.domain.suite import SuiteConfig
from matrix_runner.execution.domain.outcome import Done, Retry
from matrix_runner.matrix.domain.tuple import ClientTuple
from matrix_runner.report.domain.suite import SuiteReport
from tests.case import sample_cases


def _make_tuple() -> ClientTuple:
    return ClientTuple(
        clients=(
            ClientConfig(browser_name="firefox", version="128"),
            ClientConfig(browser_name="chrome", version="126"),
        )
    )


def _make_unit(
    case_function: Any,
    report: SuiteReport | None = None,
    payload: dict[str, Any] | None = None,
) -> tuple[CallableWorkUnit, SuiteReport]:
    report = report if report is not None else SuiteReport(name="suite")
    unit = CallableWorkUnit(
        clients=_make_tuple(),
        case_function=case_function,
        report=report,
        payload=payload,
    )
    unit.set_index(3)
    unit.set_total(5)
    return unit, report


class TestCallableWorkUnitOutcomes:
    """Return values of the test callable map onto outcomes."""

    def test_plain_value_is_done_and_passed(self) -> None:
        unit, _ = _make_unit(sample_cases.passing)

        outcome = unit.attempt()

        assert isinstance(outcome, Done)
        assert isinstance(outcome.result, CaseResult)
        assert outcome.result.status == "passed"
        assert outcome.result.value == {"clients": "firefox 128 + chrome 126", "attempt": 1}

    def test_done_value_is_unwrapped(self) -> None:
        unit, _ = _make_unit(sample_cases.passing_with_done)

        outcome = unit.attempt()

        assert isinstance(outcome, Done)
        assert outcome.result.value == "done on attempt 1"

    def test_retry_is_passed_through(self) -> None:
        unit, report = _make_unit(sample_cases.retry_once)

        first = unit.attempt()
        second = unit.attempt()

        assert first == Retry()
        assert isinstance(second, Done)
        assert second.result.attempts == 2
        assert [entry.status for entry in report.entries] == ["retry", "passed"]

    def test_exception_is_recorded_then_raised(self) -> None:
        unit, report = _make_unit(sample_cases.failing)

        with pytest.raises(AssertionError, match="tuple 3 rejected"):
            unit.attempt()

        [entry] = report.entries
        assert entry.status == "failed"
        assert entry.error == "AssertionError: tuple 3 rejected"


class TestCallableWorkUnitContext:
    """The callable receives a context describing the attempt."""

    def test_context_fields(self) -> None:
        seen: list[CaseContext] = []
        unit, _ = _make_unit(seen.append, payload={"room": "lobby"})

        unit.attempt()

        [context] = seen
        assert context.index == 3
        assert context.total == 5
        assert context.attempt == 1
        assert context.payload == {"room": "lobby"}
        assert context.clients == _make_tuple()
        assert context.should_stop is False

    def test_terminate_sets_stop_flag_seen_by_context(self) -> None:
        seen: list[CaseContext] = []
        unit, _ = _make_unit(seen.append)

        unit.terminate()
        unit.attempt()

        assert unit.terminated is True
        assert seen[0].should_stop is True

    def test_recorded_entry_lists_client_labels(self) -> None:
        unit, report = _make_unit(sample_cases.passing)

        unit.attempt()

        assert report.entries[0].clients == ["firefox 128", "chrome 126"]
        assert report.entries[0].index == 3


class TestCallableWorkUnitFactory:
    def test_creates_units_with_suite_payload_and_log_sink(self) -> None:
        seen: list[CaseContext] = []
        suite = SuiteConfig(
            name="smoke", test_case="tests.case.sample_cases:passing", payload={"k": "v"}
        )
        report = SuiteReport(name="suite")
        factory = CallableWorkUnitFactory(suite=suite, case_function=seen.append, report=report)

        unit = factory.create(clients=_make_tuple(), log_sink=None)
        unit.set_index(1)
        unit.set_total(1)
        unit.attempt()

        assert seen[0].payload == {"k": "v"}
        assert len(report.entries) == 1
