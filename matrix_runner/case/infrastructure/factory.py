"""CallableWorkUnitFactory — constructs CallableWorkUnit instances."""

from typing import Any

from matrix_runner.case.domain.case_function import CaseFunction
from matrix_runner.case.domain.result import CaseResult
from matrix_runner.case.infrastructure.work_unit import CallableWorkUnit
from matrix_runner.config.domain.suite import SuiteConfig
from matrix_runner.execution.domain.work_unit import WorkUnit
from matrix_runner.matrix.domain.tuple import ClientTuple
from matrix_runner.report.domain.suite import SuiteReport


class CallableWorkUnitFactory:
    """Creates one CallableWorkUnit per tuple, all sharing the suite report."""

    def __init__(
        self,
        suite: SuiteConfig,
        case_function: CaseFunction,
        report: SuiteReport,
    ) -> None:
        self._suite = suite
        self._case_function = case_function
        self._report = report

    def create(self, clients: ClientTuple, log_sink: Any | None) -> WorkUnit[CaseResult]:
        return CallableWorkUnit(
            clients=clients,
            case_function=self._case_function,
            report=self._report,
            payload=self._suite.payload,
            logger=log_sink,
        )
