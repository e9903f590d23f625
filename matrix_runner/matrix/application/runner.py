"""MatrixRunner — builds the tuple matrix and executes it under an optional timeout."""

import threading
from typing import Generic, TypeVar

from matrix_runner.config.domain.config import MatrixConfig
from matrix_runner.execution.application.engine import (
    ExecutionEngine,
    PoolFactory,
    thread_pool,
)
from matrix_runner.execution.domain.log_sink import LogSinkFactory
from matrix_runner.execution.domain.observer import ExecutionObserver
from matrix_runner.execution.domain.report_sink import ReportSink
from matrix_runner.execution.domain.work_unit import WorkUnitFactory
from matrix_runner.execution.infrastructure.watchdog import TimeoutWatchdog
from matrix_runner.matrix.application.builder import apply_client_overrides, build_tuples
from matrix_runner.matrix.domain.summary import RunSummary
from matrix_runner.matrix.domain.tuple import ClientTuple

R = TypeVar("R")


class MatrixRunner(Generic[R]):
    """Runs the configured test against every tuple of the client matrix.

    The runner is free of infrastructure choices: it receives the unit factory,
    report sink and log sink factory so tests can swap them for fakes.
    ``interrupt()`` may be called from any thread, including before ``run()``.
    """

    def __init__(
        self,
        config: MatrixConfig,
        work_unit_factory: WorkUnitFactory[R],
        report_sink: ReportSink,
        log_sink_factory: LogSinkFactory,
        observer: ExecutionObserver,
        pool_factory: PoolFactory = thread_pool,
    ) -> None:
        self._config = config
        self._work_unit_factory = work_unit_factory
        self._report_sink = report_sink
        self._log_sink_factory = log_sink_factory
        self._observer = observer
        self._pool_factory = pool_factory
        self._lock = threading.Lock()
        self._engine: ExecutionEngine[R] | None = None
        self._interrupt_requested = False

    def tuples(self) -> list[ClientTuple]:
        """Build the matrix and apply the suite's browser overrides.

        Raises:
            MatrixBuildError: if the configured clients cannot form tuples.
        """
        suite = self._config.suite
        return apply_client_overrides(
            build_tuples(clients=self._config.clients, tuple_size=suite.tuple_size),
            suite=suite,
        )

    def run(self) -> RunSummary[R]:
        tuples = self.tuples()
        execution = self._config.execution
        engine: ExecutionEngine[R] = ExecutionEngine(
            tuples=tuples,
            work_unit_factory=self._work_unit_factory,
            report_sink=self._report_sink,
            log_sink_factory=self._log_sink_factory,
            observer=self._observer,
            num_threads=execution.num_threads,
            run_name=self._config.suite.name,
            run_id=self._config.suite.request_id,
            max_rounds=execution.max_rounds,
            pool_factory=self._pool_factory,
        )
        with self._lock:
            self._engine = engine
            interrupt_now = self._interrupt_requested
        if interrupt_now:
            engine.interrupt()

        watchdog: TimeoutWatchdog | None = None
        if execution.timeout_seconds is not None:
            watchdog = TimeoutWatchdog(
                timeout_seconds=execution.timeout_seconds, on_timeout=engine.interrupt
            )
            watchdog.start()
        try:
            results = engine.run()
        finally:
            if watchdog is not None:
                watchdog.stop()

        return RunSummary(
            run_id=self._config.suite.request_id,
            run_name=self._config.suite.name,
            requested=len(tuples),
            results=results,
            rounds=engine.rounds_completed,
            interrupted=engine.interrupted,
            timed_out=watchdog is not None and watchdog.fired,
        )

    def interrupt(self) -> None:
        with self._lock:
            self._interrupt_requested = True
            engine = self._engine
        if engine is not None:
            engine.interrupt()
