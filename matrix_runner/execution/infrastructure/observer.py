"""StructlogExecutionObserver — production observer that delegates to structlog."""

import structlog


class StructlogExecutionObserver:
    """Logs execution domain events to structlog.

    Does NOT inherit from ExecutionObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def run_started(
        self,
        run_name: str,
        total_units: int,
        tuple_size: int,
        num_threads: int,
    ) -> None:
        self._log.info(
            "execution.started",
            run_name=run_name,
            total_units=total_units,
            tuple_size=tuple_size,
            num_threads=num_threads,
        )

    def run_completed(
        self,
        run_name: str,
        total_results: int,
        rounds: int,
        interrupted: bool,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "execution.completed",
            run_name=run_name,
            total_results=total_results,
            rounds=rounds,
            interrupted=interrupted,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def round_started(self, round_number: int, pending: int) -> None:
        self._log.info(
            "execution.round.started", round_number=round_number, pending=pending
        )

    def round_completed(
        self,
        round_number: int,
        finals: int,
        retrying: int,
        dropped: int,
    ) -> None:
        self._log.info(
            "execution.round.completed",
            round_number=round_number,
            finals=finals,
            retrying=retrying,
            dropped=dropped,
        )

    def unit_completed(self, index: int) -> None:
        self._log.debug("execution.unit.completed", index=index)

    def unit_retry(self, index: int, round_number: int) -> None:
        self._log.info("execution.unit.retry", index=index, round_number=round_number)

    def unit_failed(self, index: int, reason: str) -> None:
        self._log.error("execution.unit.failed", index=index, reason=reason)

    def unit_terminate_failed(self, index: int, reason: str) -> None:
        self._log.warning("execution.unit.terminate_failed", index=index, reason=reason)

    def max_rounds_reached(self, max_rounds: int, abandoned: int) -> None:
        self._log.warning(
            "execution.max_rounds_reached", max_rounds=max_rounds, abandoned=abandoned
        )

    def log_sink_failed(self, reason: str) -> None:
        self._log.error("execution.log_sink_failed", reason=reason)

    def dispatch_failed(self, reason: str) -> None:
        self._log.error("execution.dispatch_failed", reason=reason)

    def report_failed(self, reason: str) -> None:
        self._log.error("execution.report_failed", reason=reason)

    def run_interrupted(self, run_name: str) -> None:
        self._log.warning("execution.interrupted", run_name=run_name)

    def shutdown_completed(self, run_name: str) -> None:
        self._log.info("execution.shutdown_completed", run_name=run_name)
