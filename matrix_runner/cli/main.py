"""CLI entrypoint for matrix-runner — typer app with `run` and `tuples` commands."""

import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path

import structlog
import typer

from matrix_runner.case.domain.result import CaseResult
from matrix_runner.case.infrastructure.factory import CallableWorkUnitFactory
from matrix_runner.case.infrastructure.loader import load_case_function
from matrix_runner.cli.output.summary import meta_rows, result_rows
from matrix_runner.config.domain.config import MatrixConfig
from matrix_runner.config.infrastructure.observer import StructlogConfigObserver
from matrix_runner.config.infrastructure.yaml_loader import YamlConfigLoader
from matrix_runner.core.errors import MatrixRunnerError
from matrix_runner.execution.domain.observer import ExecutionObserver
from matrix_runner.execution.infrastructure.composite_observer import (
    CompositeExecutionObserver,
)
from matrix_runner.execution.infrastructure.observer import StructlogExecutionObserver
from matrix_runner.execution.infrastructure.progress_observer import (
    ProgressExecutionObserver,
)
from matrix_runner.logsink.infrastructure.file_factory import FileLogSinkFactory
from matrix_runner.logsink.infrastructure.observer import StructlogLogSinkObserver
from matrix_runner.matrix.application.builder import apply_client_overrides, build_tuples
from matrix_runner.matrix.application.runner import MatrixRunner
from matrix_runner.matrix.domain.summary import RunSummary
from matrix_runner.report.domain.suite import SuiteReport
from matrix_runner.report.infrastructure.json_sink import JsonReportSink

app = typer.Typer(add_completion=False)

# How often the main thread wakes up to notice Ctrl-C while a run is in progress.
_JOIN_INTERVAL_SECONDS = 0.5


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def _load_config(
    config_path: Path,
    threads: int | None = None,
    output_dir: Path | None = None,
    log_dir: Path | None = None,
) -> MatrixConfig:
    """Load the YAML config and apply command-line overrides."""
    config = YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)
    if threads is not None:
        config = config.model_copy(
            update={
                "execution": config.execution.model_copy(update={"num_threads": threads})
            }
        )
    report_updates: dict[str, Path] = {}
    if output_dir is not None:
        report_updates["output_dir"] = output_dir
    if log_dir is not None:
        report_updates["log_dir"] = log_dir
    if report_updates:
        config = config.model_copy(
            update={"report": config.report.model_copy(update=report_updates)}
        )
    return config


def _run_until_done(runner: MatrixRunner[CaseResult]) -> RunSummary[CaseResult]:
    """Run on a helper thread so Ctrl-C in the main thread becomes runner.interrupt()."""
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="matrix-run") as executor:
        future = executor.submit(runner.run)
        while True:
            try:
                return future.result(timeout=_JOIN_INTERVAL_SECONDS)
            except TimeoutError:
                continue
            except KeyboardInterrupt:
                typer.echo("Interrupt received, stopping the matrix run...", err=True)
                runner.interrupt()


# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_WHITE = "\033[97m"


def _rule(width: int = 72, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _print_summary(
    summary: RunSummary[CaseResult],
    elapsed_seconds: float,
    report_path: Path | None,
) -> None:
    """Print a colorized run header followed by one line per final result."""
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  matrix-runner  ·  {summary.run_name}{_RESET}")
    _rule(color=_CYAN)
    typer.echo("")

    rows = meta_rows(
        summary=summary, elapsed_seconds=elapsed_seconds, report_path=report_path
    )
    label_w = max(len(label) for label, _ in rows)
    for label, value in rows:
        typer.echo(f"  {_DIM}{label:<{label_w}}{_RESET}  {_WHITE}{value}{_RESET}")

    if summary.results:
        typer.echo("")
        typer.echo(f"  {_DIM}{'#':>4}  {'Clients':<48}  {'Tries':>5}  {'Duration':>9}{_RESET}")
        typer.echo(f"  {'─' * 4}  {'─' * 48}  {'─' * 5}  {'─' * 9}")
        for index, clients, attempts, duration in result_rows(results=summary.results):
            typer.echo(f"  {index:>4}  {clients:<48}  {attempts:>5}  {duration:>9}")

    typer.echo("")
    color = _GREEN if summary.complete else _RED
    typer.echo(f"  {color}{_BOLD}{len(summary.results)}/{summary.requested} tuples finished{_RESET}")
    _rule(color=_CYAN)
    typer.echo("")


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to matrix config YAML"),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", "-o", help="Directory for report files"
    ),
    log_dir: Path | None = typer.Option(
        None, "--log-dir", help="Directory for per-run log files"
    ),
    threads: int | None = typer.Option(
        None, "--threads", "-t", min=1, help="Override execution.num_threads"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Run a test against every tuple of the client matrix described by a YAML config."""
    try:
        _configure_structlog(log_format=log_format)

        try:
            config = _load_config(
                config_path=config_path,
                threads=threads,
                output_dir=output_dir,
                log_dir=log_dir,
            )
            case_function = load_case_function(config.suite.test_case)
        except MatrixRunnerError as exc:
            typer.echo(str(exc))
            raise typer.Exit(code=1) from exc

        report = SuiteReport(
            name=config.name_with_timestamp(now=datetime.now()),
            parent_suite=config.suite.parent_suite,
        )
        report_sink = JsonReportSink(report=report, output_dir=config.report.output_dir)
        log_sink_factory = FileLogSinkFactory(
            log_dir=config.report.log_dir, observer=StructlogLogSinkObserver()
        )
        observers: list[ExecutionObserver] = [StructlogExecutionObserver()]
        if log_format != "json":
            observers.append(ProgressExecutionObserver())

        runner: MatrixRunner[CaseResult] = MatrixRunner(
            config=config,
            work_unit_factory=CallableWorkUnitFactory(
                suite=config.suite, case_function=case_function, report=report
            ),
            report_sink=report_sink,
            log_sink_factory=log_sink_factory,
            observer=CompositeExecutionObserver(observers=observers),
        )

        started_at = time.monotonic()
        try:
            summary = _run_until_done(runner=runner)
        finally:
            log_sink_factory.close()
        elapsed_seconds = time.monotonic() - started_at

        _print_summary(
            summary=summary,
            elapsed_seconds=elapsed_seconds,
            report_path=report_sink.written,
        )
        if not summary.complete:
            raise typer.Exit(code=1)

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Run interrupted.")
        sys.exit(1)
    except MatrixRunnerError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.command()
def tuples(
    config_path: Path = typer.Argument(..., help="Path to matrix config YAML"),
) -> None:
    """Print the tuples a run of this config would execute, one per line."""
    _configure_structlog(log_format="console")
    try:
        config = _load_config(config_path=config_path)
        matrix = apply_client_overrides(
            build_tuples(clients=config.clients, tuple_size=config.suite.tuple_size),
            suite=config.suite,
        )
    except MatrixRunnerError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    for position, clients in enumerate(matrix, start=1):
        typer.echo(f"{position:>4}  {clients.label}")
    typer.echo(f"{len(matrix)} tuples of size {config.suite.tuple_size}")


if __name__ == "__main__":
    app()
