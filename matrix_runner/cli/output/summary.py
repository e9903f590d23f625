"""Terminal summary rows for a finished run."""

from pathlib import Path

from matrix_runner.case.domain.result import CaseResult
from matrix_runner.matrix.domain.summary import RunSummary

# Maximum display width for the clients column (chars).
_MAX_CLIENTS_LEN = 48


def format_elapsed(elapsed_seconds: float) -> str:
    """Format elapsed seconds as '1m 23.4s' or '5.2s'."""
    minutes, seconds = divmod(elapsed_seconds, 60)
    if minutes >= 1:
        return f"{int(minutes)}m {seconds:.1f}s"
    return f"{elapsed_seconds:.1f}s"


def run_status(summary: RunSummary[CaseResult]) -> str:
    if summary.timed_out:
        return "Timed out"
    if summary.interrupted:
        return "Interrupted"
    if summary.missing:
        return "Incomplete"
    return "Complete"


def meta_rows(
    summary: RunSummary[CaseResult],
    elapsed_seconds: float,
    report_path: Path | None,
) -> list[tuple[str, str]]:
    """Label/value pairs for the run header."""
    rows: list[tuple[str, str]] = [
        ("Run", summary.run_name),
        ("Request ID", summary.run_id or "-"),
        ("Status", run_status(summary)),
        ("Tuples", str(summary.requested)),
        ("Results", str(len(summary.results))),
        ("Missing", str(summary.missing)),
        ("Rounds", str(summary.rounds)),
        ("Elapsed", format_elapsed(elapsed_seconds=elapsed_seconds)),
    ]
    if report_path is not None:
        rows.append(("Report", str(report_path)))
    return rows


def truncate(text: str, max_len: int = _MAX_CLIENTS_LEN) -> str:
    """Truncate text to max_len, appending '…' if needed."""
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"


def result_rows(results: list[CaseResult]) -> list[tuple[str, str, str, str]]:
    """(index, clients, attempts, duration) per result, sorted by tuple index."""
    return [
        (
            str(r.index),
            truncate(" + ".join(r.clients)),
            str(r.attempts),
            f"{r.duration_ms}ms",
        )
        for r in sorted(results, key=lambda r: r.index)
    ]
