"""JSON report sink — serializes a SuiteReport to ``{output_dir}/{name}.json``."""

import json
from collections import Counter
from pathlib import Path
from typing import Any, TypeAlias

from matrix_runner.report.domain.suite import SuiteReport
from matrix_runner.report.infrastructure.errors import ReportWriteError

JsonDict: TypeAlias = dict[str, Any]


def build_report_json(report: SuiteReport) -> JsonDict:
    """Build the JSON document for a suite: metadata, per-status counts, entries.

    Retry entries are counted separately from final statuses; ``tuples`` counts
    the distinct tuple indices that reached a final status.
    """
    entries = report.entries
    statuses = Counter(entry.status for entry in entries)
    finished = {entry.index for entry in entries if entry.status != "retry"}
    stopped_at = report.stopped_at
    return {
        "name": report.name,
        "parent_suite": report.parent_suite,
        "started_at": report.started_at.isoformat(),
        "stopped_at": stopped_at.isoformat() if stopped_at is not None else None,
        "summary": {
            "tuples": len(finished),
            "passed": statuses.get("passed", 0),
            "failed": statuses.get("failed", 0),
            "retries": statuses.get("retry", 0),
        },
        "entries": [entry.model_dump() for entry in entries],
    }


class JsonReportSink:
    """Satisfies the ReportSink protocol by writing one JSON file per suite."""

    def __init__(self, report: SuiteReport, output_dir: Path) -> None:
        self._report = report
        self._output_dir = output_dir
        self._written: Path | None = None

    @property
    def report_path(self) -> Path:
        return self._output_dir / f"{self._report.name}.json"

    @property
    def written(self) -> Path | None:
        """Path of the last generated report, or None if nothing was written yet."""
        return self._written

    def mark_stopped(self) -> None:
        self._report.mark_stopped()

    def generate_report_files(self) -> None:
        """Write the report JSON.

        Raises:
            ReportWriteError: if the directory or file cannot be written.
        """
        path = self.report_path
        data = build_report_json(report=self._report)
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            # Test callables may return values json does not know; fall back to str.
            path.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
        except OSError as exc:
            raise ReportWriteError(path=path, reason=str(exc)) from exc
        self._written = path
