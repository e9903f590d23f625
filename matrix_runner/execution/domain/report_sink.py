"""ReportSink Protocol — receives the end-of-run notifications from the engine."""

from typing import Protocol


class ReportSink(Protocol):
    def mark_stopped(self) -> None: ...

    def generate_report_files(self) -> None: ...
