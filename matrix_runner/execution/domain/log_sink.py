"""LogSinkFactory Protocol — provisions the per-run log destination."""

from typing import Any, Protocol


class LogSinkFactory(Protocol):
    """Creates a writable log destination for one run.

    Returns None when the destination could not be created; a missing log sink
    never aborts a run.
    """

    def create(self, run_id: str | None, run_name: str) -> Any | None: ...
