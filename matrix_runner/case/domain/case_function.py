"""CaseFunction Protocol — the user-supplied test executed against each tuple."""

from typing import Any, Protocol

from matrix_runner.case.domain.context import CaseContext


class CaseFunction(Protocol):
    """Runs one test against ``context.clients``.

    Return ``Retry()`` to be run again in the next round, ``Done(value)`` or any
    plain value to finish. Raising drops the tuple from the run.
    """

    def __call__(self, context: CaseContext) -> Any: ...
