"""CaseResult — the recorded outcome of one attempt of one tuple's test."""

from typing import Any, Literal, TypeAlias

from pydantic import BaseModel, Field

CaseStatus: TypeAlias = Literal["passed", "failed", "retry"]


class CaseResult(BaseModel, frozen=True):
    """Immutable record of one test case attempt.

    ``value`` is whatever the test callable returned and is not interpreted.
    """

    index: int = Field(ge=1)
    clients: list[str]
    status: CaseStatus
    attempts: int = Field(ge=1)
    duration_ms: int = Field(ge=0)
    value: Any = None
    error: str | None = None
