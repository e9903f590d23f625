"""Execution configuration models."""

from pydantic import BaseModel, Field


class ExecutionConfig(BaseModel, frozen=True):
    num_threads: int = Field(ge=1)
    max_rounds: int | None = Field(default=None, ge=1)
    timeout_seconds: float | None = Field(default=None, gt=0)
