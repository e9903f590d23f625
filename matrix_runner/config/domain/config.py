"""Top-level MatrixConfig aggregate."""

from datetime import datetime

from pydantic import BaseModel, Field

from matrix_runner.config.domain.client import ClientConfig
from matrix_runner.config.domain.execution import ExecutionConfig
from matrix_runner.config.domain.report import ReportConfig
from matrix_runner.config.domain.suite import SuiteConfig


class MatrixConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a matrix-runner run."""

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    clients: list[ClientConfig] = Field(min_length=1)
    suite: SuiteConfig
    execution: ExecutionConfig
    report: ReportConfig = ReportConfig()

    def name_with_timestamp(self, now: datetime) -> str:
        """Report container name: ``{name}_{YYYYMMDD-HHMMSS}``."""
        return f"{self.name}_{now.strftime('%Y%m%d-%H%M%S')}"
