"""Report and log output locations."""

from pathlib import Path

from pydantic import BaseModel


class ReportConfig(BaseModel, frozen=True):
    output_dir: Path = Path("./results")
    log_dir: Path = Path("./logs")
