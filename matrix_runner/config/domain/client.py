"""ClientConfig value object — one client (browser) configuration under test."""

from pydantic import BaseModel, Field


class ClientConfig(BaseModel, frozen=True):
    """Immutable description of one client participating in a test tuple."""

    browser_name: str = Field(min_length=1)
    version: str | None = None
    platform: str | None = None
    profile: str | None = None
    extension: str | None = None

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``chrome 120 (LINUX)``."""
        text = self.browser_name
        if self.version:
            text += f" {self.version}"
        if self.platform:
            text += f" ({self.platform})"
        return text
