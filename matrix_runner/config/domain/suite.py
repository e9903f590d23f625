"""SuiteConfig — what test is run against every tuple of the matrix."""

from typing import Any

from pydantic import BaseModel, Field


class SuiteConfig(BaseModel, frozen=True):
    """Test suite settings shared by every work unit of a run.

    ``test_case`` is an import path of the form ``package.module:callable``.
    """

    name: str = Field(min_length=1)
    test_case: str = Field(pattern=r"^[A-Za-z_][\w.]*:[A-Za-z_]\w*$")
    tuple_size: int = Field(default=1, ge=1)
    request_id: str | None = None
    parent_suite: str | None = None
    firefox_profile: str | None = None
    chrome_extension: str | None = None
    payload: dict[str, Any] = Field(default_factory=dict)
