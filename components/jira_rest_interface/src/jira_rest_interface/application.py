"""Application property shape returned by ``GET /rest/api/2/application-properties``."""
from __future__ import annotations

from pydantic import Field

from jira_rest_interface.base import JiraModel


class ApplicationProperty(JiraModel):
    id: str | None = None
    key: str | None = None
    value: str | None = None
    name: str | None = None
    desc: str | None = None
    type: str | None = None
    default_value: str | None = None
    example: str | None = None
    allowed_values: list[str] = Field(default_factory=list)
