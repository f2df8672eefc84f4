"""Issue link types and the request body used to link two issues."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import Field

from jira_rest_interface.base import JiraModel


class IssueLinkType(JiraModel):
    """A link type such as ``Blocks`` (inward: "is blocked by", outward: "blocks")."""

    self_url: str | None = Field(alias="self", default=None)
    id: str | None = None
    name: str | None = None
    inward: str | None = None
    outward: str | None = None


class IssueLinkTypes(JiraModel):
    issue_link_types: list[IssueLinkType] = Field(default_factory=list)


@dataclass(frozen=True)
class IssueLinkRequest:
    """Body of ``POST /rest/api/2/issueLink``.

    Args:
        type_name:         Name of the link type, e.g. 'Duplicate'.
        inward_issue_key:  Key of the issue on the inward side ('is duplicated by').
        outward_issue_key: Key of the issue on the outward side ('duplicates').
        comment:           Optional comment added to the outward issue.
    """

    type_name: str
    inward_issue_key: str
    outward_issue_key: str
    comment: str | None = None

    def to_json(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "type": {"name": self.type_name},
            "inwardIssue": {"key": self.inward_issue_key},
            "outwardIssue": {"key": self.outward_issue_key},
        }
        if self.comment is not None:
            body["comment"] = {"body": self.comment}
        return body
