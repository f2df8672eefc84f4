"""Issue contract - typed shapes for issues and everything hanging off an issue."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pydantic import ConfigDict, Field

from jira_rest_interface.base import JiraModel
from jira_rest_interface.link import IssueLinkType
from jira_rest_interface.project import IssueType, Project, User, Version


class Priority(JiraModel):
    self_url: str | None = Field(alias="self", default=None)
    id: str | None = None
    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    status_color: str | None = None


class Status(JiraModel):
    self_url: str | None = Field(alias="self", default=None)
    id: str | None = None
    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    status_category: dict | None = None


class Timetracking(JiraModel):
    original_estimate: str | None = None
    remaining_estimate: str | None = None
    time_spent: str | None = None
    original_estimate_seconds: int | None = None
    remaining_estimate_seconds: int | None = None
    time_spent_seconds: int | None = None


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

class Comment(JiraModel):
    self_url: str | None = Field(alias="self", default=None)
    id: str | None = None
    author: User | None = None
    body: str | None = None
    update_author: User | None = None
    created: str | None = None
    updated: str | None = None
    #only set for restricted comments, which this client never creates
    visibility: dict | None = None


class Comments(JiraModel):
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    comments: list[Comment] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Attachments and transitions
# ---------------------------------------------------------------------------

class Attachment(JiraModel):
    self_url: str | None = Field(alias="self", default=None)
    id: str | None = None
    filename: str | None = None
    author: User | None = None
    created: str | None = None
    size: int | None = None
    mime_type: str | None = None
    #download URL of the attachment body
    content: str | None = None
    thumbnail: str | None = None


class Transition(JiraModel):
    id: str | None = None
    name: str | None = None
    #status the issue ends up in after the transition
    to: Status | None = None
    fields: dict | None = None


class Transitions(JiraModel):
    expand: str | None = None
    transitions: list[Transition] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Issues
# ---------------------------------------------------------------------------

class BasicIssue(JiraModel):
    """Minimal issue reference, as returned by issue creation."""

    id: str | None = None
    key: str | None = None
    self_url: str | None = Field(alias="self", default=None)


class IssueLink(JiraModel):
    id: str | None = None
    type: IssueLinkType | None = None
    inward_issue: BasicIssue | None = None
    outward_issue: BasicIssue | None = None


class IssueFields(JiraModel):
    """The ``fields`` object of an issue.

    Only the commonly used system fields are typed. Every other key the
    response carries is kept as an extra; ``custom_fields`` returns the
    ``customfield_*`` ones.
    """

    model_config = ConfigDict(extra="allow")

    summary: str | None = None
    description: str | None = None
    issuetype: IssueType | None = None
    project: Project | None = None
    status: Status | None = None
    priority: Priority | None = None
    assignee: User | None = None
    reporter: User | None = None
    creator: User | None = None
    created: str | None = None
    updated: str | None = None
    duedate: str | None = None
    resolutiondate: str | None = None
    labels: list[str] = Field(default_factory=list)
    fix_versions: list[Version] = Field(default_factory=list)
    versions: list[Version] = Field(default_factory=list)
    comment: Comments | None = None
    attachment: list[Attachment] = Field(default_factory=list)
    timetracking: Timetracking | None = None
    issuelinks: list[IssueLink] = Field(default_factory=list)
    subtasks: list[BasicIssue] = Field(default_factory=list)
    parent: BasicIssue | None = None

    @property
    def custom_fields(self) -> dict[str, Any]:
        extra = self.model_extra or {}
        return {k: v for k, v in extra.items() if k.startswith("customfield_")}


class Issue(JiraModel):
    expand: str | None = None
    id: str | None = None
    key: str | None = None
    self_url: str | None = Field(alias="self", default=None)
    fields: IssueFields | None = None


class Issues(JiraModel):
    """One page of a JQL search."""

    expand: str | None = None
    start_at: int | None = None
    max_results: int | None = None
    total: int | None = None
    issues: list[Issue] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Issue creation payload
# ---------------------------------------------------------------------------

@dataclass
class CreateIssue:
    """Body of ``POST /rest/api/2/issue``.

    Fields left as None (or empty) are not sent. ``extra_fields`` is merged
    into the ``fields`` object as-is, e.g. ``{"customfield_10010": "x"}``.
    """

    project_key: str
    issue_type_name: str
    summary: str
    description: str | None = None
    priority_name: str | None = None
    assignee_name: str | None = None
    duedate: str | None = None
    parent_key: str | None = None
    labels: list[str] = field(default_factory=list)
    component_names: list[str] = field(default_factory=list)
    fix_version_names: list[str] = field(default_factory=list)
    extra_fields: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "project": {"key": self.project_key},
            "issuetype": {"name": self.issue_type_name},
            "summary": self.summary,
        }
        if self.description is not None:
            fields["description"] = self.description
        if self.priority_name is not None:
            fields["priority"] = {"name": self.priority_name}
        if self.assignee_name is not None:
            fields["assignee"] = {"name": self.assignee_name}
        if self.duedate is not None:
            fields["duedate"] = self.duedate
        if self.parent_key is not None:
            fields["parent"] = {"key": self.parent_key}
        if self.labels:
            fields["labels"] = list(self.labels)
        if self.component_names:
            fields["components"] = [{"name": n} for n in self.component_names]
        if self.fix_version_names:
            fields["fixVersions"] = [{"name": n} for n in self.fix_version_names]
        fields.update(self.extra_fields)
        return {"fields": fields}
