"""Project-level result shapes: projects, users, issue types, versions and create-meta."""
from __future__ import annotations

from pydantic import Field

from jira_rest_interface.base import JiraModel


class User(JiraModel):
    self_url: str | None = Field(alias="self", default=None)
    name: str | None = None
    key: str | None = None
    account_id: str | None = None
    email_address: str | None = None
    display_name: str | None = None
    active: bool | None = None
    time_zone: str | None = None


class IssueType(JiraModel):
    self_url: str | None = Field(alias="self", default=None)
    id: str | None = None
    name: str | None = None
    description: str | None = None
    icon_url: str | None = None
    subtask: bool | None = None


class Project(JiraModel):
    """A project as returned by ``GET /rest/api/2/project``."""

    self_url: str | None = Field(alias="self", default=None)
    id: str | None = None
    key: str | None = None
    name: str | None = None
    description: str | None = None
    project_type_key: str | None = None
    lead: User | None = None
    avatar_urls: dict | None = None
    issue_types: list[IssueType] = Field(default_factory=list)


class Version(JiraModel):
    """A fix/affects version.

    When creating a version at least ``name`` and ``project`` (the project
    key) need to be set.
    """

    self_url: str | None = Field(alias="self", default=None)
    id: str | None = None
    name: str | None = None
    description: str | None = None
    project: str | None = None
    project_id: int | None = None
    archived: bool | None = None
    released: bool | None = None
    overdue: bool | None = None
    start_date: str | None = None
    release_date: str | None = None
    user_release_date: str | None = None


# ---------------------------------------------------------------------------
# Create-meta: GET /rest/api/2/issue/createmeta
# ---------------------------------------------------------------------------

class ProjectMeta(JiraModel):
    """Issue creation metadata of one project (its available issue types).

    Fields per issue type are supported by Jira but not expanded here.
    """

    self_url: str | None = Field(alias="self", default=None)
    id: str | None = None
    key: str | None = None
    name: str | None = None
    avatar_urls: dict | None = None
    issuetypes: list[IssueType] = Field(default_factory=list)


class IssueCreateMeta(JiraModel):
    expand: str | None = None
    projects: list[ProjectMeta] = Field(default_factory=list)
