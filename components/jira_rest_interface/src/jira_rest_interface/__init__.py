"""Contract of a Jira REST client: abstract client, result shapes, payloads and errors."""

from jira_rest_interface.application import ApplicationProperty
from jira_rest_interface.client import IssueTrackerClient
from jira_rest_interface.errors import (
    InvalidArgumentError,
    JiraApiError,
    JiraError,
    TransportStatus,
)
from jira_rest_interface.issue import (
    Attachment,
    BasicIssue,
    Comment,
    Comments,
    CreateIssue,
    Issue,
    IssueFields,
    IssueLink,
    Issues,
    Priority,
    Status,
    Timetracking,
    Transition,
    Transitions,
)
from jira_rest_interface.link import IssueLinkRequest, IssueLinkType, IssueLinkTypes
from jira_rest_interface.project import (
    IssueCreateMeta,
    IssueType,
    Project,
    ProjectMeta,
    User,
    Version,
)
from jira_rest_interface.update import (
    IssueUpdateBuilder,
    PartialUpdate,
    RawPayload,
    UpdatePayload,
)

__all__ = [
    "ApplicationProperty",
    "Attachment",
    "BasicIssue",
    "Comment",
    "Comments",
    "CreateIssue",
    "InvalidArgumentError",
    "Issue",
    "IssueCreateMeta",
    "IssueFields",
    "IssueLink",
    "IssueLinkRequest",
    "IssueLinkType",
    "IssueLinkTypes",
    "IssueTrackerClient",
    "IssueType",
    "IssueUpdateBuilder",
    "Issues",
    "JiraApiError",
    "JiraError",
    "PartialUpdate",
    "Priority",
    "Project",
    "ProjectMeta",
    "RawPayload",
    "Status",
    "Timetracking",
    "Transition",
    "Transitions",
    "TransportStatus",
    "UpdatePayload",
    "User",
    "Version",
]
