"""Core client contract definitions."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from jira_rest_interface.application import ApplicationProperty
from jira_rest_interface.issue import (
    Attachment,
    BasicIssue,
    Comment,
    Comments,
    CreateIssue,
    Issue,
    Issues,
    Priority,
    Status,
    Transitions,
)
from jira_rest_interface.link import IssueLinkRequest, IssueLinkTypes
from jira_rest_interface.project import Project, ProjectMeta, Version
from jira_rest_interface.update import RawPayload, UpdatePayload

__all__ = ["IssueTrackerClient"]


class IssueTrackerClient(ABC):
    """One method per REST resource of the issue tracker.

    Read operations return typed shapes. Operations whose outcome is only an
    HTTP status code (delete, transition, link, logon check) return a bool.
    """

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------
    @abstractmethod
    def get_issue(self, issue_key: str, fields: list[str] | None = None) -> Issue | None:
        """Get an issue.

        Args:
            issue_key: The issue key, e.g. 'PROJ-42'
            fields:    Restrict the returned fields to these names

        Returns:
            The issue, or None when the response carries no fields (not found)
        """
        raise NotImplementedError

    @abstractmethod
    def get_issues_by_jql(
        self,
        jql: str,
        start_at: int,
        max_results: int,
        fields: list[str] | None = None,
    ) -> Issues:
        """Return one page of a JQL search. Pagination is left to the caller."""
        raise NotImplementedError

    @abstractmethod
    def get_issues_by_project(
        self,
        project_key: str,
        start_at: int,
        max_results: int,
        fields: list[str] | None = None,
    ) -> Issues:
        """Return one page of the issues of a project."""
        raise NotImplementedError

    @abstractmethod
    def create_issue(self, new_issue: CreateIssue | RawPayload) -> BasicIssue:
        """Create an issue and return its id/key reference."""
        raise NotImplementedError

    @abstractmethod
    def perform_update(
        self,
        issue_key: str,
        fields: Mapping[str, Any] | None = None,
        update: Mapping[str, list[dict[str, Any]]] | None = None,
    ) -> bool:
        """Edit an issue with a ``fields`` and/or ``update`` section.

        Raises:
            InvalidArgumentError: If both sections are None
        """
        raise NotImplementedError

    @abstractmethod
    def perform_update_payload(self, issue_key: str, payload: UpdatePayload) -> bool:
        """Edit an issue with an already assembled payload."""
        raise NotImplementedError

    @abstractmethod
    def update_timetracking(
        self,
        issue_key: str,
        original_estimate_minutes: int | None = None,
        remaining_estimate_minutes: int | None = None,
    ) -> bool:
        """Update the original and/or remaining estimate of an issue."""
        raise NotImplementedError

    @abstractmethod
    def reset_fields(self, issue_key: str, field_names: list[str]) -> bool:
        """Set the given fields of an issue to null."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Transitions and comments
    # ------------------------------------------------------------------
    @abstractmethod
    def get_transitions(self, issue_key: str) -> Transitions:
        raise NotImplementedError

    @abstractmethod
    def perform_transition(self, issue_key: str, transition_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_comments(self, issue_key: str) -> Comments:
        raise NotImplementedError

    @abstractmethod
    def add_comment(self, issue_key: str, message: str) -> Comment:
        """Add a comment visible to everyone."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Projects and lookup data
    # ------------------------------------------------------------------
    @abstractmethod
    def get_projects(self) -> list[Project]:
        raise NotImplementedError

    @abstractmethod
    def get_project_meta(self, project_key: str) -> ProjectMeta:
        """Return the issue creation metadata of exactly one project.

        Raises:
            InvalidArgumentError: If the response does not hold exactly that one project
        """
        raise NotImplementedError

    @abstractmethod
    def get_priorities(self) -> list[Priority]:
        raise NotImplementedError

    @abstractmethod
    def get_statuses(self) -> list[Status]:
        raise NotImplementedError

    @abstractmethod
    def get_application_property(self, property_key: str) -> ApplicationProperty:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Attachments, versions and links
    # ------------------------------------------------------------------
    @abstractmethod
    def get_attachment(self, attachment_id: str) -> Attachment:
        raise NotImplementedError

    @abstractmethod
    def delete_attachment(self, attachment_id: str) -> None:
        """Delete an attachment, raising unless the server answers 204."""
        raise NotImplementedError

    @abstractmethod
    def get_version(self, version_id: str) -> Version:
        raise NotImplementedError

    @abstractmethod
    def create_version(self, version: Version) -> Version:
        raise NotImplementedError

    @abstractmethod
    def delete_version(self, version_id: str) -> bool:
        """Delete a version. Issues referencing it have the version removed."""
        raise NotImplementedError

    @abstractmethod
    def link_issues(self, link: IssueLinkRequest) -> bool:
        raise NotImplementedError

    @abstractmethod
    def get_issue_link_types(self) -> IssueLinkTypes:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------
    @abstractmethod
    def test_logon(self) -> bool:
        """Return True when the configured credentials are accepted."""
        raise NotImplementedError
