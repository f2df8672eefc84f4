"""
Jira REST API v2 client
-----------------------
Every public method builds a fresh ApiRequest, sends it through one shared
requests.Session (HTTP basic auth attached) and either decodes the JSON body
into a typed shape or, for operations answered only by a status code,
returns whether the one expected status came back.

Validation differs per operation:
    - decoded reads fail only on transport errors and 400 Bad Request; the
      expected status is logged when it differs but not enforced
    - status-gated operations (delete version, transition, link, logon)
      return True only for their single success code
    - issue links succeed on 201 even though Jira's docs say 200

Dependencies:
    uv add requests pydantic
"""
#to avoid having to consider forward declarations, the below line must be first line in the file
from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError
from requests.auth import HTTPBasicAuth

from jira_rest_client_impl import resource_urls
from jira_rest_client_impl.config import JiraAccount
from jira_rest_client_impl.request import ApiRequest
from jira_rest_interface.application import ApplicationProperty
from jira_rest_interface.client import IssueTrackerClient
from jira_rest_interface.errors import InvalidArgumentError, JiraApiError, TransportStatus
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
from jira_rest_interface.project import IssueCreateMeta, Project, ProjectMeta, Version
from jira_rest_interface.update import (
    PartialUpdate,
    RawPayload,
    UpdatePayload,
    reset_fields_update,
    timetracking_update,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204
HTTP_BAD_REQUEST = 400


def _fields_param(fields: list[str] | None) -> list[tuple[str, str]]:
    if fields is None:
        return []
    return [("fields", ",".join(fields))]


# ---------------------------------------------------------------------------
# Client implementation
# ---------------------------------------------------------------------------

class JiraClient(IssueTrackerClient):
    """
    Args:
        account: Server URL and basic-auth credentials (see JiraAccount)

    Constructing the client only prepares the session; nothing is sent
    until the first operation is called.
    """

    def __init__(self, account: JiraAccount) -> None:
        self._account = account
        self._base_url = account.server_url.rstrip("/")
        self._session = requests.Session()
        self._session.auth = HTTPBasicAuth(account.user, account.password)
        self._session.headers.update({"Accept": "application/json", "Content-Type": "application/json"})

    @property
    def account(self) -> JiraAccount:
        return self._account

    # ------------------------------------------------------------------
    # Internal HTTP helpers
    # ------------------------------------------------------------------

    def _send(self, request: ApiRequest) -> requests.Response:
        """Send a request, turning transport failures into JiraApiError."""
        url = f"{self._base_url}{request.path}"
        logger.debug("%s %s params=%s", request.method, url, request.params)
        try:
            return self._session.request(
                request.method,
                url,
                params=list(request.params) or None,
                json=request.body,
            )
        except requests.Timeout as exc:
            raise JiraApiError(transport_status=TransportStatus.TIMED_OUT, reason=str(exc)) from exc
        except requests.RequestException as exc:
            raise JiraApiError(transport_status=TransportStatus.ERROR, reason=str(exc)) from exc

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        """Only 400 Bad Request is treated as an error response here."""
        if response.status_code == HTTP_BAD_REQUEST:
            raise JiraApiError(
                status_code=response.status_code,
                reason=response.reason,
                body=response.text,
            )

    def _send_checked(self, request: ApiRequest) -> requests.Response:
        response = self._send(request)
        self._raise_for_status(response)
        return response

    @staticmethod
    def _json_body(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise JiraApiError(
                f"Could not decode response body as JSON: {exc}",
                status_code=response.status_code,
                reason=response.reason,
                body=response.text,
            ) from exc

    def _warn_unexpected(self, request: ApiRequest, response: requests.Response, expected: int) -> None:
        #not enforced, the body is still decoded
        if response.status_code != expected:
            logger.warning(
                "%s %s returned HTTP %s, expected %s",
                request.method, request.path, response.status_code, expected,
            )

    def _fetch_json(self, request: ApiRequest, expected_status: int) -> tuple[requests.Response, Any]:
        response = self._send_checked(request)
        self._warn_unexpected(request, response, expected_status)
        return response, self._json_body(response)

    @staticmethod
    def _validate(adapter: TypeAdapter, data: Any, response: requests.Response) -> Any:
        try:
            return adapter.validate_python(data)
        except ValidationError as exc:
            raise JiraApiError(
                f"Unexpected response shape: {exc}",
                status_code=response.status_code,
                reason=response.reason,
                body=response.text,
            ) from exc

    def execute(self, request: ApiRequest, result_type: type[M], expected_status: int = HTTP_OK) -> M:
        """Send a request and decode the JSON body into ``result_type``.

        Raises:
            JiraApiError: On transport failure, 400 Bad Request or an undecodable body.
        """
        response, data = self._fetch_json(request, expected_status)
        return self._validate(TypeAdapter(result_type), data if isinstance(data, dict) else {}, response)

    def execute_list(self, request: ApiRequest, item_type: type[M], expected_status: int = HTTP_OK) -> list[M]:
        """Like execute, for endpoints answering with a JSON array."""
        response, data = self._fetch_json(request, expected_status)
        return self._validate(TypeAdapter(list[item_type]), data if isinstance(data, list) else [], response)

    def execute_for_status(self, request: ApiRequest, success_status: int) -> bool:
        """Send a request whose only result is its status code.

        Returns:
            True if the response has exactly ``success_status``.
        """
        response = self._send_checked(request)
        return response.status_code == success_status

    # ------------------------------------------------------------------
    # Issues
    # ------------------------------------------------------------------

    def get_issue(self, issue_key: str, fields: list[str] | None = None) -> Issue | None:
        """Fetch a single issue by key.

        Returns None when the response has no ``fields`` object or an empty
        one, which is how Jira answers for a missing issue.
        """
        request = ApiRequest.get(resource_urls.issue_by_key(issue_key), _fields_param(fields))
        response, data = self._fetch_json(request, HTTP_OK)
        #checked on the raw body so untyped or falsy fields still count
        if not isinstance(data, dict) or not data.get("fields"):
            return None
        return self._validate(TypeAdapter(Issue), data, response)

    def get_issues_by_jql(
        self,
        jql: str,
        start_at: int,
        max_results: int,
        fields: list[str] | None = None,
    ) -> Issues:
        params: list[tuple[str, Any]] = [("jql", jql)]
        params += _fields_param(fields)
        params += [("startAt", start_at), ("maxResults", max_results)]
        return self.execute(ApiRequest.get(resource_urls.search(), params), Issues)

    def get_issues_by_project(
        self,
        project_key: str,
        start_at: int,
        max_results: int,
        fields: list[str] | None = None,
    ) -> Issues:
        return self.get_issues_by_jql(f"project={project_key}", start_at, max_results, fields)

    def create_issue(self, new_issue: CreateIssue | RawPayload) -> BasicIssue:
        """Create a new issue and return its id/key reference."""
        request = ApiRequest.post(resource_urls.issue(), new_issue.to_json())
        return self.execute(request, BasicIssue, HTTP_CREATED)

    def perform_update(
        self,
        issue_key: str,
        fields: Mapping[str, Any] | None = None,
        update: Mapping[str, list[dict[str, Any]]] | None = None,
    ) -> bool:
        """
        Args:
            issue_key: The issue to edit
            fields:    Full-value replacements, e.g. {"summary": "New summary"}
            update:    Operation lists, e.g. {"labels": [{"add": "triaged"}]}

        Raises:
            InvalidArgumentError: If both sections are None. Nothing is sent.
        """
        return self.perform_update_payload(issue_key, PartialUpdate(fields=fields, update=update))

    def perform_update_payload(self, issue_key: str, payload: UpdatePayload) -> bool:
        """Send an edit; success is 200 or 204."""
        if payload is None:
            raise InvalidArgumentError("An update payload is required")
        request = ApiRequest.put(resource_urls.issue_by_key(issue_key), payload.to_json())
        response = self._send_checked(request)
        return response.status_code in (HTTP_OK, HTTP_NO_CONTENT)

    def update_timetracking(
        self,
        issue_key: str,
        original_estimate_minutes: int | None = None,
        remaining_estimate_minutes: int | None = None,
    ) -> bool:
        payload = timetracking_update(original_estimate_minutes, remaining_estimate_minutes)
        return self.perform_update_payload(issue_key, payload)

    def reset_fields(self, issue_key: str, field_names: list[str]) -> bool:
        return self.perform_update_payload(issue_key, reset_fields_update(field_names))

    # ------------------------------------------------------------------
    # Transitions and comments
    # ------------------------------------------------------------------

    def get_transitions(self, issue_key: str) -> Transitions:
        return self.execute(ApiRequest.get(resource_urls.transitions_by_key(issue_key)), Transitions)

    def perform_transition(self, issue_key: str, transition_id: str) -> bool:
        request = ApiRequest.post(
            resource_urls.transitions_by_key(issue_key),
            {"transition": {"id": transition_id}},
        )
        # No response body expected
        return self.execute_for_status(request, HTTP_NO_CONTENT)

    def get_comments(self, issue_key: str) -> Comments:
        return self.execute(ApiRequest.get(resource_urls.comment_by_key(issue_key)), Comments)

    def add_comment(self, issue_key: str, message: str) -> Comment:
        """Add a public comment; restricted visibility is not supported."""
        request = ApiRequest.post(resource_urls.comment_by_key(issue_key), {"body": message})
        return self.execute(request, Comment, HTTP_CREATED)

    # ------------------------------------------------------------------
    # Projects and lookup data
    # ------------------------------------------------------------------

    def get_projects(self) -> list[Project]:
        """Return all projects the current user may view."""
        return self.execute_list(ApiRequest.get(resource_urls.project()), Project)

    def get_project_meta(self, project_key: str) -> ProjectMeta:
        """Return the available issue types for creating issues in one project.

        createmeta can describe several projects; exactly one, with the
        requested key, must come back.
        """
        request = ApiRequest.get(resource_urls.create_meta(), [("projectKeys", project_key)])
        create_meta = self.execute(request, IssueCreateMeta)
        projects = create_meta.projects
        if len(projects) != 1 or projects[0].key != project_key:
            raise InvalidArgumentError(
                f"Expected create metadata for project {project_key!r} only, "
                f"got {[p.key for p in projects]}"
            )
        return projects[0]

    def get_priorities(self) -> list[Priority]:
        return self.execute_list(ApiRequest.get(resource_urls.priority()), Priority)

    def get_statuses(self) -> list[Status]:
        return self.execute_list(ApiRequest.get(resource_urls.status()), Status)

    def get_application_property(self, property_key: str) -> ApplicationProperty:
        request = ApiRequest.get(resource_urls.application_properties(), [("key", property_key)])
        return self.execute(request, ApplicationProperty)

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------

    def get_attachment(self, attachment_id: str) -> Attachment:
        return self.execute(ApiRequest.get(resource_urls.attachment_by_id(attachment_id)), Attachment)

    def delete_attachment(self, attachment_id: str) -> None:
        """
        Raises:
            JiraApiError: Unless Jira answers 204 No Content.
        """
        response = self._send_checked(ApiRequest.delete(resource_urls.attachment_by_id(attachment_id)))
        if response.status_code != HTTP_NO_CONTENT:
            raise JiraApiError(
                f"Failed to delete attachment with id={attachment_id}",
                status_code=response.status_code,
                reason=response.reason,
                body=response.text,
            )

    # ------------------------------------------------------------------
    # Versions
    # ------------------------------------------------------------------

    def get_version(self, version_id: str) -> Version:
        return self.execute(ApiRequest.get(resource_urls.version_by_id(version_id)), Version)

    def create_version(self, version: Version) -> Version:
        """At least ``name`` and ``project`` need to be set."""
        request = ApiRequest.post(resource_urls.version_by_id(""), version.to_json())
        return self.execute(request, Version, HTTP_CREATED)

    def delete_version(self, version_id: str) -> bool:
        """Delete a version; issues with it as fix or affects version lose it.

        Moving those issues to another version (moveFixIssuesTo /
        moveAffectedIssuesTo) is not supported.
        """
        return self.execute_for_status(ApiRequest.delete(resource_urls.version_by_id(version_id)), HTTP_NO_CONTENT)

    # ------------------------------------------------------------------
    # Issue links
    # ------------------------------------------------------------------

    def link_issues(self, link: IssueLinkRequest) -> bool:
        request = ApiRequest.post(resource_urls.issue_link(), link.to_json())
        # Jira answers 201 here, even though the API docs say 200
        return self.execute_for_status(request, HTTP_CREATED)

    def get_issue_link_types(self) -> IssueLinkTypes:
        #endpoint: GET /rest/api/2/issueLinkType
        msg = "get_issue_link_types is not yet implemented"
        raise NotImplementedError(msg)

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def test_logon(self) -> bool:
        """Check the credentials against the current-session resource.

        Jira answers 200 for an authenticated caller and 401 otherwise.
        """
        authenticated = self.execute_for_status(ApiRequest.get(resource_urls.session()), HTTP_OK)
        if not authenticated:
            logger.info("Logon check failed for user %r on %s", self._account.user, self._base_url)
        return authenticated


# ---------------------------------------------------------------------------
# Get client
# ---------------------------------------------------------------------------

def get_client(*, interactive: bool = False) -> JiraClient:
    """Return a configured JiraClient.

    Reads credentials from environment variables. If "interactive = True" and
    any variable is missing, the user will be prompted.

    Environment variables:
        JIRA_BASE_URL:    Base URL of the Jira instance.
        JIRA_USER_EMAIL:  User name or Atlassian account email.
        JIRA_API_TOKEN:   API token or password.
    """
    return JiraClient(JiraAccount.from_env(interactive=interactive))
