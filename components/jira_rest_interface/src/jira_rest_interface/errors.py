"""Exceptions raised by Jira REST clients."""
from __future__ import annotations

from enum import Enum


class TransportStatus(str, Enum):
    """Outcome of the HTTP exchange itself, independent of the HTTP status code."""

    COMPLETED = "completed"
    ERROR = "error"
    TIMED_OUT = "timed_out"


class JiraError(Exception):
    """Base class for every error raised by the client."""


class JiraApiError(JiraError):
    """Raised when a request could not be executed or Jira rejected it.

    Attributes:
        transport_status: Whether the HTTP exchange completed at all.
        status_code:      HTTP status code, None when no response was received.
        reason:           HTTP status text (e.g. 'Bad Request').
        body:             Raw response body, as text.
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        transport_status: TransportStatus = TransportStatus.COMPLETED,
        status_code: int | None = None,
        reason: str | None = None,
        body: str | None = None,
    ) -> None:
        self.transport_status = transport_status
        self.status_code = status_code
        self.reason = reason
        self.body = body
        if message is None:
            message = (
                f"Transport status: {transport_status.value} - HTTP response: "
                f"{status_code} - {reason} - {body}"
            )
        super().__init__(message)


class InvalidArgumentError(JiraError, ValueError):
    """Raised before any request is sent when the call's arguments cannot be used,
    or when a lookup does not resolve to exactly one result."""
