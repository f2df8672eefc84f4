"""Request descriptor: everything needed to send one HTTP request to Jira."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


@dataclass(frozen=True)
class ApiRequest:
    """A single request, built fresh for every client call.

    Args:
        method: HTTP method (GET, POST, PUT, DELETE)
        path:   Path relative to the server URL, from ``resource_urls``
        params: Ordered (name, value) query parameters, duplicates allowed
        body:   JSON-serializable body, or None for no body
    """

    method: str
    path: str
    params: tuple[tuple[str, Any], ...] = ()
    body: Any = None

    @classmethod
    def get(cls, path: str, params: Iterable[tuple[str, Any]] = ()) -> ApiRequest:
        return cls("GET", path, tuple(params))

    @classmethod
    def post(cls, path: str, body: Any) -> ApiRequest:
        return cls("POST", path, body=body)

    @classmethod
    def put(cls, path: str, body: Any) -> ApiRequest:
        return cls("PUT", path, body=body)

    @classmethod
    def delete(cls, path: str) -> ApiRequest:
        return cls("DELETE", path)
