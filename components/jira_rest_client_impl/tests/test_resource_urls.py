"""Tests for resource paths and the request descriptor."""

import pytest

from jira_rest_client_impl import resource_urls
from jira_rest_client_impl.request import ApiRequest


@pytest.mark.parametrize("path, expected", [
    (resource_urls.issue(), "/rest/api/2/issue"),
    (resource_urls.issue_by_key("PROJ-1"), "/rest/api/2/issue/PROJ-1"),
    (resource_urls.transitions_by_key("PROJ-1"), "/rest/api/2/issue/PROJ-1/transitions"),
    (resource_urls.comment_by_key("PROJ-1"), "/rest/api/2/issue/PROJ-1/comment"),
    (resource_urls.create_meta(), "/rest/api/2/issue/createmeta"),
    (resource_urls.search(), "/rest/api/2/search"),
    (resource_urls.priority(), "/rest/api/2/priority"),
    (resource_urls.status(), "/rest/api/2/status"),
    (resource_urls.project(), "/rest/api/2/project"),
    (resource_urls.application_properties(), "/rest/api/2/application-properties"),
    (resource_urls.attachment_by_id("9"), "/rest/api/2/attachment/9"),
    (resource_urls.version_by_id("10000"), "/rest/api/2/version/10000"),
    (resource_urls.version_by_id(""), "/rest/api/2/version/"),
    (resource_urls.issue_link(), "/rest/api/2/issueLink"),
    (resource_urls.session(), "/rest/auth/1/session"),
])
def test_resource_paths(path, expected):
    assert path == expected


def test_get_request_keeps_param_order_and_duplicates():
    request = ApiRequest.get("/rest/api/2/search", [("fields", "a"), ("jql", "x"), ("fields", "b")])

    assert request.method == "GET"
    assert request.params == (("fields", "a"), ("jql", "x"), ("fields", "b"))
    assert request.body is None


def test_body_requests():
    assert ApiRequest.post("/p", {"a": 1}) == ApiRequest("POST", "/p", (), {"a": 1})
    assert ApiRequest.put("/p", {"a": 1}).method == "PUT"
    assert ApiRequest.delete("/p") == ApiRequest("DELETE", "/p")
