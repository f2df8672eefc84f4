"""Relative paths of the Jira REST resources used by the client.

Everything lives under /rest/api/2/ except the session resource.
"""

API_PREFIX = "/rest/api/2/"
SESSION_PATH = "/rest/auth/1/session"


def _url(resource: str) -> str:
    return f"{API_PREFIX}{resource}"


def issue() -> str:
    return _url("issue")


def issue_by_key(issue_key: str) -> str:
    return _url(f"issue/{issue_key}")


def transitions_by_key(issue_key: str) -> str:
    return f"{issue_by_key(issue_key)}/transitions"


def comment_by_key(issue_key: str) -> str:
    return f"{issue_by_key(issue_key)}/comment"


def create_meta() -> str:
    return _url("issue/createmeta")


def search() -> str:
    return _url("search")


def priority() -> str:
    return _url("priority")


def status() -> str:
    return _url("status")


def project() -> str:
    return _url("project")


def application_properties() -> str:
    return _url("application-properties")


def attachment_by_id(attachment_id: str) -> str:
    return _url(f"attachment/{attachment_id}")


def version_by_id(version_id: str) -> str:
    #an empty id gives the collection path used for creation: version/
    return _url(f"version/{version_id}")


def issue_link() -> str:
    return _url("issueLink")


def session() -> str:
    return SESSION_PATH
