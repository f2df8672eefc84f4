"""Connection settings of a JiraClient.

Credentials are read from the environment:
    JIRA_BASE_URL   https://jira.example.com
    JIRA_USER_EMAIL me@example.com (or the Jira user name on Server/Data Center)
    JIRA_API_TOKEN  API token, or the password on Server/Data Center
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from getpass import getpass

ENV_BASE_URL = "JIRA_BASE_URL"
ENV_USER = "JIRA_USER_EMAIL"
ENV_TOKEN = "JIRA_API_TOKEN"


@dataclass(frozen=True)
class JiraAccount:
    """Server URL and basic-auth credentials. Immutable once the client is built."""

    server_url: str
    user: str
    password: str

    def __repr__(self) -> str:
        # keep the secret out of logs and tracebacks
        return f"JiraAccount(server_url={self.server_url!r}, user={self.user!r})"

    @classmethod
    def from_env(cls, *, interactive: bool = False) -> JiraAccount:
        """Build an account from environment variables.

        With ``interactive=True`` missing values are prompted for.

        Raises:
            EnvironmentError: If values are missing and ``interactive`` is False.
        """
        base_url = os.environ.get(ENV_BASE_URL, "")
        user = os.environ.get(ENV_USER, "")
        token = os.environ.get(ENV_TOKEN, "")

        if interactive:
            if not base_url:
                base_url = input("Jira base URL (e.g. https://jira.example.com): ").strip()
            if not user:
                user = input("Jira user: ").strip()
            if not token:
                token = getpass("Jira API token or password: ")
        else:
            missing = [name for name, val in [
                (ENV_BASE_URL, base_url),
                (ENV_USER, user),
                (ENV_TOKEN, token),
            ] if not val]
            if missing:
                raise EnvironmentError(
                    f"Missing required environment variables: {', '.join(missing)}. "
                    "Set them or call get_client(interactive=True)."
                )

        return cls(base_url, user, token)
