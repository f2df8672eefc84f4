"""requests-backed implementation of the Jira REST client contract."""

from jira_rest_client_impl.config import JiraAccount
from jira_rest_client_impl.jira_impl import JiraClient, get_client
from jira_rest_client_impl.request import ApiRequest

__all__ = ["ApiRequest", "JiraAccount", "JiraClient", "get_client"]
