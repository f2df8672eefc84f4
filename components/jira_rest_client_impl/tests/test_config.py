"""Tests for JiraAccount."""

import dataclasses

import pytest

from jira_rest_client_impl.config import JiraAccount


@pytest.fixture
def clean_env(monkeypatch):
    for var in ["JIRA_BASE_URL", "JIRA_USER_EMAIL", "JIRA_API_TOKEN"]:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_account_is_immutable():
    account = JiraAccount("https://jira.example.com", "alice", "secret")

    with pytest.raises(dataclasses.FrozenInstanceError):
        account.user = "bob"


def test_repr_hides_password():
    assert "secret" not in repr(JiraAccount("https://jira.example.com", "alice", "secret"))


def test_from_env_lists_only_missing_variables(clean_env):
    clean_env.setenv("JIRA_BASE_URL", "https://jira.example.com")

    with pytest.raises(EnvironmentError) as exc_info:
        JiraAccount.from_env()

    message = str(exc_info.value)
    assert "JIRA_USER_EMAIL" in message
    assert "JIRA_API_TOKEN" in message
    assert "JIRA_BASE_URL" not in message


def test_from_env_interactive_prompts_for_missing(clean_env):
    clean_env.setenv("JIRA_BASE_URL", "https://jira.example.com")
    clean_env.setattr("builtins.input", lambda prompt: " alice ")
    clean_env.setattr("jira_rest_client_impl.config.getpass", lambda prompt: "token")

    account = JiraAccount.from_env(interactive=True)

    assert account == JiraAccount("https://jira.example.com", "alice", "token")
