#This file is for development purposes only

import logging

from jira_rest_client_impl import get_client
from jira_rest_interface import JiraApiError


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    client = get_client(interactive=True)

    if not client.test_logon():
        print("Logon failed, check the credentials.")
        return

    print("\nProjects:")
    try:
        for project in client.get_projects():
            print(f"- {project.key}: {project.name}")
    except JiraApiError as e:
        print(f"Error connecting to Jira: {e}")
        return

    issue_key = input("\nIssue key to show (empty to skip): ").strip()
    if issue_key:
        try:
            issue = client.get_issue(issue_key, fields=["summary", "status", "assignee"])
        except JiraApiError as e:
            print(f"Error connecting to Jira: {e}")
            return
        if issue is None:
            print(f"{issue_key} not found")
        else:
            print(f"- {issue.key}: {issue.fields.summary} [{issue.fields.status.name if issue.fields.status else '?'}]")
            for transition in client.get_transitions(issue_key).transitions:
                print(f"    transition {transition.id}: {transition.name}")

if __name__ == "__main__":
    main()
