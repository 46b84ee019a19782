"""Module for Jira user operations."""

import logging

from .client import JiraClient

logger = logging.getLogger("jira-issue-cli.jira")


class UsersMixin(JiraClient):
    """Mixin for Jira user operations."""

    def set_assignee(self, issue_key: str, user: str) -> None:
        """
        Assign an issue to a user.

        Jira Cloud identifies users by account ID, Server/Data Center by
        username.

        Args:
            issue_key: The issue key (e.g., PROJECT-123)
            user: Username (Server/DC) or account ID (Cloud)

        Raises:
            NotFoundError: If the issue key does not resolve
            ApiError: If Jira rejected the user
            NetworkError: If Jira could not be reached
        """
        body = {"accountId": user} if self.config.is_cloud else {"name": user}
        logger.info(f"Assigning {issue_key} to {user}")
        self.api_request("put", f"issue/{issue_key}/assignee", data=body)
