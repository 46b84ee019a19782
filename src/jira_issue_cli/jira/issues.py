"""Module for Jira issue operations."""

import logging

from ..exceptions import ApiError
from ..models.jira import JiraIssue, JiraIssueDraft
from .client import JiraClient
from .constants import DEFAULT_READ_JIRA_FIELDS

logger = logging.getLogger("jira-issue-cli.jira")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(
        self,
        issue_key: str,
        fields: list[str] | tuple[str, ...] | str | None = None,
    ) -> JiraIssue:
        """
        Get a Jira issue by key.

        Args:
            issue_key: The issue key (e.g., PROJECT-123)
            fields: Fields to return (comma-separated string, list or tuple)

        Returns:
            JiraIssue model with issue data

        Raises:
            NotFoundError: If the key does not resolve to an issue
            ApiError: If Jira rejected the request
            NetworkError: If Jira could not be reached
        """
        if fields is None:
            fields_param = ",".join(DEFAULT_READ_JIRA_FIELDS)
        elif isinstance(fields, list | tuple):
            fields_param = ",".join(fields)
        else:
            fields_param = fields

        issue = self.api_request(
            "get", f"issue/{issue_key}", params={"fields": fields_param}
        )
        if not isinstance(issue, dict):
            msg = f"Unexpected return value type for issue {issue_key}: {type(issue)}"
            logger.error(msg)
            raise TypeError(msg)

        return JiraIssue.from_api_response(issue)

    def create_issue(self, draft: JiraIssueDraft) -> JiraIssue:
        """
        Create a new Jira issue.

        The summary is sent as typed; Jira is authoritative for rejecting it.

        Args:
            draft: Project key, summary, issue type and optional assignee

        Returns:
            JiraIssue carrying the id and key Jira assigned

        Raises:
            ApiError: If Jira rejected the issue (``errors`` holds per-field messages)
            NetworkError: If Jira could not be reached
        """
        assignee_key = "accountId" if self.config.is_cloud else "name"
        fields = draft.to_fields(assignee_key=assignee_key)
        logger.info(
            f"Creating {draft.issue_type} in project {draft.project_key}: {draft.summary!r}"
        )

        response = self.api_request("post", "issue", data={"fields": fields})
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from `issue`: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        if not response.get("key"):
            raise ApiError("No issue key in response")

        return JiraIssue.from_api_response(response)
