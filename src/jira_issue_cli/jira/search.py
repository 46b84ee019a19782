"""Module for Jira search operations."""

import logging

from ..models.jira import JiraSearchResult
from .client import JiraClient
from .constants import DEFAULT_SEARCH_LIMIT, SEARCH_JIRA_FIELDS

logger = logging.getLogger("jira-issue-cli.jira")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        fields: list[str] | tuple[str, ...] | str | None = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        A valid query that matches nothing returns a result with ``total == 0``;
        only a rejected query raises. Warnings Jira attaches to an accepted
        query are kept on the result.

        Args:
            jql: JQL query string
            fields: Fields to return (comma-separated string, list or tuple)
            limit: Maximum issues to return

        Returns:
            JiraSearchResult with the issues in the order Jira returned them

        Raises:
            ApiError: If Jira rejected the query
            NetworkError: If Jira could not be reached
        """
        if fields is None:
            fields_param = ",".join(SEARCH_JIRA_FIELDS)
        elif isinstance(fields, list | tuple):
            fields_param = ",".join(fields)
        else:
            fields_param = fields

        logger.debug(f"Searching issues with JQL: {jql}")
        response = self.api_request(
            "get",
            "search",
            params={
                "jql": jql,
                "fields": fields_param,
                "startAt": 0,
                "maxResults": limit,
                "validateQuery": "warn",
            },
        )
        if not isinstance(response, dict):
            msg = f"Unexpected return value type from `search`: {type(response)}"
            logger.error(msg)
            raise TypeError(msg)

        search_result = JiraSearchResult.from_api_response(response)
        if search_result.warning_messages:
            logger.warning(
                f"JQL '{jql}' returned warnings: {'; '.join(search_result.warning_messages)}"
            )
        return search_result
