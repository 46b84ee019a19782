"""
Jira search result models.

This module provides Pydantic models for Jira search (JQL) results.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue

logger = logging.getLogger(__name__)


class JiraSearchResult(ApiModel):
    """
    Model representing a Jira search (JQL) result.

    ``total`` is -1 when Jira did not report it. Issues keep the order the
    query returned them in.
    """

    total: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)
    warning_messages: list[str] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraSearchResult":
        """
        Create a JiraSearchResult from a Jira API response.

        Args:
            data: The search result data from the Jira API
            **kwargs: Unused, accepted for interface compatibility

        Returns:
            A JiraSearchResult instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        issues = []
        issues_data = data.get("issues", [])
        if isinstance(issues_data, list):
            issues = [
                JiraIssue.from_api_response(issue_data)
                for issue_data in issues_data
                if issue_data
            ]

        raw_total = data.get("total")

        try:
            total = int(raw_total) if raw_total is not None else -1
        except (ValueError, TypeError):
            total = -1

        warnings_data = data.get("warningMessages")
        warning_messages = (
            [str(message) for message in warnings_data]
            if isinstance(warnings_data, list)
            else []
        )

        return cls(
            total=total,
            issues=issues,
            warning_messages=warning_messages,
        )

    @property
    def has_results(self) -> bool:
        """True when the query matched at least one issue."""
        return self.total > 0
