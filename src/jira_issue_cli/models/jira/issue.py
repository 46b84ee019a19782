"""
Jira issue models.

This module provides Pydantic models for Jira issues as read from the API,
and for the draft assembled client-side before an issue is created.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, JIRA_DEFAULT_KEY
from .common import (
    JiraIssueType,
    JiraPriority,
    JiraResolution,
    JiraStatus,
    JiraUser,
)
from .project import JiraProject

logger = logging.getLogger(__name__)


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.

    Every field is a copy of the server state at fetch time; the model is
    never mutated locally.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    priority: JiraPriority | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    project: JiraProject | None = None
    fix_versions: list[str] = Field(default_factory=list)
    resolution: JiraResolution | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssue":
        """
        Create a JiraIssue from a Jira API response.

        Args:
            data: The issue data from the Jira API
            **kwargs: Unused, accepted for interface compatibility

        Returns:
            A JiraIssue instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        fields = data.get("fields", {})
        if not isinstance(fields, dict):
            fields = {}

        issue_id = str(data.get("id", JIRA_DEFAULT_ID))
        key = str(data.get("key", JIRA_DEFAULT_KEY))
        summary = fields.get("summary")
        summary = str(summary) if summary is not None else EMPTY_STRING

        created = str(fields.get("created") or EMPTY_STRING)
        updated = str(fields.get("updated") or EMPTY_STRING)

        assignee = None
        if assignee_data := fields.get("assignee"):
            assignee = JiraUser.from_api_response(assignee_data)

        reporter = None
        if reporter_data := fields.get("reporter"):
            reporter = JiraUser.from_api_response(reporter_data)

        status = None
        if status_data := fields.get("status"):
            status = JiraStatus.from_api_response(status_data)

        issue_type = None
        if issue_type_data := fields.get("issuetype"):
            issue_type = JiraIssueType.from_api_response(issue_type_data)

        priority = None
        if priority_data := fields.get("priority"):
            priority = JiraPriority.from_api_response(priority_data)

        project = None
        project_data = fields.get("project")
        if isinstance(project_data, dict):
            project = JiraProject.from_api_response(project_data)

        resolution = None
        resolution_data = fields.get("resolution")
        if isinstance(resolution_data, dict):
            resolution = JiraResolution.from_api_response(resolution_data)

        fix_versions = []
        if fix_versions_data := fields.get("fixVersions"):
            if isinstance(fix_versions_data, list):
                fix_versions = [
                    str(version.get("name", ""))
                    if isinstance(version, dict)
                    else str(version)
                    for version in fix_versions_data
                    if version
                ]

        return cls(
            id=issue_id,
            key=key,
            summary=summary,
            created=created,
            updated=updated,
            status=status,
            issue_type=issue_type,
            priority=priority,
            assignee=assignee,
            reporter=reporter,
            project=project,
            fix_versions=fix_versions,
            resolution=resolution,
        )


class JiraIssueDraft(BaseModel):
    """
    An issue assembled from prompt answers and not yet sent to Jira.
    """

    project_key: str
    summary: str
    issue_type: str
    assignee: str | None = None

    def to_fields(self, assignee_key: str = "name") -> dict[str, Any]:
        """
        Build the ``fields`` object of a create-issue request.

        Args:
            assignee_key: ``name`` on Server/DC, ``accountId`` on Cloud

        Returns:
            The fields dictionary
        """
        fields: dict[str, Any] = {
            "project": {"key": self.project_key},
            "summary": self.summary,
            "issuetype": {"name": self.issue_type},
        }
        if self.assignee:
            fields["assignee"] = {assignee_key: self.assignee}
        return fields
