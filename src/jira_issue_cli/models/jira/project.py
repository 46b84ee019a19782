"""
Jira project models.

This module provides Pydantic models for Jira projects and for the issue
creation metadata (``issue/createmeta``) listing every project the user can
create issues in, with the issue types each one supports.
"""

import logging
from typing import Any

from pydantic import Field

from ..base import ApiModel
from ..constants import EMPTY_STRING, JIRA_DEFAULT_ID, UNKNOWN
from .common import JiraIssueType

logger = logging.getLogger(__name__)


class JiraProject(ApiModel):
    """
    Model representing a Jira project as embedded in an issue.
    """

    id: str = JIRA_DEFAULT_ID
    key: str = EMPTY_STRING
    name: str = UNKNOWN

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        """
        Create a JiraProject from a Jira API response.

        Args:
            data: The project data from the Jira API

        Returns:
            A JiraProject instance
        """
        if not data:
            return cls()

        if not isinstance(data, dict):
            logger.debug("Received non-dictionary data, returning default instance")
            return cls()

        project_id = data.get("id", JIRA_DEFAULT_ID)
        if project_id is not None:
            project_id = str(project_id)

        return cls(
            id=project_id,
            key=str(data.get("key", EMPTY_STRING)),
            name=str(data.get("name", UNKNOWN)),
        )

    @property
    def label(self) -> str:
        """Project as shown to the user, e.g. ``Website (WEB)``."""
        return f"{self.name} ({self.key})"


class JiraProjectMeta(JiraProject):
    """
    A project together with the issue types that can be created in it.
    """

    issue_types: list[JiraIssueType] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraProjectMeta":
        if not data or not isinstance(data, dict):
            return cls()

        project = JiraProject.from_api_response(data)
        issue_types_data = data.get("issuetypes")
        issue_types = (
            [
                JiraIssueType.from_api_response(issue_type)
                for issue_type in issue_types_data
                if issue_type
            ]
            if isinstance(issue_types_data, list)
            else []
        )
        return cls(**project.model_dump(), issue_types=issue_types)

    @property
    def issue_type_names(self) -> list[str]:
        return [issue_type.name for issue_type in self.issue_types]


class JiraCreateMeta(ApiModel):
    """
    Issue creation metadata: the projects in the order Jira returned them.
    """

    projects: list[JiraProjectMeta] = Field(default_factory=list)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraCreateMeta":
        """
        Create a JiraCreateMeta from an ``issue/createmeta`` response.

        Args:
            data: The metadata returned by the Jira API

        Returns:
            A JiraCreateMeta instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        projects_data = data.get("projects", [])
        if not isinstance(projects_data, list):
            logger.debug(f"Unexpected projects data format: {type(projects_data)}")
            return cls()

        return cls(
            projects=[
                JiraProjectMeta.from_api_response(project)
                for project in projects_data
                if project
            ]
        )

    @property
    def project_names(self) -> list[str]:
        return [project.name for project in self.projects]

    def project_by_name(self, name: str) -> JiraProjectMeta:
        """Return the first project whose display name is ``name``.

        Raises:
            KeyError: If no project has that name
        """
        for project in self.projects:
            if project.name == name:
                return project
        raise KeyError(name)
