"""
Jira data models for jira-issue-cli.

This package provides Pydantic models for Jira API data structures,
organized by entity type.
"""

from .common import (
    JiraIssueType,
    JiraPriority,
    JiraResolution,
    JiraStatus,
    JiraUser,
)
from .issue import JiraIssue, JiraIssueDraft
from .project import JiraCreateMeta, JiraProject, JiraProjectMeta
from .search import JiraSearchResult

__all__ = [
    # Common models
    "JiraUser",
    "JiraStatus",
    "JiraIssueType",
    "JiraPriority",
    "JiraResolution",
    # Entity-specific models
    "JiraProject",
    "JiraProjectMeta",
    "JiraCreateMeta",
    "JiraIssue",
    "JiraIssueDraft",
    "JiraSearchResult",
]
