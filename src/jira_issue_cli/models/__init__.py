"""
Pydantic models for Jira API responses.
"""

from .base import ApiModel
from .jira import (
    JiraCreateMeta,
    JiraIssue,
    JiraIssueDraft,
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraProjectMeta,
    JiraResolution,
    JiraSearchResult,
    JiraStatus,
    JiraUser,
)

__all__ = [
    "ApiModel",
    "JiraCreateMeta",
    "JiraIssue",
    "JiraIssueDraft",
    "JiraIssueType",
    "JiraPriority",
    "JiraProject",
    "JiraProjectMeta",
    "JiraResolution",
    "JiraSearchResult",
    "JiraStatus",
    "JiraUser",
]
