"""Jira API module for jira-issue-cli.

This module provides the Jira API client used by the issue commands.
"""

from .client import JiraClient
from .config import JiraConfig
from .issues import IssuesMixin
from .metadata import MetadataMixin
from .search import SearchMixin
from .users import UsersMixin


class JiraFetcher(
    MetadataMixin,
    SearchMixin,
    IssuesMixin,
    UsersMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from mixins that provide specific functionality:
    - MetadataMixin: Issue creation metadata
    - SearchMixin: JQL search
    - IssuesMixin: Fetching and creating issues
    - UsersMixin: Assigning issues
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
