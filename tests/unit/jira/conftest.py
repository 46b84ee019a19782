"""Test fixtures for Jira unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from jira_issue_cli.jira.config import JiraConfig


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://test.atlassian.net",
            "JIRA_USERNAME": "test_username",
            "JIRA_API_TOKEN": "test_token",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a JiraConfig for a Server/Data Center instance."""
    return JiraConfig(
        url="https://jira.example.com",
        auth_type="basic",
        username="test_username",
        api_token="test_token",
    )


@pytest.fixture
def cloud_config():
    """Create a JiraConfig for a Cloud instance."""
    return JiraConfig(
        url="https://test.atlassian.net",
        auth_type="basic",
        username="test_username",
        api_token="test_token",
    )


@pytest.fixture
def mock_atlassian_jira():
    """Mock the Atlassian Jira client."""
    mock_jira = MagicMock()
    mock_jira.resource_url.side_effect = lambda resource: f"rest/api/2/{resource}"
    yield mock_jira


@pytest.fixture
def jira_fetcher(mock_config, mock_atlassian_jira):
    """Create a JiraFetcher instance with mocked dependencies."""
    from jira_issue_cli.jira import JiraFetcher

    with patch("jira_issue_cli.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        fetcher = JiraFetcher(config=mock_config)
        yield fetcher


@pytest.fixture
def cloud_fetcher(cloud_config, mock_atlassian_jira):
    """Create a JiraFetcher bound to a Cloud configuration."""
    from jira_issue_cli.jira import JiraFetcher

    with patch("jira_issue_cli.jira.client.Jira") as mock_jira_class:
        mock_jira_class.return_value = mock_atlassian_jira

        fetcher = JiraFetcher(config=cloud_config)
        yield fetcher
