"""Tests for the Jira users mixin."""

import pytest

from jira_issue_cli.exceptions import ApiError
from tests.fixtures.jira_mocks import make_http_error


def test_set_assignee_server(jira_fetcher, mock_atlassian_jira):
    """Server/Data Center identifies the assignee by username."""
    mock_atlassian_jira.put.return_value = None

    assert jira_fetcher.set_assignee("WEB-7", "ann") is None

    mock_atlassian_jira.put.assert_called_once_with(
        "rest/api/2/issue/WEB-7/assignee", data={"name": "ann"}, params=None
    )


def test_set_assignee_cloud(cloud_fetcher, mock_atlassian_jira):
    """Cloud identifies the assignee by account ID."""
    cloud_fetcher.set_assignee("WEB-7", "5b10ac8d82e05b22cc7d4ef5")

    mock_atlassian_jira.put.assert_called_once_with(
        "rest/api/2/issue/WEB-7/assignee",
        data={"accountId": "5b10ac8d82e05b22cc7d4ef5"},
        params=None,
    )


def test_set_assignee_unknown_user(jira_fetcher, mock_atlassian_jira):
    mock_atlassian_jira.put.side_effect = make_http_error(
        400, {"errorMessages": [], "errors": {"assignee": "User 'ghost' does not exist."}}
    )

    with pytest.raises(ApiError) as exc_info:
        jira_fetcher.set_assignee("WEB-7", "ghost")

    assert exc_info.value.messages() == ["assignee: User 'ghost' does not exist."]
