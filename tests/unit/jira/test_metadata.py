"""Tests for the Jira create-metadata mixin."""

import pytest

from jira_issue_cli.exceptions import AuthenticationError
from tests.fixtures.jira_mocks import MOCK_JIRA_CREATEMETA_RESPONSE, make_http_error


def test_get_meta_data(jira_fetcher, mock_atlassian_jira):
    mock_atlassian_jira.get.return_value = MOCK_JIRA_CREATEMETA_RESPONSE

    meta = jira_fetcher.get_meta_data()

    mock_atlassian_jira.get.assert_called_once_with(
        "rest/api/2/issue/createmeta", params=None
    )
    assert meta.project_names == ["Web", "Mobile"]
    assert [project.key for project in meta.projects] == ["WEB", "MOB"]
    assert meta.projects[1].issue_type_names == ["Task", "Bug"]


def test_get_meta_data_no_projects(jira_fetcher, mock_atlassian_jira):
    mock_atlassian_jira.get.return_value = {"projects": []}

    assert jira_fetcher.get_meta_data().projects == []


def test_get_meta_data_auth_failure(jira_fetcher, mock_atlassian_jira):
    mock_atlassian_jira.get.side_effect = make_http_error(401)

    with pytest.raises(AuthenticationError):
        jira_fetcher.get_meta_data()
