"""Tests for the jira-issue command line."""

import logging
import os
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from jira_issue_cli import __version__, env_logging_level, main
from jira_issue_cli.commands import ConfiguredIdentity
from jira_issue_cli.models.jira import JiraCreateMeta


@pytest.fixture
def env():
    with patch.dict(
        os.environ,
        {
            "JIRA_URL": "https://jira.example.com",
            "JIRA_USERNAME": "ann",
            "JIRA_API_TOKEN": "secret",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def mocks(env):
    with (
        patch("jira_issue_cli.load_dotenv"),
        patch("jira_issue_cli.cli.JiraFetcher") as mock_fetcher,
        patch("jira_issue_cli.cli.IssueCommands") as mock_commands,
    ):
        yield mock_fetcher, mock_commands


def invoke(*args):
    return CliRunner().invoke(main, list(args))


def test_help_lists_commands():
    result = invoke("--help")

    assert result.exit_code == 0
    for name in ("create", "search", "open", "summary", "release", "show", "assign", "project"):
        assert name in result.output


def test_version():
    result = invoke("--version")

    assert result.exit_code == 0
    assert __version__ in result.output


def test_search(mocks):
    mock_fetcher, mock_commands = mocks

    result = invoke("search", "login")

    assert result.exit_code == 0
    kwargs = mock_commands.call_args.kwargs
    assert mock_commands.call_args.args == (mock_fetcher.return_value,)
    assert isinstance(kwargs["identity"], ConfiguredIdentity)
    assert kwargs["identity"].assignee() == "ann"
    assert kwargs["limit"] == 50
    assert kwargs["color"] is True
    mock_commands.return_value.search.assert_called_once_with("login")


def test_global_options(mocks):
    _, mock_commands = mocks

    result = invoke("--no-color", "--limit", "5", "project", "WEB")

    assert result.exit_code == 0
    assert mock_commands.call_args.kwargs["limit"] == 5
    assert mock_commands.call_args.kwargs["color"] is False
    mock_commands.return_value.get_project_issues.assert_called_once_with("WEB")


@pytest.mark.parametrize(
    "args,method,expected",
    [
        (("create",), "create", {"self_assign": False}),
        (("create", "--self"), "create", {"self_assign": True}),
    ],
)
def test_create(mocks, args, method, expected):
    _, mock_commands = mocks

    result = invoke(*args)

    assert result.exit_code == 0
    getattr(mock_commands.return_value, method).assert_called_once_with(**expected)


@pytest.mark.parametrize(
    "args,method,expected",
    [
        (("open", "WEB-7"), "open_issue", ("WEB-7",)),
        (("show", "WEB-7"), "find_issue", ("WEB-7",)),
        (("summary",), "summary", (None,)),
        (("summary", "bob"), "summary", ("bob",)),
        (("release", "WEB", "1.0"), "get_release_issues", ("WEB", "1.0")),
        (("assign", "WEB-7", "bob"), "assign_issue", ("WEB-7", "bob")),
    ],
)
def test_commands_dispatch(mocks, args, method, expected):
    _, mock_commands = mocks

    result = invoke(*args)

    assert result.exit_code == 0
    getattr(mock_commands.return_value, method).assert_called_once_with(*expected)


def test_fatal_failure_exit_code(mocks):
    _, mock_commands = mocks
    mock_commands.return_value.find_issue.side_effect = SystemExit(1)

    result = invoke("show", "WEB-999")

    assert result.exit_code == 1


def test_missing_configuration():
    with (
        patch.dict(os.environ, {}, clear=True),
        patch("jira_issue_cli.load_dotenv"),
    ):
        result = invoke("search", "login")

    assert result.exit_code == 1
    assert "Missing required JIRA_URL environment variable" in result.output


def test_options_override_environment():
    with (
        patch.dict(os.environ, {}, clear=True),
        patch("jira_issue_cli.load_dotenv"),
        patch("jira_issue_cli.cli.JiraFetcher") as mock_fetcher,
        patch("jira_issue_cli.cli.IssueCommands"),
    ):
        result = invoke(
            "--jira-url",
            "https://jira.example.com",
            "--jira-personal-token",
            "pat",
            "--no-jira-ssl-verify",
            "show",
            "WEB-7",
        )

        assert os.environ["JIRA_SSL_VERIFY"] == "false"

    assert result.exit_code == 0
    config = mock_fetcher.call_args.kwargs["config"]
    assert config.url == "https://jira.example.com"
    assert config.auth_type == "token"
    assert config.personal_token == "pat"
    assert config.ssl_verify is False


def test_env_file(tmp_path):
    env_file = tmp_path / "jira.env"
    env_file.write_text("JIRA_URL=https://jira.example.com\nJIRA_PERSONAL_TOKEN=pat\n")

    with (
        patch.dict(os.environ, {}, clear=True),
        patch("jira_issue_cli.cli.JiraFetcher") as mock_fetcher,
        patch("jira_issue_cli.cli.IssueCommands"),
    ):
        result = invoke("--env-file", str(env_file), "project", "WEB")

    assert result.exit_code == 0
    assert mock_fetcher.call_args.kwargs["config"].personal_token == "pat"


def test_create_without_projects_is_an_error(env):
    with (
        patch("jira_issue_cli.load_dotenv"),
        patch("jira_issue_cli.cli.JiraFetcher") as mock_fetcher,
    ):
        mock_fetcher.return_value.get_meta_data.return_value = (
            JiraCreateMeta.from_api_response({"projects": []})
        )
        result = invoke("create")

    assert result.exit_code == 1
    assert "No projects available to create issues in" in result.output
    assert "Usage:" not in result.output
    mock_fetcher.return_value.create_issue.assert_not_called()


@pytest.mark.parametrize(
    "variables,expected",
    [
        ({}, logging.WARNING),
        ({"JIRA_CLI_VERBOSE": "true"}, logging.INFO),
        ({"JIRA_CLI_VERBOSE": "1", "JIRA_CLI_VERY_VERBOSE": "yes"}, logging.DEBUG),
    ],
)
def test_env_logging_level(variables, expected):
    with patch.dict(os.environ, variables, clear=True):
        assert env_logging_level() == expected


@pytest.mark.parametrize(
    "args,expected",
    [
        ((), logging.INFO),
        (("-vv",), logging.DEBUG),
    ],
)
def test_verbose_environment_matches_flags(mocks, args, expected):
    with (
        patch.dict(os.environ, {"JIRA_CLI_VERBOSE": "true"}),
        patch("jira_issue_cli.setup_logging") as mock_setup,
    ):
        result = invoke(*args, "project", "WEB")

    assert result.exit_code == 0
    mock_setup.assert_called_once_with(expected)
