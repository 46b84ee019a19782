"""Click subcommands of the ``jira-issue`` group."""

import logging
from dataclasses import dataclass

import click

from .commands import ConfiguredIdentity, IssueCommands
from .jira import JiraConfig, JiraFetcher
from .jira.constants import DEFAULT_SEARCH_LIMIT
from .utils.logging import log_config_param

logger = logging.getLogger("jira-issue-cli")


@dataclass
class CliState:
    """Options shared by every subcommand; the Jira client is built on first use."""

    limit: int = DEFAULT_SEARCH_LIMIT
    color: bool = True

    def commands(self) -> IssueCommands:
        try:
            config = JiraConfig.from_env()
            log_config_param(logger, "URL", config.url)
            log_config_param(logger, "Auth Type", config.auth_type)
            log_config_param(logger, "Username", config.username)
            log_config_param(logger, "API Token", config.api_token, sensitive=True)
            log_config_param(
                logger, "Personal Token", config.personal_token, sensitive=True
            )
            jira = JiraFetcher(config=config)
        except ValueError as e:
            logger.error(f"Invalid Jira configuration: {e}")
            raise click.ClickException(str(e)) from e

        return IssueCommands(
            jira,
            identity=ConfiguredIdentity(config.self_assignee),
            limit=self.limit,
            color=self.color,
        )


pass_state = click.make_pass_decorator(CliState, ensure=True)


@click.command()
@click.option(
    "--self",
    "self_assign",
    is_flag=True,
    help="Assign the new issue to yourself (JIRA_SELF_ASSIGNEE)",
)
@pass_state
def create(state: CliState, self_assign: bool) -> None:
    """Create an issue interactively."""
    state.commands().create(self_assign=self_assign)


@click.command()
@click.argument("text")
@pass_state
def search(state: CliState, text: str) -> None:
    """Search issues whose summary contains TEXT."""
    state.commands().search(text)


@click.command("open")
@click.argument("issue_key")
@pass_state
def open_issue(state: CliState, issue_key: str) -> None:
    """Open ISSUE_KEY in the default browser."""
    state.commands().open_issue(issue_key)


@click.command()
@click.argument("user", required=False)
@pass_state
def summary(state: CliState, user: str | None) -> None:
    """Unresolved issues assigned to USER (default: you)."""
    state.commands().summary(user)


@click.command()
@click.argument("project")
@click.argument("release")
@pass_state
def release(state: CliState, project: str, release: str) -> None:
    """Issues of PROJECT fixed in RELEASE."""
    state.commands().get_release_issues(project, release)


@click.command("show")
@click.argument("issue_key")
@pass_state
def find_issue(state: CliState, issue_key: str) -> None:
    """Show the details of ISSUE_KEY."""
    state.commands().find_issue(issue_key)


@click.command()
@click.argument("issue_key")
@click.argument("user")
@pass_state
def assign(state: CliState, issue_key: str, user: str) -> None:
    """Assign ISSUE_KEY to USER."""
    state.commands().assign_issue(issue_key, user)


@click.command()
@click.argument("project")
@pass_state
def project(state: CliState, project: str) -> None:
    """Unresolved issues of PROJECT."""
    state.commands().get_project_issues(project)


COMMANDS = [create, search, open_issue, summary, release, find_issue, assign, project]
