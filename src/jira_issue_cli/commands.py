"""Issue commands.

Each command is a short pipeline: call the Jira client, branch on the result,
prompt and/or render, then print. Failures go through one reporter; whether the
process exits afterwards is decided by :data:`ERROR_POLICY`.
"""

import logging
import sys
import webbrowser
from enum import Enum
from typing import Protocol

import click

from .exceptions import ApiError, JiraIssueCliError
from .jira import JiraFetcher
from .jira.constants import DEFAULT_SEARCH_LIMIT
from .models.jira import JiraIssue, JiraSearchResult
from .presenter import render_issue_detail, render_issue_list
from .prompts import PromptSequencer, prompt_issue_draft

logger = logging.getLogger("jira-issue-cli.commands")

CURRENT_USER_JQL = "currentUser()"


class ErrorSeverity(Enum):
    """What happens after a failure has been reported."""

    FATAL = "fatal"  # exit with status 1
    RECOVERABLE = "recoverable"  # return normally


# Searches and lookups end the process on failure; writes only report.
ERROR_POLICY: dict[str, ErrorSeverity] = {
    "create": ErrorSeverity.RECOVERABLE,
    "search": ErrorSeverity.FATAL,
    "open": ErrorSeverity.FATAL,
    "summary": ErrorSeverity.RECOVERABLE,
    "release": ErrorSeverity.FATAL,
    "find": ErrorSeverity.FATAL,
    "assign": ErrorSeverity.RECOVERABLE,
    "project": ErrorSeverity.FATAL,
}


class IdentityProvider(Protocol):
    """Supplies the user the tool acts on behalf of."""

    def assignee(self) -> str | None:
        """User reference to assign issues created with ``--self``."""

    def jql_reference(self) -> str:
        """User reference for JQL queries about the caller."""


class ConfiguredIdentity:
    """Identity taken from configuration; JQL queries defer to Jira's ``currentUser()``."""

    def __init__(self, user: str | None) -> None:
        self._user = user

    def assignee(self) -> str | None:
        return self._user

    def jql_reference(self) -> str:
        return CURRENT_USER_JQL


class IssueCommands:
    """Issue operations backing the CLI commands."""

    def __init__(
        self,
        jira: JiraFetcher,
        identity: IdentityProvider,
        sequencer: PromptSequencer | None = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
        color: bool = True,
    ) -> None:
        self.jira = jira
        self.identity = identity
        self.sequencer = sequencer or PromptSequencer()
        self.limit = limit
        self.color = color

    # -- reporting ---------------------------------------------------------

    def report_error(self, message: str) -> None:
        """Print one message in red."""
        click.echo(self._style(f"  {message}", fg="red"), err=True)

    def report_errors(self, error: JiraIssueCliError) -> None:
        """Print every message an error carries."""
        messages = error.messages() or ["Unexpected error talking to Jira"]
        click.echo(err=True)
        for message in messages:
            self.report_error(message)
        click.echo(err=True)

    def _fail(self, operation: str, error: JiraIssueCliError) -> None:
        logger.debug(f"'{operation}' failed: {error!r}")
        self.report_errors(error)
        if ERROR_POLICY[operation] is ErrorSeverity.FATAL:
            sys.exit(1)

    # -- rendering ---------------------------------------------------------

    def show_issues(self, issues: list[JiraIssue]) -> None:
        """Print issues as a Key / Status / Summary table."""
        click.echo(render_issue_list(issues, color=self.color))

    def show_issue(self, issue: JiraIssue) -> None:
        """Print one issue as a detail table."""
        click.echo(render_issue_detail(issue, color=self.color))

    def _style(self, text: str, **styles: object) -> str:
        return click.style(text, **styles) if self.color else text

    # -- operations --------------------------------------------------------

    def create(self, self_assign: bool = False) -> JiraIssue | None:
        """Prompt for project, issue type and name, then create the issue.

        Aborting a prompt raises :class:`click.Abort` before anything is sent.
        """
        try:
            meta = self.jira.get_meta_data()
        except JiraIssueCliError as e:
            self._fail("create", e)
            return None

        assignee = self.identity.assignee() if self_assign else None
        draft = prompt_issue_draft(meta, self.sequencer, assignee=assignee)

        try:
            issue = self.jira.create_issue(draft)
        except JiraIssueCliError as e:
            self._fail("create", e)
            return None

        click.echo()
        click.echo("New issue: " + self._style(issue.key, fg="red", bold=True))
        click.echo(self.jira.browse_url(issue.key))
        click.echo()
        return issue

    def search(self, text: str) -> None:
        """Find issues whose summary contains ``text``."""
        result = self._run_query("search", f"summary ~ '{text}'")
        if result is None:
            return

        if result.has_results:
            self.show_issues(result.issues)
            total = self._style(str(result.total), fg="green")
            click.echo(self._style("  Total issues found: ", bold=True) + total)
        else:
            # Nothing matched: informational, not a failure
            click.echo(
                self._style(f"  No issues found with search terms: '{text}'", fg="red")
            )

    def open_issue(self, issue_key: str) -> None:
        """Open the issue in the default browser once Jira confirms it exists."""
        try:
            self.jira.get_issue(issue_key)
        except JiraIssueCliError as e:
            self._fail("open", e)
            return

        url = self.jira.browse_url(issue_key)
        logger.info(f"Opening {url}")
        webbrowser.open(url)

    def summary(self, user: str | None = None) -> None:
        """Show unresolved issues assigned to ``user``, or to the caller.

        Zero results print nothing.
        """
        assignee = user or self.identity.jql_reference()
        result = self._run_query(
            "summary", f"assignee = {assignee} and resolution = Unresolved"
        )
        if result is not None and result.has_results:
            self.show_issues(result.issues)

    def get_release_issues(self, project: str, release: str) -> None:
        """Show the issues of a project fixed in ``release``."""
        self._show_query(
            "release", f"project = {project} and fixVersion = {release}"
        )

    def find_issue(self, issue_key: str) -> None:
        """Show one issue in detail."""
        try:
            issue = self.jira.get_issue(issue_key)
        except JiraIssueCliError as e:
            self._fail("find", e)
            return

        self.show_issue(issue)

    def assign_issue(self, issue_key: str, user: str) -> None:
        """Assign an issue to ``user``. Failures are reported, never fatal."""
        try:
            self.jira.set_assignee(issue_key, user)
        except JiraIssueCliError as e:
            self._fail("assign", e)
            return

        click.echo()
        click.echo(
            self._style(f"  Issue {issue_key} successfully assigned to {user}", fg="green")
        )
        click.echo()

    def get_project_issues(self, project: str) -> None:
        """Show the unresolved issues of a project."""
        self._show_query("project", f"project = {project} and resolution = Unresolved")

    def _show_query(self, operation: str, jql: str) -> None:
        result = self._run_query(operation, jql)
        if result is not None and result.has_results:
            self.show_issues(result.issues)

    def _run_query(self, operation: str, jql: str) -> JiraSearchResult | None:
        """Run a JQL search; a failure or a query Jira only warned about is reported.

        Returns None when the failure was recoverable.
        """
        try:
            result = self.jira.search_issues(jql, limit=self.limit)
        except JiraIssueCliError as e:
            self._fail(operation, e)
            return None

        # validateQuery=warn turns an invalid query into warnings on an empty result
        if result.warning_messages:
            self._fail(operation, ApiError(warning_messages=result.warning_messages))
            return None

        return result
