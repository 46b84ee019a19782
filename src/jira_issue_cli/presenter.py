"""Terminal rendering of issues.

Tables are built with Rich and rendered to a string. Styling never changes
the text of a value.
"""

from io import StringIO

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models.jira import JiraIssue
from .utils.date import format_timestamp

STATUS_STYLES = {
    "Done": "green",
    "In Progress": "yellow",
    "To Do": "blue",
}

# Label/value pair separating the descriptive rows from the bookkeeping rows
BLANK_ROW = ("", "")


def _render(table: Table, color: bool) -> str:
    string_io = StringIO()
    console = Console(
        file=string_io,
        force_terminal=color,
        no_color=not color,
        color_system="standard" if color else None,
        width=120,
        highlight=False,
    )
    console.print(table)
    return string_io.getvalue().rstrip()


def _status_name(issue: JiraIssue) -> str:
    return issue.status.name if issue.status else ""


def render_issue_list(issues: list[JiraIssue], color: bool = True) -> str:
    """Format issues as a Key / Status / Summary table, in the order given.

    Args:
        issues: Issues to show
        color: Emit ANSI styling

    Returns:
        Rendered table
    """
    table = Table(show_header=True, header_style="bold", box=box.SQUARE)
    table.add_column("Key", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Summary", overflow="fold")

    for issue in issues:
        table.add_row(
            f"[blue]{escape(issue.key)}[/]",
            f"[green]{escape(_status_name(issue))}[/]",
            escape(issue.summary),
        )

    return _render(table, color)


def issue_detail_rows(issue: JiraIssue) -> list[tuple[str, str]]:
    """Build the label/value rows of the issue detail view.

    The order is fixed. Assignee, Fix Versions and Resolution only appear
    when the issue has them.
    """
    project = issue.project
    rows = [
        ("Summary", issue.summary.strip()),
        ("Status", _status_name(issue)),
        ("Type", issue.issue_type.name if issue.issue_type else ""),
        ("Project", project.label if project else ""),
        ("Reporter", issue.reporter.identity if issue.reporter else ""),
    ]

    if issue.assignee is not None:
        rows.append(("Assignee", issue.assignee.identity))

    rows.append(("Priority", issue.priority.name if issue.priority else ""))

    rows.extend(
        [
            BLANK_ROW,
            ("Id", issue.id),
            ("Created on", format_timestamp(issue.created)),
            ("Updated on", format_timestamp(issue.updated)),
        ]
    )

    if issue.fix_versions:
        rows.append(("Fix Versions", ", ".join(issue.fix_versions)))

    if issue.resolution is not None:
        rows.append(("Resolution", issue.resolution.name))

    return rows


def render_issue_detail(issue: JiraIssue, color: bool = True) -> str:
    """Format one issue as a vertical label/value table.

    Args:
        issue: Issue to show
        color: Emit ANSI styling

    Returns:
        Rendered table
    """
    table = Table(show_header=False, box=box.SQUARE)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value", overflow="fold")

    for label, value in issue_detail_rows(issue):
        if label == "Status" and value in STATUS_STYLES:
            table.add_row(label, f"[{STATUS_STYLES[value]}]{escape(value)}[/]")
        else:
            table.add_row(label, escape(value))

    return _render(table, color)
