"""Constants specific to Jira operations."""

# Fields needed to render an issue in full, in display order.
DEFAULT_READ_JIRA_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "issuetype",
    "project",
    "reporter",
    "assignee",
    "priority",
    "created",
    "updated",
    "fixVersions",
    "resolution",
)

# Fields needed for one row of an issue list.
SEARCH_JIRA_FIELDS: tuple[str, ...] = ("summary", "status")

DEFAULT_SEARCH_LIMIT = 50
