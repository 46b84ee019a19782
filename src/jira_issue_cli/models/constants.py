"""
Default values used when converting API responses to models.
"""

EMPTY_STRING = ""
UNKNOWN = "Unknown"

JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = "UNKNOWN-0"

# Issue name used when the user leaves the prompt blank
DEFAULT_ISSUE_NAME = "New Issue"
