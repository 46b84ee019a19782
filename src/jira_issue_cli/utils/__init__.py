"""
Utility functions for jira-issue-cli.
"""

from .date import format_timestamp, parse_date
from .logging import log_config_param, mask_sensitive, setup_logging
from .urls import build_browse_url, is_atlassian_cloud_url

__all__ = [
    "build_browse_url",
    "format_timestamp",
    "is_atlassian_cloud_url",
    "log_config_param",
    "mask_sensitive",
    "parse_date",
    "setup_logging",
]
