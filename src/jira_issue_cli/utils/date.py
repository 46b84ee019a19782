"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("jira-issue-cli")

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_date(date_str: str | int | None) -> datetime | None:
    """
    Parse a date string from any format to a datetime object.

    The input string `date_str` accepts:
    - None
    - Epoch timestamp (only contains digits and is in milliseconds)
    - Other formats supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Args:
        date_str: Date string

    Returns:
        Parsed datetime or None if date_str is None / empty string
    """

    if not date_str:
        return None
    if isinstance(date_str, int) or date_str.isdigit():
        return datetime.fromtimestamp(int(date_str) / 1000, tz=timezone.utc)
    return dateutil.parser.parse(date_str)


def ordinal(day: int) -> str:
    """Return the day of the month with its English suffix (1st, 2nd, 11th)."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_timestamp(date_str: str | int | None) -> str:
    """
    Format a Jira timestamp as ``January 5th 2024, 3:04:05 pm``.

    Month names are English whatever the process locale.

    The wall-clock time is kept in the offset the timestamp was written in.
    Unparseable input is returned unchanged.

    Args:
        date_str: Timestamp as returned by Jira (e.g. 2024-01-05T15:04:05.000+0000)

    Returns:
        Formatted timestamp, or an empty string for empty input
    """
    try:
        dt = parse_date(date_str)
    except (ValueError, OverflowError):
        logger.debug(f"Could not parse timestamp: {date_str}")
        return str(date_str)
    if dt is None:
        return ""

    hour = dt.hour % 12 or 12
    meridiem = "am" if dt.hour < 12 else "pm"
    return (
        f"{MONTHS[dt.month - 1]} {ordinal(dt.day)} {dt.year}, "
        f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"
    )
