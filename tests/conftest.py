"""
Root pytest configuration file for jira-issue-cli tests.
"""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Restore the root logger after tests that call setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)
