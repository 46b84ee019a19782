"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlparse

from ..utils.urls import build_browse_url, is_atlassian_cloud_url

logger = logging.getLogger("jira-issue-cli.jira.config")

DEFAULT_TIMEOUT = 30.0


@dataclass
class JiraConfig:
    """Jira API configuration.

    Handles authentication for Jira Cloud and Server/Data Center:
    - Cloud: username/API token (basic auth)
    - Server/DC: personal access token or basic auth

    The configuration is read-only once the client has been built from it.
    """

    url: str  # Base URL for Jira
    auth_type: Literal["basic", "token"]  # Authentication type
    username: str | None = None  # Email or username
    api_token: str | None = None  # API token or password
    personal_token: str | None = None  # Personal access token (Server/DC)
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float = DEFAULT_TIMEOUT  # Seconds before a request is abandoned
    self_assignee: str | None = None  # Identity used by `create --self`

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance.

        Returns:
            True if this is a cloud instance (atlassian.net), False otherwise.
            Localhost URLs are always considered non-cloud (Server/Data Center).
        """
        return is_atlassian_cloud_url(self.url)

    @property
    def protocol(self) -> str:
        """URL scheme of the Jira instance, ``https`` unless stated otherwise."""
        return urlparse(self.url).scheme or "https"

    @property
    def host(self) -> str:
        """Host (and port, when given) of the Jira instance."""
        parsed = urlparse(self.url)
        if parsed.netloc:
            return parsed.netloc
        # Bare host names such as "jira.example.com" parse as a path
        return parsed.path.rstrip("/")

    def browse_url(self, issue_key: str) -> str:
        """Return the web link for ``issue_key``."""
        return build_browse_url(self.protocol, self.host, issue_key)

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("JIRA_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ValueError(error_msg)

        username = os.getenv("JIRA_USERNAME")
        api_token = os.getenv("JIRA_API_TOKEN")
        personal_token = os.getenv("JIRA_PERSONAL_TOKEN")

        if is_atlassian_cloud_url(url):
            if username and api_token:
                auth_type = "basic"
            else:
                error_msg = "Cloud authentication requires JIRA_USERNAME and JIRA_API_TOKEN"
                raise ValueError(error_msg)
        else:  # Server/Data Center
            if personal_token:
                auth_type = "token"
            elif username and api_token:
                auth_type = "basic"
            else:
                error_msg = "Server/Data Center authentication requires JIRA_PERSONAL_TOKEN or JIRA_USERNAME and JIRA_API_TOKEN"
                raise ValueError(error_msg)

        ssl_verify_env = os.getenv("JIRA_SSL_VERIFY", "true").lower()
        ssl_verify = ssl_verify_env not in ("false", "0", "no")

        timeout_env = os.getenv("JIRA_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if timeout_env:
            try:
                timeout = float(timeout_env)
            except ValueError as e:
                error_msg = f"JIRA_TIMEOUT must be a number of seconds, got '{timeout_env}'"
                raise ValueError(error_msg) from e
            if timeout <= 0:
                error_msg = f"JIRA_TIMEOUT must be positive, got '{timeout_env}'"
                raise ValueError(error_msg)

        self_assignee = os.getenv("JIRA_SELF_ASSIGNEE") or username

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            ssl_verify=ssl_verify,
            timeout=timeout,
            self_assignee=self_assignee,
        )

    def is_auth_configured(self) -> bool:
        """Check if the authentication configuration is complete.

        Returns:
            bool: True if authentication is fully configured, False otherwise.
        """
        if self.auth_type == "token":
            return bool(self.personal_token)
        elif self.auth_type == "basic":
            return bool(self.username and self.api_token)
        logger.warning(
            f"Unknown or unsupported auth_type: {self.auth_type} in JiraConfig"
        )
        return False
