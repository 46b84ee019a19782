"""Base client module for Jira API interactions."""

import logging
from typing import Any, Literal

from atlassian import Jira
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import HTTPError, Timeout

from ..exceptions import (
    ApiError,
    AuthenticationError,
    NetworkError,
    NotFoundError,
    RequestTimeoutError,
)
from .config import JiraConfig

logger = logging.getLogger("jira-issue-cli.jira")

API_VERSION = "2"


class JiraClient:
    """Base client for Jira API interactions."""

    config: JiraConfig

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()

        if not self.config.is_auth_configured():
            error_msg = f"Incomplete Jira credentials for auth type '{self.config.auth_type}'"
            raise ValueError(error_msg)

        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
                api_version=API_VERSION,
            )
        else:  # basic auth
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
                api_version=API_VERSION,
            )

        if not self.config.ssl_verify:
            logger.warning(
                "Jira SSL verification disabled. This is insecure and should only be used in testing environments."
            )

    def browse_url(self, issue_key: str) -> str:
        """Return the web link for an issue: ``<protocol>://<host>/browse/<KEY>``."""
        return self.config.browse_url(issue_key)

    def api_request(
        self,
        method: Literal["get", "post", "put"],
        resource: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:  # noqa: ANN401 - Jira returns arbitrary JSON
        """
        Send one request to ``rest/api/2/<resource>``.

        Args:
            method: The HTTP method to use
            resource: Resource path relative to the API root (e.g. "issue/createmeta")
            params: Optional query parameters
            data: Optional JSON body

        Returns:
            The decoded JSON response (None for empty bodies)

        Raises:
            RequestTimeoutError: If the request exceeded the configured timeout
            NetworkError: If no response was received
            AuthenticationError: On 401/403
            NotFoundError: On 404
            ApiError: On any other non-2xx response
        """
        path = self.jira.resource_url(resource)
        logger.debug(f"{method.upper()} {path} params={params}")

        try:
            if method == "get":
                return self.jira.get(path, params=params)
            elif method == "post":
                return self.jira.post(path, data=data, params=params)
            elif method == "put":
                return self.jira.put(path, data=data, params=params)
            else:
                error_msg = f"Unsupported HTTP method: {method}"
                raise ValueError(error_msg)
        except Timeout as e:
            error_msg = f"Jira did not answer within {self.config.timeout:g}s"
            logger.error(f"{error_msg} ({method.upper()} {path})")
            raise RequestTimeoutError(error_msg) from e
        except RequestsConnectionError as e:
            error_msg = f"Could not reach Jira at {self.config.url}: {e}"
            logger.error(error_msg)
            raise NetworkError(error_msg) from e
        except HTTPError as http_err:
            raise self._translate_http_error(http_err, resource) from http_err

    def _translate_http_error(self, http_err: HTTPError, resource: str) -> ApiError:
        """Map an HTTPError raised by the atlassian client to an ApiError kind."""
        response = http_err.response
        status_code = response.status_code if response is not None else None

        payload = None
        if response is not None:
            try:
                payload = response.json()
            except ValueError:
                logger.debug(f"Non-JSON error body for {resource}")

        if status_code in (401, 403):
            error_cls: type[ApiError] = AuthenticationError
            message = (
                f"Authentication failed for Jira API ({status_code}). "
                "Token may be expired or invalid. Please verify credentials."
            )
        elif status_code == 404:
            error_cls = NotFoundError
            message = f"Not found: {resource}"
        else:
            error_cls = ApiError
            message = str(http_err) or f"Jira request failed ({status_code})"

        error = error_cls.from_payload(payload, status_code=status_code, message=message)
        logger.error(f"HTTP {status_code} for {resource}: {'; '.join(error.messages())}")
        return error
