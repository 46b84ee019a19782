"""Error kinds raised by the Jira API client."""

from typing import Any


class JiraIssueCliError(Exception):
    """Base class for errors surfaced to the command reporter."""

    def messages(self) -> list[str]:
        """Return the human-readable messages carried by this error."""
        text = str(self)
        return [text] if text else []


class NetworkError(JiraIssueCliError):
    """The request never produced an HTTP response (DNS, refused, reset...)."""


class RequestTimeoutError(NetworkError):
    """The request did not complete within the configured timeout."""


class ApiError(JiraIssueCliError):
    """Jira answered with a non-2xx status.

    Jira reports problems as ``errorMessages`` (general), ``errors`` (keyed by
    field name) and, for JQL, ``warningMessages``.
    """

    def __init__(
        self,
        message: str = "",
        status_code: int | None = None,
        error_messages: list[str] | None = None,
        errors: dict[str, str] | None = None,
        warning_messages: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_messages = list(error_messages or [])
        self.errors = dict(errors or {})
        self.warning_messages = list(warning_messages or [])

    @classmethod
    def from_payload(
        cls, payload: Any, status_code: int | None = None, message: str = ""
    ) -> "ApiError":
        """Build an error from a decoded Jira error body."""
        if not isinstance(payload, dict):
            return cls(message, status_code=status_code)

        errors = payload.get("errors")
        return cls(
            message,
            status_code=status_code,
            error_messages=[str(m) for m in payload.get("errorMessages") or []],
            errors=(
                {str(k): str(v) for k, v in errors.items()}
                if isinstance(errors, dict)
                else None
            ),
            warning_messages=[str(m) for m in payload.get("warningMessages") or []],
        )

    def messages(self) -> list[str]:
        result = list(self.error_messages)
        result.extend(f"{field}: {msg}" for field, msg in self.errors.items())
        result.extend(self.warning_messages)
        if not result:
            return super().messages()
        return result


class AuthenticationError(ApiError):
    """Jira rejected the configured credentials (401/403)."""


class NotFoundError(ApiError):
    """The requested issue key does not resolve (404)."""
