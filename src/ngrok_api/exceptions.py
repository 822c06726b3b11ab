"""Exception classes for the ngrok API client."""

from __future__ import annotations

from typing import Any


class NgrokError(Exception):
    """Base exception for all ngrok API client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidArgumentError(ValueError):
    """A required argument was missing or set to None.

    Raised synchronously while building a call, before any request is sent.
    """


class APIError(NgrokError):
    """Error returned from the ngrok API.

    Attributes:
        status_code: HTTP status code from the API.
        error_code: ngrok error code, e.g. ``ERR_NGROK_218``.
        message: Error message.
        details: Additional error details from the API.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.details = details if isinstance(details, dict) else {}
        prefix = f"[{status_code}] {error_code}: " if error_code else f"[{status_code}] "
        super().__init__(f"{prefix}{message}")

    @property
    def operation_id(self) -> str | None:
        """Server-side operation ID, useful when contacting ngrok support."""
        return self.details.get("operation_id")

    @property
    def is_retryable(self) -> bool:
        """Check if this error could be resolved by retrying."""
        # 429 Too Many Requests, 500+ Server Errors
        return self.status_code == 429 or self.status_code >= 500


class ValidationError(APIError):
    """The API rejected the request parameters."""

    def __init__(
        self,
        message: str = "Invalid request",
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(400, message, error_code, details)


class AuthenticationError(APIError):
    """Authentication failed.

    This error is raised when:
    - No API key is provided
    - The API key is invalid or has been revoked
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(401, message, error_code, details)


class PermissionDeniedError(APIError):
    """The API key is not allowed to perform this operation."""

    def __init__(
        self,
        message: str = "Permission denied",
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(403, message, error_code, details)


class NotFoundError(APIError):
    """Resource not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(404, message, error_code, details)


class ConflictError(APIError):
    """Resource conflict error."""

    def __init__(
        self,
        message: str = "Resource conflict",
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(409, message, error_code, details)


class RateLimitError(APIError):
    """Rate limit exceeded.

    Attributes:
        retry_after: Seconds to wait before retrying (if provided by the API).
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        retry_after: int | None = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(429, message, error_code, details)


class DeserializationError(NgrokError):
    """The API response did not match the expected resource shape."""

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(message)


class ConnectionError(NgrokError):
    """Failed to connect to the ngrok API."""

    def __init__(
        self,
        message: str = "Failed to connect to ngrok API",
        cause: Exception | None = None,
    ) -> None:
        self.cause = cause
        super().__init__(message)


class TimeoutError(NgrokError):
    """Request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        timeout_seconds: float | None = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(message)


def raise_for_status(
    status_code: int,
    response_data: dict[str, Any] | None = None,
    reason: str = "",
    retry_after: str | None = None,
) -> None:
    """Raise an appropriate exception for an HTTP status code.

    Args:
        status_code: HTTP status code.
        response_data: Parsed JSON error body, ``{error_code, status_code, msg, details}``.
        reason: HTTP reason phrase, used when the body carries no message.
        retry_after: Value of the Retry-After header, if any.

    Raises:
        ValidationError: For 400 status.
        AuthenticationError: For 401 status.
        PermissionDeniedError: For 403 status.
        NotFoundError: For 404 status.
        ConflictError: For 409 status.
        RateLimitError: For 429 status.
        APIError: For other 4xx/5xx status codes.
    """
    if status_code < 400:
        return

    data = response_data or {}
    message = data.get("msg") or data.get("message") or reason or "Unknown error"
    error_code = data.get("error_code")
    details = data.get("details")
    if not isinstance(details, dict):
        details = {}

    if status_code == 400:
        raise ValidationError(message, error_code, details)
    elif status_code == 401:
        raise AuthenticationError(message, error_code, details)
    elif status_code == 403:
        raise PermissionDeniedError(message, error_code, details)
    elif status_code == 404:
        raise NotFoundError(message, error_code, details)
    elif status_code == 409:
        raise ConflictError(message, error_code, details)
    elif status_code == 429:
        seconds = int(retry_after) if retry_after and retry_after.isdigit() else None
        raise RateLimitError(message, error_code, details, seconds)
    else:
        raise APIError(status_code, message, error_code, details)
