"""Public exceptions for the ActorHub SDK."""

from enum import StrEnum
from typing import Any


class ErrorKind(StrEnum):
    """Tag shared by every SDK error, for branching on a single attribute."""

    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    API = "api"
    TRANSPORT = "transport"
    CANCELLED = "cancelled"
    CONFIG = "config"

    @property
    def retryable(self) -> bool:
        """Whether the dispatcher retries failures of this kind."""
        return self in (ErrorKind.RATE_LIMIT, ErrorKind.SERVER)


class ActorHubError(Exception):
    """Base exception for all ActorHub SDK errors."""

    kind: ErrorKind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        request_id: str = "",
        response_data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.request_id = request_id
        self.response_data = response_data

    def __str__(self) -> str:
        text = self.message
        if self.status_code:
            text = f"{text} (HTTP {self.status_code})"
        if self.request_id:
            text = f"{text} [Request ID: {self.request_id}]"
        return text


class ActorHubAPIError(ActorHubError):
    """Error response from the ActorHub API."""


class AuthenticationError(ActorHubAPIError):
    """API key is invalid or missing (401)."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "", *, request_id: str = "") -> None:
        super().__init__(
            message or "Invalid or missing API key", 401, request_id=request_id
        )


class NotFoundError(ActorHubAPIError):
    """Requested resource does not exist (404)."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "", *, request_id: str = "") -> None:
        super().__init__(message or "Resource not found", 404, request_id=request_id)


class ValidationError(ActorHubAPIError):
    """Request validation failed (422), locally or on the server.

    Attributes:
        errors: Field-level error details from the response, if any.
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str = "",
        errors: dict[str, Any] | None = None,
        *,
        request_id: str = "",
    ) -> None:
        super().__init__(message or "Validation error", 422, request_id=request_id)
        self.errors = errors


class RateLimitError(ActorHubAPIError):
    """Rate limit exceeded (429).

    Attributes:
        retry_after: Seconds suggested by the server's Retry-After header, 0 if unknown.
    """

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self, message: str = "", retry_after: int = 0, *, request_id: str = ""
    ) -> None:
        super().__init__(message or "Rate limit exceeded", 429, request_id=request_id)
        self.retry_after = retry_after


class ServerError(ActorHubAPIError):
    """Server-side failure (5xx)."""

    kind = ErrorKind.SERVER

    def __init__(self, message: str = "", status_code: int = 500, *, request_id: str = "") -> None:
        super().__init__(message or "Server error", status_code, request_id=request_id)


class TransportError(ActorHubError):
    """Request never produced a classifiable response.

    Raised for network failures, timeouts, and payload encode/decode errors.
    """

    kind = ErrorKind.TRANSPORT


class CancellationError(ActorHubError):
    """Call aborted by the caller's cancellation signal."""

    kind = ErrorKind.CANCELLED

    def __init__(self, message: str = "Request cancelled") -> None:
        super().__init__(message)


class ActorHubConfigError(ActorHubError):
    """Configuration error (missing env vars, invalid config)."""

    kind = ErrorKind.CONFIG
