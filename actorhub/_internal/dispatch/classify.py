"""Mapping of HTTP responses onto results and typed SDK errors."""

from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from actorhub._internal.dispatch.models import REQUEST_ID_HEADER, RETRY_AFTER_HEADER
from actorhub.exceptions import (
    ActorHubAPIError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    ValidationError,
)


@lru_cache(maxsize=64)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


def _error_body(response: httpx.Response) -> dict[str, Any] | None:
    """Parse an error body, treating anything but a JSON object as absent."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


def _detail(body: dict[str, Any] | None, default: str) -> str:
    detail = body.get("detail") if body else None
    return detail if isinstance(detail, str) else default


def parse_retry_after(value: str | None) -> int:
    """Retry-After header as integer seconds, 0 when absent or unparsable."""
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


def classify_response(response: httpx.Response, response_type: Any = None) -> Any:
    """Turn a response into a decoded result or raise the matching error.

    Args:
        response: The completed HTTP response.
        response_type: Type to decode a successful body into (a pydantic model,
            or e.g. ``list[Model]``). None discards the body.

    Returns:
        The decoded body, or None for an empty or null body or when no type
        is given.

    Raises:
        ActorHubAPIError: A subclass matching the status code for any status >= 400.
        TransportError: If a successful body cannot be decoded.
    """
    status = response.status_code
    request_id = response.headers.get(REQUEST_ID_HEADER, "")

    if status == 401:
        body = _error_body(response)
        raise AuthenticationError(
            _detail(body, "Invalid or missing API key"), request_id=request_id
        )

    if status == 404:
        body = _error_body(response)
        raise NotFoundError(_detail(body, "Resource not found"), request_id=request_id)

    if status == 422:
        body = _error_body(response)
        errors = body.get("errors") if body else None
        raise ValidationError(
            _detail(body, "Validation error"),
            errors if isinstance(errors, dict) else None,
            request_id=request_id,
        )

    if status == 429:
        body = _error_body(response)
        raise RateLimitError(
            _detail(body, "Rate limit exceeded"),
            parse_retry_after(response.headers.get(RETRY_AFTER_HEADER)),
            request_id=request_id,
        )

    if status >= 500:
        body = _error_body(response)
        raise ServerError(
            _detail(body, f"Server error: {status}"), status, request_id=request_id
        )

    if status >= 400:
        body = _error_body(response)
        raise ActorHubAPIError(
            _detail(body, f"API error: {status}"),
            status,
            request_id=request_id,
            response_data=body,
        )

    content = response.content.strip()
    if response_type is None or not content or content == b"null":
        return None

    try:
        return _adapter(response_type).validate_json(response.content)
    except PydanticValidationError as e:
        raise TransportError(
            f"Failed to decode response: {e}", status, request_id=request_id
        ) from e
