"""Request envelope and retry schedule for the dispatcher."""

import json
from typing import Any

from pydantic import BaseModel

# =============================================================================
# Constants
# =============================================================================

MAX_BACKOFF_SECONDS = 10
REQUEST_ID_HEADER = "X-Request-ID"
RETRY_AFTER_HEADER = "Retry-After"
JSON_CONTENT_TYPE = "application/json"

# =============================================================================
# Retry Schedule
# =============================================================================


def attempt_count(max_retries: int) -> int:
    """Total attempts for one call; a non-positive setting still sends once."""
    return max(1, max_retries)


def backoff_delay(attempt: int) -> float:
    """Seconds to wait after a retryable failure on the given attempt (0-based)."""
    return float(min(2**attempt, MAX_BACKOFF_SECONDS))


# =============================================================================
# Request Envelope
# =============================================================================


class RequestEnvelope(BaseModel):
    """One outbound call: method, server-relative path, optional body and query.

    The payload may be a pydantic model (dumped without None fields) or any
    JSON-compatible value.
    """

    method: str
    path: str
    payload: Any = None
    params: dict[str, str] | None = None

    model_config = {"frozen": True}

    def json_data(self) -> Any:
        """Payload as plain JSON-compatible data, None when there is no body."""
        if isinstance(self.payload, BaseModel):
            return self.payload.model_dump(mode="json", exclude_none=True)
        return self.payload

    def encode_body(self) -> bytes | None:
        """Serialize the payload.

        Raises:
            TypeError, ValueError: If the payload is not JSON-serializable.
        """
        data = self.json_data()
        if data is None:
            return None
        return json.dumps(data, separators=(",", ":"), allow_nan=False).encode("utf-8")
