"""Payload summaries for debug output.

Request bodies can carry credentials and biometric data; neither should
reach stderr verbatim.
"""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "api_key",
    "token",
    "secret",
    "password",
    "authorization",
    "x-api-key",
})

# Keys whose values are summarized by size instead of printed.
ELIDE_KEYS: frozenset[str] = frozenset({
    "image_base64",
    "face_embedding",
})

REDACTED_VALUE = "[REDACTED]"


def summarize_payload(payload: Any) -> Any:
    """Return a copy of a JSON payload that is safe to print.

    Sensitive keys become "[REDACTED]"; biometric blobs become a short
    size note such as "<512 items>". The original is never mutated.
    """
    if isinstance(payload, dict):
        result = {}
        for key, value in payload.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            elif key_lower in ELIDE_KEYS and value is not None:
                result[key] = _size_note(value)
            else:
                result[key] = summarize_payload(value)
        return result
    if isinstance(payload, list):
        return [summarize_payload(item) for item in payload]
    return payload


def _size_note(value: Any) -> str:
    if isinstance(value, str):
        return f"<{len(value)} chars>"
    if isinstance(value, list | tuple):
        return f"<{len(value)} items>"
    return f"<{type(value).__name__}>"
