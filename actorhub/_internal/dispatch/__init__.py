"""Request dispatch for the ActorHub clients.

WARNING: This is an internal module used by ActorHub and AsyncActorHub.
Do not call directly from user code.
"""

from actorhub._internal.dispatch.classify import classify_response, parse_retry_after
from actorhub._internal.dispatch.client import AsyncDispatcher, Dispatcher
from actorhub._internal.dispatch.models import (
    MAX_BACKOFF_SECONDS,
    RequestEnvelope,
    attempt_count,
    backoff_delay,
)
from actorhub._internal.dispatch.redaction import summarize_payload

__all__ = [
    "Dispatcher",
    "AsyncDispatcher",
    "RequestEnvelope",
    "classify_response",
    "parse_retry_after",
    "attempt_count",
    "backoff_delay",
    "MAX_BACKOFF_SECONDS",
    "summarize_payload",
]
