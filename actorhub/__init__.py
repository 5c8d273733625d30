"""ActorHub SDK for Python.

Typed client for the ActorHub.ai identity-verification and licensing API.

Public API:
    ActorHub - Sync client
    AsyncActorHub - Asyncio client
    ClientConfig - Client configuration
    actorhub.models - Request/response models
    actorhub.exceptions - Error taxonomy

Internal (not for direct use):
    _internal.dispatch - Request dispatch, classification and retry
"""

from actorhub._version import __version__
from actorhub.client import ActorHub, AsyncActorHub
from actorhub.config import ClientConfig
from actorhub.exceptions import (
    ActorHubAPIError,
    ActorHubConfigError,
    ActorHubError,
    AuthenticationError,
    CancellationError,
    ErrorKind,
    NotFoundError,
    RateLimitError,
    ServerError,
    TransportError,
    ValidationError,
)

__all__ = [
    "__version__",
    "ActorHub",
    "AsyncActorHub",
    "ClientConfig",
    "ErrorKind",
    "ActorHubError",
    "ActorHubAPIError",
    "ActorHubConfigError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "CancellationError",
]
