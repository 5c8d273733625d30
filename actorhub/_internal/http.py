"""Shared HTTP client configuration."""

import httpx

from actorhub._version import __version__
from actorhub.config import ClientConfig

USER_AGENT = f"actorhub-python/{__version__}"


def default_headers(config: ClientConfig) -> dict[str, str]:
    """Headers attached to every request."""
    return {
        "X-API-Key": config.api_key,
        "User-Agent": USER_AGENT,
    }


def create_http_client(
    config: ClientConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create a pooled HTTP client for one SDK client.

    Args:
        config: Client configuration (base URL, timeout, credentials).
        transport: Optional transport override, e.g. for tests or proxies.

    Returns:
        Configured httpx.Client instance.
    """
    return httpx.Client(
        timeout=config.timeout,
        base_url=config.base_url,
        headers=default_headers(config),
        transport=transport,
    )


def create_async_http_client(
    config: ClientConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Async counterpart of create_http_client."""
    return httpx.AsyncClient(
        timeout=config.timeout,
        base_url=config.base_url,
        headers=default_headers(config),
        transport=transport,
    )
