"""Client configuration for the ActorHub SDK."""

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from actorhub.exceptions import ActorHubConfigError

DEFAULT_BASE_URL = "https://api.actorhub.ai"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3


class ClientConfig(BaseModel):
    """Immutable settings shared by every request a client makes.

    Fields:
        api_key: ActorHub API key, sent as the X-API-Key header.
        base_url: API root; a trailing slash is stripped.
        timeout: Per-request timeout in seconds.
        max_retries: Total attempts for retryable failures. Values <= 0
            mean a single attempt with no retry.
        debug: Print request diagnostics to stderr.
    """

    api_key: str = Field(min_length=1)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    max_retries: int = DEFAULT_MAX_RETRIES
    debug: bool = False

    model_config = {"frozen": True}

    @field_validator("base_url")
    @classmethod
    def base_url_is_http(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v

    @classmethod
    def create(cls, **fields: Any) -> "ClientConfig":
        """Build a config, reporting invalid values as ActorHubConfigError."""
        try:
            return cls(**fields)
        except PydanticValidationError as e:
            raise ActorHubConfigError(f"Invalid client configuration: {e}") from e

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create a config from environment variables.

        Required environment variables:
            ACTORHUB_API_KEY: The API key.

        Optional environment variables:
            ACTORHUB_BASE_URL: API root URL.
            ACTORHUB_TIMEOUT: Request timeout in seconds.
            ACTORHUB_MAX_RETRIES: Maximum attempts for retryable failures.
            ACTORHUB_DEBUG: Set to "1" to enable debug output.

        Raises:
            ActorHubConfigError: If ACTORHUB_API_KEY is missing.
            ValueError: If a numeric variable is malformed.
        """
        api_key = os.environ.get("ACTORHUB_API_KEY")
        if not api_key:
            raise ActorHubConfigError("ACTORHUB_API_KEY environment variable is required")

        base_url = os.environ.get("ACTORHUB_BASE_URL", DEFAULT_BASE_URL)
        timeout = float(os.environ.get("ACTORHUB_TIMEOUT", str(DEFAULT_TIMEOUT)))
        max_retries = int(os.environ.get("ACTORHUB_MAX_RETRIES", str(DEFAULT_MAX_RETRIES)))
        debug = os.environ.get("ACTORHUB_DEBUG", "") == "1"

        return cls.create(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            debug=debug,
        )
