"""User-facing clients for the ActorHub API.

Example:
    from actorhub import ActorHub

    with ActorHub("your-api-key") as client:
        result = client.verify(image_url="https://example.com/image.jpg")
        if result.protected:
            print("Protected identity detected!")
"""

import asyncio
import threading
from collections.abc import Sequence
from decimal import Decimal
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from actorhub._internal.dispatch import AsyncDispatcher, Dispatcher
from actorhub.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from actorhub.exceptions import ValidationError
from actorhub.models import (
    ActorPackResponse,
    ConsentCheckRequest,
    ConsentCheckResponse,
    IdentityResponse,
    LicenseResponse,
    LicenseType,
    MarketplaceListingResponse,
    MarketplaceListRequest,
    PurchaseLicenseRequest,
    PurchaseResponse,
    UsageType,
    VerifyRequest,
    VerifyResponse,
)
from actorhub.models.marketplace import DEFAULT_LICENSE_DURATION_DAYS

VERIFY_PATH = "/api/v1/identity/verify"
IDENTITY_PATH = "/api/v1/identity/{identity_id}"
CONSENT_CHECK_PATH = "/api/v1/consent/check"
MARKETPLACE_LISTINGS_PATH = "/api/v1/marketplace/listings"
MY_LICENSES_PATH = "/api/v1/marketplace/licenses/mine"
PURCHASE_LICENSE_PATH = "/api/v1/marketplace/license/purchase"
ACTOR_PACK_STATUS_PATH = "/api/v1/actor-packs/status/{pack_id}"

ModelT = TypeVar("ModelT", bound=BaseModel)


# =============================================================================
# Request Building
# =============================================================================


def _build(model_cls: type[ModelT], **fields: Any) -> ModelT:
    """Construct a request model, reporting bad input as a local ValidationError."""
    try:
        return model_cls(**fields)
    except PydanticValidationError as e:
        errors = {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
        raise ValidationError(f"Invalid {model_cls.__name__}", errors) from e


def _verify_request(
    image_url: str | None, image_base64: str | None, include_license_options: bool
) -> VerifyRequest:
    if not image_url and not image_base64:
        raise ValidationError("Must provide image_url or image_base64")
    return _build(
        VerifyRequest,
        image_url=image_url or None,
        image_base64=image_base64 or None,
        include_license_options=include_license_options or None,
    )


def _consent_request(
    image_url: str | None,
    image_base64: str | None,
    face_embedding: Sequence[float] | None,
    platform: str,
    intended_use: str,
    region: str | None,
) -> ConsentCheckRequest:
    if not image_url and not image_base64 and not face_embedding:
        raise ValidationError("Must provide image_url, image_base64, or face_embedding")
    return _build(
        ConsentCheckRequest,
        image_url=image_url or None,
        image_base64=image_base64 or None,
        face_embedding=list(face_embedding) if face_embedding else None,
        platform=platform,
        intended_use=intended_use,
        region=region or None,
    )


def _format_number(value: float) -> str:
    """Render a price in plain positional notation, e.g. "10", "99.5", "0.0000001"."""
    text = format(Decimal(repr(float(value))), "f")
    return text.rstrip("0").rstrip(".") if "." in text else text


def _marketplace_params(request: MarketplaceListRequest) -> dict[str, str]:
    params: dict[str, str] = {}
    if request.query:
        params["query"] = request.query
    if request.category:
        params["category"] = request.category
    if request.tags:
        params["tags"] = ",".join(request.tags)
    if request.featured is not None:
        params["featured"] = "true" if request.featured else "false"
    if request.min_price is not None:
        params["min_price"] = _format_number(request.min_price)
    if request.max_price is not None:
        params["max_price"] = _format_number(request.max_price)
    if request.sort_by:
        params["sort_by"] = request.sort_by
    if request.page and request.page > 0:
        params["page"] = str(request.page)
    if request.limit and request.limit > 0:
        params["limit"] = str(request.limit)
    return params


def _license_params(status: str | None, page: int, limit: int) -> dict[str, str]:
    params: dict[str, str] = {}
    if status:
        params["status"] = status
    if page > 0:
        params["page"] = str(page)
    if limit > 0:
        params["limit"] = str(limit)
    return params


def _purchase_request(
    identity_id: str,
    license_type: LicenseType | str,
    usage_type: UsageType | str,
    project_name: str,
    project_description: str,
    duration_days: int | None,
    allowed_platforms: Sequence[str] | None,
    max_impressions: int | None,
    max_outputs: int | None,
) -> PurchaseLicenseRequest:
    return _build(
        PurchaseLicenseRequest,
        identity_id=identity_id,
        license_type=license_type,
        usage_type=usage_type,
        project_name=project_name,
        project_description=project_description,
        duration_days=duration_days or DEFAULT_LICENSE_DURATION_DAYS,
        allowed_platforms=list(allowed_platforms) if allowed_platforms else None,
        max_impressions=max_impressions,
        max_outputs=max_outputs,
    )


def _config(
    api_key: str | None,
    base_url: str,
    timeout: float,
    max_retries: int,
    debug: bool,
) -> ClientConfig:
    return ClientConfig.create(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        max_retries=max_retries,
        debug=debug,
    )


# =============================================================================
# Sync Client
# =============================================================================


class ActorHub:
    """Client for the ActorHub.ai API.

    Failed calls raise a subclass of ActorHubError. Rate-limit and server
    errors are retried with exponential backoff before they surface.

    Every method accepts an optional ``cancel`` event; setting it aborts the
    call with CancellationError before the next attempt or during a backoff wait.
    A request already in flight is not interrupted: it runs until it completes
    or hits the configured timeout. Use AsyncActorHub to abort in-flight requests.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        debug: bool = False,
        config: ClientConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: ActorHub API key.
            base_url: API root URL.
            timeout: Request timeout in seconds.
            max_retries: Maximum attempts for rate-limited or failed-server calls.
            debug: Print request diagnostics to stderr.
            config: Prebuilt configuration; overrides the individual settings.
            transport: Optional httpx transport override.

        Raises:
            ActorHubConfigError: If any setting is invalid.
        """
        if config is None:
            config = _config(api_key, base_url, timeout, max_retries, debug)
        self._dispatcher = Dispatcher(config, transport=transport)

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, transport: httpx.BaseTransport | None = None
    ) -> "ActorHub":
        """Create a client from an existing configuration."""
        return cls(config=config, transport=transport)

    @classmethod
    def from_env(cls) -> "ActorHub":
        """Create a client configured from ACTORHUB_* environment variables."""
        return cls.from_config(ClientConfig.from_env())

    @property
    def config(self) -> ClientConfig:
        return self._dispatcher.config

    def close(self) -> None:
        """Release pooled connections."""
        self._dispatcher.close()

    def __enter__(self) -> "ActorHub":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def verify(
        self,
        *,
        image_url: str | None = None,
        image_base64: str | None = None,
        include_license_options: bool = False,
        cancel: threading.Event | None = None,
    ) -> VerifyResponse | None:
        """Check whether an image contains protected identities.

        Args:
            image_url: URL of the image to check.
            image_base64: Base64-encoded image data.
            include_license_options: Include pricing for matched identities.
            cancel: Optional cancellation event.

        Raises:
            ValidationError: If neither image_url nor image_base64 is given.
        """
        request = _verify_request(image_url, image_base64, include_license_options)
        return self._dispatcher.send(
            "POST", VERIFY_PATH, request, response_type=VerifyResponse, cancel=cancel
        )

    def get_identity(
        self, identity_id: str, *, cancel: threading.Event | None = None
    ) -> IdentityResponse | None:
        """Retrieve identity details by ID."""
        path = IDENTITY_PATH.format(identity_id=quote(identity_id, safe=""))
        return self._dispatcher.send(
            "GET", path, response_type=IdentityResponse, cancel=cancel
        )

    def check_consent(
        self,
        *,
        image_url: str | None = None,
        image_base64: str | None = None,
        face_embedding: Sequence[float] | None = None,
        platform: str = "",
        intended_use: str = "",
        region: str | None = None,
        cancel: threading.Event | None = None,
    ) -> ConsentCheckResponse | None:
        """Check consent status for a face before AI generation.

        Args:
            image_url: URL of the image to check.
            image_base64: Base64-encoded image data.
            face_embedding: Precomputed face embedding vector.
            platform: Generation platform (e.g. "runway").
            intended_use: Intended use (e.g. "video").
            region: Optional region code (e.g. "US").
            cancel: Optional cancellation event.

        Raises:
            ValidationError: If no image or embedding is given.
        """
        request = _consent_request(
            image_url, image_base64, face_embedding, platform, intended_use, region
        )
        return self._dispatcher.send(
            "POST",
            CONSENT_CHECK_PATH,
            request,
            response_type=ConsentCheckResponse,
            cancel=cancel,
        )

    def list_marketplace(
        self, *, cancel: threading.Event | None = None, **filters: Any
    ) -> list[MarketplaceListingResponse]:
        """Search marketplace listings.

        Args:
            cancel: Optional cancellation event.
            **filters: Fields of MarketplaceListRequest (query, category, tags,
                featured, min_price, max_price, sort_by, page, limit).
        """
        params = _marketplace_params(_build(MarketplaceListRequest, **filters))
        result = self._dispatcher.send(
            "GET",
            MARKETPLACE_LISTINGS_PATH,
            response_type=list[MarketplaceListingResponse],
            params=params,
            cancel=cancel,
        )
        return result or []

    def get_my_licenses(
        self,
        *,
        status: str | None = None,
        page: int = 0,
        limit: int = 0,
        cancel: threading.Event | None = None,
    ) -> list[LicenseResponse]:
        """List licenses purchased by the current user."""
        result = self._dispatcher.send(
            "GET",
            MY_LICENSES_PATH,
            response_type=list[LicenseResponse],
            params=_license_params(status, page, limit),
            cancel=cancel,
        )
        return result or []

    def purchase_license(
        self,
        identity_id: str,
        license_type: LicenseType | str,
        usage_type: UsageType | str,
        project_name: str,
        *,
        project_description: str = "",
        duration_days: int | None = None,
        allowed_platforms: Sequence[str] | None = None,
        max_impressions: int | None = None,
        max_outputs: int | None = None,
        cancel: threading.Event | None = None,
    ) -> PurchaseResponse | None:
        """Start a license purchase for an identity.

        Returns a checkout session; duration_days defaults to 30.
        """
        request = _purchase_request(
            identity_id,
            license_type,
            usage_type,
            project_name,
            project_description,
            duration_days,
            allowed_platforms,
            max_impressions,
            max_outputs,
        )
        return self._dispatcher.send(
            "POST",
            PURCHASE_LICENSE_PATH,
            request,
            response_type=PurchaseResponse,
            cancel=cancel,
        )

    def get_actor_pack(
        self, pack_id: str, *, cancel: threading.Event | None = None
    ) -> ActorPackResponse | None:
        """Retrieve Actor Pack status and details."""
        path = ACTOR_PACK_STATUS_PATH.format(pack_id=quote(pack_id, safe=""))
        return self._dispatcher.send(
            "GET", path, response_type=ActorPackResponse, cancel=cancel
        )


# =============================================================================
# Async Client
# =============================================================================


class AsyncActorHub:
    """Asyncio client for the ActorHub.ai API.

    Mirrors ActorHub. The optional ``cancel`` argument is an asyncio.Event
    and also aborts a request that is already in flight.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        debug: bool = False,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if config is None:
            config = _config(api_key, base_url, timeout, max_retries, debug)
        self._dispatcher = AsyncDispatcher(config, transport=transport)

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> "AsyncActorHub":
        """Create a client from an existing configuration."""
        return cls(config=config, transport=transport)

    @classmethod
    def from_env(cls) -> "AsyncActorHub":
        """Create a client configured from ACTORHUB_* environment variables."""
        return cls.from_config(ClientConfig.from_env())

    @property
    def config(self) -> ClientConfig:
        return self._dispatcher.config

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._dispatcher.aclose()

    async def __aenter__(self) -> "AsyncActorHub":
        return self

    async def __aexit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        await self.aclose()

    async def verify(
        self,
        *,
        image_url: str | None = None,
        image_base64: str | None = None,
        include_license_options: bool = False,
        cancel: asyncio.Event | None = None,
    ) -> VerifyResponse | None:
        """Check whether an image contains protected identities."""
        request = _verify_request(image_url, image_base64, include_license_options)
        return await self._dispatcher.send(
            "POST", VERIFY_PATH, request, response_type=VerifyResponse, cancel=cancel
        )

    async def get_identity(
        self, identity_id: str, *, cancel: asyncio.Event | None = None
    ) -> IdentityResponse | None:
        path = IDENTITY_PATH.format(identity_id=quote(identity_id, safe=""))
        return await self._dispatcher.send(
            "GET", path, response_type=IdentityResponse, cancel=cancel
        )

    async def check_consent(
        self,
        *,
        image_url: str | None = None,
        image_base64: str | None = None,
        face_embedding: Sequence[float] | None = None,
        platform: str = "",
        intended_use: str = "",
        region: str | None = None,
        cancel: asyncio.Event | None = None,
    ) -> ConsentCheckResponse | None:
        """Check consent status for a face before AI generation."""
        request = _consent_request(
            image_url, image_base64, face_embedding, platform, intended_use, region
        )
        return await self._dispatcher.send(
            "POST",
            CONSENT_CHECK_PATH,
            request,
            response_type=ConsentCheckResponse,
            cancel=cancel,
        )

    async def list_marketplace(
        self, *, cancel: asyncio.Event | None = None, **filters: Any
    ) -> list[MarketplaceListingResponse]:
        params = _marketplace_params(_build(MarketplaceListRequest, **filters))
        result = await self._dispatcher.send(
            "GET",
            MARKETPLACE_LISTINGS_PATH,
            response_type=list[MarketplaceListingResponse],
            params=params,
            cancel=cancel,
        )
        return result or []

    async def get_my_licenses(
        self,
        *,
        status: str | None = None,
        page: int = 0,
        limit: int = 0,
        cancel: asyncio.Event | None = None,
    ) -> list[LicenseResponse]:
        result = await self._dispatcher.send(
            "GET",
            MY_LICENSES_PATH,
            response_type=list[LicenseResponse],
            params=_license_params(status, page, limit),
            cancel=cancel,
        )
        return result or []

    async def purchase_license(
        self,
        identity_id: str,
        license_type: LicenseType | str,
        usage_type: UsageType | str,
        project_name: str,
        *,
        project_description: str = "",
        duration_days: int | None = None,
        allowed_platforms: Sequence[str] | None = None,
        max_impressions: int | None = None,
        max_outputs: int | None = None,
        cancel: asyncio.Event | None = None,
    ) -> PurchaseResponse | None:
        request = _purchase_request(
            identity_id,
            license_type,
            usage_type,
            project_name,
            project_description,
            duration_days,
            allowed_platforms,
            max_impressions,
            max_outputs,
        )
        return await self._dispatcher.send(
            "POST",
            PURCHASE_LICENSE_PATH,
            request,
            response_type=PurchaseResponse,
            cancel=cancel,
        )

    async def get_actor_pack(
        self, pack_id: str, *, cancel: asyncio.Event | None = None
    ) -> ActorPackResponse | None:
        path = ACTOR_PACK_STATUS_PATH.format(pack_id=quote(pack_id, safe=""))
        return await self._dispatcher.send(
            "GET", path, response_type=ActorPackResponse, cancel=cancel
        )
