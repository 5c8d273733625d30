"""Tests for the AsyncActorHub client."""

import asyncio
import json

import httpx
import pytest
import respx

from actorhub import AsyncActorHub
from actorhub.config import ClientConfig
from actorhub.exceptions import AuthenticationError, ValidationError

BASE_URL = "https://api.actorhub.test"


def run(coro_fn):
    """Run a coroutine function against a fresh client."""

    async def main():
        async with AsyncActorHub("test-key", base_url=BASE_URL) as client:
            return await coro_fn(client)

    return asyncio.run(main())


class TestAsyncActorHub:
    """Tests for AsyncActorHub."""

    def test_verify_requires_image(self):
        """Should fail locally when no image is given."""
        with pytest.raises(ValidationError):
            run(lambda client: client.verify())

    def test_consent_requires_input(self):
        """Should fail locally without image or embedding."""
        with pytest.raises(ValidationError):
            run(lambda client: client.check_consent(platform="runway", intended_use="video"))

    @respx.mock
    def test_verify(self):
        """Should post and decode verification."""
        route = respx.post(f"{BASE_URL}/api/v1/identity/verify").mock(
            return_value=httpx.Response(200, json={"protected": False, "faces_detected": 0})
        )

        result = run(lambda client: client.verify(image_url="https://example.com/a.jpg"))

        assert result.protected is False
        assert json.loads(route.calls.last.request.content) == {
            "image_url": "https://example.com/a.jpg"
        }

    @respx.mock
    def test_list_marketplace(self):
        """Should pass filters as query parameters."""
        route = respx.get(f"{BASE_URL}/api/v1/marketplace/listings").mock(
            return_value=httpx.Response(200, json=[{"id": "l-1"}, {"id": "l-2"}])
        )

        listings = run(lambda client: client.list_marketplace(category="ACTOR", featured=True))

        assert len(listings) == 2
        params = route.calls.last.request.url.params
        assert params["category"] == "ACTOR"
        assert params["featured"] == "true"

    @respx.mock
    def test_get_my_licenses_empty(self):
        """Should return [] for an empty body."""
        respx.get(f"{BASE_URL}/api/v1/marketplace/licenses/mine").mock(
            return_value=httpx.Response(200)
        )

        assert run(lambda client: client.get_my_licenses()) == []

    @respx.mock
    def test_purchase_license(self):
        """Should send the purchase request."""
        route = respx.post(f"{BASE_URL}/api/v1/marketplace/license/purchase").mock(
            return_value=httpx.Response(200, json={"checkout_url": "https://c", "session_id": "s"})
        )

        result = run(
            lambda client: client.purchase_license(
                "id-1", "exclusive", "editorial", "Doc", duration_days=90, max_outputs=10
            )
        )

        assert result.checkout_url == "https://c"
        body = json.loads(route.calls.last.request.content)
        assert body["duration_days"] == 90
        assert body["max_outputs"] == 10

    @respx.mock
    def test_auth_error(self):
        """Should raise AuthenticationError without retry."""
        route = respx.get(f"{BASE_URL}/api/v1/identity/id-1").mock(
            return_value=httpx.Response(401, json={"detail": "Bad key"})
        )

        with pytest.raises(AuthenticationError) as exc_info:
            run(lambda client: client.get_identity("id-1"))

        assert exc_info.value.message == "Bad key"
        assert route.call_count == 1

    def test_from_config_with_transport(self):
        """Should accept a prebuilt config and transport."""

        async def handler(request):
            return httpx.Response(200, json={"id": "pack-9", "is_available": True})

        async def main():
            config = ClientConfig(api_key="k", base_url=BASE_URL)
            client = AsyncActorHub.from_config(config, transport=httpx.MockTransport(handler))
            try:
                return await client.get_actor_pack("pack-9")
            finally:
                await client.aclose()

        pack = asyncio.run(main())
        assert pack.is_available is True
