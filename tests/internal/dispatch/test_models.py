"""Tests for the request envelope and retry schedule."""

import pytest
from pydantic import BaseModel

from actorhub._internal.dispatch.models import (
    MAX_BACKOFF_SECONDS,
    RequestEnvelope,
    attempt_count,
    backoff_delay,
)


class Payload(BaseModel):
    name: str
    note: str | None = None


class TestBackoffDelay:
    """Tests for backoff_delay."""

    def test_doubles_per_attempt(self):
        """Should wait 1, 2, 4, 8 seconds after attempts 0-3."""
        assert [backoff_delay(n) for n in range(4)] == [1.0, 2.0, 4.0, 8.0]

    def test_capped(self):
        """Should never exceed the cap."""
        assert backoff_delay(4) == MAX_BACKOFF_SECONDS
        assert backoff_delay(20) == MAX_BACKOFF_SECONDS


class TestAttemptCount:
    """Tests for attempt_count."""

    @pytest.mark.parametrize(("max_retries", "expected"), [(3, 3), (1, 1), (0, 1), (-2, 1)])
    def test_attempts(self, max_retries, expected):
        """Should send at least once."""
        assert attempt_count(max_retries) == expected


class TestRequestEnvelope:
    """Tests for RequestEnvelope encoding."""

    def test_no_payload(self):
        """Should have no body without a payload."""
        envelope = RequestEnvelope(method="GET", path="/x")
        assert envelope.encode_body() is None

    def test_model_payload_excludes_none(self):
        """Should omit None fields of a model payload."""
        envelope = RequestEnvelope(method="POST", path="/x", payload=Payload(name="a"))
        assert envelope.encode_body() == b'{"name":"a"}'

    def test_dict_payload(self):
        """Should encode plain mappings as-is."""
        envelope = RequestEnvelope(method="POST", path="/x", payload={"k": [1, 2]})
        assert envelope.encode_body() == b'{"k":[1,2]}'

    def test_unserializable_payload_raises(self):
        """Should raise for values JSON cannot represent."""
        envelope = RequestEnvelope(method="POST", path="/x", payload={"k": object()})
        with pytest.raises(TypeError):
            envelope.encode_body()

    def test_nan_rejected(self):
        """Should reject NaN rather than emit invalid JSON."""
        envelope = RequestEnvelope(method="POST", path="/x", payload={"k": float("nan")})
        with pytest.raises(ValueError):
            envelope.encode_body()
