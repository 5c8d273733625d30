"""Tests for debug payload summaries."""

from actorhub._internal.dispatch.redaction import REDACTED_VALUE, summarize_payload


class TestSummarizePayload:
    """Tests for summarize_payload."""

    def test_redacts_credentials(self):
        """Should redact credential-like keys regardless of case."""
        result = summarize_payload({"API_KEY": "k", "token": "t", "name": "visible"})
        assert result == {"API_KEY": REDACTED_VALUE, "token": REDACTED_VALUE, "name": "visible"}

    def test_elides_image_data(self):
        """Should replace inline image data by its length."""
        result = summarize_payload({"image_base64": "a" * 2048, "platform": "runway"})
        assert result["image_base64"] == "<2048 chars>"
        assert result["platform"] == "runway"

    def test_elides_embedding(self):
        """Should replace an embedding vector by its size."""
        result = summarize_payload({"face_embedding": [0.1] * 512})
        assert result["face_embedding"] == "<512 items>"

    def test_nested_structures(self):
        """Should recurse into nested dicts and lists."""
        payload = {"items": [{"secret": "s", "id": 1}], "meta": {"password": "p"}}
        result = summarize_payload(payload)
        assert result == {
            "items": [{"secret": REDACTED_VALUE, "id": 1}],
            "meta": {"password": REDACTED_VALUE},
        }

    def test_does_not_mutate(self):
        """Should leave the original payload untouched."""
        payload = {"token": "t", "nested": {"image_base64": "abc"}}
        summarize_payload(payload)
        assert payload == {"token": "t", "nested": {"image_base64": "abc"}}

    def test_scalars_pass_through(self):
        assert summarize_payload(None) is None
        assert summarize_payload("text") == "text"
