"""Tests for response model decoding."""

import pytest

from actorhub.models import (
    ActorPackComponents,
    ActorPackResponse,
    ConsentCheckResponse,
    ConsentDetails,
    ConsentLicenseInfo,
    ConsentRestrictions,
    ConsentResult,
    FaceBBox,
    IdentityResponse,
    LicenseOption,
    LicenseResponse,
    LicenseType,
    MarketplaceListingResponse,
    ProtectionLevel,
    PurchaseResponse,
    TrainingStatus,
    UsageType,
    VerifyResponse,
    VerifyResult,
)


class TestNullFields:
    """JSON nulls decode to the field's zero value."""

    @pytest.mark.parametrize(
        ("model_cls", "data", "field", "expected"),
        [
            (FaceBBox, {"x": None, "width": 2}, "x", 0.0),
            (LicenseOption, {"type": "standard", "price_usd": None}, "price_usd", 0.0),
            (VerifyResult, {"blocked_categories": None}, "blocked_categories", []),
            (VerifyResponse, {"identities": None, "request_id": None}, "identities", []),
            (ConsentDetails, {"deepfake": None}, "deepfake", False),
            (ConsentRestrictions, {"blocked_brands": None}, "blocked_brands", []),
            (ConsentLicenseInfo, {"available": None, "url": None}, "available", False),
            (ConsentResult, {"consent": None}, "consent", ConsentDetails()),
            (ConsentCheckResponse, {"faces": None, "faces_detected": None}, "faces", []),
            (IdentityResponse, {"id": "i", "display_name": None}, "display_name", ""),
            (MarketplaceListingResponse, {"id": "l1", "tags": None}, "tags", []),
            (LicenseResponse, {"id": "lic", "allowed_platforms": None}, "allowed_platforms", []),
            (PurchaseResponse, {"license_details": None}, "license_details", {}),
            (ActorPackComponents, {"voice": None}, "voice", False),
            (ActorPackResponse, {"id": "p", "components": None}, "components", ActorPackComponents()),
        ],
    )
    def test_null_uses_default(self, model_cls, data, field, expected):
        """Should treat null like a missing key."""
        model = model_cls.model_validate(data)
        assert getattr(model, field) == expected

    def test_nested_nulls(self):
        """Should apply to nested models as well."""
        response = VerifyResponse.model_validate_json(
            '{"identities": [{"display_name": null, "license_options": null,'
            ' "face_bbox": {"x": null, "y": 1}}]}'
        )
        identity = response.identities[0]
        assert identity.display_name is None
        assert identity.license_options == []
        assert identity.face_bbox.x == 0.0

    def test_listing_with_nulls_decodes(self):
        """Should decode a listing whose display_name and tags are null."""
        listing = MarketplaceListingResponse.model_validate_json(
            '{"id": "l1", "display_name": null, "tags": null}'
        )
        assert listing.display_name == ""
        assert listing.tags == []


class TestMissingFields:
    """Missing scalar fields decode to zero values."""

    @pytest.mark.parametrize(
        "model_cls",
        [IdentityResponse, MarketplaceListingResponse, LicenseResponse, ActorPackResponse],
    )
    def test_missing_id(self, model_cls):
        """Should default id to an empty string."""
        assert model_cls.model_validate({}).id == ""

    def test_license_without_types(self):
        """Should default license and usage types to empty strings."""
        lic = LicenseResponse.model_validate({"id": "lic"})
        assert lic.license_type == ""
        assert lic.usage_type == ""

    def test_license_option_without_type(self):
        assert LicenseOption.model_validate({"price_usd": 9.0}).type == ""


class TestEnumFields:
    """Known enum values become members; unknown values pass through as strings."""

    def test_known_values(self):
        """Should map known values to enum members."""
        pack = ActorPackResponse.model_validate({"training_status": "COMPLETED"})
        identity = IdentityResponse.model_validate({"protection_level": "enterprise"})
        lic = LicenseResponse.model_validate(
            {"license_type": "exclusive", "usage_type": "educational"}
        )
        assert pack.training_status is TrainingStatus.COMPLETED
        assert identity.protection_level is ProtectionLevel.ENTERPRISE
        assert lic.license_type is LicenseType.EXCLUSIVE
        assert lic.usage_type is UsageType.EDUCATIONAL

    def test_unknown_values(self):
        """Should keep values the SDK does not know about."""
        pack = ActorPackResponse.model_validate({"training_status": "CANCELLED"})
        identity = IdentityResponse.model_validate({"protection_level": "platinum"})
        lic = LicenseResponse.model_validate(
            {"license_type": "lifetime", "usage_type": "internal"}
        )
        option = LicenseOption.model_validate({"type": "bundle"})
        assert pack.training_status == "CANCELLED"
        assert identity.protection_level == "platinum"
        assert lic.license_type == "lifetime"
        assert lic.usage_type == "internal"
        assert option.type == "bundle"

    def test_defaults_are_members(self):
        """Should default to enum members when the field is absent."""
        assert ActorPackResponse().training_status is TrainingStatus.QUEUED
        assert IdentityResponse().protection_level is ProtectionLevel.FREE
