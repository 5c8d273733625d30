"""Pydantic models for identity verification and consent checks."""

from datetime import datetime

from pydantic import BaseModel, Field

from actorhub.models.base import ResponseModel
from actorhub.models.enums import LicenseType, ProtectionLevel

# =============================================================================
# Shared Models
# =============================================================================


class FaceBBox(ResponseModel):
    """Face bounding box coordinates."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


class LicenseOption(ResponseModel):
    """A license option with pricing."""

    type: LicenseType | str = Field(default="", union_mode="left_to_right")
    price_usd: float = 0.0
    duration_days: int = 0
    max_impressions: int | None = None


# =============================================================================
# Request Models
# =============================================================================


class VerifyRequest(BaseModel):
    """Payload for identity verification.

    One of image_url or image_base64 must be provided.
    """

    image_url: str | None = None
    image_base64: str | None = None
    include_license_options: bool | None = None


class ConsentCheckRequest(BaseModel):
    """Payload for a consent check before AI generation.

    One of image_url, image_base64 or face_embedding must be provided.
    """

    image_url: str | None = None
    image_base64: str | None = None
    face_embedding: list[float] | None = None
    platform: str = ""
    intended_use: str = ""
    region: str | None = None


# =============================================================================
# Response Models
# =============================================================================


class VerifyResult(ResponseModel):
    """Verification result for one detected face."""

    protected: bool = False
    identity_id: str | None = None
    similarity_score: float | None = None
    display_name: str | None = None
    license_required: bool = False
    blocked_categories: list[str] = Field(default_factory=list)
    license_options: list[LicenseOption] = Field(default_factory=list)
    face_bbox: FaceBBox | None = None


class VerifyResponse(ResponseModel):
    """Response from identity verification."""

    protected: bool = False
    faces_detected: int = 0
    identities: list[VerifyResult] = Field(default_factory=list)
    response_time_ms: int = 0
    request_id: str = ""


class ConsentDetails(ResponseModel):
    """Consent permissions granted by an identity owner."""

    commercial_use: bool = False
    ai_training: bool = False
    video_generation: bool = False
    deepfake: bool = False


class ConsentRestrictions(ResponseModel):
    blocked_categories: list[str] = Field(default_factory=list)
    blocked_regions: list[str] = Field(default_factory=list)
    blocked_brands: list[str] = Field(default_factory=list)


class ConsentLicenseInfo(ResponseModel):
    """License availability for a protected identity."""

    available: bool = False
    url: str | None = None
    pricing: dict[str, float] | None = None


class ConsentResult(ResponseModel):
    """Consent check result for one detected face."""

    protected: bool = False
    identity_id: str | None = None
    similarity_score: float | None = None
    consent: ConsentDetails = Field(default_factory=ConsentDetails)
    restrictions: ConsentRestrictions = Field(default_factory=ConsentRestrictions)
    license: ConsentLicenseInfo = Field(default_factory=ConsentLicenseInfo)


class ConsentCheckResponse(ResponseModel):
    """Response from a consent check."""

    request_id: str = ""
    protected: bool = False
    faces_detected: int = 0
    faces: list[ConsentResult] = Field(default_factory=list)
    response_time_ms: int = 0
    rate_limit_remaining: int | None = None


class IdentityResponse(ResponseModel):
    """Details of a registered identity."""

    id: str = ""
    display_name: str = ""
    profile_image_url: str | None = None
    status: str = ""
    protection_level: ProtectionLevel | str = Field(
        default=ProtectionLevel.FREE, union_mode="left_to_right"
    )
    protection_mode: str = ""
    total_verifications: int = 0
    total_licenses: int = 0
    total_revenue: float = 0.0
    allow_commercial: bool = False
    allow_ai_training: bool = False
    created_at: datetime | None = None
