"""Pydantic models for the marketplace and license purchases."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from actorhub.models.base import ResponseModel
from actorhub.models.enums import LicenseType, UsageType

DEFAULT_LICENSE_DURATION_DAYS = 30

# =============================================================================
# Request Models
# =============================================================================


class MarketplaceListRequest(BaseModel):
    """Filters for marketplace search. All fields are optional."""

    query: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    featured: bool | None = None
    min_price: float | None = None
    max_price: float | None = None
    sort_by: str | None = None
    page: int | None = None
    limit: int | None = None

    model_config = {"extra": "forbid"}


class PurchaseLicenseRequest(BaseModel):
    """Payload for purchasing a license.

    Required fields:
        identity_id: Identity to license
        license_type: standard, extended or exclusive
        usage_type: personal, editorial, commercial or educational
        project_name: Name of the project the license covers

    Optional fields:
        project_description: Free-form description (sent as "" if omitted)
        duration_days: License duration (default: 30)
        allowed_platforms, max_impressions, max_outputs: Usage limits
    """

    identity_id: str
    license_type: LicenseType
    usage_type: UsageType
    project_name: str
    project_description: str = ""
    duration_days: int = Field(default=DEFAULT_LICENSE_DURATION_DAYS, gt=0)
    allowed_platforms: list[str] | None = None
    max_impressions: int | None = None
    max_outputs: int | None = None


# =============================================================================
# Response Models
# =============================================================================


class MarketplaceListingResponse(ResponseModel):
    """A marketplace listing."""

    id: str = ""
    identity_id: str = ""
    title: str = ""
    description: str | None = None
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    base_price_usd: float = 0.0
    display_name: str = ""
    profile_image_url: str | None = None
    featured: bool = False
    view_count: int = 0
    license_count: int = 0
    rating: float | None = None
    created_at: datetime | None = None


class LicenseResponse(ResponseModel):
    """A license owned by the current user."""

    id: str = ""
    identity_id: str = ""
    identity_name: str = ""
    license_type: LicenseType | str = Field(default="", union_mode="left_to_right")
    usage_type: UsageType | str = Field(default="", union_mode="left_to_right")
    status: str = ""
    project_name: str = ""
    project_description: str | None = None
    allowed_platforms: list[str] = Field(default_factory=list)
    max_impressions: int | None = None
    max_outputs: int | None = None
    price_usd: float = 0.0
    starts_at: datetime | None = None
    expires_at: datetime | None = None
    created_at: datetime | None = None


class PurchaseResponse(ResponseModel):
    """Checkout session created by a license purchase."""

    checkout_url: str = ""
    session_id: str = ""
    price_usd: float = 0.0
    license_details: dict[str, Any] = Field(default_factory=dict)
