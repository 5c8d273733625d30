"""Public models for the ActorHub API."""

from actorhub.models.actor_packs import ActorPackComponents, ActorPackResponse
from actorhub.models.enums import LicenseType, ProtectionLevel, TrainingStatus, UsageType
from actorhub.models.identity import (
    ConsentCheckRequest,
    ConsentCheckResponse,
    ConsentDetails,
    ConsentLicenseInfo,
    ConsentRestrictions,
    ConsentResult,
    FaceBBox,
    IdentityResponse,
    LicenseOption,
    VerifyRequest,
    VerifyResponse,
    VerifyResult,
)
from actorhub.models.marketplace import (
    LicenseResponse,
    MarketplaceListingResponse,
    MarketplaceListRequest,
    PurchaseLicenseRequest,
    PurchaseResponse,
)

__all__ = [
    "TrainingStatus",
    "ProtectionLevel",
    "LicenseType",
    "UsageType",
    "FaceBBox",
    "LicenseOption",
    "VerifyRequest",
    "VerifyResult",
    "VerifyResponse",
    "ConsentCheckRequest",
    "ConsentDetails",
    "ConsentRestrictions",
    "ConsentLicenseInfo",
    "ConsentResult",
    "ConsentCheckResponse",
    "IdentityResponse",
    "MarketplaceListRequest",
    "MarketplaceListingResponse",
    "LicenseResponse",
    "PurchaseLicenseRequest",
    "PurchaseResponse",
    "ActorPackComponents",
    "ActorPackResponse",
]
