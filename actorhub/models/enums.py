"""Enumerations shared by ActorHub request and response models."""

from enum import StrEnum


class TrainingStatus(StrEnum):
    """Status of an Actor Pack training job."""

    QUEUED = "QUEUED"
    PROCESSING = "PROCESSING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class ProtectionLevel(StrEnum):
    """Identity protection tier."""

    FREE = "free"
    PRO = "pro"
    ENTERPRISE = "enterprise"


class LicenseType(StrEnum):
    STANDARD = "standard"
    EXTENDED = "extended"
    EXCLUSIVE = "exclusive"


class UsageType(StrEnum):
    """Usage category a license is purchased for."""

    PERSONAL = "personal"
    EDITORIAL = "editorial"
    COMMERCIAL = "commercial"
    EDUCATIONAL = "educational"
