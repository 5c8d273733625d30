"""Pydantic models for Actor Packs."""

from datetime import datetime

from pydantic import Field

from actorhub.models.base import ResponseModel
from actorhub.models.enums import TrainingStatus


class ActorPackComponents(ResponseModel):
    """Which components of an Actor Pack are available."""

    face: bool = False
    voice: bool = False
    motion: bool = False


class ActorPackResponse(ResponseModel):
    """Actor Pack status and details.

    training_progress is a percentage; lora_model_url is set once training
    has completed and training_error once it has failed.
    """

    id: str = ""
    identity_id: str = ""
    name: str = ""
    description: str | None = None
    training_status: TrainingStatus | str = Field(
        default=TrainingStatus.QUEUED, union_mode="left_to_right"
    )
    training_progress: int = 0
    training_images_count: int = 0
    training_audio_seconds: int = 0
    components: ActorPackComponents = Field(default_factory=ActorPackComponents)
    lora_model_url: str | None = None
    total_downloads: int = 0
    is_available: bool = False
    training_error: str | None = None
    created_at: datetime | None = None
