"""Base model for decoded API responses."""

from typing import Any

from pydantic import BaseModel, model_validator


class ResponseModel(BaseModel):
    """Base for response models.

    A JSON null is treated like a missing key, so the field default applies
    instead of failing validation on non-optional fields.
    """

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
