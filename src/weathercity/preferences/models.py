"""On-disk document model for JSON-file preferences."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PreferencesDocument(BaseModel):
    """A single preferences namespace as stored on disk."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., description="Preferences namespace")
    values: dict[str, str] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _non_empty_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must be non-empty")
        return value
