"""Release record model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.types.timestamps import as_utc


class Release(BaseModel):
    """Built artifact of a project, ordered for recency by created_at."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="Id")
    project_id: str = Field(alias="ProjectId")
    version: str | None = Field(default=None, alias="Version")
    created_at: datetime = Field(alias="Created")

    @field_validator("created_at")
    @classmethod
    def _normalize_created(cls, value: datetime) -> datetime:
        return as_utc(value)
