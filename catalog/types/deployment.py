"""Deployment record model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalog.types.timestamps import as_utc


class Deployment(BaseModel):
    """A release rolled out to an environment at a point in time."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="Id")
    release_id: str = Field(alias="ReleaseId")
    environment_id: str = Field(alias="EnvironmentId")
    deployed_at: datetime = Field(alias="DeployedAt")

    @field_validator("deployed_at")
    @classmethod
    def _normalize_deployed(cls, value: datetime) -> datetime:
        return as_utc(value)
