"""Environment record model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Environment(BaseModel):
    """Deployment target such as staging or production."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(alias="Id")
    name: str | None = Field(default=None, alias="Name")
