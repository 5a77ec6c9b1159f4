"""Retention decision records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from catalog.types import Project, Release


class RetainedRelease(BaseModel):
    """A release to keep and why."""

    model_config = ConfigDict(frozen=True)

    project: Project | None = None
    release: Release
    reason: str

    def __str__(self) -> str:
        project_label = (
            self.project.name
            if self.project is not None and self.project.name is not None
            else self.release.project_id
        )
        version = f"v{self.release.version}" if self.release.version is not None else "unversioned"
        return f"{project_label}: {self.release.id} ({version}): {self.reason}"


class RetainedDeployment(BaseModel):
    """A deployment to keep for its project/environment pair."""

    model_config = ConfigDict(frozen=True)

    deployment_id: str
    project_id: str | None
    environment_id: str | None
    release_id: str

    def __str__(self) -> str:
        return (
            f"(Deployment = {self.deployment_id}, Project = {self.project_id}, "
            f"Environment = {self.environment_id}, Release = {self.release_id})"
        )
