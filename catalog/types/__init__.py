"""Typed catalog record models."""

from catalog.types.deployment import Deployment
from catalog.types.environment import Environment
from catalog.types.project import Project
from catalog.types.release import Release

__all__ = [
    "Deployment",
    "Environment",
    "Project",
    "Release",
]
