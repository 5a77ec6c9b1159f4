"""Immutable input bundle for retention evaluation."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable
from dataclasses import dataclass, field

from catalog.types import Deployment, Environment, Project, Release


@dataclass(frozen=True)
class Snapshot:
    """Frozen view of the four record collections for one evaluation.

    Collections are stored as tuples so evaluators can share a snapshot
    without copying it. Lookups scan these tuples directly; no index is kept.
    """

    projects: tuple[Project, ...] = field(default_factory=tuple)
    releases: tuple[Release, ...] = field(default_factory=tuple)
    environments: tuple[Environment, ...] = field(default_factory=tuple)
    deployments: tuple[Deployment, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for name in ("projects", "releases", "environments", "deployments"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    @classmethod
    def from_records(
        cls,
        projects: Iterable[Project] = (),
        releases: Iterable[Release] = (),
        environments: Iterable[Environment] = (),
        deployments: Iterable[Deployment] = (),
    ) -> Snapshot:
        """Build a snapshot from any iterables of records."""
        return cls(
            projects=tuple(projects),
            releases=tuple(releases),
            environments=tuple(environments),
            deployments=tuple(deployments),
        )

    @classmethod
    def empty(cls) -> Snapshot:
        return cls()

    def is_empty(self) -> bool:
        return not (self.projects or self.releases or self.environments or self.deployments)

    def content_hash(self) -> str:
        """Return SHA-256 over the canonical JSON form of all records."""
        payload = {
            "projects": [p.model_dump(mode="json") for p in self.projects],
            "releases": [r.model_dump(mode="json") for r in self.releases],
            "environments": [e.model_dump(mode="json") for e in self.environments],
            "deployments": [d.model_dump(mode="json") for d in self.deployments],
        }
        raw = json.dumps(payload, sort_keys=True).encode("utf-8")
        return hashlib.sha256(raw).hexdigest()
