"""Find-or-missing lookups and membership queries over a snapshot.

Every helper scans the snapshot on each call. Nothing is cached, so results
always reflect the snapshot passed in.
"""

from __future__ import annotations

from collections.abc import Iterator

from catalog.snapshot import Snapshot
from catalog.types import Deployment, Environment, Project, Release


def find_project(snapshot: Snapshot, project_id: str | None) -> Project | None:
    """Return the project with the given id, or None when it does not exist."""
    return next((p for p in snapshot.projects if p.id == project_id), None)


def find_release(snapshot: Snapshot, release_id: str | None) -> Release | None:
    """Return the release with the given id, or None when it does not exist."""
    return next((r for r in snapshot.releases if r.id == release_id), None)


def find_environment(snapshot: Snapshot, environment_id: str | None) -> Environment | None:
    """Return the environment with the given id, or None when it does not exist."""
    return next((e for e in snapshot.environments if e.id == environment_id), None)


def first_deployment(snapshot: Snapshot, release_id: str) -> Deployment | None:
    """Return the first deployment, in input order, of the given release."""
    return next((d for d in snapshot.deployments if d.release_id == release_id), None)


def is_deployed(snapshot: Snapshot, release_id: str) -> bool:
    """Return True if any deployment references the release."""
    return any(d.release_id == release_id for d in snapshot.deployments)


def is_orphan(snapshot: Snapshot, release: Release) -> bool:
    """Return True if the release's project no longer exists."""
    return find_project(snapshot, release.project_id) is None


def orphans(snapshot: Snapshot) -> Iterator[Release]:
    """Yield releases whose project_id matches no project."""
    return (r for r in snapshot.releases if is_orphan(snapshot, r))


def deployed_releases(snapshot: Snapshot) -> Iterator[Release]:
    """Yield releases with at least one deployment."""
    return (r for r in snapshot.releases if is_deployed(snapshot, r.id))
