"""Catalog snapshot and lookup tests."""

from __future__ import annotations

import dataclasses
from datetime import datetime

import pytest

from catalog.lookups import (
    deployed_releases,
    find_environment,
    find_project,
    find_release,
    first_deployment,
    is_deployed,
    orphans,
)
from catalog.snapshot import Snapshot
from catalog.types import Release
from tests.builders import two_project_snapshot


def test_find_helpers_return_none_for_dangling_ids() -> None:
    snapshot = two_project_snapshot()

    assert find_project(snapshot, "project-1").name == "Random Quotes"
    assert find_project(snapshot, "project-gone") is None
    assert find_release(snapshot, "release-missing") is None
    assert find_environment(snapshot, "env-missing") is None
    assert find_environment(snapshot, None) is None


def test_deployment_membership() -> None:
    snapshot = two_project_snapshot()

    assert is_deployed(snapshot, "release-2")
    assert not is_deployed(snapshot, "release-1")
    assert first_deployment(snapshot, "release-2").id == "deployment-1"
    assert first_deployment(snapshot, "release-1") is None
    assert [r.id for r in deployed_releases(snapshot)] == ["release-2", "release-8"]


def test_orphans_are_recomputed_each_call() -> None:
    snapshot = two_project_snapshot()

    first = orphans(snapshot)
    assert not isinstance(first, list)
    assert [r.id for r in first] == ["release-8", "release-9"]
    assert [r.id for r in orphans(snapshot)] == ["release-8", "release-9"]


def test_snapshot_is_frozen() -> None:
    snapshot = Snapshot.from_records(releases=[])

    assert isinstance(snapshot.releases, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.releases = ()  # type: ignore[misc]


def test_snapshot_freezes_list_inputs() -> None:
    snapshot = Snapshot(projects=[], releases=[], environments=[], deployments=[])  # type: ignore[arg-type]

    assert snapshot.projects == ()
    assert snapshot.is_empty()
    assert Snapshot.empty().is_empty()


def test_snapshot_hash_tracks_content() -> None:
    assert two_project_snapshot().content_hash() == two_project_snapshot().content_hash()
    assert two_project_snapshot().content_hash() != Snapshot.empty().content_hash()


def test_records_accept_pascal_case_fields_and_assume_utc() -> None:
    release = Release.model_validate(
        {"Id": "Release-1", "ProjectId": "Project-1", "Version": None, "Created": "2000-01-01T08:00:00"}
    )

    assert release.project_id == "Project-1"
    assert release.version is None
    assert release.created_at.utcoffset().total_seconds() == 0
    assert release.created_at.replace(tzinfo=None) == datetime(2000, 1, 1, 8)
