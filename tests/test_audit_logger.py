"""Retention audit trail tests."""

from __future__ import annotations

import json
from pathlib import Path

from governance.audit_logger import AuditLogger
from policy.deployment_retention import DeploymentRetentionEvaluator
from policy.release_retention import ReleaseRetentionEvaluator
from tests.builders import two_project_snapshot


def read_events(path: Path) -> list[dict]:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_release_decisions_are_written_as_jsonl(tmp_path: Path) -> None:
    snapshot = two_project_snapshot()
    decisions = ReleaseRetentionEvaluator().retain_releases(snapshot, 1)
    audit = AuditLogger(tmp_path / "logs" / "audit.jsonl")

    audit.log_releases(snapshot, 1, decisions)
    events = read_events(audit.log_path)

    assert [e["subject"] for e in events] == [d.release.id for d in decisions]
    assert {e["policy"] for e in events} == {"releases"}
    assert all(e["keep"] == 1 for e in events)
    assert all(e["snapshot_hash"] == snapshot.content_hash() for e in events)
    assert events[0]["reason"] == decisions[0].reason


def test_deployment_decisions_append(tmp_path: Path) -> None:
    snapshot = two_project_snapshot()
    decisions = DeploymentRetentionEvaluator().retain_deployments(snapshot, 1)
    audit = AuditLogger(tmp_path / "audit.jsonl")

    audit.log_deployments(snapshot, 1, decisions)
    audit.log_deployments(snapshot, 1, decisions)
    events = read_events(audit.log_path)

    assert len(events) == 2 * len(decisions)
    assert events[0]["policy"] == "deployments"
    assert events[0]["subject"] == "deployment-1"
    assert "project-1/env-prod" in events[0]["reason"]


def test_audit_directory_is_created_on_first_write(tmp_path: Path) -> None:
    audit = AuditLogger(tmp_path / "nested" / "audit.jsonl")
    assert not audit.log_path.parent.exists()

    audit.log("releases", 1, "release-2", "hash", "recency 1/1")

    assert read_events(audit.log_path)[0]["subject"] == "release-2"
