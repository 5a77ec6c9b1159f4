"""Structured JSONL audit logger for retention decisions."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from catalog.snapshot import Snapshot
from policy.decisions import RetainedDeployment, RetainedRelease


class AuditLogger:
    """Writes one JSON line per retention decision."""

    def __init__(self, log_path: Path) -> None:
        self.log_path = log_path
        self.logger = logging.getLogger("rr.audit")

    def log(
        self,
        policy: str,
        keep: int,
        subject: str,
        snapshot_hash: str,
        reason: str = "",
    ) -> None:
        """Append one JSONL audit event."""
        event = {
            "timestamp": datetime.now(UTC).isoformat(),
            "policy": policy,
            "keep": keep,
            "subject": subject,
            "snapshot_hash": snapshot_hash,
            "reason": reason,
        }
        line = json.dumps(event, ensure_ascii=True)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with self.log_path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")
        self.logger.info(line)

    def log_releases(
        self, snapshot: Snapshot, keep: int, decisions: list[RetainedRelease]
    ) -> None:
        snapshot_hash = snapshot.content_hash()
        for decision in decisions:
            self.log("releases", keep, decision.release.id, snapshot_hash, decision.reason)

    def log_deployments(
        self, snapshot: Snapshot, keep: int, decisions: list[RetainedDeployment]
    ) -> None:
        snapshot_hash = snapshot.content_hash()
        for decision in decisions:
            self.log(
                "deployments",
                keep,
                decision.deployment_id,
                snapshot_hash,
                f"recent deployment for {decision.project_id}/{decision.environment_id}",
            )
