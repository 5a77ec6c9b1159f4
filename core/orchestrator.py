"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from catalog.loader import load_snapshot
from catalog.snapshot import Snapshot
from core.policy_runtime import load_effective_config, resolve_paths
from governance.audit_logger import AuditLogger
from policy.deployment_retention import DeploymentRetentionEvaluator
from policy.release_retention import ReleaseRetentionEvaluator


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    config: dict[str, Any]
    snapshot: Snapshot
    releases: ReleaseRetentionEvaluator
    deployments: DeploymentRetentionEvaluator
    audit: AuditLogger

    @property
    def keep_releases(self) -> int:
        return int(self.config.get("retention", {}).get("keep_releases", 3))

    @property
    def keep_deployments(self) -> int:
        return int(self.config.get("retention", {}).get("keep_deployments", 1))


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(self, root: Path | None = None) -> None:
        default_root = Path(__file__).resolve().parents[1]
        self.root = (root or default_root).resolve()

    def load_config(self) -> dict[str, Any]:
        return load_effective_config(self.root)

    def build(self, data_dir: Path | None = None) -> RuntimeBundle:
        config = self.load_config()
        paths = resolve_paths(self.root, config)
        snapshot = load_snapshot(data_dir or paths["data_dir"])

        return RuntimeBundle(
            config=config,
            snapshot=snapshot,
            releases=ReleaseRetentionEvaluator(),
            deployments=DeploymentRetentionEvaluator(),
            audit=AuditLogger(paths["audit_log_path"]),
        )
