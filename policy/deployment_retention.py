"""Per project/environment deployment retention."""

from __future__ import annotations

import logging

from catalog.lookups import find_environment, find_project, find_release
from catalog.snapshot import Snapshot
from catalog.types import Deployment
from policy.decisions import RetainedDeployment
from policy.keep_count import validate_keep

logger = logging.getLogger("rr.policy.deployments")

# (project id, environment id); None marks a reference that did not resolve.
GroupKey = tuple[str | None, str | None]


class DeploymentRetentionEvaluator:
    """Keeps the most recent deployments of each project/environment pair."""

    def resolve_key(self, snapshot: Snapshot, deployment: Deployment) -> GroupKey:
        """Resolve deployment -> release -> project and deployment -> environment."""
        release = find_release(snapshot, deployment.release_id)
        project = find_project(snapshot, release.project_id) if release is not None else None
        environment = find_environment(snapshot, deployment.environment_id)
        return (
            project.id if project is not None else None,
            environment.id if environment is not None else None,
        )

    def group(self, snapshot: Snapshot) -> dict[GroupKey, list[Deployment]]:
        """Group deployments by resolved key, most recent first within each group."""
        groups: dict[GroupKey, list[Deployment]] = {}
        for deployment in snapshot.deployments:
            groups.setdefault(self.resolve_key(snapshot, deployment), []).append(deployment)
        return {
            key: sorted(group, key=lambda d: d.deployed_at, reverse=True)
            for key, group in groups.items()
        }

    def retain_deployments(self, snapshot: Snapshot, keep: int) -> list[RetainedDeployment]:
        """Return the newest `keep` deployments for every project/environment pair."""
        validate_keep(keep)
        retained: list[RetainedDeployment] = []

        for (project_id, environment_id), group in self.group(snapshot).items():
            if project_id is None or environment_id is None:
                logger.warning(
                    "Deployments %s have unresolved references (project=%s, environment=%s)",
                    [d.id for d in group],
                    project_id,
                    environment_id,
                )
            for deployment in group[:keep]:
                decision = RetainedDeployment(
                    deployment_id=deployment.id,
                    project_id=project_id,
                    environment_id=environment_id,
                    release_id=deployment.release_id,
                )
                logger.info("Retaining %s", decision)
                retained.append(decision)

        return retained
