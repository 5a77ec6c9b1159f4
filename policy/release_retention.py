"""Per-project release retention."""

from __future__ import annotations

import logging

from catalog.lookups import find_environment, find_project, first_deployment
from catalog.snapshot import Snapshot
from catalog.types import Release
from policy.decisions import RetainedRelease
from policy.keep_count import validate_keep

logger = logging.getLogger("rr.policy.releases")


def group_by_project(releases: tuple[Release, ...]) -> dict[str, list[Release]]:
    """Group releases by project_id, newest first within each group.

    Groups keep first-seen project order. The sort is stable, so releases
    with equal timestamps stay in input order.
    """
    groups: dict[str, list[Release]] = {}
    for release in releases:
        groups.setdefault(release.project_id, []).append(release)
    return {
        project_id: sorted(group, key=lambda r: r.created_at, reverse=True)
        for project_id, group in groups.items()
    }


class ReleaseRetentionEvaluator:
    """Keeps the newest releases of each project plus anything still deployed.

    Recency protection needs a live project: an orphaned release is only kept
    while it is deployed somewhere.
    """

    def retain_releases(self, snapshot: Snapshot, keep: int) -> list[RetainedRelease]:
        """Return the releases to keep, ordered by project then recency."""
        validate_keep(keep)
        retained: list[RetainedRelease] = []

        for project_id, group in group_by_project(snapshot.releases).items():
            project = find_project(snapshot, project_id)
            for index, release in enumerate(group):
                if index < keep and project is not None:
                    reason = f"recency {index + 1}/{keep}"
                else:
                    reason = self._deployed_reason(snapshot, release)
                if reason is None:
                    logger.debug("Dropping release %s of project %s", release.id, project_id)
                    continue
                decision = RetainedRelease(project=project, release=release, reason=reason)
                logger.info("Retaining %s", decision)
                retained.append(decision)

        return retained

    @staticmethod
    def _deployed_reason(snapshot: Snapshot, release: Release) -> str | None:
        # First deployment found wins when a release is live in several places.
        deployment = first_deployment(snapshot, release.id)
        if deployment is None:
            return None
        environment = find_environment(snapshot, deployment.environment_id)
        if environment is not None and environment.name:
            label = environment.name
        else:
            label = deployment.environment_id
        return f"currently deployed to {label}"
