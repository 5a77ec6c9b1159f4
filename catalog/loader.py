"""Load a catalog snapshot from a directory of JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from catalog.snapshot import Snapshot
from catalog.types import Deployment, Environment, Project, Release

logger = logging.getLogger("rr.catalog.loader")

PROJECTS_FILE = "Projects.json"
RELEASES_FILE = "Releases.json"
ENVIRONMENTS_FILE = "Environments.json"
DEPLOYMENTS_FILE = "Deployments.json"


def load_records(path: Path) -> list[dict[str, Any]]:
    """Load a JSON array of objects, returning an empty list when missing."""
    if not path.exists():
        logger.warning("Catalog file missing, treating as empty: %s", path)
        return []
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list):
        raise ValueError(f"Catalog file must contain a JSON array: {path}")
    return data


def _parse(model: type[BaseModel], path: Path) -> list[Any]:
    return [model.model_validate(item) for item in load_records(path)]


def load_snapshot(data_dir: Path) -> Snapshot:
    """Read the four catalog files from data_dir into a frozen snapshot."""
    if not data_dir.is_dir():
        raise FileNotFoundError(f"Catalog directory not found: {data_dir}")

    snapshot = Snapshot.from_records(
        projects=_parse(Project, data_dir / PROJECTS_FILE),
        releases=_parse(Release, data_dir / RELEASES_FILE),
        environments=_parse(Environment, data_dir / ENVIRONMENTS_FILE),
        deployments=_parse(Deployment, data_dir / DEPLOYMENTS_FILE),
    )
    logger.info(
        "Loaded catalog from %s: %d projects, %d releases, %d environments, %d deployments",
        data_dir,
        len(snapshot.projects),
        len(snapshot.releases),
        len(snapshot.environments),
        len(snapshot.deployments),
    )
    return snapshot
