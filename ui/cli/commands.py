"""Typer command handlers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from catalog.lookups import deployed_releases, is_deployed, orphans as find_orphans
from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import configure_logging


def _runtime(data_dir: Path | None = None, root: Path | None = None) -> RuntimeBundle:
    try:
        return Orchestrator(root=root).build(data_dir=data_dir)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _config(root: Path | None = None) -> dict[str, Any]:
    try:
        return Orchestrator(root=root).load_config()
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def setup_logging(root: Path | None = None) -> None:
    """Configure logging from the effective config."""
    config = _config(root)
    try:
        configure_logging(config)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def releases(keep: int | None, data_dir: Path | None, as_json: bool = False) -> None:
    """Print retained releases."""
    bundle = _runtime(data_dir)
    n = bundle.keep_releases if keep is None else keep
    decisions = bundle.releases.retain_releases(bundle.snapshot, n)
    bundle.audit.log_releases(bundle.snapshot, n, decisions)

    if as_json:
        typer.echo(json.dumps([d.model_dump(mode="json") for d in decisions], indent=2))
        return
    for decision in decisions:
        typer.echo(str(decision))
    typer.echo(f"Retained {len(decisions)} of {len(bundle.snapshot.releases)} releases (keep={n})")


def deployments(keep: int | None, data_dir: Path | None, as_json: bool = False) -> None:
    """Print retained deployments."""
    bundle = _runtime(data_dir)
    n = bundle.keep_deployments if keep is None else keep
    decisions = bundle.deployments.retain_deployments(bundle.snapshot, n)
    bundle.audit.log_deployments(bundle.snapshot, n, decisions)

    if as_json:
        typer.echo(json.dumps([d.model_dump(mode="json") for d in decisions], indent=2))
        return
    for decision in decisions:
        typer.echo(str(decision))
    typer.echo(
        f"Retained {len(decisions)} of {len(bundle.snapshot.deployments)} deployments (keep={n})"
    )


def orphans(data_dir: Path | None) -> None:
    """Print orphaned releases."""
    bundle = _runtime(data_dir)
    count = 0
    for release in find_orphans(bundle.snapshot):
        state = "deployed" if is_deployed(bundle.snapshot, release.id) else "undeployed"
        typer.echo(f"{release.id} (project {release.project_id}): {state}")
        count += 1
    typer.echo(f"Orphans: {count}")


def summary(keep_releases: int | None, keep_deployments: int | None, data_dir: Path | None) -> None:
    """Print retention counts for both policies."""
    bundle = _runtime(data_dir)
    snapshot = bundle.snapshot
    n_rel = bundle.keep_releases if keep_releases is None else keep_releases
    n_dep = bundle.keep_deployments if keep_deployments is None else keep_deployments

    kept_releases = bundle.releases.retain_releases(snapshot, n_rel)
    kept_deployments = bundle.deployments.retain_deployments(snapshot, n_dep)
    bundle.audit.log_releases(snapshot, n_rel, kept_releases)
    bundle.audit.log_deployments(snapshot, n_dep, kept_deployments)

    data = {
        "releases": {
            "keep": n_rel,
            "total": len(snapshot.releases),
            "retained": len(kept_releases),
            "prunable": len(snapshot.releases) - len(kept_releases),
            "deployed": sum(1 for _ in deployed_releases(snapshot)),
            "orphaned": sum(1 for _ in find_orphans(snapshot)),
        },
        "deployments": {
            "keep": n_dep,
            "total": len(snapshot.deployments),
            "retained": len(kept_deployments),
            "prunable": len(snapshot.deployments) - len(kept_deployments),
        },
    }
    typer.echo(json.dumps(data, indent=2))


def config_show() -> None:
    """Show effective runtime config."""
    typer.echo(json.dumps(_config(), indent=2))
