"""Configuration loading and runtime bootstrapping."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "retention": {
        "keep_releases": 3,
        "keep_deployments": 1,
    },
    "paths": {
        "data_dir": "data",
        "audit_log_path": "logs/retention_audit.jsonl",
    },
    "logging": {
        "level": "INFO",
    },
}


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML config file; a missing file is an empty mapping."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Config file must contain a mapping, got {type(data).__name__}: {path}"
        )
    for section in ("retention", "paths", "logging"):
        if section in data and not isinstance(data[section], dict):
            raise ValueError(f"Config section '{section}' must be a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into base; nested sections merge key by key."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def resolve_paths(root: Path, config: dict[str, Any]) -> dict[str, Path]:
    """Resolve data and audit paths against root without touching the filesystem."""
    paths_cfg = config.get("paths", {})
    data_dir = (root / paths_cfg.get("data_dir", "data")).resolve()
    audit_log_path = (
        root / paths_cfg.get("audit_log_path", "logs/retention_audit.jsonl")
    ).resolve()

    return {
        "data_dir": data_dir,
        "audit_log_path": audit_log_path,
    }


def load_effective_config(root: Path) -> dict[str, Any]:
    """Merge built-in defaults, config/default.yaml and config/local.yaml."""
    config_dir = root / "config"
    merged = merge_dicts(DEFAULT_CONFIG, load_yaml(config_dir / "default.yaml"))
    return merge_dicts(merged, load_yaml(config_dir / "local.yaml"))


def configure_logging(config: dict[str, Any]) -> None:
    """Apply the configured log level to the rr.* loggers."""
    level_name = str(config.get("logging", {}).get("level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {level_name}")
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("rr").setLevel(level)
