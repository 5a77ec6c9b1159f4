"""Configuration loading tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from core.orchestrator import Orchestrator
from core.policy_runtime import (
    configure_logging,
    load_effective_config,
    load_yaml,
    merge_dicts,
    resolve_paths,
)
from tests.builders import SAMPLE_DATA_DIR


def test_defaults_apply_without_config_files(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)

    assert config["retention"] == {"keep_releases": 3, "keep_deployments": 1}
    assert config["paths"]["data_dir"] == "data"


def test_local_yaml_overrides_default_yaml(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text(
        "retention:\n  keep_releases: 5\n  keep_deployments: 2\n", encoding="utf-8"
    )
    (config_dir / "local.yaml").write_text("retention:\n  keep_releases: 7\n", encoding="utf-8")

    config = load_effective_config(tmp_path)

    assert config["retention"] == {"keep_releases": 7, "keep_deployments": 2}


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_yaml(path)


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"a": {"b": 1, "c": 2}, "d": 3}, {"a": {"c": 4}})
    assert merged == {"a": {"b": 1, "c": 4}, "d": 3}


def test_resolve_paths_does_not_create_directories(tmp_path: Path) -> None:
    paths = resolve_paths(tmp_path, {"paths": {"audit_log_path": "out/audit.jsonl"}})

    assert paths["audit_log_path"] == (tmp_path / "out" / "audit.jsonl").resolve()
    assert not paths["audit_log_path"].parent.exists()
    assert paths["data_dir"] == (tmp_path / "data").resolve()


def test_configure_logging_sets_rr_level() -> None:
    configure_logging({"logging": {"level": "debug"}})
    assert logging.getLogger("rr").level == logging.DEBUG

    with pytest.raises(ValueError):
        configure_logging({"logging": {"level": "chatty"}})


def test_orchestrator_builds_bundle(tmp_path: Path) -> None:
    bundle = Orchestrator(root=tmp_path).build(data_dir=SAMPLE_DATA_DIR)

    assert bundle.keep_releases == 3
    assert bundle.keep_deployments == 1
    assert len(bundle.snapshot.releases) == 9
    assert bundle.audit.log_path == (tmp_path / "logs" / "retention_audit.jsonl").resolve()


def test_non_mapping_section_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "local.yaml"
    path.write_text("retention: 5\n", encoding="utf-8")

    with pytest.raises(ValueError, match="'retention'"):
        load_yaml(path)
