from __future__ import annotations

"""
Integration tests for the Scan Pipeline.

Runs the full validate → scan → serialize → write flow against real
temporary directories.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict
from unittest.mock import patch

import yaml

from sizetree.core.pipeline.engine import run_scan
from sizetree.domain.tree_models import IssueKind


def _config(mock_config_dict: Dict[str, Any], root: Path, **extra: Any) -> Dict[str, Any]:
    cfg = dict(mock_config_dict)
    cfg["input_path"] = str(root)
    cfg.update(extra)
    return cfg


def test_pipeline_writes_yaml(mock_config_dict, sample_tree: Path) -> None:
    cfg = _config(mock_config_dict, sample_tree, max_depth=5)

    result = run_scan(cfg)

    assert result.ok, result.error
    assert result.total_size == 435
    assert result.output_path == cfg["output_path"]

    data = yaml.safe_load(Path(result.output_path).read_text(encoding="utf-8"))
    assert data["size"] == 435
    assert data["files"]["docs"]["files"]["img"]["size"] == 300
    assert data["files"]["empty"] == {"size": 0, "files": {}}


def test_pipeline_writes_json(mock_config_dict, sample_tree: Path, tmp_path: Path) -> None:
    out = tmp_path / "sizes.json"
    cfg = _config(mock_config_dict, sample_tree, output_path=str(out), output_format=None)

    result = run_scan(cfg)

    assert result.ok
    assert result.output_format == "json"
    assert json.loads(out.read_text(encoding="utf-8"))["size"] == 435


def test_pipeline_output_override(mock_config_dict, sample_tree: Path, tmp_path: Path) -> None:
    override = tmp_path / "override.yaml"
    result = run_scan(_config(mock_config_dict, sample_tree), output_path=str(override))

    assert result.output_path == str(override)
    assert override.exists()


def test_pipeline_respects_depth(mock_config_dict, sample_tree: Path) -> None:
    result = run_scan(_config(mock_config_dict, sample_tree, max_depth=1))

    assert result.ok
    assert result.total_size == 110
    assert result.tree.children["docs"].is_leaf


def test_pipeline_dry_run_writes_nothing(mock_config_dict, sample_tree: Path) -> None:
    cfg = _config(mock_config_dict, sample_tree, save_error_log=True)

    result = run_scan(cfg, dry_run=True)

    assert result.ok
    assert result.dry_run is True
    assert result.output_path == ""
    assert not Path(cfg["output_path"]).exists()
    assert not Path(cfg["output_path"]).parent.exists()


def test_pipeline_invalid_input(mock_config_dict, tmp_path: Path) -> None:
    result = run_scan(_config(mock_config_dict, tmp_path / "missing"))

    assert result.ok is False
    assert "Invalid input directory" in result.error
    assert result.tree is None


def test_pipeline_write_failure_is_reported(mock_config_dict, sample_tree: Path) -> None:
    with patch("sizetree.core.pipeline.engine.write_output", side_effect=PermissionError("read-only")):
        result = run_scan(_config(mock_config_dict, sample_tree))

    assert result.ok is False
    assert "read-only" in result.error
    assert result.tree is not None
    assert result.total_size == 435


def test_pipeline_collects_issues_and_writes_report(mock_config_dict, sample_tree: Path) -> None:
    class DenyDocs:
        def list_dir(self, path):
            if path.endswith("docs"):
                raise PermissionError(13, "Permission denied", path)
            with os.scandir(path) as it:
                return list(it)

    cfg = _config(mock_config_dict, sample_tree, save_error_log=True)
    result = run_scan(cfg, reader=DenyDocs())

    assert result.ok
    assert [i.kind for i in result.issues] == [IssueKind.DIRECTORY_UNREADABLE]
    assert result.total_size == 110
    assert result.error_log_path == cfg["error_log_path"]
    assert "docs" in Path(result.error_log_path).read_text(encoding="utf-8")


def test_pipeline_print_tree_renders_preview(mock_config_dict, sample_tree: Path) -> None:
    result = run_scan(_config(mock_config_dict, sample_tree, print_tree=True))

    assert result.tree_lines[0].startswith(str(sample_tree))
    assert any("logo.png (300.00 B)" in line for line in result.tree_lines)


def test_pipeline_records_timings(mock_config_dict, sample_tree: Path) -> None:
    result = run_scan(_config(mock_config_dict, sample_tree))

    assert result.scan_seconds >= 0.0
    assert result.write_seconds >= 0.0
    assert result.summary()["entries"] == result.tree.count_nodes() == 7
