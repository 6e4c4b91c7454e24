from __future__ import annotations

"""
Unit tests for the scan issues report.
"""

from pathlib import Path
from unittest.mock import patch

from sizetree.core.services.reporting import finalize_error_reporting
from sizetree.domain.tree_models import IssueKind, ScanIssue

ISSUES = [
    ScanIssue(path="/data/private", kind=IssueKind.DIRECTORY_UNREADABLE, error="Permission denied"),
    ScanIssue(path="/data/odd\\udcff", kind=IssueKind.NAME_UNDECODABLE),
]


def test_report_is_written(tmp_path: Path) -> None:
    report = tmp_path / "reports" / "issues.txt"

    path = finalize_error_reporting(True, str(report), ISSUES)

    assert path == str(report)
    content = report.read_text(encoding="utf-8")
    assert "SCAN ISSUES REPORT" in content
    assert "PATH: /data/private" in content
    assert "KIND: directory_unreadable" in content
    assert "ERROR: Permission denied" in content
    assert "KIND: name_undecodable" in content


def test_report_skipped_when_disabled(tmp_path: Path) -> None:
    report = tmp_path / "issues.txt"
    assert finalize_error_reporting(False, str(report), ISSUES) == ""
    assert not report.exists()


def test_report_skipped_without_issues(tmp_path: Path) -> None:
    report = tmp_path / "issues.txt"
    assert finalize_error_reporting(True, str(report), []) == ""
    assert not report.exists()


def test_report_write_failure_is_logged(tmp_path: Path, caplog) -> None:
    with patch("builtins.open", side_effect=PermissionError("denied")):
        path = finalize_error_reporting(True, str(tmp_path / "issues.txt"), ISSUES)

    assert path == ""
    assert "Failed to persist issues report" in caplog.text
