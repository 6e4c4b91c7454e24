from __future__ import annotations

"""
Scan Issue Reporting.

Persists the diagnostics collected during a scan to a plain-text report so
skipped entries can be reviewed after the run.
"""

import logging
import os
from typing import List

from sizetree.domain.tree_models import ScanIssue

logger = logging.getLogger(__name__)


def finalize_error_reporting(
        save_error_log: bool,
        error_output_path: str,
        issues: List[ScanIssue],
) -> str:
    """
    Write collected scan issues to a report file.

    Nothing is written when saving is disabled or no issue was recorded.
    A failure to write is logged and does not fail the run.

    Args:
        save_error_log: Whether the report should be written.
        error_output_path: Destination of the report.
        issues: Diagnostics collected during the scan.

    Returns:
        str: Path of the report, or an empty string if none was written.
    """
    if not save_error_log or not issues:
        return ""

    try:
        os.makedirs(os.path.dirname(os.path.abspath(error_output_path)), exist_ok=True)
        with open(error_output_path, "w", encoding="utf-8") as f:
            f.write("SCAN ISSUES REPORT:\n")
            f.write("=" * 80 + "\n")
            for issue in issues:
                f.write(f"PATH: {issue.path}\n")
                f.write(f"KIND: {issue.kind.value}\n")
                if issue.error:
                    f.write(f"ERROR: {issue.error}\n")
                f.write("-" * 80 + "\n")
    except OSError as e:
        logger.error(f"Failed to persist issues report to '{error_output_path}': {e}")
        return ""

    return error_output_path
