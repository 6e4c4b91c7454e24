from __future__ import annotations

"""
Scan Pipeline.

Coordinates a complete run:
1. Validates configuration and the input directory.
2. Scans the directory tree, collecting diagnostics.
3. Serializes the tree and writes it to the output file.
4. Optionally renders a preview and persists an issues report.
Scan and write phases are timed separately.
"""

import logging
import os
import time
from typing import Any, Dict, List, Optional

from sizetree.core.analysis.tree_renderer import render_tree_lines
from sizetree.core.pipeline.validator import validate_config
from sizetree.core.serialization.serializer import serialize_tree, write_output
from sizetree.core.services.reporting import finalize_error_reporting
from sizetree.core.services.scanner import FilesystemReader, log_issue, scan_directory
from sizetree.domain.pipeline_models import (
    ScanResult,
    create_error_result,
    create_success_result,
)
from sizetree.domain.tree_models import ScanIssue
from sizetree.infra.fs import normalize_path
from sizetree.utils.formatting import format_duration, format_size

logger = logging.getLogger(__name__)


def run_scan(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
        output_path: Optional[str] = None,
        reader: Optional[FilesystemReader] = None,
) -> ScanResult:
    """
    Execute the full scan pipeline.

    Args:
        config: Raw or partial configuration dictionary.
        dry_run: Scan and serialize, but do not write any file.
        output_path: Override for the configured output file.
        reader: Filesystem reader passed to the scanner.

    Returns:
        ScanResult: Status, tree, diagnostics and timings.
    """
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    root_path = normalize_path(cfg["input_path"], os.getcwd())
    if not os.path.isdir(root_path):
        msg = f"Invalid input directory: {root_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, root_path, dry_run=dry_run)

    target_path = normalize_path(output_path or cfg["output_path"], os.getcwd())
    depth = cfg["max_depth"]

    # -------------------------------------------------------------------------
    # 1) Scan
    # -------------------------------------------------------------------------
    issues: List[ScanIssue] = []

    def collect(issue: ScanIssue) -> None:
        issues.append(issue)
        log_issue(issue)

    logger.info(f"Scanning directory {root_path} (depth {depth})")
    start = time.perf_counter()
    tree = scan_directory(root_path, depth, reader=reader, on_issue=collect)
    scan_seconds = time.perf_counter() - start

    logger.info(
        f"Scan finished in {format_duration(scan_seconds)}: "
        f"{format_size(tree.size)} across {tree.count_nodes()} entries, {len(issues)} issue(s)"
    )

    # -------------------------------------------------------------------------
    # 2) Serialize & Write
    # -------------------------------------------------------------------------
    start = time.perf_counter()
    try:
        text = serialize_tree(tree, cfg["output_format"])
        if not dry_run:
            write_output(target_path, text)
    except (OSError, ValueError) as e:
        msg = f"Failed to write {cfg['output_format'].upper()} output to {target_path}: {e}"
        logger.critical(msg)
        return create_error_result(
            msg, cfg, root_path,
            tree=tree, issues=issues, scan_seconds=scan_seconds, dry_run=dry_run,
        )
    write_seconds = time.perf_counter() - start

    if dry_run:
        logger.info("Dry run: output file not written.")
        target_path = ""
    else:
        logger.info(f"{cfg['output_format'].upper()} output written to {target_path} in {format_duration(write_seconds)}")

    # -------------------------------------------------------------------------
    # 3) Preview & Issues Report
    # -------------------------------------------------------------------------
    tree_lines: List[str] = []
    if cfg["print_tree"]:
        tree_lines = render_tree_lines(tree, root_label=root_path)
        logger.info("Tree Preview:\n" + "\n".join(tree_lines))

    error_log_path = ""
    if not dry_run:
        error_log_path = finalize_error_reporting(
            cfg["save_error_log"],
            normalize_path(cfg["error_log_path"], os.getcwd()),
            issues,
        )

    return create_success_result(
        cfg,
        root_path,
        target_path,
        tree,
        issues,
        dry_run=dry_run,
        tree_lines=tree_lines,
        error_log_path=error_log_path,
        scan_seconds=scan_seconds,
        write_seconds=write_seconds,
    )
