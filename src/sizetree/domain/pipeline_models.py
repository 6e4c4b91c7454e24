from __future__ import annotations

"""
Pipeline Domain Data Models.

Result object returned by the scan pipeline to the interface layer, plus
the factory functions that build it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from sizetree.domain.tree_models import ScanIssue, SizeNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of a complete scan pipeline run.

    Attributes:
        ok: Whether the run completed.
        error: Failure description when ``ok`` is False.
        root_path: Normalized directory that was scanned.
        max_depth: Depth budget used for the scan.
        output_path: Absolute path of the written document ("" if none).
        output_format: Serialization format.
        dry_run: Whether writing was skipped.
        tree: The scanned tree (None on failure before scanning).
        issues: Diagnostics collected during the scan.
        tree_lines: ASCII preview lines, when requested.
        error_log_path: Path of the persisted issues report ("" if none).
        scan_seconds: Wall time spent scanning.
        write_seconds: Wall time spent serializing and writing.
    """
    ok: bool
    error: str

    root_path: str
    max_depth: int
    output_path: str
    output_format: str
    dry_run: bool = False

    tree: Optional[SizeNode] = None
    issues: List[ScanIssue] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)
    error_log_path: str = ""

    scan_seconds: float = 0.0
    write_seconds: float = 0.0

    @property
    def total_size(self) -> int:
        return self.tree.size if self.tree else 0

    @property
    def entry_count(self) -> int:
        return self.tree.count_nodes() if self.tree else 0

    def summary(self) -> Dict[str, Any]:
        """Flat, JSON-friendly view of the result (the tree itself excluded)."""
        return {
            "ok": self.ok,
            "error": self.error,
            "root_path": self.root_path,
            "max_depth": self.max_depth,
            "output_path": self.output_path,
            "output_format": self.output_format,
            "dry_run": self.dry_run,
            "total_size": self.total_size,
            "entries": self.entry_count,
            "issues": len(self.issues),
            "error_log_path": self.error_log_path,
            "scan_seconds": round(self.scan_seconds, 6),
            "write_seconds": round(self.write_seconds, 6),
        }

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        root_path: str,
        *,
        tree: Optional[SizeNode] = None,
        issues: Optional[List[ScanIssue]] = None,
        scan_seconds: float = 0.0,
        dry_run: bool = False,
) -> ScanResult:
    """
    Create a failed result.

    Args:
        error: Failure description.
        cfg: Configuration used for the run.
        root_path: Directory targeted by the run.
        tree: Tree scanned before the failure, if any.
        issues: Diagnostics collected before the failure.
        scan_seconds: Time spent scanning before the failure.
        dry_run: Whether the run was a dry run.

    Returns:
        ScanResult: An immutable error result.
    """
    return ScanResult(
        ok=False,
        error=error,
        root_path=root_path,
        max_depth=cfg.get("max_depth", 0),
        output_path="",
        output_format=cfg.get("output_format", ""),
        dry_run=dry_run,
        tree=tree,
        issues=issues or [],
        scan_seconds=scan_seconds,
    )


def create_success_result(
        cfg: Dict[str, Any],
        root_path: str,
        output_path: str,
        tree: SizeNode,
        issues: List[ScanIssue],
        *,
        dry_run: bool = False,
        tree_lines: Optional[List[str]] = None,
        error_log_path: str = "",
        scan_seconds: float = 0.0,
        write_seconds: float = 0.0,
) -> ScanResult:
    """Create a successful result."""
    return ScanResult(
        ok=True,
        error="",
        root_path=root_path,
        max_depth=cfg["max_depth"],
        output_path=output_path,
        output_format=cfg["output_format"],
        dry_run=dry_run,
        tree=tree,
        issues=issues,
        tree_lines=tree_lines or [],
        error_log_path=error_log_path,
        scan_seconds=scan_seconds,
        write_seconds=write_seconds,
    )
