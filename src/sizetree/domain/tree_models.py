from __future__ import annotations

"""
Size Tree Data Models.

Immutable value types produced by the scanner: the recursive size node and
the diagnostic records emitted for entries that could not be measured.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

_EMPTY_CHILDREN: Mapping[str, "SizeNode"] = MappingProxyType({})


@dataclass(frozen=True)
class SizeNode:
    """
    A file or directory in the size tree.

    For a directory, ``size`` is the sum of the sizes of ``children``.
    Files, unvisited directories and unreadable directories have no
    children.

    Attributes:
        size: Total number of bytes.
        children: Read-only mapping of entry name to child node.
    """
    size: int = 0
    children: Mapping[str, "SizeNode"] = field(default_factory=lambda: _EMPTY_CHILDREN)

    def __post_init__(self) -> None:
        if not isinstance(self.children, MappingProxyType):
            object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def count_nodes(self) -> int:
        """Number of descendant nodes, excluding this one."""
        return sum(1 + child.count_nodes() for child in self.children.values())

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the tree into plain nested dictionaries.

        Children are ordered by name so that repeated scans of an unchanged
        directory serialize identically. The ``files`` key matches the
        persisted output format.
        """
        return {
            "size": self.size,
            "files": {
                name: self.children[name].to_dict()
                for name in sorted(self.children)
            },
        }


# -----------------------------------------------------------------------------
# DIAGNOSTICS
# -----------------------------------------------------------------------------

class IssueKind(str, Enum):
    """Categories of recoverable scan failures."""

    DIRECTORY_UNREADABLE = "directory_unreadable"
    ENTRY_UNRESOLVABLE = "entry_unresolvable"
    TYPE_UNDETERMINED = "type_undetermined"
    METADATA_UNREADABLE = "metadata_unreadable"
    SUBDIRECTORY_FAILED = "subdirectory_failed"
    NAME_UNDECODABLE = "name_undecodable"


ISSUE_MESSAGES: Dict[IssueKind, str] = {
    IssueKind.DIRECTORY_UNREADABLE: "Could not read directory",
    IssueKind.ENTRY_UNRESOLVABLE: "Could not access entry in directory",
    IssueKind.TYPE_UNDETERMINED: "Could not determine file type",
    IssueKind.METADATA_UNREADABLE: "Could not access file metadata",
    IssueKind.SUBDIRECTORY_FAILED: "Could not access directory",
    IssueKind.NAME_UNDECODABLE: "Entry name is not valid UTF-8",
}


@dataclass(frozen=True)
class ScanIssue:
    """
    A single entry that was skipped or degraded during a scan.

    Attributes:
        path: Filesystem path the failure refers to.
        kind: Failure category.
        error: Text of the underlying exception, if any.
    """
    path: str
    kind: IssueKind
    error: str = ""

    @property
    def message(self) -> str:
        base = f"{ISSUE_MESSAGES[self.kind]}: {self.path}"
        return f"{base} ({self.error})" if self.error else base
