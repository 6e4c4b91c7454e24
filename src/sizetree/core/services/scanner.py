from __future__ import annotations

"""
Directory Size Scanner.

Walks a directory tree depth-first up to a depth budget and builds a
SizeNode tree bottom-up, where every directory's size is the sum of its
children. Filesystem failures never abort a scan: the offending directory
degrades to an empty node, or the offending entry is left out, and a
ScanIssue is reported to the diagnostic sink.
"""

import logging
import os
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol

from sizetree.domain.tree_models import IssueKind, ScanIssue, SizeNode

logger = logging.getLogger(__name__)

INVALID_NAME_PLACEHOLDER = "Invalid UTF-8 Name"

IssueSink = Callable[[ScanIssue], None]


# ==============================================================================
# FILESYSTEM READER
# ==============================================================================

class FilesystemReader(Protocol):
    """
    Source of directory listings.

    ``list_dir`` returns the complete listing of a directory or raises
    OSError. Entries follow the ``os.DirEntry`` interface (``name``,
    ``path``, ``is_dir`` and ``stat``).
    """

    def list_dir(self, path: str) -> List[Any]:
        ...


class OsFilesystemReader:
    """Reader backed by ``os.scandir``."""

    def list_dir(self, path: str) -> List[os.DirEntry]:
        # The listing is fully materialized so the handle is closed
        # before the scanner recurses into any child.
        with os.scandir(path) as it:
            return list(it)


def log_issue(issue: ScanIssue) -> None:
    """Default diagnostic sink: report the issue as a warning."""
    logger.warning(issue.message)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan_directory(
        path: str,
        depth: int,
        *,
        reader: Optional[FilesystemReader] = None,
        on_issue: Optional[IssueSink] = None,
) -> SizeNode:
    """
    Build the size tree of a directory.

    The root is scanned with the full depth budget and every descent into a
    subdirectory consumes one unit. A directory reached with no budget left
    is not read at all and appears as an empty, zero-sized node.

    Args:
        path: Directory to scan.
        depth: Remaining depth budget (>= 0).
        reader: Listing source, ``OsFilesystemReader`` by default.
        on_issue: Diagnostic sink, ``log_issue`` by default.

    Returns:
        SizeNode: The fully materialized tree. An unreadable root yields an
        empty node.

    Raises:
        ValueError: If depth is negative.
    """
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")

    scanner = _TreeScanner(reader or OsFilesystemReader(), on_issue or log_issue)
    return scanner.scan(os.fspath(path), depth)


# ==============================================================================
# RECURSIVE SCANNER
# ==============================================================================

class _TreeScanner:

    def __init__(self, reader: FilesystemReader, on_issue: IssueSink) -> None:
        self._reader = reader
        self._on_issue = on_issue

    def scan(self, path: str, depth: int) -> SizeNode:
        if depth == 0:
            return SizeNode()

        try:
            entries = self._reader.list_dir(path)
        except OSError as e:
            self._report(path, IssueKind.DIRECTORY_UNREADABLE, e)
            return SizeNode()

        total_size = 0
        children: Dict[str, SizeNode] = {}
        unnamed: List[SizeNode] = []

        for entry in entries:
            try:
                raw_name = entry.name
                entry_path = entry.path
            except OSError as e:
                self._report(path, IssueKind.ENTRY_UNRESOLVABLE, e)
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                self._report(entry_path, IssueKind.TYPE_UNDETERMINED, e)
                continue

            if is_dir:
                try:
                    child = self.scan(entry_path, depth - 1)
                except (OSError, RecursionError) as e:
                    # RecursionError: nesting deeper than the interpreter stack allows
                    self._report(entry_path, IssueKind.SUBDIRECTORY_FAILED, e)
                    continue
            else:
                try:
                    child = SizeNode(size=entry.stat(follow_symlinks=False).st_size)
                except OSError as e:
                    self._report(entry_path, IssueKind.METADATA_UNREADABLE, e)
                    continue

            if _is_decodable(raw_name):
                children[raw_name] = child
            else:
                self._report(entry_path, IssueKind.NAME_UNDECODABLE)
                unnamed.append(child)
            total_size += child.size

        # Placeholders are handed out once every real name is known
        for child in unnamed:
            children[_free_placeholder(children)] = child

        return SizeNode(size=total_size, children=children)

    def _report(self, path: str, kind: IssueKind, error: Optional[BaseException] = None) -> None:
        self._on_issue(ScanIssue(path=_printable(path), kind=kind, error=str(error) if error else ""))


# ==============================================================================
# NAME HELPERS
# ==============================================================================

def _is_decodable(name: str) -> bool:
    """
    Check that a name round-trips through UTF-8.

    ``os.scandir`` hands back undecodable bytes as surrogate escapes, which
    cannot be encoded again.
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _free_placeholder(taken: Mapping[str, SizeNode]) -> str:
    """Return the first placeholder name not already used in a directory."""
    name = INVALID_NAME_PLACEHOLDER
    n = 2
    while name in taken:
        name = f"{INVALID_NAME_PLACEHOLDER} ({n})"
        n += 1
    return name


def _printable(path: str) -> str:
    """Escape surrogates left by undecodable bytes so the path can be logged."""
    return path.encode("utf-8", "backslashreplace").decode("utf-8")
