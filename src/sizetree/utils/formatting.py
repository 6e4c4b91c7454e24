from __future__ import annotations

"""
Human-readable formatting helpers for byte counts and durations.
"""

from typing import List

_SIZE_UNITS: List[str] = ["B", "KB", "MB", "GB", "TB"]


def format_size(num_bytes: float) -> str:
    """
    Format a byte count using binary multiples.

    Examples:
        >>> format_size(0)
        '0 B'
        >>> format_size(1536)
        '1.50 KB'
    """
    if num_bytes == 0:
        return "0 B"

    size = float(num_bytes)
    for unit in _SIZE_UNITS:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def format_duration(seconds: float) -> str:
    """Format an elapsed time in seconds as ``ms`` or ``s``."""
    if seconds < 1.0:
        return f"{seconds * 1000:.1f} ms"
    return f"{seconds:.2f} s"
