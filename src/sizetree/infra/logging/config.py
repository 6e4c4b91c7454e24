from __future__ import annotations

"""
Logging Configuration Model.

Settings consumed by ``configure_logging``. Level names are resolved with
the standard ``logging`` registry, so any registered name is accepted.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging subsystem.

    Attributes:
        level: Minimum severity name (``DEBUG``, ``INFO``...).
        console: Emit records to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Segment size that triggers a rollover.
        backup_count: Rotated segments kept on disk.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
