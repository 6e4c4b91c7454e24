from __future__ import annotations

"""
Logging Handler Factories.

Builds the sinks that sit behind the queue listener. Every handler is
tagged so the logging core only ever removes handlers it installed itself.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List

from sizetree.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_sizetree_handler"


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_handlers(cfg: LoggingConfig, level_int: int) -> List[logging.Handler]:
    """
    Create the console and file handlers requested by the configuration.

    A log file that cannot be opened is reported on stderr and skipped, so
    the scan still runs with console output only.

    Args:
        cfg: Logging settings.
        level_int: Numeric level applied to every handler.

    Returns:
        List[logging.Handler]: Tagged handlers, possibly empty.
    """
    built: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        built.append(console)

    if cfg.log_file:
        try:
            os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
            file_handler = RotatingFileHandler(
                cfg.log_file,
                maxBytes=cfg.max_bytes,
                backupCount=cfg.backup_count,
                encoding="utf-8",
            )
        except OSError as e:
            sys.stderr.write(f"WARNING: Log file disabled, cannot open '{cfg.log_file}': {e}\n")
        else:
            file_handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
            built.append(file_handler)

    for handler in built:
        handler.setLevel(level_int)
        _tag_handler(handler)
    return built
