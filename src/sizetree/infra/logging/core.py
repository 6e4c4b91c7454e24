from __future__ import annotations

"""
Logging Core.

Owns the lifecycle of the root logger. Records go through a QueueHandler
and are written by a QueueListener thread, so console and file output never
stall a long directory scan. Configuration is idempotent unless forced.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener

from sizetree.infra.fs import get_user_data_dir
from sizetree.infra.logging.config import LoggingConfig
from sizetree.infra.logging.handlers import _is_our_handler, _tag_handler, build_handlers

_CONFIGURED_FLAG_ATTR: str = "_sizetree_configured"
_QUEUE_LISTENER_ATTR: str = "_sizetree_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = "sizetree.log") -> str:
    """Location of the persistent log inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route the root logger through a queue to the configured handlers.

    Handlers attached by test runners or embedding applications are left
    in place; only handlers created here are replaced on reconfiguration.

    Args:
        cfg: Logging settings.
        force: Rebuild the setup even if logging is already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    shutdown_logging()

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    sinks = build_handlers(cfg, level_int)
    if not sinks:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(_tag_handler(QueueHandler(log_queue)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def shutdown_logging() -> None:
    """
    Flush pending records and detach everything ``configure_logging`` installed.

    Safe to call repeatedly. Registered to run at interpreter exit.
    """
    root = logging.getLogger()

    for handler in list(root.handlers):
        if _is_our_handler(handler):
            root.removeHandler(handler)
            handler.close()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    setattr(root, _QUEUE_LISTENER_ATTR, None)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)
    if listener is not None:
        listener.stop()
        for sink in listener.handlers:
            sink.close()


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Resolve a level name, falling back to INFO for unknown names."""
    resolved = logging.getLevelName(str(level or "").strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


atexit.register(shutdown_logging)
