from __future__ import annotations

"""
Configuration Domain Management.

Defines the default scan session and persists user preferences as JSON in
the application data directory.
"""

import json
import logging
import os
from typing import Any, Dict

from sizetree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_MAX_DEPTH = 5
DEFAULT_OUTPUT_PATH = "output.yaml"
DEFAULT_OUTPUT_FORMAT = "yaml"
DEFAULT_ERROR_LOG_PATH = "sizetree_errors.txt"


def get_config_file() -> str:
    """Return the path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default scan session configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Scan target
        "input_path": os.getcwd(),
        "max_depth": DEFAULT_MAX_DEPTH,

        # Output
        "output_path": DEFAULT_OUTPUT_PATH,
        "output_format": DEFAULT_OUTPUT_FORMAT,
        "print_tree": False,

        # Diagnostics
        "save_error_log": False,
        "error_log_path": DEFAULT_ERROR_LOG_PATH,
    }


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the full persisted state structure.

    Returns:
        Dict[str, Any]: The JSON structure stored in config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load the persisted state, falling back to defaults.

    Unknown top-level keys are dropped and missing session keys are filled
    from the defaults.

    Returns:
        Dict[str, Any]: The loaded state or the default structure.
    """
    state = get_default_app_state()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(session)

    return state


def save_app_state(state: Dict[str, Any]) -> bool:
    """
    Persist the application state to disk.

    Args:
        state: The state dictionary to save.

    Returns:
        bool: True if the file was written.
    """
    config_file = get_config_file()
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        state["version"] = CURRENT_CONFIG_VERSION
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_file}")
    return True


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Return the last saved session merged over the defaults."""
    return dict(load_app_state()["last_session"])


def save_config(config: Dict[str, Any]) -> bool:
    """Save the given config as the last session."""
    state = load_app_state()
    state["last_session"] = dict(config)
    return save_app_state(state)
