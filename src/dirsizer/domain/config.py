from __future__ import annotations

"""
Configuration Domain Management.

Holds the default analysis parameters and persists the user's preferred
values as JSON inside the user data directory. Query thresholds remain
plain function arguments; this module only supplies their defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from dirsizer.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"

DEFAULT_SMALL_DIRECTORY_LIMIT = 100_000
DEFAULT_DISK_CAPACITY = 70_000_000
DEFAULT_REQUIRED_FREE_SPACE = 30_000_000


def get_config_file() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": "",
        "tree_output_path": "",

        # Query Thresholds
        "small_directory_limit": DEFAULT_SMALL_DIRECTORY_LIMIT,
        "disk_capacity": DEFAULT_DISK_CAPACITY,
        "required_free_space": DEFAULT_REQUIRED_FREE_SPACE,

        # Presentation
        "show_tree": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the stored configuration merged over the defaults.

    Unknown keys are dropped. A missing or corrupted file yields defaults.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config = get_default_config()
    config_file = get_config_file()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    stored = data.get("settings", {})
    if not isinstance(stored, dict):
        logger.warning("Config file has no usable 'settings' section. Using defaults.")
        return config

    for key in config:
        if key in stored:
            config[key] = stored[key]
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the provided configuration.

    Args:
        config: The configuration to save.
    """
    config_file = get_config_file()
    defaults = get_default_config()
    state = {
        "version": CURRENT_CONFIG_VERSION,
        "settings": {k: config.get(k, v) for k, v in defaults.items()},
    }
    try:
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
