from __future__ import annotations

"""
Configuration Domain Management.

Session configuration is a plain dict persisted as JSON in the user data
directory. It carries input location settings, logging settings and the
numeric parameters of the puzzles (disk sizes, rounds, knot counts...).
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from aoc2022.infra.fs import get_config_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_INPUTS_DIR = "inputs"
DEFAULT_INPUT_TEMPLATE = "day{day:02d}.txt"

# Puzzle parameters exposed through the configuration
PUZZLE_DEFAULTS: Dict[str, int] = {
    "directory_size_limit": 100_000,
    "disk_total_space": 70_000_000,
    "disk_required_space": 30_000_000,
    "packet_marker_size": 4,
    "message_marker_size": 14,
    "rope_knots_short": 2,
    "rope_knots_long": 10,
    "monkey_rounds_short": 20,
    "monkey_rounds_long": 10_000,
    "monkey_relief": 3,
}


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    cfg: Dict[str, Any] = {
        # Input location
        "inputs_dir": DEFAULT_INPUTS_DIR,
        "input_template": DEFAULT_INPUT_TEMPLATE,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }
    cfg.update(PUZZLE_DEFAULTS)
    return cfg


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    A missing file is not an error. An unreadable or malformed file is
    logged and ignored.

    Args:
        path: Explicit config file; defaults to the user data directory.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config_path = path or get_config_path()
    cfg = get_default_config()

    if not os.path.exists(config_path):
        logger.debug(f"No configuration file at {config_path}; using defaults.")
        return cfg

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Ignoring unreadable configuration file '{config_path}': {e}")
        return cfg

    if not isinstance(data, dict):
        logger.warning(f"Ignoring configuration file '{config_path}': top level is not an object.")
        return cfg

    cfg.update(data)
    logger.debug(f"Configuration loaded from {config_path}")
    return cfg


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> str:
    """
    Persist the configuration as pretty-printed JSON.

    Args:
        config: Configuration dictionary to store.
        path: Explicit target file; defaults to the user data directory.

    Returns:
        str: The path that was written.
    """
    config_path = path or get_config_path()
    os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2, ensure_ascii=False)
    logger.info(f"Configuration saved to {config_path}")
    return config_path
