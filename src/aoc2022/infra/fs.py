from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Cross-platform resolution of the per-user data directory (where the JSON
configuration lives) and path normalisation helpers.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "aoc2022"
UNIX_APP_DIR_NAME = ".aoc2022"
CONFIG_FILE_NAME = "config.json"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/aoc2022
    - Linux/Mac: ~/.aoc2022

    The directory is not created here; writers create it on demand.

    Returns:
        str: Absolute path to the application data directory.
    """
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            return os.path.join(base, APP_DIR_NAME)

    return os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)


def get_config_path() -> str:
    """Return the default location of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def normalize_path(path: str, fallback: str) -> str:
    """
    Expand user markers and make a path absolute.

    Args:
        path: Raw path, possibly empty or relative.
        fallback: Path used when `path` is empty.

    Returns:
        str: Absolute, normalised path.
    """
    raw = path.strip() if path else ""
    if not raw:
        raw = fallback
    return os.path.abspath(os.path.expanduser(raw))
