from __future__ import annotations

"""
Puzzle Input Reading.

Input files are read once, whole, before any parsing starts. Paths come
either from the caller or from the configured inputs directory and file
name template.
"""

import logging
import os
from typing import Any, Dict

from aoc2022.domain.config import DEFAULT_INPUT_TEMPLATE, DEFAULT_INPUTS_DIR
from aoc2022.infra.fs import normalize_path

logger = logging.getLogger(__name__)


def resolve_input_path(day: int, config: Dict[str, Any]) -> str:
    """
    Build the default input path for a day, e.g. `inputs/day07.txt`.

    Args:
        day: Puzzle day.
        config: Configuration providing `inputs_dir` and `input_template`.

    Returns:
        str: Absolute path (not checked for existence).
    """
    inputs_dir = normalize_path(config.get("inputs_dir", ""), DEFAULT_INPUTS_DIR)
    template = config.get("input_template") or DEFAULT_INPUT_TEMPLATE
    return os.path.join(inputs_dir, template.format(day=day))


def read_input(path: str) -> str:
    """
    Read a whole input file as text.

    Raises:
        OSError: The file cannot be read.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    logger.debug(f"Read {len(content)} characters from {path}")
    return content
