from __future__ import annotations

"""
Configuration Validation Service.

Normalises the configuration dictionary before it reaches the runner:
fills missing keys with defaults, coerces types and rejects non-positive
puzzle parameters. In non-strict mode every problem becomes a warning and
the default value is used instead.
"""

import logging
from typing import Any, Dict, List, Tuple

from aoc2022.domain.config import PUZZLE_DEFAULTS, get_default_config
from aoc2022.infra.logging import LEVEL_NAMES

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["inputs_dir", "input_template", "log_level", "log_file"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalise a configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on the first problem instead of warning.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalised configuration and
        the list of warnings.

    Raises:
        TypeError: Strict mode and a value has the wrong type.
        ValueError: Strict mode and a value is out of range.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for key in _STRING_FIELDS:
        value = merged.get(key)
        if value is None:
            merged[key] = defaults[key]
        elif not isinstance(value, str):
            _report(warnings, strict, TypeError, f"'{key}' must be a string, got {type(value).__name__}.")
            merged[key] = str(value)

    level = merged["log_level"].strip().upper()
    if level not in LEVEL_NAMES:
        _report(warnings, strict, ValueError, f"Unknown log level '{merged['log_level']}', using INFO.")
        level = "INFO"
    merged["log_level"] = level

    template_problem = _check_template(merged["input_template"])
    if template_problem:
        _report(warnings, strict, ValueError, f"'input_template' {template_problem}: '{merged['input_template']}'.")
        merged["input_template"] = defaults["input_template"]

    for key, default in PUZZLE_DEFAULTS.items():
        merged[key] = _coerce_positive_int(key, merged.get(key), default, warnings, strict)

    unknown = sorted(set(merged) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown configuration key '{key}' ignored.")
        del merged[key]

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _report(warnings: List[str], strict: bool, exc_type: type, msg: str) -> None:
    if strict:
        raise exc_type(msg)
    warnings.append(msg)


def _check_template(template: str) -> str:
    """Return a description of what is wrong with a file name template, or ''."""
    if "{day" not in template:
        return "has no {day} field"
    try:
        template.format(day=1)
    except (KeyError, IndexError, AttributeError, TypeError, ValueError) as e:
        return f"cannot be formatted ({type(e).__name__}: {e})"
    return ""


def _coerce_positive_int(key: str, value: Any, default: int, warnings: List[str], strict: bool) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        _report(warnings, strict, TypeError, f"'{key}' must be an integer, got bool.")
        return default

    if not isinstance(value, int):
        try:
            value = int(str(value).replace("_", "").strip())
        except ValueError:
            _report(warnings, strict, TypeError, f"'{key}' must be an integer, got {value!r}.")
            return default

    if value <= 0:
        _report(warnings, strict, ValueError, f"'{key}' must be positive, got {value}.")
        return default
    return value
