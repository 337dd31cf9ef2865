from __future__ import annotations

"""
Unit tests for the configuration validator.

Verifies:
1. Defaults for missing keys.
2. Type coercion and warnings in non-strict mode.
3. Exceptions in strict mode.
"""

import pytest

from aoc2022.core.validator import validate_config
from aoc2022.domain.config import PUZZLE_DEFAULTS, get_default_config


def test_empty_config_yields_defaults() -> None:
    clean, warnings = validate_config({})
    assert clean == get_default_config()
    assert warnings == []


def test_non_dict_config_falls_back_to_defaults() -> None:
    clean, warnings = validate_config(["not", "a", "dict"])
    assert clean == get_default_config()
    assert len(warnings) == 1


def test_non_dict_config_strict() -> None:
    with pytest.raises(TypeError):
        validate_config("oops", strict=True)


def test_numeric_strings_are_coerced() -> None:
    clean, warnings = validate_config({"monkey_rounds_long": "1_000", "rope_knots_long": " 4 "})
    assert clean["monkey_rounds_long"] == 1000
    assert clean["rope_knots_long"] == 4
    assert warnings == []


@pytest.mark.parametrize("value", [0, -5, "abc", True, None])
def test_invalid_puzzle_values_fall_back(value) -> None:
    clean, warnings = validate_config({"monkey_relief": value})
    assert clean["monkey_relief"] == PUZZLE_DEFAULTS["monkey_relief"]
    assert warnings


@pytest.mark.parametrize("value, exc_type", [(0, ValueError), ("abc", TypeError), (False, TypeError)])
def test_invalid_puzzle_values_strict(value, exc_type) -> None:
    with pytest.raises(exc_type):
        validate_config({"disk_total_space": value}, strict=True)


def test_log_level_is_normalised() -> None:
    clean, _ = validate_config({"log_level": " debug "})
    assert clean["log_level"] == "DEBUG"

    clean, warnings = validate_config({"log_level": "LOUD"})
    assert clean["log_level"] == "INFO"
    assert warnings


def test_template_without_day_field() -> None:
    clean, warnings = validate_config({"input_template": "input.txt"})
    assert clean["input_template"] == get_default_config()["input_template"]
    assert warnings


def test_non_string_field_is_stringified() -> None:
    clean, warnings = validate_config({"inputs_dir": 42})
    assert clean["inputs_dir"] == "42"
    assert warnings


def test_unknown_keys_are_dropped() -> None:
    clean, warnings = validate_config({"color": "blue"})
    assert "color" not in clean
    assert any("color" in w for w in warnings)


@pytest.mark.parametrize("template", ["{day}{x}.txt", "{day:q}.txt", "day{day}{0}.txt", "{day.real.x}.txt"])
def test_unformattable_template_falls_back(template: str) -> None:
    clean, warnings = validate_config({"input_template": template})
    assert clean["input_template"] == get_default_config()["input_template"]
    assert any("cannot be formatted" in w for w in warnings)


def test_unformattable_template_strict() -> None:
    with pytest.raises(ValueError, match="cannot be formatted"):
        validate_config({"input_template": "{day}{x}.txt"}, strict=True)


def test_format_spec_on_day_is_kept() -> None:
    clean, warnings = validate_config({"input_template": "day{day:02d}.txt"})
    assert clean["input_template"] == "day{day:02d}.txt"
    assert not warnings
