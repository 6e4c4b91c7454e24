from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies type coercion in lenient mode, errors in strict mode and the
inference of the output format from the output file name.
"""

import pytest

from sizetree.core.pipeline.validator import validate_config


def test_valid_config_passes_without_warnings(mock_config_dict) -> None:
    clean, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert clean == mock_config_dict


def test_non_dict_config_uses_defaults() -> None:
    clean, warnings = validate_config("not a dict")

    assert clean["max_depth"] == 5
    assert any("Invalid config type" in w for w in warnings)


def test_non_dict_config_strict_raises() -> None:
    with pytest.raises(TypeError):
        validate_config(None, strict=True)


def test_depth_string_is_coerced(mock_config_dict) -> None:
    mock_config_dict["max_depth"] = " 7 "
    clean, warnings = validate_config(mock_config_dict)

    assert clean["max_depth"] == 7
    assert len(warnings) == 1


@pytest.mark.parametrize("bad", [-1, "deep", True, 2.5])
def test_invalid_depth_falls_back(mock_config_dict, bad) -> None:
    mock_config_dict["max_depth"] = bad
    clean, warnings = validate_config(mock_config_dict)

    assert clean["max_depth"] == 5
    assert warnings


def test_negative_depth_strict_raises(mock_config_dict) -> None:
    mock_config_dict["max_depth"] = -3
    with pytest.raises(ValueError):
        validate_config(mock_config_dict, strict=True)


def test_zero_depth_is_valid(mock_config_dict) -> None:
    mock_config_dict["max_depth"] = 0
    clean, warnings = validate_config(mock_config_dict)

    assert clean["max_depth"] == 0
    assert warnings == []


def test_bool_coercion(mock_config_dict) -> None:
    mock_config_dict["print_tree"] = "yes"
    mock_config_dict["save_error_log"] = 0
    clean, warnings = validate_config(mock_config_dict)

    assert clean["print_tree"] is True
    assert clean["save_error_log"] is False
    assert len(warnings) == 2


def test_empty_string_falls_back_to_default(mock_config_dict) -> None:
    mock_config_dict["output_path"] = "   "
    clean, _ = validate_config(mock_config_dict)

    assert clean["output_path"] == "output.yaml"


def test_format_inferred_from_output_path() -> None:
    clean, _ = validate_config({"output_path": "sizes.json"})
    assert clean["output_format"] == "json"


def test_explicit_format_wins_over_extension() -> None:
    clean, _ = validate_config({"output_path": "sizes.json", "output_format": "YAML"})
    assert clean["output_format"] == "yaml"


def test_unknown_format_falls_back(mock_config_dict) -> None:
    mock_config_dict["output_format"] = "xml"
    clean, warnings = validate_config(mock_config_dict)

    assert clean["output_format"] == "yaml"
    assert any("output_format" in w for w in warnings)


def test_unknown_format_strict_raises(mock_config_dict) -> None:
    mock_config_dict["output_format"] = "xml"
    with pytest.raises(ValueError):
        validate_config(mock_config_dict, strict=True)
