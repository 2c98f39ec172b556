from __future__ import annotations

"""
Unit tests for the Configuration Validator.

Verifies:
1. Missing keys are filled with defaults.
2. Loose types are coerced with a warning (non-strict mode).
3. Strict mode raises on type mismatch.
4. Unknown keys are discarded.
"""

import pytest

from sanefilenames.core.services.validator import validate_config
from sanefilenames.domain.config import get_default_config


def test_validate_config_fills_defaults() -> None:
    clean, warnings = validate_config({"confirm": True})

    assert clean == {**get_default_config(), "confirm": True}
    assert warnings == []


def test_validate_config_rejects_non_dict() -> None:
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean == get_default_config()
    assert len(warnings) == 1


@pytest.mark.parametrize("raw, expected", [("yes", True), ("off", False), (1, True), (0, False)])
def test_validate_config_coerces_booleans(raw, expected) -> None:
    clean, warnings = validate_config({"rename_directories": raw})

    assert clean["rename_directories"] is expected
    assert len(warnings) == 1


def test_validate_config_falls_back_on_garbage() -> None:
    clean, warnings = validate_config({"dry_run": [1, 2], "log_file": 42})

    assert clean["dry_run"] is False
    assert clean["log_file"] == ""
    assert len(warnings) == 2


def test_validate_config_strict_mode_raises() -> None:
    with pytest.raises(TypeError):
        validate_config({"confirm": "yes"}, strict=True)


def test_validate_config_discards_unknown_keys() -> None:
    clean, warnings = validate_config({"colour": "blue"})

    assert "colour" not in clean
    assert any("colour" in w for w in warnings)


def test_validate_config_strips_strings() -> None:
    clean, _ = validate_config({"log_file": "  /tmp/run.log  "})
    assert clean["log_file"] == "/tmp/run.log"
