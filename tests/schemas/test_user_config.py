"""Tests for UserConfig normalization and CLIConfig overrides."""

import pytest
from pydantic import ValidationError

from signgrid.schemas import CLIConfig, ParamConfig, UserConfig

pytestmark = pytest.mark.unit


def test_uppercase_and_lowercase_keys():
    upper = UserConfig.model_validate({"ROWS": 4, "USE_COLORS": True})
    lower = UserConfig.model_validate({"rows": 4, "use_colors": True})

    assert upper.to_internal_overrides() == lower.to_internal_overrides()


def test_unknown_keys_ignored():
    user = UserConfig.model_validate({"ROWS": 2, "THEME": "dark"})
    assert user.to_internal_overrides() == {"generator": {"rows": 2}}


def test_log_level_case_insensitive():
    assert UserConfig(LOG_LEVEL=" debug ").log_level == "DEBUG"


def test_nested_section_wins_over_flat_keys():
    user = UserConfig(ROWS=2, generator={"rows": 8, "seed": 1})
    assert user.to_internal_overrides() == {"generator": {"rows": 8, "seed": 1}}


def test_empty_user_config_has_no_overrides():
    assert UserConfig().to_internal_overrides() == {}


def test_cli_overrides():
    cli = CLIConfig(rows=5, max_value=9, use_colors=False, log_level="DEBUG")

    assert cli.to_internal_overrides() == {
        "generator": {"rows": 5, "max_value": 9},
        "renderer": {"use_colors": False},
        "logging": {"level": "DEBUG"},
    }


def test_cli_empty():
    assert CLIConfig().to_internal_overrides() == {}


def test_cli_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        CLIConfig(theme="dark")


def test_param_rejects_zero_rows():
    with pytest.raises(ValidationError):
        ParamConfig(generator={"rows": 0})
