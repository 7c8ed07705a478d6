from __future__ import annotations

from argflags import Args
from argflags.config import FlagsConfig, get_runtime_config, reload_config


def test_defaults_without_environment() -> None:
    config = FlagsConfig.from_env({})
    assert config == FlagsConfig()
    assert config.numeric_mode == "strict"
    assert config.end_of_options is True
    assert config.log_level == "WARNING"


def test_environment_values_are_read() -> None:
    config = FlagsConfig.from_env(
        {
            "ARGFLAGS_NUMERIC_MODE": " Prefix ",
            "ARGFLAGS_END_OF_OPTIONS": "no",
            "ARGFLAGS_LOG_LEVEL": "debug",
        }
    )
    assert config.numeric_mode == "prefix"
    assert config.end_of_options is False
    assert config.log_level == "DEBUG"


def test_unknown_numeric_mode_falls_back_to_strict() -> None:
    assert FlagsConfig.from_env({"ARGFLAGS_NUMERIC_MODE": "fuzzy"}).numeric_mode == "strict"


def test_separator_setting_uses_falsities() -> None:
    assert FlagsConfig.from_env({"ARGFLAGS_END_OF_OPTIONS": "0"}).end_of_options is False
    assert FlagsConfig.from_env({"ARGFLAGS_END_OF_OPTIONS": "yes"}).end_of_options is True


def test_runtime_config_is_cached_until_reload(monkeypatch) -> None:
    first = get_runtime_config()
    monkeypatch.setenv("ARGFLAGS_NUMERIC_MODE", "prefix")
    assert get_runtime_config() is first
    assert reload_config().numeric_mode == "prefix"
    assert Args(["--n", "5kg"]).get("n", int) == 5


def test_explicit_arguments_override_environment(monkeypatch) -> None:
    monkeypatch.setenv("ARGFLAGS_NUMERIC_MODE", "prefix")
    monkeypatch.setenv("ARGFLAGS_END_OF_OPTIONS", "false")
    reload_config()
    args = Args(["--n", "5kg", "--", "x"], numeric_mode="strict", end_of_options=True)
    assert args.get("n", int) is None
    assert args.skipped() == ["x"]
