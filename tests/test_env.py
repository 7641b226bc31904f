"""Tests for environment overrides over persisted values."""

from cloudcli_plugin.env import get_from_env_or_config


def test_config_value_used_when_env_unset() -> None:
    assert get_from_env_or_config("CLOUDCLI_TRACE", "cfg", env={}) == "cfg"


def test_env_value_wins_when_set() -> None:
    env = {"CLOUDCLI_TRACE": "env"}
    assert get_from_env_or_config("CLOUDCLI_TRACE", "cfg", env=env) == "env"
    assert get_from_env_or_config("CLOUDCLI_TRACE", "", env=env) == "env"


def test_empty_env_value_falls_back_to_config() -> None:
    assert get_from_env_or_config("CLOUDCLI_TRACE", "cfg", env={"CLOUDCLI_TRACE": ""}) == "cfg"


def test_defaults_to_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("CLOUDCLI_COLOR", "false")
    assert get_from_env_or_config("CLOUDCLI_COLOR", "true") == "false"
    monkeypatch.delenv("CLOUDCLI_COLOR")
    assert get_from_env_or_config("CLOUDCLI_COLOR", "true") == "true"
