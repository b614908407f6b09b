"""Tests for the Config system."""

import pytest
from pathlib import Path

from notifykit.core.config import (
    NotifyConfig,
    _convert_value,
    _deep_merge,
    _substitute_env_vars,
)
from notifykit.core.errors import ConfigError


@pytest.fixture
def no_files(tmp_path):
    """Paths that do not exist, so only env + overrides apply."""
    return {
        "project_path": tmp_path / "missing.toml",
        "user_path": tmp_path / "missing-user.toml",
    }


def test_default_config():
    """Default config has sensible values."""
    config = NotifyConfig()

    assert config.logging.level == "WARNING"
    assert config.logging.log_notifications is True
    assert config.content.timestamp_format == "%Y-%m-%d %H:%M:%S"
    assert config.email.configured is False
    assert config.sms.configured is False
    assert config.popup.enabled is False
    assert config.delivery.isolate_failures is False


def test_load_with_overrides(no_files):
    """Explicit overrides take highest precedence."""
    config = NotifyConfig.load(
        overrides={"email": {"address": "a@b.com"}, "popup": {"enabled": True}},
        **no_files,
    )

    assert config.email.address == "a@b.com"
    assert config.email.configured is True
    assert config.popup.enabled is True
    assert config.sms.phone_number == ""


def test_env_var_loading(monkeypatch, no_files):
    """NOTIFYKIT_* environment variables are loaded."""
    monkeypatch.setenv("NOTIFYKIT_SMS_PHONE_NUMBER", "+919876543210")
    monkeypatch.setenv("NOTIFYKIT_POPUP_ENABLED", "yes")
    monkeypatch.setenv("NOTIFYKIT_SIGNATURE", "Customer Care")

    config = NotifyConfig.load(**no_files)

    # Phone numbers stay strings, never coerced to int
    assert config.sms.phone_number == "+919876543210"
    assert config.popup.enabled is True
    assert config.content.signature == "Customer Care"


def test_file_precedence(tmp_path, monkeypatch):
    """Project file beats user file; env beats both; overrides beat env."""
    user = tmp_path / "user.toml"
    user.write_text('[email]\naddress = "user@example.com"\n[sms]\nphone_number = "111"\n')
    project = tmp_path / "project.toml"
    project.write_text('[email]\naddress = "project@example.com"\n')

    config = NotifyConfig.load(project_path=project, user_path=user)
    assert config.email.address == "project@example.com"
    assert config.sms.phone_number == "111"

    monkeypatch.setenv("NOTIFYKIT_EMAIL_ADDRESS", "env@example.com")
    config = NotifyConfig.load(project_path=project, user_path=user)
    assert config.email.address == "env@example.com"

    config = NotifyConfig.load(
        overrides={"email": {"address": "cli@example.com"}},
        project_path=project,
        user_path=user,
    )
    assert config.email.address == "cli@example.com"


def test_broken_toml_raises(tmp_path):
    bad = tmp_path / "bad.toml"
    bad.write_text("[email\naddress = ")
    with pytest.raises(ConfigError):
        NotifyConfig.load(project_path=bad, user_path=tmp_path / "none.toml")


def test_invalid_values_raise(no_files):
    with pytest.raises(ConfigError):
        NotifyConfig.load(overrides={"popup": {"enabled": "definitely"}}, **no_files)


def test_env_var_substitution(monkeypatch):
    """${VAR} in config values gets replaced with env var values."""
    monkeypatch.setenv("MY_ADDR", "me@example.com")
    data = {"email": {"address": "${MY_ADDR}"}, "list": ["${MY_ADDR}", 3]}
    _substitute_env_vars(data)
    assert data["email"]["address"] == "me@example.com"
    assert data["list"] == ["me@example.com", 3]


def test_env_var_substitution_missing_is_empty(monkeypatch):
    monkeypatch.delenv("NOTIFYKIT_TEST_UNSET", raising=False)
    data = {"key": "x${NOTIFYKIT_TEST_UNSET}y"}
    _substitute_env_vars(data)
    assert data["key"] == "xy"


def test_deep_merge():
    base = {"a": {"b": 1, "c": 2}, "d": 3}
    _deep_merge(base, {"a": {"b": 10}, "e": 5})
    assert base == {"a": {"b": 10, "c": 2}, "d": 3, "e": 5}


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("No", False), ("42", 42), ("1.5", 1.5), ("hello", "hello")],
)
def test_convert_value(raw, expected):
    assert _convert_value(raw) == expected


def test_numeric_log_level_env_stays_string(monkeypatch, no_files):
    """setup_logging() parses "10" itself; the loader must not coerce it."""
    monkeypatch.setenv("NOTIFYKIT_LOG_LEVEL", "10")
    assert NotifyConfig.load(**no_files).logging.level == "10"
