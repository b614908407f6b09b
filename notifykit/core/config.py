"""
notifykit configuration — loads and merges config from multiple sources.

Precedence (highest to lowest):
1. Explicit overrides (passed in code or from CLI flags)
2. Environment variables (NOTIFYKIT_*)
3. Project config (./notifykit.toml)
4. User config (~/.notifykit/config.toml)
5. Defaults (hardcoded)

Environment variable mapping:
    NOTIFYKIT_EMAIL_ADDRESS → email.address
    NOTIFYKIT_SMS_PHONE_NUMBER → sms.phone_number
    NOTIFYKIT_POPUP_ENABLED → popup.enabled
    NOTIFYKIT_SIGNATURE → content.signature
"""

from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from notifykit.core.errors import ConfigError

ENV_MAPPING: dict[str, tuple[str, str]] = {
    "NOTIFYKIT_LOG_LEVEL": ("logging", "level"),
    "NOTIFYKIT_LOG_DIR": ("logging", "log_dir"),
    "NOTIFYKIT_LOG_NOTIFICATIONS": ("logging", "log_notifications"),
    "NOTIFYKIT_TIMESTAMP_FORMAT": ("content", "timestamp_format"),
    "NOTIFYKIT_SIGNATURE": ("content", "signature"),
    "NOTIFYKIT_EMAIL_ADDRESS": ("email", "address"),
    "NOTIFYKIT_SMS_PHONE_NUMBER": ("sms", "phone_number"),
    "NOTIFYKIT_POPUP_ENABLED": ("popup", "enabled"),
    "NOTIFYKIT_ISOLATE_FAILURES": ("delivery", "isolate_failures"),
}

# Destinations and free text stay strings ("+919876543210" is not an int)
_RAW_ENV_KEYS = {
    "NOTIFYKIT_LOG_LEVEL",
    "NOTIFYKIT_LOG_DIR",
    "NOTIFYKIT_TIMESTAMP_FORMAT",
    "NOTIFYKIT_SIGNATURE",
    "NOTIFYKIT_EMAIL_ADDRESS",
    "NOTIFYKIT_SMS_PHONE_NUMBER",
}
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Config Sub-Models
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class LoggingConfig(BaseModel):
    """Diagnostic logging and the notification log subscriber."""

    level: str = "WARNING"
    log_dir: str | None = None
    log_notifications: bool = True


class ContentConfig(BaseModel):
    """Defaults applied when composing notification content."""

    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    signature: str = ""


class EmailConfig(BaseModel):
    """Simulated email channel."""

    address: str = ""

    @property
    def configured(self) -> bool:
        return bool(self.address.strip())


class SmsConfig(BaseModel):
    """Simulated SMS channel."""

    phone_number: str = ""

    @property
    def configured(self) -> bool:
        return bool(self.phone_number.strip())


class PopupConfig(BaseModel):
    """On-screen popup channel."""

    enabled: bool = False


class DeliveryConfig(BaseModel):
    """Fan-out failure policy."""

    isolate_failures: bool = False


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Main Config
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class NotifyConfig(BaseModel):
    """Root configuration for notifykit."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    email: EmailConfig = Field(default_factory=EmailConfig)
    sms: SmsConfig = Field(default_factory=SmsConfig)
    popup: PopupConfig = Field(default_factory=PopupConfig)
    delivery: DeliveryConfig = Field(default_factory=DeliveryConfig)

    @staticmethod
    def load(
        overrides: dict[str, Any] | None = None,
        project_path: Path | None = None,
        user_path: Path | None = None,
    ) -> NotifyConfig:
        """
        Load configuration from all sources and merge.

        Precedence: overrides > env vars > project toml > user toml > defaults
        """
        merged: dict[str, Any] = {}

        # Layer 1: User config (~/.notifykit/config.toml)
        user_config_path = user_path or get_notifykit_home() / "config.toml"
        if user_config_path.exists():
            _deep_merge(merged, _load_toml(user_config_path))

        # Layer 2: Project config (./notifykit.toml)
        project_config_path = project_path or Path.cwd() / "notifykit.toml"
        if project_config_path.exists():
            _deep_merge(merged, _load_toml(project_config_path))

        # Layer 3: Environment variables
        _deep_merge(merged, _load_from_env())

        # Layer 4: Explicit overrides
        if overrides:
            _deep_merge(merged, overrides)

        _substitute_env_vars(merged)

        try:
            return NotifyConfig(**merged)
        except Exception as e:
            raise ConfigError(f"Invalid configuration: {e}") from e


def get_notifykit_home() -> Path:
    """Get the notifykit home directory (~/.notifykit)."""
    return Path.home() / ".notifykit"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Internal Helpers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def _load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML file."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except Exception as e:
        raise ConfigError(f"Failed to load config from {path}: {e}") from e


def _load_from_env() -> dict[str, Any]:
    """Load configuration from NOTIFYKIT_* environment variables."""
    result: dict[str, Any] = {}

    for env_var, (section, key) in ENV_MAPPING.items():
        value = os.environ.get(env_var)
        if value is not None:
            if section not in result:
                result[section] = {}
            result[section][key] = value if env_var in _RAW_ENV_KEYS else _convert_value(value)

    return result


def _convert_value(value: str) -> Any:
    """Convert string value to appropriate type."""
    if value.lower() in ("true", "yes", "1"):
        return True
    if value.lower() in ("false", "no", "0"):
        return False
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


def _deep_merge(base: dict, override: dict) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def _substitute_env_vars(data: dict) -> None:
    """Recursively substitute ${ENV_VAR} patterns in string values."""
    pattern = re.compile(r"\$\{([^}]+)\}")

    def _sub(value: str) -> str:
        for var_name in pattern.findall(value):
            value = value.replace(f"${{{var_name}}}", os.environ.get(var_name, ""))
        return value

    for key, value in data.items():
        if isinstance(value, dict):
            _substitute_env_vars(value)
        elif isinstance(value, str):
            data[key] = _sub(value)
        elif isinstance(value, list):
            data[key] = [_sub(item) if isinstance(item, str) else item for item in value]
