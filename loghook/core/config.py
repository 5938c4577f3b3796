"""Pydantic settings loaded from YAML configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, SecretStr, field_validator, model_validator

from loghook.core.types import Severity

_settings: Settings | None = None

_DEFAULT_CONFIG_PATH = Path("config/settings.yaml")

# Overrides discord.webhook_url so the secret can stay out of the YAML file.
WEBHOOK_URL_ENV = "LOGHOOK_WEBHOOK_URL"


class LevelColors(BaseModel):
    """Embed colour per severity.

    A custom table is used as given: an unset entry stays 0 and Discord
    renders it as a black bar.
    """

    model_config = ConfigDict(frozen=True)

    trace: int = 0
    debug: int = 0
    info: int = 0
    warning: int = 0
    error: int = 0
    critical: int = 0
    panic: int = 0


DEFAULT_LEVEL_COLORS = LevelColors(
    trace=3092790,      # charcoal
    debug=10170623,     # lavender
    info=3581519,       # green
    warning=14327864,   # amber
    error=13631488,     # red
    critical=13631488,
    panic=13631488,
)


class HookOptions(BaseModel):
    """Rendering and delivery options for the Discord hook."""

    model_config = ConfigDict(frozen=True)

    username: str = ""
    author: str = ""
    asynchronous: bool = False
    disable_inline_fields: bool = False
    use_custom_colors: bool = False
    custom_colors: LevelColors | None = None
    disable_timestamp: bool = False
    timestamp_format: str = ""

    @model_validator(mode="after")
    def _custom_colors_present(self) -> HookOptions:
        if self.use_custom_colors and self.custom_colors is None:
            raise ValueError("use_custom_colors is set but custom_colors is missing")
        return self


class DiscordHookConfig(BaseModel):
    """Webhook destination, threshold, and options for one hook."""

    model_config = ConfigDict(frozen=True)

    webhook_url: SecretStr = SecretStr("")
    min_level: Severity = Severity.DEBUG
    options: HookOptions = HookOptions()
    timeout_secs: float = 10.0
    max_workers: int = 4

    @field_validator("min_level", mode="before")
    @classmethod
    def _parse_level_name(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.isdigit():
            try:
                return Severity[value.upper()]
            except KeyError:
                raise ValueError(f"unknown severity: {value!r}") from None
        return value


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"


class Settings(BaseModel):
    """Root settings container."""

    discord: DiscordHookConfig = DiscordHookConfig()
    logging: LoggingConfig = LoggingConfig()


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file and cache globally.

    Args:
        path: Path to YAML config. Defaults to config/settings.yaml.

    Returns:
        Parsed Settings instance.
    """
    global _settings  # noqa: PLW0603

    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if isinstance(raw, dict):
                data = raw

    env_url = os.environ.get(WEBHOOK_URL_ENV)
    if env_url:
        discord = data.get("discord")
        data["discord"] = {**(discord if isinstance(discord, dict) else {}), "webhook_url": env_url}

    _settings = Settings(**data)
    return _settings


def get_settings() -> Settings:
    """Return the cached settings, loading defaults if not yet loaded."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings  # noqa: PLW0603
    _settings = None
