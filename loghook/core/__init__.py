"""Core module — config, types, logging."""

from loghook.core.config import (
    DEFAULT_LEVEL_COLORS,
    DiscordHookConfig,
    HookOptions,
    LevelColors,
    Settings,
    get_settings,
    load_settings,
    reset_settings,
)
from loghook.core.logging import setup_logging
from loghook.core.types import ALL_LEVELS, LogEvent, Severity

__all__ = [
    "ALL_LEVELS",
    "DEFAULT_LEVEL_COLORS",
    "DiscordHookConfig",
    "HookOptions",
    "LevelColors",
    "LogEvent",
    "Settings",
    "Severity",
    "get_settings",
    "load_settings",
    "reset_settings",
    "setup_logging",
]
