"""Convenience factory for wiring a hook into logging."""

from __future__ import annotations

import logging

from loghook.core.config import DiscordHookConfig
from loghook.hook.handler import DiscordHandler
from loghook.hook.hook import DiscordHook


def create_hook(config: DiscordHookConfig) -> DiscordHook:
    """Build a DiscordHook from config.

    Raises:
        ValueError: no webhook URL is configured.
    """
    if not config.webhook_url.get_secret_value():
        raise ValueError("discord.webhook_url is not configured")
    return DiscordHook(config)


def install_handler(
    hook: DiscordHook,
    logger: logging.Logger | None = None,
) -> DiscordHandler:
    """Attach a DiscordHandler for *hook* to *logger* (root by default)."""
    handler = DiscordHandler(hook)
    (logger or logging.getLogger()).addHandler(handler)
    return handler
