"""Discord webhook hook — thresholds, rendering, delivery, logging adapter."""

from loghook.hook.dispatcher import WebhookDispatcher
from loghook.hook.exceptions import DeliveryError, EncodingError, HookError
from loghook.hook.factory import create_hook, install_handler
from loghook.hook.handler import DiscordHandler
from loghook.hook.hook import DiscordHook
from loghook.hook.levels import level_color, level_threshold, resolve_colors
from loghook.hook.payload import build_payload, encode_payload, render_payload

__all__ = [
    "DeliveryError",
    "DiscordHandler",
    "DiscordHook",
    "EncodingError",
    "HookError",
    "WebhookDispatcher",
    "build_payload",
    "create_hook",
    "encode_payload",
    "install_handler",
    "level_color",
    "level_threshold",
    "render_payload",
    "resolve_colors",
]
