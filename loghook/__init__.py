"""loghook — forward Python log records to a Discord webhook."""

from loghook.core.types import ALL_LEVELS, LogEvent, Severity
from loghook.hook.exceptions import DeliveryError, EncodingError, HookError
from loghook.hook.factory import create_hook, install_handler
from loghook.hook.handler import DiscordHandler
from loghook.hook.hook import DiscordHook

__all__ = [
    "ALL_LEVELS",
    "DeliveryError",
    "DiscordHandler",
    "DiscordHook",
    "EncodingError",
    "HookError",
    "LogEvent",
    "Severity",
    "create_hook",
    "install_handler",
]
