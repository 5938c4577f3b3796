"""Adapter that plugs a DiscordHook into the stdlib ``logging`` module."""

from __future__ import annotations

import logging
import threading

from loghook.core.types import LogEvent
from loghook.hook.dispatcher import SEND_THREAD_PREFIX
from loghook.hook.hook import DiscordHook

# Records from the hook's own loggers are never forwarded.
_OWN_LOGGER_PREFIX = "loghook"


class DiscordHandler(logging.Handler):
    """A ``logging.Handler`` that forwards qualifying records to Discord.

    Encoding and delivery failures are routed to ``handleError`` so the
    logging framework decides how to report them.

    Records produced while a notification is being sent are dropped: those
    logged on the calling thread during ``fire`` (e.g. httpx's request log)
    and anything logged on the background send threads.
    """

    def __init__(self, hook: DiscordHook) -> None:
        super().__init__(level=hook.min_level)
        self.hook = hook
        self._local = threading.local()

    def _is_own(self, record: logging.LogRecord) -> bool:
        if record.name == _OWN_LOGGER_PREFIX or record.name.startswith(
            _OWN_LOGGER_PREFIX + "."
        ):
            return True
        return (record.threadName or "").startswith(SEND_THREAD_PREFIX)

    def emit(self, record: logging.LogRecord) -> None:
        if getattr(self._local, "firing", False) or self._is_own(record):
            return
        self._local.firing = True
        try:
            event = LogEvent.from_record(record)
            if event.severity not in self.hook.levels():
                return
            self.hook.fire(event)
        except Exception:
            self.handleError(record)
        finally:
            self._local.firing = False

    def close(self) -> None:
        try:
            self.hook.close()
        finally:
            super().close()
