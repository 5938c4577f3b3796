"""The hook object a logging host holds on to."""

from __future__ import annotations

import structlog

from loghook.core.config import DiscordHookConfig, HookOptions
from loghook.core.types import LogEvent, Severity
from loghook.hook.dispatcher import WebhookDispatcher
from loghook.hook.levels import level_threshold
from loghook.hook.payload import render_payload

logger = structlog.get_logger(__name__)


class DiscordHook:
    """Renders log events as Discord embeds and posts them to a webhook.

    Usage::

        hook = DiscordHook(DiscordHookConfig(webhook_url=url, min_level="warning"))
        with hook:
            hook.fire(LogEvent(severity=Severity.ERROR, message="disk full"))

    The configuration is read-only for the hook's lifetime, so ``fire`` may be
    called from several threads at once.
    """

    def __init__(
        self,
        config: DiscordHookConfig,
        dispatcher: WebhookDispatcher | None = None,
    ) -> None:
        self._config = config
        self._dispatcher = dispatcher or WebhookDispatcher(
            url=config.webhook_url.get_secret_value(),
            timeout_secs=config.timeout_secs,
            max_workers=config.max_workers,
        )
        logger.debug(
            "discord_hook_created",
            min_level=config.min_level.name,
            asynchronous=config.options.asynchronous,
        )

    @property
    def min_level(self) -> Severity:
        return self._config.min_level

    @property
    def options(self) -> HookOptions:
        return self._config.options

    def levels(self) -> list[Severity]:
        """Severities this hook wants, most severe first."""
        return level_threshold(self._config.min_level)

    def fire(self, event: LogEvent) -> None:
        """Render *event* and deliver it.

        Raises:
            EncodingError: a field value has no JSON representation. Raised
                before any delivery, in both modes.
            DeliveryError: the POST failed. Synchronous mode only; background
                failures are not reported.
        """
        body = render_payload(event, self._config.options)
        self._dispatcher.deliver(body, asynchronous=self._config.options.asynchronous)

    # ── Lifecycle ───────────────────────────────────────────────

    def close(self) -> None:
        self._dispatcher.close()

    def __enter__(self) -> DiscordHook:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
