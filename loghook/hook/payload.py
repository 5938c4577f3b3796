"""Pure functions that render a LogEvent into a Discord webhook body."""

from __future__ import annotations

import dataclasses
import json
from datetime import date, datetime
from typing import Any

from pydantic import BaseModel

from loghook.core.config import HookOptions
from loghook.core.types import LogEvent
from loghook.hook.exceptions import EncodingError
from loghook.hook.levels import level_color, resolve_colors

CONTENT_TYPE = "application/json; charset=utf-8"


# ── Builders ────────────────────────────────────────────────────


def build_payload(event: LogEvent, options: HookOptions) -> dict[str, Any]:
    """Assemble the webhook object for *event*.

    Optional keys (``username``, ``author``, ``footer``) are present only when
    the corresponding option enables them. Field order follows the event's
    field mapping.
    """
    embed: dict[str, Any] = {
        "title": event.severity.name.upper(),
        "description": event.message,
        "color": level_color(resolve_colors(options), event.severity),
    }

    if options.author:
        embed["author"] = {"name": options.author}

    if not options.disable_timestamp:
        embed["footer"] = {"text": format_timestamp(event.time, options.timestamp_format)}

    inline = not options.disable_inline_fields
    embed["fields"] = [
        {"name": name, "value": value, "inline": inline}
        for name, value in event.fields.items()
    ]

    payload: dict[str, Any] = {"embeds": [embed]}
    if options.username:
        payload["username"] = options.username
    return payload


def format_timestamp(when: datetime, fmt: str = "") -> str:
    """Footer text: *when* formatted with *fmt*, or ``str(when)`` if unset."""
    if fmt:
        return when.strftime(fmt)
    return str(when)


# ── Encoding ────────────────────────────────────────────────────


def _structural(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_payload(payload: dict[str, Any]) -> bytes:
    """Serialize *payload* to UTF-8 JSON.

    Raises:
        EncodingError: a value has no JSON representation (unsupported type,
            NaN or infinity, unsupported mapping key).
    """
    try:
        text = json.dumps(
            payload,
            ensure_ascii=False,
            allow_nan=False,
            default=_structural,
        )
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"payload is not JSON serializable: {exc}") from exc
    return text.encode("utf-8")


def render_payload(event: LogEvent, options: HookOptions) -> bytes:
    """Build and encode the webhook body for *event*."""
    return encode_payload(build_payload(event, options))
