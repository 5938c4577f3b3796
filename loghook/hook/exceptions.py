"""Exception hierarchy for the Discord hook."""

from __future__ import annotations


class HookError(Exception):
    """Base exception for all hook errors."""


class EncodingError(HookError):
    """The payload could not be serialized to JSON."""


class DeliveryError(HookError):
    """The webhook POST failed (connection, DNS, timeout, or non-2xx status)."""
