"""Domain types shared by the hook — severities and log events."""

from __future__ import annotations

import logging
import traceback
from datetime import UTC, datetime
from enum import IntEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Severity(IntEnum):
    """Log severity — ordered least to most severe.

    Values shared with the stdlib ``logging`` module use the same numbers so
    records map across without translation.
    """

    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    FATAL = logging.CRITICAL  # alias
    PANIC = 60

    @classmethod
    def from_levelno(cls, levelno: int) -> Severity:
        """Map an arbitrary logging level onto the nearest member at or below it."""
        match = cls.TRACE
        for level in cls:
            if level <= levelno:
                match = level
        return match


# Most severe first, derived from the enum so new members are picked up.
ALL_LEVELS: tuple[Severity, ...] = tuple(sorted(Severity, reverse=True))

# Attributes every LogRecord carries; anything else came in via ``extra=``.
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class LogEvent(BaseModel):
    """A single log event as seen by the hook."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str
    time: datetime = Field(default_factory=lambda: datetime.now(UTC))
    fields: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> LogEvent:
        """Build an event from a stdlib ``LogRecord``.

        Extra attributes become fields in the order they were set; a
        formatted traceback is added as ``exception`` when present.
        """
        fields: dict[str, Any] = {
            k: v for k, v in vars(record).items() if k not in _RECORD_ATTRS
        }
        if record.exc_info and record.exc_info[0] is not None:
            fields["exception"] = "".join(
                traceback.format_exception(*record.exc_info)
            ).rstrip()

        return cls(
            severity=Severity.from_levelno(record.levelno),
            message=record.getMessage(),
            time=datetime.fromtimestamp(record.created, tz=UTC),
            fields=fields,
        )
