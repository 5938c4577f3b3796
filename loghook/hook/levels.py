"""Severity threshold and colour lookups."""

from __future__ import annotations

from loghook.core.config import DEFAULT_LEVEL_COLORS, HookOptions, LevelColors
from loghook.core.types import ALL_LEVELS, Severity


def level_threshold(minimum: Severity) -> list[Severity]:
    """Return every severity at least as severe as *minimum*, most severe first.

    Filters the full enumeration rather than a fixed list so levels added to
    ``Severity`` later are included automatically.
    """
    return [level for level in ALL_LEVELS if level >= minimum]


def level_color(table: LevelColors, level: Severity) -> int:
    """Return the embed colour for *level* from *table*."""
    return getattr(table, level.name.lower())


def resolve_colors(options: HookOptions) -> LevelColors:
    """Pick the custom colour table when enabled, otherwise the defaults."""
    if options.use_custom_colors and options.custom_colors is not None:
        return options.custom_colors
    return DEFAULT_LEVEL_COLORS
