"""Tests for threshold resolution and colour lookup."""

from __future__ import annotations

import pytest

from loghook.core.config import DEFAULT_LEVEL_COLORS, HookOptions, LevelColors
from loghook.core.types import ALL_LEVELS, Severity
from loghook.hook.levels import level_color, level_threshold, resolve_colors

_CUSTOM = LevelColors(trace=1, debug=2, info=3, warning=4, error=5, critical=6, panic=7)


# ── Threshold ───────────────────────────────────────────────────


class TestLevelThreshold:
    def test_least_severe_yields_everything(self) -> None:
        assert level_threshold(Severity.TRACE) == list(ALL_LEVELS)

    def test_debug(self) -> None:
        assert level_threshold(Severity.DEBUG) == [
            Severity.PANIC,
            Severity.CRITICAL,
            Severity.ERROR,
            Severity.WARNING,
            Severity.INFO,
            Severity.DEBUG,
        ]

    def test_most_severe_yields_one(self) -> None:
        assert level_threshold(Severity.PANIC) == [Severity.PANIC]

    def test_error(self) -> None:
        assert level_threshold(Severity.ERROR) == [
            Severity.PANIC,
            Severity.CRITICAL,
            Severity.ERROR,
        ]

    def test_monotonic(self) -> None:
        for a in Severity:
            for b in Severity:
                if a >= b:
                    assert set(level_threshold(a)) <= set(level_threshold(b))

    def test_includes_minimum(self) -> None:
        for level in Severity:
            assert level in level_threshold(level)


# ── Colours ─────────────────────────────────────────────────────


class TestLevelColor:
    def test_every_severity_has_a_color_field(self) -> None:
        assert {level.name.lower() for level in Severity} <= set(LevelColors.model_fields)

    @pytest.mark.parametrize("level", list(Severity))
    def test_default_table(self, level: Severity) -> None:
        assert level_color(DEFAULT_LEVEL_COLORS, level) == getattr(
            DEFAULT_LEVEL_COLORS, level.name.lower()
        )

    def test_custom_table(self) -> None:
        assert [level_color(_CUSTOM, lvl) for lvl in sorted(Severity)] == [1, 2, 3, 4, 5, 6, 7]

    def test_fatal_alias_uses_critical_entry(self) -> None:
        assert level_color(_CUSTOM, Severity.FATAL) == 6

    def test_missing_custom_entry_is_zero(self) -> None:
        assert level_color(LevelColors(error=9), Severity.INFO) == 0


class TestResolveColors:
    def test_default_when_disabled(self) -> None:
        assert resolve_colors(HookOptions()) is DEFAULT_LEVEL_COLORS

    def test_custom_ignored_when_flag_off(self) -> None:
        opts = HookOptions(custom_colors=_CUSTOM)
        assert resolve_colors(opts) is DEFAULT_LEVEL_COLORS

    def test_custom_when_enabled(self) -> None:
        opts = HookOptions(use_custom_colors=True, custom_colors=_CUSTOM)
        assert resolve_colors(opts) is _CUSTOM
