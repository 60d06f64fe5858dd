"""Tests for pod name color assignment."""

from __future__ import annotations

import pytest

from kubecronlogs.utils.colors import color_for, color_index_for, format_log_line


class TestColorIndexFor:
    """Tests for color_index_for."""

    def test_empty_name_maps_to_first_palette_entry(self) -> None:
        assert color_index_for("") == 0

    def test_single_character(self) -> None:
        # 97**2 / 2 + 1 = 4705.5 -> 4705 % 6
        assert color_index_for("a") == 1

    def test_truncates_after_summing(self) -> None:
        """The float sum is truncated once, not per character."""
        # 2 * 4705.5 = 9411 -> 9411 % 6 == 3 (per-character truncation would give 2)
        assert color_index_for("aa") == 3

    @pytest.mark.parametrize(
        "name",
        ["nightly-28311234-abcde", "nightly-28311234-fghij", "x", "pod-é-ü", "日本語"],
    )
    def test_deterministic_and_in_palette(self, name: str) -> None:
        first = color_index_for(name)
        assert first == color_index_for(name)
        assert 0 <= first < 6


class TestColorFor:
    """Tests for color_for."""

    def test_maps_onto_ansi_foreground_range(self) -> None:
        assert color_for("") == 31
        assert color_for("a") == 32
        assert 31 <= color_for("nightly-28311234-abcde") <= 36


class TestFormatLogLine:
    """Tests for format_log_line."""

    def test_exact_escape_sequence(self) -> None:
        assert format_log_line("a", "hello") == "\033[1;32ma\033[0;1m \033[0;0mhello\n"
