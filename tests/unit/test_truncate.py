"""Unit tests for string truncation."""

from __future__ import annotations

import math

import pytest

from bel7_cli.truncate import (
    DEFAULT_TRUNCATION_SUFFIX,
    truncate_middle,
    truncate_string,
    truncate_with_suffix,
)

SAMPLES = [
    "",
    "a",
    "Hello, World!",
    "abcdefghij",
    "/var/lib/rabbitmq/mnesia/rabbit@node1/queues",
    "日本語のテキストです",
    "emoji 🎉🎉🎉 party",
]


@pytest.mark.unit
class TestTruncateString:
    """Tests for truncate_string."""

    def test_short_string_unchanged(self) -> None:
        assert truncate_string("Hello", 10) == "Hello"

    def test_exact_length_unchanged(self) -> None:
        assert truncate_string("Hello", 5) == "Hello"

    def test_truncates_with_ellipsis(self) -> None:
        assert truncate_string("Hello, World!", 8) == "Hello..."

    def test_empty_string(self) -> None:
        assert truncate_string("", 5) == ""

    def test_counts_characters_not_bytes(self) -> None:
        """Multi-byte characters count as one character each."""
        assert truncate_string("日本語のテキスト", 5) == "日本..."

    def test_max_chars_below_suffix_length_yields_suffix(self) -> None:
        assert truncate_string("Hello, World!", 2) == "..."

    def test_zero_max_chars(self) -> None:
        assert truncate_string("Hello", 0) == "..."
        assert truncate_string("", 0) == ""

    def test_negative_max_chars_behaves_as_zero(self) -> None:
        assert truncate_string("Hello", -5) == truncate_string("Hello", 0)
        assert truncate_string("", -1) == ""

    @pytest.mark.parametrize("s", SAMPLES)
    def test_never_truncates_when_long_enough(self, s: str) -> None:
        for n in range(len(s), len(s) + 3):
            assert truncate_string(s, n) == s

    @pytest.mark.parametrize("s", SAMPLES)
    def test_result_fits_and_ends_with_suffix(self, s: str) -> None:
        for n in range(3, len(s)):
            result = truncate_string(s, n)
            assert len(result) <= n
            assert result.endswith(DEFAULT_TRUNCATION_SUFFIX)


@pytest.mark.unit
class TestTruncateWithSuffix:
    """Tests for truncate_with_suffix."""

    def test_custom_unicode_suffix(self) -> None:
        assert truncate_with_suffix("Hello, World!", 9, "…") == "Hello, W…"

    def test_empty_suffix(self) -> None:
        assert truncate_with_suffix("Hello, World!", 5, "") == "Hello"

    def test_suffix_is_never_shortened(self) -> None:
        assert truncate_with_suffix("Hello, World!", 3, " [more]") == " [more]"

    def test_short_string_unchanged(self) -> None:
        assert truncate_with_suffix("Hi", 9, "…") == "Hi"


@pytest.mark.unit
class TestTruncateMiddle:
    """Tests for truncate_middle."""

    def test_keeps_start_and_end(self) -> None:
        assert truncate_middle("abcdefghij", 7) == "ab...ij"

    def test_odd_spare_character_goes_to_start(self) -> None:
        assert truncate_middle("abcdefghij", 8) == "abc...ij"

    def test_tiny_max_chars_returns_part_of_marker(self) -> None:
        assert truncate_middle("Hello, World!", 2) == ".."
        assert truncate_middle("Hello, World!", 3) == "..."
        assert truncate_middle("Hello, World!", 0) == ""

    def test_negative_max_chars_behaves_as_zero(self) -> None:
        assert truncate_middle("Hello, World!", -3) == ""

    def test_four_chars_keeps_one_leading_character(self) -> None:
        assert truncate_middle("abcdefghij", 4) == "a..."

    def test_file_path(self) -> None:
        result = truncate_middle("/var/lib/app/data/config.yaml", 15)
        assert result == "/var/l...g.yaml"

    @pytest.mark.parametrize("s", SAMPLES)
    def test_never_truncates_when_long_enough(self, s: str) -> None:
        for n in range(len(s), len(s) + 3):
            assert truncate_middle(s, n) == s

    @pytest.mark.parametrize("s", SAMPLES)
    def test_exact_length_with_single_marker(self, s: str) -> None:
        for n in range(4, len(s)):
            result = truncate_middle(s, n)
            assert len(result) == n
            assert result.count("...") == 1
            prefix = result.split("...", 1)[0]
            assert prefix == s[: math.ceil((n - 3) / 2)]
