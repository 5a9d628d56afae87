"""Unit tests for the shared conversion, formatting, and timing helpers."""

from __future__ import annotations

import pytest

from models import Bid
from util import (
    CLOCKS_PER_SEC,
    Stopwatch,
    format_bid,
    has_leading_int,
    report_elapsed,
    str_to_double,
    str_to_int,
)


class TestStrToInt:
    """Test atoi-style integer parsing."""

    @pytest.mark.parametrize(
        ('text', 'expected'),
        [('98223', 98223), ('  42', 42), ('-7', -7), ('+5', 5), ('12abc', 12), ('abc', 0), ('', 0)],
    )
    def test_parses_leading_integer(self, text: str, expected: int) -> None:
        """Test that parsing stops at the first non-digit and falls back to 0."""
        assert str_to_int(text) == expected

    def test_large_ids_do_not_overflow(self) -> None:
        """Test that ids wider than 64 bits stay exact."""
        assert str_to_int('123456789012345678901234567890') == 123456789012345678901234567890

    def test_has_leading_int(self) -> None:
        """Test detection of a numeric prefix."""
        assert has_leading_int(' 0')
        assert not has_leading_int('A-100')


class TestStrToDouble:
    """Test currency parsing."""

    def test_strips_marker_and_separators(self) -> None:
        """Test '$1,651.00' style amounts."""
        assert str_to_double('$1,651.00', '$') == 1651.0

    def test_custom_marker(self) -> None:
        """Test that any single marker character can be stripped."""
        assert str_to_double('€12.5', '€') == 12.5

    def test_blank_is_zero(self) -> None:
        """Test that an empty amount means 0.0."""
        assert str_to_double('  ') == 0.0

    def test_garbage_raises(self) -> None:
        """Test that a non-numeric amount raises ValueError."""
        with pytest.raises(ValueError):
            str_to_double('$n/a')


def test_format_bid_uses_six_significant_digits() -> None:
    """Test the display line layout."""
    bid = Bid(bid_id='98101', title='2007 Ford Crown Victoria', fund='General Fund', amount=1651.0)
    assert format_bid(bid) == '98101: 2007 Ford Crown Victoria | 1651 | General Fund'
    assert format_bid(Bid(bid_id='1', amount=75.5)) == '1:  | 75.5 | '


class TestStopwatch:
    """Test elapsed-time measurement."""

    def test_measures_non_negative_time(self) -> None:
        """Test that ticks and seconds agree."""
        with Stopwatch() as watch:
            sum(range(1000))
        assert watch.ticks >= 0
        assert watch.seconds == watch.ticks / CLOCKS_PER_SEC

    def test_report_elapsed_prints_ticks_and_seconds(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the two report lines."""
        with Stopwatch() as watch:
            pass
        report_elapsed(watch)
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == f'Time: {watch.ticks} clock ticks'
        assert lines[1] == f'Time: {watch.seconds} seconds'
