"""util.py

Small, shared helpers used by both programs.

This project intentionally uses the Python standard library only.
"""

from __future__ import annotations

import re
import time

from models import Bid


# Stopwatch ticks are microseconds.
CLOCKS_PER_SEC = 1_000_000

_LEADING_INT = re.compile(r'\s*([+-]?\d+)')


def has_leading_int(s: str) -> bool:
    """True if atoi-style parsing of `s` finds at least one digit."""
    return _LEADING_INT.match(s or '') is not None


def str_to_int(s: str) -> int:
    """Parse the leading integer of a string the way C's atoi does.

    Leading whitespace and a sign are allowed; parsing stops at the first
    non-digit. A string with no leading digits gives 0.
    """
    m = _LEADING_INT.match(s or '')
    if not m:
        return 0
    return int(m.group(1))


def str_to_double(s: str, ch: str = '$') -> float:
    """Convert a currency string such as '$1,234.50' to a float.

    Every occurrence of `ch` is stripped, along with thousands separators.
    A blank value is 0.0; anything else that is not a number raises ValueError.
    """
    s = (s or '').replace(ch, '').replace(',', '').strip()
    if not s:
        return 0.0
    return float(s)


def format_amount(amount: float) -> str:
    """Six significant digits, trailing zeros dropped (1164.26, 12345.7, 25)."""
    return f'{amount:g}'


def format_bid(bid: Bid) -> str:
    """Render a bid as a single display line."""
    return f'{bid.bid_id}: {bid.title} | {format_amount(bid.amount)} | {bid.fund}'


# -------------------------
# Timing
# -------------------------

class Stopwatch:
    """Context manager that measures elapsed wall-clock time.

        with Stopwatch() as watch:
            table.search('98223')
        report_elapsed(watch)
    """

    def __init__(self) -> None:
        self._start = 0
        self._elapsed_ns = 0

    def __enter__(self) -> 'Stopwatch':
        self._start = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._elapsed_ns = time.perf_counter_ns() - self._start

    @property
    def ticks(self) -> int:
        return self._elapsed_ns // 1_000

    @property
    def seconds(self) -> float:
        return self.ticks / CLOCKS_PER_SEC


def report_elapsed(watch: Stopwatch, label: str = 'Time') -> None:
    """Print the elapsed time in clock ticks and in seconds."""
    print(f'{label}: {watch.ticks} clock ticks')
    print(f'{label}: {watch.seconds} seconds')
