"""Shared fixtures: small bid CSV files written to a temp directory."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List

import pytest

HEADER = 'ArticleTitle,ArticleID,Department,CloseDate,WinningBid,InventoryID,VehicleID,ReceiptNumber,Fund'

GOOD_ROWS = [
    'Table,97990,General Fund,11/6/2016,$10.00,970347,,6027311,General Fund',
    'Dell Laptop,98223,Information Technology,11/13/2016,$147.00,971026,,6035134,Enterprise',
    '2007 Ford Crown Victoria,98101,Fleet,11/10/2016,"$1,651.00",970501,3004,6031127,General Fund',
    'Bicycle,98109,Police,11/10/2016,$75.50,970544,,6031133,General Fund',
]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[List[str]], str]:
    """Return a function that writes HEADER plus the given rows and returns the path."""

    def _write(rows: List[str], name: str = 'bids.csv') -> str:
        path = tmp_path / name
        path.write_text('\n'.join([HEADER, *rows]) + '\n', encoding='utf-8')
        return str(path)

    return _write


@pytest.fixture
def bids_csv(write_csv) -> str:
    """A well-formed CSV holding GOOD_ROWS."""
    return write_csv(GOOD_ROWS)
