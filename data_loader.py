"""data_loader.py

CSV loader for the eBid monthly sales export.

The export has a header row followed by one row per closed auction. Only four
columns matter here:

    0  ArticleTitle  -> Bid.title
    1  ArticleID     -> Bid.bid_id
    4  WinningBid    -> Bid.amount   (e.g. '$1,164.26')
    8  Fund          -> Bid.fund

A row that cannot be turned into a Bid is logged and skipped; the rest of the
file still loads.
"""

from __future__ import annotations

import csv
import logging
from typing import List, Tuple

from hash_table import BidHashTable
from models import Bid
from util import str_to_double

logger = logging.getLogger(__name__)

TITLE_COL = 0
ID_COL = 1
AMOUNT_COL = 4
FUND_COL = 8


class BidParseError(ValueError):
    """A CSV row could not be converted into a Bid."""


def parse_bid_row(row: List[str], marker: str = '$') -> Bid:
    """Build a Bid from one CSV data row."""
    if len(row) <= FUND_COL:
        raise BidParseError(f'expected at least {FUND_COL + 1} columns, got {len(row)}')
    try:
        amount = str_to_double(row[AMOUNT_COL], marker)
    except ValueError:
        raise BidParseError(f'bad amount {row[AMOUNT_COL]!r}') from None
    return Bid(
        bid_id=row[ID_COL].strip(),
        title=row[TITLE_COL].strip(),
        fund=row[FUND_COL].strip(),
        amount=amount,
    )


def load_bids_csv(path: str, marker: str = '$') -> Tuple[List[str], List[Bid]]:
    """Load a bids CSV into (header, bids).

    The header row is returned as-is and not validated.
    """
    bids: List[Bid] = []
    skipped = 0
    with open(path, newline='', encoding='utf-8-sig', errors='replace') as f:
        r = csv.reader(f)
        header = next(r, None)
        if header is None:
            raise ValueError(f'Bids CSV is empty: {path}')

        for row in r:
            if not any((cell or '').strip() for cell in row):
                continue
            try:
                bids.append(parse_bid_row(row, marker))
            except BidParseError as e:
                skipped += 1
                logger.warning('Skipping %s line %d: %s', path, r.line_num, e)

    logger.info('Loaded %d bids from %s (%d skipped)', len(bids), path, skipped)
    return header, bids


def load_bids_into(path: str, table: BidHashTable, marker: str = '$') -> Tuple[List[str], int]:
    """Load a bids CSV straight into a hash table; returns (header, bids inserted)."""
    header, bids = load_bids_csv(path, marker)
    for bid in bids:
        table.insert(bid)
    return header, len(bids)
