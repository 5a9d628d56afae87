"""models.py

The one record type shared by both programs:

- Bid: a closed eBid auction line (identifier, title, fund code, winning amount).

Kept deliberately small; storage lives in hash_table.py and ordering in sorting.py.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bid:
    """A bid read from the monthly sales CSV.

    `Bid()` with all defaults is the "empty bid".
    """

    bid_id: str = ''     # ArticleID; also parsed as an int to pick a bucket
    title: str = ''      # ArticleTitle; the sort key
    fund: str = ''
    amount: float = 0.0  # WinningBid with the currency marker stripped
