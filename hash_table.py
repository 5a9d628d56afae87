# Custom Hash Table (separate chaining, fixed bucket count) for bid storage
# Key: bid ID string, hashed by its leading integer. Value: the Bid itself.

from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple

from models import Bid
from util import format_amount, has_leading_int, str_to_int

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 179


class BidHashTable:
    def __init__(self, table_size=DEFAULT_SIZE):
        if table_size < 1:
            raise ValueError(f'table_size must be at least 1, got {table_size}')
        # An empty bucket is the "unused" state; the table never grows.
        self._buckets = [[] for _ in range(table_size)]

    def __len__(self):
        return sum(len(bucket) for bucket in self._buckets)

    def size(self):
        """Number of buckets, not the number of stored bids."""
        return len(self._buckets)

    def bucket_for(self, bid_id: str) -> int:
        if not has_leading_int(bid_id):
            # Legacy behavior: a non-numeric id parses to 0 and lands in bucket 0.
            logger.warning('Bid id %r is not numeric; using bucket 0', bid_id)
        return str_to_int(bid_id) % len(self._buckets)

    def insert(self, bid: Bid) -> None:
        # Duplicates are not detected; a second copy chains behind the first.
        self._buckets[self.bucket_for(bid.bid_id)].append(bid)

    def search(self, bid_id: str) -> Optional[Bid]:
        for bid in self._buckets[self.bucket_for(bid_id)]:
            if bid.bid_id == bid_id:
                return bid
        return None

    def remove(self, bid_id: str) -> bool:
        i = self.bucket_for(bid_id)
        bucket = self._buckets[i]
        for j, bid in enumerate(bucket):
            if bid.bid_id == bid_id:
                # The next chained bid, if any, becomes the bucket's first entry.
                del bucket[j]
                logger.debug('Removed bid %s from bucket %d', bid_id, i)
                return True
        return False

    def entries(self) -> Iterator[Tuple[int, Bid]]:
        """Yield (bucket index, bid) in bucket order, then insertion order."""
        for i, bucket in enumerate(self._buckets):
            for bid in bucket:
                yield i, bid

    def print_all(self) -> None:
        for i, bid in self.entries():
            print(f'{i}: {bid.bid_id} | {bid.title} | {format_amount(bid.amount)} | {bid.fund}')
