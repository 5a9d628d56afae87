"""sorting.py

In-place sorts over a list of bids, ordered by title:

- selection_sort: O(n^2) average and worst case; not stable.
- quick_sort: Lomuto partition with the last element as pivot;
  O(n log n) average, O(n^2) worst case (e.g. already sorted input).

Titles compare as plain strings (lexicographic, case-sensitive).
"""

from __future__ import annotations

from typing import List, Optional

from models import Bid


def selection_sort(bids: List[Bid]) -> None:
    """Sort bids by title in place by repeatedly selecting the minimum."""
    size = len(bids)
    for pos in range(size - 1):
        smallest = pos
        for j in range(pos + 1, size):
            if bids[j].title < bids[smallest].title:
                smallest = j
        if smallest != pos:
            bids[pos], bids[smallest] = bids[smallest], bids[pos]


def partition(bids: List[Bid], begin: int, end: int) -> int:
    """Partition bids[begin..end] around the title of bids[end].

    Everything with a title <= the pivot's ends up left of the pivot.
    Returns the pivot's final index.
    """
    pivot = bids[end].title
    low = begin - 1
    for j in range(begin, end):
        if bids[j].title <= pivot:
            low += 1
            bids[low], bids[j] = bids[j], bids[low]
    bids[low + 1], bids[end] = bids[end], bids[low + 1]
    return low + 1


def quick_sort(bids: List[Bid], begin: int = 0, end: Optional[int] = None) -> None:
    """Sort bids[begin..end] (inclusive) by title in place.

    The smaller partition is sorted recursively and the larger one by looping,
    so the stack stays O(log n) deep even on sorted input.
    """
    if end is None:
        end = len(bids) - 1
    while begin < end:
        mid = partition(bids, begin, end)
        if mid - begin < end - mid:
            quick_sort(bids, begin, mid - 1)
            begin = mid + 1
        else:
            quick_sort(bids, mid + 1, end)
            end = mid - 1
