"""Sequential and binary search that report how much work they did."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a search.

    ``index`` is the position of the match, or None when there is none.
    ``comparisons`` counts the elements the search looked at.
    """

    found: bool
    index: Optional[int]
    comparisons: int

    def __bool__(self) -> bool:
        return self.found


def binary_search(items: Sequence, target) -> SearchResult:
    """Search the sorted sequence ``items`` for ``target`` by halving.

    Each probe looks at the middle of the remaining range; the range is
    narrowed to the half that can still hold ``target``.
    """
    begin, end = 0, len(items) - 1
    comparisons = 0
    while begin <= end:
        middle = (begin + end) // 2
        comparisons += 1
        probe = items[middle]
        if target == probe:
            return SearchResult(True, middle, comparisons)
        if target < probe:
            end = middle - 1
        else:
            begin = middle + 1
    return SearchResult(False, None, comparisons)


def sequential_search(items, target) -> SearchResult:
    """Look at each element of ``items`` in turn until one equals ``target``."""
    comparisons = 0
    for index, item in enumerate(items):
        comparisons += 1
        if item == target:
            return SearchResult(True, index, comparisons)
    return SearchResult(False, None, comparisons)