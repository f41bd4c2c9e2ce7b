"""Master index: keyword → occurrences across all documents.

Every keyword list is kept in non-increasing frequency order.  New
occurrences are appended and then moved into place by a binary search
over the already-sorted prefix, so a merge never re-sorts a list.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from engine.indexer import Occurrence

logger = logging.getLogger(__name__)


# ── Ordered insertion ───────────────────────────────────────────────


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int] | None:
    """Move the last occurrence to its place in the sorted prefix.

    The prefix ``occurrences[:-1]`` must already be non-increasing by
    frequency.  Ties land after the last entry of equal frequency, so
    earlier-merged documents stay ahead.

    Returns the midpoint indices examined by the search, or None when
    the list holds a single occurrence.
    """
    if len(occurrences) == 1:
        return None

    target = occurrences[-1].frequency
    lo, hi = 0, len(occurrences) - 2
    midpoints: list[int] = []

    while lo <= hi:
        mid = (lo + hi) // 2
        midpoints.append(mid)
        if occurrences[mid].frequency >= target:
            lo = mid + 1
        else:
            hi = mid - 1

    occurrences.insert(lo, occurrences.pop())
    return midpoints


# ── Master index ────────────────────────────────────────────────────


class MasterIndex:
    def __init__(self) -> None:
        self._lists: dict[str, list[Occurrence]] = {}

    def merge(self, keywords: Mapping[str, Occurrence]) -> None:
        """Fold one document's keyword map into the index."""
        for keyword, occurrence in keywords.items():
            occurrences = self._lists.get(keyword)
            if occurrences is None:
                self._lists[keyword] = [occurrence]
                continue
            occurrences.append(occurrence)
            midpoints = insert_last_occurrence(occurrences)
            logger.debug(
                "merged %s into '%s' (midpoints %s)", occurrence, keyword, midpoints
            )

    def get(self, keyword: str) -> list[Occurrence] | None:
        return self._lists.get(keyword)

    def keywords(self) -> list[str]:
        return sorted(self._lists)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._lists

    def __len__(self) -> int:
        return len(self._lists)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lists)
