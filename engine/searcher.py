"""Top-5 OR search over the master index.

Two keyword lists are walked like the merge step of merge sort: the
higher frequency goes first, the first keyword wins ties, and a
document already in the result is skipped while its cursor still
advances.
"""

from __future__ import annotations

from engine.indexer import Occurrence
from engine.master import MasterIndex

MAX_RESULTS = 5


def _take(results: list[str], occurrence: Occurrence) -> None:
    if occurrence.document not in results:
        results.append(occurrence.document)


def top_five(index: MasterIndex, kw1: str, kw2: str) -> list[str] | None:
    """Documents containing kw1 or kw2, highest frequency first.

    Keywords are matched as given; callers normalize them beforehand.
    Returns None when neither keyword is indexed.
    """
    first = index.get(kw1)
    second = index.get(kw2)

    if first is None and second is None:
        return None
    if second is None:
        return [o.document for o in first[:MAX_RESULTS]]
    if first is None:
        return [o.document for o in second[:MAX_RESULTS]]

    results: list[str] = []
    i = j = 0

    while len(results) < MAX_RESULTS and i < len(first) and j < len(second):
        if first[i].frequency >= second[j].frequency:
            _take(results, first[i])
            i += 1
        else:
            _take(results, second[j])
            j += 1

    # One list is exhausted; drain the other
    while len(results) < MAX_RESULTS and i < len(first):
        _take(results, first[i])
        i += 1
    while len(results) < MAX_RESULTS and j < len(second):
        _take(results, second[j])
        j += 1

    return results
