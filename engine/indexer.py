"""Indexer: turns one document's raw tokens into keyword occurrences.

Each distinct keyword gets exactly one Occurrence whose frequency is
bumped in place while the document is scanned.  The resulting map is
what MasterIndex.merge consumes.
"""

from __future__ import annotations

import logging
from collections.abc import Container, Iterable
from dataclasses import dataclass

from engine.text import normalize

logger = logging.getLogger(__name__)


@dataclass
class Occurrence:
    document: str
    frequency: int = 1

    def __str__(self) -> str:
        return f"({self.document},{self.frequency})"


def index_document(
    document: str,
    tokens: Iterable[str],
    noise_words: Container[str],
) -> dict[str, Occurrence]:
    """Count keyword occurrences in a single document.

    Returns {keyword: Occurrence(document, count)}.
    """
    keywords: dict[str, Occurrence] = {}
    for token in tokens:
        keyword = normalize(token, noise_words)
        if keyword is None:
            continue
        occurrence = keywords.get(keyword)
        if occurrence is None:
            keywords[keyword] = Occurrence(document, 1)
        else:
            occurrence.frequency += 1

    logger.debug("indexed %s: %d distinct keywords", document, len(keywords))
    return keywords
