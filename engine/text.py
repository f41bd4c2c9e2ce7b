"""Shared keyword normalization for the indexer and query surface.

Documents and queries must normalize tokens identically, otherwise a
query keyword will never meet its indexed counterpart.
"""

from __future__ import annotations

from collections.abc import Container

PUNCTUATION = ".,?:;!"


def normalize(token: str, noise_words: Container[str]) -> str | None:
    """Lowercase → strip trailing punctuation → reject non-letters and noise words."""
    word = token.lower().rstrip(PUNCTUATION)
    if not word or not word.isalpha() or word in noise_words:
        return None
    return word


def tokenize(text: str) -> list[str]:
    """Split raw text into tokens on whitespace only."""
    return text.split()
