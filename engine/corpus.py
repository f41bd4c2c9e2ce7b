"""Corpus loading: noise words, the document list, and document tokens.

Reads plain-text files from disk and feeds them through the indexer
into a fresh MasterIndex.  All I/O is synchronous and documents are
merged in list order so equal-frequency ties are reproducible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from engine.indexer import index_document
from engine.master import MasterIndex
from engine.text import tokenize

logger = logging.getLogger(__name__)


class InputUnavailable(Exception):
    """A corpus file could not be read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        super().__init__(f"Cannot read {self.path}: {reason}")


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputUnavailable(path, str(e)) from e


# ── Readers ─────────────────────────────────────────────────────────


def load_noise_words(path: str | Path) -> frozenset[str]:
    return frozenset(word.lower() for word in tokenize(_read_text(Path(path))))


def load_document_names(path: str | Path) -> list[str]:
    return tokenize(_read_text(Path(path)))


def read_tokens(path: str | Path) -> list[str]:
    return tokenize(_read_text(Path(path)))


# ── Main entry point ───────────────────────────────────────────────


@dataclass
class Corpus:
    index: MasterIndex
    documents: list[str]
    noise_words: frozenset[str]


def load_corpus(
    documents_file: str | Path,
    noise_words_file: str | Path,
    base_dir: str | Path | None = None,
) -> Corpus:
    """Index every document named in documents_file.

    Document names resolve against base_dir (default: the directory of
    documents_file) and are used verbatim as document identifiers.
    """
    documents_file = Path(documents_file)
    root = Path(base_dir) if base_dir is not None else documents_file.parent

    noise_words = load_noise_words(noise_words_file)
    names = load_document_names(documents_file)

    index = MasterIndex()
    for name in names:
        tokens = read_tokens(root / name)
        index.merge(index_document(name, tokens, noise_words))

    logger.info("indexed %d documents, %d keywords", len(names), len(index))
    return Corpus(index=index, documents=names, noise_words=noise_words)


def make_index(
    documents_file: str | Path,
    noise_words_file: str | Path,
    base_dir: str | Path | None = None,
) -> MasterIndex:
    return load_corpus(documents_file, noise_words_file, base_dir).index
