import json
from pathlib import Path

import pytest

DOCUMENTS = {
    "jude.txt": "Deep in the woods, the world was deep and quiet. Deep!",
    "pohlx.txt": "The world, the world! A deep world.",
    "tom.txt": "Nothing to see here: 42 cats.",
}
NOISE_WORDS = "the\na\nand\nin\nwas\nto\nhere\n"


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    for name, text in DOCUMENTS.items():
        (tmp_path / name).write_text(text, encoding="utf-8")
    (tmp_path / "docs.txt").write_text("\n".join(DOCUMENTS) + "\n", encoding="utf-8")
    (tmp_path / "noisewords.txt").write_text(NOISE_WORDS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def collection_file(corpus_dir: Path) -> Path:
    path = corpus_dir / "collection.json"
    path.write_text(
        json.dumps({"name": "sample", "documents": "docs.txt", "noise_words": "noisewords.txt"})
    )
    return path
