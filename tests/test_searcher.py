from engine.indexer import Occurrence
from engine.master import MasterIndex
from engine.searcher import top_five


def _index(lists: dict[str, list[tuple[str, int]]]) -> MasterIndex:
    index = MasterIndex()
    for keyword, pairs in lists.items():
        for doc, freq in pairs:
            index.merge({keyword: Occurrence(doc, freq)})
    return index


def test_first_keyword_wins_ties():
    index = _index({
        "deep": [("docA", 5), ("docB", 3)],
        "world": [("docC", 5), ("docD", 2)],
    })
    assert top_five(index, "deep", "world") == ["docA", "docC", "docB", "docD"]


def test_tie_preference_follows_argument_order():
    index = _index({
        "deep": [("docA", 5), ("docB", 3)],
        "world": [("docC", 5), ("docD", 2)],
    })
    assert top_five(index, "world", "deep") == ["docC", "docA", "docB", "docD"]


def test_no_match_is_none():
    index = _index({"deep": [("docA", 1)]})
    assert top_five(index, "sea", "world") is None


def test_empty_index_is_none():
    assert top_five(MasterIndex(), "deep", "world") is None


def test_single_keyword_first_five():
    docs = [(f"doc{n}", 10 - n) for n in range(7)]
    index = _index({"deep": docs})
    assert top_five(index, "deep", "world") == ["doc0", "doc1", "doc2", "doc3", "doc4"]


def test_single_second_keyword_fewer_than_five():
    index = _index({"world": [("docA", 2), ("docB", 1)]})
    assert top_five(index, "deep", "world") == ["docA", "docB"]


def test_duplicate_document_appears_once():
    index = _index({
        "deep": [("docA", 6), ("docB", 2)],
        "world": [("docA", 4), ("docC", 3)],
    })
    # docA from "world" is skipped, yet that cursor advances to docC
    assert top_five(index, "deep", "world") == ["docA", "docC", "docB"]


def test_capped_at_five():
    index = _index({
        "deep": [("a", 9), ("b", 7), ("c", 5), ("d", 3)],
        "world": [("e", 8), ("f", 6), ("g", 4)],
    })
    assert top_five(index, "deep", "world") == ["a", "e", "b", "f", "c"]


def test_drains_second_list_after_first_is_exhausted():
    index = _index({
        "deep": [("a", 9)],
        "world": [("b", 4), ("a", 3), ("c", 2), ("d", 1)],
    })
    assert top_five(index, "deep", "world") == ["a", "b", "c", "d"]


def test_drains_first_list_after_second_is_exhausted():
    index = _index({
        "deep": [("a", 3), ("b", 2), ("c", 1)],
        "world": [("d", 9)],
    })
    assert top_five(index, "deep", "world") == ["d", "a", "b", "c"]


def test_same_keyword_twice():
    index = _index({"deep": [("a", 3), ("b", 2)]})
    assert top_five(index, "deep", "deep") == ["a", "b"]


def test_query_keywords_are_not_normalized():
    index = _index({"deep": [("a", 3)]})
    assert top_five(index, "Deep", "World") is None
