"""Unit tests for the TF-IDF ranking engine."""

from __future__ import annotations

import math

import pytest

from search_server.domain.model import DocumentStatus, ScoredDocument
from search_server.search.index import InvertedIndex
from search_server.search.query import Query
from search_server.search.ranking import MAX_RESULT_DOCUMENT_COUNT, RankingEngine


pytestmark = pytest.mark.unit


def _accept_all(document_id: int, status: DocumentStatus, rating: int) -> bool:
    return True


def _query(plus: tuple[str, ...] = (), minus: tuple[str, ...] = ()) -> Query:
    return Query(plus_terms=frozenset(plus), minus_terms=frozenset(minus))


def _index(*documents: tuple[int, str, int]) -> InvertedIndex:
    index = InvertedIndex()
    for document_id, text, rating in documents:
        index.add_document(document_id, text.split(), DocumentStatus.ACTUAL, [rating])
    return index


def test_relevance_is_tf_times_natural_log_idf():
    index = _index((1, "cat dog", 0), (2, "dog bird bird", 0), (3, "fish", 0), (4, "cat cat cat fish", 0))
    engine = RankingEngine(index)

    results = engine.find_top_documents(_query(plus=("cat",)), _accept_all)

    idf = math.log(4 / 2)
    assert [doc.id for doc in results] == [4, 1]
    assert results[0].relevance == pytest.approx(0.75 * idf, abs=1e-6)
    assert results[1].relevance == pytest.approx(0.5 * idf, abs=1e-6)


def test_relevance_sums_over_plus_terms():
    index = _index((1, "cat dog", 0), (2, "dog", 0), (3, "bird", 0))
    engine = RankingEngine(index)

    results = engine.find_top_documents(_query(plus=("cat", "dog")), _accept_all)

    assert [doc.id for doc in results] == [1, 2]
    assert results[0].relevance == pytest.approx(0.5 * math.log(3) + 0.5 * math.log(3 / 2), abs=1e-6)
    assert results[1].relevance == pytest.approx(math.log(3 / 2), abs=1e-6)


def test_unknown_plus_terms_contribute_nothing():
    index = _index((1, "cat", 0), (2, "dog", 0))
    engine = RankingEngine(index)

    assert engine.find_top_documents(_query(plus=("bird",)), _accept_all) == []


def test_minus_terms_remove_documents_regardless_of_predicate():
    index = _index((1, "cat dog", 0), (2, "cat", 0), (3, "dog", 0))
    engine = RankingEngine(index)

    def only_two(document_id: int, status: DocumentStatus, rating: int) -> bool:
        return document_id == 2

    assert [d.id for d in engine.find_top_documents(_query(("cat",), ("dog",)), _accept_all)] == [2]
    assert [d.id for d in engine.find_top_documents(_query(("cat",), ("dog",)), only_two)] == [2]
    assert engine.find_top_documents(_query(("dog",), ("dog",)), _accept_all) == []


def test_predicate_receives_id_status_and_rating():
    index = InvertedIndex()
    index.add_document(1, ["cat"], DocumentStatus.BANNED, [4, 6])
    engine = RankingEngine(index)
    seen: list[tuple[int, DocumentStatus, int]] = []

    def record(document_id: int, status: DocumentStatus, rating: int) -> bool:
        seen.append((document_id, status, rating))
        return False

    assert engine.find_top_documents(_query(plus=("cat",)), record) == []
    assert seen == [(1, DocumentStatus.BANNED, 5)]


class TestRank:
    def test_descending_relevance(self):
        engine = RankingEngine(InvertedIndex())
        documents = [ScoredDocument(1, 0.1, 9), ScoredDocument(2, 0.9, 0), ScoredDocument(3, 0.5, 5)]

        assert [d.id for d in engine.rank(documents)] == [2, 3, 1]

    def test_relevances_within_epsilon_tie_and_sort_by_rating(self):
        engine = RankingEngine(InvertedIndex())
        documents = [
            ScoredDocument(1, 0.5, 1),
            ScoredDocument(2, 0.5 + 1e-7, 9),
            ScoredDocument(3, 0.5 + 1e-5, 0),
        ]

        assert [d.id for d in engine.rank(documents)] == [3, 2, 1]

    def test_full_ties_keep_input_order(self):
        engine = RankingEngine(InvertedIndex())
        documents = [ScoredDocument(i, 0.25, 3) for i in (4, 8, 15, 16)]

        assert [d.id for d in engine.rank(documents)] == [4, 8, 15, 16]

    def test_custom_epsilon(self):
        engine = RankingEngine(InvertedIndex(), relevance_epsilon=0.1)
        documents = [ScoredDocument(1, 0.55, 1), ScoredDocument(2, 0.5, 7)]

        assert [d.id for d in engine.rank(documents)] == [2, 1]

    def test_truncates_to_max_results(self):
        engine = RankingEngine(InvertedIndex())
        documents = [ScoredDocument(i, i / 10, 0) for i in range(8)]

        ranked = engine.rank(documents)

        assert len(ranked) == MAX_RESULT_DOCUMENT_COUNT == 5
        assert [d.id for d in ranked] == [7, 6, 5, 4, 3]

    @pytest.mark.parametrize(("limit", "expected"), [(2, 2), (10, 8), (0, 0), (-3, 0)])
    def test_explicit_limit(self, limit, expected):
        engine = RankingEngine(InvertedIndex())
        documents = [ScoredDocument(i, i / 10, 0) for i in range(8)]

        assert len(engine.rank(documents, limit)) == expected


def test_equal_scores_are_reproducible_across_calls():
    index = _index(*[(document_id, "cat dog", 2) for document_id in (9, 3, 7, 1, 5, 11)])
    engine = RankingEngine(index)
    query = _query(plus=("cat",))

    first = engine.find_top_documents(query, _accept_all)
    second = engine.find_top_documents(query, _accept_all)

    assert first == second
    assert [d.id for d in first] == [1, 3, 5, 7, 9]
