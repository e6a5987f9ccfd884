"""TF-IDF ranking with rating tie-breaks and top-K truncation."""

from __future__ import annotations

from functools import cmp_to_key
import logging

from search_server.domain.model import DocumentPredicate, ScoredDocument
from search_server.search.index import InvertedIndex
from search_server.search.query import Query
from search_server.search.stats import calculate_idf, tf_idf


logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6


class RankingEngine:
    """Score documents of an index against parsed queries.

    Relevance is the sum over plus terms of ``tf * ln(N / df)``. Documents
    containing any minus term are dropped after scoring. Results are
    ordered by descending relevance; relevances closer than
    ``relevance_epsilon`` tie and fall back to descending rating, and a
    full tie keeps ascending id order.
    """

    def __init__(
        self,
        index: InvertedIndex,
        *,
        max_results: int = MAX_RESULT_DOCUMENT_COUNT,
        relevance_epsilon: float = RELEVANCE_EPSILON,
    ) -> None:
        self.index = index
        self.max_results = max_results
        self.relevance_epsilon = relevance_epsilon
        self._sort_key = cmp_to_key(self._compare)

    def _compare(self, lhs: ScoredDocument, rhs: ScoredDocument) -> int:
        if abs(lhs.relevance - rhs.relevance) < self.relevance_epsilon:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1

    def find_all_documents(self, query: Query, predicate: DocumentPredicate) -> list[ScoredDocument]:
        """Return every matching document in ascending id order, before ranking."""

        total_docs = self.index.document_count()
        relevance: dict[int, float] = {}

        for term in query.sorted_plus_terms():
            doc_freq = self.index.document_frequency(term)
            if doc_freq == 0:
                continue
            idf = calculate_idf(doc_freq, total_docs)
            for document_id, term_freq in self.index.postings_for(term).items():
                data = self.index.metadata_for(document_id)
                if predicate(document_id, data.status, data.rating):
                    relevance[document_id] = relevance.get(document_id, 0.0) + tf_idf(term_freq, idf)

        for term in query.sorted_minus_terms():
            for document_id in self.index.postings_for(term):
                relevance.pop(document_id, None)

        return [
            ScoredDocument(
                id=document_id,
                relevance=relevance[document_id],
                rating=self.index.metadata_for(document_id).rating,
            )
            for document_id in sorted(relevance)
        ]

    def rank(self, documents: list[ScoredDocument], limit: int | None = None) -> list[ScoredDocument]:
        limit = self.max_results if limit is None else limit
        if limit <= 0:
            return []
        return sorted(documents, key=self._sort_key)[:limit]

    def find_top_documents(
        self,
        query: Query,
        predicate: DocumentPredicate,
        *,
        limit: int | None = None,
    ) -> list[ScoredDocument]:
        matched = self.find_all_documents(query, predicate)
        ranked = self.rank(matched, limit)
        logger.debug(
            "Ranked %d of %d matching documents for %d plus / %d minus terms",
            len(ranked),
            len(matched),
            len(query.plus_terms),
            len(query.minus_terms),
        )
        return ranked
