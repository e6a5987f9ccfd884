"""Report which plus terms of a query a single document matches."""

from __future__ import annotations

from search_server.domain.model import MatchResult
from search_server.search.index import InvertedIndex
from search_server.search.query import Query


def match_document(index: InvertedIndex, query: Query, document_id: int) -> MatchResult:
    """Return the plus terms found in ``document_id`` in lexicographic order.

    A single minus term present in the document empties the list. Raises
    ``DocumentNotFoundError`` when the id is not indexed.
    """

    status = index.metadata_for(document_id).status

    for term in query.sorted_minus_terms():
        if document_id in index.postings_for(term):
            return MatchResult(terms=(), status=status)

    matched = tuple(term for term in query.sorted_plus_terms() if document_id in index.postings_for(term))
    return MatchResult(terms=matched, status=status)
