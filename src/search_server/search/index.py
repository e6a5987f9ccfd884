"""In-memory inverted index.

Two complementary maps hold the whole corpus:

- ``term -> {document_id: term_frequency}`` (the postings)
- ``document_id -> DocumentData`` (rating and status)

Neither side points back at the other; lookups go through the ids. The
index is append-only: documents are never removed or re-indexed.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator, Mapping, Sequence
import logging
from types import MappingProxyType

from search_server.domain.errors import DocumentNotFoundError, DuplicateDocumentError
from search_server.domain.model import DocumentData, DocumentStatus
from search_server.search.stats import term_frequencies


logger = logging.getLogger(__name__)

_NO_POSTINGS: Mapping[int, float] = MappingProxyType({})


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Average of ``ratings`` with integer division truncating toward zero.

    ``[1, 2]`` gives 1 and ``[-1, -2]`` gives -1. An empty list gives 0.
    """

    if not ratings:
        return 0
    total = sum(ratings)
    quotient = abs(total) // len(ratings)
    return quotient if total >= 0 else -quotient


class InvertedIndex:
    """Postings and per-document metadata for one search server."""

    def __init__(self) -> None:
        self._postings: defaultdict[str, dict[int, float]] = defaultdict(dict)
        self._documents: dict[int, DocumentData] = {}
        self._insertion_order: list[int] = []

    def add_document(
        self,
        document_id: int,
        terms: Sequence[str],
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> DocumentData:
        """Index ``terms`` (stop words already removed) under ``document_id``."""

        if document_id in self._documents:
            raise DuplicateDocumentError(document_id)

        for term, frequency in term_frequencies(terms).items():
            self._postings[term][document_id] = frequency

        data = DocumentData(rating=compute_average_rating(ratings), status=status)
        self._documents[document_id] = data
        self._insertion_order.append(document_id)
        logger.debug(
            "Indexed document %s with %d terms (%d distinct)",
            document_id,
            len(terms),
            len(set(terms)),
        )
        return data

    def document_count(self) -> int:
        return len(self._documents)

    def document_frequency(self, term: str) -> int:
        postings = self._postings.get(term)
        return len(postings) if postings else 0

    def postings_for(self, term: str) -> Mapping[int, float]:
        """Return a read-only ``document_id -> term_frequency`` view for ``term``."""

        postings = self._postings.get(term)
        if not postings:
            return _NO_POSTINGS
        return MappingProxyType(postings)

    def metadata_for(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError:
            raise DocumentNotFoundError(document_id) from None

    def contains(self, document_id: int) -> bool:
        return document_id in self._documents

    def document_ids(self) -> list[int]:
        """Indexed ids in ascending order."""

        return sorted(self._documents)

    def document_id_at(self, index: int) -> int:
        """Return the id inserted ``index``-th (0-based); raises IndexError when out of range."""

        if index < 0:
            raise IndexError(f"Document index must be non-negative, got {index}")
        return self._insertion_order[index]

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __iter__(self) -> Iterator[int]:
        return iter(self.document_ids())

    def __len__(self) -> int:
        return len(self._documents)
