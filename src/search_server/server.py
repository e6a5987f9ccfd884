"""Search server facade.

``SearchServer`` is the single entry point callers use. It owns the
stop-word set and the inverted index and delegates to the query parser, the ranking engine and the matcher.

The server is not thread-safe. Insertion updates postings and metadata
non-atomically, so concurrent use needs one exclusive-write lock around
the whole instance.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
import logging

from search_server.config import Settings
from search_server.domain.model import DocumentPredicate, DocumentStatus, MatchResult, ScoredDocument
from search_server.search.analyzers import DocumentAnalyzer, StopFilter, split_into_words
from search_server.search.index import InvertedIndex
from search_server.search.matcher import match_document
from search_server.search.query import QueryParser
from search_server.search.ranking import RankingEngine


logger = logging.getLogger(__name__)


def status_predicate(status: DocumentStatus) -> DocumentPredicate:
    """Return a predicate accepting only documents with ``status``."""

    def predicate(document_id: int, document_status: DocumentStatus, rating: int) -> bool:
        return document_status == status

    return predicate


class SearchServer:
    """In-memory TF-IDF search over short text documents."""

    def __init__(self, stop_words: str | Iterable[str] | None = None, *, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self._stop_filter = StopFilter()
        self._analyzer = DocumentAnalyzer(self._stop_filter)
        self._parser = QueryParser(self._stop_filter)
        self._index = InvertedIndex()
        self._ranking = RankingEngine(
            self._index,
            max_results=self.settings.max_result_document_count,
            relevance_epsilon=self.settings.relevance_epsilon,
        )

        self._stop_filter.update(self.settings.get_stop_words())
        if stop_words is not None:
            self.set_stop_words(stop_words)

    def set_stop_words(self, text: str | Iterable[str]) -> None:
        """Add stop words; a string is split on spaces.

        Only documents and queries processed afterwards are affected.
        """

        words = split_into_words(text) if isinstance(text, str) else [word for word in text if word]
        self._stop_filter.update(words)
        if self._index.document_count():
            logger.warning(
                "Stop words changed after %d documents were indexed; existing postings are kept",
                self._index.document_count(),
            )

    @property
    def stop_words(self) -> frozenset[str]:
        return frozenset(self._stop_filter.stopwords)

    def add_document(
        self,
        document_id: int,
        text: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        """Index ``text`` under ``document_id``.

        Raises:
            DuplicateDocumentError: ``document_id`` is already indexed.
        """

        self._index.add_document(document_id, self._analyzer.terms(text), DocumentStatus(status), list(ratings))

    def find_top_documents(
        self,
        raw_query: str,
        status_or_predicate: DocumentStatus | str | DocumentPredicate = DocumentStatus.ACTUAL,
        *,
        limit: int | None = None,
    ) -> list[ScoredDocument]:
        """Return up to ``limit`` (default from settings) best documents for ``raw_query``.

        ``status_or_predicate`` is either a status (or its string value) the
        documents must have or a callable ``(document_id, status, rating) -> bool``.

        Raises:
            InvalidQueryError: the query holds a lone minus sign.
            ValueError: a string status is not a known status value.
        """

        if isinstance(status_or_predicate, str):
            predicate = status_predicate(DocumentStatus(status_or_predicate))
        else:
            predicate = status_or_predicate

        query = self._parser.parse(raw_query)
        return self._ranking.find_top_documents(query, predicate, limit=limit)

    def get_document_count(self) -> int:
        return self._index.document_count()

    def get_document_id(self, index: int) -> int:
        """Return the id of the ``index``-th inserted document."""

        return self._index.document_id_at(index)

    def match_document(self, raw_query: str, document_id: int) -> MatchResult:
        """Return the query's plus terms found in the document, and its status.

        Raises:
            DocumentNotFoundError: ``document_id`` is not indexed.
            InvalidQueryError: the query holds a malformed minus word.
        """

        query = self._parser.parse(raw_query)
        return match_document(self._index, query, document_id)

    def __len__(self) -> int:
        return self._index.document_count()

    def __iter__(self) -> Iterator[int]:
        return iter(self._index)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._index
