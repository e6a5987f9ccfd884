"""Query parsing: plus and minus terms.

A query is a space separated list of words. ``-word`` means the document
must not contain ``word``; any other word is a plus term that contributes
to relevance. Stop words are dropped from both sides.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging

from search_server.domain.errors import InvalidQueryError
from search_server.search.analyzers import StopFilter, split_into_words


logger = logging.getLogger(__name__)

MINUS_PREFIX = "-"


@dataclass(frozen=True, slots=True)
class Query:
    """Immutable, de-duplicated view of a parsed query."""

    plus_terms: frozenset[str] = frozenset()
    minus_terms: frozenset[str] = frozenset()

    def sorted_plus_terms(self) -> list[str]:
        return sorted(self.plus_terms)

    def sorted_minus_terms(self) -> list[str]:
        return sorted(self.minus_terms)

    def is_empty(self) -> bool:
        return not self.plus_terms and not self.minus_terms


@dataclass(frozen=True, slots=True)
class QueryWord:
    text: str
    is_minus: bool
    is_stop: bool


class QueryParser:
    """Classify raw query words against the current stop-word set."""

    def __init__(self, stop_filter: StopFilter) -> None:
        self.stop_filter = stop_filter

    def parse_word(self, word: str) -> QueryWord:
        is_minus = word.startswith(MINUS_PREFIX)
        text = word[len(MINUS_PREFIX) :] if is_minus else word
        if is_minus and not text:
            raise InvalidQueryError(word, "minus sign without a term")

        return QueryWord(text=text, is_minus=is_minus, is_stop=self.stop_filter.is_stop_word(text))

    def parse(self, raw_query: str) -> Query:
        plus_terms: set[str] = set()
        minus_terms: set[str] = set()
        for word in split_into_words(raw_query):
            query_word = self.parse_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                minus_terms.add(query_word.text)
            else:
                plus_terms.add(query_word.text)

        query = Query(plus_terms=frozenset(plus_terms), minus_terms=frozenset(minus_terms))
        if query.is_empty() and raw_query.strip():
            logger.warning("Query %r has no terms left after stop-word removal", raw_query)
        return query
