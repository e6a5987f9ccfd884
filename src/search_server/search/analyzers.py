"""Analyzer utilities for the search server.

Text is turned into terms by a composable tokenizer/filter pipeline. The
only separator is the ASCII space; terms are case-sensitive and are never
stemmed, so a term is exactly the run of characters the caller wrote.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol


class Tokenizer(Protocol):
    """Protocol implemented by tokenizers."""

    def __call__(self, text: str) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


class TokenFilter(Protocol):
    """Protocol implemented by token filters."""

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


class WhitespaceTokenizer:
    """Splits text on single spaces, skipping the empty runs between them."""

    def __call__(self, text: str) -> Iterator[str]:
        for word in text.split(" "):
            if word:
                yield word


def split_into_words(text: str) -> list[str]:
    """Return the space separated words of ``text`` in order."""

    return list(WhitespaceTokenizer()(text))


class StopFilter:
    """Removes stop words from the stream.

    Membership is exact and case-sensitive. The set only grows: words added
    later apply to text analyzed afterwards, never to terms already indexed.
    """

    def __init__(self, stopwords: Iterable[str] | None = None) -> None:
        self.stopwords: set[str] = set()
        if stopwords is not None:
            self.update(stopwords)

    def update(self, words: Iterable[str]) -> None:
        self.stopwords.update(word for word in words if word)

    def is_stop_word(self, word: str) -> bool:
        return word in self.stopwords

    def remove_stop_words(self, words: Iterable[str]) -> list[str]:
        return [word for word in words if word not in self.stopwords]

    def __call__(self, tokens: Iterable[str]) -> Iterator[str]:
        for token in tokens:
            if token not in self.stopwords:
                yield token

    def __len__(self) -> int:
        return len(self.stopwords)


class AnalyzerPipeline:
    """Composable analyzer pipeline (tokenizer + filters)."""

    def __init__(self, tokenizer: Tokenizer, filters: Sequence[TokenFilter] | None = None) -> None:
        self.tokenizer = tokenizer
        self.filters = list(filters or [])

    def __call__(self, text: str) -> list[str]:
        stream: Iterable[str] = self.tokenizer(text)
        for token_filter in self.filters:
            stream = token_filter(stream)
        return list(stream)


class DocumentAnalyzer:
    """Default analyzer for document text: whitespace split, then stop words."""

    def __init__(self, stop_filter: StopFilter) -> None:
        self.stop_filter = stop_filter
        self.pipeline = AnalyzerPipeline(WhitespaceTokenizer(), [stop_filter])

    def terms(self, text: str) -> list[str]:
        return self.pipeline(text)
