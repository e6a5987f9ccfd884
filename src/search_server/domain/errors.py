"""Errors raised at the search server API boundary.

Every error is a local, recoverable condition. They are raised before the
index is mutated, so a failed call leaves the server exactly as it was.
"""

from __future__ import annotations


class SearchServerError(Exception):
    """Base error for the search server domain."""


class DuplicateDocumentError(SearchServerError, ValueError):
    """Raised when a document id is inserted twice."""

    def __init__(self, document_id: int) -> None:
        self.document_id = document_id
        super().__init__(f"Document {document_id} is already indexed")


class InvalidQueryError(SearchServerError, ValueError):
    """Raised when a query word cannot be classified."""

    def __init__(self, word: str, reason: str) -> None:
        self.word = word
        self.reason = reason
        super().__init__(f"Invalid query word {word!r}: {reason}")


class DocumentNotFoundError(SearchServerError, KeyError):
    """Raised when a document id is not present in the index."""

    def __init__(self, document_id: int) -> None:
        self.document_id = document_id
        super().__init__(document_id)

    def __str__(self) -> str:
        return f"Document {self.document_id} is not indexed"
