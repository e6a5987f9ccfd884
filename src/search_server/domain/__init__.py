"""Domain layer: value objects and errors with no infrastructure dependencies."""

from search_server.domain.errors import (
    DocumentNotFoundError,
    DuplicateDocumentError,
    InvalidQueryError,
    SearchServerError,
)
from search_server.domain.model import DocumentData, DocumentPredicate, DocumentStatus, MatchResult, ScoredDocument


__all__ = [
    "DocumentData",
    "DocumentNotFoundError",
    "DocumentPredicate",
    "DocumentStatus",
    "DuplicateDocumentError",
    "InvalidQueryError",
    "MatchResult",
    "ScoredDocument",
    "SearchServerError",
]
