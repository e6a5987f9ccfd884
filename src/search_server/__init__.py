"""In-memory TF-IDF search server."""

from search_server.domain import (
    DocumentNotFoundError,
    DocumentPredicate,
    DocumentStatus,
    DuplicateDocumentError,
    InvalidQueryError,
    MatchResult,
    ScoredDocument,
    SearchServerError,
)
from search_server.server import SearchServer, status_predicate


__all__ = [
    "DocumentNotFoundError",
    "DocumentPredicate",
    "DocumentStatus",
    "DuplicateDocumentError",
    "InvalidQueryError",
    "MatchResult",
    "ScoredDocument",
    "SearchServer",
    "SearchServerError",
    "status_predicate",
]
