"""Domain model - value objects shared by the index, ranking and matching.

Value objects are immutable. Documents are owned by the index and never
change after insertion, so their metadata is frozen as well.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class DocumentStatus(str, Enum):
    """Lifecycle status attached to a document at insertion time."""

    ACTUAL = "actual"
    IRRELEVANT = "irrelevant"
    BANNED = "banned"
    REMOVED = "removed"


DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
"""Filter applied to ``(document_id, status, rating)`` during ranking."""


@dataclass(frozen=True, slots=True)
class DocumentData:
    """Per-document metadata stored next to the postings."""

    rating: int
    status: DocumentStatus


@dataclass(frozen=True, slots=True)
class ScoredDocument:
    """A ranked search hit produced by a query."""

    id: int
    relevance: float
    rating: int

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


class MatchResult(NamedTuple):
    """Plus terms of a query found in one document, plus that document's status."""

    terms: tuple[str, ...]
    status: DocumentStatus
