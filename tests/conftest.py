"""Shared test fixtures and configuration."""

import os

import pytest

from search_server.domain.model import DocumentStatus
from search_server.server import SearchServer


ENV_PREFIX = "SEARCH_SERVER_"

# Ten one-word documents that never match the "cat" fixtures below.
FILLER_WORDS = [
    "generation",
    "bake",
    "quarrel",
    "ferry",
    "biscuit",
    "table",
    "bother",
    "guideline",
    "duty",
    "first",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop SEARCH_SERVER_* variables so Settings always starts from defaults."""
    for key in list(os.environ):
        if key.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def filler_words() -> list[str]:
    return list(FILLER_WORDS)


@pytest.fixture
def server() -> SearchServer:
    return SearchServer()


@pytest.fixture
def cat_server() -> SearchServer:
    """Four documents sharing 'The cat' prefixes, ids 42..45, rating 1."""
    server = SearchServer()
    server.add_document(42, "The cat in the city", DocumentStatus.ACTUAL, [1])
    server.add_document(43, "The cat in the", DocumentStatus.ACTUAL, [1])
    server.add_document(44, "The cat in", DocumentStatus.ACTUAL, [1])
    server.add_document(45, "The", DocumentStatus.ACTUAL, [1])
    return server


@pytest.fixture
def status_server() -> SearchServer:
    """One 'cat' document per status, ids 42..45."""
    server = SearchServer()
    server.add_document(42, "The cat in the city", DocumentStatus.ACTUAL, [1])
    server.add_document(43, "The cat in the", DocumentStatus.BANNED, [1])
    server.add_document(44, "The cat in", DocumentStatus.IRRELEVANT, [1])
    server.add_document(45, "The cat", DocumentStatus.REMOVED, [1])
    return server
