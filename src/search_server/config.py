"""Centralized configuration for search-server using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from search_server.search.analyzers import split_into_words
from search_server.search.ranking import MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``SEARCH_SERVER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    stop_words: str = Field(default="", description="Space separated stop words applied at construction")
    max_result_document_count: int = Field(
        default=MAX_RESULT_DOCUMENT_COUNT, ge=1, description="Maximum results returned per query"
    )
    relevance_epsilon: float = Field(
        default=RELEVANCE_EPSILON,
        gt=0.0,
        description="Relevances closer than this are ranked as equal and ordered by rating",
    )

    def get_stop_words(self) -> list[str]:
        return split_into_words(self.stop_words)
