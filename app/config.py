"""
Application Configuration.

Pydantic settings for type-safe environment configuration.
Comparison thresholds are tunable here without code changes.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from conflict_checker.comparison.schemas import (
    CONFLICT_THRESHOLD,
    MATCH_THRESHOLD,
    MIN_SENTENCE_LENGTH,
    ComparisonThresholds,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Comparison Policy ===
    match_threshold: float = Field(
        default=MATCH_THRESHOLD,
        description="Similarity at or above which two sentences match",
    )
    conflict_threshold: float = Field(
        default=CONFLICT_THRESHOLD,
        description="Similarity at or above which two sentences conflict",
    )
    min_sentence_length: int = Field(
        default=MIN_SENTENCE_LENGTH,
        description="Sentences of this many characters or fewer are ignored",
    )

    # === Uploads ===
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum size of a single uploaded document",
    )

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    # === API Configuration ===
    api_host: str = Field(
        default="0.0.0.0",
        description="API host to bind to",
    )
    api_port: int = Field(
        default=8000,
        description="API port to bind to",
    )

    def thresholds(self) -> ComparisonThresholds:
        """Build the comparator policy from these settings."""
        return ComparisonThresholds(
            match_threshold=self.match_threshold,
            conflict_threshold=self.conflict_threshold,
            min_sentence_length=self.min_sentence_length,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
