"""
Configuration module for the semantic splitter.
Reads settings from environment variables.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache

from .schemas import SplitterConfig, build_splitter_config


@dataclass
class Settings:
    """Application settings loaded from environment."""

    # Document loading
    DOCS_PATH: str = field(default_factory=lambda: os.getenv("DOCS_PATH", "./docs"))
    INCLUDE_FILE_NAME: bool = field(
        default_factory=lambda: os.getenv("INCLUDE_FILE_NAME", "true").lower() == "true"
    )

    # Embedding model
    EMBEDDING_MODEL: str = field(
        default_factory=lambda: os.getenv("EMBEDDING_MODEL", "all-MiniLM-L6-v2")
    )

    # Splitter
    SIMILARITY_THRESHOLD: float = field(
        default_factory=lambda: float(os.getenv("SIMILARITY_THRESHOLD", "0.75"))
    )
    MIN_CHUNK_SIZE_IN_CHARS: int = field(
        default_factory=lambda: int(os.getenv("MIN_CHUNK_SIZE_IN_CHARS", "100"))
    )
    MAX_CHUNK_SIZE_IN_CHARS: int = field(
        default_factory=lambda: int(os.getenv("MAX_CHUNK_SIZE_IN_CHARS", "300"))
    )

    # Application settings
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    def get_splitter_config(self) -> SplitterConfig:
        """Validated splitter config; raises InvalidConfiguration."""
        return build_splitter_config(
            similarity_threshold=self.SIMILARITY_THRESHOLD,
            min_chunk_size_in_chars=self.MIN_CHUNK_SIZE_IN_CHARS,
            max_chunk_size_in_chars=self.MAX_CHUNK_SIZE_IN_CHARS,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
