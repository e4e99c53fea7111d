"""
Embeddings Module.

This module handles:
- The EmbeddingProvider contract consumed by the splitter
- Sentence embedding with sentence-transformers
- Exact cosine similarity between adjacent sentence vectors

Usage:
    from embeddings import get_embedding_service, cosine_similarity

    service = get_embedding_service()
    a, b = service.embed_all(["text1", "text2"])
    score = cosine_similarity(a, b)
"""

from .embedder import (
    EmbeddingConfig,
    EmbeddingProvider,
    EmbeddingService,
    get_embedding_service,
)
from .similarity import cosine_similarity

__all__ = [
    "EmbeddingProvider",
    "EmbeddingService",
    "EmbeddingConfig",
    "get_embedding_service",
    "cosine_similarity",
]
