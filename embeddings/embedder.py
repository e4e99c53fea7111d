"""
Embedding providers for the semantic splitter.

The splitter depends only on the EmbeddingProvider protocol: one blocking
batch call that returns one vector per input sentence, in input order.

CRITICAL: All vectors for one document must come from the same model.
Mixing models makes adjacent-sentence similarity meaningless.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Protocol, Sequence

import numpy as np

if TYPE_CHECKING:
    from sentence_transformers import SentenceTransformer

logger = logging.getLogger(__name__)


class EmbeddingProvider(Protocol):
    """Batch sentence embedder consumed by the splitter."""

    def embed_all(self, sentences: List[str]) -> Sequence[Sequence[float]]:
        """Return one vector per sentence, same order, uniform dimension."""
        ...


@dataclass
class EmbeddingConfig:
    """Sentence embedding model settings."""

    model_name: str = "all-MiniLM-L6-v2"
    normalize: bool = True
    max_seq_length: int = 512


class EmbeddingService:
    """
    sentence-transformers embedding provider.

    Usage:
        service = EmbeddingService()
        vectors = service.embed_all(["First sentence.", "Second one."])

        # Different model
        service = EmbeddingService(EmbeddingConfig(model_name="bge-small-en-v1.5"))
    """

    def __init__(self, config: Optional[EmbeddingConfig] = None):
        self.config = config or EmbeddingConfig()
        self._model: Optional["SentenceTransformer"] = None

    @property
    def model(self) -> "SentenceTransformer":
        """Lazy load the model."""
        if self._model is None:
            from sentence_transformers import SentenceTransformer  # lazy import

            logger.info(f"Loading embedding model: {self.config.model_name}")
            self._model = SentenceTransformer(self.config.model_name)
        return self._model

    def preprocess_text(self, text: str) -> str:
        """
        Deterministic text preprocessing.

        The same sentence must always map to the same vector.
        """
        text = " ".join(text.split())

        max_chars = self.config.max_seq_length * 4  # Approximate
        if len(text) > max_chars:
            text = text[:max_chars]

        return text

    def embed_all(self, sentences: List[str]) -> List[np.ndarray]:
        """
        Embed sentences in one batch.

        Args:
            sentences: Sentences in document order

        Returns:
            One vector per sentence, same order
        """
        processed = [self.preprocess_text(s) for s in sentences]
        vectors = self.model.encode(processed, convert_to_numpy=True)

        # Unit length; zero vectors stay zero
        if self.config.normalize:
            norms = np.linalg.norm(vectors, axis=1, keepdims=True)
            vectors = vectors / (norms + 1e-10)

        logger.debug(f"Embedded {len(processed)} sentences with {self.config.model_name}")
        return list(vectors)


# Global embedding service instance
_embedding_service: Optional[EmbeddingService] = None


def get_embedding_service(config: Optional[EmbeddingConfig] = None) -> EmbeddingService:
    """
    Get or create the global embedding service.

    Args:
        config: Optional custom configuration

    Returns:
        EmbeddingService instance
    """
    global _embedding_service
    if _embedding_service is None or config is not None:
        _embedding_service = EmbeddingService(config)
    return _embedding_service
