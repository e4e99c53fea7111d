"""
Semantic chunking along embedding-similarity boundaries.

Sentences are grouped left to right. Before each sentence (from the
second on) the current chunk is closed if:
- the similarity to the previous sentence drops below the threshold and
  the chunk already holds at least min_chunk_size_in_chars characters, or
- appending the sentence would push the chunk past max_chunk_size_in_chars.

A single sentence longer than the maximum is never cut; it becomes its
own oversized chunk.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from embeddings.embedder import EmbeddingProvider
from embeddings.similarity import cosine_similarity
from shared.errors import InvalidConfiguration, ProviderFailure
from shared.schemas import SplitterConfig, build_splitter_config

from .sentence_splitter import Sentence, split_into_sentences

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Document:
    """A document to split."""

    text: str
    metadata: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Chunk:
    """A run of consecutive sentences with the source document's metadata."""

    text: str
    metadata: Dict[str, str]
    chunk_index: int = 0
    sentence_count: int = 1


class DocumentSplitter(Protocol):
    def split(self, document: Document) -> List[Chunk]: ...


def semantic_chunk(
    sentences: List[Sentence],
    embeddings: Sequence[Sequence[float]],
    config: SplitterConfig,
    metadata: Optional[Dict[str, str]] = None,
) -> List[Chunk]:
    """
    Group sentences into chunks using adjacent similarity and size limits.

    Args:
        sentences: Sentences in document order
        embeddings: One vector per sentence, aligned with sentences
        config: Threshold and size limits
        metadata: Document metadata copied onto every chunk

    Returns:
        List of chunks partitioning the sentences
    """
    metadata = metadata or {}
    chunks: List[Chunk] = []
    current: List[str] = []
    current_chars = 0

    for i, sentence in enumerate(sentences):
        sentence_length = len(sentence.text)
        should_split = False

        # Semantic boundary (from the second sentence on)
        if i > 0:
            similarity = cosine_similarity(embeddings[i - 1], embeddings[i])
            if (
                similarity < config.similarity_threshold
                and current_chars >= config.min_chunk_size_in_chars
            ):
                should_split = True

        # Size overflow, +1 for the joining space
        added_length = sentence_length + (1 if current_chars > 0 else 0)
        if current_chars > 0 and current_chars + added_length > config.max_chunk_size_in_chars:
            should_split = True

        if should_split:
            chunks.append(_finalize_chunk(current, metadata, len(chunks)))
            current = []
            current_chars = 0

        if current_chars > 0:
            current_chars += 1
        current.append(sentence.text)
        current_chars += sentence_length

    if current_chars > 0:
        chunks.append(_finalize_chunk(current, metadata, len(chunks)))

    return chunks


def _finalize_chunk(sentences: List[str], metadata: Dict[str, str], index: int) -> Chunk:
    """Create a Chunk from accumulated sentence texts."""
    return Chunk(
        text=" ".join(sentences).strip(),
        metadata=dict(metadata),
        chunk_index=index,
        sentence_count=len(sentences),
    )


class SemanticDocumentSplitter:
    """
    Splits documents into semantically coherent chunks.

    One embedding batch call per multi-sentence document; no state is kept
    between calls, so one instance can serve concurrent callers.

    Usage:
        splitter = SemanticDocumentSplitter(get_embedding_service())
        chunks = splitter.split(Document(text, {"file_name": "a.txt"}))

        # With explicit limits
        splitter = SemanticDocumentSplitter(
            provider,
            similarity_threshold=0.8,
            min_chunk_size_in_chars=50,
            max_chunk_size_in_chars=500,
        )
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        similarity_threshold: Optional[float] = None,
        min_chunk_size_in_chars: Optional[int] = None,
        max_chunk_size_in_chars: Optional[int] = None,
        config: Optional[SplitterConfig] = None,
    ):
        """
        Args:
            embedding_provider: Batch sentence embedder (must not be None)
            similarity_threshold: Split below this similarity, in [0.0, 1.0] (default 0.75)
            min_chunk_size_in_chars: Minimum chunk size before a semantic split (default 100)
            max_chunk_size_in_chars: Maximum chunk size, > min_chunk_size_in_chars (default 300)
            config: Prebuilt config; cannot be combined with the three values above

        Raises:
            InvalidConfiguration: If any setting is out of range, or if config
                is passed together with explicit values
        """
        if embedding_provider is None:
            raise InvalidConfiguration("embedding_provider must not be None")

        values = {
            "similarity_threshold": similarity_threshold,
            "min_chunk_size_in_chars": min_chunk_size_in_chars,
            "max_chunk_size_in_chars": max_chunk_size_in_chars,
        }
        values = {k: v for k, v in values.items() if v is not None}

        if config is not None and values:
            raise InvalidConfiguration(
                f"Pass either config or explicit settings, not both: {sorted(values)}"
            )

        self.embedding_provider = embedding_provider
        self.config = config if config is not None else build_splitter_config(**values)

    def split(self, document: Document) -> List[Chunk]:
        """
        Split one document.

        Args:
            document: Document with text and metadata

        Returns:
            Ordered chunks; empty for a blank document

        Raises:
            ProviderFailure: If the provider returns the wrong number of vectors
            DimensionMismatch: If adjacent vectors differ in length
        """
        sentences = split_into_sentences(document.text)

        if not sentences:
            return []

        if len(sentences) == 1:
            return [_finalize_chunk([sentences[0].text], document.metadata, 0)]

        texts = [s.text for s in sentences]
        embeddings = self.embedding_provider.embed_all(texts)

        if embeddings is None or len(embeddings) != len(texts):
            got = 0 if embeddings is None else len(embeddings)
            raise ProviderFailure(
                f"Embedding provider returned {got} vectors for {len(texts)} sentences"
            )

        logger.debug(f"Embedding count: {len(embeddings)}")
        logger.debug(f"First vector length: {len(embeddings[0])}")

        chunks = semantic_chunk(sentences, embeddings, self.config, document.metadata)

        logger.info(
            f"Document split into {len(chunks)} chunks from {len(sentences)} sentences"
        )
        return chunks

    def split_all(self, documents: Iterable[Document]) -> List[Chunk]:
        """Split documents in order and concatenate their chunks."""
        chunks: List[Chunk] = []
        for document in documents:
            chunks.extend(self.split(document))
        return chunks


def chunk_document(
    text: str,
    embedding_provider: EmbeddingProvider,
    metadata: Optional[Dict[str, str]] = None,
    config: Optional[SplitterConfig] = None,
) -> List[Chunk]:
    """
    Convenience wrapper: split raw text with default or given limits.

    Example:
        >>> chunks = chunk_document(text, service, {"file_name": "notes.md"})
        >>> for chunk in chunks:
        ...     print(f"Chunk {chunk.chunk_index}: {len(chunk.text)} chars")
    """
    splitter = SemanticDocumentSplitter(embedding_provider, config=config)
    return splitter.split(Document(text=text, metadata=dict(metadata or {})))
