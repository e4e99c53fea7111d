"""
Chunk quality evaluation tools.

Helps tune splitter parameters by measuring:
- Chunk size distribution (characters, optionally tokens)
- Size limit violations
- Chunk coherence (semantic consistency)
- Partition integrity against the source text
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
import tiktoken

from embeddings.similarity import cosine_similarity
from shared.schemas import SplitterConfig

from .semantic_chunker import Chunk
from .sentence_splitter import split_into_sentences

logger = logging.getLogger(__name__)

_enc = None


def num_tokens(text: str) -> int:
    """Count tokens using cl100k_base encoding."""
    global _enc
    if _enc is None:
        _enc = tiktoken.get_encoding("cl100k_base")
    return len(_enc.encode(text))


@dataclass
class ChunkQualityReport:
    """Report on chunk quality metrics."""

    total_chunks: int
    avg_chars: float
    min_chars: int
    max_chars: int
    std_chars: float
    avg_coherence: float
    chunks_too_small: int  # Below min_chunk_size_in_chars
    chunks_too_large: int  # Multi-sentence chunks above max_chunk_size_in_chars
    oversized_sentences: int  # Single sentences above max, accepted
    avg_tokens: Optional[float] = None
    recommendations: List[str] = field(default_factory=list)


def compute_chunk_coherence(chunk_text: str, embedding_provider=None) -> float:
    """
    Compute semantic coherence within a chunk.

    Mean cosine similarity of adjacent sentences. Low coherence suggests
    the threshold is too low to catch topic shifts.

    Args:
        chunk_text: Text of the chunk
        embedding_provider: Optional EmbeddingProvider

    Returns:
        Coherence score
    """
    sentences = [s.text for s in split_into_sentences(chunk_text)]

    if len(sentences) < 2:
        return 1.0  # Single sentence is coherent by definition

    if embedding_provider is None:
        return _lexical_coherence(sentences)

    try:
        vectors = embedding_provider.embed_all(sentences)
        similarities = [
            cosine_similarity(vectors[i], vectors[i + 1])
            for i in range(len(vectors) - 1)
        ]
        return float(np.mean(similarities)) if similarities else 1.0

    except Exception as e:
        logger.warning(f"Semantic coherence failed: {e}")
        return _lexical_coherence(sentences)


def _lexical_coherence(sentences: List[str]) -> float:
    """Simple lexical overlap coherence."""
    if len(sentences) < 2:
        return 1.0

    overlaps = []
    for i in range(len(sentences) - 1):
        words1 = set(sentences[i].lower().split())
        words2 = set(sentences[i + 1].lower().split())

        if words1 and words2:
            overlap = len(words1 & words2) / min(len(words1), len(words2))
            overlaps.append(overlap)

    return float(np.mean(overlaps)) if overlaps else 0.5


def check_partition(text: str, chunks: List[Chunk]) -> bool:
    """
    Check that chunks hold every sentence of text exactly once, in order.
    """
    expected = [s.text for s in split_into_sentences(text)]
    actual = [s.text for c in chunks for s in split_into_sentences(c.text)]
    return expected == actual


def evaluate_chunk_quality(
    chunks: List[Chunk],
    config: SplitterConfig,
    embedding_provider=None,
    count_tokens: bool = False,
    sample_size: int = 10,
    seed: int = 0,
) -> ChunkQualityReport:
    """
    Evaluate overall chunking quality.

    Args:
        chunks: Chunks produced by the splitter
        config: Limits the chunks were produced with
        embedding_provider: For semantic coherence
        count_tokens: Also report average tiktoken count
        sample_size: Chunks sampled for coherence
        seed: Sampling seed

    Returns:
        ChunkQualityReport with metrics and recommendations
    """
    if not chunks:
        return ChunkQualityReport(
            total_chunks=0,
            avg_chars=0,
            min_chars=0,
            max_chars=0,
            std_chars=0,
            avg_coherence=0,
            chunks_too_small=0,
            chunks_too_large=0,
            oversized_sentences=0,
            recommendations=["No chunks to evaluate"],
        )

    char_counts = [len(c.text) for c in chunks]

    avg_chars = float(np.mean(char_counts))
    min_chars = int(np.min(char_counts))
    max_chars = int(np.max(char_counts))
    std_chars = float(np.std(char_counts))

    too_small = sum(1 for n in char_counts if n < config.min_chunk_size_in_chars)
    too_large = sum(
        1
        for c in chunks
        if len(c.text) > config.max_chunk_size_in_chars and c.sentence_count > 1
    )
    oversized = sum(
        1
        for c in chunks
        if len(c.text) > config.max_chunk_size_in_chars and c.sentence_count == 1
    )

    avg_tokens = None
    if count_tokens:
        avg_tokens = float(np.mean([num_tokens(c.text) for c in chunks]))

    rng = np.random.default_rng(seed)
    sample_indices = rng.choice(len(chunks), min(sample_size, len(chunks)), replace=False)
    coherence_scores = [
        compute_chunk_coherence(chunks[idx].text, embedding_provider)
        for idx in sorted(sample_indices)
    ]
    avg_coherence = float(np.mean(coherence_scores))

    recommendations = []

    if too_small > len(chunks) * 0.1:
        recommendations.append(
            f"Consider lowering min_chunk_size_in_chars. {too_small} chunks "
            f"({too_small/len(chunks)*100:.0f}%) are below "
            f"{config.min_chunk_size_in_chars} chars."
        )

    if too_large:
        recommendations.append(
            f"{too_large} multi-sentence chunks exceed "
            f"{config.max_chunk_size_in_chars} chars. Chunks were not produced "
            "with this config."
        )

    if oversized > len(chunks) * 0.1:
        recommendations.append(
            f"{oversized} single sentences exceed {config.max_chunk_size_in_chars} "
            "chars. Consider raising max_chunk_size_in_chars."
        )

    if avg_coherence < 0.5:
        recommendations.append(
            f"Low coherence score ({avg_coherence:.2f}). "
            "Chunks may span unrelated topics. Consider raising similarity_threshold."
        )

    if not recommendations:
        recommendations.append("Chunking quality looks good!")

    return ChunkQualityReport(
        total_chunks=len(chunks),
        avg_chars=avg_chars,
        min_chars=min_chars,
        max_chars=max_chars,
        std_chars=std_chars,
        avg_coherence=avg_coherence,
        chunks_too_small=too_small,
        chunks_too_large=too_large,
        oversized_sentences=oversized,
        avg_tokens=avg_tokens,
        recommendations=recommendations,
    )
