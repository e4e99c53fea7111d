"""
Semantic Chunking Module.

Splits documents into chunks of consecutive sentences, closing a chunk
where adjacent-sentence embedding similarity drops below a threshold or
where the chunk would outgrow its character budget.

Usage:
    from chunking import Document, SemanticDocumentSplitter

    splitter = SemanticDocumentSplitter(provider, similarity_threshold=0.75)
    chunks = splitter.split(Document(text, {"file_name": "notes.md"}))
"""

from .chunk_eval_tools import (
    ChunkQualityReport,
    check_partition,
    compute_chunk_coherence,
    evaluate_chunk_quality,
)
from .semantic_chunker import (
    Chunk,
    Document,
    DocumentSplitter,
    SemanticDocumentSplitter,
    chunk_document,
    semantic_chunk,
)
from .sentence_splitter import Sentence, split_into_sentences

__all__ = [
    "SemanticDocumentSplitter",
    "DocumentSplitter",
    "Document",
    "Chunk",
    "semantic_chunk",
    "chunk_document",
    "Sentence",
    "split_into_sentences",
    "evaluate_chunk_quality",
    "compute_chunk_coherence",
    "check_partition",
    "ChunkQualityReport",
]
