"""
Splitting pipeline.

Orchestrates the document-to-chunk workflow:
Text files -> Documents (+ file metadata) -> Semantic splitter -> Chunks (file name prefixed)

Chunks are returned to the caller; storing them is left to the caller.
"""

import logging
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Dict, List, Optional

from chunking.semantic_chunker import (
    Chunk,
    Document,
    DocumentSplitter,
    SemanticDocumentSplitter,
)
from embeddings.embedder import EmbeddingConfig, get_embedding_service
from shared.config import get_settings

from .loader import find_document_paths, load_document

logger = logging.getLogger(__name__)


@dataclass
class IngestionStats:
    """Statistics from an ingestion run."""

    total_docs: int = 0
    successful: int = 0
    failed: int = 0
    empty_docs: int = 0
    total_chunks: int = 0
    total_chars_processed: int = 0
    oversized_chunks: int = 0


def prefix_file_name(chunk: Chunk) -> Chunk:
    """
    Prepend the source file name to the chunk text.

    Gives the embedding of each chunk a hint about where it came from.
    Chunks without a file_name are returned unchanged.
    """
    file_name = chunk.metadata.get("file_name")
    if not file_name:
        return chunk
    return replace(chunk, text=f"{file_name}\n{chunk.text}")


class IngestionPipeline:
    """
    Loads documents and splits them into chunks.

    Usage:
        splitter = SemanticDocumentSplitter(get_embedding_service())
        pipeline = IngestionPipeline(splitter)

        # Process directory
        chunks = pipeline.process_directory("./docs")

        # Get statistics
        stats = pipeline.get_stats()
    """

    def __init__(
        self,
        splitter: DocumentSplitter,
        include_file_name: bool = True,
        max_chunk_size_in_chars: Optional[int] = None,
    ):
        """
        Args:
            splitter: Document splitter to apply
            include_file_name: Prefix chunk text with the source file name
            max_chunk_size_in_chars: Limit used to count oversized chunks
                (read from the splitter's config when omitted)
        """
        self.splitter = splitter
        self.include_file_name = include_file_name
        if max_chunk_size_in_chars is None:
            config = getattr(splitter, "config", None)
            max_chunk_size_in_chars = getattr(config, "max_chunk_size_in_chars", None)
        self.max_chunk_size_in_chars = max_chunk_size_in_chars
        self.stats = IngestionStats()

    def process_document(self, document: Document) -> List[Chunk]:
        """
        Split one document and update statistics.

        Embedding provider errors propagate; no chunks are kept for a
        document whose split failed.
        """
        self.stats.total_docs += 1

        try:
            chunks = self.splitter.split(document)
        except Exception:
            self.stats.failed += 1
            raise

        self.stats.successful += 1
        self.stats.total_chars_processed += len(document.text)
        if not chunks:
            self.stats.empty_docs += 1
        self.stats.total_chunks += len(chunks)
        if self.max_chunk_size_in_chars is not None:
            self.stats.oversized_chunks += sum(
                1 for c in chunks if len(c.text) > self.max_chunk_size_in_chars
            )

        if self.include_file_name:
            chunks = [prefix_file_name(c) for c in chunks]

        return chunks

    def process_file(self, path: str) -> List[Chunk]:
        """
        Load and split a single file.

        Returns:
            Chunks, or an empty list if the file could not be read
        """
        try:
            document = load_document(path)
        except (OSError, UnicodeDecodeError) as e:
            self.stats.total_docs += 1
            self.stats.failed += 1
            logger.error(f"Failed to load {path}: {e}")
            return []

        return self.process_document(document)

    def process_directory(
        self,
        directory: str,
        extensions: Optional[List[str]] = None,
        recursive: bool = False,
    ) -> List[Chunk]:
        """
        Load and split all documents in a directory.

        Args:
            directory: Directory path
            extensions: File extensions to process
            recursive: Search subdirectories

        Returns:
            Chunks of all documents, in file order
        """
        chunks: List[Chunk] = []

        for file_path in find_document_paths(directory, extensions, recursive):
            chunks.extend(self.process_file(str(file_path)))

        logger.info(
            f"Ingestion complete: {self.stats.successful}/{self.stats.total_docs} "
            f"successful, {self.stats.total_chunks} chunks"
        )

        return chunks

    def get_stats(self) -> Dict:
        """Get ingestion statistics."""
        return asdict(self.stats)

    def reset_stats(self) -> None:
        """Reset statistics for a new run."""
        self.stats = IngestionStats()


def run_ingestion(
    input_path: str,
    recursive: bool = False,
    extensions: Optional[List[str]] = None,
    splitter: Optional[DocumentSplitter] = None,
) -> Dict:
    """
    Run splitting from command line.

    Args:
        input_path: File or directory path
        recursive: Search subdirectories
        extensions: File extensions
        splitter: Splitter to use (built from settings if None)

    Returns:
        Ingestion statistics
    """
    settings = get_settings()
    if splitter is None:
        service = get_embedding_service(EmbeddingConfig(model_name=settings.EMBEDDING_MODEL))
        splitter = SemanticDocumentSplitter(service, config=settings.get_splitter_config())

    pipeline = IngestionPipeline(splitter, include_file_name=settings.INCLUDE_FILE_NAME)

    path = Path(input_path)
    if path.is_file():
        chunks = pipeline.process_file(str(path))
        return {
            "mode": "single_file",
            "chunks": len(chunks),
            "stats": pipeline.get_stats(),
        }
    elif path.is_dir():
        chunks = pipeline.process_directory(
            str(path),
            extensions=extensions,
            recursive=recursive,
        )
        return {
            "mode": "directory",
            "chunks": len(chunks),
            "stats": pipeline.get_stats(),
        }
    else:
        return {"error": f"Path not found: {input_path}"}


if __name__ == "__main__":
    import argparse
    import json

    parser = argparse.ArgumentParser(description="Split documents into semantic chunks")
    parser.add_argument("--input", default=None, help="Input file or directory")
    parser.add_argument("--recursive", action="store_true", help="Search subdirs")
    parser.add_argument(
        "--ext", action="append", default=None, help="File extension (repeatable)"
    )

    args = parser.parse_args()
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    result = run_ingestion(
        input_path=args.input or settings.DOCS_PATH,
        recursive=args.recursive,
        extensions=args.ext,
    )

    print(json.dumps(result, indent=2))
