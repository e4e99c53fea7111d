"""
Document Ingestion Module.

Loads text files and runs them through the semantic splitter:
- File-system loading with file metadata
- Chunk text prefixed with the source file name
- Run statistics

Usage:
    from ingestion import IngestionPipeline

    pipeline = IngestionPipeline(splitter)
    chunks = pipeline.process_directory("./docs")
"""

from .ingest_pipeline import (
    IngestionPipeline,
    IngestionStats,
    prefix_file_name,
    run_ingestion,
)
from .loader import (
    extract_metadata_from_path,
    find_document_paths,
    load_document,
    load_documents,
)

__all__ = [
    "IngestionPipeline",
    "IngestionStats",
    "prefix_file_name",
    "run_ingestion",
    "load_document",
    "load_documents",
    "find_document_paths",
    "extract_metadata_from_path",
]
