"""
File-system document loading.

Reads plain-text files into Documents whose metadata identifies the
source file. Metadata values are strings so they can be copied onto
every chunk unchanged.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from chunking.semantic_chunker import Document

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = [".txt", ".md"]


def extract_metadata_from_path(path: Path) -> Dict[str, str]:
    """
    Extract metadata from a file path.

    Args:
        path: Path object for the file

    Returns:
        Dict with file_name and absolute_directory_path
    """
    return {
        "file_name": path.name,
        "absolute_directory_path": str(path.absolute().parent),
    }


def load_document(path: str, encoding: str = "utf-8") -> Document:
    """
    Load one text file.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid text in `encoding`
    """
    file_path = Path(path)
    text = file_path.read_text(encoding=encoding)
    return Document(text=text, metadata=extract_metadata_from_path(file_path))


def find_document_paths(
    directory: str,
    extensions: Optional[List[str]] = None,
    recursive: bool = False,
) -> List[Path]:
    """
    List matching files in a directory, in sorted path order.

    A missing directory is logged and yields no paths.
    """
    extensions = [e.lower() for e in (extensions or DEFAULT_EXTENSIONS)]
    dir_path = Path(directory)

    if not dir_path.is_dir():
        logger.error(f"Directory not found: {directory}")
        return []

    pattern = "**/*" if recursive else "*"
    return [
        p
        for p in sorted(dir_path.glob(pattern))
        if p.is_file() and p.suffix.lower() in extensions
    ]


def load_documents(
    directory: str,
    extensions: Optional[List[str]] = None,
    recursive: bool = False,
    encoding: str = "utf-8",
) -> List[Document]:
    """
    Load all matching text files in a directory.

    Unreadable files are logged and skipped.

    Args:
        directory: Directory path
        extensions: File extensions to load (defaults to .txt and .md)
        recursive: Search subdirectories
        encoding: Text encoding

    Returns:
        List of Documents
    """
    documents = []

    for file_path in find_document_paths(directory, extensions, recursive):
        try:
            documents.append(load_document(str(file_path), encoding=encoding))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to load {file_path}: {e}")

    logger.info(f"Loaded {len(documents)} documents from {directory}")
    return documents
