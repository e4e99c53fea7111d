"""
Pytest configuration and fixtures.

Ensures the repository packages can be imported from tests and provides
a deterministic embedding provider that needs no model download.
"""

import sys
from pathlib import Path

import pytest

# Add the repository root to Python path so tests can import the packages
repo_root = Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))


class FakeEmbeddingProvider:
    """Returns preset vectors by sentence text and records every call."""

    def __init__(self, vectors=None, default=(1.0, 0.0)):
        self.vectors = dict(vectors or {})
        self.default = list(default)
        self.calls = []

    def embed_all(self, sentences):
        self.calls.append(list(sentences))
        return [list(self.vectors.get(s, self.default)) for s in sentences]


class SequenceEmbeddingProvider:
    """Returns a fixed list of vectors regardless of input."""

    def __init__(self, vectors):
        self.vectors = vectors
        self.calls = []

    def embed_all(self, sentences):
        self.calls.append(list(sentences))
        return self.vectors


class FailingEmbeddingProvider:
    """Raises the given exception on every call."""

    def __init__(self, error):
        self.error = error

    def embed_all(self, sentences):
        raise self.error


@pytest.fixture
def fake_provider():
    return FakeEmbeddingProvider()
