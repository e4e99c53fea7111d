"""Tests for the sentence-transformers embedding provider."""

import numpy as np
import pytest

from chunking.semantic_chunker import Document, SemanticDocumentSplitter
from embeddings.embedder import EmbeddingConfig, EmbeddingService, get_embedding_service


class _StubModel:
    """Stands in for SentenceTransformer.encode."""

    def __init__(self):
        self.inputs = []

    def encode(self, texts, show_progress_bar=False, convert_to_numpy=True):
        self.inputs.append(list(texts))
        return np.array([[float(len(t)), 0.0, 3.0] for t in texts])


@pytest.fixture
def service():
    svc = EmbeddingService(EmbeddingConfig(model_name="stub-model"))
    svc._model = _StubModel()
    return svc


def test_embed_all_returns_one_unit_vector_per_sentence(service):
    vectors = service.embed_all(["One.", "Three."])

    assert len(vectors) == 2
    for vector in vectors:
        assert np.linalg.norm(vector) == pytest.approx(1.0)


def test_preprocess_collapses_whitespace_and_truncates(service):
    assert service.preprocess_text("  a \n b\t c ") == "a b c"
    assert len(service.preprocess_text("x" * 5000)) == 512 * 4


def test_raw_vectors_when_normalization_is_off():
    svc = EmbeddingService(EmbeddingConfig(model_name="stub-model", normalize=False))
    svc._model = _StubModel()

    (vector,) = svc.embed_all(["Hello."])

    assert list(vector) == [6.0, 0.0, 3.0]


def test_service_exposes_only_the_provider_surface(service):
    assert not hasattr(service, "embed_batch")
    assert not hasattr(service, "get_metadata")
    assert sorted(vars(EmbeddingConfig())) == ["max_seq_length", "model_name", "normalize"]


def test_service_plugs_into_splitter(service):
    splitter = SemanticDocumentSplitter(service, 0.5, 0, 100)

    chunks = splitter.split(Document("One. Two. Three."))

    assert service._model.inputs == [["One.", "Two.", "Three."]]
    assert [c.text for c in chunks] == ["One. Two. Three."]


def test_get_embedding_service_reuses_instance():
    first = get_embedding_service(EmbeddingConfig(model_name="stub-model"))

    assert get_embedding_service() is first
    assert get_embedding_service(EmbeddingConfig()) is not first
