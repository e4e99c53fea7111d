"""Tests for cosine similarity."""

import numpy as np
import pytest

from embeddings.similarity import cosine_similarity
from shared.errors import DimensionMismatch


def test_identical_vectors_score_one():
    assert cosine_similarity([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)


def test_orthogonal_vectors_score_zero():
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0


def test_opposite_vectors_score_minus_one():
    assert cosine_similarity([1.0, 1.0], [-1.0, -1.0]) == pytest.approx(-1.0)


def test_exact_value():
    # 24 / (5 * 5)
    assert cosine_similarity([3.0, 4.0], [4.0, 3.0]) == 0.96


def test_is_symmetric():
    a, b = [0.2, -1.5, 3.0], [1.0, 0.5, -0.25]
    assert cosine_similarity(a, b) == cosine_similarity(b, a)


def test_magnitude_does_not_matter():
    assert cosine_similarity([1.0, 2.0], [10.0, 20.0]) == pytest.approx(1.0)


def test_zero_vector_scores_zero():
    assert cosine_similarity([0.0, 0.0], [1.0, 2.0]) == 0.0
    assert cosine_similarity([1.0, 2.0], [0.0, 0.0]) == 0.0
    assert cosine_similarity([0.0, 0.0], [0.0, 0.0]) == 0.0


def test_accepts_numpy_arrays():
    a = np.array([1.0, 0.0], dtype=np.float32)
    b = np.array([1.0, 1.0], dtype=np.float32)
    assert cosine_similarity(a, b) == pytest.approx(1 / np.sqrt(2))


def test_dimension_mismatch_raises():
    with pytest.raises(DimensionMismatch):
        cosine_similarity([1.0, 2.0], [1.0, 2.0, 3.0])


def test_dimension_mismatch_is_a_value_error():
    with pytest.raises(ValueError):
        cosine_similarity([1.0], [1.0, 0.0])
