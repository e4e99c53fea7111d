"""
Cosine similarity between embedding vectors.

Exact pairwise computation: no normalization, caching or approximation.
A zero-magnitude vector is treated as maximally dissimilar (0.0).
"""

import math
from typing import Sequence, Union

import numpy as np

from shared.errors import DimensionMismatch

Vector = Union[Sequence[float], np.ndarray]


def cosine_similarity(a: Vector, b: Vector) -> float:
    """
    Compute cosine similarity between two vectors of identical length.

    Args:
        a: First vector
        b: Second vector

    Returns:
        dot(a, b) / (|a| * |b|), or 0.0 if either magnitude is zero

    Raises:
        DimensionMismatch: If the vectors differ in length
    """
    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)

    if va.ndim != 1 or vb.ndim != 1 or va.shape != vb.shape:
        raise DimensionMismatch(
            f"Vector dimensions must match: {va.shape} vs {vb.shape}"
        )

    norm_a = float(np.dot(va, va))
    norm_b = float(np.dot(vb, vb))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    return float(np.dot(va, vb)) / (math.sqrt(norm_a) * math.sqrt(norm_b))
