"""Embedding records and the vector arithmetic shared by clustering and search."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class Record:
    """One stored embedding together with its identifier and text."""

    id: int
    embed: list[float] = field(default_factory=list)
    string: str = ""


def chunked_means(values: Sequence[float], chunks: int) -> list[float]:
    """Split ``values`` into ``chunks`` runs and return the mean of each.

    Every run has ``len(values) // chunks`` items except the last, which also
    takes the remainder. A run with no items has a mean of NaN.
    """
    if chunks < 1:
        raise ValueError("chunks must be at least 1")
    size = len(values) // chunks
    means = []
    for i in range(chunks):
        start = i * size
        end = len(values) if i == chunks - 1 else start + size
        part = values[start:end]
        means.append(sum(part) / len(part) if part else math.nan)
    return means


def squared_l2_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Sum of squared differences over the common length of ``a`` and ``b``."""
    return sum((x - y) ** 2 for x, y in zip(a, b))


def l2_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance over the common length of ``a`` and ``b``."""
    return math.sqrt(squared_l2_distance(a, b))


def l1_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Manhattan distance over the common length of ``a`` and ``b``."""
    return sum(abs(x - y) for x, y in zip(a, b))


def _dot_and_norms(a: Sequence[float], b: Sequence[float]) -> tuple[float, float, float]:
    dot = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(x * x for x in b))
    return dot, norm_a, norm_b


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between ``a`` and ``b``; 0.0 if either is a zero vector."""
    dot, norm_a, norm_b = _dot_and_norms(a, b)
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return dot / (norm_a * norm_b)


def cosine_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """One minus the cosine similarity; 1.0 if either is a zero vector."""
    dot, norm_a, norm_b = _dot_and_norms(a, b)
    if norm_a == 0.0 or norm_b == 0.0:
        return 1.0
    return 1.0 - dot / (norm_a * norm_b)


def mean_vector(vectors: Sequence[Sequence[float]]) -> list[float]:
    """Component-wise mean, taken over the length of the first vector."""
    if not vectors:
        raise ValueError("cannot take the mean of no vectors")
    width = len(vectors[0])
    if any(len(v) < width for v in vectors):
        raise ValueError("vectors are shorter than the first one")
    count = len(vectors)
    return [sum(column) / count for column in zip(*(v[:width] for v in vectors))]