"""Partition records into a fixed number of columns by several strategies."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from enum import Enum

from schemantic.vectors import (
    Record,
    chunked_means,
    cosine_distance,
    l1_distance,
    mean_vector,
    squared_l2_distance,
)

_CHUNKS = 4


class ClusterType(str, Enum):
    """Names of the available clustering strategies."""

    MEAN = "mean"
    KNN = "knn"
    COSINE = "cosine"
    L2 = "l2"
    L1 = "l1"


def _check_k(k: int) -> None:
    if k < 1:
        raise ValueError("k must be at least 1")


def _split_sorted(ids: Sequence[int], k: int) -> list[list[int]]:
    """Cut an ordered id list into ``k`` consecutive runs of equal size."""
    size = math.ceil(len(ids) / k)
    clusters: list[list[int]] = [[] for _ in range(k)]
    for position, record_id in enumerate(ids):
        clusters[position // size].append(record_id)
    return clusters


def _sort_by_centroid(
    data: list[tuple[int, list[float]]],
    distance: Callable[[Sequence[float], Sequence[float]], float],
    k: int,
) -> list[list[int]]:
    centroid = mean_vector([vec for _, vec in data])
    data.sort(key=lambda item: distance(item[1], centroid))
    return _split_sorted([record_id for record_id, _ in data], k)


def _summaries(records: Sequence[Record]) -> list[tuple[int, list[float]]]:
    return [(r.id, chunked_means(r.embed, _CHUNKS)) for r in records]


def mean_cluster(records: Sequence[Record], k: int) -> list[list[int]]:
    """Sort by chunk-mean vectors (lexicographically) and cut into ``k`` runs."""
    _check_k(k)
    data = _summaries(records)
    data.sort(key=lambda item: item[1])
    return _split_sorted([record_id for record_id, _ in data], k)


def knn_cluster(records: Sequence[Record], k: int) -> list[list[int]]:
    """Assign every record to the nearest of the first ``k`` records."""
    _check_k(k)
    data = _summaries(records)
    centers = [vec for _, vec in data[:k]]
    clusters: list[list[int]] = [[] for _ in range(k)]
    for record_id, vec in data:
        best = min(
            range(len(centers)),
            key=lambda i: squared_l2_distance(vec, centers[i]),
        )
        clusters[best].append(record_id)
    return clusters


def l2_cluster(records: Sequence[Record], k: int) -> list[list[int]]:
    """Order by Euclidean distance to the centroid and cut into ``k`` runs."""
    _check_k(k)
    return _sort_by_centroid(_summaries(records), squared_l2_distance, k)


def l1_cluster(records: Sequence[Record], k: int) -> list[list[int]]:
    """Order by Manhattan distance to the centroid and cut into ``k`` runs."""
    _check_k(k)
    return _sort_by_centroid(_summaries(records), l1_distance, k)


def cosine_cluster(records: Sequence[Record], k: int) -> list[list[int]]:
    """Order full embeddings by cosine distance to their centroid and cut into ``k`` runs."""
    _check_k(k)
    data = [(r.id, list(r.embed)) for r in records]
    return _sort_by_centroid(data, cosine_distance, k)


_STRATEGIES = {
    ClusterType.MEAN: mean_cluster,
    ClusterType.KNN: knn_cluster,
    ClusterType.COSINE: cosine_cluster,
    ClusterType.L2: l2_cluster,
    ClusterType.L1: l1_cluster,
}


def cluster(
    records: Sequence[Record],
    cluster_type: ClusterType | str = ClusterType.MEAN,
    k: int = 3,
) -> list[list[int]]:
    """Cluster with the named strategy; unknown names fall back to ``mean``."""
    try:
        kind = ClusterType(cluster_type)
    except ValueError:
        kind = ClusterType.MEAN
    return _STRATEGIES[kind](records, k)