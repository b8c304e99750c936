"""Pick the column of a clustering that best matches a query embedding."""

from __future__ import annotations

import logging
import math
from collections import Counter
from collections.abc import Mapping, Sequence
from enum import Enum

from schemantic.vectors import chunked_means, cosine_similarity, l2_distance

_CHUNKS = 4

logger = logging.getLogger(__name__)


class QueryType(str, Enum):
    """Names of the available column-selection strategies."""

    MEAN = "mean"
    L2 = "l2"
    KNN = "knn"
    COSINE = "cosine"


def _column_average(
    column: Sequence[int], id_to_meanvec: Mapping[int, Sequence[float]]
) -> list[float]:
    totals = [0.0] * _CHUNKS
    for record_id in column:
        for j, value in enumerate(id_to_meanvec[record_id]):
            totals[j] += value
    if not column:
        return [math.nan] * _CHUNKS
    return [t / len(column) for t in totals]


def find_closest_column_mean(
    columns: Sequence[Sequence[int]],
    id_to_meanvec: Mapping[int, Sequence[float]],
    query_embed: Sequence[float],
) -> int:
    """Column whose average summary vector is nearest the query; 0 if none qualifies."""
    query_vec = chunked_means(query_embed, _CHUNKS)
    best_dist, best_idx = math.inf, 0
    for i, column in enumerate(columns):
        dist = l2_distance(_column_average(column, id_to_meanvec), query_vec)
        if dist < best_dist:
            best_dist, best_idx = dist, i
    return best_idx


def find_closest_column_l2(
    columns: Sequence[Sequence[int]],
    id_to_meanvec: Mapping[int, Sequence[float]],
    query_embed: Sequence[float],
) -> int:
    """Column holding the single record nearest the query; 0 if none qualifies."""
    query_vec = chunked_means(query_embed, _CHUNKS)
    best_dist, best_idx = math.inf, 0
    for i, column in enumerate(columns):
        for record_id in column:
            dist = l2_distance(id_to_meanvec[record_id], query_vec)
            if dist < best_dist:
                best_dist, best_idx = dist, i
    return best_idx


def find_closest_column_knn(
    columns: Sequence[Sequence[int]],
    id_to_meanvec: Mapping[int, Sequence[float]],
    query_embed: Sequence[float],
    k: int = 5,
) -> int:
    """Column most common among the ``k`` records nearest the query; 0 if there are none."""
    query_vec = chunked_means(query_embed, _CHUNKS)
    scored = [
        (l2_distance(id_to_meanvec[record_id], query_vec), i)
        for i, column in enumerate(columns)
        for record_id in column
    ]
    scored.sort(key=lambda item: item[0])
    votes = Counter(i for _, i in scored[:k])
    if not votes:
        return 0
    return max(sorted(votes), key=lambda i: votes[i])


def find_closest_column_cosine(
    columns: Sequence[Sequence[int]],
    id_to_meanvec: Mapping[int, Sequence[float]],
    query_embed: Sequence[float],
) -> int:
    """Column whose average summary vector is most similar in direction to the query."""
    query_vec = chunked_means(query_embed, _CHUNKS)
    best_sim, best_idx = -math.inf, 0
    for i, column in enumerate(columns):
        sim = cosine_similarity(_column_average(column, id_to_meanvec), query_vec)
        logger.debug("Column %d similarity: %.4f", i, sim)
        if sim > best_sim:
            best_sim, best_idx = sim, i
    logger.debug("Best column: %d (similarity = %.4f)", best_idx, best_sim)
    return best_idx


def find_closest_column(
    columns: Sequence[Sequence[int]],
    id_to_meanvec: Mapping[int, Sequence[float]],
    query_embed: Sequence[float],
    query_type: QueryType | str = QueryType.MEAN,
) -> int:
    """Select a column with the named strategy; unknown names fall back to ``mean``."""
    try:
        kind = QueryType(query_type)
    except ValueError:
        kind = QueryType.MEAN
    if kind is QueryType.L2:
        return find_closest_column_l2(columns, id_to_meanvec, query_embed)
    if kind is QueryType.KNN:
        return find_closest_column_knn(columns, id_to_meanvec, query_embed, 5)
    if kind is QueryType.COSINE:
        return find_closest_column_cosine(columns, id_to_meanvec, query_embed)
    return find_closest_column_mean(columns, id_to_meanvec, query_embed)