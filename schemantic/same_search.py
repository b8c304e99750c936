"""Find records whose embeddings are near-duplicates of another record's."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

from schemantic.clustering import mean_cluster
from schemantic.vectors import Record, cosine_similarity

_CLUSTERS = 5


def same_search_unique(
    records: Iterable[Sequence],
    threshold: float,
    brute_force: bool,
) -> list[tuple[int, list[float], str]]:
    """Return, in input order, every ``(id, embed, string)`` that has a partner
    with cosine similarity above ``threshold``.

    With ``brute_force`` all pairs are compared; otherwise only pairs that fall
    in the same of five mean clusters.
    """
    rows = [(int(rid), [float(x) for x in embed], str(text)) for rid, embed, text in records]
    id_to_embed = {rid: embed for rid, embed, _ in rows}

    if brute_force:
        groups: list[list[int]] = [[rid for rid, _, _ in rows]]
    else:
        groups = mean_cluster([Record(rid, embed, text) for rid, embed, text in rows], _CLUSTERS)

    matched: set[int] = set()
    for group in groups:
        for first, second in combinations(group, 2):
            if cosine_similarity(id_to_embed[first], id_to_embed[second]) > threshold:
                matched.update((first, second))

    return [row for row in rows if row[0] in matched]