"""A clustered store of embeddings that answers queries with a whole column."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from schemantic.clustering import ClusterType, cluster
from schemantic.query import QueryType, find_closest_column
from schemantic.vectors import Record, chunked_means

_COLUMNS = 3
_CHUNKS = 4


class VectorCube:
    """Embeddings grouped into three columns; a query returns the strings of one column.

    Each item is a sequence whose second element is the embedding and whose
    third is the text; the item's position becomes its id.
    """

    def __init__(
        self,
        items: Iterable[Sequence],
        cluster_type: ClusterType | str = ClusterType.MEAN,
    ) -> None:
        records = []
        for i, item in enumerate(items):
            try:
                embed, text = item[1], item[2]
            except (IndexError, TypeError) as exc:
                raise ValueError(f"item {i} must hold an embedding and a string") from exc
            records.append(Record(i, [float(x) for x in embed], str(text)))
        self.records: list[Record] = records
        self.id_to_string: dict[int, str] = {r.id: r.string for r in records}
        self.columns: list[list[int]] = cluster(records, cluster_type, _COLUMNS)
        self._id_to_meanvec = {r.id: chunked_means(r.embed, _CHUNKS) for r in records}

    def query(
        self,
        query_embed: Sequence[float],
        query_type: QueryType | str = QueryType.MEAN,
    ) -> list[str]:
        """Return the strings of the column that best matches ``query_embed``."""
        index = find_closest_column(self.columns, self._id_to_meanvec, query_embed, query_type)
        return [self.id_to_string[record_id] for record_id in self.columns[index]]