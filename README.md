# schemantic

Group text embeddings into columns and find which column a new embedding
belongs to. It can also find records whose embeddings are near-duplicates of
one another. It is pure Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building an index

`schemantic.index.VectorCube` is built from a sequence of items. Each item is
a sequence whose second element is the embedding and whose third element is
the text. The first element is ignored: records are numbered by their
position. If an item does not have a second and a third element, a
`ValueError` is raised. The records are split into three columns by the
chosen clustering strategy.

```python
from schemantic.index import VectorCube

items = [
    (0, [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8], "apple"),
    (1, [0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2], "banana"),
    (2, [0.1, 0.1, 0.2, 0.2, 0.3, 0.3, 0.4, 0.4], "cherry"),
    (3, [0.5, 0.5, 0.5, 0.5, 0.5, 0.5, 0.5, 0.5], "date"),
]

cube = VectorCube(items, "mean")
print(cube.columns)
print(cube.query([0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8], "l2"))
```

`query` returns the texts of every record in the column that best matches the
query embedding. The cube also exposes `records` (a list of
`schemantic.vectors.Record`), `columns` (lists of record ids) and
`id_to_string`.

Clustering strategies (`schemantic.clustering.ClusterType`, passed by value or
by name):

- `mean` (default): sort by the chunk-mean summary, compared element by
  element, and cut into equal consecutive runs.
- `knn`: assign each record to the nearest of the first three records
  (squared Euclidean distance on the summaries).
- `l2`, `l1`: sort the summaries by Euclidean or Manhattan distance to their
  centroid and cut into equal runs.
- `cosine`: sort the full embeddings by cosine distance to their centroid and
  cut into equal runs.

Query strategies (`schemantic.query.QueryType`):

- `mean` (default): column whose average summary is nearest by Euclidean
  distance.
- `l2`: column holding the single nearest record.
- `knn`: column most common among the five nearest records.
- `cosine`: column whose average summary has the highest cosine similarity.
  Per-column similarities are logged at debug level on the `schemantic.query`
  logger.

An unknown strategy name, for clustering or for querying, falls back to
`mean`. When no column qualifies, column 0 is chosen.

Each embedding is summarised by the means of four chunks
(`schemantic.vectors.chunked_means`); the last chunk takes any remainder.
Embeddings shorter than four values give NaN summaries, so they should have
at least four values. The `l2`, `l1` and `cosine` clusterings need at least one
record; with none, they raise `ValueError`.

## Finding near-duplicates

```python
from schemantic.same_search import same_search_unique

records = [
    (10, [1.0, 0.0, 0.0, 0.0], "first"),
    (11, [0.99, 0.01, 0.0, 0.0], "second"),
    (12, [0.0, 1.0, 0.0, 0.0], "third"),
]
print(same_search_unique(records, 0.95, True))
```

Here each record is an `(id, embedding, text)` triple and its id is kept.
The function returns every record whose embedding has a cosine similarity
strictly above the threshold with some other record. The records come back in
input order as `(id, list of floats, str)` tuples. In the example, the first
two records are returned. With `brute_force` set to false, only pairs that
fall in the same of five `mean` clusters are compared. This is faster but may
miss pairs.

## Lower-level pieces

- `schemantic.vectors`: the `Record` dataclass (`id`, `embed`, `string`) and
  the helpers `chunked_means`, `l2_distance`, `squared_l2_distance`,
  `l1_distance`, `cosine_similarity`, `cosine_distance` and `mean_vector`.
- `schemantic.clustering`: `mean_cluster`, `knn_cluster`, `l2_cluster`,
  `l1_cluster`, `cosine_cluster`, and `cluster(records, cluster_type, k)`,
  which dispatches on the strategy name. All of them raise `ValueError` for
  `k < 1`.
- `schemantic.query`: `find_closest_column_mean`, `find_closest_column_l2`,
  `find_closest_column_knn`, `find_closest_column_cosine`, and
  `find_closest_column(columns, id_to_meanvec, query_embed, query_type)`.

## What it does not do

The package is a library only. It has no command-line tool. It does not save
or load an index: a `VectorCube` lives in memory and is rebuilt from its items
each time. There is no approximate nearest-neighbour index. Every query
compares against all stored records.