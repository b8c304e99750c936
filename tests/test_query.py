import pytest

from schemantic.query import (
    QueryType,
    find_closest_column,
    find_closest_column_cosine,
    find_closest_column_knn,
    find_closest_column_l2,
    find_closest_column_mean,
)

COLUMNS = [[0, 1], [2, 3]]
MEANVECS = {0: [0.0] * 4, 1: [1.0] * 4, 2: [10.0] * 4, 3: [11.0] * 4}


@pytest.mark.parametrize(
    "fn",
    [
        find_closest_column_mean,
        find_closest_column_l2,
        find_closest_column_cosine,
        lambda c, m, q: find_closest_column_knn(c, m, q, 3),
    ],
)
def test_each_strategy_finds_the_far_column(fn):
    columns = [[0, 1], [2, 3]]
    meanvecs = {0: [1.0, 0, 0, 0], 1: [2.0, 0, 0, 0], 2: [0, 1.0, 0, 0], 3: [0, 2.0, 0, 0]}
    assert fn(columns, meanvecs, [0, 1.5, 0, 0]) == 1
    assert fn(columns, meanvecs, [1.5, 0, 0, 0]) == 0


def test_query_embedding_is_summarised_in_chunks():
    assert find_closest_column_mean(COLUMNS, MEANVECS, [10.5] * 8) == 1
    assert find_closest_column_l2(COLUMNS, MEANVECS, [0.2] * 12) == 0


def test_l2_follows_single_nearest_record():
    columns = [[0, 1], [2]]
    meanvecs = {0: [5.0] * 4, 1: [5.0] * 4, 2: [0.0] * 4}
    assert find_closest_column_l2(columns, meanvecs, [4.0] * 4) == 0
    assert find_closest_column_l2(columns, meanvecs, [1.0] * 4) == 1


def test_knn_majority_vote():
    columns = [[0], [1, 2, 3]]
    meanvecs = {0: [0.0] * 4, 1: [1.0] * 4, 2: [1.5] * 4, 3: [2.0] * 4}
    assert find_closest_column_knn(columns, meanvecs, [0.0] * 4, 1) == 0
    assert find_closest_column_knn(columns, meanvecs, [0.0] * 4, 3) == 1


def test_knn_without_records_returns_first_column():
    assert find_closest_column_knn([[], []], {}, [1.0] * 4, 5) == 0


def test_empty_columns_are_skipped():
    meanvecs = {0: [3.0] * 4}
    assert find_closest_column_mean([[], [0]], meanvecs, [100.0] * 4) == 1
    assert find_closest_column_cosine([[], [0]], meanvecs, [1.0] * 4) == 1


def test_all_empty_columns_give_first_index():
    assert find_closest_column_mean([[], []], {}, [1.0] * 4) == 0


def test_dispatch_matches_direct_calls():
    query = [9.0] * 4
    assert find_closest_column(COLUMNS, MEANVECS, query, "l2") == find_closest_column_l2(
        COLUMNS, MEANVECS, query
    )
    assert find_closest_column(COLUMNS, MEANVECS, query, QueryType.COSINE) == (
        find_closest_column_cosine(COLUMNS, MEANVECS, query)
    )
    assert find_closest_column(COLUMNS, MEANVECS, query, "other") == (
        find_closest_column_mean(COLUMNS, MEANVECS, query)
    )


def test_missing_id_raises():
    with pytest.raises(KeyError):
        find_closest_column_l2([[42]], {}, [1.0] * 4)