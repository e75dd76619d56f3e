from itertools import permutations

import pytest

from gridgraph.kuhn_munkres import kuhn_munkres, kuhn_munkres_min
from gridgraph.matrix import Matrix

GALLERY = [
    [100, 110, 90],
    [95, 130, 75],
    [95, 140, 65],
]

SAMPLES = [
    [[7, 53, 183, 439], [497, 383, 563, 79], [627, 343, 773, 959], [447, 283, 463, 29]],
    [[1, 2, 3], [2, 4, 6], [3, 6, 9]],
    [[5, -3, 8, 0, 2], [4, 9, -1, 7, 3]],
    [[10, 10], [10, 10]],
]


def _scores(table):
    rows, cols = len(table), len(table[0])
    return [
        sum(table[r][cols_perm[r]] for r in range(rows))
        for cols_perm in permutations(range(cols), rows)
    ]


def test_gallery_example():
    weights = Matrix.from_rows(GALLERY)
    assert kuhn_munkres(weights) == (325, [2, 0, 1])


def test_gallery_example_from_lists():
    assert kuhn_munkres(GALLERY) == (325, [2, 0, 1])


@pytest.mark.parametrize("table", SAMPLES)
def test_maximum_matches_best_assignment(table):
    total, assignments = kuhn_munkres(Matrix.from_rows(table))
    assert len(assignments) == len(table)
    assert len(set(assignments)) == len(assignments)
    assert total == sum(table[r][c] for r, c in enumerate(assignments))
    assert total == max(_scores(table))


@pytest.mark.parametrize("table", SAMPLES)
def test_minimum_matches_best_assignment(table):
    total, assignments = kuhn_munkres_min(Matrix.from_rows(table))
    assert len(set(assignments)) == len(table)
    assert total == sum(table[r][c] for r, c in enumerate(assignments))
    assert total == min(_scores(table))


def test_more_rows_than_columns_is_rejected():
    with pytest.raises(ValueError):
        kuhn_munkres(Matrix.from_rows([[1, 2], [3, 4], [5, 6]]))


def test_ragged_rows_are_rejected():
    with pytest.raises(ValueError):
        kuhn_munkres([[1, 2], [3]])


def test_empty_weights():
    assert kuhn_munkres(Matrix.new_empty(0)) == (0, [])


def test_input_is_not_modified():
    weights = Matrix.from_rows(GALLERY)
    kuhn_munkres_min(weights)
    assert weights == Matrix.from_rows(GALLERY)