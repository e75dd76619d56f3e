"""Maximum and minimum weight matchings with the Kuhn-Munkres algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from gridgraph.matrix import Matrix


def _weight_table(
    weights: Matrix | Iterable[Iterable[Any]],
) -> tuple[int, int, list[list[Any]]]:
    if isinstance(weights, Matrix):
        return weights.rows, weights.columns, [list(row) for row in weights]
    table = [list(row) for row in weights]
    columns = len(table[0]) if table else 0
    if any(len(row) != columns for row in table):
        raise ValueError("all rows of the weights must have the same length")
    return len(table), columns, table


def _solve(nx: int, ny: int, table: Sequence[Sequence[Any]]) -> tuple[Any, list[int]]:
    if nx > ny:
        raise ValueError("number of rows must not be larger than number of columns")
    # Rows are called x nodes and columns y nodes.
    xy: list[int | None] = [None] * nx
    yx: list[int | None] = [None] * ny
    # Start with a feasible labelling: the row maximum for x nodes, 0 for y nodes.
    lx: list[Any] = [max(row) for row in table]
    ly: list[Any] = [0] * ny
    for root in range(nx):
        alternating: list[int | None] = [None] * ny
        in_path = {root}
        slack = [lx[root] + ly[y] - table[root][y] for y in range(ny)]
        slackx = [root] * ny
        while True:
            # Pick the smallest slack among y nodes not yet on the path.
            y = min(
                (yy for yy in range(ny) if alternating[yy] is None),
                key=slack.__getitem__,
            )
            delta = slack[y]
            x = slackx[y]
            if delta > 0:
                for px in in_path:
                    lx[px] -= delta
                for yy in range(ny):
                    if alternating[yy] is not None:
                        ly[yy] += delta
                    else:
                        slack[yy] -= delta
            alternating[y] = x
            matched = yx[y]
            if matched is None:
                break
            in_path.add(matched)
            for yy in range(ny):
                if alternating[yy] is None:
                    alternate_slack = lx[matched] + ly[yy] - table[matched][yy]
                    if slack[yy] > alternate_slack:
                        slack[yy] = alternate_slack
                        slackx[yy] = matched
        # Flip the edges along the augmenting path.
        current: int | None = y
        while current is not None:
            x = alternating[current]
            assert x is not None
            previous = xy[x]
            yx[current] = x
            xy[x] = current
            current = previous
    total = sum(lx) + sum(ly)
    return total, [column for column in xy if column is not None]


def kuhn_munkres(weights: Matrix | Iterable[Iterable[Any]]) -> tuple[Any, list[int]]:
    """Compute a maximum weight maximum matching between rows and columns.

    ``weights`` is a :class:`Matrix` or a sequence of equally long rows.
    Return the total weight and, for every row, the column assigned to it.
    Raises ``ValueError`` if there are more rows than columns.
    """
    nx, ny, table = _weight_table(weights)
    return _solve(nx, ny, table)


def kuhn_munkres_min(
    weights: Matrix | Iterable[Iterable[Any]],
) -> tuple[Any, list[int]]:
    """Compute a minimum weight maximum matching between rows and columns.

    Return the total weight and, for every row, the column assigned to it.
    Raises ``ValueError`` if there are more rows than columns.
    """
    nx, ny, table = _weight_table(weights)
    total, assignments = _solve(nx, ny, [[-v for v in row] for row in table])
    return -total, assignments