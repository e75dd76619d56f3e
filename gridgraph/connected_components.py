"""Separation of undirected graphs into disjoint connected sets."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from itertools import chain, groupby
from typing import Any


def _get_and_redirect(table: list[Any], idx: int) -> int:
    """Follow ``table`` until reaching a root, halving the path on the way."""
    while idx != table[idx]:
        table[idx] = table[table[idx]]
        idx = table[idx]
    return idx


def separate_components(
    groups: Sequence[Iterable[Hashable]],
) -> tuple[dict[Any, int], list[int | None]]:
    """Assign a set identifier to every vertex and to every group.

    ``groups`` holds groups of vertices connected together; a group may hold
    a single vertex. Return a mapping from each vertex to its set identifier,
    and a list giving the identifier of each group, at the same position.
    Identifiers are opaque, not necessarily compact, and never greater than
    the number of groups. Empty groups get ``None``.
    """
    group_lists = [list(group) for group in groups]
    table: list[int | None] = list(range(len(group_lists)))
    indices: dict[Any, int] = {}
    for group_index, group in enumerate(group_lists):
        if not group:
            table[group_index] = None
        current = group_index
        for element in group:
            if element in indices:
                table[current] = _get_and_redirect(table, indices[element])
                current = table[current]  # type: ignore[assignment]
            else:
                indices[element] = current
    for element, index in indices.items():
        indices[element] = _get_and_redirect(table, index)
    for group_index, target in enumerate(table):
        if target is not None:
            # Path halving may have left this entry one step behind.
            table[group_index] = _get_and_redirect(table, group_index)
    return indices, table


def components(groups: Sequence[Iterable[Hashable]]) -> list[set[Any]]:
    """Return the disjoint sets of vertices formed by merging connected groups."""
    group_lists = [list(group) for group in groups]
    _, group_ids = separate_components(group_lists)
    numbered = sorted(
        ((i, gid) for i, gid in enumerate(group_ids) if gid is not None),
        key=lambda pair: pair[1],
    )
    return [
        set(chain.from_iterable(group_lists[i] for i, _ in members))
        for _, members in groupby(numbered, key=lambda pair: pair[1])
    ]


def connected_components(
    starts: Iterable[Hashable],
    neighbours: Callable[[Any], Iterable[Any]],
) -> list[set[Any]]:
    """Return the connected sets of vertices reachable from ``starts``.

    ``neighbours`` gives the vertices adjacent to a vertex.
    """
    return components([[*neighbours(start), start] for start in starts])


def component_index(components: Iterable[Iterable[Hashable]]) -> dict[Any, int]:
    """Map every vertex to the position of the set holding it in ``components``."""
    return {node: i for i, component in enumerate(components) for node in component}