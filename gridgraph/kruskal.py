"""Minimum spanning trees of undirected graphs with Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator
from typing import Any


def _find(parents: list[int], node: int) -> int:
    """Return the root of ``node``, compressing the path by halving."""
    while parents[node] != node:
        parents[node] = parents[parents[node]]
        node = parents[node]
    return node


def _union(parents: list[int], ranks: list[int], a: int, b: int) -> None:
    if ranks[a] < ranks[b]:
        a, b = b, a
    parents[b] = a
    if ranks[a] == ranks[b]:
        ranks[a] += 1


def kruskal_indices(
    number_of_nodes: int,
    edges: Iterable[tuple[int, int, Any]],
) -> Iterator[tuple[int, int, Any]]:
    """Yield the edges of a minimum spanning tree over nodes ``0..number_of_nodes-1``.

    Raises ``IndexError`` if an edge names a node outside that range.
    """
    edge_list = [tuple(edge) for edge in edges]
    for a, b, _ in edge_list:
        for node in (a, b):
            if not 0 <= node < number_of_nodes:
                raise IndexError(
                    f"node {node} is outside the range [0, {number_of_nodes - 1}]"
                )
    edge_list.sort(key=lambda edge: edge[2])
    return _spanning_edges(number_of_nodes, edge_list)


def _spanning_edges(
    number_of_nodes: int, edges: list[tuple[int, int, Any]]
) -> Iterator[tuple[int, int, Any]]:
    parents = list(range(number_of_nodes))
    ranks = [1] * number_of_nodes
    for a, b, weight in edges:
        ra = _find(parents, a)
        rb = _find(parents, b)
        if ra != rb:
            _union(parents, ranks, ra, rb)
            yield (a, b, weight)


def kruskal(
    edges: Iterable[tuple[Hashable, Hashable, Any]],
) -> Iterator[tuple[Any, Any, Any]]:
    """Yield the weighted edges of a minimum spanning tree (or forest)."""
    positions: dict[Any, int] = {}
    nodes: list[Any] = []

    def number(node: Any) -> int:
        if node not in positions:
            positions[node] = len(nodes)
            nodes.append(node)
        return positions[node]

    indexed = [(number(a), number(b), weight) for a, b, weight in edges]
    return (
        (nodes[ia], nodes[ib], weight)
        for ia, ib, weight in kruskal_indices(len(nodes), indexed)
    )