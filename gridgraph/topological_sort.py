"""Topological ordering of directed graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any


class CycleError(ValueError):
    """Raised when the graph has a cycle; ``node`` belongs to one."""

    def __init__(self, node: Any) -> None:
        super().__init__(f"node {node!r} belongs to a cycle")
        self.node = node


class GroupingError(ValueError):
    """Raised when nodes cannot be grouped because of cycles.

    ``groups`` holds the groups built so far and ``remaining`` the nodes
    that could not be placed.
    """

    def __init__(self, groups: list[list[Any]], remaining: list[Any]) -> None:
        super().__init__(f"{len(remaining)} node(s) could not be grouped due to cycles")
        self.groups = groups
        self.remaining = remaining


def topological_sort(
    roots: Iterable[Hashable],
    successors: Callable[[Any], Iterable[Any]],
) -> list[Any]:
    """Return a topological order of the nodes reachable from ``roots``.

    Raises :class:`CycleError` carrying a node that belongs to a cycle.
    """
    unmarked: dict[Any, None] = dict.fromkeys(roots)
    marked: set[Any] = set()
    temp: set[Any] = set()
    ordered: deque[Any] = deque()

    def enter(node: Any) -> Iterator[Any] | None:
        unmarked.pop(node, None)
        if node in marked:
            return None
        if node in temp:
            raise CycleError(node)
        temp.add(node)
        return iter(successors(node))

    done = object()
    while unmarked:
        root = next(iter(unmarked))
        temp.clear()
        children = enter(root)
        if children is None:
            continue
        stack = [(root, children)]
        while stack:
            node, pending = stack[-1]
            child = next(pending, done)
            if child is done:
                stack.pop()
                marked.add(node)
                ordered.appendleft(node)
                continue
            grandchildren = enter(child)
            if grandchildren is not None:
                stack.append((child, grandchildren))
    return list(ordered)


def topological_sort_into_groups(
    nodes: Iterable[Hashable],
    successors: Callable[[Any], Iterable[Any]],
) -> list[list[Any]]:
    """Partition ``nodes`` into groups of independent nodes in dependency order.

    The first group holds nodes with no predecessor, the next one nodes whose
    predecessors are all in earlier groups, and so on. ``nodes`` must be
    exhaustive. Raises :class:`GroupingError` if cycles prevent grouping.
    """
    node_list = list(nodes)
    if not node_list:
        return []
    succs_map: dict[Any, dict[Any, None]] = {}
    preds_map: dict[Any, int] = {}
    for node in node_list:
        succs_map[node] = dict.fromkeys(successors(node))
        preds_map[node] = 0
    for succs in succs_map.values():
        for succ in succs:
            if succ not in preds_map:
                raise ValueError(f"successor {succ!r} is not among the given nodes")
            preds_map[succ] += 1
    groups: list[list[Any]] = []
    prev_group = [node for node, count in preds_map.items() if count == 0]
    if not prev_group:
        raise GroupingError([], list(preds_map))
    for node in prev_group:
        del preds_map[node]
    while preds_map:
        next_group: list[Any] = []
        for node in prev_group:
            for succ in succs_map[node]:
                preds_map[succ] -= 1
                if preds_map[succ] > 0:
                    continue
                del preds_map[succ]
                next_group.append(succ)
        groups.append(prev_group)
        prev_group = next_group
        if not prev_group:
            raise GroupingError(groups, list(preds_map))
    groups.append(prev_group)
    return groups