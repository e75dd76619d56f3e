import pytest

from gridgraph.topological_sort import (
    CycleError,
    GroupingError,
    topological_sort,
    topological_sort_into_groups,
)


def acyclic(node):
    if node <= 7:
        return [node + 1, node + 2]
    if node == 8:
        return [9]
    return []


def cyclic(node):
    if node <= 6:
        return [node + 1, node + 2, 7]
    if node == 7:
        return [8, 9]
    if node == 8:
        return [7, 9]
    return [7]


def _respects_edges(order, successors):
    position = {n: i for i, n in enumerate(order)}
    return all(position[n] < position[s] for n in order for s in successors(n))


def test_documented_order():
    assert topological_sort([5, 1], acyclic) == list(range(1, 10))


def test_order_respects_edges_from_any_roots():
    order = topological_sort([9, 3, 6], acyclic)
    assert set(order) == set(range(3, 10))
    assert _respects_edges(order, acyclic)


def test_empty_roots():
    assert topological_sort([], acyclic) == []


def test_cycle_is_reported():
    with pytest.raises(CycleError) as info:
        topological_sort([5, 1], cyclic)
    assert info.value.node in {7, 8, 9}


def test_self_loop_is_a_cycle():
    with pytest.raises(CycleError) as info:
        topological_sort(["a"], lambda n: [n])
    assert info.value.node == "a"


def test_long_chain_does_not_hit_recursion_limit():
    order = topological_sort([0], lambda n: [n + 1] if n < 5000 else [])
    assert order == list(range(5001))


def test_groups_form_valid_order():
    groups = topological_sort_into_groups(list(range(1, 10)), acyclic)
    flat = [n for group in groups for n in group]
    assert sorted(flat) == list(range(1, 10))
    assert _respects_edges(flat, acyclic)
    assert groups[0] == [1]
    for index, group in enumerate(groups):
        for node in group:
            assert all(s not in g for g in groups[: index + 1] for s in acyclic(node))


def test_groups_of_independent_nodes():
    groups = topological_sort_into_groups(["a", "b", "c"], lambda n: [])
    assert len(groups) == 1
    assert sorted(groups[0]) == ["a", "b", "c"]


def test_groups_empty():
    assert topological_sort_into_groups([], acyclic) == []


def test_groups_full_cycle():
    with pytest.raises(GroupingError) as info:
        topological_sort_into_groups([1, 2, 3], lambda n: [n % 3 + 1])
    assert info.value.groups == []
    assert sorted(info.value.remaining) == [1, 2, 3]


def test_groups_partial_cycle():
    edges = {1: [2, 4], 2: [3], 3: [2], 4: []}
    with pytest.raises(GroupingError) as info:
        topological_sort_into_groups([1, 2, 3, 4], edges.__getitem__)
    assert info.value.groups == [[1], [4]]
    assert sorted(info.value.remaining) == [2, 3]


def test_groups_unknown_successor():
    with pytest.raises(ValueError):
        topological_sort_into_groups([1], lambda n: [2])