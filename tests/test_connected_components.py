import random

import pytest

from gridgraph.connected_components import (
    component_index,
    components,
    connected_components,
    separate_components,
)


def _as_frozensets(sets):
    return {frozenset(s) for s in sets}


def test_components_merges_overlapping_groups():
    result = components([[1, 2], [3, 4], [2, 3], [5]])
    assert _as_frozensets(result) == {frozenset({1, 2, 3, 4}), frozenset({5})}
    assert len(result) == 2


def test_components_ignores_empty_groups():
    result = components([[], ["a"], [], ["b", "a"]])
    assert _as_frozensets(result) == {frozenset({"a", "b"})}


def test_components_of_nothing():
    assert components([]) == []


def test_separate_components_empty_group_gets_none():
    indices, group_ids = separate_components([[1], [], [1, 2]])
    assert group_ids[1] is None
    assert group_ids[0] == group_ids[2]
    assert indices[1] == indices[2] == group_ids[0]


def test_separate_components_identifiers_bounded_by_group_count():
    groups = [[1, 2], [3], [2, 4], [5, 6], [6, 3]]
    indices, group_ids = separate_components(groups)
    assert all(0 <= gid <= len(groups) for gid in group_ids)
    assert all(0 <= v <= len(groups) for v in indices.values())
    for gid, group in zip(group_ids, groups):
        for element in group:
            assert indices[element] == gid
    assert indices[1] == indices[4]
    assert indices[3] == indices[5]
    assert indices[1] != indices[3]


def test_separate_components_random_split_groups():
    rng = random.Random(20240117)
    seen = set()
    originals = []
    for _ in range(30):
        component = []
        for _ in range(40):
            node = rng.getrandbits(64)
            if node not in seen:
                seen.add(node)
                component.append(node)
        originals.append(component)
    groups = []
    for original in originals:
        component = list(original)
        rng.shuffle(component)
        subcomponents = []
        while component:
            cut = rng.randrange(len(component))
            sub = component[cut:]
            del component[cut:]
            if component:
                sub.append(component[0])
            rng.shuffle(subcomponents)
            subcomponents.append(sub)
        groups.extend(subcomponents)
    rng.shuffle(groups)

    indices, group_ids = separate_components(groups)
    ids_per_component = [{indices[n] for n in comp} for comp in originals]
    assert all(len(ids) == 1 for ids in ids_per_component)
    assert len({next(iter(ids)) for ids in ids_per_component}) == len(originals)
    assert None not in group_ids
    assert _as_frozensets(components(groups)) == _as_frozensets(originals)


def test_connected_components_from_adjacency():
    graph = {1: [2], 2: [1, 3], 3: [2], 4: [5], 5: [4], 6: []}
    result = connected_components(graph, lambda n: graph[n])
    assert _as_frozensets(result) == {
        frozenset({1, 2, 3}),
        frozenset({4, 5}),
        frozenset({6}),
    }


def test_connected_components_partition_covers_starts():
    graph = {n: [n + 2] if n + 2 < 10 else [] for n in range(10)}
    result = connected_components(range(10), lambda n: graph[n])
    all_nodes = [n for s in result for n in s]
    assert sorted(all_nodes) == list(range(10))
    index = component_index(result)
    assert all(index[n] % 1 == 0 for n in range(10))
    assert len({index[n] for n in range(0, 10, 2)}) == 1
    assert len({index[n] for n in range(1, 10, 2)}) == 1
    assert index[0] != index[1]


def test_component_index_round_trip():
    sets = [{"a", "b"}, {"c"}, {"d", "e", "f"}]
    index = component_index(sets)
    assert set(index) == {"a", "b", "c", "d", "e", "f"}
    for node, position in index.items():
        assert node in sets[position]


@pytest.mark.parametrize("groups", [[[1]], [[1, 1, 1]], [[1], [1], [1]]])
def test_single_vertex_groups(groups):
    assert _as_frozensets(components(groups)) == {frozenset({1})}