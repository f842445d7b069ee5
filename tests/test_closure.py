"""Tabela domknięcia: unikalność par, krawędzie bezpośrednie i pośrednie, DAG, cykle."""

from collections import Counter

import pytest

from data_model import ClosureEdge
from hierarchy import build_closure


def _edges(children, root="root"):
    return list(build_closure(children, root))


def _reachable_pairs(children, root="root"):
    """Naiwne domknięcie: wszystkie pary (przodek, potomek) osiągalne z root."""
    pairs = set()
    nodes, frontier = {root}, [root]
    while frontier:
        unit = frontier.pop()
        for child in children.get(unit, ()):
            if child not in nodes:
                nodes.add(child)
                frontier.append(child)
    for node in nodes:
        seen, stack = set(), list(children.get(node, ()))
        while stack:
            d = stack.pop()
            if d in seen:
                continue
            seen.add(d)
            stack.extend(children.get(d, ()))
        pairs |= {(node, d) for d in seen if d != node}
    return pairs


DAGS = [
    {"root": ["A", "B"], "A": ["B"]},
    {"root": ["A", "B"], "A": ["C"], "B": ["C"], "C": ["D"]},
    {"root": ["A"], "A": ["B", "C"], "B": ["D", "E"], "C": ["E", "F"], "E": ["G"]},
    {"root": ["A", "B", "C"], "A": ["D"], "B": ["D", "E"], "C": ["E"], "D": ["F"], "E": ["F"]},
]


def test_end_to_end_reference_does_not_duplicate_edge():
    # root → A → B, a B dodatkowo podpięte pod root przez <ref>
    edges = _edges({"root": ["A", "B"], "A": ["B"]})
    assert set(edges) == {
        ClosureEdge("root", "A", True, 0),
        ClosureEdge("root", "B", False, None),
        ClosureEdge("A", "B", True, 0),
    }
    assert len(edges) == 3


@pytest.mark.parametrize("children", DAGS)
def test_exactly_one_edge_per_reachable_pair(children):
    edges = _edges(children)
    pairs = [(e.ancestor_unit, e.unit_id) for e in edges]
    assert Counter(pairs).most_common(1)[0][1] == 1
    assert set(pairs) == _reachable_pairs(children)


@pytest.mark.parametrize("children", DAGS)
def test_direct_edges_follow_adjacency(children):
    for e in _edges(children):
        if e.is_direct:
            assert e.unit_id in children[e.ancestor_unit]
            assert children[e.ancestor_unit].index(e.unit_id) == e.ordering
        else:
            assert e.ordering is None


def test_direct_orderings_are_contiguous_sibling_positions():
    children = {"root": ["A", "B", "C"], "B": ["X", "Y"]}
    direct = [e for e in _edges(children) if e.is_direct]
    by_parent = {}
    for e in direct:
        by_parent.setdefault(e.ancestor_unit, []).append((e.ordering, e.unit_id))
    assert sorted(by_parent["root"]) == [(0, "A"), (1, "B"), (2, "C")]
    assert sorted(by_parent["B"]) == [(0, "X"), (1, "Y")]


def test_diamond_yields_single_indirect_edge():
    children = {"root": ["A", "B"], "A": ["C"], "B": ["C"], "C": ["D"]}
    edges = _edges(children)
    root_to_d = [e for e in edges if (e.ancestor_unit, e.unit_id) == ("root", "D")]
    assert root_to_d == [ClosureEdge("root", "D", False, None)]
    assert len(edges) == 9


def test_indirect_spans_many_hops():
    children = {"root": ["A"], "A": ["B"], "B": ["C"], "C": ["D"]}
    edges = {(e.ancestor_unit, e.unit_id): e for e in _edges(children)}
    assert edges[("root", "D")].is_direct is False
    assert edges[("A", "D")].is_direct is False
    assert edges[("C", "D")] == ClosureEdge("C", "D", True, 0)


def test_leaf_root_produces_nothing():
    assert _edges({}) == []
    assert _edges({"other": ["x"]}) == []


def test_cycle_terminates_without_self_edges():
    children = {"root": ["A"], "A": ["B"], "B": ["A"]}
    edges = _edges(children)
    assert all(e.ancestor_unit != e.unit_id for e in edges)
    keys = [frozenset((e.ancestor_unit, e.unit_id)) for e in edges]
    assert len(keys) == len(set(keys))


def test_deep_hierarchy_does_not_hit_recursion_limit():
    depth = 1100
    names = ["root"] + [f"u{i}" for i in range(depth)]
    children = {a: [b] for a, b in zip(names, names[1:])}
    count = sum(1 for _ in build_closure(children))
    assert count == depth * (depth + 1) // 2


def test_closure_is_lazy():
    gen = build_closure({"root": ["A", "B"]})
    assert next(gen) == ClosureEdge("root", "A", True, 0)
