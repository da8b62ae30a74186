"""
Unit tests for SimpleDijkstraEngine using GraphStore.
"""

from graph_store import GraphStore
from dijkstra_engine import SimpleDijkstraEngine
from algorithms import path_edges
from results import ErrorKind


def build(count, edges):
    g = GraphStore()
    for i in range(count):
        g.add_node((i, 0))
    for a, b, w in edges:
        g.add_edge(a, b)
        g.set_weight(a, b, str(w))
    return g


def sample_graph():
    # A-B (1), B-C (2), A-C (5), C-D (1)
    return build(4, [(0, 1, 1), (1, 2, 2), (0, 2, 5), (2, 3, 1)])


def test_dijkstra_basic_costs():
    engine = SimpleDijkstraEngine()
    dist = engine.shortest_path_costs(sample_graph(), 0)

    assert dist == {0: 0, 1: 1, 2: 3, 3: 4}


def test_shortest_path_prefers_cheaper_detour():
    engine = SimpleDijkstraEngine()
    outcome = engine.shortest_path(sample_graph(), 0, 3)

    assert outcome.ok
    # A-B-C-D costs 4, cheaper than A-C-D at 6
    assert outcome.value.nodes == [0, 1, 2, 3]
    assert outcome.value.cost == 4


def test_shortest_path_is_reversible_on_undirected_graph():
    engine = SimpleDijkstraEngine()
    outcome = engine.shortest_path(sample_graph(), 3, 0)

    assert outcome.value.nodes == [3, 2, 1, 0]
    assert outcome.value.cost == 4


def test_self_path_is_single_node():
    engine = SimpleDijkstraEngine()
    outcome = engine.shortest_path(sample_graph(), 2, 2)

    assert outcome.value.nodes == [2]
    assert outcome.value.cost == 0


def test_disconnected_target_reports_no_path():
    g = build(3, [(0, 1, 2)])
    engine = SimpleDijkstraEngine()

    dist, prev = engine.shortest_paths(g, 0)
    # Unreachable node should not appear in either map
    assert 2 not in dist
    assert 2 not in prev

    outcome = engine.shortest_path(g, 0, 2)
    assert not outcome.ok
    assert outcome.value is None
    assert outcome.error.kind is ErrorKind.NO_PATH_EXISTS


def test_unknown_node_is_invalid_operation():
    engine = SimpleDijkstraEngine()
    outcome = engine.shortest_path(sample_graph(), 0, 9)
    assert outcome.error.kind is ErrorKind.INVALID_OPERATION


def test_stale_heap_entries_do_not_reexpand():
    """A node first reached expensively is settled with its later, cheaper cost."""
    # 0-1 (10), 0-2 (1), 2-1 (1), 1-3 (1)
    g = build(4, [(0, 1, 10), (0, 2, 1), (2, 1, 1), (1, 3, 1)])
    engine = SimpleDijkstraEngine()

    outcome = engine.shortest_path(g, 0, 3)
    assert outcome.value.nodes == [0, 2, 1, 3]
    assert outcome.value.cost == 3


def test_equal_cost_paths_return_a_minimum():
    # Two routes of cost 2 from 0 to 3
    g = build(4, [(0, 1, 1), (1, 3, 1), (0, 2, 1), (2, 3, 1)])
    outcome = SimpleDijkstraEngine().shortest_path(g, 0, 3)

    assert outcome.value.cost == 2
    assert outcome.value.nodes in ([0, 1, 3], [0, 2, 3])


def test_graph_is_not_mutated():
    g = sample_graph()
    before = g.edges()
    SimpleDijkstraEngine().shortest_path(g, 0, 3)
    assert g.edges() == before


def test_path_edges_are_canonical_pairs():
    assert path_edges([3, 2, 1, 0]) == [(2, 3), (1, 2), (0, 1)]
    assert path_edges([4]) == []
