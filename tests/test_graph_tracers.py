import pytest

from algorithms import REGISTRY, require_algorithm, tracer_kwargs
from engine import Recorder
from errors import TraceInputError, UnknownAlgorithmError
from graph import Graph, load_example


def record(key, graph, start=None):
    info = require_algorithm(key)
    return Recorder().record(info, graph.copy(), **tracer_kwargs(info, graph, start))


def test_same_input_gives_identical_frames(initial_graph):
    first = record("bfs", initial_graph, 0)
    second = record("bfs", initial_graph, 0)
    assert [f.to_dict() for f in first.timeline] == [f.to_dict() for f in second.timeline]


def test_every_registered_tracer_is_deterministic(triangle):
    for key, info in REGISTRY.items():
        start = 0 if info.start != "none" else None
        if key in ("topological_sort", "kahn"):
            continue
        a = record(key, triangle, start)
        b = record(key, triangle, start)
        assert a.to_dict() == b.to_dict(), key


def test_editing_graph_leaves_frames_untouched(initial_graph):
    trace = record("dfs", initial_graph, 0)
    before = [f.to_dict() for f in trace.timeline]

    initial_graph.add_node(700, 400)
    initial_graph.remove_node(0)
    initial_graph.add_edge(1, 3, 9)

    assert [f.to_dict() for f in trace.timeline] == before


def test_frames_are_frozen(initial_graph):
    frame = record("bfs", initial_graph, 0).final
    with pytest.raises(Exception):
        frame.description = "changed"


@pytest.mark.parametrize("key", ["bfs", "dfs"])
def test_traversal_visits_every_node_of_connected_graph(key):
    g = Graph.generate_random(num_nodes=9, directed=False, seed=7)
    trace = record(key, g, g.node_ids()[0])
    assert set(trace.final.visited) == set(g.node_ids())


def test_bfs_visits_in_layer_order(initial_graph):
    trace = record("bfs", initial_graph, 0)
    assert list(trace.final.visited) == [0, 1, 2, 4, 3]
    assert trace.final.output == "BFS: A, B, C, E, D"


def test_dijkstra_distances_and_tree(triangle):
    final = record("dijkstra", triangle, "A").final
    assert final.distances == {0: 0, 1: 1, 2: 2}
    assert set(final.edge_highlights) == {(0, 1), (1, 2)}


def test_dijkstra_unreachable_node_stays_infinite():
    g = Graph(directed=True, weighted=True)
    for x in (0, 100, 200):
        g.add_node(x, 0)
    g.add_edge(0, 1, 3)
    final = record("dijkstra", g, 0).final
    assert final.distances[2] == "∞"


def test_kruskal_accepts_n_minus_one_edges():
    g = Graph.generate_random(num_nodes=10, directed=False, seed=3)
    final = record("kruskal", g).final
    accepted = list(final.edge_highlights)
    assert len(accepted) == len(g.nodes) - 1

    # no cycle: union-find over the accepted edges never joins a set twice
    parent = {n: n for n in g.node_ids()}

    def find(n):
        while parent[n] != n:
            n = parent[n]
        return n

    for a, b in accepted:
        ra, rb = find(a), find(b)
        assert ra != rb
        parent[ra] = rb


def test_start_node_accepts_label_case_insensitive(triangle):
    assert tracer_kwargs(require_algorithm("bfs"), triangle, "b") == {"start": 1}


def test_bad_start_node_is_rejected_before_any_frame(triangle):
    with pytest.raises(TraceInputError):
        tracer_kwargs(require_algorithm("bfs"), triangle, "Z")


def test_unknown_algorithm():
    with pytest.raises(UnknownAlgorithmError):
        require_algorithm("bogosort")


def test_graph_tracers_do_not_replace_the_structure(triangle):
    assert record("prim", triangle, 0).result is None


def test_prim_builds_minimum_tree(triangle):
    final = record("prim", triangle, 0).final
    assert set(final.edge_highlights) == {(0, 1), (1, 2)}
    assert sorted(final.visited) == [0, 1, 2]
    assert final.description == "Prim's Algorithm completed. MST size: 2."


def test_dijkstra_drops_stale_queue_entries(triangle):
    # C is queued at 5 via A, then at 2 via B; the 5 entry is never processed
    trace = record("dijkstra", triangle, 0)
    processing = [f for f in trace.timeline if f.description.startswith("Processing node C")]
    assert [f.description for f in processing] == ["Processing node C with distance 2."]


# ---------------------------------------------------------------------------
# critical edges / nodes
# ---------------------------------------------------------------------------
def test_bridges_found_outside_the_cycle():
    final = record("bridges", load_example("connectivity")).final
    assert set(final.edge_highlights) == {(1, 3), (3, 4)}
    assert final.output == "Bridges: D-E, B-D"
    assert final.description == "Algorithm complete. Found 2 bridge(s)."


def test_cycle_has_no_bridges_or_cut_vertices():
    g = Graph(directed=False, weighted=False)
    for x in (0, 100, 200):
        g.add_node(x, 0)
    for a, b in ((0, 1), (1, 2), (2, 0)):
        g.add_edge(a, b)
    assert record("bridges", g).final.output == "Bridges: None"
    assert record("articulation_points", g).final.output == "Articulation points: None"


def test_articulation_points():
    final = record("articulation_points", load_example("connectivity")).final
    assert final.output == "Articulation points: B, D"
    assert list(final.highlights) == [1, 3]


# ---------------------------------------------------------------------------
# max flow
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("key, name", [("ford_fulkerson", "Ford-Fulkerson"), ("edmonds_karp", "Edmonds-Karp")])
def test_max_flow(key, name):
    final = record(key, load_example("flow"), "A").final
    assert final.output == "Max Flow: 23"
    assert final.description == f"{name} complete. Total Max Flow: 23."


@pytest.mark.parametrize("key", ["ford_fulkerson", "edmonds_karp"])
def test_max_flow_small_network(key):
    g = Graph(directed=True, weighted=True)
    for x in (0, 100, 200, 300):
        g.add_node(x, 0)
    for a, b, w in ((0, 1, 3), (0, 2, 2), (1, 2, 1), (1, 3, 2), (2, 3, 3)):
        g.add_edge(a, b, w, manual=True)
    assert record(key, g, 0).final.output == "Max Flow: 5"


@pytest.mark.parametrize("key", ["ford_fulkerson", "edmonds_karp"])
def test_max_flow_needs_directed_weighted_graph(triangle, key):
    trace = record(key, triangle, 0)
    assert len(trace) == 1
    assert trace.final.description == "Graph must be Directed and Weighted."
