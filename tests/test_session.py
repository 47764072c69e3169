import pytest

from engine import CodeSession, GraphSession, PlaybackState, TreeSession
from errors import StructureError, TraceInputError


def test_graph_run_loads_trace_and_keeps_graph():
    sess = GraphSession()
    before = sess.graph.to_dict()
    trace = sess.run("dijkstra", {"start": "A"})
    assert sess.trace is trace
    assert sess.playback.state == PlaybackState.PAUSED
    assert sess.current_frame() is trace[0]
    assert sess.graph.to_dict() == before


def test_edit_discards_trace_and_shows_live_frame():
    sess = GraphSession()
    sess.run("bfs", {"start": 0})
    sess.edit("add_node", {"x": 640, "y": 80})
    assert sess.trace is None
    assert sess.playback.state == PlaybackState.IDLE
    frame = sess.current_frame()
    assert frame.description == "Ready"
    assert frame.code_line == -1
    assert len(frame.nodes) == 6


def test_unknown_edit_is_rejected():
    with pytest.raises(TraceInputError):
        GraphSession().edit("teleport")


def test_graph_edit_missing_field():
    with pytest.raises(TraceInputError):
        GraphSession().edit("add_edge", {"from": 0})


def test_graph_example_edit():
    sess = GraphSession()
    sess.edit("example", {"category": "mst"})
    assert sess.graph.weighted


def test_tree_mutating_run_is_adopted():
    sess = TreeSession()
    sess.run("insert", {"value": 45})
    assert 45 in sess.tree.inorder_values()
    assert sess.trace.final.description


def test_tree_read_only_run_leaves_tree():
    sess = TreeSession()
    before = sess.tree.inorder_values()
    sess.run("inorder")
    assert sess.tree.inorder_values() == before


def test_tree_edit_rejection_keeps_trace():
    sess = TreeSession()
    sess.run("preorder")
    with pytest.raises(StructureError):
        sess.edit("add_edge", {"parent": 0, "child": 0})
    assert sess.trace is not None


def test_tree_random_keeps_counting_ids():
    sess = TreeSession()
    last = sess.tree.next_id
    sess.edit("random", {"seed": 4})
    assert min(sess.tree.nodes) >= last


def test_state_shape():
    state = TreeSession().state()
    assert state["family"] == "tree"
    assert state["trace"] is None
    assert state["playback"]["state"] == "idle"
    assert state["frame"]["description"] == "Ready"


def test_code_session_runs_sample_and_custom_source():
    sess = CodeSession()
    trace = sess.run()
    assert trace.final.variable("x").value == "10"
    sess.run("int y = 3;")
    assert sess.source == "int y = 3;"
    assert len(sess.trace) == 3
    sess.edit("source", {"source": "int z = 1;"})
    assert sess.trace is None
    assert sess.current_frame().current_line_index == -1
    assert sess.state()["structure"] == {"source": "int z = 1;"}
