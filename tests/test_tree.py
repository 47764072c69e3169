import pytest

from engine import Recorder
from errors import StructureError, TraceInputError
from tree import BinaryTree
from tree_algorithms import TREE_REGISTRY, require_tree_algorithm


def run(key, tree, **params):
    return Recorder().record(require_tree_algorithm(key), tree, **params)


# ---------------------------------------------------------------------------
# editing
# ---------------------------------------------------------------------------
def test_initial_tree_shape(bst):
    assert bst.root.value == 50
    assert bst.inorder_values() == [20, 30, 40, 50, 60, 70, 80]
    assert sorted(bst.nodes) == list(range(7))


def test_add_edge_rejects_third_child(bst):
    extra = bst.add_node(10, 10, 99)
    with pytest.raises(StructureError, match="already has two children"):
        bst.add_edge(0, extra.id)
    assert extra.parent_id is None


def test_add_edge_rejects_cycle(bst):
    leaf = bst.find_value(20)
    with pytest.raises(StructureError, match="Cannot create cycle"):
        bst.add_edge(leaf.id, bst.root_id)


def test_add_edge_rejects_second_parent(bst):
    orphan = bst.add_node(0, 0, 5)
    bst.add_edge(bst.find_value(20).id, orphan.id)
    with pytest.raises(StructureError, match="already has a parent"):
        bst.add_edge(bst.find_value(60).id, orphan.id)
    assert bst.nodes[orphan.id].parent_id == bst.find_value(20).id


def test_add_edge_rejects_self_loop(bst):
    with pytest.raises(StructureError):
        bst.add_edge(3, 3)


def test_add_edge_prefers_bst_slot(bst):
    node_20 = bst.find_value(20)
    fresh = bst.add_node(0, 0, 25)
    assert bst.add_edge(node_20.id, fresh.id) == "right"


def test_remove_node_orphans_children(bst):
    node_30 = bst.find_value(30)
    children = list(node_30.children())
    bst.remove_node(node_30.id)
    assert all(bst.nodes[c].parent_id is None for c in children)
    assert bst.root.left is None


def test_ids_are_never_reused(bst):
    bst.remove_node(6)
    node = bst.add_node(0, 0, 81)
    assert node.id == 7
    bst.clear()
    assert bst.add_node(0, 0, 1).id == 8


def test_attaching_root_under_detached_node_promotes_that_node():
    tree = BinaryTree()
    r  = tree.add_node(0, 0, 50)
    tree.add_node(0, 0, 10)
    d2 = tree.add_node(0, 0, 90)
    tree.add_edge(d2.id, r.id)
    assert tree.root_id == d2.id
    assert tree.inorder_values() == [50, 90]


def test_attaching_root_keeps_topmost_ancestor_as_root():
    tree = BinaryTree()
    r   = tree.add_node(0, 0, 50)
    mid = tree.add_node(0, 0, 80)
    top = tree.add_node(0, 0, 100)
    tree.add_edge(top.id, mid.id)
    tree.add_edge(mid.id, r.id)
    assert tree.root_id == top.id
    assert tree.inorder_values() == [50, 80, 100]


def test_remove_edge_keeps_root(bst):
    bst.remove_edge(0, 1)
    assert bst.root_id == 0
    assert bst.nodes[1].parent_id is None
    assert bst.inorder_values() == [50, 60, 70, 80]


# ---------------------------------------------------------------------------
# BST operations
# ---------------------------------------------------------------------------
def test_inorder_stays_sorted_after_mixed_operations(bst):
    for key, value in [("insert", 45), ("insert", 10), ("delete", 30), ("insert", 65),
                       ("delete", 50), ("delete", 80), ("insert", 55)]:
        run(key, bst, value=value)
        values = bst.inorder_values()
        assert values == sorted(values)
    assert 30 not in bst.inorder_values()
    assert 55 in bst.inorder_values()


def test_insert_duplicate_is_a_frame_not_an_error(bst):
    trace = run("insert", bst, value=40)
    assert "already exists" in trace.final.description
    assert len(bst) == 7


def test_search_missing_value_ends_with_not_found(bst):
    trace = run("search", bst, value=65)
    assert trace.final.description == "Value 65 not found in the tree."


def test_malformed_value_raises_before_frames(bst):
    with pytest.raises(TraceInputError):
        run("insert", bst, value="abc")


def test_inorder_traversal_output(bst):
    assert run("inorder", bst).final.output == "20, 30, 40, 50, 60, 70, 80"


def test_level_order_output(bst):
    assert run("level_order", bst).final.output == "50, 30, 70, 20, 40, 60, 80"


def test_read_only_tracer_on_empty_tree():
    trace = run("inorder", BinaryTree())
    assert len(trace) == 1
    assert trace.final.description == "Tree is empty."


def test_find_min_and_max(bst):
    assert run("find_min", bst).final.output == "Min: 20"
    assert run("find_max", BinaryTree.initial()).final.output == "Max: 80"


# ---------------------------------------------------------------------------
# AVL
# ---------------------------------------------------------------------------
def test_insert_avl_rotates_left_left_case():
    tree = BinaryTree()
    for v in (30, 20, 10):
        run("insert_avl", tree, value=v)
    assert tree.root.value == 20
    assert tree.inorder_values() == [10, 20, 30]


def test_insert_avl_resolves_left_right_case():
    tree = BinaryTree()
    for v in (30, 10, 20):
        run("insert_avl", tree, value=v)
    assert tree.root.value == 20
    assert tree.nodes[tree.root.left].value == 10
    assert tree.nodes[tree.root.right].value == 30


def test_insert_avl_without_rebalance_only_flags():
    tree = BinaryTree()
    for v in (10, 20):
        run("insert_avl", tree, value=v)
    trace = run("insert_avl", tree, value=30, rebalance="false")
    assert trace.final.description == "Rotation needed at 10."
    assert tree.root.value == 10


# ---------------------------------------------------------------------------
# construction
# ---------------------------------------------------------------------------
def test_from_array_rejects_non_numbers(bst):
    with pytest.raises(TraceInputError):
        run("from_array", bst, values="5, x, 7")
    assert len(bst) == 7


def test_from_pre_in_rejects_length_mismatch(bst):
    with pytest.raises(TraceInputError):
        run("from_pre_in", bst, preorder="1,2,3", inorder="1,2")


def test_from_pre_in_builds_expected_tree(bst):
    run("from_pre_in", bst, preorder="50,30,20,40,70", inorder="20,30,40,50,70")
    assert bst.root.value == 50
    assert bst.inorder_values() == [20, 30, 40, 50, 70]


def test_registry_marks_mutating_tracers():
    assert "mutating" in TREE_REGISTRY["insert"].tags
    assert "mutating" not in TREE_REGISTRY["search"].tags


def test_from_pre_in_rejects_inconsistent_orders(bst):
    with pytest.raises(TraceInputError, match="do not describe the same tree"):
        run("from_pre_in", bst, preorder="2,3,1", inorder="1,2,3")
    assert len(bst) == 7


def test_from_post_in_rejects_inconsistent_orders(bst):
    with pytest.raises(TraceInputError, match="do not describe the same tree"):
        run("from_post_in", bst, postorder="3,1,2", inorder="1,2,3")
    assert len(bst) == 7


def test_from_post_in_accepts_right_leaning_orders():
    tree = BinaryTree()
    run("from_post_in", tree, postorder="3,1,2", inorder="2,1,3")
    assert tree.root.value == 2
    assert tree.inorder_values() == [2, 1, 3]


def test_from_post_in_rebuilds_initial_tree():
    tree = BinaryTree()
    run("from_post_in", tree, postorder="20,40,30,60,80,70,50", inorder="20,30,40,50,60,70,80")
    assert run("preorder", tree).final.output == "50, 30, 20, 40, 70, 60, 80"


def test_balanced_bst_picks_middle_values():
    tree = BinaryTree()
    trace = run("balanced_bst", tree, values="5,1,3,2,4")
    assert tree.root.value == 3
    assert trace.final.output == "Balanced BST: 3 -> 1 -> 2 -> 4 -> 5"
    assert tree.inorder_values() == [1, 2, 3, 4, 5]


def test_deserialize_skips_null_children():
    tree = BinaryTree()
    trace = run("deserialize", tree, data="1,2,3,x,4")
    two = tree.find_value(2)
    assert two.left is None
    assert tree.nodes[two.right].value == 4
    assert trace.final.output == "Tree: 1 -> 2 -> 3 -> x -> 4"


def test_deserialize_rejects_null_root(bst):
    with pytest.raises(TraceInputError):
        run("deserialize", bst, data="null,1")


# ---------------------------------------------------------------------------
# successor / predecessor / delete
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("key, value, expected", [
    ("successor", 30, "Successor: 40"),
    ("successor", 40, "Successor: 50"),
    ("successor", 80, "No successor (maximum node)"),
    ("predecessor", 60, "Predecessor: 50"),
    ("predecessor", 70, "Predecessor: 60"),
    ("predecessor", 20, "No predecessor (minimum node)"),
])
def test_inorder_neighbours(bst, key, value, expected):
    assert run(key, bst, value=value).final.output == expected


def test_delete_two_children_uses_inorder_successor(bst):
    trace = run("delete", bst, value=30)
    frame = next(f for f in trace.timeline if f.description.startswith("Found successor"))
    assert frame.description == "Found successor 40. Replacing 30 with 40."
    assert frame.code_line == 5
    assert set(frame.highlights) == {1, 4}
    assert bst.nodes[1].value == 40
    assert 4 not in bst.nodes
    assert bst.inorder_values() == [20, 40, 50, 60, 70, 80]


# ---------------------------------------------------------------------------
# traversals
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("key, expected", [
    ("preorder", "50, 30, 20, 40, 70, 60, 80"),
    ("postorder", "20, 40, 30, 60, 80, 70, 50"),
    ("zigzag", "50, 70, 30, 20, 40, 60, 80"),
])
def test_traversal_outputs(bst, key, expected):
    assert run(key, bst).final.output == expected


# ---------------------------------------------------------------------------
# properties
# ---------------------------------------------------------------------------
def test_validate_bst(bst):
    assert run("validate_bst", bst).final.output == "Valid BST"
    bst.find_value(20).value = 55
    trace = run("validate_bst", bst)
    assert trace.final.output == "Not a Valid BST"
    assert any(f.output == "Invalid: 55" for f in trace.timeline)


def test_height_and_diameter(bst):
    assert run("height", bst).final.output == "Total Height: 2"
    assert run("diameter", bst).final.output == "Final Diameter: 4"
    run("insert", bst, value=90)
    assert run("height", bst).final.output == "Total Height: 3"
    assert run("diameter", bst).final.output == "Final Diameter: 5"


def test_single_node_height_is_zero():
    tree = BinaryTree()
    tree.add_node(0, 0, 1)
    assert run("height", tree).final.output == "Total Height: 0"


def test_is_balanced(bst):
    assert run("is_balanced", bst).final.output == "Tree is Balanced."
    for v in (90, 95):
        run("insert", bst, value=v)
    assert run("is_balanced", bst).final.output == "Tree is Unbalanced."


def test_is_full(bst):
    assert run("is_full", bst).final.output == "Tree is Full."
    run("insert", bst, value=10)
    assert run("is_full", bst).final.output == "Tree is Not Full."


def test_is_complete(bst):
    assert run("is_complete", bst).final.output == "Tree is Complete."
    run("delete", bst, value=40)
    assert run("is_complete", bst).final.output == "Not Complete: 60"


# ---------------------------------------------------------------------------
# rotations
# ---------------------------------------------------------------------------
def test_rotate_left_at_root_moves_root_pointer(bst):
    run("rotate_left", bst, value=50)
    assert bst.root.value == 70
    assert bst.root.parent_id is None
    fifty = bst.find_value(50)
    assert bst.nodes[bst.root.left].value == 50
    assert bst.nodes[fifty.right].value == 60
    assert bst.inorder_values() == [20, 30, 40, 50, 60, 70, 80]


def test_rotate_right_at_root_moves_root_pointer(bst):
    trace = run("rotate_right", bst, value=50)
    assert trace.final.output == "Rotated. New root: 30"
    assert bst.root.value == 30
    fifty = bst.find_value(50)
    assert bst.nodes[bst.root.right].value == 50
    assert bst.nodes[fifty.left].value == 40
    assert bst.inorder_values() == [20, 30, 40, 50, 60, 70, 80]


def test_rotate_without_child_is_a_frame(bst):
    trace = run("rotate_left", bst, value=20)
    assert trace.final.description == "Cannot rotate left: Node 20 has no right child."
    assert bst.inorder_values() == [20, 30, 40, 50, 60, 70, 80]


# ---------------------------------------------------------------------------
# special queries
# ---------------------------------------------------------------------------
def test_lca(bst):
    assert run("lca", bst, first=20, second=40).final.output == "LCA(20, 40): 30"
    assert run("lca", bst, first=20, second=80).final.output == "LCA(20, 80): 50"
    assert run("lca", bst, first=20, second=99).final.output == "One or both nodes not found."


@pytest.mark.parametrize("key, expected", [
    ("left_view", "Left View: 50 -> 30 -> 20"),
    ("right_view", "Right View: 50 -> 70 -> 80"),
    ("top_view", "Top View: 20 -> 30 -> 50 -> 70 -> 80"),
    ("bottom_view", "Bottom View: 20 -> 30 -> 60 -> 70 -> 80"),
    ("boundary", "Boundary: 50 -> 30 -> 20 -> 40 -> 60 -> 80 -> 70"),
])
def test_views_and_boundary(bst, key, expected):
    assert run(key, bst).final.output == expected


def test_mirror_reverses_inorder(bst):
    trace = run("mirror", bst)
    assert trace.final.output == "Inorder: 80, 70, 60, 50, 40, 30, 20"
    assert bst.nodes[bst.root.left].value == 70
    assert trace.result is bst
