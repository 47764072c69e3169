"""
tree_algorithms/__init__.py — Tree Algorithm Registry
======================================================
Every binary-tree tracer, keyed the same way as the graph registry:

    from tree_algorithms import TREE_REGISTRY, require_tree_algorithm

Entries reuse AlgoInfo; `params` names the raw inputs a tracer takes
(a value, two values, a comma-separated list, …).  Tracers that change
the tree (insert, delete, construction, rotations, mirror) are tagged
"mutating".
"""

from typing import Dict, List

from errors import UnknownAlgorithmError
from algorithms import AlgoInfo
from tree_algorithms.frame import TreeFrame, TreeFrameBuilder
from tree_algorithms import bst, traversal, properties, construct, avl, special


def _info(key: str, label: str, fn, pseudocode: List[str], tags: List[str], **extra) -> AlgoInfo:
    return AlgoInfo(key=key, label=label, fn=fn, pseudocode=pseudocode, tags=tags, start="none", **extra)


TREE_REGISTRY: Dict[str, AlgoInfo] = {

    # --- BST operations ----------------------------------------------------
    "insert":       _info("insert", "BST Insert", bst.insert, bst.INSERT_PSEUDOCODE,
                          ["bst", "mutating"], params=["value"], complexity_time="O(h)"),
    "delete":       _info("delete", "BST Delete", bst.delete, bst.DELETE_PSEUDOCODE,
                          ["bst", "mutating"], params=["value"], complexity_time="O(h)"),
    "search":       _info("search", "BST Search", bst.search, bst.SEARCH_PSEUDOCODE,
                          ["bst"], params=["value"], complexity_time="O(h)"),
    "find_min":     _info("find_min", "Find Minimum", bst.find_min, bst.MIN_PSEUDOCODE,
                          ["bst"], complexity_time="O(h)"),
    "find_max":     _info("find_max", "Find Maximum", bst.find_max, bst.MAX_PSEUDOCODE,
                          ["bst"], complexity_time="O(h)"),
    "successor":    _info("successor", "In-order Successor", bst.successor, bst.SUCCESSOR_PSEUDOCODE,
                          ["bst"], params=["value"], complexity_time="O(h)"),
    "predecessor":  _info("predecessor", "In-order Predecessor", bst.predecessor, bst.PREDECESSOR_PSEUDOCODE,
                          ["bst"], params=["value"], complexity_time="O(h)"),

    # --- traversals --------------------------------------------------------
    "inorder":      _info("inorder", "In-order Traversal", traversal.inorder, traversal.INORDER_PSEUDOCODE,
                          ["traversal"], complexity_time="O(n)"),
    "preorder":     _info("preorder", "Pre-order Traversal", traversal.preorder, traversal.PREORDER_PSEUDOCODE,
                          ["traversal"], complexity_time="O(n)"),
    "postorder":    _info("postorder", "Post-order Traversal", traversal.postorder, traversal.POSTORDER_PSEUDOCODE,
                          ["traversal"], complexity_time="O(n)"),
    "level_order":  _info("level_order", "Level Order (BFS)", traversal.level_order,
                          traversal.LEVEL_ORDER_PSEUDOCODE, ["traversal"], complexity_time="O(n)"),
    "zigzag":       _info("zigzag", "Zig-Zag Traversal", traversal.zigzag, traversal.ZIGZAG_PSEUDOCODE,
                          ["traversal"], complexity_time="O(n)"),

    # --- properties --------------------------------------------------------
    "validate_bst": _info("validate_bst", "Validate BST", properties.validate_bst,
                          properties.VALIDATE_PSEUDOCODE, ["properties"], complexity_time="O(n)"),
    "height":       _info("height", "Tree Height", properties.height, properties.HEIGHT_PSEUDOCODE,
                          ["properties"], complexity_time="O(n)"),
    "count_nodes":  _info("count_nodes", "Count Nodes", properties.count_nodes, properties.COUNT_PSEUDOCODE,
                          ["properties"], complexity_time="O(n)"),
    "count_leaves": _info("count_leaves", "Count Leaf Nodes", properties.count_leaves,
                          properties.COUNT_LEAVES_PSEUDOCODE, ["properties"], complexity_time="O(n)"),
    "diameter":     _info("diameter", "Diameter", properties.diameter, properties.DIAMETER_PSEUDOCODE,
                          ["properties"], complexity_time="O(n)"),
    "is_balanced":  _info("is_balanced", "Is Balanced", properties.is_balanced,
                          properties.BALANCED_PSEUDOCODE, ["properties"], complexity_time="O(n)"),
    "is_full":      _info("is_full", "Is Full", properties.is_full, properties.FULL_PSEUDOCODE,
                          ["properties"], complexity_time="O(n)"),
    "is_complete":  _info("is_complete", "Is Complete", properties.is_complete,
                          properties.COMPLETE_PSEUDOCODE, ["properties"], complexity_time="O(n)"),

    # --- construction ------------------------------------------------------
    "from_array":   _info("from_array", "Build From Array", construct.from_array,
                          construct.FROM_ARRAY_PSEUDOCODE, ["construction", "mutating"], params=["values"]),
    "from_pre_in":  _info("from_pre_in", "Build From Preorder + Inorder", construct.from_pre_in,
                          construct.PRE_IN_PSEUDOCODE, ["construction", "mutating"],
                          params=["preorder", "inorder"]),
    "from_post_in": _info("from_post_in", "Build From Postorder + Inorder", construct.from_post_in,
                          construct.POST_IN_PSEUDOCODE, ["construction", "mutating"],
                          params=["postorder", "inorder"]),
    "balanced_bst": _info("balanced_bst", "Balanced BST From Sorted", construct.balanced,
                          construct.BALANCED_PSEUDOCODE, ["construction", "mutating"], params=["values"]),
    "deserialize":  _info("deserialize", "Deserialize (Level Order)", construct.deserialize,
                          construct.DESERIALIZE_PSEUDOCODE, ["construction", "mutating"], params=["data"]),

    # --- balancing ---------------------------------------------------------
    "balance_factors": _info("balance_factors", "Balance Factors", avl.balance_factors,
                             avl.BALANCE_FACTORS_PSEUDOCODE, ["avl"]),
    "rotate_left":  _info("rotate_left", "Rotate Left", avl.rotate_left, avl.ROTATE_LEFT_PSEUDOCODE,
                          ["avl", "mutating"], params=["value"], complexity_time="O(1)"),
    "rotate_right": _info("rotate_right", "Rotate Right", avl.rotate_right, avl.ROTATE_RIGHT_PSEUDOCODE,
                          ["avl", "mutating"], params=["value"], complexity_time="O(1)"),
    "insert_avl":   _info("insert_avl", "AVL Insert", avl.insert_avl, avl.INSERT_AVL_PSEUDOCODE,
                          ["avl", "mutating"], params=["value"], optional=["rebalance"]),

    # --- special -----------------------------------------------------------
    "lca":          _info("lca", "Lowest Common Ancestor", special.lca, special.LCA_PSEUDOCODE,
                          ["special"], params=["first", "second"], complexity_time="O(n)"),
    "left_view":    _info("left_view", "Left View", special.left_view, special.LEFT_VIEW_PSEUDOCODE,
                          ["special", "views"]),
    "right_view":   _info("right_view", "Right View", special.right_view, special.RIGHT_VIEW_PSEUDOCODE,
                          ["special", "views"]),
    "top_view":     _info("top_view", "Top View", special.top_view, special.TOP_VIEW_PSEUDOCODE,
                          ["special", "views"]),
    "bottom_view":  _info("bottom_view", "Bottom View", special.bottom_view, special.BOTTOM_VIEW_PSEUDOCODE,
                          ["special", "views"]),
    "boundary":     _info("boundary", "Boundary Traversal", special.boundary, special.BOUNDARY_PSEUDOCODE,
                          ["special"]),
    "mirror":       _info("mirror", "Mirror Tree", special.mirror, special.MIRROR_PSEUDOCODE,
                          ["special", "mutating"]),
}


def require_tree_algorithm(key: str) -> AlgoInfo:
    info = TREE_REGISTRY.get(key)
    if info is None:
        raise UnknownAlgorithmError("tree", key)
    return info


__all__ = [
    "TREE_REGISTRY",
    "TreeFrame",
    "TreeFrameBuilder",
    "require_tree_algorithm",
]
