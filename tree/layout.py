"""
layout.py — Deterministic Binary Layout
=======================================
Positions are a pure function of tree shape: the root sits at a fixed
anchor and every child lands at (parent.x ± offset, parent.y + level
height), with the offset halving at each depth.  Recomputed from scratch
after every structural change.
"""

from typing import Dict, Optional

from tree.node import TreeNode
from config import TREE_ROOT_X, TREE_ROOT_Y, TREE_LEVEL_HEIGHT, TREE_INITIAL_OFFSET


def compute_positions(
    nodes: Dict[int, TreeNode],
    root_id: Optional[int],
    root_x: float = TREE_ROOT_X,
    root_y: float = TREE_ROOT_Y,
    level_height: float = TREE_LEVEL_HEIGHT,
    initial_offset: float = TREE_INITIAL_OFFSET,
) -> Dict[int, tuple]:
    """{node_id: (x, y)} for every node reachable from root_id."""
    positions: Dict[int, tuple] = {}
    if root_id is None or root_id not in nodes:
        return positions

    # iterative so deep degenerate trees don't hit the recursion limit
    pending = [(root_id, root_x, root_y, initial_offset)]
    while pending:
        nid, x, y, offset = pending.pop()
        if nid in positions:
            continue
        positions[nid] = (x, y)
        node = nodes[nid]
        if node.right is not None and node.right in nodes:
            pending.append((node.right, x + offset, y + level_height, offset / 2))
        if node.left is not None and node.left in nodes:
            pending.append((node.left, x - offset, y + level_height, offset / 2))
    return positions


def apply_layout(tree) -> None:
    """Move every node reachable from the root; detached nodes keep their spot."""
    for nid, (x, y) in compute_positions(tree.nodes, tree.root_id).items():
        node = tree.nodes[nid]
        node.x, node.y = x, y
