"""
tree/
-----
Binary tree data layer.  Public API:

    from tree import BinaryTree, TreeNode, parse_key
"""

from tree.node   import TreeNode
from tree.tree   import BinaryTree, parse_key
from tree.layout import compute_positions, apply_layout

__all__ = [
    "TreeNode",
    "BinaryTree", "parse_key",
    "compute_positions", "apply_layout",
]
