"""
node.py — Binary Tree Node
==========================
One row of the flat node table.  Children and parent are referenced by
id, never by object, so copying a tree (or snapshotting it into a frame)
is a plain value copy.
"""

from typing import Optional


class TreeNode:
    """
    Attributes:
        id        : Integer id, handed out by the owning BinaryTree.
        value     : Key used for BST ordering.
        x, y      : Canvas coordinates (recomputed by layout).
        left      : Id of the left child or None.
        right     : Id of the right child or None.
        parent_id : Id of the parent or None (root / detached node).
    """

    __slots__ = ("id", "value", "x", "y", "left", "right", "parent_id")

    def __init__(
        self,
        node_id: int,
        value: int,
        x: float = 0.0,
        y: float = 0.0,
        left: Optional[int] = None,
        right: Optional[int] = None,
        parent_id: Optional[int] = None,
    ):
        self.id        = node_id
        self.value     = value
        self.x         = x
        self.y         = y
        self.left      = left
        self.right     = right
        self.parent_id = parent_id

    def children(self):
        """Child ids, left first, skipping empty slots."""
        return [c for c in (self.left, self.right) if c is not None]

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def to_dict(self) -> dict:
        return {
            "id":        self.id,
            "value":     self.value,
            "x":         self.x,
            "y":         self.y,
            "left":      self.left,
            "right":     self.right,
            "parent_id": self.parent_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TreeNode":
        return cls(
            int(data["id"]), data["value"],
            x=data.get("x", 0.0), y=data.get("y", 0.0),
            left=data.get("left"), right=data.get("right"), parent_id=data.get("parent_id"),
        )

    def copy(self) -> "TreeNode":
        return TreeNode(self.id, self.value, self.x, self.y, self.left, self.right, self.parent_id)

    def __repr__(self) -> str:
        return f"TreeNode(id={self.id}, value={self.value}, L={self.left}, R={self.right}, P={self.parent_id})"

    def __eq__(self, other) -> bool:
        return isinstance(other, TreeNode) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(self.id)
