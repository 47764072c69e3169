"""
tree.py — Flat Node-Table Binary Tree
=====================================
The live binary tree every tree tracer runs against.

Responsibilities:
  1. Id allocation                          (monotonic, never reused)
  2. Interactive editing                    (add / remove / connect / move)
  3. Child-slot plumbing used by tracers    (attach, replace_child, detach)
  4. Layout refresh                         (delegates to tree.layout)
  5. Factories & serialisation              (initial tree, seeded random BST)

Design decisions:
  - Nodes live in a dict keyed by id; links are ids (left / right /
    parent_id).  A copy is a value copy, which is what makes frames cheap.
  - Detached nodes are allowed: a node added to a non-empty tree floats
    until the user connects it.  `root_id` is tracked explicitly and is
    re-derived only when the current root disappears or gains a parent.
  - Rejected edits raise StructureError and leave the table untouched.
"""

import logging
import random
from typing import Dict, List, Optional, Tuple, Any

from errors import StructureError, TraceInputError
from tree.node import TreeNode
from tree.layout import apply_layout

logger = logging.getLogger(__name__)


def parse_key(raw: Any) -> int:
    """'42', 42, ' 7 ' → int.  Anything else is an input error."""
    if isinstance(raw, bool):
        raise TraceInputError(f"Invalid value: {raw!r}")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        raise TraceInputError(f"Invalid value: {raw!r}") from None


class BinaryTree:
    """
    Attributes:
        nodes    : {node_id: TreeNode}
        root_id  : id of the root, or None for an empty tree
        _next_id : next id handed out by new_node
    """

    def __init__(self):
        self.nodes:    Dict[int, TreeNode] = {}
        self.root_id:  Optional[int]       = None
        self._next_id: int                 = 0

    # ==================================================================
    # LOOKUP
    # ==================================================================
    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def next_id(self) -> int:
        """Id the next created node will get."""
        return self._next_id

    def get_node(self, node_id: Optional[int]) -> Optional[TreeNode]:
        if node_id is None:
            return None
        return self.nodes.get(node_id)

    def require_node(self, node_id: int) -> TreeNode:
        node = self.nodes.get(node_id)
        if node is None:
            raise StructureError(f"Node {node_id} does not exist.")
        return node

    @property
    def root(self) -> Optional[TreeNode]:
        return self.get_node(self.root_id)

    def find_value(self, value: int) -> Optional[TreeNode]:
        """First node holding `value` in level order from the root."""
        queue = [self.root_id] if self.root_id is not None else []
        while queue:
            node = self.nodes[queue.pop(0)]
            if node.value == value:
                return node
            queue.extend(node.children())
        return None

    def inorder_values(self) -> List[int]:
        out: List[int] = []

        def walk(nid):
            if nid is None:
                return
            node = self.nodes[nid]
            walk(node.left)
            out.append(node.value)
            walk(node.right)

        walk(self.root_id)
        return out

    def is_ancestor(self, ancestor_id: int, node_id: int) -> bool:
        """True when ancestor_id lies on node_id's parent chain (or is node_id)."""
        cur = node_id
        while cur is not None:
            if cur == ancestor_id:
                return True
            cur = self.nodes[cur].parent_id
        return False

    # ==================================================================
    # LOW-LEVEL SLOT PLUMBING (used by tracers)
    # ==================================================================
    def new_node(self, value: int, parent_id: Optional[int] = None) -> TreeNode:
        node = TreeNode(self._next_id, value, parent_id=parent_id)
        self.nodes[node.id] = node
        self._next_id += 1
        return node

    def replace_child(self, parent_id: Optional[int], old_id: int, new_id: Optional[int]) -> None:
        """
        Point whichever slot of parent_id held old_id at new_id and fix
        new_id's back-reference.  parent_id None means old_id was the root.
        """
        if parent_id is None:
            self.root_id = new_id
        else:
            parent = self.nodes[parent_id]
            if parent.left == old_id:
                parent.left = new_id
            elif parent.right == old_id:
                parent.right = new_id
        if new_id is not None:
            self.nodes[new_id].parent_id = parent_id

    def discard(self, node_id: int) -> None:
        """Drop a node that has already been unlinked."""
        del self.nodes[node_id]
        if self.root_id == node_id:
            self.root_id = None

    # ==================================================================
    # INTERACTIVE EDITING
    # ==================================================================
    def add_node(self, x: float, y: float, value: Any) -> TreeNode:
        """
        Drop a new node on the canvas.  It becomes the root of an empty
        tree; otherwise it stays detached until connected with add_edge.
        """
        node = self.new_node(parse_key(value))
        node.x, node.y = x, y
        if self.root_id is None:
            self.root_id = node.id
            self.relayout()
        return node

    def remove_node(self, node_id: int) -> None:
        node = self.require_node(node_id)
        if node.parent_id is not None and node.parent_id in self.nodes:
            parent = self.nodes[node.parent_id]
            if parent.left == node_id:
                parent.left = None
            if parent.right == node_id:
                parent.right = None
        for child_id in node.children():
            if child_id in self.nodes:
                self.nodes[child_id].parent_id = None
        del self.nodes[node_id]
        self._refresh_root()
        self.relayout()

    def add_edge(self, parent_id: int, child_id: int) -> str:
        """Connect parent → child.  Returns the slot used ('left' / 'right')."""
        if parent_id == child_id:
            raise self._reject("A node cannot be its own child.")
        parent = self.require_node(parent_id)
        child  = self.require_node(child_id)

        if child_id in (parent.left, parent.right):
            raise self._reject("Edge already exists.")
        if parent.left is not None and parent.right is not None:
            raise self._reject(f"Node {parent.value} already has two children.")
        if self.is_ancestor(child_id, parent_id):
            raise self._reject("Cannot create cycle.")
        if child.parent_id is not None:
            raise self._reject(f"Node {child.value} already has a parent.")

        preferred = "left" if child.value < parent.value else "right"
        if getattr(parent, preferred) is None:
            side = preferred
        else:
            side = "left" if parent.left is None else "right"
        setattr(parent, side, child_id)
        child.parent_id = parent_id

        if self.root_id == child_id:
            # the old root now hangs below parent; its topmost ancestor takes over
            top = parent
            while top.parent_id is not None:
                top = self.nodes[top.parent_id]
            self.root_id = top.id
        self._refresh_root()
        self.relayout()
        return side

    def remove_edge(self, parent_id: int, child_id: int) -> None:
        parent = self.require_node(parent_id)
        if parent.left == child_id:
            parent.left = None
        elif parent.right == child_id:
            parent.right = None
        else:
            raise self._reject(f"No edge between {parent_id} and {child_id}.")
        self.nodes[child_id].parent_id = None
        self._refresh_root()
        self.relayout()

    def move_node(self, node_id: int, x: float, y: float) -> TreeNode:
        node = self.require_node(node_id)
        node.x, node.y = x, y
        return node

    # ==================================================================
    # LAYOUT / RESET / COPY
    # ==================================================================
    def relayout(self) -> None:
        apply_layout(self)

    def clear(self) -> None:
        """Empty the table.  The id counter keeps counting."""
        self.nodes.clear()
        self.root_id = None

    def copy(self) -> "BinaryTree":
        t = BinaryTree()
        t.nodes    = {nid: n.copy() for nid, n in self.nodes.items()}
        t.root_id  = self.root_id
        t._next_id = self._next_id
        return t

    def snapshot(self) -> Tuple[Tuple[dict, ...], Tuple[dict, ...]]:
        """Plain-dict nodes plus parent → child edges derived from the slots."""
        nodes = tuple(n.to_dict() for n in self.nodes.values())
        edges = []
        for n in self.nodes.values():
            for side in ("left", "right"):
                child = getattr(n, side)
                if child is not None:
                    edges.append({"from": n.id, "to": child, "side": side})
        return nodes, tuple(edges)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "root_id": self.root_id,
            "next_id": self._next_id,
            "nodes":   [n.to_dict() for n in self.nodes.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "BinaryTree":
        t = cls()
        for nd in data.get("nodes", []):
            node = TreeNode.from_dict(nd)
            t.nodes[node.id] = node
        t.root_id  = data.get("root_id")
        t._next_id = max(data.get("next_id", 0), max(t.nodes, default=-1) + 1)
        return t

    # ==================================================================
    # FACTORIES
    # ==================================================================
    def insert_value(self, value: int) -> Optional[TreeNode]:
        """Plain (untraced) BST insert.  Duplicates are ignored → None."""
        if self.root_id is None:
            node = self.new_node(value)
            self.root_id = node.id
            return node
        cur = self.nodes[self.root_id]
        while True:
            if value == cur.value:
                return None
            side = "left" if value < cur.value else "right"
            nxt = getattr(cur, side)
            if nxt is None:
                node = self.new_node(value, parent_id=cur.id)
                setattr(cur, side, node.id)
                return node
            cur = self.nodes[nxt]

    @classmethod
    def initial(cls) -> "BinaryTree":
        """The seven-node BST a fresh session starts with."""
        t = cls()
        for v in (50, 30, 70, 20, 40, 60, 80):
            t.insert_value(v)
        t.relayout()
        return t

    @classmethod
    def random_tree(cls, seed: Optional[int] = None, next_id: int = 0) -> "BinaryTree":
        """7-14 unique values in 1..99 inserted in random order."""
        rng    = random.Random(seed)
        count  = rng.randint(7, 14)
        values = rng.sample(range(1, 100), count)
        t = cls()
        t._next_id = next_id
        for v in values:
            t.insert_value(v)
        t.relayout()
        logger.debug("Generated random BST with %d nodes (seed=%s)", count, seed)
        return t

    # ==================================================================
    # Internal
    # ==================================================================
    def _refresh_root(self) -> None:
        root = self.nodes.get(self.root_id) if self.root_id is not None else None
        if root is not None and root.parent_id is None:
            return
        self.root_id = next((nid for nid, n in self.nodes.items() if n.parent_id is None), None)

    @staticmethod
    def _reject(message: str) -> StructureError:
        logger.warning("Rejected tree edit: %s", message)
        return StructureError(message)

    def __repr__(self) -> str:
        return f"BinaryTree(nodes={len(self.nodes)}, root={self.root_id})"
