"""
traversal.py — Tree Traversals
==============================
Depth-first orders (in / pre / post) emit one "enter" frame and one
"emit" frame per node; level order and zig-zag are queue driven.
The running output is the comma-joined list of values emitted so far.
"""

from collections import deque
from typing import Generator, List, Optional

from tree import BinaryTree
from tree_algorithms.frame import TreeFrame, TreeFrameBuilder


INORDER_PSEUDOCODE:   List[str] = ["inorder(left)", "print(root)", "inorder(right)"]
PREORDER_PSEUDOCODE:  List[str] = ["print(root)", "preorder(left)", "preorder(right)"]
POSTORDER_PSEUDOCODE: List[str] = ["postorder(left)", "postorder(right)", "print(root)"]

LEVEL_ORDER_PSEUDOCODE: List[str] = [
    "queue.push(root)",                                 # 0
    "while queue not empty:",                           # 1
    "  node = queue.pop()",                             # 2
    "  print(node)",                                    # 3
    "  if node.left: queue.push(node.left)",            # 4
    "  if node.right: queue.push(node.right)",          # 5
]

ZIGZAG_PSEUDOCODE: List[str] = [
    "queue = [(root, 0)]",
    "while queue not empty:",
    "  level_nodes = process_level(queue)",
    "  if level % 2 == 1: reverse(level_nodes)",
    "  print(level_nodes)",
]

# position of the "print" line in each depth-first order
_EMIT_LINE = {"inorder": 1, "preorder": 0, "postorder": 2}


def _depth_first(tree: BinaryTree, order: str) -> Generator[TreeFrame, None, None]:
    fb      = TreeFrameBuilder(tree)
    emitted: List[int] = []

    if tree.root is None:
        yield fb.empty()
        return

    def emit(node):
        emitted.append(node.value)
        return fb.build(
            _EMIT_LINE[order], f"Processed {node.value}.",
            highlights=[node.id], evaluated=[node.id], output=", ".join(map(str, emitted)),
        )

    def visit(node_id: Optional[int]):
        if node_id is None:
            return
        node = tree.nodes[node_id]
        yield fb.build(0, f"Visiting {node.value}.", highlights=[node.id])
        if order == "preorder":
            yield emit(node)
        yield from visit(node.left)
        if order == "inorder":
            yield emit(node)
        yield from visit(node.right)
        if order == "postorder":
            yield emit(node)

    yield from visit(tree.root_id)


def inorder(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    yield from _depth_first(tree, "inorder")


def preorder(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    yield from _depth_first(tree, "preorder")


def postorder(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    yield from _depth_first(tree, "postorder")


def level_order(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    fb      = TreeFrameBuilder(tree)
    emitted: List[int] = []

    if tree.root is None:
        yield fb.empty()
        return

    queue = deque([tree.root_id])
    yield fb.build(0, "Starting Level Order Traversal (BFS).", output="")

    while queue:
        node = tree.nodes[queue.popleft()]
        emitted.append(node.value)
        yield fb.build(
            2, f"Dequeued {node.value}. Visiting.",
            highlights=[node.id], evaluated=[node.id], output=", ".join(map(str, emitted)),
        )
        if node.left is not None:
            queue.append(node.left)
            yield fb.build(
                4, f"Enqueuing left child {tree.nodes[node.left].value}.", highlights=[node.id, node.left],
            )
        if node.right is not None:
            queue.append(node.right)
            yield fb.build(
                5, f"Enqueuing right child {tree.nodes[node.right].value}.", highlights=[node.id, node.right],
            )


def zigzag(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """Level order with every odd level read right-to-left."""
    fb      = TreeFrameBuilder(tree)
    emitted: List[int] = []
    seen:    List[int] = []

    if tree.root is None:
        yield fb.empty()
        return

    yield fb.build(0, "Starting Zig-Zag (Spiral) Traversal.", output="")

    level   = 0
    current = [tree.root_id]
    while current:
        following: List[int] = []
        for nid in current:
            following.extend(tree.nodes[nid].children())

        order = list(reversed(current)) if level % 2 == 1 else current
        direction = "R->L" if level % 2 == 1 else "L->R"
        for nid in order:
            node = tree.nodes[nid]
            emitted.append(node.value)
            seen.append(nid)
            yield fb.build(
                2, f"Level {level} ({direction}): Visiting {node.value}.",
                highlights=seen, evaluated=[nid], output=", ".join(map(str, emitted)),
            )
        current = following
        level  += 1
