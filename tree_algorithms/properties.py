"""
properties.py — Structural Property Checks
==========================================
Validation, height, node / leaf counts, diameter, and the balanced /
full / complete predicates.  All read-only: the tree is never touched.
"""

from collections import deque
from typing import Generator, List, Optional

from tree import BinaryTree
from tree_algorithms.frame import TreeFrame, TreeFrameBuilder


VALIDATE_PSEUDOCODE: List[str] = [
    "validate(node, min, max)",
    "if node.val <= min or node.val >= max: return false",
    "return validate(left, min, node.val) && validate(right, node.val, max)",
]
HEIGHT_PSEUDOCODE:      List[str] = ["height(node)", "l = height(left), r = height(right)", "return 1 + max(l, r)"]
COUNT_PSEUDOCODE:       List[str] = ["count++", "traverse(left)", "traverse(right)"]
COUNT_LEAVES_PSEUDOCODE: List[str] = ["if isLeaf: count++", "traverse(left)", "traverse(right)"]
DIAMETER_PSEUDOCODE:    List[str] = [
    "l = height(left), r = height(right)",
    "diameter = max(diameter, l+r)",
    "return 1 + max(l, r)",
]
BALANCED_PSEUDOCODE:    List[str] = [
    "l = check(left), r = check(right)",
    "if abs(l-r) > 1 return -1",
    "if l==-1 or r==-1 return -1",
    "return 1+max(l,r)",
]
FULL_PSEUDOCODE:        List[str] = [
    "if (left && !right) or (!left && right) return false",
    "check(left) && check(right)",
]
COMPLETE_PSEUDOCODE:    List[str] = [
    "queue = [root]",                                                           # 0
    "while queue not empty:",                                                   # 1
    "  node = queue.dequeue()",                                                 # 2
    "  if node is null:",                                                       # 3
    "    foundNonFullNode = true",                                              # 4
    "  else:",                                                                  # 5
    "    if foundNonFullNode: return false",                                    # 6
    "    queue.enqueue(node.left)",                                             # 7
    "    queue.enqueue(node.right)",                                            # 8
]

UNBALANCED = -1


def _bound(value: Optional[int], fallback: str) -> str:
    return fallback if value is None else str(value)


def _arrow_join(values: List[int]) -> str:
    return " -> ".join(str(v) for v in values)


# ---------------------------------------------------------------------------
# validate BST
# ---------------------------------------------------------------------------
def validate_bst(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """Range check with bounds tightened on the way down; first failure ends it."""
    fb   = TreeFrameBuilder(tree)
    path: List[int] = []

    def check(node_id: Optional[int], low: Optional[int], high: Optional[int]):
        if node_id is None:
            return True
        node = tree.nodes[node_id]
        path.append(node.value)
        span = f"({_bound(low, '-inf')}, {_bound(high, 'inf')})"
        yield fb.build(0, f"Checking {node.value} in range {span}.", highlights=[node.id], output=_arrow_join(path))

        if (low is not None and node.value <= low) or (high is not None and node.value >= high):
            yield fb.build(
                1, f"Invalid! {node.value} is not in range {span}.",
                highlights=[node.id], evaluated=[node.id], output=f"Invalid: {node.value}",
            )
            return False
        if not (yield from check(node.left, low, node.value)):
            return False
        return (yield from check(node.right, node.value, high))

    if (yield from check(tree.root_id, None, None)):
        yield fb.build(2, "Tree is a Valid BST.", output="Valid BST")
    else:
        yield fb.build(1, "Tree is NOT a Valid BST.", output="Not a Valid BST")


# ---------------------------------------------------------------------------
# height
# ---------------------------------------------------------------------------
def height(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """Post-order; height(null) = -1 so a single node has height 0."""
    fb = TreeFrameBuilder(tree)

    def measure(node_id: Optional[int]):
        if node_id is None:
            yield fb.build(0, "Reached null node. Height is -1.", output="Height: -1")
            return -1
        node = tree.nodes[node_id]
        yield fb.build(
            0, f"Visiting {node.value}. Computing height of children.",
            highlights=[node.id], output=f"Current: {node.value}",
        )
        left  = yield from measure(node.left)
        right = yield from measure(node.right)
        h = 1 + max(left, right)
        yield fb.build(
            2, f"Height of {node.value} is 1 + max({left}, {right}) = {h}.",
            highlights=[node.id], evaluated=[node.id], output=f"Height({node.value}): {h}",
        )
        return h

    total = yield from measure(tree.root_id)
    yield fb.build(2, f"Total height of the tree is {total}.", output=f"Total Height: {total}")


# ---------------------------------------------------------------------------
# counts
# ---------------------------------------------------------------------------
def count_nodes(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    fb    = TreeFrameBuilder(tree)
    seen: List[int] = []

    def walk(node_id: Optional[int]):
        if node_id is None:
            return
        node = tree.nodes[node_id]
        seen.append(node.value)
        yield fb.build(
            0, f"Found node {node.value}. Current count: {len(seen)}.",
            highlights=[node.id], output=_arrow_join(seen),
        )
        yield from walk(node.left)
        yield from walk(node.right)

    yield from walk(tree.root_id)
    yield fb.build(0, f"Total nodes in the tree: {len(seen)}.", output=f"Total Nodes: {len(seen)}")


def count_leaves(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    fb     = TreeFrameBuilder(tree)
    leaves: List[int] = []

    def walk(node_id: Optional[int]):
        if node_id is None:
            return
        node = tree.nodes[node_id]
        if node.is_leaf:
            leaves.append(node.value)
            text = f"Visiting {node.value}. Is Leaf. Current count: {len(leaves)}"
        else:
            text = f"Visiting {node.value}. Not a leaf."
        yield fb.build(
            0, text, highlights=[node.id], evaluated=[node.id] if node.is_leaf else [],
            output=f"Leaves: {_arrow_join(leaves)}",
        )
        yield from walk(node.left)
        yield from walk(node.right)

    yield from walk(tree.root_id)
    yield fb.build(0, f"Total leaf nodes in the tree: {len(leaves)}.", output=f"Total Leaves: {len(leaves)}")


# ---------------------------------------------------------------------------
# diameter
# ---------------------------------------------------------------------------
def diameter(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """Longest path in edges, from the same post-order pass as height (null = 0)."""
    fb   = TreeFrameBuilder(tree)
    path: List[int] = []
    best = 0

    def walk(node_id: Optional[int]):
        nonlocal best
        if node_id is None:
            return 0
        node = tree.nodes[node_id]
        path.append(node.value)
        yield fb.build(0, f"Visiting {node.value}.", highlights=[node.id], output=_arrow_join(path))
        left  = yield from walk(node.left)
        right = yield from walk(node.right)
        best  = max(best, left + right)
        yield fb.build(
            1,
            f"At {node.value}: L-height={left}, R-height={right}. "
            f"Path through node={left + right}. Max Diameter so far={best}.",
            highlights=[node.id], evaluated=[node.id], output=f"Max Diameter: {best}",
        )
        return 1 + max(left, right)

    yield from walk(tree.root_id)
    yield fb.build(1, f"The diameter of the tree is {best}.", output=f"Final Diameter: {best}")


# ---------------------------------------------------------------------------
# balanced / full / complete
# ---------------------------------------------------------------------------
def is_balanced(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """Post-order heights with -1 as the "already unbalanced" sentinel."""
    fb = TreeFrameBuilder(tree)

    def check(node_id: Optional[int]):
        if node_id is None:
            return 0
        node = tree.nodes[node_id]
        yield fb.build(0, f"Checking balance of {node.value}.", highlights=[node.id], output=f"Checking: {node.value}")

        left = yield from check(node.left)
        if left == UNBALANCED:
            return UNBALANCED
        right = yield from check(node.right)
        if right == UNBALANCED:
            return UNBALANCED

        if abs(left - right) > 1:
            yield fb.build(
                1, f"Unbalanced at {node.value}! Left height {left}, Right height {right}.",
                highlights=[node.id], evaluated=[node.id], output=f"Unbalanced at {node.value}",
            )
            return UNBALANCED
        yield fb.build(
            3, f"{node.value} is balanced (lh={left}, rh={right}).",
            highlights=[node.id], output=f"Balanced: {node.value}",
        )
        return 1 + max(left, right)

    if (yield from check(tree.root_id)) == UNBALANCED:
        yield fb.build(2, "Tree is Unbalanced.", output="Tree is Unbalanced.")
    else:
        yield fb.build(3, "Tree is Balanced.", output="Tree is Balanced.")


def is_full(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """Every node has exactly 0 or 2 children."""
    fb = TreeFrameBuilder(tree)

    def check(node_id: Optional[int]):
        if node_id is None:
            return True
        node = tree.nodes[node_id]
        yield fb.build(0, f"Checking {node.value}.", highlights=[node.id], output=f"Checking: {node.value}")
        if (node.left is None) != (node.right is None):
            yield fb.build(
                0, f"Checking {node.value}: Has only one child. Not Full.",
                highlights=[node.id], evaluated=[node.id], output=f"Not Full: {node.value}",
            )
            return False
        if not (yield from check(node.left)):
            return False
        return (yield from check(node.right))

    if (yield from check(tree.root_id)):
        yield fb.build(1, "Tree is Full.", output="Tree is Full.")
    else:
        yield fb.build(0, "Tree is Not Full.", output="Tree is Not Full.")


def is_complete(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """Level-order scan: once a missing child shows up, nothing real may follow."""
    fb = TreeFrameBuilder(tree)

    if tree.root_id is None:
        yield fb.build(0, "Empty tree is complete.", output="Empty tree is complete.")
        return

    queue: deque = deque([tree.root_id])
    path: List[int] = []
    gap = False

    yield fb.build(0, "Starting Completeness Check.", highlights=[tree.root_id])
    while queue:
        node_id = queue.popleft()
        if node_id is None:
            if not gap:
                gap = True
                yield fb.build(
                    4, "Encountered a null child. All subsequent nodes must be null.",
                    output=_arrow_join(path) + " -> null",
                )
            continue

        node = tree.nodes[node_id]
        if gap:
            yield fb.build(
                6, f"Found a non-null node ({node.value}) after encountering a null. Not Complete.",
                highlights=[node.id], evaluated=[node.id], output=f"Not Complete: {node.value}",
            )
            return

        path.append(node.value)
        yield fb.build(2, f"Visiting {node.value}.", highlights=[node.id], output=_arrow_join(path))
        queue.append(node.left)
        queue.append(node.right)
        yield fb.build(7, f"Enqueued children of {node.value}.", highlights=[node.id])

    yield fb.build(8, "Tree is Complete.", output="Tree is Complete.")
