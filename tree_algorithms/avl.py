"""
avl.py — Balancing Primitives
=============================
Balance factors, single left / right rotations at a named node, and
AVL-aware insertion.

insert_avl does a plain BST insert, then walks the insertion path
bottom-up computing balance factors.  The first node whose factor
leaves [-1, 1] is fixed with the matching LL / RR / LR / RL rotation
when `rebalance` is on; with it off the imbalance is only flagged.

Heights here count nodes (null = 0), so BF = H(L) - H(R).
"""

from typing import Dict, Generator, List, Optional

from tree import BinaryTree, parse_key
from tree_algorithms.frame import TreeFrame, TreeFrameBuilder


BALANCE_FACTORS_PSEUDOCODE: List[str] = ["Calculate Height(L)", "Calculate Height(R)", "BF = H(L) - H(R)"]
ROTATE_LEFT_PSEUDOCODE:  List[str] = ["newRoot = node.right", "node.right = newRoot.left", "newRoot.left = node"]
ROTATE_RIGHT_PSEUDOCODE: List[str] = ["newRoot = node.left", "node.left = newRoot.right", "newRoot.right = node"]
INSERT_AVL_PSEUDOCODE:   List[str] = [
    "Insert(val)",                                      # 0
    "BF = H(L) - H(R)",                                 # 1
    "if |BF| > 1:",                                     # 2
    "  LL: rotateRight(z)   RR: rotateLeft(z)",         # 3
    "  LR: rotateLeft(z.left), rotateRight(z)",         # 4
    "  RL: rotateRight(z.right), rotateLeft(z)",        # 5
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def subtree_height(tree: BinaryTree, node_id: Optional[int]) -> int:
    if node_id is None or node_id not in tree.nodes:
        return 0
    node = tree.nodes[node_id]
    return 1 + max(subtree_height(tree, node.left), subtree_height(tree, node.right))


def balance_factor(tree: BinaryTree, node_id: int) -> int:
    node = tree.nodes[node_id]
    return subtree_height(tree, node.left) - subtree_height(tree, node.right)


def rotate(tree: BinaryTree, node_id: int, direction: str) -> int:
    """
    Single rotation around node_id.  Returns the id of the promoted child.

    direction "left" promotes the right child, "right" the left child.
    The caller has checked that the promoted child exists.
    """
    node  = tree.nodes[node_id]
    up    = "right" if direction == "left" else "left"      # slot holding the pivot
    down  = direction                                        # pivot slot that moves across
    pivot = tree.nodes[getattr(node, up)]
    parent_id = node.parent_id

    inner = getattr(pivot, down)
    setattr(node, up, inner)
    if inner is not None:
        tree.nodes[inner].parent_id = node.id

    tree.replace_child(parent_id, node.id, pivot.id)
    setattr(pivot, down, node.id)
    node.parent_id = pivot.id
    return pivot.id


# ---------------------------------------------------------------------------
# balance factors
# ---------------------------------------------------------------------------
def balance_factors(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    fb = TreeFrameBuilder(tree)
    if not tree.nodes:
        yield fb.empty()
        return

    factors: Dict[int, int] = {nid: balance_factor(tree, nid) for nid in tree.nodes}
    fb.labels = {nid: str(bf) for nid, bf in factors.items()}
    lines  = "\n".join(f"Node {tree.nodes[nid].value}: BF={bf}" for nid, bf in factors.items())
    listed = ", ".join(f"{tree.nodes[nid].value}: {bf}" for nid, bf in factors.items())
    yield fb.build(2, f"Balance Factors calculated:\n{lines}", highlights=list(factors), output=f"BFs: {listed}")


# ---------------------------------------------------------------------------
# single rotations
# ---------------------------------------------------------------------------
def rotate_left(tree: BinaryTree, value) -> Generator[TreeFrame, None, None]:
    return _rotate_traced(tree, parse_key(value), "left")


def rotate_right(tree: BinaryTree, value) -> Generator[TreeFrame, None, None]:
    return _rotate_traced(tree, parse_key(value), "right")


def _rotate_traced(tree: BinaryTree, val: int, direction: str) -> Generator[TreeFrame, None, None]:
    fb   = TreeFrameBuilder(tree)
    node = tree.find_value(val)
    if node is None:
        yield fb.build(0, f"Node {val} not found.", output=f"Node {val} not found.")
        return

    side  = "right" if direction == "left" else "left"
    pivot = tree.get_node(getattr(node, side))
    if pivot is None:
        yield fb.build(
            0, f"Cannot rotate {direction}: Node {val} has no {side} child.",
            highlights=[node.id], output=f"Cannot rotate {direction}: {val} has no {side} child.",
        )
        return

    title = direction.capitalize()
    yield fb.build(
        0, f"Rotating {title} around {val}. New root will be {pivot.value}.",
        highlights=[node.id, pivot.id], output=f"Rotating {title} around {val}",
    )
    rotate(tree, node.id, direction)
    tree.relayout()
    yield fb.build(2, "Rotated.", highlights=[node.id, pivot.id], output=f"Rotated. New root: {pivot.value}")


# ---------------------------------------------------------------------------
# AVL insert
# ---------------------------------------------------------------------------
def insert_avl(tree: BinaryTree, value, rebalance: bool = True) -> Generator[TreeFrame, None, None]:
    if isinstance(rebalance, str):
        rebalance = rebalance.strip().lower() not in ("0", "false", "no", "off")
    return _insert_avl(tree, parse_key(value), bool(rebalance))


def _insert_avl(tree: BinaryTree, val: int, rebalance: bool) -> Generator[TreeFrame, None, None]:
    fb   = TreeFrameBuilder(tree)
    path: List[int] = []

    if tree.root_id is None:
        node = tree.new_node(val)
        tree.root_id = node.id
        tree.relayout()
        yield fb.build(0, f"Inserted {val}. Tree is now balanced.", highlights=[node.id], output=str(val))
        return

    cur = tree.root
    while True:
        path.append(cur.id)
        if val == cur.value:
            yield fb.build(
                0, f"Value {val} already exists. Duplicates not allowed.",
                highlights=[cur.id], evaluated=[cur.id],
            )
            return
        side = "left" if val < cur.value else "right"
        nxt  = getattr(cur, side)
        if nxt is None:
            node = tree.new_node(val, parent_id=cur.id)
            setattr(cur, side, node.id)
            path.append(node.id)
            break
        cur = tree.nodes[nxt]

    tree.relayout()
    trail = " -> ".join(str(tree.nodes[nid].value) for nid in path)
    yield fb.build(0, f"Inserted {val}. Checking Balance...", highlights=[path[-1]], output=trail)

    for nid in reversed(path):
        node = tree.nodes[nid]
        bf   = balance_factor(tree, nid)
        yield fb.build(1, f"Node {node.value} BF: {bf}", highlights=[nid], output=f"BF({node.value}): {bf}")
        if -1 <= bf <= 1:
            continue

        yield fb.build(
            2, f"Imbalance detected at {node.value}!",
            highlights=[nid], evaluated=[nid], output=f"Imbalance at {node.value}",
        )
        if not rebalance:
            yield fb.build(2, f"Rotation needed at {node.value}.", highlights=[nid], output=f"Rotation needed at {node.value}")
            return
        yield from _fix(fb, tree, nid, bf)
        return

    yield fb.build(1, "Tree is balanced.", output="Tree is balanced.")


def _fix(fb: TreeFrameBuilder, tree: BinaryTree, z: int, bf: int):
    """Resolve the imbalance at z; the heavy child's own factor picks the case."""
    node = tree.nodes[z]
    if bf > 1:
        child = tree.nodes[node.left]
        case  = "LL" if balance_factor(tree, child.id) >= 0 else "LR"
    else:
        child = tree.nodes[node.right]
        case  = "RR" if balance_factor(tree, child.id) <= 0 else "RL"

    if case == "LR":
        yield fb.build(4, f"LR case at {node.value}: rotating left around {child.value} first.", highlights=[z, child.id])
        rotate(tree, child.id, "left")
        tree.relayout()
        yield fb.build(4, "Rotated. Now an LL case.", highlights=[z, node.left])
        case = "LL"
    elif case == "RL":
        yield fb.build(5, f"RL case at {node.value}: rotating right around {child.value} first.", highlights=[z, child.id])
        rotate(tree, child.id, "right")
        tree.relayout()
        yield fb.build(5, "Rotated. Now an RR case.", highlights=[z, node.right])
        case = "RR"

    direction = "right" if case == "LL" else "left"
    yield fb.build(3, f"{case} case: rotating {direction} around {node.value}.", highlights=[z])
    top = rotate(tree, z, direction)
    tree.relayout()
    yield fb.build(
        3, f"Rotated. Subtree root is now {tree.nodes[top].value}. Tree is balanced.",
        highlights=[top], evaluated=[top], output=f"Rebalanced at {node.value}",
    )
