"""
bst.py — Core BST Operations
============================
insert / delete / search, min / max, successor / predecessor.

Each public function validates its raw input first (so a malformed
value raises TraceInputError before any frame exists) and then hands
back the generator that does the work.  Structural tracers (insert,
delete) mutate the tree they are given and re-run the layout after
every change, so each frame shows the tree as it stands at that step.
"""

from typing import Generator, List, Optional

from tree import BinaryTree, parse_key
from tree_algorithms.frame import TreeFrame, TreeFrameBuilder


INSERT_PSEUDOCODE: List[str] = [
    "if root is NULL, return createNode(val)",                            # 0
    "if val < root->val, root->left = insert(root->left, val)",           # 1
    "else if val > root->val, root->right = insert(root->right, val)",    # 2
    "return root",                                                        # 3
]

DELETE_PSEUDOCODE: List[str] = [
    "if root == NULL return root",                                        # 0
    "if key < root->val delete(left)",                                    # 1
    "else if key > root->val delete(right)",                              # 2
    "else (found):",                                                      # 3
    "  if one child: return child",                                       # 4
    "  if two children: replace with successor, delete successor",        # 5
]

SEARCH_PSEUDOCODE: List[str] = [
    "if root == NULL or root->val == target, return root",
    "if target < root->val, search(root->left)",
    "else search(root->right)",
]

MIN_PSEUDOCODE: List[str] = ["curr = root", "while curr.left != NULL:", "  curr = curr.left", "return curr.val"]
MAX_PSEUDOCODE: List[str] = ["curr = root", "while curr.right != NULL:", "  curr = curr.right", "return curr.val"]

SUCCESSOR_PSEUDOCODE: List[str] = [
    "Search node",
    "If right child: return min(right)",
    "Else: return deepest ancestor where node is in left subtree",
]

PREDECESSOR_PSEUDOCODE: List[str] = [
    "Search node",
    "If left child: return max(left)",
    "Else: return deepest ancestor where node is in right subtree",
]


# ---------------------------------------------------------------------------
# insert
# ---------------------------------------------------------------------------
def insert(tree: BinaryTree, value) -> Generator[TreeFrame, None, None]:
    return _insert(tree, parse_key(value))


def _insert(tree: BinaryTree, val: int) -> Generator[TreeFrame, None, None]:
    fb = TreeFrameBuilder(tree)
    yield fb.build(0, f"Starting insertion of {val}.")

    if tree.root_id is None:
        node = tree.new_node(val)
        tree.root_id = node.id
        tree.relayout()
        yield fb.build(0, f"Root was empty. Created new root with value {val}.", highlights=[node.id])
        return

    cur = tree.root
    while True:
        yield fb.build(1, f"Comparing {val} with {cur.value}.", highlights=[cur.id])

        if val == cur.value:
            yield fb.build(
                3, f"Value {val} already exists. Duplicates not allowed.",
                highlights=[cur.id], evaluated=[cur.id],
            )
            return

        line = 1 if val < cur.value else 2
        side = "left" if val < cur.value else "right"
        nxt  = getattr(cur, side)
        if nxt is None:
            node = tree.new_node(val, parent_id=cur.id)
            setattr(cur, side, node.id)
            tree.relayout()
            yield fb.build(line, f"Inserted {val} as {side} child of {cur.value}.", highlights=[node.id])
            return

        arrow = "<" if side == "left" else ">"
        yield fb.build(
            line, f"{val} {arrow} {cur.value}, going {side}.",
            highlights=[cur.id], evaluated=[cur.id],
        )
        cur = tree.nodes[nxt]


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------
def delete(tree: BinaryTree, value) -> Generator[TreeFrame, None, None]:
    return _delete(tree, parse_key(value))


def _delete(tree: BinaryTree, key: int) -> Generator[TreeFrame, None, None]:
    fb = TreeFrameBuilder(tree)
    yield fb.build(0, f"Starting deletion of {key}.")

    def remove(node_id: Optional[int], target: int):
        """Delete `target` from the subtree at node_id.  Returns True when found."""
        if node_id is None:
            return False
        node = tree.nodes[node_id]
        yield fb.build(0, f"Visiting node {node.value} searching for {target}.", highlights=[node.id])

        if target < node.value:
            yield fb.build(1, f"{target} < {node.value}, going left.", highlights=[node.id], evaluated=[node.id])
            return (yield from remove(node.left, target))
        if target > node.value:
            yield fb.build(2, f"{target} > {node.value}, going right.", highlights=[node.id], evaluated=[node.id])
            return (yield from remove(node.right, target))

        yield fb.build(3, f"Found node {target} to delete.", highlights=[node.id])

        if node.left is None or node.right is None:
            if node.left is None:
                child, text = node.right, "Node has no left child. Replacing with right child."
            else:
                child, text = node.left, "Node has no right child. Replacing with left child."
            tree.replace_child(node.parent_id, node.id, child)
            tree.discard(node.id)
            tree.relayout()
            yield fb.build(4, text, highlights=[child] if child is not None else [])
            return True

        succ = tree.nodes[node.right]
        while succ.left is not None:
            succ = tree.nodes[succ.left]
        yield fb.build(
            5, f"Found successor {succ.value}. Replacing {node.value} with {succ.value}.",
            highlights=[node.id, succ.id],
        )
        node.value = succ.value
        yield from remove(node.right, succ.value)
        return True

    found = yield from remove(tree.root_id, key)
    if found:
        yield fb.build(-1, f"Deleted {key}.", output=f"Deleted: {key}")
    else:
        yield fb.build(0, f"Value {key} not found. Nothing to delete.", output=f"Not Found: {key}")


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------
def search(tree: BinaryTree, value) -> Generator[TreeFrame, None, None]:
    return _search(tree, parse_key(value))


def _search(tree: BinaryTree, val: int) -> Generator[TreeFrame, None, None]:
    fb   = TreeFrameBuilder(tree)
    path: List[int] = []

    def trail() -> str:
        return " -> ".join(str(v) for v in path)

    yield fb.build(0, f"Starting search for {val}.", output="Searching: ")

    cur = tree.root
    while cur is not None:
        path.append(cur.value)
        yield fb.build(0, f"Checking node {cur.value}.", highlights=[cur.id], output=f"Path: {trail()}")

        if cur.value == val:
            yield fb.build(0, f"Found {val}!", highlights=[cur.id], evaluated=[cur.id], output=f"Found: {trail()}")
            return
        if val < cur.value:
            yield fb.build(1, f"{val} < {cur.value}, going left.", highlights=[cur.id], evaluated=[cur.id])
            cur = tree.get_node(cur.left)
        else:
            yield fb.build(2, f"{val} > {cur.value}, going right.", highlights=[cur.id], evaluated=[cur.id])
            cur = tree.get_node(cur.right)

    yield fb.build(0, f"Value {val} not found in the tree.", output=f"Not Found: {trail()}")


# ---------------------------------------------------------------------------
# min / max
# ---------------------------------------------------------------------------
def _extreme(tree: BinaryTree, side: str) -> Generator[TreeFrame, None, None]:
    fb = TreeFrameBuilder(tree)
    if tree.root is None:
        yield fb.empty()
        return

    cur = tree.root
    yield fb.build(0, f"Starting at root {cur.value}.", highlights=[cur.id])
    while True:
        yield fb.build(1, f"Visiting {cur.value}.", highlights=[cur.id])
        nxt = getattr(cur, side)
        if nxt is None:
            kind = "Min" if side == "left" else "Max"
            yield fb.build(
                3, f"No {side} child. {kind} value is {cur.value}.",
                highlights=[cur.id], evaluated=[cur.id], output=f"{kind}: {cur.value}",
            )
            return
        cur = tree.nodes[nxt]
        yield fb.build(2, f"Moving {side} to {cur.value}.", highlights=[cur.id])


def find_min(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    yield from _extreme(tree, "left")


def find_max(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    yield from _extreme(tree, "right")


# ---------------------------------------------------------------------------
# successor / predecessor
# ---------------------------------------------------------------------------
def successor(tree: BinaryTree, value) -> Generator[TreeFrame, None, None]:
    return _neighbour(tree, parse_key(value), "successor")


def predecessor(tree: BinaryTree, value) -> Generator[TreeFrame, None, None]:
    return _neighbour(tree, parse_key(value), "predecessor")


def _neighbour(tree: BinaryTree, val: int, kind: str) -> Generator[TreeFrame, None, None]:
    """
    In-order successor (kind='successor') or predecessor.  The search
    remembers the last ancestor where it turned towards the answer:
    left for a successor, right for a predecessor.
    """
    fb       = TreeFrameBuilder(tree)
    is_succ  = kind == "successor"
    inner    = "right" if is_succ else "left"     # subtree holding the answer
    outer    = "left" if is_succ else "right"     # direction walked inside it
    title    = kind.capitalize()

    target   = None
    ancestor = None
    cur      = tree.root
    while cur is not None:
        yield fb.build(0, f"Searching for {val}... At {cur.value}", highlights=[cur.id])
        if cur.value == val:
            target = cur
            break
        if val < cur.value:
            if is_succ:
                ancestor = cur
            cur = tree.get_node(cur.left)
        else:
            if not is_succ:
                ancestor = cur
            cur = tree.get_node(cur.right)

    if target is None:
        yield fb.build(0, f"Node {val} not found.", output=f"Node {val} not found.")
        return

    if getattr(target, inner) is not None:
        temp = tree.nodes[getattr(target, inner)]
        extreme = "min" if is_succ else "max"
        yield fb.build(
            1, f"Node has {inner} child. {title} is {extreme} of {inner} subtree.",
            highlights=[target.id, temp.id],
        )
        while getattr(temp, outer) is not None:
            temp = tree.nodes[getattr(temp, outer)]
            yield fb.build(1, f"Going {outer}... At {temp.value}", highlights=[target.id, temp.id])
        yield fb.build(
            1, f"{title} of {val} is {temp.value}.",
            highlights=[target.id], evaluated=[temp.id], output=f"{title}: {temp.value}",
        )
    elif ancestor is not None:
        yield fb.build(
            2, f"No {inner} child. {title} is first ancestor where we went {outer}: {ancestor.value}.",
            highlights=[target.id], evaluated=[ancestor.id], output=f"{title}: {ancestor.value}",
        )
    else:
        edge = "maximum" if is_succ else "minimum"
        yield fb.build(
            2, f"No {inner} child and no such ancestor. {val} is the {edge} node.",
            highlights=[target.id], output=f"No {kind} ({edge} node)",
        )
