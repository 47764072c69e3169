"""
special.py — Special Queries
============================
Lowest common ancestor, the four "views", boundary traversal and
mirroring.  Only mirror changes the tree.

Horizontal distance (HD) for top / bottom view: root = 0, a left child
is parent - 1, a right child parent + 1.
"""

from collections import deque
from typing import Dict, Generator, List, Optional

from tree import BinaryTree, parse_key
from tree_algorithms.frame import TreeFrame, TreeFrameBuilder


LCA_PSEUDOCODE: List[str] = [
    "function findPath(root, target):",
    "  if root == null return false",
    "  path.add(root)",
    "  if root.val == target return true",
    "  if findPath(left) or findPath(right) return true",
    "  path.pop(); return false",
    "lca = last common node of path1 and path2",
]
LEFT_VIEW_PSEUDOCODE:  List[str] = ["maxLevel = -1, queue = [(root, 0)]", "if level > maxLevel:", "  print node", "  maxLevel = level"]
RIGHT_VIEW_PSEUDOCODE: List[str] = ["maxLevel = -1, dfs(root, 0)", "if level > maxLevel:", "  print node", "  maxLevel = level", "recurse(right)", "recurse(left)"]
TOP_VIEW_PSEUDOCODE:   List[str] = ["queue = [(root, 0)], map = {}", "if hd not in map:", "  map[hd] = node"]
BOTTOM_VIEW_PSEUDOCODE: List[str] = ["queue = [(root, 0)], map = {}", "map[hd] = node"]
BOUNDARY_PSEUDOCODE:   List[str] = ["add root", "addLeftBoundary", "addLeaves", "addRightBoundary"]
MIRROR_PSEUDOCODE:     List[str] = ["swap(left, right)", "mirror(left)", "mirror(right)"]


def _arrow_join(values) -> str:
    return " -> ".join(str(v) for v in values)


# ---------------------------------------------------------------------------
# lowest common ancestor
# ---------------------------------------------------------------------------
def lca(tree: BinaryTree, first, second) -> Generator[TreeFrame, None, None]:
    return _lca(tree, parse_key(first), parse_key(second))


def _lca(tree: BinaryTree, a: int, b: int) -> Generator[TreeFrame, None, None]:
    fb = TreeFrameBuilder(tree)
    yield fb.build(0, f"Searching for LCA of {a} and {b}.", output=f"Searching LCA for {a}, {b}")

    def find_path(node_id: Optional[int], target: int, path: List[int]):
        """Depth-first, left before right; leaves `path` holding root → target."""
        if node_id is None:
            return False
        node = tree.nodes[node_id]
        path.append(node.id)
        yield fb.build(
            2, f"Visiting {node.value} while searching for {target}.",
            highlights=path, evaluated=[node.id],
            output=f"Path to {target}: {_arrow_join(tree.nodes[p].value for p in path)}",
        )
        if node.value == target:
            return True
        if (yield from find_path(node.left, target, path)):
            return True
        if (yield from find_path(node.right, target, path)):
            return True
        path.pop()
        return False

    path_a: List[int] = []
    path_b: List[int] = []
    found = (yield from find_path(tree.root_id, a, path_a)) and (yield from find_path(tree.root_id, b, path_b))
    if not found:
        yield fb.build(1, "One or both nodes not found.", output="One or both nodes not found.")
        return

    common = None
    for x, y in zip(path_a, path_b):
        if x != y:
            break
        common = x
    node = tree.nodes[common]
    yield fb.build(6, f"LCA is {node.value}.", highlights=[node.id], evaluated=[node.id], output=f"LCA({a}, {b}): {node.value}")


# ---------------------------------------------------------------------------
# views
# ---------------------------------------------------------------------------
def left_view(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """Level order; the first node met on each level is visible."""
    fb = TreeFrameBuilder(tree)
    if tree.root is None:
        yield fb.empty()
        return

    view: List[int] = []
    max_level = -1
    queue = deque([(tree.root_id, 0)])
    yield fb.build(0, "Starting Left View Traversal.", output="Left View:")
    while queue:
        nid, level = queue.popleft()
        node = tree.nodes[nid]
        if level > max_level:
            max_level = level
            view.append(nid)
            yield fb.build(
                1, f"First node at level {level}: {node.value}. Added to view.",
                highlights=view, evaluated=[nid],
                output=f"Left View: {_arrow_join(tree.nodes[v].value for v in view)}",
            )
        for child in node.children():
            queue.append((child, level + 1))


def right_view(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """DFS right-first; the first node reached at each depth is visible."""
    fb = TreeFrameBuilder(tree)
    if tree.root is None:
        yield fb.empty()
        return

    view: List[int] = []

    def dfs(node_id: Optional[int], level: int):
        if node_id is None:
            return
        node = tree.nodes[node_id]
        if level == len(view):
            view.append(node_id)
            yield fb.build(
                1, f"First node (from right) at level {level}: {node.value}. Added to view.",
                highlights=view, evaluated=[node_id],
                output=f"Right View: {_arrow_join(tree.nodes[v].value for v in view)}",
            )
        yield from dfs(node.right, level + 1)
        yield from dfs(node.left, level + 1)

    yield fb.build(0, "Starting Right View Traversal (DFS Right-first).", output="Right View:")
    yield from dfs(tree.root_id, 0)


def _hd_view(tree: BinaryTree, keep_first: bool) -> Generator[TreeFrame, None, None]:
    fb   = TreeFrameBuilder(tree)
    name = "Top" if keep_first else "Bottom"
    if tree.root is None:
        yield fb.empty()
        return

    seen: Dict[int, int] = {}        # hd → node id
    queue = deque([(tree.root_id, 0)])
    yield fb.build(0, f"Starting {name} View Traversal.", output=f"{name} View:")

    while queue:
        nid, hd = queue.popleft()
        node = tree.nodes[nid]
        if not keep_first or hd not in seen:
            seen[hd] = nid
            listing = _arrow_join(tree.nodes[seen[k]].value for k in sorted(seen))
            text = (
                f"First node at HD {hd}: {node.value}. Added to view." if keep_first
                else f"Node at HD {hd}: {node.value}. Updating view."
            )
            yield fb.build(
                1, text,
                highlights=list(seen.values()), evaluated=[nid], output=f"{name} View: {listing}",
            )
        if node.left is not None:
            queue.append((node.left, hd - 1))
        if node.right is not None:
            queue.append((node.right, hd + 1))


def top_view(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    yield from _hd_view(tree, keep_first=True)


def bottom_view(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    yield from _hd_view(tree, keep_first=False)


# ---------------------------------------------------------------------------
# boundary
# ---------------------------------------------------------------------------
def boundary(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    """Root, left spine (no leaves), every leaf left-to-right, right spine reversed."""
    fb   = TreeFrameBuilder(tree)
    root = tree.root
    if root is None:
        yield fb.empty()
        return

    picked: List[int] = []

    def add(nid: int, line: int, text: str):
        picked.append(nid)
        return fb.build(
            line, text, highlights=picked, evaluated=[nid],
            output=f"Boundary: {_arrow_join(tree.nodes[p].value for p in picked)}",
        )

    if not root.is_leaf:
        yield add(root.id, 0, "Added root.")

    cur = tree.get_node(root.left)
    while cur is not None and not cur.is_leaf:
        yield add(cur.id, 1, f"Added Left Boundary node: {cur.value}")
        cur = tree.get_node(cur.left if cur.left is not None else cur.right)

    stack = [root.id]
    while stack:
        node = tree.nodes[stack.pop()]
        if node.is_leaf:
            yield add(node.id, 2, f"Added Leaf node: {node.value}")
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)

    spine: List[int] = []
    cur = tree.get_node(root.right)
    while cur is not None and not cur.is_leaf:
        spine.append(cur.id)
        cur = tree.get_node(cur.right if cur.right is not None else cur.left)
    for nid in reversed(spine):
        yield add(nid, 3, f"Added Right Boundary node: {tree.nodes[nid].value}")


# ---------------------------------------------------------------------------
# mirror
# ---------------------------------------------------------------------------
def mirror(tree: BinaryTree) -> Generator[TreeFrame, None, None]:
    fb = TreeFrameBuilder(tree)
    if tree.root is None:
        yield fb.empty()
        return

    def flip(node_id: Optional[int]):
        if node_id is None:
            return
        node = tree.nodes[node_id]
        yield fb.build(0, f"Visiting {node.value}. Swapping children.", highlights=[node_id])
        node.left, node.right = node.right, node.left
        for child in node.children():
            tree.nodes[child].parent_id = node.id
        tree.relayout()
        yield fb.build(0, f"Swapped children of {node.value}.", highlights=[node_id], evaluated=[node_id])
        yield from flip(node.left)
        yield from flip(node.right)

    yield from flip(tree.root_id)
    yield fb.build(-1, "Mirrored the tree.", output=f"Inorder: {', '.join(map(str, tree.inorder_values()))}")
