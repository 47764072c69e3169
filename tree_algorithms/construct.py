"""
construct.py — Building Trees From Input
========================================
Five constructors.  Each wipes the working tree (the id counter keeps
running, so new nodes never reuse an old id) and grows a fresh one,
emitting a frame as every node is attached.

    from_array    – sequential BST insertion
    from_pre_in   – preorder + inorder reconstruction
    from_post_in  – postorder + inorder reconstruction
    balanced      – sorted values, middle element as root
    deserialize   – level order with 'x' / 'null' for missing children

Input is parsed before the generator starts; anything malformed raises
TraceInputError and no frame is produced.
"""

from collections import deque
from typing import Generator, List, Optional, Sequence, Union

from errors import TraceInputError
from tree import BinaryTree
from tree_algorithms.frame import TreeFrame, TreeFrameBuilder


FROM_ARRAY_PSEUDOCODE: List[str] = ["foreach val in input:", "  insert(root, val)"]
PRE_IN_PSEUDOCODE: List[str] = [
    "root = pre[preIndex++]",
    "inIndex = find(inorder, root.val)",
    "root.left = build(inStart, inIndex-1)",
    "root.right = build(inIndex+1, inEnd)",
]
POST_IN_PSEUDOCODE: List[str] = [
    "root = post[postIndex--]",
    "inIndex = find(inorder, root.val)",
    "root.right = build(inIndex+1, inEnd)",
    "root.left = build(inStart, inIndex-1)",
]
BALANCED_PSEUDOCODE: List[str] = [
    "mid = (start + end) / 2",
    "node = createNode(arr[mid])",
    "node.left = build(start, mid-1)",
    "node.right = build(mid+1, end)",
]
DESERIALIZE_PSEUDOCODE: List[str] = [
    "queue.push(root)",
    "while i < len:",
    "  curr.left = parts[i++]",
    "  curr.right = parts[i++]",
]

NULL_TOKENS = ("x", "null")

RawValues = Union[str, Sequence]


# ---------------------------------------------------------------------------
# Input parsing
# ---------------------------------------------------------------------------
def _tokens(raw: RawValues) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        parts = raw.split(",")
    else:
        parts = list(raw)
    return [str(p).strip() for p in parts if str(p).strip() != ""]


def parse_values(raw: RawValues, name: str = "input") -> List[int]:
    """'5, 3, 8' or [5, 3, 8] → [5, 3, 8].  Empty or non-numeric → TraceInputError."""
    tokens = _tokens(raw)
    if not tokens:
        raise TraceInputError(f"No values given for {name}.")
    values: List[int] = []
    for tok in tokens:
        try:
            values.append(int(tok))
        except ValueError:
            raise TraceInputError(f"Invalid number in {name}: {tok!r}") from None
    return values


def _parse_pair(order: RawValues, inorder: RawValues, order_name: str):
    seq = parse_values(order, order_name)
    ino = parse_values(inorder, "inorder")
    if len(seq) != len(ino):
        raise TraceInputError(f"{order_name.capitalize()} and inorder must have the same length.")
    if len(set(ino)) != len(ino):
        raise TraceInputError("Values must be unique.")
    if sorted(seq) != sorted(ino):
        raise TraceInputError(f"{order_name.capitalize()} and inorder must hold the same values.")
    return seq, ino


def _arrow_join(values: List[int]) -> str:
    return " -> ".join(str(v) for v in values)


def _attach(tree: BinaryTree, value: int, parent_id: Optional[int], side: Optional[str]):
    node = tree.new_node(value, parent_id=parent_id)
    if parent_id is None:
        tree.root_id = node.id
    else:
        setattr(tree.nodes[parent_id], side, node.id)
    tree.relayout()
    return node


# ---------------------------------------------------------------------------
# from array
# ---------------------------------------------------------------------------
def from_array(tree: BinaryTree, values: RawValues) -> Generator[TreeFrame, None, None]:
    return _from_array(tree, parse_values(values))


def _from_array(tree: BinaryTree, values: List[int]) -> Generator[TreeFrame, None, None]:
    fb   = TreeFrameBuilder(tree)
    done: List[int] = []
    tree.clear()
    listing = ", ".join(map(str, values))
    yield fb.build(0, f"Starting construction with: {listing}", output=f"Input: {listing}")

    for val in values:
        done.append(val)
        parent, side = None, None
        cur = tree.root
        while cur is not None:
            parent, side = cur.id, ("left" if val < cur.value else "right")
            cur = tree.get_node(getattr(cur, side))
        node = _attach(tree, val, parent, side)
        yield fb.build(1, f"Inserted {val}.", highlights=[node.id], output=_arrow_join(done))


# ---------------------------------------------------------------------------
# preorder / postorder + inorder
# ---------------------------------------------------------------------------
def _check_traversals(roots: List[int], inorder: List[int], order_name: str, postorder: bool) -> None:
    """Dry-runs the reconstruction; every root must fall inside its inorder range."""
    where = {v: i for i, v in enumerate(inorder)}
    pos   = [0]
    bad   = TraceInputError(f"{order_name.capitalize()} and inorder do not describe the same tree.")

    def walk(start: int, end: int) -> None:
        if start > end:
            return
        if pos[0] >= len(roots):
            raise bad
        idx = where[roots[pos[0]]]
        pos[0] += 1
        if not start <= idx <= end:
            raise bad
        if postorder:
            walk(idx + 1, end)
            walk(start, idx - 1)
        else:
            walk(start, idx - 1)
            walk(idx + 1, end)

    walk(0, len(inorder) - 1)


def from_pre_in(tree: BinaryTree, preorder: RawValues, inorder: RawValues) -> Generator[TreeFrame, None, None]:
    pre, ino = _parse_pair(preorder, inorder, "preorder")
    _check_traversals(pre, ino, "preorder", postorder=False)
    return _from_traversals(tree, pre, ino, postorder=False)


def from_post_in(tree: BinaryTree, postorder: RawValues, inorder: RawValues) -> Generator[TreeFrame, None, None]:
    post, ino = _parse_pair(postorder, inorder, "postorder")
    _check_traversals(list(reversed(post)), ino, "postorder", postorder=True)
    return _from_traversals(tree, list(reversed(post)), ino, postorder=True)


def _from_traversals(
    tree: BinaryTree, roots: List[int], inorder: List[int], postorder: bool,
) -> Generator[TreeFrame, None, None]:
    """
    `roots` is the preorder sequence, or the postorder sequence reversed;
    either way the next unused entry is the root of the current range.
    Reversed postorder is root-right-left, so the right subtree is built first.
    """
    fb    = TreeFrameBuilder(tree)
    where = {v: i for i, v in enumerate(inorder)}
    made: List[int] = []
    cursor = iter(roots)
    tree.clear()

    def build(start: int, end: int, parent_id: Optional[int], side: Optional[str]):
        if start > end:
            return
        val  = next(cursor)
        node = _attach(tree, val, parent_id, side)
        made.append(val)
        idx  = where[val]
        yield fb.build(
            0, f"Created node {val}. Found at index {idx} in Inorder array.",
            highlights=[node.id], output=_arrow_join(made),
        )
        if postorder:
            yield from build(idx + 1, end, node.id, "right")
            yield from build(start, idx - 1, node.id, "left")
        else:
            yield from build(start, idx - 1, node.id, "left")
            yield from build(idx + 1, end, node.id, "right")

    yield from build(0, len(inorder) - 1, None, None)
    yield fb.build(-1, "Construction complete.", output=f"Built: {_arrow_join(made)}")


# ---------------------------------------------------------------------------
# balanced from sorted
# ---------------------------------------------------------------------------
def balanced(tree: BinaryTree, values: RawValues) -> Generator[TreeFrame, None, None]:
    return _balanced(tree, sorted(parse_values(values)))


def _balanced(tree: BinaryTree, values: List[int]) -> Generator[TreeFrame, None, None]:
    fb   = TreeFrameBuilder(tree)
    made: List[int] = []
    tree.clear()

    def build(start: int, end: int, parent_id: Optional[int], side: Optional[str]):
        if start > end:
            return
        mid  = (start + end) // 2
        node = _attach(tree, values[mid], parent_id, side)
        made.append(values[mid])
        yield fb.build(
            0, f"Processing range [{values[start]}...{values[end]}]. Middle is {values[mid]}.",
            highlights=[node.id], output=_arrow_join(made),
        )
        yield from build(start, mid - 1, node.id, "left")
        yield from build(mid + 1, end, node.id, "right")

    yield from build(0, len(values) - 1, None, None)
    yield fb.build(3, "Built Balanced BST.", output=f"Balanced BST: {_arrow_join(made)}")


# ---------------------------------------------------------------------------
# level-order deserialisation
# ---------------------------------------------------------------------------
def deserialize(tree: BinaryTree, data: RawValues) -> Generator[TreeFrame, None, None]:
    tokens = _tokens(data)
    if not tokens:
        raise TraceInputError("No values given to deserialize.")
    if tokens[0].lower() in NULL_TOKENS:
        raise TraceInputError("The root cannot be null.")
    parsed: List[Optional[int]] = []
    for tok in tokens:
        if tok.lower() in NULL_TOKENS:
            parsed.append(None)
            continue
        try:
            parsed.append(int(tok))
        except ValueError:
            raise TraceInputError(f"Invalid token in serialized tree: {tok!r}") from None
    return _deserialize(tree, parsed)


def _deserialize(tree: BinaryTree, parts: List[Optional[int]]) -> Generator[TreeFrame, None, None]:
    fb   = TreeFrameBuilder(tree)
    text = [str(parts[0])]
    tree.clear()

    root  = _attach(tree, parts[0], None, None)
    queue = deque([root])
    yield fb.build(0, f"Created root {root.value}.", highlights=[root.id], output=_arrow_join(text))

    i = 1
    while queue and i < len(parts):
        curr = queue.popleft()
        for side, line in (("left", 2), ("right", 3)):
            if i >= len(parts):
                break
            val = parts[i]
            i  += 1
            if val is None:
                text.append("x")
                yield fb.build(line, f"{side.capitalize()} child of {curr.value} is null.", output=_arrow_join(text))
                continue
            child = _attach(tree, val, curr.id, side)
            queue.append(child)
            text.append(str(val))
            yield fb.build(
                line, f"Attached {val} to {side} of {curr.value}.",
                highlights=[child.id], output=_arrow_join(text),
            )

    yield fb.build(-1, "Deserialization complete.", output=f"Tree: {_arrow_join(text)}")
