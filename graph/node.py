"""
node.py — Graph Node
====================
A positioned vertex with an integer id.  Ids double as display labels
through the spreadsheet-style alphabet mapping (0 → A, 25 → Z, 26 → AA)
so every description a tracer writes reads "node B", never "node 1".
"""

from typing import Optional, Any


# ---------------------------------------------------------------------------
# Label helpers
# ---------------------------------------------------------------------------
def node_label(node_id: int) -> str:
    """0 → 'A', 1 → 'B', …, 26 → 'AA'."""
    label = ""
    num   = node_id
    while True:
        label = chr(65 + num % 26) + label
        num   = num // 26 - 1
        if num < 0:
            return label


def label_to_id(label: str) -> Optional[int]:
    """Inverse of node_label.  None for anything that isn't A-Z letters."""
    text = label.strip().upper()
    if not text or not text.isalpha() or not text.isascii():
        return None
    num = 0
    for ch in text:
        num = num * 26 + (ord(ch) - 64)
    return num - 1


# ---------------------------------------------------------------------------
# GraphNode
# ---------------------------------------------------------------------------
class GraphNode:
    """
    Attributes:
        id     : Integer id, never reused inside one Graph.
        x, y   : Canvas coordinates in pixels.
        value  : Free payload shown on the node (defaults to the label).
    """

    __slots__ = ("id", "x", "y", "value")

    def __init__(self, node_id: int, x: float = 0.0, y: float = 0.0, value: Any = None):
        self.id:    int   = node_id
        self.x:     float = x
        self.y:     float = y
        self.value: Any   = node_label(node_id) if value is None else value

    @property
    def label(self) -> str:
        return node_label(self.id)

    def distance_to(self, other: "GraphNode") -> float:
        """Euclidean distance, used by A* and weight-by-distance."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "label": self.label,
            "x":     self.x,
            "y":     self.y,
            "value": self.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphNode":
        return cls(int(data["id"]), x=data.get("x", 0.0), y=data.get("y", 0.0), value=data.get("value"))

    def copy(self) -> "GraphNode":
        return GraphNode(self.id, self.x, self.y, self.value)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"GraphNode(id={self.id}, label={self.label}, pos=({self.x:.0f},{self.y:.0f}))"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, GraphNode)
            and (self.id, self.x, self.y, self.value) == (other.id, other.x, other.y, other.value)
        )

    def __hash__(self) -> int:
        return hash(self.id)
