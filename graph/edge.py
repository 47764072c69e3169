"""
edge.py — Graph Edge
====================
Connects two node ids.  Directedness and weightedness are graph-level
flags, so an edge only knows its endpoints, its weight and whether the
user typed that weight by hand (`is_manual`).  Manual weights survive
"weights by distance" recomputation; computed ones don't.
"""

from typing import Optional


class GraphEdge:
    """
    Attributes:
        source    : Id of the tail node.
        target    : Id of the head node.
        weight    : Integer cost (default 1).
        is_manual : True when the weight was set explicitly by the user.
    """

    __slots__ = ("source", "target", "weight", "is_manual")

    def __init__(self, source: int, target: int, weight: int = 1, is_manual: bool = False):
        self.source:    int  = source
        self.target:    int  = target
        self.weight:    int  = weight
        self.is_manual: bool = is_manual

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def connects(self, a: int, b: int, directed: bool) -> bool:
        """True if this edge links a → b (either way round when undirected)."""
        if self.source == a and self.target == b:
            return True
        return not directed and self.source == b and self.target == a

    def touches(self, node_id: int) -> bool:
        return node_id in (self.source, self.target)

    def other_end(self, node_id: int) -> Optional[int]:
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "from":      self.source,
            "to":        self.target,
            "weight":    self.weight,
            "is_manual": self.is_manual,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GraphEdge":
        return cls(
            source=int(data["from"]),
            target=int(data["to"]),
            weight=data.get("weight", 1),
            is_manual=data.get("is_manual", False),
        )

    def copy(self) -> "GraphEdge":
        return GraphEdge(self.source, self.target, self.weight, self.is_manual)

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"GraphEdge({self.source} → {self.target}, w={self.weight})"

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, GraphEdge)
            and (self.source, self.target, self.weight, self.is_manual)
            == (other.source, other.target, other.weight, other.is_manual)
        )

    def __hash__(self) -> int:
        return hash((self.source, self.target))
