"""
graph.py — Graph Container & Generator
=======================================
The live graph every graph tracer runs against.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / move)
  2. Adjacency queries                      (sorted adjacency, weight lookup)
  3. Start-node parsing                     (id or label → id)
  4. Factory methods                        (initial graph, seeded random graph)
  5. Serialisation round-trip               (to_dict / from_dict, snapshot)

Design decisions:
  - Nodes live in an insertion-ordered dict keyed by integer id; edges in
    a plain list.  Tracers iterate both in that order, so output is
    deterministic for a given edit history.
  - Ids come from a monotonic counter that is never rewound, even after
    removals, so an id always names the same node for the graph's life.
  - Rejected edits raise StructureError and leave the graph untouched.
"""

import logging
import math
import random
from typing import Dict, List, Tuple, Optional, Any

from config import GRID_SIZE, CANVAS_WIDTH, CANVAS_HEIGHT
from errors import StructureError, TraceInputError
from graph.node import GraphNode, node_label, label_to_id
from graph.edge import GraphEdge

logger = logging.getLogger(__name__)


class Graph:
    """
    Attributes:
        nodes      : {node_id: GraphNode}   (insertion order = display order)
        edges      : [GraphEdge]
        directed   : bool – graph-level directedness
        weighted   : bool – whether weights are meaningful (else every edge costs 1)
        _next_id   : next id handed out by add_node
    """

    def __init__(self, directed: bool = True, weighted: bool = False):
        self.nodes:    Dict[int, GraphNode] = {}
        self.edges:    List[GraphEdge]      = []
        self.directed: bool                 = directed
        self.weighted: bool                 = weighted
        self._next_id: int                  = 0

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, x: float, y: float, snap: bool = False, value: Any = None) -> GraphNode:
        if snap:
            x = round(x / GRID_SIZE) * GRID_SIZE
            y = round(y / GRID_SIZE) * GRID_SIZE
        node = GraphNode(self._next_id, x, y, value)
        self.nodes[node.id] = node
        self._next_id += 1
        return node

    def remove_node(self, node_id: int) -> None:
        self._require_node(node_id)
        self.edges = [e for e in self.edges if not e.touches(node_id)]
        del self.nodes[node_id]

    def move_node(self, node_id: int, x: float, y: float) -> GraphNode:
        node = self._require_node(node_id)
        node.x, node.y = x, y
        return node

    def get_node(self, node_id: int) -> Optional[GraphNode]:
        return self.nodes.get(node_id)

    def node_ids(self) -> List[int]:
        return list(self.nodes.keys())

    def label(self, node_id: int) -> str:
        return node_label(node_id)

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(
        self,
        source: int,
        target: int,
        weight: Optional[int] = None,
        manual: bool = False,
    ) -> GraphEdge:
        """
        Connect source → target.  An existing edge between the same pair
        (either orientation when undirected) is replaced, so there is at
        most one edge per pair.
        """
        if source == target:
            raise StructureError(f"Self-loop on node {node_label(source)} is not allowed.")
        self._require_node(source)
        self._require_node(target)

        self.edges = [e for e in self.edges if not e.connects(source, target, self.directed)]
        edge = GraphEdge(source, target, 1 if weight is None else int(weight), is_manual=manual)
        self.edges.append(edge)
        return edge

    def remove_edge(self, source: int, target: int) -> None:
        before = len(self.edges)
        self.edges = [e for e in self.edges if not e.connects(source, target, self.directed)]
        if len(self.edges) == before:
            raise StructureError(
                f"No edge between {node_label(source)} and {node_label(target)}."
            )

    def get_edge_between(self, a: int, b: int) -> Optional[GraphEdge]:
        """First edge a → b (or b → a when undirected)."""
        for edge in self.edges:
            if edge.connects(a, b, self.directed):
                return edge
        return None

    def weight_between(self, a: int, b: int) -> int:
        """Cost of moving a → b: the edge weight when weighted, else 1."""
        edge = self.get_edge_between(a, b)
        if not self.weighted or edge is None:
            return 1
        return edge.weight

    def edge_weight(self, edge: GraphEdge) -> int:
        return edge.weight if self.weighted else 1

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def adjacency(self) -> Dict[int, List[int]]:
        """
        {node_id: [neighbour ids ascending]}.  Built fresh per call; undirected
        edges appear in both lists.  Sorting is what makes every traversal
        deterministic for identical input.
        """
        adj: Dict[int, List[int]] = {nid: [] for nid in self.nodes}
        for edge in self.edges:
            adj[edge.source].append(edge.target)
            if not self.directed:
                adj[edge.target].append(edge.source)
        for nid in adj:
            adj[nid].sort()
        return adj

    def in_degrees(self) -> Dict[int, int]:
        deg = {nid: 0 for nid in self.nodes}
        for edge in self.edges:
            deg[edge.target] += 1
        return deg

    # ==================================================================
    # START-NODE PARSING
    # ==================================================================
    def parse_node_id(self, raw: Any) -> int:
        """
        Accept an integer id ("3", 3) or a label ("D", "d").  Anything that
        doesn't name an existing node is an input error.
        """
        if raw is None or str(raw).strip() == "":
            raise TraceInputError("Invalid start node: no node given.")
        text = str(raw).strip()
        try:
            candidate = int(text)
        except ValueError:
            candidate = None
        if candidate is not None and candidate in self.nodes:
            return candidate
        candidate = label_to_id(text)
        if candidate is not None and candidate in self.nodes:
            return candidate
        raise TraceInputError(f"Invalid start node: {text!r}")

    # ==================================================================
    # WEIGHTS BY DISTANCE
    # ==================================================================
    def update_weights_by_distance(self) -> int:
        """Recompute every non-manual weight from node spacing.  Returns #changed."""
        changed = 0
        for edge in self.edges:
            if edge.is_manual:
                continue
            a, b = self.nodes[edge.source], self.nodes[edge.target]
            new_weight = max(1, round(a.distance_to(b) / GRID_SIZE))
            if new_weight != edge.weight:
                edge.weight = new_weight
                changed += 1
        return changed

    # ==================================================================
    # RESET / COPY
    # ==================================================================
    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()
        self._next_id = 0

    def copy(self) -> "Graph":
        g = Graph(directed=self.directed, weighted=self.weighted)
        g.nodes    = {nid: n.copy() for nid, n in self.nodes.items()}
        g.edges    = [e.copy() for e in self.edges]
        g._next_id = self._next_id
        return g

    def snapshot(self) -> Tuple[Tuple[dict, ...], Tuple[dict, ...]]:
        """Fresh plain-dict copies of nodes and edges, for embedding in a frame."""
        return (
            tuple(n.to_dict() for n in self.nodes.values()),
            tuple(e.to_dict() for e in self.edges),
        )

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "weighted": self.weighted,
            "next_id":  self._next_id,
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(directed=data.get("directed", True), weighted=data.get("weighted", False))
        for nd in data.get("nodes", []):
            node = GraphNode.from_dict(nd)
            g.nodes[node.id] = node
        for ed in data.get("edges", []):
            g.edges.append(GraphEdge.from_dict(ed))
        g._next_id = max(data.get("next_id", 0), max(g.nodes, default=-1) + 1)
        return g

    # ==================================================================
    # FACTORIES
    # ==================================================================
    @classmethod
    def initial(cls) -> "Graph":
        """The five-node graph a fresh session starts with."""
        g = cls(directed=True, weighted=False)
        for x, y in [(100, 100), (300, 100), (100, 300), (300, 300), (500, 200)]:
            g.add_node(x, y)
        for a, b in [(0, 1), (1, 2), (2, 3), (3, 4), (1, 4), (0, 2)]:
            g.add_edge(a, b, 1)
        return g

    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        edge_probability: float = 0.3,
        directed: bool = False,
        weighted: bool = True,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
        canvas_w: float = CANVAS_WIDTH,
        canvas_h: float = CANVAS_HEIGHT,
    ) -> "Graph":
        """
        Erdős–Rényi style random graph laid out on a jittered circle, with a
        spanning backbone so the result is always connected.
        """
        rng    = random.Random(seed)
        g      = cls(directed=directed, weighted=weighted)
        margin = GRID_SIZE

        for i in range(num_nodes):
            angle  = 2 * math.pi * i / num_nodes
            radius = min(canvas_w, canvas_h) * 0.35
            x = canvas_w / 2 + radius * math.cos(angle) + rng.uniform(-30, 30)
            y = canvas_h / 2 + radius * math.sin(angle) + rng.uniform(-30, 30)
            g.add_node(round(max(margin, min(canvas_w - margin, x))),
                       round(max(margin, min(canvas_h - margin, y))))

        ids = g.node_ids()
        for i in range(num_nodes):
            for j in range(num_nodes):
                if i == j or (not directed and j < i):
                    continue
                if rng.random() < edge_probability:
                    w = rng.randint(*weight_range) if weighted else 1
                    g.add_edge(ids[i], ids[j], w)

        shuffled = list(ids)
        rng.shuffle(shuffled)
        for k in range(1, len(shuffled)):
            if not g.get_edge_between(shuffled[k - 1], shuffled[k]):
                w = rng.randint(*weight_range) if weighted else 1
                g.add_edge(shuffled[k - 1], shuffled[k], w)

        logger.debug("Generated random graph: %d nodes, %d edges (seed=%s)", len(g.nodes), len(g.edges), seed)
        return g

    # ==================================================================
    # Internal
    # ==================================================================
    def _require_node(self, node_id: int) -> GraphNode:
        node = self.nodes.get(node_id)
        if node is None:
            raise StructureError(f"Node {node_id} does not exist.")
        return node

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, weighted={self.weighted}, nodes={len(self.nodes)}, edges={len(self.edges)})"
