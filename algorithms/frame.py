"""
frame.py — Graph Frame Snapshot & Trace
========================================
Every graph tracer is a generator that yields GraphFrame objects.
A GraphFrame is a frozen-in-time picture of everything a renderer
needs to draw one instant of the run:

    • a private copy of the nodes and edges
    • which nodes are highlighted right now
    • the visited set, FIFO queue and LIFO stack overlays
    • highlighted edges (the edge under test, the MST so far, the SPT, …)
    • the distance map / all-pairs matrix where the algorithm has one
    • which pseudocode line is executing and a plain-English description

Design decisions:
  - Frames are frozen dataclasses holding tuples and freshly built dicts.
    Nothing a tracer does after `build()` can reach into an earlier frame.
  - GraphFrameBuilder is the only writer.  Tracers mutate the builder's
    running state (visited, queue, distances, …) and call `build()` at
    each transition; `build()` copies that state into a new frame.
  - Trace is shared by every structure family (graph, tree, queue,
    interpreter): an ordered, seekable tuple of frames plus the
    pseudocode the frames' `code_line` indexes into.
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Any, Tuple, Iterable

from config import INFINITY_LABEL

INF = float("inf")


def format_distance(value: Any) -> Any:
    """inf → '∞', whole floats → int, everything else untouched."""
    if isinstance(value, float):
        if math.isinf(value):
            return INFINITY_LABEL
        if value.is_integer():
            return int(value)
    return value


# ---------------------------------------------------------------------------
# GraphFrame
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GraphFrame:
    """
    Attributes:
        nodes           : Plain-dict copies of every node (id, label, x, y, value).
        edges           : Plain-dict copies of every edge (from, to, weight, is_manual).
        highlights      : Node ids emphasised in this frame.
        visited         : Node ids in the visited set, in visit order.
        queue           : FIFO / priority-queue contents (node ids).
        stack           : LIFO contents (DFS recursion path, topo stack).
        edge_highlights : (from, to) pairs to emphasise.
        code_line       : 0-based pseudocode line, -1 when none applies.
        description     : What just happened, in words.
        distances       : {node_id: int | '∞'} for single-source algorithms.
        distance_matrix : {i: {j: int | '∞'}} for all-pairs algorithms.
        output          : Running text output (e.g. "BFS: A, B, C").
    """

    nodes:           Tuple[dict, ...]                  = ()
    edges:           Tuple[dict, ...]                  = ()
    highlights:      Tuple[int, ...]                   = ()
    visited:         Tuple[int, ...]                   = ()
    queue:           Tuple[int, ...]                   = ()
    stack:           Tuple[int, ...]                   = ()
    edge_highlights: Tuple[Tuple[int, int], ...]       = ()
    code_line:       int                               = -1
    description:     str                               = ""
    distances:       Optional[Dict[int, Any]]          = None
    distance_matrix: Optional[Dict[int, Dict[int, Any]]] = None
    output:          Optional[str]                     = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["edge_highlights"] = [{"from": a, "to": b} for a, b in self.edge_highlights]
        return data


# ---------------------------------------------------------------------------
# Builder so tracers don't have to spell out every field
# ---------------------------------------------------------------------------
class GraphFrameBuilder:
    """
    Mutable scratch-pad that graph tracers use to emit frames.

    Usage inside a tracer:
        fb = GraphFrameBuilder(graph)
        fb.visited = [start]
        fb.queue   = [start]
        yield fb.build(1, "Added start node A to queue and visited set.", highlights=[start])
    """

    def __init__(self, graph):
        self.graph = graph
        self.reset()

    def reset(self):
        self.visited:         List[int]                   = []
        self.queue:           List[int]                   = []
        self.stack:           List[int]                   = []
        self.edge_highlights: List[Tuple[int, int]]       = []
        self.distances:       Optional[Dict[int, Any]]    = None
        self.distance_matrix: Optional[Dict[int, Dict[int, Any]]] = None
        self.output:          Optional[str]               = None

    def build(
        self,
        code_line: int,
        description: str,
        highlights: Iterable[int] = (),
        edge_highlights: Optional[Iterable[Tuple[int, int]]] = None,
    ) -> GraphFrame:
        """
        Snapshot the graph plus the builder's running state.  `edge_highlights`
        overrides the running edge set for this one frame only.
        """
        nodes, edges = self.graph.snapshot()
        pairs = self.edge_highlights if edge_highlights is None else edge_highlights
        return GraphFrame(
            nodes=nodes,
            edges=edges,
            highlights=tuple(highlights),
            visited=tuple(self.visited),
            queue=tuple(self.queue),
            stack=tuple(self.stack),
            edge_highlights=tuple((a, b) for a, b in pairs),
            code_line=code_line,
            description=description,
            distances=(
                None if self.distances is None
                else {k: format_distance(v) for k, v in self.distances.items()}
            ),
            distance_matrix=(
                None if self.distance_matrix is None
                else {i: {j: format_distance(v) for j, v in row.items()}
                      for i, row in self.distance_matrix.items()}
            ),
            output=self.output,
        )


# ---------------------------------------------------------------------------
# Trace — the seekable timeline one tracer invocation produces
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Trace:
    """
    Attributes:
        algorithm  : Registry key of the tracer that produced it.
        label      : Human label ("Dijkstra's Algorithm").
        pseudocode : Lines that every frame's `code_line` indexes.
        timeline   : The frames, in order.  Never empty.
        result     : The structure the tracer ran against, in its end state
                     (the session adopts it as the new live structure).
        error      : Set when the run ended on a rejected operation
                     (e.g. queue overflow); the frames narrate the rejection.
    """

    algorithm:  str
    label:      str
    pseudocode: Tuple[str, ...]
    timeline:   Tuple[Any, ...]
    result:     Any           = None
    error:      Optional[str] = None

    def __len__(self) -> int:
        return len(self.timeline)

    def __getitem__(self, idx: int):
        return self.timeline[idx]

    @property
    def final(self):
        return self.timeline[-1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm":  self.algorithm,
            "label":      self.label,
            "pseudocode": list(self.pseudocode),
            "error":      self.error,
            "timeline":   [f.to_dict() for f in self.timeline],
        }
