"""
flow.py — Maximum Flow
======================
Two augmenting-path max-flow tracers over a directed, weighted graph.
Edge weights are capacities; the start node is the source and the
highest-id node is the sink (the next node when the start is itself
the highest id).

    ford_fulkerson  – finds each augmenting path by DFS
    edmonds_karp    – finds the shortest augmenting path by BFS

Both keep a residual capacity table `cap[u][v]`.  Pushing `f` along a
path lowers `cap[u][v]` by `f` and raises the reverse `cap[v][u]`, so
later paths can cancel earlier flow.  The running total is the frame
output ("Max Flow: 5").
"""

import logging
from collections import deque
from typing import Dict, Generator, List, Optional, Tuple

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder, INF

logger = logging.getLogger(__name__)


FORD_FULKERSON_PSEUDOCODE: List[str] = [
    "Let Max Flow = 0",                                                       # 0
    "While there is an augmenting path from Source to Sink (using DFS):",     # 1
    "  Find bottleneck capacity on path",                                     # 2
    "  Push flow: flow += bottleneck, update residual graph",                 # 3
    "Return Max Flow",                                                        # 4
]

EDMONDS_KARP_PSEUDOCODE: List[str] = [
    "Let Max Flow = 0",
    "While there is an augmenting path from Source to Sink (using BFS):",
    "  Find bottleneck capacity on path",
    "  Push flow: flow += bottleneck, update residual graph",
    "Return Max Flow",
]

Path = List[Tuple[int, int]]


# ---------------------------------------------------------------------------
# Shared setup
# ---------------------------------------------------------------------------
def pick_sink(graph: Graph, source: int) -> Optional[int]:
    """Highest node id, or the first other node when that is the source."""
    ids = graph.node_ids()
    sink = max(ids)
    if sink == source:
        sink = next((n for n in ids if n != source), None)
    return sink


def residual_network(graph: Graph) -> Tuple[Dict[int, Dict[int, int]], Dict[int, List[int]]]:
    """Capacity table plus neighbour lists that include reverse arcs."""
    cap: Dict[int, Dict[int, int]] = {u: {v: 0 for v in graph.nodes} for u in graph.nodes}
    adj: Dict[int, List[int]]      = {u: [] for u in graph.nodes}
    for edge in graph.edges:
        u, v = edge.source, edge.target
        cap[u][v] = max(0, graph.edge_weight(edge))
        if v not in adj[u]:
            adj[u].append(v)
        if u not in adj[v]:
            adj[v].append(u)
    for u in adj:
        adj[u].sort()
    return cap, adj


def _precheck(graph: Graph, start: int, fb: GraphFrameBuilder, name: str):
    """Yields the single frame for an unusable network; returns the sink otherwise."""
    if not graph.directed or not graph.weighted:
        yield fb.build(-1, "Graph must be Directed and Weighted.")
        return None
    sink = pick_sink(graph, start)
    if sink is None:
        yield fb.build(-1, f"{name} needs a distinct source and sink.", highlights=[start])
        return None
    return sink


def _push(cap: Dict[int, Dict[int, int]], path: Path, amount: int) -> None:
    for u, v in path:
        cap[u][v] -= amount
        cap[v][u] += amount


# ---------------------------------------------------------------------------
# Ford–Fulkerson (DFS)
# ---------------------------------------------------------------------------
def ford_fulkerson(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    fb   = GraphFrameBuilder(graph)
    sink = yield from _precheck(graph, start, fb, "Ford-Fulkerson")
    if sink is None:
        return

    cap, adj = residual_network(graph)
    max_flow = 0
    fb.output = "Max Flow: 0"
    yield fb.build(
        0, f"Starting Ford-Fulkerson. Source: {L(start)}, Sink: {L(sink)}.",
        highlights=[start, sink],
    )

    def _dfs(u: int, flow: float, seen: List[int], path: Path):
        """Returns the amount pushed along `path` (0 when stuck)."""
        if u == sink:
            return flow
        seen.append(u)
        for v in adj[u]:
            if v in seen or cap[u][v] <= 0:
                continue
            path.append((u, v))
            fb.visited = list(seen)
            yield fb.build(
                1, f"DFS Traversing edge {L(u)}->{L(v)} with available capacity {cap[u][v]}.",
                highlights=[v], edge_highlights=list(path),
            )
            pushed = yield from _dfs(v, min(flow, cap[u][v]), seen, path)
            if pushed > 0:
                return pushed
            path.pop()
        return 0

    while True:
        path: Path = []
        pushed = yield from _dfs(start, INF, [], path)
        if pushed == 0:
            break
        pushed = int(pushed)
        max_flow += pushed
        _push(cap, path, pushed)
        fb.visited = []
        fb.output  = f"Max Flow: {max_flow}"
        yield fb.build(
            3, f"Found augmenting path! Pushing flow of {pushed}. Current Max Flow: {max_flow}.",
            highlights=[start, sink], edge_highlights=path,
        )

    fb.visited = []
    logger.debug("Ford-Fulkerson %s -> %s: max flow %d", L(start), L(sink), max_flow)
    yield fb.build(4, f"Ford-Fulkerson complete. Total Max Flow: {max_flow}.", highlights=[start, sink])


# ---------------------------------------------------------------------------
# Edmonds–Karp (BFS)
# ---------------------------------------------------------------------------
def edmonds_karp(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    fb   = GraphFrameBuilder(graph)
    sink = yield from _precheck(graph, start, fb, "Edmonds-Karp")
    if sink is None:
        return

    cap, adj = residual_network(graph)
    max_flow = 0
    fb.output = "Max Flow: 0"
    yield fb.build(
        0, f"Starting Edmonds-Karp. Source: {L(start)}, Sink: {L(sink)}.",
        highlights=[start, sink],
    )

    def _bfs():
        """Returns the shortest augmenting path as (u, v) pairs, or None."""
        parent: Dict[int, int] = {}
        seen  = [start]
        queue = deque([start])
        while queue:
            u = queue.popleft()
            fb.visited = list(seen)
            fb.queue   = list(queue)
            yield fb.build(1, f"BFS Traversing node {L(u)}.", highlights=[u])
            for v in adj[u]:
                if v in seen or cap[u][v] <= 0:
                    continue
                seen.append(v)
                parent[v] = u
                queue.append(v)
                if v == sink:
                    path: Path = []
                    cur = sink
                    while cur != start:
                        path.insert(0, (parent[cur], cur))
                        cur = parent[cur]
                    return path
        return None

    while True:
        path = yield from _bfs()
        if path is None:
            break
        pushed = min(cap[u][v] for u, v in path)
        yield fb.build(
            2, f"Bottleneck on path {' -> '.join([L(start)] + [L(v) for _, v in path])} is {pushed}.",
            highlights=[start, sink], edge_highlights=path,
        )
        max_flow += pushed
        _push(cap, path, pushed)
        fb.visited, fb.queue = [], []
        fb.output = f"Max Flow: {max_flow}"
        yield fb.build(
            3, f"Found augmenting path using BFS! Pushing flow of {pushed}. Current Max Flow: {max_flow}.",
            highlights=[start, sink], edge_highlights=path,
        )

    fb.visited, fb.queue = [], []
    logger.debug("Edmonds-Karp %s -> %s: max flow %d", L(start), L(sink), max_flow)
    yield fb.build(4, f"Edmonds-Karp complete. Total Max Flow: {max_flow}.", highlights=[start, sink])
