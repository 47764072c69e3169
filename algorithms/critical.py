"""
critical.py — Bridges & Articulation Points
============================================
Tarjan's low-link DFS, run twice for two questions:

    bridges              – edges whose removal disconnects the graph
                           (low[v] > disc[u])
    articulation_points  – nodes whose removal disconnects the graph
                           (root with > 1 DFS child, or low[v] >= disc[u])

Both read the edges undirected: on a directed graph they answer the
question for the underlying undirected graph.
"""

from typing import Dict, Generator, List, Optional, Tuple

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder


BRIDGES_PSEUDOCODE: List[str] = [
    "Run DFS, tracking discovery time & lowest reachable time",        # 0
    "If neighbor is visited, update low[u] = min(low[u], disc[v])",     # 1
    "If unvisited, recurse. Then low[u] = min(low[u], low[v])",         # 2
    "If low[v] > disc[u], edge (u, v) is a bridge!",                    # 3
]

ARTICULATION_PSEUDOCODE: List[str] = [
    "Run DFS, tracking discovery time & lowest reachable time",        # 0
    "If root has > 1 child, it's an AP",                                # 1
    "If low[v] >= disc[u], non-root u is an AP",                        # 2
]


def _undirected_adjacency(graph: Graph) -> Dict[int, List[int]]:
    adj: Dict[int, List[int]] = {nid: [] for nid in graph.nodes}
    for edge in graph.edges:
        if edge.target not in adj[edge.source]:
            adj[edge.source].append(edge.target)
        if edge.source not in adj[edge.target]:
            adj[edge.target].append(edge.source)
    for nid in adj:
        adj[nid].sort()
    return adj


def _pairs(pairs: List[Tuple[int, int]]) -> str:
    return ", ".join(f"{L(u)}-{L(v)}" for u, v in pairs) or "None"


# ---------------------------------------------------------------------------
# Bridges
# ---------------------------------------------------------------------------
def bridges(graph: Graph) -> Generator[GraphFrame, None, None]:
    adj    = _undirected_adjacency(graph)
    fb     = GraphFrameBuilder(graph)
    disc:   Dict[int, int]           = {}
    low:    Dict[int, int]           = {}
    parent: Dict[int, Optional[int]] = {}
    found:  List[Tuple[int, int]]    = []
    clock = [0]

    yield fb.build(0, "Starting Tarjan's Bridge-Finding Algorithm. We will run DFS to find critical edges.")

    def _visit(u: int):
        clock[0] += 1
        disc[u] = low[u] = clock[0]
        fb.visited.append(u)
        yield fb.build(0, f"Visited node {L(u)} at time {disc[u]}.", highlights=[u])

        for v in adj[u]:
            if v not in disc:
                parent[v] = u
                yield from _visit(v)
                low[u] = min(low[u], low[v])
                if low[v] > disc[u]:
                    found.append((u, v))
                    fb.edge_highlights = list(found)
                    fb.output = f"Bridges: {_pairs(found)}"
                    yield fb.build(
                        3, f"Bridge found! Edge {L(u)}-{L(v)} is critical to connectivity.",
                        highlights=[u, v],
                    )
            elif v != parent.get(u):
                low[u] = min(low[u], disc[v])

        yield fb.build(2, f"Finished checking neighbors for node {L(u)}.", highlights=[u])

    for nid in graph.nodes:
        if nid not in disc:
            parent[nid] = None
            yield from _visit(nid)

    fb.output = f"Bridges: {_pairs(found)}"
    yield fb.build(-1, f"Algorithm complete. Found {len(found)} bridge(s).")


# ---------------------------------------------------------------------------
# Articulation points
# ---------------------------------------------------------------------------
def articulation_points(graph: Graph) -> Generator[GraphFrame, None, None]:
    adj    = _undirected_adjacency(graph)
    fb     = GraphFrameBuilder(graph)
    disc:   Dict[int, int]           = {}
    low:    Dict[int, int]           = {}
    parent: Dict[int, Optional[int]] = {}
    cut:    List[int]                = []
    clock = [0]

    def _mark(u: int) -> None:
        cut.append(u)
        fb.output = f"Articulation points: {', '.join(L(n) for n in sorted(cut))}"

    yield fb.build(0, "Starting Articulation Points Algorithm to find Cut Vertices.")

    def _visit(u: int):
        children = 0
        clock[0] += 1
        disc[u] = low[u] = clock[0]
        fb.visited.append(u)
        yield fb.build(0, f"Visited node {L(u)} at time {disc[u]}.", highlights=[u] + cut)

        for v in adj[u]:
            if v not in disc:
                children += 1
                parent[v] = u
                yield from _visit(v)
                low[u] = min(low[u], low[v])

                if parent[u] is None and children > 1 and u not in cut:
                    _mark(u)
                    yield fb.build(
                        1, f"Root node {L(u)} has >1 children in DFS tree. It is a Cut Vertex!",
                        highlights=[u] + cut,
                    )
                if parent[u] is not None and low[v] >= disc[u] and u not in cut:
                    _mark(u)
                    yield fb.build(
                        2, f"Node {L(u)} is an Articulation Point! Removing it disconnects the graph.",
                        highlights=[u] + cut,
                    )
            elif v != parent[u]:
                low[u] = min(low[u], disc[v])

    for nid in graph.nodes:
        if nid not in disc:
            parent[nid] = None
            yield from _visit(nid)

    if not cut:
        fb.output = "Articulation points: None"
    yield fb.build(-1, f"Algorithm complete. Found {len(cut)} Articulation Point(s).", highlights=sorted(cut))
