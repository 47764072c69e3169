"""
bellman_ford.py — Bellman–Ford Single-Source Shortest Paths
============================================================
Relaxes every edge V-1 times (both directions when the graph is
undirected), stops early on a round with no relaxation, then does one
more sweep to detect a negative-weight cycle.

The distance overlay is carried on every frame so the distance panel
can be scrubbed back and forth with the timeline.
"""

from typing import Generator, List, Dict, Optional, Tuple

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder, INF, format_distance


PSEUDOCODE: List[str] = [
    "dist = [Infinity] * V",                 # 0
    "dist[start] = 0",                       # 1
    "for i from 1 to V-1:",                  # 2
    "  for each edge (u, v, w):",            # 3
    "    if dist[u] + w < dist[v]:",         # 4
    "      dist[v] = dist[u] + w",           # 5
    "for each edge (u, v, w):",              # 6
    "  if dist[u] + w < dist[v]:",           # 7
    "    Negative Cycle Detected!",          # 8
]


def bellman_ford(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    fb   = GraphFrameBuilder(graph)
    n    = len(graph.nodes)
    dist: Dict[int, float]         = {nid: INF for nid in graph.nodes}
    prev: Dict[int, Optional[int]] = {nid: None for nid in graph.nodes}
    dist[start] = 0
    fb.distances = dist

    yield fb.build(
        1, f"Initializing distances. Distance to start node {L(start)} is 0, others Infinity.",
        highlights=[start],
    )

    # each edge is tried forwards, and backwards too when undirected
    directions: List[Tuple[int, int, int, bool]] = []
    for edge in graph.edges:
        weight = graph.edge_weight(edge)
        directions.append((edge.source, edge.target, weight, False))
        if not graph.directed:
            directions.append((edge.target, edge.source, weight, True))

    for i in range(1, n):
        relaxed_any = False
        yield fb.build(2, f"Iteration {i} of {n - 1}: Relaxing all edges.")

        for u, v, weight, reverse in directions:
            if reverse:
                text = f"Checking reverse edge {L(u)}->{L(v)} (weight {weight})."
            else:
                text = (
                    f"Checking edge {L(u)}->{L(v)} (weight {weight}). "
                    f"dist[{L(u)}] = {format_distance(dist[u])}, dist[{L(v)}] = {format_distance(dist[v])}"
                )
            yield fb.build(4, text, highlights=[u, v], edge_highlights=[(u, v)])

            if dist[u] != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                prev[v] = u
                relaxed_any = True
                yield fb.build(
                    5, f"Relaxed! dist[{L(v)}] is now {dist[v]}.",
                    highlights=[v], edge_highlights=[(u, v)],
                )

        if not relaxed_any:
            yield fb.build(
                2, f"Optimization: No edges relaxed during iteration {i}. Algorithm can terminate early.",
            )
            break

    yield fb.build(6, "Checking for negative weight cycles.")

    negative_cycle = False
    for u, v, weight, reverse in directions:
        if dist[u] != INF and dist[u] + weight < dist[v]:
            negative_cycle = True
            where = "reverse edge" if reverse else "edge"
            yield fb.build(
                8, f"Negative Weight Cycle Detected along {where} {L(u)}->{L(v)}!",
                highlights=[u, v], edge_highlights=[(u, v)],
            )
            break

    if negative_cycle:
        yield fb.build(-1, "Bellman-Ford failed due to a negative-weight cycle.")
    else:
        tree = [(p, v) for v, p in prev.items() if p is not None]
        yield fb.build(-1, "Bellman-Ford completed. Shortest paths found!", edge_highlights=tree)
