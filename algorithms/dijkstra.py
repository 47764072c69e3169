"""
dijkstra.py — Dijkstra's Shortest Paths
========================================
The priority queue is a plain list that is stably re-sorted by distance
before every pop, so the overlay can show every pending candidate and
ties always pop in discovery order.

A node may sit in the list more than once (there is no decrease-key).
A popped entry whose distance is worse than the node's current best is
stale and is dropped without a frame.
"""

from typing import Generator, List, Dict, Optional, Tuple

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder, INF


PSEUDOCODE: List[str] = [
    "Init dist = infinity, dist[start] = 0",   # 0
    "Push (0, start) to PQ",                   # 1
    "While PQ not empty:",                     # 2
    "  u = PQ.pop()",                          # 3
    "  For v in adj[u]:",                      # 4
    "    if dist[u] + w < dist[v]:",           # 5
    "      dist[v] = dist[u] + w",             # 6
    "      PQ.push(dist[v], v)",               # 7
]


def dijkstra(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    adj  = graph.adjacency()
    fb   = GraphFrameBuilder(graph)

    dist: Dict[int, float]         = {nid: INF for nid in graph.nodes}
    prev: Dict[int, Optional[int]] = {nid: None for nid in graph.nodes}
    dist[start] = 0
    pq: List[Tuple[int, float]]    = [(start, 0)]

    def spt() -> List[Tuple[int, int]]:
        return [(p, v) for v, p in prev.items() if p is not None]

    fb.distances = dist
    fb.queue     = [start]
    yield fb.build(0, f"Dijkstra started. Initialized distances to infinity, dist[{L(start)}] = 0.")

    while pq:
        pq.sort(key=lambda item: item[1])
        u, d = pq.pop(0)
        if d > dist[u]:
            continue

        if u not in fb.visited:
            fb.visited.append(u)
        fb.queue = [n for n, _ in pq]
        yield fb.build(2, f"Processing node {L(u)} with distance {d}.", highlights=[u], edge_highlights=spt())

        for v in adj[u]:
            weight = graph.weight_between(u, v)
            yield fb.build(
                4, f"Checking neighbor {L(v)} with weight {weight}.",
                highlights=[u], edge_highlights=spt() + [(u, v)],
            )
            if dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
                prev[v] = u
                pq.append((v, dist[v]))
                fb.queue = [n for n, _ in pq]
                yield fb.build(
                    6, f"Relaxed edge ({L(u)}, {L(v)}). New distance to {L(v)} is {dist[v]}.",
                    highlights=[u, v], edge_highlights=spt() + [(u, v)],
                )

    fb.queue = []
    yield fb.build(0, "Dijkstra completed.", edge_highlights=spt())

