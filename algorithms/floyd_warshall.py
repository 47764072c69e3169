"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The signature "matrix algorithm".  Every frame carries the full
distance matrix so the UI can render it as a live grid.

Structure:
  for k in nodes:          ← "intermediate" node
      for i in nodes:
          for j in nodes:
              if dist[i][k] + dist[k][j] < dist[i][j]:
                  dist[i][j] = dist[i][k] + dist[k][j]

Pairs with i == k, j == k or i == j can never improve and are skipped,
as are candidates through an unreachable leg.  A negative entry on the
diagonal afterwards means a negative cycle.
"""

from typing import Generator, List, Dict

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder, INF, format_distance


PSEUDOCODE: List[str] = [
    "dist = matrix initialized to Infinity",                  # 0
    "for each edge (u, v, weight): dist[u][v] = weight",      # 1
    "for k from 1 to V:",                                     # 2
    "  for i from 1 to V:",                                   # 3
    "    for j from 1 to V:",                                 # 4
    "      if dist[i][k] + dist[k][j] < dist[i][j]:",         # 5
    "        dist[i][j] = dist[i][k] + dist[k][j]",           # 6
]


def floyd_warshall(graph: Graph) -> Generator[GraphFrame, None, None]:
    fb    = GraphFrameBuilder(graph)
    nodes = list(graph.nodes)

    dist: Dict[int, Dict[int, float]] = {
        u: {v: (0 if u == v else INF) for v in nodes} for u in nodes
    }
    for edge in graph.edges:
        u, v, weight = edge.source, edge.target, graph.edge_weight(edge)
        dist[u][v] = min(dist[u][v], weight)
        if not graph.directed:
            dist[v][u] = min(dist[v][u], weight)

    fb.distance_matrix = dist
    yield fb.build(1, "Initializing all-pairs distance matrix with given edges.")

    for k in nodes:
        yield fb.build(2, f"Considering node {L(k)} as an intermediate vertex (k).", highlights=[k])
        for i in nodes:
            if i == k:
                continue
            for j in nodes:
                if j == k or i == j:
                    continue
                if dist[i][k] == INF or dist[k][j] == INF:
                    continue

                candidate = dist[i][k] + dist[k][j]
                yield fb.build(
                    5,
                    f"Checking path {L(i)} -> {L(k)} -> {L(j)}. Distance is {dist[i][k]} + {dist[k][j]} "
                    f"= {candidate}, current shortest is {format_distance(dist[i][j])}",
                    highlights=[i, k, j], edge_highlights=[(i, k), (k, j)],
                )
                if candidate < dist[i][j]:
                    dist[i][j] = candidate
                    yield fb.build(
                        6, f"Shorter path found! dist[{L(i)}][{L(j)}] updated to {candidate}.",
                        highlights=[i, j],
                    )

    if any(dist[n][n] < 0 for n in nodes):
        yield fb.build(-1, "Negative weight cycle detected (diagonal has negative values)!")
    else:
        yield fb.build(-1, "Floyd-Warshall completed. All pairs shortest paths calculated.")
