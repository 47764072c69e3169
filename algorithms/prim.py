"""
prim.py — Prim's Minimum Spanning Tree
=======================================
Grows the tree from the start node.  The "cut" is a lazy list of
candidate edges (visited → unvisited); entries whose far end became
visited in the meantime are discarded silently when they surface.
"""

from typing import Generator, List, Set, Tuple

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder


PSEUDOCODE: List[str] = [
    "Init MST set, visited = {start}",                               # 0
    "Add edges from start to cut",                                   # 1
    "While visited != V:",                                           # 2
    "  Pick min weight edge (u, v) from cut where v not visited",    # 3
    "  Add v to visited, add (u, v) to MST",                         # 4
    "  Add edges from v to cut",                                     # 5
]


def prim(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    adj  = graph.adjacency()
    fb   = GraphFrameBuilder(graph)
    seen: Set[int] = {start}
    cut:  List[Tuple[int, int, int]] = []          # (from, to, weight)
    mst:  List[Tuple[int, int]]      = []

    def add_edges(u: int) -> None:
        for v in adj[u]:
            if v not in seen:
                cut.append((u, v, graph.weight_between(u, v)))

    add_edges(start)
    fb.visited = [start]
    yield fb.build(0, f"Prim's Algorithm started. Added start node {L(start)} to visited.", highlights=[start])

    while len(seen) < len(graph.nodes) and cut:
        cut.sort(key=lambda item: item[2])
        best = cut.pop(0)
        while best[1] in seen:
            if not cut:
                best = None
                break
            best = cut.pop(0)
        if best is None:
            break

        u, v, weight = best
        seen.add(v)
        fb.visited.append(v)
        mst.append((u, v))
        fb.edge_highlights = list(mst)
        yield fb.build(
            3, f"Picked minimum edge ({L(u)}, {L(v)}) with weight {weight}. Added {L(v)} to MST.",
            highlights=[v],
        )

        add_edges(v)
        yield fb.build(5, f"Added edges from {L(v)} to the cut.", highlights=[v])

    yield fb.build(2, f"Prim's Algorithm completed. MST size: {len(mst)}.")
