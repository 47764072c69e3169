"""
kruskal.py — Kruskal's Minimum Spanning Tree
=============================================
Edges sorted ascending by weight (stable, so equal weights keep their
insertion order), then fed through a union-find forest.  Union attaches
one root under the other; `find` is plain recursion with no path
compression.
"""

from typing import Generator, List, Dict, Tuple

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder


PSEUDOCODE: List[str] = [
    "Sort all edges by weight",                        # 0
    "Init Union-Find",                                 # 1
    "For each edge (u, v) in sorted edges:",           # 2
    "  check if u and v in same set",                  # 3
    "  if not, union(u, v) and add to MST",            # 4
]


class UnionFind:
    """Union by attach: parent[root_a] = root_b."""

    def __init__(self, ids):
        self.parent: Dict[int, int] = {i: i for i in ids}

    def find(self, i: int) -> int:
        if self.parent[i] == i:
            return i
        return self.find(self.parent[i])

    def union(self, a: int, b: int) -> bool:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self.parent[root_a] = root_b
        return True


def kruskal(graph: Graph) -> Generator[GraphFrame, None, None]:
    fb    = GraphFrameBuilder(graph)
    edges = sorted(graph.edges, key=graph.edge_weight)
    uf    = UnionFind(graph.nodes)
    mst:  List[Tuple[int, int]] = []

    yield fb.build(0, "Kruskal's Algorithm started. Edges sorted by weight.")

    for edge in edges:
        u, v   = edge.source, edge.target
        weight = graph.edge_weight(edge)
        yield fb.build(
            2, f"Checking edge ({L(u)}, {L(v)}) with weight {weight}.",
            highlights=[u, v], edge_highlights=mst + [(u, v)],
        )

        if uf.union(u, v):
            mst.append((u, v))
            for n in (u, v):
                if n not in fb.visited:
                    fb.visited.append(n)
            fb.edge_highlights = list(mst)
            yield fb.build(4, f"Added edge ({L(u)}, {L(v)}) to MST.", highlights=[u, v])
        else:
            yield fb.build(3, f"Edge ({L(u)}, {L(v)}) forms a cycle. Skipped.", highlights=[u, v])

    yield fb.build(0, f"Kruskal's Algorithm completed. MST size: {len(mst)}.")
