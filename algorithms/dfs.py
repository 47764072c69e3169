"""
dfs.py — Depth-First Search
============================
Recursive DFS with an explicit stack overlay that mirrors the current
recursion path.  One frame per node entered, one per neighbour examined.
"""

from typing import Generator, List, Set

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder


PSEUDOCODE: List[str] = [
    "Function DFS(u):",                  # 0
    "  Mark u as visited",               # 1
    "  For each neighbor v of u:",       # 2
    "    If v not visited:",             # 3
    "      DFS(v)",                      # 4
]


def dfs(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    adj  = graph.adjacency()
    fb   = GraphFrameBuilder(graph)
    seen: Set[int] = set()

    def _output() -> str:
        return "DFS: " + ", ".join(L(n) for n in fb.visited)

    def _visit(u: int):
        fb.stack.append(u)
        seen.add(u)
        fb.visited.append(u)
        fb.output = _output()
        yield fb.build(0, f"Visiting node {L(u)}.", highlights=[u])

        for v in adj[u]:
            yield fb.build(
                2, f"Checking neighbor {L(v)} of node {L(u)}.",
                highlights=[u], edge_highlights=[(u, v)],
            )
            if v not in seen:
                yield from _visit(v)
        fb.stack.pop()

    yield from _visit(start)
    yield fb.build(0, "DFS traversal completed.")
