"""
topological.py — Topological Ordering
======================================
Two classic orderings of a directed graph:

    topological_sort  – DFS post-order, reversed.  A grey ("visiting")
                        node met again means a back edge, i.e. a cycle.
    kahn              – repeatedly dequeue an in-degree-0 node.  Leftover
                        nodes at the end mean a cycle.

Both end immediately with a single explanatory frame on an undirected
graph.
"""

from collections import deque
from typing import Generator, List, Set

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder


DFS_PSEUDOCODE: List[str] = [
    "For each unvisited node u: DFS(u)",           # 0
    "  For each neighbor v: if visiting, cycle!",  # 1
    "  After neighbors: push u to stack",          # 2
    "Reverse stack = topological order",           # 3
]

KAHN_PSEUDOCODE: List[str] = [
    "Compute in-degree of every node",             # 0
    "Enqueue all nodes with in-degree 0",          # 1
    "While queue not empty: dequeue u, output u",  # 2
    "  For each neighbor v: in-degree[v]--",       # 3
    "    if in-degree[v] == 0: enqueue v",         # 4
]


def topological_sort(graph: Graph) -> Generator[GraphFrame, None, None]:
    fb = GraphFrameBuilder(graph)
    if not graph.directed:
        yield fb.build(-1, "Graph must be Directed.")
        return

    adj = graph.adjacency()
    visiting: Set[int] = set()
    done:     Set[int] = set()
    order:    List[int] = []
    state = {"cycle": False}

    yield fb.build(0, "Starting Topological Sort (DFS-based).")

    def _visit(u: int):
        visiting.add(u)
        yield fb.build(0, f"Visiting node {L(u)}.", highlights=[u])
        for v in adj[u]:
            if v in visiting:
                state["cycle"] = True
                yield fb.build(
                    1, f"Cycle detected at edge {L(u)} -> {L(v)}. Graph is not a DAG.",
                    highlights=[u, v], edge_highlights=[(u, v)],
                )
                return
            if v not in done:
                yield from _visit(v)
                if state["cycle"]:
                    return
        visiting.discard(u)
        done.add(u)
        fb.visited.append(u)
        order.append(u)
        fb.stack = list(order)
        yield fb.build(2, f"Finished DFS for {L(u)}. Adding to Topological Sort stack.", highlights=[u])

    for nid in graph.nodes:
        if nid not in done:
            yield from _visit(nid)
            if state["cycle"]:
                return

    final = list(reversed(order))
    fb.stack = final
    yield fb.build(3, f"Topological Sort complete! Order: {' → '.join(L(n) for n in final)}")


def kahn(graph: Graph) -> Generator[GraphFrame, None, None]:
    fb = GraphFrameBuilder(graph)
    if not graph.directed:
        yield fb.build(-1, "Graph must be Directed.")
        return

    adj       = graph.adjacency()
    in_degree = graph.in_degrees()
    queue     = deque(nid for nid in graph.nodes if in_degree[nid] == 0)
    order:    List[int] = []

    fb.queue = list(queue)
    zero = ", ".join(L(n) for n in queue) if queue else "None"
    yield fb.build(1, f"Starting Kahn's Algorithm. Found nodes with 0 in-degree: {zero}")

    while queue:
        u = queue.popleft()
        order.append(u)
        fb.visited = list(order)
        fb.queue   = list(queue)
        yield fb.build(2, f"Dequeued node {L(u)} and added to topological order.", highlights=[u])

        for v in adj[u]:
            in_degree[v] -= 1
            text = f"Decreased in-degree of neighbor {L(v)} to {in_degree[v]}."
            line = 3
            if in_degree[v] == 0:
                queue.append(v)
                fb.queue = list(queue)
                text += f" Node {L(v)} now has 0 in-degree. Enqueuing."
                line = 4
            yield fb.build(line, text, highlights=[u, v], edge_highlights=[(u, v)])

    fb.queue = []
    if len(order) == len(graph.nodes):
        yield fb.build(-1, f"Kahn's Algorithm complete! Order: {' → '.join(L(n) for n in order)}")
    else:
        yield fb.build(-1, "Graph has a cycle! Could not process all nodes. Remaining nodes have in-degree > 0.")
