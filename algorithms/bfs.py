"""
bfs.py — Breadth-First Search
==============================
Generator-based BFS.  Yields a GraphFrame at every meaningful event:
  1. Queue check          →  front of the queue highlighted
  2. Dequeue a node       →  it becomes the highlighted node
  3. Examine a neighbour  →  edge highlighted
  4. Admit a neighbour    →  visited set / queue updated

Neighbours are taken from the sorted adjacency list, so identical
graphs always produce identical traces.
"""

from collections import deque
from typing import Generator, List, Set

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = code_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "Initialize visited set and queue",         # 0
    "Add start node to visited and queue",      # 1
    "While queue is not empty:",                # 2
    "  Dequeue node u",                         # 3
    "  For each neighbor v of u:",              # 4
    "    If v not visited:",                    # 5
    "      Mark v visited, enqueue v",          # 6
]


def bfs(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    adj     = graph.adjacency()
    fb      = GraphFrameBuilder(graph)
    queue   = deque()
    seen:   Set[int] = set()

    def _output() -> str:
        return "BFS: " + ", ".join(L(n) for n in fb.visited)

    fb.output = _output()
    yield fb.build(0, f"Starting BFS from node {L(start)}.", highlights=[start])

    seen.add(start)
    fb.visited.append(start)
    queue.append(start)
    fb.queue  = list(queue)
    fb.output = _output()
    yield fb.build(1, f"Added start node {L(start)} to queue and visited set.", highlights=[start])

    while queue:
        yield fb.build(2, "Checking if queue is empty. It's not.", highlights=[queue[0]])

        u = queue.popleft()
        fb.queue = list(queue)
        yield fb.build(3, f"Dequeued node {L(u)}.", highlights=[u])

        for v in adj[u]:
            yield fb.build(
                4, f"Checking neighbor {L(v)} of node {L(u)}.",
                highlights=[u], edge_highlights=[(u, v)],
            )
            if v not in seen:
                seen.add(v)
                fb.visited.append(v)
                queue.append(v)
                fb.queue  = list(queue)
                fb.output = _output()
                yield fb.build(
                    6, f"Node {L(v)} is not visited. Marking as visited and adding to queue.",
                    highlights=[u, v], edge_highlights=[(u, v)],
                )

    yield fb.build(0, "BFS traversal completed.")
