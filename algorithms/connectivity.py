"""
connectivity.py — Structural Queries
=====================================
The "basics" tracers: connected components, cycle detection, node
degree and neighbour listing.  Short traces, one frame per finding.
"""

from collections import deque
from typing import Generator, List, Set

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder


COMPONENTS_PSEUDOCODE: List[str] = [
    "For each node:",
    "  If not visited, start a new traversal",
    "  Mark all reachable nodes as same component",
    "Count distinct components",
]

CYCLE_PSEUDOCODE: List[str] = [
    "Run DFS from each unvisited node",
    "Keep track of the recursion 'stack'",
    "If we see a node already in the current stack:",
    "  Cycle detected!",
    "No back edge: graph is acyclic",
]

DEGREE_PSEUDOCODE: List[str] = [
    "Find the node",
    "Count all edges connected to it",
]

NEIGHBORS_PSEUDOCODE: List[str] = [
    "Find target node",
    "Highlight all immediate neighbors (1-hop)",
]


def connected_components(graph: Graph) -> Generator[GraphFrame, None, None]:
    adj  = graph.adjacency()
    fb   = GraphFrameBuilder(graph)
    seen: Set[int] = set()
    components = 0

    yield fb.build(0, "Starting Connectivity Check. Sweeping graph to find isolated components.")

    for nid in graph.nodes:
        if nid in seen:
            continue
        components += 1
        seen.add(nid)
        fb.visited.append(nid)
        yield fb.build(1, f"Found unvisited node {L(nid)}. Starting Component #{components}.", highlights=[nid])

        members: List[int] = []
        queue = deque([nid])
        while queue:
            u = queue.popleft()
            members.append(u)
            for v in adj[u]:
                if v not in seen:
                    seen.add(v)
                    fb.visited.append(v)
                    queue.append(v)

        yield fb.build(
            2,
            f"Component #{components} contains {len(members)} nodes: {', '.join(L(n) for n in members)}",
            highlights=members,
        )

    if components == 1:
        text = "Graph is Weakly/Strongly Connected." if graph.directed else "Graph is Fully Connected."
    else:
        text = f"Graph is Disconnected! Found {components} isolated components."
    yield fb.build(3, text)


def detect_cycle(graph: Graph) -> Generator[GraphFrame, None, None]:
    adj   = graph.adjacency()
    fb    = GraphFrameBuilder(graph)
    seen:  Set[int] = set()
    on_stack: Set[int] = set()

    yield fb.build(0, "Starting Cycle Detection...")

    def undirected(v: int, parent: int) -> bool:
        seen.add(v)
        for w in adj[v]:
            if w not in seen:
                if undirected(w, v):
                    return True
            elif w != parent:
                return True
        return False

    def directed(v: int) -> bool:
        seen.add(v)
        on_stack.add(v)
        for w in adj[v]:
            if w not in seen:
                if directed(w):
                    return True
            elif w in on_stack:
                return True
        on_stack.discard(v)
        return False

    found = False
    for nid in graph.nodes:
        if nid in seen:
            continue
        found = directed(nid) if graph.directed else undirected(nid, -1)
        if found:
            break

    if found:
        yield fb.build(3, "Cycle Detected! The graph contains at least one cycle (a closed loop).")
    else:
        forest = " (It is a Tree/Forest)" if not graph.directed and len(seen) == len(graph.nodes) else ""
        yield fb.build(4, f"No cycles found. This graph is Acyclic{forest}.")


def node_degree(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    fb = GraphFrameBuilder(graph)
    yield fb.build(0, f"Starting Node Degree check for node {L(start)}.", highlights=[start])

    in_deg = out_deg = total = 0
    for edge in graph.edges:
        if not edge.touches(start):
            continue
        fb.edge_highlights.append((edge.source, edge.target))
        if graph.directed:
            if edge.source == start:
                out_deg += 1
            if edge.target == start:
                in_deg += 1
            total = in_deg + out_deg
            running = f"(In: {in_deg}, Out: {out_deg}, Total: {total})"
        else:
            total += 1
            running = f"(Total Degree: {total})"
        yield fb.build(
            1, f"Found connected edge between {L(edge.source)} and {L(edge.target)}. Current Degree: {running}",
            highlights=[start],
        )

    summary = f"In-Degree: {in_deg}, Out-Degree: {out_deg}" if graph.directed else f"Total Degree: {total}"
    yield fb.build(0, f"Check complete! {summary}", highlights=[start])


def neighbors(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    fb   = GraphFrameBuilder(graph)
    near = graph.adjacency()[start]
    yield fb.build(0, f"Highlighting neighbors for node {L(start)}.", highlights=[start])
    yield fb.build(
        1,
        f"Node {L(start)} has {len(near)} neighbor(s): {', '.join(L(n) for n in near) or 'None'}",
        highlights=[start] + near, edge_highlights=[(start, v) for v in near],
    )
