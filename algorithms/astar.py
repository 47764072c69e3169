"""
astar.py — A* Search
=====================
Generator-based A* from the start node to a fixed target: the most
recently added node (or the one before it, when that is the start).

h(n) is the Euclidean distance between node centres, which makes it
admissible whenever weights are at least the drawn edge lengths (the
"weights by distance" mode).  The distance overlay shows fScore,
formatted to one decimal place.
"""

import math
from typing import Generator, List, Dict, Optional

from graph import Graph, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder, INF, format_distance


PSEUDOCODE: List[str] = [
    "gScore[start] = 0, fScore[start] = h(start)",                        # 0
    "openSet = {start}",                                                  # 1
    "while openSet is not empty:",                                        # 2
    "  current = node in openSet with lowest fScore",                     # 3
    "  if current == target:",                                            # 4
    "    return RECONSTRUCT_PATH()",                                      # 5
    "  openSet.remove(current), closedSet.add(current)",                  # 6
    "  for each neighbor of current:",                                    # 7
    "    tentative_gScore = gScore[current] + weight(current, neighbor)", # 8
    "    if tentative_gScore < gScore[neighbor]:",                        # 9
    "      gScore[neighbor] = tentative_gScore",                          # 10
    "      fScore[neighbor] = tentative_gScore + h(neighbor)",            # 11
    "      if neighbor not in openSet:",                                  # 12
    "        openSet.add(neighbor)",                                      # 13
]


def pick_target(graph: Graph, start: int) -> int:
    ids    = graph.node_ids()
    target = ids[-1]
    if target == start and len(ids) > 1:
        target = ids[-2]
    return target


def euclidean(graph: Graph, a: int, b: int) -> float:
    na, nb = graph.nodes[a], graph.nodes[b]
    return math.sqrt((na.x - nb.x) ** 2 + (na.y - nb.y) ** 2)


def astar(graph: Graph, start: int) -> Generator[GraphFrame, None, None]:
    adj    = graph.adjacency()
    fb     = GraphFrameBuilder(graph)
    target = pick_target(graph, start)

    g_score: Dict[int, float]         = {nid: INF for nid in graph.nodes}
    f_score: Dict[int, float]         = {nid: INF for nid in graph.nodes}
    parent:  Dict[int, Optional[int]] = {nid: None for nid in graph.nodes}
    g_score[start] = 0
    f_score[start] = round(euclidean(graph, start, target), 1)

    open_set:   List[int] = [start]
    closed_set: List[int] = []
    explored:   List[tuple] = []

    def fmt(value: float) -> str:
        return format_distance(value) if value == INF else f"{value:.1f}"

    fb.distances = f_score
    fb.visited   = closed_set
    fb.queue     = open_set
    yield fb.build(
        0,
        f"A* Search starting. Start Node: {L(start)}, Target Node: {L(target)}.\n"
        f"h(n) = Euclidean distance to target. Displaying fScore = g(n) + h(n)",
        highlights=[start, target],
    )

    found = False
    while open_set:
        current = min(open_set, key=lambda n: f_score[n])
        yield fb.build(
            3, f"Selected {L(current)} from openSet with lowest fScore: {fmt(f_score[current])}.",
            highlights=[current], edge_highlights=explored,
        )

        if current == target:
            found = True
            yield fb.build(
                5, f"Target {L(target)} reached! Reconstructing path...",
                highlights=[current], edge_highlights=explored,
            )
            break

        open_set.remove(current)
        closed_set.append(current)
        yield fb.build(
            6, f"Moved {L(current)} to closedSet. Checking neighbors...",
            highlights=[current], edge_highlights=explored,
        )

        for neighbor in adj[current]:
            if neighbor in closed_set:
                continue
            weight    = graph.weight_between(current, neighbor)
            tentative = g_score[current] + weight
            yield fb.build(
                8,
                f"Checking neighbor {L(neighbor)}. Tentative gScore: {g_score[current]} + {weight} = "
                f"{tentative}. Current gScore: {format_distance(g_score[neighbor])}.",
                highlights=[neighbor, current], edge_highlights=explored + [(current, neighbor)],
            )

            if tentative < g_score[neighbor]:
                parent[neighbor]  = current
                g_score[neighbor] = tentative
                h_dist            = euclidean(graph, neighbor, target)
                f_score[neighbor] = round(tentative + h_dist, 1)
                explored.append((current, neighbor))
                if neighbor not in open_set:
                    open_set.append(neighbor)
                yield fb.build(
                    10,
                    f"Found shorter path to {L(neighbor)}. Updated gScore={tentative}, "
                    f"h={h_dist:.1f}, fScore={fmt(f_score[neighbor])}. Added to openSet.",
                    highlights=[neighbor], edge_highlights=explored,
                )

    if not found:
        yield fb.build(
            -1, f"Open set exhausted. Target {L(target)} is unreachable from {L(start)}.",
            edge_highlights=explored,
        )
        return

    path: List[int] = []
    cur: Optional[int] = target
    while cur is not None:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    yield fb.build(
        -1,
        f"A* Search Path found! Cost: {g_score[target]}. Path: {' -> '.join(L(n) for n in path)}",
        highlights=path, edge_highlights=list(zip(path, path[1:])),
    )
