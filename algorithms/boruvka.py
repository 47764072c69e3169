"""
boruvka.py — Borůvka's Minimum Spanning Tree
=============================================
Every round, each component picks its cheapest outgoing edge; all of
those are added at once (skipping any that a previous pick in the same
round already made redundant).  Rounds continue until one component
remains or no edge can merge two components.
"""

from typing import Generator, List, Dict, Optional, Tuple

from graph import Graph, GraphEdge, node_label as L
from algorithms.frame import GraphFrame, GraphFrameBuilder
from algorithms.kruskal import UnionFind


PSEUDOCODE: List[str] = [
    "Init components (each node is a component)",    # 0
    "While numTrees > 1:",                           # 1
    "  Find cheapest edge for each component",       # 2
    "  Add valid cheapest edges to MST",             # 3
    "  Merge components",                            # 4
]


def boruvka(graph: Graph) -> Generator[GraphFrame, None, None]:
    fb        = GraphFrameBuilder(graph)
    uf        = UnionFind(graph.nodes)
    mst:      List[Tuple[int, int]] = []
    num_trees = len(graph.nodes)

    yield fb.build(0, f"Boruvka's Algorithm started. Components: {num_trees}.")

    while num_trees > 1 and len(mst) < len(graph.nodes) - 1:
        cheapest: Dict[int, Optional[GraphEdge]] = {nid: None for nid in graph.nodes}
        for edge in graph.edges:
            set_a, set_b = uf.find(edge.source), uf.find(edge.target)
            if set_a == set_b:
                continue
            weight = graph.edge_weight(edge)
            for root in (set_a, set_b):
                if cheapest[root] is None or graph.edge_weight(cheapest[root]) > weight:
                    cheapest[root] = edge

        picks = [e for e in cheapest.values() if e is not None]
        yield fb.build(
            2, "Identified cheapest outgoing edges for components.",
            highlights=list(graph.nodes),
            edge_highlights=mst + [(e.source, e.target) for e in picks],
        )

        merged = False
        for edge in picks:
            if uf.union(edge.source, edge.target):
                mst.append((edge.source, edge.target))
                for n in (edge.source, edge.target):
                    if n not in fb.visited:
                        fb.visited.append(n)
                num_trees -= 1
                merged = True
                fb.edge_highlights = list(mst)
                yield fb.build(
                    3, f"Added edge ({L(edge.source)}, {L(edge.target)}) connecting components.",
                    highlights=[edge.source, edge.target],
                )
        if not merged:
            break

    yield fb.build(0, f"Boruvka's Algorithm completed. MST size: {len(mst)}.")
