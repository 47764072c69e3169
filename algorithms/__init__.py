"""
algorithms/__init__.py — Graph Algorithm Registry
==================================================
Single source of truth for every graph tracer.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, tags, start, …),
        …
    }

`start` says how the tracer uses a start node:
    "required" – caller must name one (id or label)
    "optional" – defaults to the first node when omitted
    "none"     – whole-graph algorithm, no start node

Adding an algorithm is: write the generator, add one entry here.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Dict, Optional, Any

from errors import TraceInputError, UnknownAlgorithmError

# ---------------------------------------------------------------------------
# Import all tracer modules
# ---------------------------------------------------------------------------
from algorithms.bfs            import bfs            as _bfs,     PSEUDOCODE as _bfs_pc
from algorithms.dfs            import dfs            as _dfs,     PSEUDOCODE as _dfs_pc
from algorithms.dijkstra       import dijkstra       as _dij,     PSEUDOCODE as _dij_pc
from algorithms.prim           import prim           as _prim,    PSEUDOCODE as _prim_pc
from algorithms.kruskal        import kruskal        as _kru,     PSEUDOCODE as _kru_pc
from algorithms.boruvka        import boruvka        as _bor,     PSEUDOCODE as _bor_pc
from algorithms.bellman_ford   import bellman_ford   as _bf,      PSEUDOCODE as _bf_pc
from algorithms.floyd_warshall import floyd_warshall as _fw,      PSEUDOCODE as _fw_pc
from algorithms.astar          import astar          as _astar,   PSEUDOCODE as _ast_pc
from algorithms.topological    import (
    topological_sort as _topo, kahn as _kahn, DFS_PSEUDOCODE as _topo_pc, KAHN_PSEUDOCODE as _kahn_pc,
)
from algorithms.connectivity   import (
    connected_components as _cc, detect_cycle as _cyc, node_degree as _deg, neighbors as _nbr,
    COMPONENTS_PSEUDOCODE as _cc_pc, CYCLE_PSEUDOCODE as _cyc_pc,
    DEGREE_PSEUDOCODE as _deg_pc, NEIGHBORS_PSEUDOCODE as _nbr_pc,
)
from algorithms.critical       import (
    bridges as _bridges, articulation_points as _ap,
    BRIDGES_PSEUDOCODE as _bridges_pc, ARTICULATION_PSEUDOCODE as _ap_pc,
)
from algorithms.flow           import (
    ford_fulkerson as _ff, edmonds_karp as _ek,
    FORD_FULKERSON_PSEUDOCODE as _ff_pc, EDMONDS_KARP_PSEUDOCODE as _ek_pc,
)
from algorithms.frame          import GraphFrame, GraphFrameBuilder, Trace


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:               str                    # registry key, e.g. "bfs"
    label:             str                    # human label, e.g. "Breadth-First Search"
    fn:                Callable               # the generator function
    pseudocode:        List[str]              # lines indexed by frame.code_line
    tags:              List[str] = field(default_factory=list)   # e.g. ["traversal"]
    start:             str      = "required"  # "required" | "optional" | "none"
    complexity_time:   str      = ""          # e.g. "O(V + E)"
    complexity_space:  str      = ""          # e.g. "O(V)"
    description:       str      = ""          # one-liner for the UI card
    params:            List[str] = field(default_factory=list)   # required tracer inputs, e.g. ["value"]
    optional:          List[str] = field(default_factory=list)   # inputs with a default, e.g. ["rebalance"]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":              self.key,
            "label":            self.label,
            "tags":             list(self.tags),
            "start":            self.start,
            "params":           list(self.params),
            "optional":         list(self.optional),
            "pseudocode":       list(self.pseudocode),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer from the start node.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        tags=["traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dij, pseudocode=_dij_pc,
        tags=["shortest-path", "weighted"],
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Greedily expands the closest node. Optimal for non-negative weights.",
    ),

    "prim": AlgoInfo(
        key="prim", label="Prim's Algorithm", fn=_prim, pseudocode=_prim_pc,
        tags=["mst", "weighted"],
        complexity_time="O(E log E)", complexity_space="O(E)",
        description="Grows one tree by always taking the cheapest edge across the cut.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", fn=_kru, pseudocode=_kru_pc,
        tags=["mst", "weighted", "union-find"], start="none",
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Takes edges cheapest-first, skipping any that close a cycle.",
    ),

    "boruvka": AlgoInfo(
        key="boruvka", label="Borůvka's Algorithm", fn=_bor, pseudocode=_bor_pc,
        tags=["mst", "weighted", "union-find"], start="none",
        complexity_time="O(E log V)", complexity_space="O(V)",
        description="Every component adds its cheapest outgoing edge each round.",
    ),

    "bellman_ford": AlgoInfo(
        key="bellman_ford", label="Bellman–Ford", fn=_bf, pseudocode=_bf_pc,
        tags=["shortest-path", "weighted", "negative-edges"], start="optional",
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Handles negative edges. Detects negative cycles.",
    ),

    "floyd_warshall": AlgoInfo(
        key="floyd_warshall", label="Floyd–Warshall", fn=_fw, pseudocode=_fw_pc,
        tags=["shortest-path", "all-pairs", "negative-edges"], start="none",
        complexity_time="O(V³)", complexity_space="O(V²)",
        description="All-pairs shortest paths via dynamic programming.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=_astar, pseudocode=_ast_pc,
        tags=["shortest-path", "heuristic"], start="optional",
        complexity_time="O((V + E) log V)", complexity_space="O(V)",
        description="Dijkstra guided by straight-line distance to the last node.",
    ),

    "topological_sort": AlgoInfo(
        key="topological_sort", label="Topological Sort (DFS)", fn=_topo, pseudocode=_topo_pc,
        tags=["dag", "ordering"], start="none",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Reversed DFS finishing order of a directed acyclic graph.",
    ),

    "kahn": AlgoInfo(
        key="kahn", label="Kahn's Algorithm", fn=_kahn, pseudocode=_kahn_pc,
        tags=["dag", "ordering"], start="none",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Peels off in-degree-zero nodes one at a time.",
    ),

    "connected_components": AlgoInfo(
        key="connected_components", label="Connected Components", fn=_cc, pseudocode=_cc_pc,
        tags=["basics", "connectivity"], start="none",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Counts the isolated pieces of the graph.",
    ),

    "detect_cycle": AlgoInfo(
        key="detect_cycle", label="Cycle Detection", fn=_cyc, pseudocode=_cyc_pc,
        tags=["basics", "connectivity"], start="none",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="DFS looking for a back edge.",
    ),

    "node_degree": AlgoInfo(
        key="node_degree", label="Node Degree", fn=_deg, pseudocode=_deg_pc,
        tags=["basics"],
        complexity_time="O(E)", complexity_space="O(1)",
        description="Counts the edges touching one node (in/out when directed).",
    ),

    "neighbors": AlgoInfo(
        key="neighbors", label="Highlight Neighbors", fn=_nbr, pseudocode=_nbr_pc,
        tags=["basics"],
        complexity_time="O(E)", complexity_space="O(V)",
        description="Shows every node one hop away.",
    ),

    "bridges": AlgoInfo(
        key="bridges", label="Tarjan's Bridges", fn=_bridges, pseudocode=_bridges_pc,
        tags=["connectivity", "critical"], start="none",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Edges whose removal splits the graph (low[v] > disc[u]).",
    ),

    "articulation_points": AlgoInfo(
        key="articulation_points", label="Articulation Points", fn=_ap, pseudocode=_ap_pc,
        tags=["connectivity", "critical"], start="none",
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Cut vertices whose removal splits the graph.",
    ),

    "ford_fulkerson": AlgoInfo(
        key="ford_fulkerson", label="Ford–Fulkerson", fn=_ff, pseudocode=_ff_pc,
        tags=["flow", "weighted"], start="optional",
        complexity_time="O(E · maxflow)", complexity_space="O(V²)",
        description="Max flow from the start node to the highest-id node via DFS augmenting paths.",
    ),

    "edmonds_karp": AlgoInfo(
        key="edmonds_karp", label="Edmonds–Karp", fn=_ek, pseudocode=_ek_pc,
        tags=["flow", "weighted"], start="optional",
        complexity_time="O(V · E²)", complexity_space="O(V²)",
        description="Max flow using shortest (BFS) augmenting paths.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def require_algorithm(key: str) -> AlgoInfo:
    info = REGISTRY.get(key)
    if info is None:
        raise UnknownAlgorithmError("graph", key)
    return info


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


def tracer_kwargs(info: AlgoInfo, graph, start: Any = None) -> Dict[str, Any]:
    """
    Resolve the start node for `info` against `graph`.  Raises
    TraceInputError before any frame exists when the start is unusable.
    """
    if info.start == "none":
        return {}
    if info.start == "optional" and (start is None or str(start).strip() == ""):
        if not graph.nodes:
            raise TraceInputError("Graph has no nodes.")
        return {"start": graph.node_ids()[0]}
    return {"start": graph.parse_node_id(start)}


def select_params(info: AlgoInfo, given: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Pick the inputs `info` declares out of `given`.  A missing or blank
    required input is a TraceInputError; unknown keys are ignored.
    """
    given = given or {}
    picked: Dict[str, Any] = {}
    for name in info.params:
        raw = given.get(name)
        if raw is None or (isinstance(raw, str) and raw.strip() == ""):
            raise TraceInputError(f"Missing input '{name}' for {info.label}.")
        picked[name] = raw
    for name in info.optional:
        if given.get(name) is not None:
            picked[name] = given[name]
    return picked


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "GraphFrame",
    "GraphFrameBuilder",
    "Trace",
    "get_algorithm",
    "require_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "tracer_kwargs",
    "select_params",
]
