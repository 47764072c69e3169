"""
examples.py — Built-in Example Graphs
======================================
Small hand-laid graphs grouped by the algorithm family they show off.

    g = load_example("mst")          # first MST template
    g = load_example("dag", 1)       # second DAG template
"""

from typing import Dict, List, Tuple

from errors import TraceInputError
from graph.graph import Graph


# (positions, edges (from, to, weight), directed, weighted)
Template = Tuple[List[Tuple[int, int]], List[Tuple[int, int, int]], bool, bool]

EXAMPLES: Dict[str, List[Template]] = {
    "mst": [
        ([(300, 100), (150, 200), (450, 200), (200, 320), (400, 320)],
         [(0, 1, 2), (0, 2, 3), (1, 2, 5), (1, 3, 4), (2, 3, 1), (2, 4, 7), (3, 4, 8)],
         False, True),
        # cycle-heavy
        ([(100, 200), (200, 100), (400, 100), (500, 200), (400, 300), (200, 300)],
         [(0, 1, 4), (1, 2, 3), (2, 3, 2), (3, 4, 4), (4, 5, 3), (5, 0, 2), (1, 5, 5), (2, 4, 1), (1, 4, 8)],
         False, True),
        # forest
        ([(100, 100), (100, 300), (250, 200), (400, 100), (400, 300), (550, 200)],
         [(0, 1, 6), (0, 2, 2), (1, 2, 3), (3, 4, 5), (3, 5, 4), (4, 5, 6)],
         False, True),
    ],
    "traversal": [
        ([(300, 80), (200, 160), (400, 160), (140, 240), (260, 240), (340, 240), (460, 240)],
         [(0, 1, 1), (0, 2, 1), (1, 3, 1), (1, 4, 1), (2, 5, 1), (2, 6, 1)],
         False, False),
        ([(100, 200), (200, 200), (300, 200), (400, 200), (500, 200)],
         [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 4, 1)],
         True, False),
    ],
    "basics": [
        ([(200, 120), (400, 120), (200, 280), (400, 280)],
         [(0, 1, 1), (1, 3, 1), (3, 2, 1), (2, 0, 1), (0, 3, 1)],
         False, False),
        ([(200, 150), (400, 150), (300, 250), (100, 250)],
         [(0, 1, 1), (1, 2, 1), (2, 0, 1), (0, 3, 1), (3, 2, 1)],
         True, False),
    ],
    "shortest_path": [
        ([(100, 200), (250, 100), (250, 300), (400, 100), (400, 300), (550, 200)],
         [(0, 1, 4), (0, 2, 2), (1, 2, 1), (1, 3, 5), (2, 3, 8), (2, 4, 10), (3, 4, 2), (3, 5, 6), (4, 5, 3)],
         False, True),
        ([(100, 200), (250, 100), (250, 300), (400, 200), (550, 200)],
         [(0, 1, 3), (0, 2, 6), (1, 3, 2), (2, 3, 1), (3, 4, 4), (1, 4, 8)],
         True, True),
    ],
    "dag": [
        ([(100, 100), (300, 100), (500, 100), (200, 280), (400, 280)],
         [(0, 1, 1), (1, 2, 1), (0, 3, 1), (3, 4, 1), (1, 4, 1), (4, 2, 1)],
         True, False),
        ([(100, 100), (300, 100), (500, 100), (100, 300), (250, 300), (100, 200), (400, 200)],
         [(0, 1, 1), (1, 2, 1), (0, 6, 1), (5, 6, 1), (5, 4, 1), (3, 4, 1), (6, 2, 1)],
         True, False),
    ],
    "connectivity": [
        ([(150, 150), (300, 150), (150, 300), (450, 150), (450, 300)],
         [(0, 1, 1), (1, 2, 1), (2, 0, 1), (1, 3, 1), (3, 4, 1)],
         False, False),
        ([(100, 150), (200, 100), (200, 200), (400, 100), (500, 150), (400, 200)],
         [(0, 1, 1), (1, 2, 1), (2, 0, 1), (3, 4, 1), (4, 5, 1), (5, 3, 1)],
         False, False),
    ],
    # source A (0), sink F (5); max flow 23
    "flow": [
        ([(80, 250), (250, 120), (250, 380), (450, 120), (450, 380), (620, 250)],
         [(0, 1, 16), (0, 2, 13), (1, 2, 10), (1, 3, 12), (3, 2, 9),
          (2, 4, 14), (4, 3, 7), (3, 5, 20), (4, 5, 4)],
         True, True),
    ],
}


def load_example(category: str, index: int = 0) -> Graph:
    templates = EXAMPLES.get(category)
    if not templates:
        raise TraceInputError(f"Unknown example category: {category!r}")
    if not 0 <= index < len(templates):
        raise TraceInputError(f"Example {index} out of range for {category!r}")

    positions, edges, directed, weighted = templates[index]
    g = Graph(directed=directed, weighted=weighted)
    for x, y in positions:
        g.add_node(x, y)
    for a, b, w in edges:
        g.add_edge(a, b, w, manual=weighted)
    return g


def example_categories() -> List[str]:
    return list(EXAMPLES.keys())
