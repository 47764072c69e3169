"""
graph/
-----
Graph data layer.  Public API:

    from graph import Graph, GraphNode, GraphEdge
    from graph import node_label, load_example
"""

from graph.node     import GraphNode, node_label, label_to_id
from graph.edge     import GraphEdge
from graph.graph    import Graph
from graph.examples import load_example, example_categories, EXAMPLES

__all__ = [
    "GraphNode", "node_label", "label_to_id",
    "GraphEdge",
    "Graph",
    "load_example", "example_categories", "EXAMPLES",
]
