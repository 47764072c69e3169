import sys
from pathlib import Path

# Ensure the flat top-level packages import from a source checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from graph import Graph
from tree import BinaryTree
from queues import BoundedQueue


@pytest.fixture
def triangle() -> Graph:
    """Undirected weighted A-B:1, B-C:1, A-C:5."""
    g = Graph(directed=False, weighted=True)
    for x, y in [(100, 100), (200, 100), (150, 200)]:
        g.add_node(x, y)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(0, 2, 5)
    return g


@pytest.fixture
def initial_graph() -> Graph:
    return Graph.initial()


@pytest.fixture
def bst() -> BinaryTree:
    """50 / 30 70 / 20 40 60 80, ids 0..6 in insertion order."""
    return BinaryTree.initial()


@pytest.fixture
def queue() -> BoundedQueue:
    return BoundedQueue.default()


@pytest.fixture
def client():
    from main import app
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c
