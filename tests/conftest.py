"""
Pytest configuration and shared fixtures.
"""

import pytest

from adjacency_list_graph import DirectedGraph


@pytest.fixture
def example_graph() -> DirectedGraph:
    """A -> B (1), A -> C (4), B -> C (2), B -> D (5), C -> D (1)."""
    g = DirectedGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("A", "C", 4)
    g.add_edge("B", "C", 2)
    g.add_edge("B", "D", 5)
    g.add_edge("C", "D", 1)
    return g
