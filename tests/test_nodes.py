"""
Unit tests for Node, Edge and Path.
"""

import pytest

from edges import Edge
from errors import GraphError, MissingEdgeError
from nodes import Node
from paths import Path


def test_directed_edge_records_weight_and_neighbor():
    a = Node("A")
    b = Node("B")

    a.add_directed_edge_to_node(b, 3)

    assert a.get_weight(b) == 3
    assert b in a.get_neighbors()
    # directed: nothing recorded the other way
    assert a not in b.get_neighbors()


def test_adding_same_target_overwrites_cost():
    a = Node("A")
    b = Node("B")

    a.add_directed_edge_to_node(b, 3)
    a.add_directed_edge_to_node(b, 8)

    assert a.get_weight(b) == 8
    assert a.get_neighbors() == [b]


def test_missing_edge_lookup_raises():
    a = Node("A")
    b = Node("B")

    with pytest.raises(MissingEdgeError) as excinfo:
        a.get_weight(b)

    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, GraphError)
    assert str(excinfo.value) == "No edge from 'A' to 'B'"


def test_outgoing_returns_copy():
    a = Node("A")
    b = Node("B")
    a.add_directed_edge_to_node(b, 1)

    out = a.outgoing()
    out.clear()

    assert a.outgoing() == {b: 1}


def test_nodes_with_same_name_are_distinct():
    assert Node("A") != Node("A")
    assert len({Node("A"), Node("A")}) == 2


def test_edge_construction_has_no_side_effect():
    a = Node("A")
    b = Node("B")

    edge = Edge(a, b, 5)

    assert not a.has_edge_to(b)
    assert str(edge) == "A to B with cost 5"


def test_edges_order_by_cost():
    a, b, c = Node("A"), Node("B"), Node("C")
    cheap = Edge(a, c, 1)
    dear = Edge(a, b, 3)

    assert cheap < dear
    assert sorted([dear, cheap]) == [cheap, dear]


def test_edge_between_uses_recorded_weight():
    a = Node("A")
    b = Node("B")
    a.add_directed_edge_to_node(b, 4)

    assert Edge.between(a, b).cost == 4
    with pytest.raises(MissingEdgeError):
        Edge.between(b, a)


def test_path_constructors_and_ordering():
    x = Node("X")

    by_name = Path("A", 3)
    by_node = Path.to(x, 2)

    assert by_name.node is None
    assert by_node.destination == "X"
    assert by_node.node is x
    assert by_node < by_name
    assert str(by_name) == "A with cost 3"
