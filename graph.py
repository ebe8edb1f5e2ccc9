"""
Directed, weighted graph abstraction.

Nodes are Node instances owned by exactly one graph and keyed by name.
Edges are directed: u -> v with a non-negative integer weight.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Mapping

from edges import Edge
from nodes import Node


class Graph(ABC):
    """Directed, weighted graph over Node objects."""

    @abstractmethod
    def get_or_create_node(self, name: str) -> Node:
        """
        Return the node called name, registering a new one if needed.

        Repeated calls with the same name return the same instance.
        """
        raise NotImplementedError

    @abstractmethod
    def contains_node(self, name: str) -> bool:
        """Return True if a node called name is registered."""
        raise NotImplementedError

    @abstractmethod
    def add_edge(self, src: str, dst: str, cost: int) -> Edge:
        """
        Add or update a directed edge src -> dst with cost.
        Auto-adds nodes if they don't exist.
        """
        raise NotImplementedError

    @abstractmethod
    def nodes(self) -> Iterable[Node]:
        """Return all nodes in the graph."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: Node) -> Mapping[Node, int]:
        """
        Outgoing neighbors and edge weights for a given node.

        Only neighbors registered in this graph are included.

        Returns: dict[Node, int]
        """
        raise NotImplementedError


def describe_graph(graph: Graph) -> List[str]:
    """
    Text rendering of a graph: each node name, then one indented
    "<weight> <neighbor>" line per outgoing edge.
    """
    lines: List[str] = []
    for node in graph.nodes():
        lines.append(node.name)
        for neighbor, weight in graph.outgoing(node).items():
            lines.append(f" {weight} {neighbor.name}")
    return lines
