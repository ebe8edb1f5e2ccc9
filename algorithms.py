"""
Algorithm interfaces for the graph library.

Keeps traversal and optimisation algorithms separate from the node registry.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, List, Optional

from nodes import Node
from graph import Graph

NodeVisitor = Callable[[Node], None]


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Outcome of a single-source shortest-path run.

    costs maps every reached node to its minimum cost from the start.
    predecessors maps every reached node except the start to its parent on a
    cheapest path. unreached holds the graph nodes the search never finalised.
    """
    start: Node
    costs: Dict[Node, int]
    predecessors: Dict[Node, Node] = field(default_factory=dict)
    unreached: FrozenSet[Node] = frozenset()

    @property
    def complete(self) -> bool:
        return not self.unreached

    def path_to(self, node: Node) -> Optional[List[Node]]:
        """Node sequence from the start to node, or None if node was not reached."""
        if node not in self.costs:
            return None
        hops = [node]
        while hops[-1] is not self.start:
            hops.append(self.predecessors[hops[-1]])
        hops.reverse()
        return hops


class TraversalEngine(ABC):
    """
    Interface for visiting every node reachable from a start node.
    """

    @abstractmethod
    def traverse(self, graph: Graph, start: Node, visitor: NodeVisitor) -> List[Node]:
        """
        Call visitor exactly once per reachable node.

        Returns:
            The nodes in the order they were visited.
        """
        raise NotImplementedError


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: Node) -> ShortestPathResult:
        """
        Compute shortest-path costs and predecessors from source.

        Never fails for unreachable nodes; they are reported in
        ShortestPathResult.unreached.
        """
        raise NotImplementedError


class SpanningTreeEngine(ABC):
    """
    Interface for minimum spanning tree construction.
    """

    @abstractmethod
    def spanning_tree(self, graph: Graph, start: Node) -> Graph:
        """
        Grow a minimum spanning tree from start.

        Returns:
            A new graph holding its own node instances and the tree edges.
        """
        raise NotImplementedError
