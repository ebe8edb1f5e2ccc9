"""
Edge records used as priority-queue entries.

Building an Edge never touches the graph; edges are registered through
DirectedGraph.add_edge.
"""

from dataclasses import dataclass

from nodes import Node


@dataclass(frozen=True)
class Edge:
    """
    Directed, weighted connection source -> destination.

    Ordered by cost only so a heap of edges pops the cheapest first.
    """
    source: Node
    destination: Node
    cost: int

    @classmethod
    def between(cls, source: Node, destination: Node) -> "Edge":
        """Edge record for a connection already recorded on source."""
        return cls(source, destination, source.get_weight(destination))

    def __lt__(self, other: "Edge") -> bool:
        return self.cost < other.cost

    def __str__(self) -> str:
        return f"{self.source.name} to {self.destination.name} with cost {self.cost}"
