"""
Shortest-path candidates for the Dijkstra engine.
"""

from dataclasses import dataclass, field
from typing import Optional

from nodes import Node


@dataclass(frozen=True)
class Path:
    """
    (destination, cumulative cost) pair, ordered by cost.

    via is the node the candidate was discovered from (None for the start).
    """
    destination: str
    cost: int
    node: Optional[Node] = field(default=None, compare=False)
    via: Optional[Node] = field(default=None, compare=False)

    @classmethod
    def to(cls, node: Node, cost: int, via: Optional[Node] = None) -> "Path":
        return cls(node.name, cost, node, via)

    def __lt__(self, other: "Path") -> bool:
        return self.cost < other.cost

    def __str__(self) -> str:
        return f"{self.destination} with cost {self.cost}"
