"""
Node abstraction for the graph library.

A node is a named vertex that owns its weighted outgoing edges.
"""

from typing import Dict, List

from errors import MissingEdgeError


class Node:
    """
    Named vertex holding weighted directed edges to other nodes.

    Identity is object identity: two graphs may each own a node called "A"
    and they stay distinct.
    """

    __slots__ = ("_name", "_weights")

    def __init__(self, name: str) -> None:
        self._name = name
        self._weights: Dict["Node", int] = {}

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def add_directed_edge_to_node(self, target: "Node", cost: int) -> None:
        """
        Record (or overwrite) the weight of the edge self -> target.

        No check is made that target belongs to the same graph.
        """
        self._weights[target] = cost

    def get_weight(self, target: "Node") -> int:
        try:
            return self._weights[target]
        except KeyError:
            raise MissingEdgeError(self._name, target.name) from None

    def has_edge_to(self, target: "Node") -> bool:
        return target in self._weights

    def get_neighbors(self) -> List["Node"]:
        return list(self._weights)

    def outgoing(self) -> Dict["Node", int]:
        return dict(self._weights)  # defensive copy

    def __repr__(self) -> str:
        return f"Node({self._name!r})"
