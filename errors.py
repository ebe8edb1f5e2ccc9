"""
Exception hierarchy for the graph library.

Every error raised on purpose derives from GraphError so callers can catch
library failures in one place.
"""

from typing import AbstractSet, Mapping


class GraphError(Exception):
    """Base class for all graph errors."""


class MissingEdgeError(GraphError, KeyError):
    """Weight lookup between two nodes that are not connected."""

    def __init__(self, source: str, destination: str) -> None:
        super().__init__(f"No edge from '{source}' to '{destination}'")
        self.source = source
        self.destination = destination

    def __str__(self) -> str:
        return self.args[0]


class NodeNotFoundError(GraphError, KeyError):
    """Lookup of a node name the graph does not contain."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Graph has no node named '{name}'")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class NegativeWeightError(GraphError, ValueError):
    """Edge cost below zero; Dijkstra and Prim-Jarnik assume non-negative weights."""


class EmptyGraphError(GraphError, ValueError):
    """Algorithm needs at least one node to start from."""


class UnreachableNodesError(GraphError):
    """
    Dijkstra finished with nodes that cannot be reached from the start.

    Carries the partial cost map and the set of nodes never reached.
    """

    def __init__(self, start: str, costs: Mapping, unreached: AbstractSet) -> None:
        names = ", ".join(sorted(n.name for n in unreached))
        super().__init__(f"Nodes unreachable from '{start}': {names}")
        self.start = start
        self.costs = dict(costs)
        self.unreached = frozenset(unreached)


class DisconnectedGraphError(GraphError):
    """
    Prim-Jarnik ran out of frontier edges before spanning every node.

    `forest` is the partial tree grown from the start node.
    """

    def __init__(self, forest, missing: int) -> None:
        super().__init__(
            f"Graph is not connected from the start node: "
            f"{missing} node(s) left outside the spanning tree"
        )
        self.forest = forest
        self.missing = missing
