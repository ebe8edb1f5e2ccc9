"""
Concrete directed, weighted graph implementation.

Implements the Graph interface with a name -> Node registry; each Node keeps
its own adjacency list. The four algorithm entry points delegate to the
engines in traversal_engine, dijkstra_engine and spanning_tree_engine.

Not thread-safe: callers must serialise access.
"""

from typing import Dict, Iterator, List, Mapping, Optional

from algorithms import (
    DijkstraEngine,
    NodeVisitor,
    ShortestPathResult,
    SpanningTreeEngine,
)
from dijkstra_engine import SimpleDijkstraEngine
from edges import Edge
from errors import (
    EmptyGraphError,
    NegativeWeightError,
    NodeNotFoundError,
    UnreachableNodesError,
)
from graph import Graph, describe_graph
from nodes import Node
from spanning_tree_engine import PrimJarnikEngine
from traversal_engine import BreadthFirstTraversal, DepthFirstTraversal


class DirectedGraph(Graph):
    """
    Directed, weighted graph that owns every Node it registers.

    Engines are injected so callers can swap algorithms (or attach a tree
    observer) without subclassing.
    """

    def __init__(
        self,
        dijkstra_engine: Optional[DijkstraEngine] = None,
        spanning_tree_engine: Optional[SpanningTreeEngine] = None,
    ) -> None:
        self._nodes: Dict[str, Node] = {}
        self._dijkstra_engine = dijkstra_engine or SimpleDijkstraEngine()
        self._spanning_tree_engine = spanning_tree_engine or PrimJarnikEngine()

    # --- Registry ------------------------------------------------------------

    def get_or_create_node(self, name: str) -> Node:
        node = self._nodes.get(name)
        if node is None:
            node = Node(name)
            self._nodes[name] = node
        return node

    def contains_node(self, name: str) -> bool:
        return name in self._nodes

    def get_node(self, name: str) -> Node:
        try:
            return self._nodes[name]
        except KeyError:
            raise NodeNotFoundError(name) from None

    def get_all_nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def nodes(self) -> List[Node]:
        return self.get_all_nodes()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes.values()))

    def _owns(self, node: Node) -> bool:
        return self._nodes.get(node.name) is node

    # --- Edges ---------------------------------------------------------------

    def add_edge(self, src: str, dst: str, cost: int) -> Edge:
        """
        Add or update a directed edge src -> dst with cost.
        Auto-adds nodes if they don't exist.
        """
        if cost < 0:
            raise NegativeWeightError(
                f"Edge {src} -> {dst} has negative cost {cost}"
            )
        source = self.get_or_create_node(src)
        destination = self.get_or_create_node(dst)
        source.add_directed_edge_to_node(destination, cost)
        return Edge(source, destination, cost)

    def add_undirected_edge(self, a: str, b: str, cost: int) -> None:
        """Add a -> b and b -> a with the same cost."""
        self.add_edge(a, b, cost)
        self.add_edge(b, a, cost)

    def outgoing(self, node: Node) -> Mapping[Node, int]:
        return {n: w for n, w in node.outgoing().items() if self._owns(n)}

    def edges(self) -> List[Edge]:
        """Every edge between member nodes, in node then neighbor insertion order."""
        return [
            Edge(node, neighbor, weight)
            for node in self._nodes.values()
            for neighbor, weight in self.outgoing(node).items()
        ]

    def edge_count(self) -> int:
        return len(self.edges())

    def total_weight(self) -> int:
        return sum(edge.cost for edge in self.edges())

    def describe(self) -> List[str]:
        return describe_graph(self)

    # --- Algorithms ----------------------------------------------------------

    def breadth_first_search(self, start_node_name: str, visitor: NodeVisitor) -> List[Node]:
        """
        Visit every node reachable from start_node_name in layer order.

        The start node is created if the name is new. Returns the visit order.
        """
        start = self.get_or_create_node(start_node_name)
        return BreadthFirstTraversal().traverse(self, start, visitor)

    def depth_first_search(self, start_node_name: str, visitor: NodeVisitor) -> List[Node]:
        """
        Visit every node reachable from start_node_name depth first.

        The start node is created if the name is new. Returns the visit order.
        """
        start = self.get_or_create_node(start_node_name)
        return DepthFirstTraversal().traverse(self, start, visitor)

    def shortest_paths(self, start_name: str) -> ShortestPathResult:
        """Costs, predecessors and the unreached set from start_name."""
        start = self.get_or_create_node(start_name)
        return self._dijkstra_engine.shortest_paths(self, start)

    def dijkstra(self, start_name: str) -> Dict[Node, int]:
        """
        Minimum cost from start_name to every node in the graph.

        Raises UnreachableNodesError, carrying the partial costs, if some
        nodes cannot be reached from the start.
        """
        result = self.shortest_paths(start_name)
        if not result.complete:
            raise UnreachableNodesError(start_name, result.costs, result.unreached)
        return result.costs

    def prim_jarnik(self, start_name: Optional[str] = None) -> "DirectedGraph":
        """
        Minimum spanning tree grown from start_name, or from the first
        registered node when no name is given.
        """
        if not self._nodes:
            raise EmptyGraphError("Cannot build a spanning tree of an empty graph")
        if start_name is None:
            start = next(iter(self._nodes.values()))
        else:
            start = self.get_node(start_name)
        return self._spanning_tree_engine.spanning_tree(self, start)
