"""
Prim-Jarnik minimum spanning tree engine.

Grows a tree from one start node by repeatedly taking the cheapest edge
that leaves the tree. The result is a fresh graph with its own node
instances; nothing is borrowed from the source graph.
"""

from typing import Callable, List, Optional, Set
import heapq
import logging

from algorithms import SpanningTreeEngine
from edges import Edge
from errors import DisconnectedGraphError
from graph import Graph, describe_graph
from nodes import Node

logger = logging.getLogger(__name__)

TreeObserver = Callable[[Graph], None]


def log_spanning_tree(tree: Graph) -> None:
    """Observer that writes the tree's nodes and edge weights to the log at DEBUG."""
    for line in describe_graph(tree):
        logger.debug(line)


class PrimJarnikEngine(SpanningTreeEngine):
    """
    Heap-based Prim-Jarnik over outgoing edges.

    Args:
        observer: called with every finished tree (e.g. log_spanning_tree).
        tree_factory: builds the empty result graph; defaults to the source
            graph's own class.
    """

    def __init__(
        self,
        observer: Optional[TreeObserver] = None,
        tree_factory: Optional[Callable[[], Graph]] = None,
    ) -> None:
        self._observer = observer
        self._tree_factory = tree_factory

    def spanning_tree(self, graph: Graph, start: Node) -> Graph:
        """
        Frontier edges whose destination is already in the tree when popped
        are stale and get discarded, so parallel crossing edges never add a
        node twice. Running out of frontier before every node is in the tree
        means the graph is not connected from start.
        """
        tree = self._tree_factory() if self._tree_factory else type(graph)()
        tree.get_or_create_node(start.name)

        included: Set[Node] = {start}
        total = len(list(graph.nodes()))
        frontier: List[Edge] = [Edge(start, v, w) for v, w in graph.outgoing(start).items()]
        heapq.heapify(frontier)
        stale = 0

        while len(included) < total:
            if not frontier:
                raise DisconnectedGraphError(tree, total - len(included))

            edge = heapq.heappop(frontier)
            if edge.destination in included:
                stale += 1
                continue

            added = edge.destination
            included.add(added)
            tree.add_edge(edge.source.name, added.name, edge.cost)

            for v, w in graph.outgoing(added).items():
                if v not in included:
                    heapq.heappush(frontier, Edge(added, v, w))

        logger.debug(
            "prim-jarnik from %s spanned %d node(s), discarded %d stale edge(s)",
            start.name, total, stale,
        )
        if self._observer is not None:
            self._observer(tree)
        return tree
