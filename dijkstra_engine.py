"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq over Path candidates to compute single-source shortest
paths over any Graph implementation that satisfies the Graph interface.
"""

from typing import Dict, List
import heapq
import logging

from algorithms import DijkstraEngine, ShortestPathResult
from graph import Graph
from nodes import Node
from paths import Path

logger = logging.getLogger(__name__)


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap of Path candidates.

    Complexity:
        O(E log E) over the edges reachable from the source.
    """

    def shortest_paths(self, graph: Graph, source: Node) -> ShortestPathResult:
        """
        Dijkstra that finalises one node per useful pop.

        A popped candidate whose node already has a final cost is stale and
        gets dropped. The run stops once every graph node is final or the heap
        runs dry, whichever comes first; nodes still without a cost are the
        unreached set. Predecessors are recorded when a node is finalised, so
        walking them back from any reached node ends at the source.
        """
        all_nodes = list(graph.nodes())
        dist: Dict[Node, int] = {}
        prev: Dict[Node, Node] = {}
        pq: List[Path] = [Path.to(source, 0)]

        while pq and len(dist) < len(all_nodes):
            path = heapq.heappop(pq)
            u = path.node

            # Skip outdated entries
            if u in dist:
                continue

            dist[u] = path.cost
            if path.via is not None:
                prev[u] = path.via

            for v, w in graph.outgoing(u).items():
                if v not in dist:
                    heapq.heappush(pq, Path.to(v, path.cost + w, via=u))

        unreached = frozenset(n for n in all_nodes if n not in dist)
        if unreached:
            logger.debug(
                "dijkstra from %s left %d of %d node(s) unreached",
                source.name, len(unreached), len(all_nodes),
            )
        return ShortestPathResult(source, dist, prev, unreached)
