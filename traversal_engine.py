"""
Breadth-first and depth-first traversal engines.

Both use a visited set keyed by node identity and check it after taking a
node off the frontier, so a node may be queued several times but is visited
only once.
"""

from collections import deque
from typing import List, Set

from algorithms import NodeVisitor, TraversalEngine
from graph import Graph
from nodes import Node


class BreadthFirstTraversal(TraversalEngine):
    """
    Layer-order traversal with a FIFO queue.
    """

    def traverse(self, graph: Graph, start: Node, visitor: NodeVisitor) -> List[Node]:
        visited: Set[Node] = set()
        order: List[Node] = []
        to_visit = deque([start])

        while to_visit:
            node = to_visit.popleft()
            if node in visited:
                continue
            visitor(node)
            visited.add(node)
            order.append(node)
            to_visit.extend(graph.outgoing(node))

        return order


class DepthFirstTraversal(TraversalEngine):
    """
    Traversal with a LIFO stack.

    Neighbors are pushed in iteration order, so siblings come off the stack
    in reverse order.
    """

    def traverse(self, graph: Graph, start: Node, visitor: NodeVisitor) -> List[Node]:
        visited: Set[Node] = set()
        order: List[Node] = []
        to_visit: List[Node] = [start]

        while to_visit:
            node = to_visit.pop()
            if node in visited:
                continue
            visitor(node)
            visited.add(node)
            order.append(node)
            to_visit.extend(graph.outgoing(node))

        return order
