"""
Weighted adjacency structure for directed and undirected graphs.

Nodes are any hashable values; costs are any ordered values (usually
numbers). Only the cheapest cost between two nodes is kept.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging
from typing import Generic, Hashable, Iterable, Iterator, TypeVar

from .errors import AlgocolError, ErrorKind

N = TypeVar("N", bound=Hashable)
C = TypeVar("C")

logger = logging.getLogger(__name__)


class EdgeKind(Enum):
    TO_RIGHT = "ToRight"
    TO_LEFT = "ToLeft"
    BIDIRECTIONAL = "Bidirectional"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Edge(Generic[N, C]):
    """
    Edge between two distinct nodes.

    ``TO_RIGHT`` runs left -> right, ``TO_LEFT`` runs right -> left and
    ``BIDIRECTIONAL`` runs both ways with the same cost.

    Raises:
        AlgocolError: SAME_NODE if ``left == right``.
    """
    left: N
    right: N
    cost: C
    edge_kind: EdgeKind = EdgeKind.TO_RIGHT

    def __post_init__(self) -> None:
        if self.left == self.right:
            raise AlgocolError(ErrorKind.SAME_NODE, "Left cannot be the same as right")


class AdjacencyMatrix(Generic[N, C]):
    """
    Sparse adjacency matrix: ``node -> {neighbour -> cost}``.

    Example:
        graph = AdjacencyMatrix.with_nodes(["a", "b", "c"])
        graph.push(Edge("a", "b", 4, EdgeKind.BIDIRECTIONAL))
        graph.push(Edge("a", "b", 2))
        assert graph.get_edge("a", "b") == 2
        assert graph.get_edge("b", "a") == 4
    """

    def __init__(self) -> None:
        self._matrix: dict[N, dict[N, C]] = {}

    @classmethod
    def with_nodes(cls, nodes: Iterable[N]) -> AdjacencyMatrix[N, C]:
        matrix = cls()
        for node in nodes:
            matrix.register_node(node)
        return matrix

    def registered(self, node: N) -> bool:
        return node in self._matrix

    def register_node(self, node: N) -> dict[N, C]:
        """Register ``node`` if needed and return its neighbour map."""
        if node not in self._matrix:
            self._matrix[node] = {}
        return self._matrix[node]

    def add_node(self, node: N) -> dict[N, C]:
        """
        Register a new node.

        Raises:
            AlgocolError: ALREADY_EXISTS if ``node`` is already registered.
        """
        if node in self._matrix:
            raise AlgocolError(ErrorKind.ALREADY_EXISTS, f"Node {node!r} already exists")
        return self.register_node(node)

    def get_adjacent(self, node: N) -> dict[N, C] | None:
        return self._matrix.get(node)

    def get_edge(self, from_node: N, to_node: N) -> C | None:
        adjacent = self._matrix.get(from_node)
        if adjacent is None:
            return None
        return adjacent.get(to_node)

    def _push_raw(self, from_node: N, to_node: N, cost: C) -> None:
        if from_node == to_node:
            raise AlgocolError(ErrorKind.SAME_NODE, "From cannot be the same as to")
        adjacent = self.register_node(from_node)
        self.register_node(to_node)
        current = adjacent.get(to_node)
        if current is None or cost < current:
            adjacent[to_node] = cost

    def push(self, edge: Edge[N, C]) -> None:
        """Add ``edge``, keeping the existing cost if it is cheaper."""
        if edge.edge_kind is EdgeKind.TO_RIGHT:
            self._push_raw(edge.left, edge.right, edge.cost)
        elif edge.edge_kind is EdgeKind.TO_LEFT:
            self._push_raw(edge.right, edge.left, edge.cost)
        else:
            self._push_raw(edge.left, edge.right, edge.cost)
            self._push_raw(edge.right, edge.left, edge.cost)

    def remove_edge(self, from_node: N, to_node: N) -> C:
        """
        Remove the directed edge ``from_node -> to_node`` and return its cost.

        Raises:
            AlgocolError: NOT_FOUND if there is no such edge.
        """
        adjacent = self._matrix.get(from_node)
        if adjacent is None or to_node not in adjacent:
            logger.debug("remove_edge: no edge %r -> %r", from_node, to_node)
            raise AlgocolError(
                ErrorKind.NOT_FOUND, f"No edge from {from_node!r} to {to_node!r}"
            )
        return adjacent.pop(to_node)

    def nodes(self) -> Iterator[N]:
        return iter(self._matrix)

    def __contains__(self, node: object) -> bool:
        return node in self._matrix

    def __len__(self) -> int:
        """Count registered nodes."""
        return len(self._matrix)
