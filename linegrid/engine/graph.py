"""
Grid nodes, drawn edges and the graph of edges drawn so far.
Nodes and edges are values; the graph is the only mutable piece here.
"""

from dataclasses import dataclass
from typing import Callable, Iterator

from linegrid.engine.definitions import Direction
from linegrid.engine.errors import InvalidEdgeError


@dataclass(frozen=True, order=True)
class Node:
    """A grid intersection."""
    row: int
    col: int

    def neighbour(self, direction: Direction) -> "Node":
        return Node(self.row + direction.row_delta, self.col + direction.col_delta)

    def __repr__(self) -> str:
        return f"Node({self.row}, {self.col})"


@dataclass(frozen=True, init=False)
class Edge:
    """
    A line drawn between two distinct nodes.
    Equality and hashing use the unordered node set, so Edge(a, b) == Edge(b, a).
    """
    nodes: frozenset[Node]

    def __init__(self, first: Node, second: Node):
        if first == second:
            raise InvalidEdgeError(f"Cannot draw an edge from {first} to itself")
        object.__setattr__(self, "nodes", frozenset((first, second)))

    @property
    def endpoints(self) -> tuple[Node, Node]:
        """Both nodes in (row, col) order."""
        first, second = sorted(self.nodes)
        return first, second

    def overlaps(self, other: "Edge") -> bool:
        """True when the two edges share at least one node."""
        return not self.nodes.isdisjoint(other.nodes)

    def other_node(self, node: Node) -> Node:
        if node not in self.nodes:
            raise ValueError(f"{node} is not an endpoint of {self!r}")
        first, second = self.endpoints
        return second if node == first else first

    def direction_from(self, node: Node) -> Direction | None:
        """Direction from `node` to the other endpoint, or None if they are not orthogonal neighbours."""
        target = self.other_node(node)
        for direction in Direction:
            if node.neighbour(direction) == target:
                return direction
        return None

    @property
    def is_unit_length(self) -> bool:
        return self.direction_from(self.endpoints[0]) is not None

    def __repr__(self) -> str:
        first, second = self.endpoints
        return f"Edge({first!r}, {second!r})"


class GameGraph:
    """
    Edges in the order they were drawn.
    Does not deduplicate: the owner checks `edge in graph` before adding.
    """

    def __init__(self, edges: list[Edge] | None = None):
        self._edges: list[Edge] = list(edges or [])

    def add(self, edge: Edge) -> None:
        self._edges.append(edge)

    def find_all(self, predicate: Callable[[Edge], bool]) -> list[Edge]:
        return [edge for edge in self._edges if predicate(edge)]

    def clear(self) -> None:
        self._edges.clear()

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    def __contains__(self, edge: object) -> bool:
        return edge in self._edges

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"GameGraph({self._edges!r})"
