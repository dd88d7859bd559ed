"""Generic mutable directed labeled multigraph.

This module defines the Graph type used throughout the project. Nodes
are arbitrary hashable values and every edge carries a label: a numeric
cost for the shortest-path search, a domain object such as a
``Dependency`` for the task sorter.

Edges are only reachable through their parent node. Between two nodes
there may be any number of edges as long as their labels differ; adding
the same ``(child, label)`` pair twice is a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Generic, Hashable, Iterator, Set, Tuple, TypeVar

from ..domain.errors import NodeNotFoundError

N = TypeVar("N", bound=Hashable)
L = TypeVar("L", bound=Hashable)


@dataclass(frozen=True, slots=True)
class Edge(Generic[N, L]):
    """An outgoing edge of some parent node.

    Attributes:
        child: The node the edge points to
        label: The data carried by the edge
    """

    child: N
    label: L


class Graph(Generic[N, L]):
    """A directed labeled multigraph.

    The graph owns a mapping from each node to the set of its outgoing
    edges. Every child of an edge is itself a node of the graph, and no
    node is ever removed.

    Example:
        graph: Graph[str, float] = Graph()
        graph.add_node("A")
        graph.add_node("B")
        graph.add_edge("A", "B", 2.5)
        graph.children_of("A")  # frozenset({Edge(child='B', label=2.5)})
    """

    def __init__(self) -> None:
        self._adjacency: Dict[N, Set[Edge[N, L]]] = {}

    def add_node(self, node: N) -> None:
        """Add ``node`` to the graph. No effect if it is already present."""
        if node not in self._adjacency:
            self._adjacency[node] = set()

    def add_edge(self, parent: N, child: N, label: L) -> None:
        """Add an edge from ``parent`` to ``child`` carrying ``label``.

        No effect if the graph already holds the same edge.

        Raises:
            NodeNotFoundError: If ``parent`` or ``child`` is not in the graph.
        """
        self._require(parent)
        self._require(child)
        self._adjacency[parent].add(Edge(child, label))

    def contains_node(self, node: N) -> bool:
        """Check if ``node`` is in the graph."""
        return node in self._adjacency

    def contains_edge(self, parent: N, child: N, label: L) -> bool:
        """Check if the graph holds an edge from ``parent`` to ``child``.

        Raises:
            NodeNotFoundError: If ``parent`` or ``child`` is not in the graph.
        """
        self._require(parent)
        self._require(child)
        return Edge(child, label) in self._adjacency[parent]

    def children_of(self, parent: N) -> FrozenSet[Edge[N, L]]:
        """Return the outgoing edges of ``parent``.

        Raises:
            NodeNotFoundError: If ``parent`` is not in the graph.
        """
        self._require(parent)
        return frozenset(self._adjacency[parent])

    def nodes(self) -> FrozenSet[N]:
        """Return every node currently in the graph."""
        return frozenset(self._adjacency)

    def edges(self) -> Iterator[Tuple[N, Edge[N, L]]]:
        """Yield every edge of the graph as a ``(parent, edge)`` pair."""
        for parent, outgoing in self._adjacency.items():
            for edge in outgoing:
                yield parent, edge

    def size(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._adjacency)

    def is_empty(self) -> bool:
        """Check if the graph has no nodes."""
        return not self._adjacency

    def _require(self, node: N) -> None:
        if node not in self._adjacency:
            raise NodeNotFoundError(f"Node not in graph: {node!r}", node=node)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __iter__(self) -> Iterator[N]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        edge_count = sum(len(outgoing) for outgoing in self._adjacency.values())
        return f"Graph(nodes={len(self._adjacency)}, edges={edge_count})"
