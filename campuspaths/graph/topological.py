"""Topological ordering with cycle detection.

An edge ``a -> b`` means ``a`` must come before ``b``. Among all valid
orders, the one returned matches a depth-first traversal that visits
nodes and children in reverse order of their name, so that when several
nodes could be placed next, the alphabetically earliest one comes first.

A cycle is an expected input, not a programming error: it is reported
through the ``CycleDetected`` result rather than an exception.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from .store import Graph

N = TypeVar("N")


class NodeState(enum.Enum):
    """Traversal state of a node during one sort."""

    UNVISITED = enum.auto()
    IN_PROGRESS = enum.auto()
    FINISHED = enum.auto()


@dataclass(frozen=True, slots=True)
class Ordered(Generic[N]):
    """Every node of the graph in an order honoring all edges."""

    nodes: tuple[N, ...]

    def __iter__(self) -> Iterator[N]:
        return iter(self.nodes)


@dataclass(frozen=True, slots=True)
class CycleDetected(Generic[N]):
    """The edges form a cycle, so no topological order exists.

    Attributes:
        cycle: Nodes along the cycle that was found, starting and ending
            with the same node
    """

    cycle: tuple[N, ...]


Ordering = Union[Ordered[N], CycleDetected[N]]


def topological_sort(
    graph: Graph[N, Any], key: Callable[[N], Any] = str
) -> Ordering[N]:
    """Sort the nodes of ``graph`` so that every edge points forward.

    Args:
        graph: Graph whose edges mean "parent before child". Labels are
            ignored.
        key: Returns the name used to break ties between nodes. Defaults
            to ``str``, so integers compare as text ("10" < "2").

    Returns:
        ``Ordered`` with every node, or ``CycleDetected`` if the edges
        contain a cycle.

    Example:
        >>> graph = Graph()
        >>> for task in ("a", "b", "c"):
        ...     graph.add_node(task)
        >>> graph.add_edge("c", "a", None)
        >>> topological_sort(graph)
        Ordered(nodes=('b', 'c', 'a'))
    """
    state: Dict[N, NodeState] = {node: NodeState.UNVISITED for node in graph}
    finished: List[N] = []

    for root in sorted(graph, key=key, reverse=True):
        if state[root] is not NodeState.UNVISITED:
            continue
        cycle = _visit(graph, root, key, state, finished)
        if cycle is not None:
            return CycleDetected(cycle)

    finished.reverse()
    return Ordered(tuple(finished))


def _children(graph: Graph[N, Any], node: N, key: Callable[[N], Any]) -> Iterator[N]:
    """Yield the distinct children of ``node`` in reverse order of name."""
    children = {edge.child for edge in graph.children_of(node)}
    return iter(sorted(children, key=key, reverse=True))


def _visit(
    graph: Graph[N, Any],
    root: N,
    key: Callable[[N], Any],
    state: Dict[N, NodeState],
    finished: List[N],
) -> Optional[Tuple[N, ...]]:
    """Depth-first traversal from ``root`` using an explicit stack.

    Nodes are collected in post-order and appended to ``finished`` once
    the whole traversal succeeds.

    Returns:
        The cycle found, or None.
    """
    local: List[N] = []
    # The stack holds the active path, each node with its pending children.
    stack: List[Tuple[N, Iterator[N]]] = [(root, _children(graph, root, key))]
    state[root] = NodeState.IN_PROGRESS

    while stack:
        node, pending = stack[-1]
        for child in pending:
            child_state = state[child]
            if child_state is NodeState.IN_PROGRESS:
                active = [entry for entry, _ in stack]
                return tuple(active[active.index(child):]) + (child,)
            if child_state is NodeState.UNVISITED:
                state[child] = NodeState.IN_PROGRESS
                stack.append((child, _children(graph, child, key)))
                break
        else:
            stack.pop()
            state[node] = NodeState.FINISHED
            local.append(node)

    finished.extend(local)
    return None
