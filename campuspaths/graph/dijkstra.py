"""Shortest-path computation using Dijkstra's algorithm.

Edge labels are read as non-negative additive costs. Negative labels are
not supported and give unspecified results.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Optional, Set, Tuple, TypeVar

from ..domain.errors import NodeNotFoundError
from .path import Path
from .store import Graph

N = TypeVar("N")


def dijkstra(graph: Graph[N, float], start: N, end: N) -> Optional[Path[N]]:
    """Compute a minimum-cost path from ``start`` to ``end``.

    Parameters
    ----------
    graph:
        Graph whose edge labels are the costs of the edges.
    start:
        The departure node.
    end:
        The arrival node.

    Returns
    -------
    Path or None
        A minimum-cost path from ``start`` to ``end``. When both are the
        same node this is the trivial path with no segments and cost 0.
        ``None`` means no route exists, which is never confused with a
        zero-cost path.

    Raises
    ------
    NodeNotFoundError
        If ``start`` or ``end`` is not in the graph.

    Notes
    -----
    Heap entries with equal cost are popped in insertion order. When
    several paths share the minimum cost, which one is returned depends
    on that order and on the iteration order of the edge sets.
    """
    for node in (start, end):
        if node not in graph:
            raise NodeNotFoundError(f"Node not in graph: {node!r}", node=node)

    if start == end:
        return Path(start)

    costs: Dict[N, float] = {node: float("inf") for node in graph}
    previous: Dict[N, N] = {}
    costs[start] = 0.0

    # (cost, insertion sequence, node): the sequence keeps nodes out of
    # comparisons, so nodes need not be orderable.
    sequence = itertools.count()
    heap: List[Tuple[float, int, N]] = [(0.0, next(sequence), start)]
    finalized: Set[N] = set()

    while heap:
        current_cost, _, node = heapq.heappop(heap)

        # Stale entry, a cheaper one for this node was already popped.
        if node in finalized:
            continue

        finalized.add(node)

        if node == end:
            break

        for edge in graph.children_of(node):
            child = edge.child
            if child in finalized:
                continue
            tentative = current_cost + edge.label
            if tentative < costs[child]:
                costs[child] = tentative
                previous[child] = node
                heapq.heappush(heap, (tentative, next(sequence), child))

    if end not in finalized:
        return None

    return _reconstruct(start, end, previous, costs)


def _reconstruct(
    start: N, end: N, previous: Dict[N, N], costs: Dict[N, float]
) -> Path[N]:
    """Follow predecessor links back from ``end`` and build the path."""
    steps: List[Tuple[N, float]] = []
    current = end
    while current != start:
        parent = previous[current]
        steps.append((current, costs[current] - costs[parent]))
        current = parent

    steps.reverse()
    path = Path(start)
    for node, cost in steps:
        path = path.extend(node, cost)
    return path
