"""Graph engine and the algorithms that run on it.

This subpackage contains the generic directed labeled graph, the
Dijkstra shortest-path search and the topological sort.
"""

from .dijkstra import dijkstra
from .path import Path, Segment, format_path
from .store import Edge, Graph
from .topological import CycleDetected, NodeState, Ordered, Ordering, topological_sort

__all__ = [
    "Graph",
    "Edge",
    "Path",
    "Segment",
    "format_path",
    "dijkstra",
    "topological_sort",
    "Ordered",
    "CycleDetected",
    "Ordering",
    "NodeState",
]
