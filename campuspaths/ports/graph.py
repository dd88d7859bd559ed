"""Graph ports - Abstractions for campus data loading and routing.

These protocols define the contracts for graph operations, including
loading the campus network and computing shortest paths.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import Building, Point
    from ..graph.path import Path
    from ..graph.store import Graph


class CampusRepositoryPort(Protocol):
    """Port for loading campus data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the campus
    walkway graph and the building list from persistent storage.
    """

    def load(self) -> Graph[Point, float]:
        """Load the campus graph.

        Returns:
            The graph of map points, with walkway lengths as labels.
        """
        ...

    def buildings(self) -> Dict[str, Building]:
        """Return every building keyed by its short name."""
        ...

    def get_building(self, short_name: str) -> Optional[Building]:
        """Get a building by short name.

        Args:
            short_name: The short name to look up (e.g., 'CSE').

        Returns:
            The building, or None if not found.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Wraps: graph/dijkstra.py

    The solver computes minimum-cost paths through a graph.
    """

    def solve(
        self,
        graph: Graph[Point, float],
        start: Point,
        end: Point,
    ) -> Optional[Path[Point]]:
        """Find the shortest path between two points.

        Args:
            graph: The campus graph.
            start: Departure point.
            end: Arrival point.

        Returns:
            The minimum-cost path, or None if no route exists.
        """
        ...
