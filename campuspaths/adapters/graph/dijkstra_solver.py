"""Dijkstra route solver adapter.

This adapter wraps ``graph.dijkstra`` and adds logging of each query
and its outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...domain.models import Point
from ...graph.dijkstra import dijkstra
from ...graph.path import Path
from ...graph.store import Graph


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

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

        Raises:
            NodeNotFoundError: If start or end is not in the graph.
        """
        self._logger.debug(
            "Solving route",
            extra={"start": str(start), "end": str(end)},
        )

        path = dijkstra(graph, start, end)

        if path is None:
            self._logger.warning(
                "No route found",
                extra={"start": str(start), "end": str(end)},
            )
            return None

        self._logger.info(
            "Route found",
            extra={
                "start": str(start),
                "end": str(end),
                "segments": len(path.segments),
                "cost": path.cost,
            },
        )
        return path
