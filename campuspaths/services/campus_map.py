"""Campus map service - building lookup and route queries.

Resolves building short names to map points, validates them before any
search, runs the route solver and renders the result as text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..domain.errors import UnknownIdentifierError
from ..domain.models import RouteResult
from ..graph.path import Path, format_path
from ..ports.graph import CampusRepositoryPort, RouteSolverPort


@dataclass
class CampusMapService:
    """Lookup layer over the campus graph.

    Attributes:
        repository: Provides the campus graph and buildings
        route_solver: Computes shortest paths
    """

    repository: CampusRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def building_names(self) -> Dict[str, str]:
        """Return a mapping from each building short name to its long name."""
        return {
            short_name: building.long_name
            for short_name, building in self.repository.buildings().items()
        }

    def short_name_exists(self, short_name: str) -> bool:
        """Check if a building with this short name exists."""
        return self.repository.get_building(short_name) is not None

    def long_name_for_short(self, short_name: str) -> str:
        """Return the long name of a building.

        Raises:
            UnknownIdentifierError: If the short name does not exist.
        """
        building = self.repository.get_building(short_name)
        if building is None:
            raise UnknownIdentifierError(
                f"Unknown building: {short_name}",
                names=(short_name,),
            )
        return building.long_name

    def find_shortest_path(self, start: str, end: str) -> RouteResult:
        """Find the shortest walking route between two buildings.

        Both names are validated before searching, and every unknown name
        is reported at once.

        Args:
            start: Short name of the departure building.
            end: Short name of the arrival building.

        Returns:
            RouteResult whose ``found`` flag tells whether a route exists.

        Raises:
            UnknownIdentifierError: If either name is not a known building.
        """
        unknown = tuple(
            name for name in (start, end) if not self.short_name_exists(name)
        )
        if unknown:
            raise UnknownIdentifierError(
                f"Unknown building(s): {', '.join(unknown)}",
                names=unknown,
            )

        origin = self.repository.get_building(start).location  # type: ignore[union-attr]
        destination = self.repository.get_building(end).location  # type: ignore[union-attr]
        if origin == destination:
            return RouteResult(start=start, end=end, path=Path(origin))

        graph = self.repository.load()
        if origin not in graph or destination not in graph:
            # A building off every walkway cannot be reached.
            self._logger.warning(
                "Building not connected to any path",
                extra={"start": start, "end": end},
            )
            return RouteResult(start=start, end=end)

        path = self.route_solver.solve(graph, origin, destination)
        return RouteResult(start=start, end=end, path=path)

    def describe_route(self, start: str, end: str) -> str:
        """Render the route between two buildings as text.

        Returns:
            ``"path from <start> to <end>:"`` followed by one line per
            segment and the total cost, or by ``"no path found"``.

        Raises:
            UnknownIdentifierError: If either name is not a known building.
        """
        route = self.find_shortest_path(start, end)
        lines: List[str] = [f"path from {start} to {end}:"]
        if route.path is None:
            lines.append("no path found")
        else:
            lines.extend(format_path(route.path))
        return "\n".join(lines)
