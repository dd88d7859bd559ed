"""CSV campus repository adapter.

Loads the campus from two CSV files:
- buildings: ``shortName,longName,x,y``
- paths: ``x1,y1,x2,y2,distance``

Every path is a walkway usable in both directions, so it becomes two
directed edges of equal cost in the graph.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from ...config import CampusDataConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Building, Point
from ...graph.store import Graph


@dataclass
class CSVCampusRepository:
    """Campus repository that loads from CSV files.

    This adapter implements CampusRepositoryPort.

    Attributes:
        config: Campus data configuration (paths, file names)
    """

    config: CampusDataConfig = field(default_factory=lambda: get_config().data)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph[Point, float]] = field(default=None, repr=False)
    _buildings: Optional[Dict[str, Building]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph[Point, float]:
        """Load the campus graph from the paths CSV file.

        Returns:
            The graph of map points, with walkway lengths as labels.

        Raises:
            GraphError: If the graph cannot be loaded.
        """
        if self._graph is not None:
            return self._graph

        path = self.config.paths_path
        self._logger.debug("Loading campus graph", extra={"paths_path": str(path)})

        try:
            graph = self._load_graph_from_csv(path)
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load campus paths: {e}",
                file_path=str(path),
                cause=e,
            ) from e

        self._graph = graph
        self._logger.info(
            "Campus graph loaded",
            extra={"nodes": graph.size(), "edges": sum(1 for _ in graph.edges())},
        )
        return graph

    def _load_graph_from_csv(self, path: Path) -> Graph[Point, float]:
        """Internal method to build the graph from the paths file."""
        graph: Graph[Point, float] = Graph()

        with path.open(newline="", encoding="utf-8") as f:
            # Short rows fill missing fields with "" so they fail as ValueError.
            reader = csv.DictReader(f, restval="")
            for row in reader:
                p1 = Point(float(row["x1"]), float(row["y1"]))
                p2 = Point(float(row["x2"]), float(row["y2"]))
                distance = float(row["distance"])

                graph.add_node(p1)
                graph.add_node(p2)
                graph.add_edge(p1, p2, distance)
                graph.add_edge(p2, p1, distance)

        return graph

    def buildings(self) -> Dict[str, Building]:
        """Return every building keyed by its short name.

        Raises:
            GraphError: If the buildings file cannot be read.
        """
        if self._buildings is not None:
            return self._buildings

        path = self.config.buildings_path
        try:
            buildings = self._load_buildings_from_csv(path)
        except (OSError, KeyError, ValueError) as e:
            raise GraphError(
                f"Failed to load campus buildings: {e}",
                file_path=str(path),
                cause=e,
            ) from e

        self._buildings = buildings
        self._logger.info("Buildings loaded", extra={"buildings": len(buildings)})
        return buildings

    def _load_buildings_from_csv(self, path: Path) -> Dict[str, Building]:
        buildings: Dict[str, Building] = {}

        with path.open(newline="", encoding="utf-8") as f:
            # Short rows fill missing fields with "" so they fail as ValueError.
            reader = csv.DictReader(f, restval="")
            for row in reader:
                short_name = row["shortName"].strip()
                if not short_name:
                    continue
                long_name = row["longName"].strip()
                buildings[short_name] = Building(
                    short_name=short_name,
                    long_name=long_name or short_name,
                    location=Point(float(row["x"]), float(row["y"])),
                )

        return buildings

    def get_building(self, short_name: str) -> Optional[Building]:
        """Get a building by short name.

        Args:
            short_name: The short name to look up.

        Returns:
            The building, or None if not found.
        """
        return self.buildings().get(short_name)

    def clear_cache(self) -> None:
        """Clear cached graph and building data."""
        self._graph = None
        self._buildings = None
        self._logger.debug("Campus cache cleared")
