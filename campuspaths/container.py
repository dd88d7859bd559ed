"""Wiring of the campus adapters and services.

Entry points build one ``Container`` and ask it for the services they
need; tests pass their own repository or solver to replace the CSV and
Dijkstra defaults.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from .adapters.graph import CSVCampusRepository, DijkstraRouteSolver
from .config import AppConfig, get_config
from .ports.graph import CampusRepositoryPort, RouteSolverPort
from .services import CampusMapService, TaskSorter


@dataclass
class Container:
    """Creates the campus services on first use and shares them afterwards.

    Usage:
        container = Container()
        print(container.campus_map().describe_route("CSE", "MGH"))

    Attributes:
        config: Application configuration
        repository: Campus repository override, CSV-backed when None
        route_solver: Route solver override, Dijkstra when None
    """

    config: AppConfig = field(default_factory=get_config)
    repository: Optional[CampusRepositoryPort] = None
    route_solver: Optional[RouteSolverPort] = None

    _campus_map: Optional[CampusMapService] = field(default=None, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def campus_repository(self) -> CampusRepositoryPort:
        with self._lock:
            if self.repository is None:
                self.repository = CSVCampusRepository(self.config.data)
            return self.repository

    def solver(self) -> RouteSolverPort:
        with self._lock:
            if self.route_solver is None:
                self.route_solver = DijkstraRouteSolver()
            return self.route_solver

    def campus_map(self) -> CampusMapService:
        """Return the shared campus map service."""
        with self._lock:
            if self._campus_map is None:
                self._campus_map = CampusMapService(
                    repository=self.campus_repository(),
                    route_solver=self.solver(),
                )
            return self._campus_map

    def task_sorter(self) -> TaskSorter:
        """Return a new, empty task sorter. Task lists are never shared."""
        return TaskSorter()

    def reset(self) -> None:
        """Drop the shared campus map and the repository's cached data."""
        with self._lock:
            self._campus_map = None
            if isinstance(self.repository, CSVCampusRepository):
                self.repository.clear_cache()
