"""Immutable domain models for the campus paths project.

All models are frozen dataclasses with slots. They are hashable, so they
can be used directly as graph nodes and edge labels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..graph.path import Path


@dataclass(frozen=True, slots=True)
class Point:
    """A location on the campus map, in map pixel coordinates."""

    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x:.3f}, {self.y:.3f})"


@dataclass(frozen=True, slots=True)
class Building:
    """A campus building.

    Attributes:
        short_name: Unique abbreviated name (e.g., 'CSE')
        long_name: Full human-readable name
        location: Point of the building entrance on the map
    """

    short_name: str
    long_name: str
    location: Point


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route query between two buildings.

    Attributes:
        start: Short name of the departure building
        end: Short name of the arrival building
        path: The minimum-cost path, or None when no route exists
    """

    start: str
    end: str
    path: Optional[Path[Point]] = None

    @property
    def found(self) -> bool:
        """Check if a route connects the two buildings."""
        return self.path is not None

    @property
    def total_cost(self) -> float:
        """Return the route cost, infinite when no route exists."""
        if self.path is None:
            return float("inf")
        return self.path.cost


@dataclass(frozen=True, slots=True)
class Task:
    """A task to be scheduled.

    Attributes:
        name: Task name, used to break ties when ordering tasks
        description: What the task is about
        team: The team assigned to the task
    """

    name: str
    description: str
    team: str

    def __str__(self) -> str:
        return f'Task "{self.name}":\nDescription: {self.description}\nTeam: {self.team}'


@dataclass(frozen=True, slots=True)
class Dependency:
    """A constraint stating that ``before`` must be done ahead of ``after``."""

    before: Task
    after: Task

    def __str__(self) -> str:
        return f"Dependency: {self.before.name} -> {self.after.name}"
