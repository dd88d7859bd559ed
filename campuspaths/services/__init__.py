"""Application services built on the graph engine."""

from .campus_map import CampusMapService
from .task_sorter import TaskSorter

__all__ = ["CampusMapService", "TaskSorter"]
