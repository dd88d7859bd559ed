"""Task sorter service - orders tasks so that dependencies come first.

Tasks are the nodes of a graph and each dependency is the label of the
edge from its ``before`` task to its ``after`` task.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from operator import attrgetter
from typing import FrozenSet

from ..domain.models import Dependency, Task
from ..graph.store import Graph
from ..graph.topological import CycleDetected, Ordering, topological_sort


@dataclass
class TaskSorter:
    """Stores tasks and dependencies and orders the tasks.

    When several orders satisfy every dependency, tasks with
    alphabetically earlier names come first.
    """

    _graph: Graph[Task, Dependency] = field(default_factory=Graph, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_task(self, task: Task) -> None:
        """Add a task. No effect if it was already added."""
        self._graph.add_node(task)

    def tasks(self) -> FrozenSet[Task]:
        """Return every task added so far."""
        return self._graph.nodes()

    def add_dependency(self, dependency: Dependency) -> None:
        """Add a dependency. No effect if it was already added.

        Raises:
            NodeNotFoundError: If either task of the dependency was not added.
        """
        self._graph.add_edge(dependency.before, dependency.after, dependency)

    def outgoing_dependencies(self, task: Task) -> FrozenSet[Dependency]:
        """Return the dependencies that have ``task`` as their ``before`` task.

        Raises:
            NodeNotFoundError: If the task was not added.
        """
        return frozenset(edge.label for edge in self._graph.children_of(task))

    def sort_tasks(self) -> Ordering[Task]:
        """Order every task so that each comes before the tasks depending on it.

        Returns:
            ``Ordered`` with all tasks, or ``CycleDetected`` when the
            dependencies contain a cycle.
        """
        result = topological_sort(self._graph, key=attrgetter("name"))
        if isinstance(result, CycleDetected):
            self._logger.warning(
                "Cycle in task dependencies",
                extra={"cycle": [task.name for task in result.cycle]},
            )
        return result
