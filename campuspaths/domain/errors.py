"""Typed domain errors for the campus paths project.

All errors inherit from CampusPathsError and can optionally wrap a root
cause exception for debugging.

Only precondition violations are errors. A search that finds no route
and a sort that meets a cycle are ordinary results, see
``campuspaths.graph.dijkstra`` and ``campuspaths.graph.topological``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CampusPathsError(Exception):
    """Base error for the campus paths domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class NodeNotFoundError(CampusPathsError):
    """A graph operation referenced a node the graph does not contain.

    Raised by ``add_edge``, ``contains_edge`` and ``children_of``, and by
    the search when an endpoint is missing.

    Attributes:
        node: The missing node
    """

    node: Any = None


@dataclass
class UnknownIdentifierError(CampusPathsError):
    """One or more human-supplied names do not map to a known node.

    Attributes:
        names: Every unknown name, in the order they were given
    """

    names: tuple[str, ...] = ()


@dataclass
class GraphError(CampusPathsError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class ScriptCommandError(CampusPathsError):
    """A pathfinder script line could not be executed.

    Attributes:
        command: The command name from the script line
    """

    command: str = ""
