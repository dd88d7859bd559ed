"""Domain layer - Core business models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    CampusPathsError,
    GraphError,
    NodeNotFoundError,
    ScriptCommandError,
    UnknownIdentifierError,
)
from .models import Building, Dependency, Point, RouteResult, Task

__all__ = [
    # Models
    "Point",
    "Building",
    "RouteResult",
    "Task",
    "Dependency",
    # Errors
    "CampusPathsError",
    "NodeNotFoundError",
    "UnknownIdentifierError",
    "GraphError",
    "ScriptCommandError",
]
