"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVCampusRepository: Loads the campus graph and buildings from CSV files
- DijkstraRouteSolver: Finds shortest paths using Dijkstra's algorithm
"""

from .csv_repository import CSVCampusRepository
from .dijkstra_solver import DijkstraRouteSolver

__all__ = ["CSVCampusRepository", "DijkstraRouteSolver"]
