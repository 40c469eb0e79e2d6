"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the metro network from a CSV edge list
- MetroRouteSolver: Dispatches a query to BFS or Dijkstra
"""

from .csv_repository import CSVGraphRepository
from .route_solver import MetroRouteSolver

__all__ = ["CSVGraphRepository", "MetroRouteSolver"]
