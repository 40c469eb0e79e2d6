"""Graph ports - Abstractions for graph loading and routing.

These protocols define the contracts for graph operations, including
loading the metro network and computing optimal routes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..domain.models import Criterion, RouteResult
    from ..graph.store import GraphStore


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository is responsible for loading and caching the
    metro network from persistent storage.
    """

    def load(self) -> GraphStore:
        """Load the metro network.

        Returns:
            The populated graph store.
        """
        ...


class RouteSolverPort(Protocol):
    """Port for route computation.

    Implementation: adapters/graph/route_solver.py
    """

    def solve(
        self,
        graph: GraphStore,
        departure: str,
        arrival: str,
        criterion: Criterion,
    ) -> RouteResult:
        """Find the optimal route between two stations.

        Args:
            graph: The metro network.
            departure: Departure station id.
            arrival: Arrival station id.
            criterion: What the route should minimize.

        Returns:
            RouteResult with the path and its totals; the path is empty
            when the stations are not connected.
        """
        ...
