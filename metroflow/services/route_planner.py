"""Route planner service - Main orchestrator.

Normalizes a query, loads the network through the repository and
delegates the search to the route solver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from ..domain.models import Criterion, RouteResult
from ..io.input_text import normalize_station
from ..ports.graph import GraphRepositoryPort, RouteSolverPort

NO_PATH_MESSAGE = "No path found between the given stations."


@dataclass
class RoutePlannerService:
    """Main service for answering route queries.

    Attributes:
        graph_repository: Loads the metro network
        route_solver: Computes optimal routes
    """

    graph_repository: GraphRepositoryPort
    route_solver: RouteSolverPort

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def plan(
        self,
        source: str,
        destination: str,
        criterion: Union[Criterion, str],
    ) -> RouteResult:
        """Compute the optimal route for a query.

        Args:
            source: Departure station name (surrounding whitespace ignored).
            destination: Arrival station name (surrounding whitespace ignored).
            criterion: What the route should minimize.

        Returns:
            RouteResult; its path is empty when no route exists.

        Raises:
            InvalidCriterionError: If the criterion is not recognized.
            GraphError: If the network cannot be loaded.
        """
        criterion = Criterion.parse(criterion)
        source = normalize_station(source)
        destination = normalize_station(destination)

        self._logger.info(
            "Planning route",
            extra={
                "source": source,
                "destination": destination,
                "criterion": criterion.name,
            },
        )

        graph = self.graph_repository.load()
        return self.route_solver.solve(graph, source, destination, criterion)

    def format_result(self, route: RouteResult) -> str:
        """Format a route as human-readable text.

        Args:
            route: The computed route.

        Returns:
            The arrow-joined path under a heading naming the criterion,
            followed by the route totals, or the no-path message.
        """
        if route.is_empty:
            return NO_PATH_MESSAGE

        path_str = " -> ".join(route.path)
        return (
            f"Optimal Path based on {route.criterion.label}:\n{path_str}\n"
            f"Stops: {route.num_hops} | Time: {route.total_time} | "
            f"Cost: {route.total_cost} | Distance: {route.total_distance:g}"
        )
