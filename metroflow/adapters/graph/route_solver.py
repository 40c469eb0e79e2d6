"""Metro Route Solver adapter.

Dispatches a route query to the search matching its criterion and
wraps the resulting path into a RouteResult with per-route totals.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from ...domain.models import Connection, Criterion, RouteResult
from ...graph.bfs import least_stops
from ...graph.dijkstra import dijkstra
from ...graph.store import GraphStore


@dataclass
class MetroRouteSolver:
    """Route solver for the three optimization criteria.

    This adapter implements RouteSolverPort. Fewest-stops queries run
    breadth-first search; least-time and least-cost queries run
    Dijkstra on the matching weight.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(
        self,
        graph: GraphStore,
        departure: str,
        arrival: str,
        criterion: Union[Criterion, str],
    ) -> RouteResult:
        """Find the optimal route between two stations.

        Args:
            graph: The metro network.
            departure: Departure station id.
            arrival: Arrival station id.
            criterion: What the route should minimize.

        Returns:
            RouteResult with path and totals, or an empty path when the
            stations are not connected.

        Raises:
            InvalidCriterionError: If the criterion is not recognized.
        """
        criterion = Criterion.parse(criterion)
        self._logger.debug(
            "Solving route",
            extra={
                "departure": departure,
                "arrival": arrival,
                "criterion": criterion.name,
            },
        )

        if criterion is Criterion.FEWEST_STOPS:
            path = least_stops(graph, departure, arrival)
        else:
            path = dijkstra(graph, departure, arrival, criterion)

        if not path:
            self._logger.info(
                "No route found",
                extra={"departure": departure, "arrival": arrival},
            )
            return RouteResult(path=(), criterion=criterion)

        hops = self._hop_connections(graph, path, criterion)
        route = RouteResult(
            path=tuple(path),
            criterion=criterion,
            total_time=sum(hop.time for hop in hops),
            total_cost=sum(hop.cost for hop in hops),
            total_distance=sum(hop.distance for hop in hops),
            lines=tuple(hop.line for hop in hops),
        )

        self._logger.info(
            "Route found",
            extra={
                "departure": departure,
                "arrival": arrival,
                "stops": route.num_stops,
                "criterion": criterion.name,
            },
        )
        return route

    @staticmethod
    def _hop_connections(
        graph: GraphStore, path: Sequence[str], criterion: Criterion
    ) -> List[Connection]:
        """Pick the connection used for each hop of a path.

        Between two stations linked by several lines the first connection
        that is minimal under the criterion is used.
        """
        weight_field = criterion.weight_field
        hops: List[Connection] = []
        for current, following in zip(path, path[1:]):
            chosen: Optional[Connection] = None
            for connection in graph.neighbors(current):
                if connection.destination != following:
                    continue
                if chosen is None:
                    chosen = connection
                    if weight_field is None:
                        break
                elif getattr(connection, weight_field) < getattr(chosen, weight_field):
                    chosen = connection
            if chosen is not None:
                hops.append(chosen)
        return hops
