"""Least-time and least-cost search using Dijkstra's algorithm.

The frontier is a binary heap with lazy deletion: entries superseded by
a cheaper push for the same station are skipped when popped.
"""

from __future__ import annotations

import heapq
from operator import attrgetter
from typing import Dict, List, Set, Tuple, Union

from ..domain.errors import InvalidCriterionError
from ..domain.models import Criterion
from .path import reconstruct_path
from .store import GraphStore

UNREACHABLE = float("inf")


def dijkstra(
    graph: GraphStore,
    start: str,
    end: str,
    criterion: Union[Criterion, str] = Criterion.LEAST_COST,
) -> List[str]:
    """Compute the path minimizing cumulative time or cost.

    Parameters
    ----------
    graph:
        Metro network to search. Weights must be non-negative.
    start:
        Identifier of the departure station.
    end:
        Identifier of the arrival station.
    criterion:
        ``Criterion.LEAST_TIME`` or ``Criterion.LEAST_COST``, or their
        names ``"time"`` / ``"cost"``.

    Returns
    -------
    list[str]
        Stations from ``start`` to ``end`` inclusive, or ``[]`` if no
        path exists.

    Raises
    ------
    InvalidCriterionError
        If the criterion is unknown or does not select a weight.
    """
    criterion = Criterion.parse(criterion)
    if not criterion.is_weighted:
        raise InvalidCriterionError(
            f"Criterion {criterion.name} has no weight to minimize",
            value=criterion,
        )
    weight_of = attrgetter(criterion.value)

    best: Dict[str, float] = {station: UNREACHABLE for station in graph.stations()}
    best[start] = 0
    previous: Dict[str, str] = {}
    settled: Set[str] = set()

    heap: List[Tuple[float, str]] = [(0, start)]

    while heap:
        current_weight, u = heapq.heappop(heap)

        if u in settled or current_weight != best.get(u, UNREACHABLE):
            continue

        settled.add(u)

        if u == end:
            break

        for connection in graph.neighbors(u):
            v = connection.destination
            if v in settled:
                continue
            candidate = current_weight + weight_of(connection)
            if candidate < best.get(v, UNREACHABLE):
                best[v] = candidate
                previous[v] = u
                heapq.heappush(heap, (candidate, v))

    return reconstruct_path(previous, start, end)
