"""Fewest-stops search using breadth-first traversal.

Connection weights are never compared, so the returned path has the
minimum number of hops. Among equally short paths the one using the
earliest inserted connections wins.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Set

from .path import reconstruct_path
from .store import GraphStore


def least_stops(graph: GraphStore, start: str, end: str) -> List[str]:
    """Compute the path with the fewest stops between two stations.

    Parameters
    ----------
    graph:
        Metro network to search.
    start:
        Identifier of the departure station.
    end:
        Identifier of the arrival station.

    Returns
    -------
    list[str]
        Stations from ``start`` to ``end`` inclusive, or ``[]`` if no
        path exists.
    """
    visited: Set[str] = {start}
    previous: Dict[str, str] = {}
    queue: Deque[str] = deque([start])

    while queue:
        current = queue.popleft()
        if current == end:
            break

        for connection in graph.neighbors(current):
            station = connection.destination
            if station not in visited:
                visited.add(station)
                previous[station] = current
                queue.append(station)

    return reconstruct_path(previous, start, end)
