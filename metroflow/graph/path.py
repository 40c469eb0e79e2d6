"""Path reconstruction from a predecessor mapping."""

from __future__ import annotations

from typing import List, Mapping


def reconstruct_path(
    previous: Mapping[str, str], start: str, end: str
) -> List[str]:
    """Rebuild the station sequence from ``start`` to ``end``.

    Parameters
    ----------
    previous:
        Maps each reached station to the station it was reached from.
    start:
        Identifier of the departure station.
    end:
        Identifier of the arrival station.

    Returns
    -------
    list[str]
        The stations from ``start`` to ``end`` inclusive, ``[start]`` when
        both are equal, or an empty list if ``end`` cannot be traced back
        to ``start``.
    """
    if start == end:
        return [start]

    path: List[str] = []
    current = end
    while current != start:
        if current not in previous or len(path) > len(previous):
            return []
        path.append(current)
        current = previous[current]

    path.append(start)
    path.reverse()
    return path
