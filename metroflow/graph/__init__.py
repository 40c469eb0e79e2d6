"""Graph model and path-finding algorithms for the metro network.

This subpackage contains the adjacency store and the two searches run
on top of it: breadth-first search for the fewest stops and Dijkstra
for the least time or cost.
"""

from .bfs import least_stops
from .dijkstra import dijkstra
from .path import reconstruct_path
from .store import GraphStore

__all__ = ["GraphStore", "least_stops", "dijkstra", "reconstruct_path"]
