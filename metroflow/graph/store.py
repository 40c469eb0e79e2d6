"""In-memory adjacency store for the metro network.

Every connection is stored twice, once per direction, with identical
weights and line label. Lookups of unknown stations return an empty
sequence so searches treat them like isolated stations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Sequence

from ..domain.models import Connection, EdgeRecord

_NO_CONNECTIONS: Sequence[Connection] = ()


@dataclass
class GraphStore:
    """Adjacency lists keyed by station id.

    Insertion order of each list follows ingestion order; it only
    influences tie-breaking between equally good routes.
    """

    _adjacency: Dict[str, List[Connection]] = field(default_factory=dict, repr=False)

    @classmethod
    def from_records(cls, records: Iterable[EdgeRecord]) -> GraphStore:
        """Build a store from an iterable of edge records."""
        store = cls()
        for record in records:
            store.add_record(record)
        return store

    def add_connection(
        self,
        source: str,
        destination: str,
        time: int,
        distance: float,
        cost: int,
        line: str,
    ) -> None:
        """Add an undirected connection between two stations.

        No validation is done: duplicate pairs are legal and stand for
        alternate lines between the same stations.
        """
        self._adjacency.setdefault(source, []).append(
            Connection(destination, time, distance, cost, line)
        )
        self._adjacency.setdefault(destination, []).append(
            Connection(source, time, distance, cost, line)
        )

    def add_record(self, record: EdgeRecord) -> None:
        self.add_connection(
            record.source,
            record.destination,
            record.time,
            record.distance,
            record.cost,
            record.line,
        )

    def neighbors(self, station: str) -> Sequence[Connection]:
        """Return the outgoing connections of a station, in insertion order.

        The returned sequence must be treated as read-only.
        """
        return self._adjacency.get(station, _NO_CONNECTIONS)

    def stations(self) -> List[str]:
        """Return every known endpoint, in first-seen order.

        Includes stations that only ever appear as a connection
        destination.
        """
        known: Dict[str, None] = dict.fromkeys(self._adjacency)
        for connections in self._adjacency.values():
            for connection in connections:
                known.setdefault(connection.destination, None)
        return list(known)

    def connection_count(self) -> int:
        """Return the number of directed connections stored."""
        return sum(len(connections) for connections in self._adjacency.values())

    def __contains__(self, station: object) -> bool:
        return station in self._adjacency

    def __iter__(self) -> Iterator[str]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)
