"""CSV Graph Repository adapter.

Loads the metro network from a CSV edge list with the columns
``from,to,time,distance,cost,line``. The first row is a header and is
always skipped. Rows with missing or malformed numeric fields are
logged and skipped without aborting the load.
"""

from __future__ import annotations

import csv
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import EdgeRecord
from ...graph.store import GraphStore

MIN_FIELDS = 5

_INT_PATTERN = re.compile(r"\s*[+-]?\d+\s*", re.ASCII)
_FLOAT_PATTERN = re.compile(
    r"\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?\s*", re.ASCII
)


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from a CSV edge list.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (data directory, file name)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[GraphStore] = field(default=None, repr=False)
    _skipped_rows: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def skipped_rows(self) -> int:
        """Number of rows rejected by the last parse."""
        return self._skipped_rows

    def load(self) -> GraphStore:
        """Load the metro network from the configured CSV file.

        Returns:
            The populated graph store (cached after the first call).

        Raises:
            GraphError: If the file cannot be read.
        """
        if self._graph is not None:
            return self._graph

        edges_path = self.config.edges_path
        self._logger.debug("Loading graph", extra={"edges_path": str(edges_path)})

        try:
            with edges_path.open(newline="", encoding="utf-8", errors="replace") as f:
                records = self.read_records(f)
        except OSError as e:
            raise GraphError(
                f"Failed to load graph from {edges_path}",
                file_path=str(edges_path),
                cause=e,
            )

        graph = GraphStore.from_records(records)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={
                "stations": len(graph),
                "records": len(records),
                "skipped_rows": self._skipped_rows,
            },
        )
        return graph

    def read_records(self, lines: Iterable[str]) -> List[EdgeRecord]:
        """Parse edge records from CSV text lines.

        The first line is treated as a header. Each following line is
        split on commas on its own, with quote characters taken
        literally, so a malformed line never swallows the lines after
        it. Blank lines are ignored and malformed rows are skipped and
        counted.

        Args:
            lines: Iterable of CSV text lines (e.g. an open file).

        Returns:
            The well-formed records, in file order.
        """
        records: List[EdgeRecord] = []
        self._skipped_rows = 0

        for line_num, text in enumerate(lines, start=1):
            if line_num == 1:
                continue

            text = text.rstrip("\r\n")
            if not text.strip():
                continue

            try:
                row = next(csv.reader([text], quoting=csv.QUOTE_NONE))
                record = self._parse_row(row)
            except csv.Error:
                record = None

            if record is None:
                self._skipped_rows += 1
                self._logger.warning(
                    "Skipping invalid row",
                    extra={"row": text[:200], "line_num": line_num},
                )
                continue
            records.append(record)

        return records

    @staticmethod
    def _parse_row(row: List[str]) -> Optional[EdgeRecord]:
        if len(row) < MIN_FIELDS:
            return None

        time = _parse_int(row[2])
        distance = _parse_float(row[3])
        cost = _parse_int(row[4])
        if time is None or distance is None or cost is None:
            return None

        line = row[5] if len(row) > MIN_FIELDS else ""
        return EdgeRecord(
            source=row[0],
            destination=row[1],
            time=time,
            distance=distance,
            cost=cost,
            line=line,
        )

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")


def _parse_int(text: str) -> Optional[int]:
    """Parse a plain decimal integer, rejecting underscores and decimals."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    return int(text)


def _parse_float(text: str) -> Optional[float]:
    """Parse a finite decimal number, rejecting ``nan``, ``inf`` and underscores."""
    if not _FLOAT_PATTERN.fullmatch(text):
        return None
    return float(text)
