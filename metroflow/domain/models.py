"""Immutable domain models for MetroFlow.

All models are frozen dataclasses with slots. They have no external
dependencies and represent the core concepts of the route optimizer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .errors import InvalidCriterionError


class Criterion(Enum):
    """Optimization criterion for a route query.

    FEWEST_STOPS ignores edge weights; LEAST_COST and LEAST_TIME minimize
    the cumulative ``cost`` or ``time`` field of the connections.
    """

    FEWEST_STOPS = "stops"
    LEAST_COST = "cost"
    LEAST_TIME = "time"

    @property
    def label(self) -> str:
        """Human-readable name shown to the user."""
        return _LABELS[self]

    @property
    def choice(self) -> int:
        """Menu number of this criterion in the interactive prompt."""
        return _CHOICES[self]

    @property
    def weight_field(self) -> Optional[str]:
        """Connection attribute minimized by this criterion, if any."""
        if self is Criterion.FEWEST_STOPS:
            return None
        return self.value

    @property
    def is_weighted(self) -> bool:
        return self.weight_field is not None

    @classmethod
    def parse(cls, value: Any) -> Criterion:
        """Resolve a criterion from an enum member or its name/value.

        Accepts ``Criterion`` members and case-insensitive strings such
        as ``"time"``, ``"cost"``, ``"stops"`` or ``"least_time"``.

        Raises:
            InvalidCriterionError: If the value matches no criterion.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise InvalidCriterionError(
            f"Unknown criterion: {value!r}",
            value=value,
        )

    @classmethod
    def from_choice(cls, value: Any) -> Criterion:
        """Resolve a criterion from its menu number (1, 2 or 3).

        Raises:
            InvalidCriterionError: If the value is not a known menu number.
        """
        try:
            number = int(str(value).strip())
        except ValueError:
            number = None
        for member in cls:
            if member.choice == number:
                return member
        raise InvalidCriterionError(
            f"Invalid criterion choice: {value!r}",
            value=value,
        )


_LABELS = {
    Criterion.FEWEST_STOPS: "Least Stops",
    Criterion.LEAST_COST: "Least Cost",
    Criterion.LEAST_TIME: "Least Time",
}

_CHOICES = {
    Criterion.FEWEST_STOPS: 1,
    Criterion.LEAST_COST: 2,
    Criterion.LEAST_TIME: 3,
}


@dataclass(frozen=True, slots=True)
class Connection:
    """A directed edge leaving a station.

    Attributes:
        destination: Station reached by this connection
        time: Travel time, non-negative
        distance: Distance, carried for display but never searched on
        cost: Fare, non-negative
        line: Metro line label
    """

    destination: str
    time: int
    distance: float
    cost: int
    line: str


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """One ingested row of the edge list."""

    source: str
    destination: str
    time: int
    distance: float
    cost: int
    line: str = ""


@dataclass(frozen=True, slots=True)
class RouteResult:
    """Result of a route query.

    Attributes:
        path: Ordered tuple of station ids from source to destination
        criterion: Criterion the route was optimized for
        total_time: Sum of connection times along the path
        total_cost: Sum of connection costs along the path
        total_distance: Sum of connection distances along the path
        lines: Line label of each hop, in travel order
    """

    path: tuple[str, ...]
    criterion: Criterion
    total_time: int = 0
    total_cost: int = 0
    total_distance: float = 0.0
    lines: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if no route was found."""
        return len(self.path) == 0

    @property
    def num_stops(self) -> int:
        """Return the number of stations on the route."""
        return len(self.path)

    @property
    def num_hops(self) -> int:
        """Return the number of connections travelled."""
        return max(len(self.path) - 1, 0)
