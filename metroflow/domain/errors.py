"""Typed domain errors for MetroFlow.

All errors inherit from MetroFlowError and can optionally wrap a root
cause exception for debugging.

An unreachable destination is not an error: searches signal it with an
empty path.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class MetroFlowError(Exception):
    """Base error for the MetroFlow domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(MetroFlowError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class InvalidCriterionError(MetroFlowError):
    """An optimization criterion was not recognized or not supported.

    Attributes:
        value: The rejected criterion value
    """

    value: Any = None


@dataclass
class ConfigurationError(MetroFlowError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
