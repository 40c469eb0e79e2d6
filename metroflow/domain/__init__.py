"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InvalidCriterionError,
    MetroFlowError,
)
from .models import Connection, Criterion, EdgeRecord, RouteResult

__all__ = [
    # Models
    "Connection",
    "Criterion",
    "EdgeRecord",
    "RouteResult",
    # Errors
    "MetroFlowError",
    "GraphError",
    "InvalidCriterionError",
    "ConfigurationError",
]
