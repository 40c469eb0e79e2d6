"""Services layer - Application orchestration.

Available services:
- RoutePlannerService: Answers route queries against the metro network
"""

from .route_planner import RoutePlannerService

__all__ = ["RoutePlannerService"]
