"""Interactive route query for MetroFlow.

The pipeline is organized in three stages:

1. Input acquisition (source, destination, criterion choice).
2. Graph loading (from the CSV edge list to a GraphStore).
3. Route computation and formatting.

Each step delegates work to the services wired by the container.
"""

from __future__ import annotations

import sys
from typing import Optional

from .config import configure_logging
from .container import Container
from .domain.errors import ConfigurationError, GraphError, InvalidCriterionError
from .domain.models import Criterion
from .io.input_text import InputFn, prompt_choice, prompt_station
from .services import RoutePlannerService

WELCOME_MESSAGE = "\nWelcome to MetroFlow - Metro Route Optimization System"
INVALID_CHOICE_MESSAGE = "Invalid choice."
INVALID_INPUT_MESSAGE = "Invalid input: no answer was given."


def solve_route_query(
    source: str,
    destination: str,
    choice: str,
    *,
    planner: Optional[RoutePlannerService] = None,
) -> str:
    """Run a route query and return the message to display.

    This helper is designed to be reused from other front-ends
    (CLI, tests, etc.).

    Args:
        source: Departure station name.
        destination: Arrival station name.
        choice: Criterion menu choice ("1", "2" or "3").
        planner: Service to use; defaults to the production wiring.
    """
    try:
        criterion = Criterion.from_choice(choice)
    except InvalidCriterionError:
        return INVALID_CHOICE_MESSAGE

    if planner is None:
        planner = Container.create_default().resolve(RoutePlannerService)

    route = planner.plan(source, destination, criterion)
    return planner.format_result(route)


def run_pipeline(input_fn: InputFn = input) -> int:
    """Prompt for a query on the terminal and print the optimal route.

    Returns:
        Process exit code: 0 on success, otherwise 1.
    """
    try:
        configure_logging()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(WELCOME_MESSAGE)
    try:
        source = prompt_station("Enter Source Station: ", input_fn)
        destination = prompt_station("Enter Destination Station: ", input_fn)
        choice = prompt_choice(input_fn)
    except EOFError:
        print()
        print(INVALID_INPUT_MESSAGE)
        return 1

    try:
        message = solve_route_query(source, destination, choice)
    except GraphError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print()
    print(message)
    return 1 if message == INVALID_CHOICE_MESSAGE else 0


def main() -> None:
    sys.exit(run_pipeline())


if __name__ == "__main__":
    main()
