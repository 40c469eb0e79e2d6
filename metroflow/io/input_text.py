"""Input acquisition utilities for MetroFlow.

This module decouples how the station names and the criterion are
obtained (keyboard prompts, tests) from the route computation.
"""

from __future__ import annotations

from typing import Callable

from ..domain.models import Criterion

InputFn = Callable[[str], str]

_WHITESPACE = " \t\n\r"

CRITERIA_MENU = "\n".join(
    ["Choose optimization criteria:"]
    + [f"{member.choice}. {member.label}" for member in Criterion]
    + ["Your choice: "]
)


def normalize_station(text: str) -> str:
    """Strip surrounding spaces, tabs and line breaks from a station name.

    Inner whitespace and case are preserved: station ids are matched
    exactly.
    """
    return text.strip(_WHITESPACE)


def prompt_station(prompt: str, input_fn: InputFn = input) -> str:
    """Ask for a station name and return it normalized."""
    return normalize_station(input_fn(prompt))


def prompt_choice(input_fn: InputFn = input) -> str:
    """Show the criteria menu and return the raw answer."""
    return input_fn(CRITERIA_MENU).strip()
