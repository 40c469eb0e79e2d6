"""Input/output helpers for the interactive route query."""
