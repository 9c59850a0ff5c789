"""Barn Labels — human-readable barn names encoding color and creation order."""

from farm.core.domain_types import Color


def barn_label(color: Color | str, number: int) -> str:
    """Label for the `number`-th barn of a color, e.g. RED-0, RED-1."""
    return f"{Color(color).value}-{number}"
