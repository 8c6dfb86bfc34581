"""Evenly spaced candidate sets for numeric parameters."""

from .linspace import linspace_by_count, linspace_by_step

__all__ = [
    "linspace_by_count",
    "linspace_by_step",
]
