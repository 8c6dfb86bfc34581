"""Sweep results."""

from .results import Evaluation, SweepResults

__all__ = [
    "Evaluation",
    "SweepResults",
]
