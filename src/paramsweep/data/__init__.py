"""Parameter value types."""

from .types import CandidateSet, Combination, Kind, Value

__all__ = [
    "CandidateSet",
    "Combination",
    "Kind",
    "Value",
]
