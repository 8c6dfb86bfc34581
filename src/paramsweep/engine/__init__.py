"""The parameter sweep engine."""

from .active import active_permutator
from .permutator import ParameterPermutator

__all__ = [
    "ParameterPermutator",
    "active_permutator",
]
