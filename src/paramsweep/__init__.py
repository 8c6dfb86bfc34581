"""paramsweep — brute-force parameter sweeps over finite candidate sets.

Evaluates a scoring function on every combination of candidate values
and keeps the highest score. Enumeration order is fixed (last parameter
fastest-varying) and ties keep the first combination found.

Quick start:
    from paramsweep import ParameterPermutator, linspace_by_count

    def score(b: bool, i: int, f: float) -> float:
        return i * f if b else i + f

    pp = ParameterPermutator.from_named(score, [
        ("b", [True, False]),
        ("i", linspace_by_count(0, 10, 10)),
        ("f", [10.0, 20.0]),
    ])
    print(pp.report())
    results = pp.run()
    print(pp.best_score, pp.to_string(pp.best_parameters))
"""

from .version import __version__

# Values
from .data.types import CandidateSet, Combination, Kind, Value

# Errors
from .errors import ConfigurationError, TypeMismatchError

# Engine
from .engine.permutator import ParameterPermutator
from .engine.active import active_permutator

# Range generators
from .ranges.linspace import linspace_by_count, linspace_by_step

# Results
from .optimize.results import Evaluation, SweepResults

# Reporting
from .reporting.progress import ProgressBar, StatusLine
from .reporting.interrupt import format_best_so_far, install_interrupt_handler

__all__ = [
    "__version__",
    # Values
    "CandidateSet",
    "Combination",
    "Kind",
    "Value",
    # Errors
    "ConfigurationError",
    "TypeMismatchError",
    # Engine
    "ParameterPermutator",
    "active_permutator",
    # Range generators
    "linspace_by_count",
    "linspace_by_step",
    # Results
    "Evaluation",
    "SweepResults",
    # Reporting
    "ProgressBar",
    "StatusLine",
    "format_best_so_far",
    "install_interrupt_handler",
]
