"""Sweep result aggregation, sorting, and formatting."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from ..data.types import Combination


@dataclass(frozen=True, slots=True)
class Evaluation:
    """One scored combination. ``iteration`` is 1-based."""
    iteration: int
    combination: Combination
    score: Any


@dataclass
class SweepResults:
    """Outcome of a ParameterPermutator run.

    ``evaluations`` is only populated when the permutator was configured
    with ``record_history=True``; it is kept in memory and never written out.
    """
    names: Sequence[str] = field(default_factory=tuple)
    best_score: Any = -math.inf
    best_parameters: Combination = ()
    iterations: int = 0
    total_permutations: int = 0
    evaluations: List[Evaluation] = field(default_factory=list)

    @property
    def completed(self) -> bool:
        """True when every permutation was evaluated."""
        return self.iterations == self.total_permutations

    def best_as_dict(self) -> Dict[str, Any]:
        """Best combination as {name: raw value}."""
        return {
            name: value.raw
            for name, value in zip(self.names, self.best_parameters)
        }

    def top(self, n: int = 10) -> List[Evaluation]:
        """Top N evaluations by score (descending).

        The sort is stable, so equal scores keep enumeration order.
        """
        return sorted(self.evaluations, key=lambda e: e.score, reverse=True)[:n]

    def to_records(self) -> List[dict]:
        """History as a list of flat dicts: iteration, one key per parameter, score."""
        records = []
        for ev in self.evaluations:
            rec: Dict[str, Any] = {"iteration": ev.iteration}
            for name, value in zip(self.names, ev.combination):
                rec[name] = value.raw
            rec["score"] = ev.score
            records.append(rec)
        return records

    def to_dataframe(self):
        """Export the history as a pandas DataFrame.

        Raises ImportError if pandas is not installed.
        """
        import pandas as pd
        columns = ["iteration", *self.names, "score"]
        return pd.DataFrame(self.to_records(), columns=columns)

    def summary(self, top_n: int = 5) -> str:
        """Formatted summary string."""
        if self.iterations == 0:
            return "No evaluations."

        best = ", ".join(
            f"{name}={value.format()}"
            for name, value in zip(self.names, self.best_parameters)
        )
        status = "complete" if self.completed else "partial"
        lines = [
            f"Parameter Sweep Results ({self.iterations:,} of "
            f"{self.total_permutations:,} evaluated, {status})",
            f"  Best score:      {float(self.best_score):.6g}",
            f"  Best parameters: {{{best}}}",
        ]

        if self.evaluations:
            header = " | ".join(f"{c:>12s}" for c in [*self.names, "score"])
            sep = "-" * len(header)
            lines += [sep, header, sep]
            for ev in self.top(top_n):
                vals = [f"{v.format():>12s}" for v in ev.combination]
                vals.append(f"{float(ev.score):>12.4f}")
                lines.append(" | ".join(vals))
            lines.append(sep)

        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self.evaluations)
