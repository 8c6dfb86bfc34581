"""ParameterPermutator: exhaustive search over a parameter cross-product.

The permutator owns a scoring function and one candidate set per
parameter. run() evaluates every combination in canonical order (first
parameter outermost, last parameter fastest-varying, like an odometer) and
keeps the highest score. Ties keep the combination found first.

State is published as a single immutable snapshot per evaluation, so a
signal handler or progress callback always sees a consistent
(iteration, best score, best parameters) triple.
"""

from __future__ import annotations

import inspect
import itertools
import logging
import math
from typing import (
    Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional,
    Sequence, Tuple, Union,
)

from ..data.types import CandidateSet, Combination, Kind, Value
from ..errors import ConfigurationError, TypeMismatchError
from ..optimize.results import Evaluation, SweepResults
from .active import activate

logger = logging.getLogger(__name__)

ProgressCallback = Callable[["ParameterPermutator"], None]


class _State(NamedTuple):
    iteration: int
    best_score: Any
    best_parameters: Combination


_INITIAL_STATE = _State(0, -math.inf, ())

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _inspect_positional(func: Callable) -> Optional[List[inspect.Parameter]]:
    """Positional parameters of func, or None if the arity is not fixed."""
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    params = []
    for p in sig.parameters.values():
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if p.kind in _POSITIONAL:
            params.append(p)
    return params


class ParameterPermutator:
    """Brute-force parameter sweep.

    Usage:
        def score(b: bool, i: int, f: float) -> float:
            return i * f if b else i + f

        pp = ParameterPermutator(
            score,
            [[True, False], [1, 2, 3], [10.0, 20.0]],
            names=["b", "i", "f"],
        )
        print(pp.report())
        results = pp.run()
        print(pp.best_score, pp.to_string(pp.best_parameters))

    Args:
        func: Scoring function with a fixed number of positional
            parameters. Higher scores are better.
        candidate_sets: One non-empty sequence of values per parameter.
            Plain Python/numpy scalars are wrapped with ``Value.of``.
        names: Optional parameter names. Empty names fall back to
            ``P<index>``.
        kinds: Optional expected kind per parameter. Required when func
            takes ``*args`` or has no inspectable signature.
        config: Engine configuration dict.

    Expected kinds are resolved per position from ``kinds``, then from
    func's annotation (bool, int, float, numpy.float32, ...), then from
    the first candidate value. Every candidate is checked against it.

    Config keys:
        record_history: Keep every (combination, score) in the returned
            SweepResults (default False).
        log_every: Log an INFO progress line every N evaluations
            (default 0, disabled).
    """

    def __init__(
        self,
        func: Callable[..., Any],
        candidate_sets: Sequence[Iterable[Any]],
        names: Optional[Sequence[str]] = None,
        kinds: Optional[Sequence[Union[Kind, str]]] = None,
        config: Optional[Dict] = None,
    ):
        self._func = func
        self.config = config or {}

        params = _inspect_positional(func)
        if params is None:
            if kinds is None:
                raise ConfigurationError(
                    f"Cannot determine a fixed arity for {func!r}; pass kinds= explicitly"
                )
            arity = len(kinds)
        else:
            arity = len(params)

        if len(candidate_sets) != arity:
            raise ConfigurationError(
                f"Number of arguments does not match the number of candidate sets "
                f"(arity={arity}, candidate_sets={len(candidate_sets)})"
            )
        if kinds is not None and len(kinds) != arity:
            raise ConfigurationError(
                f"Number of kinds does not match number of arguments "
                f"(arity={arity}, kinds={len(kinds)})"
            )
        if names and len(names) != arity:
            raise ConfigurationError(
                f"Number of parameter names does not match number of arguments "
                f"(arity={arity}, names={len(names)})"
            )

        self._arity = arity
        self._names: Tuple[str, ...] = tuple(names) if names else ()
        self._candidate_sets: Tuple[CandidateSet, ...] = tuple(
            tuple(Value.coerce(v) for v in values) for values in candidate_sets
        )
        for i, cs in enumerate(self._candidate_sets):
            if not cs:
                raise ConfigurationError(
                    f"Candidate set for {self._resolve_name(i)} is empty"
                )

        self._kinds: Tuple[Kind, ...] = tuple(
            self._resolve_kind(i, kinds, params) for i in range(arity)
        )
        for i, (kind, cs) in enumerate(zip(self._kinds, self._candidate_sets)):
            for value in cs:
                if value.kind is not kind:
                    raise TypeMismatchError(
                        f"Candidate {value.format()} for {self._resolve_name(i)} is "
                        f"{value.kind.value}, expected {kind.value}"
                    )

        self._progress_callback: Optional[ProgressCallback] = None
        self._state = _INITIAL_STATE
        self._history: List[Evaluation] = []

    @classmethod
    def from_named(
        cls,
        func: Callable[..., Any],
        named_sets: Union[Mapping[str, Iterable[Any]], Sequence[Tuple[str, Iterable[Any]]]],
        **kwargs,
    ) -> "ParameterPermutator":
        """Build from (name, candidates) pairs or an ordered mapping."""
        pairs = list(named_sets.items()) if isinstance(named_sets, Mapping) else list(named_sets)
        names = [name for name, _ in pairs]
        sets = [values for _, values in pairs]
        return cls(func, sets, names=names, **kwargs)

    # ------------------------------------------------------------------
    # Configuration (immutable after construction)

    @property
    def arity(self) -> int:
        return self._arity

    @property
    def names(self) -> Tuple[str, ...]:
        """Resolved parameter names."""
        return tuple(self._resolve_name(i) for i in range(self._arity))

    @property
    def kinds(self) -> Tuple[Kind, ...]:
        return self._kinds

    @property
    def candidate_sets(self) -> Tuple[CandidateSet, ...]:
        return self._candidate_sets

    def total_permutations(self) -> int:
        """Number of combinations run() will evaluate.

        Check this before calling run() to estimate the runtime.
        """
        n = 1
        for cs in self._candidate_sets:
            n *= len(cs)
        return n

    # ------------------------------------------------------------------
    # Run state (safe to read at any time, including from signal handlers)

    @property
    def current_iteration(self) -> int:
        return self._state.iteration

    @property
    def best_score(self) -> Any:
        return self._state.best_score

    @property
    def best_parameters(self) -> Combination:
        return self._state.best_parameters

    def best_as_dict(self) -> Dict[str, Any]:
        """Best combination as {name: raw value}."""
        state = self._state
        return {
            name: value.raw
            for name, value in zip(self.names, state.best_parameters)
        }

    def results(self) -> SweepResults:
        """Snapshot of the current state as SweepResults."""
        state = self._state
        return SweepResults(
            names=self.names,
            best_score=state.best_score,
            best_parameters=state.best_parameters,
            iterations=state.iteration,
            total_permutations=self.total_permutations(),
            evaluations=list(self._history),
        )

    def set_progress_callback(self, callback: Optional[ProgressCallback]) -> "ParameterPermutator":
        """Set a callback invoked after each evaluation with this permutator.

        The callback is blocking: it runs on the thread that called run(),
        before the next evaluation starts, so a slow callback slows the
        whole sweep. Pass None to remove it.
        """
        self._progress_callback = callback
        return self

    # ------------------------------------------------------------------

    def run(self) -> SweepResults:
        """Evaluate every combination and return the results.

        Exceptions raised by the scoring function or the callback abort
        the run; the best-so-far state stays readable afterwards.
        Calling run() again starts a fresh sweep.
        """
        self._state = _INITIAL_STATE
        self._history = []
        record_history = self.config.get("record_history", False)
        log_every = self.config.get("log_every", 0)
        total = self.total_permutations()

        logger.info("Starting sweep of %d permutations\n%s", total, self.report())

        with activate(self):
            for combination in itertools.product(*self._candidate_sets):
                score = self._call(combination)

                state = self._state
                iteration = state.iteration + 1
                if score > state.best_score:
                    self._state = _State(iteration, score, combination)
                    if logger.isEnabledFor(logging.DEBUG):
                        logger.debug(
                            "New best %s at iteration %d: %s",
                            score, iteration, self.to_string(combination),
                        )
                else:
                    self._state = state._replace(iteration=iteration)

                if record_history:
                    self._history.append(Evaluation(iteration, combination, score))
                if log_every and iteration % log_every == 0:
                    logger.info(
                        "[%d/%d] best=%s", iteration, total, self._state.best_score,
                    )
                if self._progress_callback is not None:
                    self._progress_callback(self)

        logger.info(
            "Sweep finished: best=%s %s",
            self.best_score, self.to_string(self.best_parameters),
        )
        return self.results()

    def _call(self, combination: Combination) -> Any:
        """Unpack a combination into positional arguments and score it."""
        args = [value.get(kind) for value, kind in zip(combination, self._kinds)]
        return self._func(*args)

    # ------------------------------------------------------------------
    # Formatting

    def to_string(self, combination: Sequence[Any]) -> str:
        """Render a combination as ``{name0=value0, name1=value1, }``."""
        parts = [
            f"{self._resolve_name(i)}={Value.coerce(v).format()}, "
            for i, v in enumerate(combination)
        ]
        return "{" + "".join(parts) + "}"

    def report(self) -> str:
        """Parameter names with candidate-set sizes, and the total."""
        lines = ["[ParameterPermutator report]"]
        for i, cs in enumerate(self._candidate_sets):
            lines.append(f"{self._resolve_name(i)}: n={len(cs)}")
        lines.append("-" * 29)
        lines.append(f"Total number of permutations: {self.total_permutations()}")
        return "\n".join(lines)

    def _resolve_name(self, i: int) -> str:
        if not self._names or not self._names[i]:
            return f"P{i}"
        return self._names[i]

    def _resolve_kind(
        self,
        i: int,
        kinds: Optional[Sequence[Union[Kind, str]]],
        params: Optional[List[inspect.Parameter]],
    ) -> Kind:
        if kinds is not None:
            return Kind(kinds[i])
        if params is not None:
            kind = Kind.from_annotation(params[i].annotation)
            if kind is not None:
                return kind
        return self._candidate_sets[i][0].kind

    def __repr__(self) -> str:
        return (
            f"ParameterPermutator(names={list(self.names)}, "
            f"total_permutations={self.total_permutations()})"
        )
