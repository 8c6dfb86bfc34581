"""Range generators producing candidate sets for numeric parameters.

Values are computed in float64 regardless of the output kind and cast
afterwards, so integer ranges do not accumulate quantization error. Exact
duplicates left after the cast (e.g. two steps truncating to the same
integer) are dropped, keeping first-occurrence order.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Union

import numpy as np

from ..data.types import CandidateSet, Kind, Value
from ..errors import ConfigurationError

# Absorbs float error in (end - start) / step, e.g. 0.3 / 0.1.
_STEP_EPS = 1e-9


def _infer_kind(start: Any, end: Any) -> Kind:
    start_kind = Value.of(start).kind
    end_kind = Value.of(end).kind
    if start_kind.is_integer and end_kind.is_floating:
        return end_kind
    return start_kind


def linspace_by_count(
    start: Union[int, float],
    end: Union[int, float],
    count: int,
    inclusive_endpoint: bool = True,
    kind: Optional[Union[Kind, str]] = None,
) -> CandidateSet:
    """Return up to ``count`` evenly spaced values between start and end.

    Args:
        start: First value.
        end: Last value (included when inclusive_endpoint is True).
        count: Number of points before deduplication.
        inclusive_endpoint: If False, spacing is (end - start) / count and
            end itself is excluded.
        kind: Output kind. Inferred from start/end when omitted; an
            integer start with a floating end yields the end's kind.

    Returns:
        Tuple of Values. Integer kinds may hold fewer than ``count`` values.
    """
    if count < 1:
        raise ConfigurationError(f"count must be at least 1, got {count}")

    out_kind = Kind(kind) if kind is not None else _infer_kind(start, end)
    if out_kind is Kind.BOOL:
        raise ConfigurationError("Cannot build an evenly spaced range of booleans")
    if out_kind is Kind.UINT and min(start, end) < 0:
        raise ConfigurationError(
            f"UINT range must be non-negative, got start={start}, end={end}"
        )

    calc = np.linspace(
        float(start), float(end), num=count,
        endpoint=inclusive_endpoint, dtype=np.float64,
    )
    cast = calc.astype(out_kind.dtype)

    ret = []
    seen = set()
    for x in cast:
        value = Value.of_kind(out_kind, x)
        if value in seen:
            continue
        seen.add(value)
        ret.append(value)
    return tuple(ret)


def linspace_by_step(
    start: Union[int, float],
    end: Union[int, float],
    step: float,
    inclusive_endpoint: bool = True,
    kind: Optional[Union[Kind, str]] = None,
) -> CandidateSet:
    """Evenly spaced values between start and end, given a step size.

    The count is ``floor((end - start) / step) + 1``; the values are then
    produced by linspace_by_count, so they always span start..end.
    """
    if step <= 0:
        raise ConfigurationError(f"step must be positive, got {step}")
    if end < start:
        raise ConfigurationError(f"end must not be less than start (start={start}, end={end})")

    count = math.floor((end - start) / step + _STEP_EPS) + 1
    return linspace_by_count(start, end, count, inclusive_endpoint, kind=kind)
