"""Core value types used throughout paramsweep.

A ``Value`` is a tagged union over a small set of scalar kinds. The active
kind is always known and is never coerced: callers ask for the kind they
expect and get a ``TypeMismatchError`` otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

import numpy as np

from ..errors import TypeMismatchError


class Kind(str, Enum):
    BOOL = "BOOL"
    UINT = "UINT"
    INT = "INT"
    FLOAT = "FLOAT"    # 32-bit
    DOUBLE = "DOUBLE"  # 64-bit

    @property
    def is_integer(self) -> bool:
        return self in (Kind.UINT, Kind.INT)

    @property
    def is_floating(self) -> bool:
        return self in (Kind.FLOAT, Kind.DOUBLE)

    @property
    def dtype(self) -> type:
        """numpy dtype used when casting computed ranges to this kind."""
        return _DTYPES[self]

    @classmethod
    def from_annotation(cls, annotation: Any) -> Optional["Kind"]:
        """Map a parameter annotation to a kind.

        Accepts the annotation objects themselves and their string forms
        (as produced by ``from __future__ import annotations``). Returns
        None for anything unrecognised, including missing annotations.
        """
        if isinstance(annotation, str):
            return _ANNOTATION_NAMES.get(annotation.strip())
        if annotation is bool or annotation is np.bool_:
            return cls.BOOL
        if isinstance(annotation, type):
            if issubclass(annotation, np.unsignedinteger):
                return cls.UINT
            if annotation is int or issubclass(annotation, np.signedinteger):
                return cls.INT
            if annotation is np.float32:
                return cls.FLOAT
            if annotation is float or annotation is np.float64:
                return cls.DOUBLE
        return None


_DTYPES = {
    Kind.BOOL: np.bool_,
    Kind.UINT: np.uint64,
    Kind.INT: np.int64,
    Kind.FLOAT: np.float32,
    Kind.DOUBLE: np.float64,
}

_ANNOTATION_NAMES = {
    "bool": Kind.BOOL,
    "int": Kind.INT,
    "float": Kind.DOUBLE,
}
for _prefix in ("np.", "numpy."):
    _ANNOTATION_NAMES[_prefix + "bool_"] = Kind.BOOL
    _ANNOTATION_NAMES[_prefix + "float32"] = Kind.FLOAT
    _ANNOTATION_NAMES[_prefix + "float64"] = Kind.DOUBLE
    for _bits in (8, 16, 32, 64):
        _ANNOTATION_NAMES[f"{_prefix}uint{_bits}"] = Kind.UINT
        _ANNOTATION_NAMES[f"{_prefix}int{_bits}"] = Kind.INT
del _prefix, _bits


def _is_bool(x: Any) -> bool:
    return isinstance(x, (bool, np.bool_))


def _is_integral(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not _is_bool(x)


def _is_real(x: Any) -> bool:
    return isinstance(x, (int, float, np.integer, np.floating)) and not _is_bool(x)


@dataclass(frozen=True, slots=True)
class Value:
    """One parameter value of a fixed kind.

    Build with ``Value.of(x)`` to infer the kind from the Python/numpy type,
    or with one of the explicit constructors (``Value.int_(3)``,
    ``Value.float32(10.0)``, ...). Read back with ``get(kind)``.
    """
    kind: Kind
    raw: Any

    @classmethod
    def of(cls, x: Any) -> "Value":
        """Infer the kind from the type of x."""
        if _is_bool(x):
            return cls(Kind.BOOL, bool(x))
        if isinstance(x, np.unsignedinteger):
            return cls(Kind.UINT, int(x))
        if _is_integral(x):
            return cls(Kind.INT, int(x))
        if isinstance(x, np.float32):
            return cls(Kind.FLOAT, x)
        if isinstance(x, (float, np.float64)):
            return cls(Kind.DOUBLE, float(x))
        raise TypeMismatchError(
            f"Cannot infer a parameter kind for {x!r} ({type(x).__name__})"
        )

    @classmethod
    def coerce(cls, x: Any) -> "Value":
        """Return x unchanged if it is already a Value, else ``Value.of(x)``."""
        if isinstance(x, Value):
            return x
        return cls.of(x)

    @classmethod
    def of_kind(cls, kind: Kind, x: Any) -> "Value":
        """Build a value of an explicit kind.

        Integer kinds only accept integral input and floating kinds only
        accept real numbers; booleans are never accepted as numbers.
        """
        kind = Kind(kind)
        if kind is Kind.BOOL:
            if not _is_bool(x):
                raise TypeMismatchError(f"Expected a bool, got {x!r}")
            return cls(kind, bool(x))
        if kind.is_integer:
            if not _is_integral(x):
                raise TypeMismatchError(f"Expected an integer for {kind.value}, got {x!r}")
            if kind is Kind.UINT and x < 0:
                raise TypeMismatchError(f"UINT values must be non-negative, got {x}")
            return cls(kind, int(x))
        if not _is_real(x):
            raise TypeMismatchError(f"Expected a real number for {kind.value}, got {x!r}")
        if kind is Kind.FLOAT:
            return cls(kind, np.float32(x))
        return cls(kind, float(x))

    @classmethod
    def bool_(cls, x: Any) -> "Value":
        return cls.of_kind(Kind.BOOL, x)

    @classmethod
    def uint(cls, x: Any) -> "Value":
        return cls.of_kind(Kind.UINT, x)

    @classmethod
    def int_(cls, x: Any) -> "Value":
        return cls.of_kind(Kind.INT, x)

    @classmethod
    def float32(cls, x: Any) -> "Value":
        return cls.of_kind(Kind.FLOAT, x)

    @classmethod
    def double(cls, x: Any) -> "Value":
        return cls.of_kind(Kind.DOUBLE, x)

    def get(self, kind: Kind) -> Any:
        """Return the payload if the active kind is ``kind``."""
        if self.kind is not Kind(kind):
            raise TypeMismatchError(
                f"Value {self.format()} is {self.kind.value}, not {Kind(kind).value}"
            )
        return self.raw

    def format(self) -> str:
        """Canonical text: true/false, decimal integers, 6-decimal floats."""
        if self.kind is Kind.BOOL:
            return "true" if self.raw else "false"
        if self.kind.is_integer:
            return str(self.raw)
        return f"{float(self.raw):f}"

    def __str__(self) -> str:
        return self.format()


Combination = Tuple[Value, ...]
CandidateSet = Tuple[Value, ...]
