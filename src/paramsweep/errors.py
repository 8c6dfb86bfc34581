"""Exceptions raised by paramsweep."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Invalid sweep setup: arity or name-count mismatch, empty candidate
    set, or bad range generator arguments.

    Raised before any evaluation happens. The object being built is not
    usable.
    """


class TypeMismatchError(TypeError):
    """A Value's kind differs from the kind requested or expected.

    Values are never coerced between kinds. During run() this aborts the
    sweep and leaves the best-so-far state untouched.
    """
