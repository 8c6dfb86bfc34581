"""Process-wide handle to the permutator whose run() is in progress.

Signal handlers cannot be handed arguments, so they look the engine up
here. Readers must only use the engine's accessors; the handle is set and
cleared by ``ParameterPermutator.run()`` alone.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from .permutator import ParameterPermutator

_active: Optional["ParameterPermutator"] = None


def active_permutator() -> Optional["ParameterPermutator"]:
    """Return the running permutator, or None outside of run()."""
    return _active


@contextmanager
def activate(permutator: "ParameterPermutator") -> Iterator[None]:
    """Mark ``permutator`` active for the duration of the block."""
    global _active
    previous = _active
    _active = permutator
    try:
        yield
    finally:
        _active = previous
