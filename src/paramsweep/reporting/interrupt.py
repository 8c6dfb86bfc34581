"""Report the best-so-far result when a sweep is interrupted."""

from __future__ import annotations

import signal
import sys
from typing import Any, Optional, TextIO

from ..engine.active import active_permutator
from ..engine.permutator import ParameterPermutator


def format_best_so_far(pp: Optional[ParameterPermutator]) -> str:
    """Text block with the iteration count, best score and parameters."""
    if pp is None:
        return "[No sweep running]"
    return "\n".join([
        "[Printing best parameters before exit]",
        f"iteration: {pp.current_iteration}/{pp.total_permutations()}",
        f"best score: {pp.best_score}",
        f"best parameters: {pp.to_string(pp.best_parameters)}",
    ])


def install_interrupt_handler(
    stream: Optional[TextIO] = None,
    exit_code: Optional[int] = None,
) -> Any:
    """Install a SIGINT handler that prints the running sweep's best result.

    The handler reads the active permutator (set only while run() is
    executing), prints its state and raises SystemExit. The exit code
    defaults to the signal number.

    Returns:
        The previously installed SIGINT handler.
    """

    def _handler(signum, frame):
        out = stream or sys.stdout
        out.write("\n" + format_best_so_far(active_permutator()) + "\n")
        out.flush()
        raise SystemExit(exit_code if exit_code is not None else signum)

    return signal.signal(signal.SIGINT, _handler)
