"""Progress callbacks for ParameterPermutator.set_progress_callback().

Both observers are plain callables taking the permutator. They only use
its read accessors.
"""

from __future__ import annotations

import shutil
import sys
import time
from typing import TYPE_CHECKING, Callable, Optional, TextIO

if TYPE_CHECKING:
    from ..engine.permutator import ParameterPermutator


class ProgressBar:
    """Single-line terminal progress bar.

    Renders ``[i/N] [rate it/s elapsed>remaining min] [best=S] [===>   ]``
    and rewrites it in place with a carriage return. The bar fills the
    terminal width unless ``width`` is given.

    Usage:
        bar = ProgressBar()
        pp.set_progress_callback(bar)

    Args:
        stream: Output stream (default sys.stdout).
        width: Total line width in columns (default: terminal width).
        additional_callback: Called with the permutator after rendering.
        clock: Monotonic time source in seconds.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        width: Optional[int] = None,
        additional_callback: Optional[Callable[["ParameterPermutator"], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._stream = stream
        self._width = width
        self._additional_callback = additional_callback
        self._clock = clock
        self._start = clock()

    def reset(self) -> None:
        """Restart the elapsed-time clock."""
        self._start = self._clock()

    def render(self, pp: "ParameterPermutator") -> str:
        i = pp.current_iteration
        total = pp.total_permutations()
        elapsed = self._clock() - self._start
        rate = i / elapsed if elapsed > 0 else 0.0
        remaining = (total - i) * elapsed / i if i else 0.0

        prefix = (
            f"\r[{i}/{total}] [{rate:.1f}it/s {elapsed / 60:.1f}>{remaining / 60:.1f} min]"
            f" [best={float(pp.best_score):.1f}] "
        )
        columns = self._width or shutil.get_terminal_size().columns
        bar_width = max(columns - len(prefix) - 2, 0)
        pos = bar_width * i // total if total else bar_width

        bar = "".join(
            "=" if k < pos else ">" if k == pos else " "
            for k in range(bar_width)
        )
        return f"{prefix}[{bar}] "

    def __call__(self, pp: "ParameterPermutator") -> None:
        stream = self._stream or sys.stdout
        stream.write(self.render(pp))
        if pp.current_iteration >= pp.total_permutations():
            stream.write("\n")
        stream.flush()
        if self._additional_callback is not None:
            self._additional_callback(pp)


class StatusLine:
    """Machine-readable progress: ``iteration=<i> total=<N> best=<S>``.

    Args:
        stream: Output stream (default sys.stdout).
        every: Emit a line every N evaluations; the final evaluation is
            always reported.
    """

    def __init__(self, stream: Optional[TextIO] = None, every: int = 1):
        if every < 1:
            raise ValueError(f"every must be at least 1, got {every}")
        self._stream = stream
        self._every = every

    def __call__(self, pp: "ParameterPermutator") -> None:
        i = pp.current_iteration
        total = pp.total_permutations()
        if i % self._every and i != total:
            return
        stream = self._stream or sys.stdout
        stream.write(f"iteration={i} total={total} best={pp.best_score}\n")
        stream.flush()
