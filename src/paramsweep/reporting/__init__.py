"""Progress observers and interrupt reporting."""

from .interrupt import format_best_so_far, install_interrupt_handler
from .progress import ProgressBar, StatusLine

__all__ = [
    "ProgressBar",
    "StatusLine",
    "format_best_so_far",
    "install_interrupt_handler",
]
