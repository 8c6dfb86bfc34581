"""Visualization functions for recorded sweeps.

All functions return a ``matplotlib.figure.Figure`` — call ``fig.savefig()``
to save, or ``plt.show()`` to display interactively.

The plots need the per-evaluation history, so run the permutator with
``config={"record_history": True}``.

matplotlib is an optional dependency. Install with::

    pip install paramsweep[plots]

Import directly::

    from paramsweep.analysis.plots import plot_score_history
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    import matplotlib.figure

    from ..optimize.results import SweepResults


def _import_matplotlib():
    """Lazy import with helpful error message."""
    try:
        import matplotlib
        import matplotlib.pyplot as plt

        return matplotlib, plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for plotting. Install with:\n"
            "  pip install paramsweep[plots]"
        ) from None


def _placeholder(ax, text: str, fontsize: int = 14) -> None:
    ax.text(
        0.5, 0.5, text, ha="center", va="center",
        transform=ax.transAxes, fontsize=fontsize,
    )


def plot_score_history(
    results: "SweepResults",
    figsize: Tuple[int, int] = (12, 5),
) -> "matplotlib.figure.Figure":
    """Plot the score of every evaluation with the running best on top.

    Args:
        results: SweepResults recorded with history.
        figsize: Figure dimensions.

    Returns:
        matplotlib Figure.
    """
    _, plt = _import_matplotlib()
    import numpy as np

    fig, ax = plt.subplots(figsize=figsize)
    ax.set_title("Score per Iteration")

    if not results.evaluations:
        _placeholder(ax, "No evaluation history")
        plt.close(fig)
        return fig

    iterations = np.array([e.iteration for e in results.evaluations])
    scores = np.array([float(e.score) for e in results.evaluations])
    running_best = np.maximum.accumulate(scores)

    ax.scatter(iterations, scores, s=8, color="steelblue", alpha=0.6, label="Score")
    ax.step(iterations, running_best, where="post", color="darkorange",
            linewidth=1.5, label="Best so far")
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Score")
    ax.legend(loc="lower right")
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    plt.close(fig)
    return fig


def plot_sweep_heatmap(
    results: "SweepResults",
    x_param: str,
    y_param: str,
    figsize: Tuple[int, int] = (10, 7),
) -> "matplotlib.figure.Figure":
    """Plot the best score over two parameters as a heatmap.

    Each cell holds the maximum score over all the other parameters.

    Args:
        results: SweepResults recorded with history.
        x_param: Parameter name for the x-axis.
        y_param: Parameter name for the y-axis.
        figsize: Figure dimensions.

    Returns:
        matplotlib Figure.
    """
    _, plt = _import_matplotlib()
    import numpy as np

    fig, ax = plt.subplots(figsize=figsize)

    if not results.evaluations:
        _placeholder(ax, "No sweep data")
        plt.close(fig)
        return fig

    names = list(results.names)
    if x_param not in names or y_param not in names:
        _placeholder(ax, f"Parameters '{x_param}'/'{y_param}' not found", fontsize=12)
        plt.close(fig)
        return fig

    xi_pos = names.index(x_param)
    yi_pos = names.index(y_param)

    # Best score per (x, y) cell
    lookup = {}
    for ev in results.evaluations:
        key = (ev.combination[xi_pos].raw, ev.combination[yi_pos].raw)
        score = float(ev.score)
        if key not in lookup or score > lookup[key]:
            lookup[key] = score

    x_vals = sorted({k[0] for k in lookup})
    y_vals = sorted({k[1] for k in lookup})

    grid = np.full((len(y_vals), len(x_vals)), np.nan)
    for xi, xv in enumerate(x_vals):
        for yi, yv in enumerate(y_vals):
            if (xv, yv) in lookup:
                grid[yi, xi] = lookup[(xv, yv)]

    im = ax.imshow(grid, cmap="viridis", aspect="auto")

    ax.set_xticks(range(len(x_vals)))
    ax.set_xticklabels([str(v) for v in x_vals], rotation=45, ha="right")
    ax.set_yticks(range(len(y_vals)))
    ax.set_yticklabels([str(v) for v in y_vals])
    ax.set_xlabel(x_param)
    ax.set_ylabel(y_param)
    ax.set_title(f"Best Score: {y_param} vs {x_param}")

    # Annotate cells
    for yi in range(len(y_vals)):
        for xi in range(len(x_vals)):
            val = grid[yi, xi]
            if not np.isnan(val):
                ax.text(xi, yi, f"{val:.2f}", ha="center", va="center",
                        fontsize=8, color="white")

    fig.colorbar(im, ax=ax, label="score")
    fig.tight_layout()
    plt.close(fig)
    return fig
