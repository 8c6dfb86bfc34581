"""Analysis utilities for recorded sweeps.

Plots are intentionally NOT imported here to avoid requiring matplotlib.
Import them directly: ``from paramsweep.analysis.plots import plot_score_history``
"""
