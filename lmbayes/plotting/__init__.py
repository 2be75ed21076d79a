"""
Plotting utilities for the regression comparison.

All plotting functions accept precomputed fits and do not perform any
estimation themselves.

Modules:
    fit_plots:
        Data scatter with OLS and posterior lines, a forest plot of
        confidence vs. credible intervals, and posterior histograms.

    style:
        Shared rcParams, colors, labels and save helpers.
"""

from .fit_plots import plot_fit, plot_interval_comparison, plot_posterior_densities
from .style import set_global_style

__all__ = [
    "plot_fit",
    "plot_interval_comparison",
    "plot_posterior_densities",
    "set_global_style",
]
