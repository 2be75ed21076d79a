"""
Statistical utilities for the frequentist side of the comparison.

This subpackage provides the closed-form least-squares fit and the interval
type shared with the Bayesian summaries. All functions operate on arrays and
primitive types; no sampling logic is included.

Modules:
    regression:
        Straight-line OLS with standard errors, t statistics, p-values and
        t-based confidence intervals.

    intervals:
        Ordered interval container and an overlap measure used when placing
        confidence and credible intervals side by side.

Design Principle:
    This subpackage has no dependencies on bayes/ or plotting/ modules.
"""

from .intervals import Interval, interval_overlap
from .regression import OLSFit, coefficient_table, fit_ols, linear_regression

__all__ = [
    "Interval",
    "interval_overlap",
    "OLSFit",
    "coefficient_table",
    "fit_ols",
    "linear_regression",
]
