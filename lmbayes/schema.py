"""Define standardized column names for comparison DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ComparisonColumns:
    """Container for standardized column labels.

    These labels are shared by the comparison table, the CSV exports and the
    interval plot so every artifact names a quantity the same way.

    Attributes:
        parameter: Model parameter name (``intercept``, ``slope``, ``sigma``).
        ols_estimate: Closed-form least-squares point estimate.
        ols_se: Standard error of the least-squares estimate.
        ci_lower: Lower bound of the t-based confidence interval.
        ci_upper: Upper bound of the t-based confidence interval.
        bayes_median: Posterior median.
        bayes_mad_sd: Scaled median absolute deviation of the posterior draws.
        cri_lower: Lower equal-tailed quantile of the posterior draws.
        cri_upper: Upper equal-tailed quantile of the posterior draws.
        overlap: Overlap of the two intervals as a fraction of the shorter one.
    """

    parameter: str = "Parameter"
    ols_estimate: str = "OLS Estimate"
    ols_se: str = "OLS Std. Error"
    ci_lower: str = "CI Lower"
    ci_upper: str = "CI Upper"
    bayes_median: str = "Posterior Median"
    bayes_mad_sd: str = "Posterior MAD_SD"
    cri_lower: str = "CrI Lower"
    cri_upper: str = "CrI Upper"
    overlap: str = "Interval Overlap"


COLUMNS = ComparisonColumns()
