"""Place frequentist and Bayesian estimates side by side.

Nothing here combines the two fits; the table is for reading, not inference.
"""

from __future__ import annotations

import numpy as np
import pandas as pd

from .bayes.fit import BayesianFit
from .schema import COLUMNS
from .stats.intervals import interval_overlap
from .stats.regression import OLSFit

COEFFICIENTS: tuple[str, ...] = ("intercept", "slope")


def compare_fits(
    ols_fit: OLSFit, bayes_fit: BayesianFit, level: float | None = None
) -> pd.DataFrame:
    """Build the interval comparison table.

    Args:
        ols_fit (OLSFit): Least-squares fit of the dataset.
        bayes_fit (BayesianFit): Posterior fit of the same dataset.
        level (float | None, optional): Probability of the credible interval.
            Defaults to the confidence level of ``ols_fit`` so both intervals
            share a nominal level.

    Returns:
        pandas.DataFrame: One row for ``intercept`` and ``slope`` with both
        interval estimates and their overlap, plus a ``sigma`` row comparing
        the residual standard error with the posterior scale.
    """
    prob = ols_fit.confidence if level is None else float(level)
    rows = []
    for param in COEFFICIENTS:
        ci = ols_fit.confidence_interval(param)
        cri = bayes_fit.credible_interval(param, prob)
        rows.append(
            {
                COLUMNS.parameter: param,
                COLUMNS.ols_estimate: ols_fit.estimate(param),
                COLUMNS.ols_se: ols_fit.std_error(param),
                COLUMNS.ci_lower: ci.lower,
                COLUMNS.ci_upper: ci.upper,
                COLUMNS.bayes_median: bayes_fit.point_estimate(param),
                COLUMNS.bayes_mad_sd: bayes_fit.mad_sd(param),
                COLUMNS.cri_lower: cri.lower,
                COLUMNS.cri_upper: cri.upper,
                COLUMNS.overlap: interval_overlap(ci, cri),
            }
        )

    if "sigma" in bayes_fit.draws.parameters:
        cri = bayes_fit.credible_interval("sigma", prob)
        rows.append(
            {
                COLUMNS.parameter: "sigma",
                COLUMNS.ols_estimate: ols_fit.sigma_hat,
                COLUMNS.ols_se: np.nan,
                COLUMNS.ci_lower: np.nan,
                COLUMNS.ci_upper: np.nan,
                COLUMNS.bayes_median: bayes_fit.point_estimate("sigma"),
                COLUMNS.bayes_mad_sd: bayes_fit.mad_sd("sigma"),
                COLUMNS.cri_lower: cri.lower,
                COLUMNS.cri_upper: cri.upper,
                COLUMNS.overlap: np.nan,
            }
        )

    out = pd.DataFrame(rows)
    out.attrs["level"] = prob
    return out
