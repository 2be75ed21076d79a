"""Provide the closed-form least-squares fit used as the frequentist baseline.

This module supports:
- an array-level straight-line fit with standard errors and t intervals, and
- an :class:`OLSFit` result built directly from a simulated dataset.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np
import pandas as pd
from scipy.stats import t as student_t

from ..simulation import SyntheticDataset
from .intervals import Interval


def linear_regression(
    x: np.ndarray,
    y: np.ndarray,
    min_points: int = 3,
    confidence: float = 0.95,
) -> Dict[str, float]:
    """Fit an ordinary least-squares straight line to finite data pairs.

    Args:
        x (numpy.ndarray): Predictor values.
        y (numpy.ndarray): Response values.
        min_points (int, optional): Minimum number of finite paired
            observations required. Defaults to ``3``.
        confidence (float, optional): Two-sided confidence level of the
            reported half-widths. Defaults to ``0.95``.

    Returns:
        dict[str, float]: Regression diagnostics with keys ``m`` (slope),
        ``b`` (intercept), ``r2``, ``se_m``, ``se_b``, ``ci_m``, ``ci_b``
        (half-widths at ``confidence``), ``t_m``, ``t_b``, ``p_m``, ``p_b``,
        ``t_crit``, ``n``, ``dof``, ``mse`` and ``sigma_hat`` (residual
        standard error).

    Raises:
        ValueError: If there are insufficient valid points, x is constant, or
            ``confidence`` is outside ``(0, 1)``.

    Note:
        Intervals use the Student t quantile with ``n - 2`` degrees of
        freedom, so they are exact under Gaussian noise.

    References:
        Ordinary least squares linear regression.
    """
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be in (0, 1), got {confidence!r}")

    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if x_arr.shape != y_arr.shape:
        raise ValueError("x and y must have the same shape.")
    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    x_arr = x_arr[mask]
    y_arr = y_arr[mask]
    n = int(len(x_arr))
    if n < max(3, int(min_points)):
        raise ValueError("Insufficient valid data for regression.")

    xbar = float(np.mean(x_arr))
    ybar = float(np.mean(y_arr))
    ssxx = float(np.sum((x_arr - xbar) ** 2))
    if ssxx <= 0:
        raise ValueError("Predictor has no variance; slope is not identifiable.")

    m = float(np.sum((x_arr - xbar) * (y_arr - ybar)) / ssxx)
    b = ybar - m * xbar
    resid = y_arr - (m * x_arr + b)

    sse = float(np.sum(resid**2))
    sst = float(np.sum((y_arr - ybar) ** 2))
    r2 = 1.0 - sse / sst if sst > 0 else math.nan

    dof = n - 2
    mse = sse / dof
    se_m = float(np.sqrt(mse / ssxx))
    se_b = float(np.sqrt(mse * (1.0 / n + (xbar**2) / ssxx)))

    t_crit = float(student_t.ppf(0.5 + confidence / 2.0, dof))
    t_m = m / se_m if se_m > 0 else math.copysign(math.inf, m)
    t_b = b / se_b if se_b > 0 else math.copysign(math.inf, b)

    return {
        "m": m,
        "b": float(b),
        "r2": float(r2),
        "se_m": se_m,
        "se_b": se_b,
        "ci_m": t_crit * se_m,
        "ci_b": t_crit * se_b,
        "t_m": float(t_m),
        "t_b": float(t_b),
        "p_m": float(2 * student_t.sf(abs(t_m), dof)),
        "p_b": float(2 * student_t.sf(abs(t_b), dof)),
        "t_crit": t_crit,
        "confidence": float(confidence),
        "n": n,
        "dof": dof,
        "mse": float(mse),
        "sigma_hat": float(np.sqrt(mse)),
        "ssxx": ssxx,
        "xbar": xbar,
    }


@dataclass(frozen=True)
class OLSFit:
    """Frequentist fit result for ``y = intercept + slope * x``."""

    intercept: float
    slope: float
    se_intercept: float
    se_slope: float
    sigma_hat: float
    r2: float
    dof: int
    n: int
    p_intercept: float
    p_slope: float
    confidence: float
    t_crit: float

    @property
    def intercept_ci(self) -> Interval:
        half = self.t_crit * self.se_intercept
        return Interval(self.intercept - half, self.intercept + half, self.confidence)

    @property
    def slope_ci(self) -> Interval:
        half = self.t_crit * self.se_slope
        return Interval(self.slope - half, self.slope + half, self.confidence)

    def estimate(self, param: str) -> float:
        values = {
            "intercept": self.intercept,
            "slope": self.slope,
            "sigma": self.sigma_hat,
        }
        if param not in values:
            raise KeyError(f"Unknown OLS parameter '{param}'.")
        return float(values[param])

    def std_error(self, param: str) -> float:
        values = {"intercept": self.se_intercept, "slope": self.se_slope}
        if param not in values:
            raise KeyError(f"No standard error for OLS parameter '{param}'.")
        return float(values[param])

    def confidence_interval(self, param: str) -> Interval:
        if param == "intercept":
            return self.intercept_ci
        if param == "slope":
            return self.slope_ci
        raise KeyError(f"No confidence interval for OLS parameter '{param}'.")

    def predict(self, x: np.ndarray) -> np.ndarray:
        return self.intercept + self.slope * np.asarray(x, dtype=float)


def fit_ols(
    data,
    y: Optional[np.ndarray] = None,
    confidence: float = 0.95,
) -> OLSFit:
    """Fit OLS to a :class:`SyntheticDataset` or to explicit ``x``/``y`` arrays.

    Args:
        data: Either a ``SyntheticDataset`` or the predictor array.
        y (numpy.ndarray | None): Response array when ``data`` is an array.
        confidence (float, optional): Confidence level of the coefficient
            intervals. Defaults to ``0.95``.

    Returns:
        OLSFit: Coefficients, standard errors and interval accessors.
    """
    if isinstance(data, SyntheticDataset):
        x_arr, y_arr = data.x, data.y
    else:
        if y is None:
            raise ValueError("y is required when data is not a SyntheticDataset.")
        x_arr, y_arr = data, y

    res = linear_regression(x_arr, y_arr, confidence=confidence)
    return OLSFit(
        intercept=res["b"],
        slope=res["m"],
        se_intercept=res["se_b"],
        se_slope=res["se_m"],
        sigma_hat=res["sigma_hat"],
        r2=res["r2"],
        dof=int(res["dof"]),
        n=int(res["n"]),
        p_intercept=res["p_b"],
        p_slope=res["p_m"],
        confidence=float(confidence),
        t_crit=res["t_crit"],
    )


def coefficient_table(fit: OLSFit) -> pd.DataFrame:
    """Return the usual coefficient table (estimate, SE, t, p, CI bounds)."""
    rows = []
    for param in ("intercept", "slope"):
        est = fit.estimate(param)
        se = fit.std_error(param)
        ci = fit.confidence_interval(param)
        rows.append(
            {
                "Parameter": param,
                "Estimate": est,
                "Std. Error": se,
                "t value": est / se if se > 0 else math.nan,
                "p value": fit.p_intercept if param == "intercept" else fit.p_slope,
                "CI Lower": ci.lower,
                "CI Upper": ci.upper,
            }
        )
    return pd.DataFrame(rows)
