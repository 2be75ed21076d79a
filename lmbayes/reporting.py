"""Format and validate result tables for the plain-text analysis report.

This module is used after fitting to present estimates with precision matched
to their uncertainty and to assemble the human-readable report.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from .bayes.fit import BayesianFit
from .diagnostic import (
    DiagnosticTestScenario,
    natural_frequency_table,
    probability_condition_given_positive,
    probability_positive,
)
from .simulation import SyntheticDataset
from .stats.regression import OLSFit, coefficient_table


def _round_uncertainty(uncertainty: float) -> tuple[float, int]:
    """Round an uncertainty to 1 significant figure (2 if the leading digit is 1).

    Args:
        uncertainty (float): Standard error or other spread measure.

    Returns:
        tuple[float, int]: Rounded uncertainty and decimal places used.

    Raises:
        ValueError: If uncertainty is non-finite or non-positive.
    """
    u = float(uncertainty)
    if not np.isfinite(u) or u <= 0:
        raise ValueError(f"Uncertainty must be finite and > 0, got {uncertainty!r}")

    exponent = int(np.floor(np.log10(abs(u))))
    leading = abs(u) / (10**exponent)
    sig_figs = 2 if 1.0 <= leading < 2.0 else 1
    ndigits = sig_figs - 1 - exponent
    rounded_u = round(abs(u), ndigits)
    return float(rounded_u), int(max(0, ndigits))


def uncertainty_decimal_places(uncertainty: float) -> int:
    """Return decimal places implied by the rounded uncertainty.

    Args:
        uncertainty (float): Absolute uncertainty for a reported value.

    Returns:
        int: Number of decimal places that the paired value should use.
    """
    rounded_u, ndigits = _round_uncertainty(uncertainty)
    if ndigits <= 0:
        return 0
    txt = f"{rounded_u:.12f}".rstrip("0")
    if "." not in txt:
        return 0
    return len(txt.split(".", 1)[1])


def format_estimate(value: float, uncertainty: float) -> str:
    """Return ``"value ± uncertainty"`` with matched precision.

    Falls back to four significant figures for the value when the uncertainty
    is missing or non-positive.
    """
    u = float(uncertainty) if uncertainty is not None else np.nan
    if not np.isfinite(u) or u <= 0:
        return f"{float(value):.4g}"
    dp = uncertainty_decimal_places(u)
    rounded_u, _ = _round_uncertainty(u)
    return f"{float(value):.{dp}f} ± {rounded_u:.{dp}f}"


def validate_uncertainty_columns(
    df: pd.DataFrame,
    value_uncertainty_pairs: Iterable[tuple[str, str]],
) -> None:
    """Validate value/uncertainty column pairs before formatting.

    Raises:
        KeyError: If any required value or uncertainty column is missing.
        ValueError: If a finite value exists in a row where uncertainty is
            missing, non-finite, or non-positive.
    """
    for value_col, unc_col in value_uncertainty_pairs:
        if value_col not in df.columns:
            raise KeyError(f"Missing value column '{value_col}' for reporting format.")
        if unc_col not in df.columns:
            raise KeyError(
                f"Missing uncertainty column '{unc_col}' required for '{value_col}'."
            )

        values = pd.to_numeric(df[value_col], errors="coerce")
        uncs = pd.to_numeric(df[unc_col], errors="coerce")
        missing_mask = values.notna() & (~np.isfinite(uncs) | (uncs <= 0))

        if bool(missing_mask.any()):
            bad_rows = list(df.index[missing_mask][:5])
            raise ValueError(
                "Uncertainty metadata missing/invalid for values in "
                f"'{value_col}' (uncertainty '{unc_col}'). "
                f"Example row indices: {bad_rows}."
            )


def add_formatted_reporting_columns(
    df: pd.DataFrame,
    value_uncertainty_pairs: Iterable[tuple[str, str]],
    suffix: str = " (reported)",
) -> pd.DataFrame:
    """Add ``"value ± uncertainty"`` string columns next to numeric ones.

    Rows whose value is missing get an empty string. Original numeric columns
    are preserved.
    """
    pairs = list(value_uncertainty_pairs)
    out = df.copy()
    validate_uncertainty_columns(out, pairs)

    for value_col, unc_col in pairs:
        values = pd.to_numeric(out[value_col], errors="coerce")
        uncs = pd.to_numeric(out[unc_col], errors="coerce")
        out[f"{value_col}{suffix}"] = [
            format_estimate(v, u) if np.isfinite(v) else ""
            for v, u in zip(values, uncs)
        ]
    return out


def _heading(title: str) -> list[str]:
    return [title, "-" * len(title)]


def _format_table(df: pd.DataFrame, float_format: str = "{:.4f}") -> str:
    return df.to_string(
        index=False,
        float_format=lambda v: float_format.format(v),
        na_rep="-",
    )


def render_report(
    dataset: SyntheticDataset,
    ols_fit: OLSFit,
    bayes_fit: BayesianFit | None,
    comparison: pd.DataFrame | None,
    scenario: DiagnosticTestScenario | None = None,
) -> str:
    """Assemble the plain-text report for one pipeline run."""
    level_pct = f"{100 * ols_fit.confidence:g}%"
    title = "Simulated linear regression: OLS vs. Bayesian"
    lines = [
        title,
        "=" * len(title),
        "",
        *_heading("Data"),
        f"n = {dataset.n}, seed = {dataset.seed}",
        f"y = {dataset.intercept:g} + {dataset.beta:g} * x + N(0, {dataset.sigma:g}^2), "
        f"x ~ U({dataset.x_range[0]:g}, {dataset.x_range[1]:g})",
        "",
        *_heading("Least squares"),
        _format_table(coefficient_table(ols_fit)),
        f"Residual standard error: {ols_fit.sigma_hat:.4f} on {ols_fit.dof} degrees of freedom",
        f"R-squared: {ols_fit.r2:.4f}",
        f"slope = {format_estimate(ols_fit.slope, ols_fit.se_slope)}",
        f"intercept = {format_estimate(ols_fit.intercept, ols_fit.se_intercept)}",
    ]

    if bayes_fit is not None:
        lines += [
            "",
            *_heading("Priors"),
            _format_table(bayes_fit.prior_summary()[["Parameter", "Description"]]),
            "",
            *_heading(
                f"Posterior ({bayes_fit.backend}, {bayes_fit.draws.n_draws} draws, "
                f"{bayes_fit.draws.chains} chains)"
            ),
            _format_table(bayes_fit.summary(ols_fit.confidence)),
        ]

    if comparison is not None:
        lines += [
            "",
            *_heading(f"Interval comparison ({level_pct} confidence vs. credible)"),
            _format_table(comparison),
        ]

    if scenario is not None:
        lines += [
            "",
            *_heading("Diagnostic test example"),
            f"prevalence = {scenario.prevalence:g}, sensitivity = {scenario.sensitivity:g}, "
            f"specificity = {scenario.specificity:g}",
            f"P(positive) = {probability_positive(scenario):.4f}",
        ]
        try:
            ppv = probability_condition_given_positive(scenario)
            lines.append(f"P(condition | positive) = {ppv:.4f}")
        except ZeroDivisionError as exc:
            lines.append(f"P(condition | positive) undefined: {exc}")
        lines += [
            "",
            "Expected counts per 1000",
            natural_frequency_table(scenario).to_string(float_format=lambda v: f"{v:.1f}"),
        ]

    return "\n".join(lines) + "\n"
