"""Figures for the OLS vs. Bayesian comparison.

All functions receive precomputed fits and only render them.
"""

from __future__ import annotations

import os

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..bayes.fit import BayesianFit
from ..schema import COLUMNS
from ..simulation import SyntheticDataset
from ..stats.regression import OLSFit
from .style import (
    COLORS,
    PARAM_LABELS,
    STYLE,
    clean_axis,
    fig_size,
    save_figure,
    set_axis_labels,
    set_global_style,
)

MAX_DRAW_LINES = 100


def _ols_mean_band(ols_fit: OLSFit, dataset: SyntheticDataset, x_grid: np.ndarray):
    """Pointwise confidence band for the fitted mean line."""
    x = np.asarray(dataset.x, dtype=float)
    xbar = float(np.mean(x))
    ssxx = float(np.sum((x - xbar) ** 2))
    se_fit = ols_fit.sigma_hat * np.sqrt(1.0 / ols_fit.n + (x_grid - xbar) ** 2 / ssxx)
    y_hat = ols_fit.predict(x_grid)
    half = ols_fit.t_crit * se_fit
    return y_hat - half, y_hat + half


def plot_fit(
    dataset: SyntheticDataset,
    ols_fit: OLSFit,
    bayes_fit: BayesianFit | None = None,
    output_dir: str = "output",
    rng: np.random.Generator | None = None,
) -> str:
    """Scatter the data with the OLS line, its band and posterior lines.

    ``rng`` picks which posterior draws are drawn as thin lines; without one
    the first draws are used.
    """
    set_global_style()
    fig, ax = plt.subplots(figsize=fig_size("single"))

    ax.scatter(
        dataset.x,
        dataset.y,
        s=18,
        color=COLORS["data"],
        alpha=STYLE.ALPHA_POINTS,
        label="Simulated data",
    )

    x_grid = np.linspace(dataset.x_range[0], dataset.x_range[1], 200)
    lo, hi = _ols_mean_band(ols_fit, dataset, x_grid)
    ax.fill_between(
        x_grid, lo, hi, color=COLORS["ols"], alpha=STYLE.ALPHA_BAND, linewidth=0
    )
    ax.plot(
        x_grid,
        ols_fit.predict(x_grid),
        color=COLORS["ols"],
        label=f"OLS fit ({100 * ols_fit.confidence:g}% CI band)",
    )
    ax.plot(
        x_grid,
        dataset.intercept + dataset.beta * x_grid,
        color=COLORS["truth"],
        linestyle="--",
        linewidth=STYLE.LINEWIDTH_THIN,
        label="True line",
    )

    if bayes_fit is not None:
        intercepts = bayes_fit.draws["intercept"]
        slopes = bayes_fit.draws["slope"]
        n_lines = min(MAX_DRAW_LINES, len(slopes))
        if rng is None:
            idx = np.arange(n_lines)
        else:
            idx = rng.choice(len(slopes), size=n_lines, replace=False)
        for i in idx:
            ax.plot(
                x_grid,
                intercepts[i] + slopes[i] * x_grid,
                color=COLORS["bayes"],
                alpha=STYLE.ALPHA_DRAWS,
                linewidth=0.8,
            )
        ax.plot(
            x_grid,
            bayes_fit.point_estimate("intercept")
            + bayes_fit.point_estimate("slope") * x_grid,
            color=COLORS["bayes"],
            linestyle=":",
            label="Posterior median line",
        )

    set_axis_labels(ax, x=r"$x$", y=r"$y$")
    clean_axis(ax, grid_axis="both")
    ax.legend(loc="upper left")
    return save_figure(fig, os.path.join(output_dir, "regression_fit"))


def plot_interval_comparison(
    comparison: pd.DataFrame, output_dir: str = "output"
) -> str:
    """Forest plot of confidence vs. credible intervals per coefficient.

    Raises:
        KeyError: If the comparison table lacks required columns.
    """
    required = [
        COLUMNS.parameter,
        COLUMNS.ols_estimate,
        COLUMNS.ci_lower,
        COLUMNS.ci_upper,
        COLUMNS.bayes_median,
        COLUMNS.cri_lower,
        COLUMNS.cri_upper,
    ]
    missing = [c for c in required if c not in comparison.columns]
    if missing:
        raise KeyError(f"Comparison table is missing columns: {missing}")

    rows = comparison.dropna(subset=[COLUMNS.ci_lower, COLUMNS.ci_upper])
    if rows.empty:
        raise ValueError("No parameters with both interval types to plot.")

    set_global_style()
    fig, axes = plt.subplots(1, len(rows), figsize=fig_size("wide"), squeeze=False)
    for ax, (_, row) in zip(axes[0], rows.iterrows()):
        est = row[COLUMNS.ols_estimate]
        med = row[COLUMNS.bayes_median]
        ax.errorbar(
            [est],
            [1],
            xerr=[[est - row[COLUMNS.ci_lower]], [row[COLUMNS.ci_upper] - est]],
            fmt="o",
            color=COLORS["ols"],
            label="OLS confidence interval",
        )
        ax.errorbar(
            [med],
            [0],
            xerr=[[med - row[COLUMNS.cri_lower]], [row[COLUMNS.cri_upper] - med]],
            fmt="s",
            color=COLORS["bayes"],
            label="Bayesian credible interval",
        )
        param = str(row[COLUMNS.parameter])
        set_axis_labels(ax, x=PARAM_LABELS.get(param, param))
        clean_axis(ax, grid_axis="x")
        ax.set_yticks([0, 1])
        ax.set_yticklabels(["Bayes", "OLS"])
        ax.set_ylim(-0.75, 1.75)

    handles, labels = axes[0][0].get_legend_handles_labels()
    fig.legend(handles, labels, loc="upper center", ncol=2)
    fig.tight_layout(rect=(0, 0, 1, 0.88))
    return save_figure(fig, os.path.join(output_dir, "interval_comparison"))


def plot_posterior_densities(
    bayes_fit: BayesianFit,
    ols_fit: OLSFit | None = None,
    output_dir: str = "output",
    bins: int = 40,
) -> str:
    """Histogram of each parameter's draws with the OLS estimate marked.

    Credible bounds use ``ols_fit.confidence`` when a fit is given, else 0.95.
    """
    set_global_style()
    level = ols_fit.confidence if ols_fit is not None else 0.95
    params = bayes_fit.draws.parameters
    fig, axes = plt.subplots(1, len(params), figsize=fig_size("wide"), squeeze=False)
    for ax, param in zip(axes[0], params):
        ax.hist(
            bayes_fit.draws[param],
            bins=bins,
            density=True,
            color=COLORS["bayes"],
            alpha=0.6,
        )
        cri = bayes_fit.credible_interval(param, level)
        for bound in cri.as_tuple():
            ax.axvline(bound, color=COLORS["bayes"], linestyle=":", linewidth=1.0)
        if ols_fit is not None:
            ax.axvline(
                ols_fit.estimate(param),
                color=COLORS["ols"],
                linewidth=STYLE.LINEWIDTH_THIN,
            )
        set_axis_labels(ax, x=PARAM_LABELS.get(param, param))
        clean_axis(ax, grid_axis="none")
    set_axis_labels(axes[0][0], y="Posterior density")
    fig.tight_layout()
    return save_figure(fig, os.path.join(output_dir, "posterior_densities"))
