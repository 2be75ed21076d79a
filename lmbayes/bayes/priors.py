"""Explicit weakly-informative priors for the straight-line model.

The default priors are autoscaled to the data:

- intercept (x centred at its mean): ``Normal(mean(y), 2.5 * sd(y))``
- slope: ``Normal(0, 2.5 * sd(y) / sd(x))``
- sigma: ``Exponential(rate=1 / sd(y))``

Spelling them out keeps the Bayesian fit reproducible in any PPL instead of
depending on one library's hidden defaults.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

PRIOR_SCALE = 2.5


@dataclass(frozen=True)
class NormalPrior:
    mu: float
    sigma: float

    def __post_init__(self) -> None:
        if not np.isfinite(self.mu):
            raise ValueError(f"Normal prior location must be finite, got {self.mu!r}")
        if not np.isfinite(self.sigma) or self.sigma <= 0:
            raise ValueError(f"Normal prior scale must be > 0, got {self.sigma!r}")

    @property
    def family(self) -> str:
        return "normal"

    def describe(self) -> str:
        return f"normal(location = {self.mu:.2g}, scale = {self.sigma:.2g})"


@dataclass(frozen=True)
class ExponentialPrior:
    rate: float

    def __post_init__(self) -> None:
        if not np.isfinite(self.rate) or self.rate <= 0:
            raise ValueError(f"Exponential prior rate must be > 0, got {self.rate!r}")

    @property
    def family(self) -> str:
        return "exponential"

    def describe(self) -> str:
        return f"exponential(rate = {self.rate:.2g})"


@dataclass(frozen=True)
class RegressionPriors:
    """Priors for ``intercept``, ``slope`` and residual ``sigma``.

    Attributes:
        intercept: Prior on the intercept at the mean of x.
        slope: Prior on the slope.
        sigma: Prior on the residual standard deviation.
        autoscaled: ``True`` when the scales were derived from the data.
    """

    intercept: NormalPrior
    slope: NormalPrior
    sigma: ExponentialPrior
    autoscaled: bool = False

    def items(self):
        return (
            ("intercept", self.intercept),
            ("slope", self.slope),
            ("sigma", self.sigma),
        )


def default_priors(
    x: np.ndarray, y: np.ndarray, scale: float = PRIOR_SCALE
) -> RegressionPriors:
    """Build the autoscaled weakly-informative default priors.

    Args:
        x (numpy.ndarray): Predictor values.
        y (numpy.ndarray): Response values.
        scale (float, optional): Multiplier applied to ``sd(y)``. Defaults to
            ``2.5``.

    Returns:
        RegressionPriors: Priors with ``autoscaled=True``.

    Raises:
        ValueError: If fewer than two observations are given or either
            variable has zero spread.
    """
    x_arr = np.asarray(x, dtype=float)
    y_arr = np.asarray(y, dtype=float)
    if len(x_arr) < 2 or len(y_arr) < 2:
        raise ValueError("At least two observations are needed to scale priors.")

    sd_x = float(np.std(x_arr, ddof=1))
    sd_y = float(np.std(y_arr, ddof=1))
    if sd_x <= 0 or sd_y <= 0:
        raise ValueError("Cannot autoscale priors when x or y has zero spread.")

    return RegressionPriors(
        intercept=NormalPrior(mu=float(np.mean(y_arr)), sigma=scale * sd_y),
        slope=NormalPrior(mu=0.0, sigma=scale * sd_y / sd_x),
        sigma=ExponentialPrior(rate=1.0 / sd_y),
        autoscaled=True,
    )


def prior_summary(priors: RegressionPriors) -> pd.DataFrame:
    """Tabulate the family and parameters of each prior."""
    rows = []
    for name, prior in priors.items():
        row = {
            "Parameter": name,
            "Family": prior.family,
            "Location": np.nan,
            "Scale": np.nan,
            "Rate": np.nan,
            "Description": prior.describe(),
        }
        if isinstance(prior, NormalPrior):
            row["Location"] = prior.mu
            row["Scale"] = prior.sigma
        else:
            row["Rate"] = prior.rate
        rows.append(row)
    out = pd.DataFrame(rows)
    out.attrs["autoscaled"] = priors.autoscaled
    return out
