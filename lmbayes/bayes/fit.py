"""Run the Bayesian straight-line fit on a simulated dataset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np
import pandas as pd

from ..simulation import SyntheticDataset, make_rng
from ..stats.intervals import Interval
from .posterior import PosteriorDraws
from .priors import RegressionPriors, default_priors, prior_summary
from .sampler import PosteriorSampler, PyMCSampler


@dataclass(frozen=True, eq=False)
class BayesianFit:
    """Posterior draws together with the prior and sampler diagnostics."""

    draws: PosteriorDraws
    priors: RegressionPriors
    rhat: Dict[str, float]
    ess: Dict[str, float]
    backend: str
    seed: Optional[int]

    def point_estimate(self, param: str) -> float:
        return self.draws.point_estimate(param)

    def mad_sd(self, param: str) -> float:
        return self.draws.mad_sd(param)

    def credible_interval(self, param: str, prob: float = 0.95) -> Interval:
        return self.draws.credible_interval(param, prob)

    def summary(self, prob: float = 0.95) -> pd.DataFrame:
        out = self.draws.summary(prob)
        out["R-hat"] = [self.rhat.get(p, np.nan) for p in out["Parameter"]]
        out["ESS"] = [self.ess.get(p, np.nan) for p in out["Parameter"]]
        return out

    def prior_summary(self) -> pd.DataFrame:
        return prior_summary(self.priors)


def fit_bayesian(
    dataset: SyntheticDataset,
    priors: Optional[RegressionPriors] = None,
    sampler: Optional[PosteriorSampler] = None,
    rng: Optional[np.random.Generator] = None,
) -> BayesianFit:
    """Fit the Bayesian straight-line model to ``dataset``.

    Args:
        dataset (SyntheticDataset): Observations shared with the OLS fit.
        priors (RegressionPriors | None): Explicit priors. Defaults to
            :func:`default_priors` computed from the data.
        sampler (PosteriorSampler | None): Inference backend. Defaults to
            :class:`PyMCSampler` with default settings.
        rng (numpy.random.Generator | None): Generator the sampler seed is
            drawn from. ``None`` uses an unseeded generator, so repeated calls
            give slightly different posterior summaries.

    Returns:
        BayesianFit: Draws, priors and convergence diagnostics.
    """
    if priors is None:
        priors = default_priors(dataset.x, dataset.y)
    if sampler is None:
        sampler = PyMCSampler()
    if rng is None:
        rng = make_rng(None)

    result = sampler.sample(dataset.x, dataset.y, priors, rng)
    return BayesianFit(
        draws=result.draws,
        priors=priors,
        rhat=dict(result.rhat),
        ess=dict(result.ess),
        backend=result.backend,
        seed=result.seed,
    )
