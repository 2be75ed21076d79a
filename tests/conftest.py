"""Pytest configuration for repository-relative imports and a fast sampler."""

import os
import sys

import matplotlib
import numpy as np
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

matplotlib.use("Agg")

from lmbayes.bayes import PosteriorDraws, SamplerResult
from lmbayes.simulation import make_rng, simulate_dataset
from lmbayes.stats import linear_regression


class NormalApproxSampler:
    """Draw from the large-sample normal approximation around the OLS fit.

    Under flat priors this matches the posterior closely for n = 100, which is
    all the pipeline tests need; it runs in milliseconds.
    """

    def __init__(self, n_draws=4000, chains=4):
        self.n_draws = n_draws
        self.chains = chains
        self.calls = 0

    def sample(self, x, y, priors, rng):
        self.calls += 1
        res = linear_regression(x, y)
        sigma_se = res["sigma_hat"] / np.sqrt(2.0 * res["dof"])
        draws = PosteriorDraws(
            {
                "intercept": rng.normal(res["b"], res["se_b"], self.n_draws),
                "slope": rng.normal(res["m"], res["se_m"], self.n_draws),
                "sigma": np.abs(rng.normal(res["sigma_hat"], sigma_se, self.n_draws)),
            },
            chains=self.chains,
        )
        return SamplerResult(
            draws=draws,
            rhat={"intercept": 1.0, "slope": 1.0, "sigma": 1.0},
            ess={"intercept": 3900.0, "slope": 3950.0, "sigma": 3800.0},
            backend="normal-approx",
        )


@pytest.fixture
def dataset():
    return simulate_dataset(make_rng(1234), n=100, beta=1.0, sigma=2.0, seed=1234)


@pytest.fixture
def approx_sampler():
    return NormalApproxSampler()
