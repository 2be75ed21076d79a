"""Sampler interface and the PyMC-backed implementation.

The Bayesian fit only needs ``(x, y, priors, rng) -> draws``. Anything that
satisfies :class:`PosteriorSampler` can stand in for PyMC, which keeps the
rest of the pipeline independent of the inference backend.
"""

from __future__ import annotations

import warnings
from typing import Dict, Optional, Protocol

import numpy as np

from ..config import SamplerConfig
from .posterior import PARAMETERS, PosteriorDraws, SamplerResult
from .priors import RegressionPriors

SEED_UPPER = 2**31 - 1


class PosteriorSampler(Protocol):
    def sample(
        self,
        x: np.ndarray,
        y: np.ndarray,
        priors: RegressionPriors,
        rng: np.random.Generator,
    ) -> SamplerResult: ...


def seed_from_rng(rng: np.random.Generator) -> int:
    """Derive a sampler seed from the run's generator."""
    return int(rng.integers(0, SEED_UPPER))


def _scalar_diagnostics(dataset, names) -> Dict[str, float]:
    return {name: float(np.asarray(dataset[name]).item()) for name in names}


class PyMCSampler:
    """Fit ``y ~ Normal(alpha_c + slope * (x - mean(x)), sigma)`` with NUTS.

    The intercept prior is placed on ``alpha_c``, the intercept at the mean of
    x. The reported ``intercept`` is the deterministic transform
    ``alpha_c - slope * mean(x)``.
    """

    def __init__(self, config: Optional[SamplerConfig] = None):
        self.config = config or SamplerConfig()

    def build_model(self, x: np.ndarray, y: np.ndarray, priors: RegressionPriors):
        import pymc as pm

        x_arr = np.asarray(x, dtype=float)
        y_arr = np.asarray(y, dtype=float)
        x_bar = float(np.mean(x_arr))

        with pm.Model() as model:
            alpha_c = pm.Normal(
                "alpha_c", mu=priors.intercept.mu, sigma=priors.intercept.sigma
            )
            slope = pm.Normal("slope", mu=priors.slope.mu, sigma=priors.slope.sigma)
            sigma = pm.Exponential("sigma", lam=priors.sigma.rate)
            pm.Deterministic("intercept", alpha_c - slope * x_bar)
            pm.Normal(
                "y_obs",
                mu=alpha_c + slope * (x_arr - x_bar),
                sigma=sigma,
                observed=y_arr,
            )
        return model

    def sample(
        self,
        x: np.ndarray,
        y: np.ndarray,
        priors: RegressionPriors,
        rng: np.random.Generator,
    ) -> SamplerResult:
        import arviz as az
        import pymc as pm

        cfg = self.config
        seed = seed_from_rng(rng)
        model = self.build_model(x, y, priors)
        with model:
            idata = pm.sample(
                draws=cfg.draws,
                tune=cfg.tune,
                chains=cfg.chains,
                cores=cfg.cores,
                target_accept=cfg.target_accept,
                random_seed=seed,
                progressbar=cfg.progressbar,
                return_inferencedata=True,
            )

        posterior = idata.posterior
        draws = PosteriorDraws(
            {name: posterior[name].values for name in PARAMETERS},
            chains=int(posterior.sizes["chain"]),
        )

        rhat: Dict[str, float] = {}
        if draws.chains > 1:
            rhat = _scalar_diagnostics(az.rhat(idata, var_names=list(PARAMETERS)), PARAMETERS)
        ess = _scalar_diagnostics(az.ess(idata, var_names=list(PARAMETERS)), PARAMETERS)

        bad = {k: v for k, v in rhat.items() if not v <= cfg.rhat_threshold}
        if bad:
            warnings.warn(
                "Chains may not have converged; R-hat above "
                f"{cfg.rhat_threshold} for {sorted(bad)}.",
                RuntimeWarning,
                stacklevel=2,
            )
        if "diverging" in idata.sample_stats:
            n_div = int(np.asarray(idata.sample_stats["diverging"]).sum())
            if n_div > 0:
                warnings.warn(
                    f"{n_div} divergent transitions after tuning.",
                    RuntimeWarning,
                    stacklevel=2,
                )

        return SamplerResult(draws=draws, rhat=rhat, ess=ess, backend="pymc", seed=seed)
