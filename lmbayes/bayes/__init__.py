"""
Bayesian side of the comparison.

Modules:
    priors:
        Explicit, data-autoscaled weakly-informative priors and a tabular
        prior summary.

    posterior:
        Read-only posterior draw container with median, MAD_SD and
        equal-tailed credible-interval accessors.

    sampler:
        ``PosteriorSampler`` protocol and the PyMC NUTS implementation.

    fit:
        ``fit_bayesian`` entry point returning a ``BayesianFit``.
"""

from .fit import BayesianFit, fit_bayesian
from .posterior import PARAMETERS, PosteriorDraws, SamplerResult
from .priors import (
    ExponentialPrior,
    NormalPrior,
    RegressionPriors,
    default_priors,
    prior_summary,
)
from .sampler import PosteriorSampler, PyMCSampler, seed_from_rng

__all__ = [
    "BayesianFit",
    "fit_bayesian",
    "PARAMETERS",
    "PosteriorDraws",
    "SamplerResult",
    "ExponentialPrior",
    "NormalPrior",
    "RegressionPriors",
    "default_priors",
    "prior_summary",
    "PosteriorSampler",
    "PyMCSampler",
    "seed_from_rng",
]
