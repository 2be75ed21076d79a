"""
A Python package comparing least-squares and Bayesian fits of a simulated line.

Simulates a straight-line dataset from a seeded generator, fits it by OLS and
by MCMC, places the interval estimates side by side, and works through Bayes'
rule for a diagnostic test.

Modules:
    - simulation: Seeded generation of the (x, y) dataset.
    - stats: Closed-form OLS with t-based confidence intervals.
    - bayes: Explicit priors, PyMC sampling and posterior summaries.
    - compare: Side-by-side confidence vs. credible intervals.
    - diagnostic: Law of total probability and Bayes' rule for test results.
    - coverage: Repeated-sampling coverage of OLS intervals.
    - reporting / output / plotting: Text report, CSV exports and figures.
"""

__version__ = "1.0.0"

from .bayes import BayesianFit, default_priors, fit_bayesian, prior_summary
from .compare import compare_fits
from .config import AnalysisConfig, DiagnosticConfig, SamplerConfig, SimulationConfig
from .coverage import ols_coverage
from .diagnostic import (
    DiagnosticTestScenario,
    natural_frequency_table,
    probability_condition_given_negative,
    probability_condition_given_positive,
    probability_positive,
)
from .simulation import SyntheticDataset, make_rng, simulate_dataset, simulate_from_config
from .stats import Interval, OLSFit, fit_ols, interval_overlap, linear_regression

__all__ = [
    # Configuration
    "AnalysisConfig",
    "DiagnosticConfig",
    "SamplerConfig",
    "SimulationConfig",
    # Simulation
    "SyntheticDataset",
    "make_rng",
    "simulate_dataset",
    "simulate_from_config",
    # Frequentist fit
    "Interval",
    "OLSFit",
    "fit_ols",
    "interval_overlap",
    "linear_regression",
    # Bayesian fit
    "BayesianFit",
    "default_priors",
    "fit_bayesian",
    "prior_summary",
    # Comparison and coverage
    "compare_fits",
    "ols_coverage",
    # Diagnostic example
    "DiagnosticTestScenario",
    "natural_frequency_table",
    "probability_condition_given_negative",
    "probability_condition_given_positive",
    "probability_positive",
]
