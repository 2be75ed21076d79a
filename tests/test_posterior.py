import math

import numpy as np
import pytest

from lmbayes.bayes import PosteriorDraws, fit_bayesian
from lmbayes.bayes.priors import NormalPrior, ExponentialPrior, RegressionPriors
from lmbayes.simulation import make_rng
from lmbayes.stats import fit_ols, interval_overlap


def _draws():
    values = np.arange(1, 101, dtype=float)
    return PosteriorDraws({"slope": values, "sigma": values / 10.0}, chains=2)


def test_point_estimate_is_median():
    assert _draws().point_estimate("slope") == 50.5


def test_credible_interval_uses_equal_tailed_quantiles():
    draws = _draws()
    ci = draws.credible_interval("slope", 0.9)
    lo, hi = np.quantile(np.arange(1, 101, dtype=float), [0.05, 0.95])
    assert math.isclose(ci.lower, lo)
    assert math.isclose(ci.upper, hi)
    assert ci.lower <= ci.upper
    assert ci.level == 0.9


def test_mad_sd_matches_normal_sd():
    rng = make_rng(0)
    draws = PosteriorDraws({"slope": rng.normal(0.0, 3.0, 200_000)})
    assert abs(draws.mad_sd("slope") - 3.0) < 0.05
    assert abs(draws.sd("slope") - 3.0) < 0.05


def test_draws_are_read_only():
    draws = _draws()
    with pytest.raises(ValueError):
        draws["slope"][0] = 0.0


def test_source_array_mutation_does_not_leak():
    values = np.arange(10, dtype=float)
    draws = PosteriorDraws({"slope": values})
    values[0] = 99.0
    assert draws["slope"][0] == 0.0


def test_chain_by_draw_array_is_copied_before_flattening():
    values = np.arange(10, dtype=float).reshape(2, 5)
    draws = PosteriorDraws({"slope": values}, chains=2)
    values[1, 0] = 99.0
    assert draws["slope"][5] == 5.0
    assert not np.shares_memory(draws["slope"], values)


def test_unknown_parameter_raises():
    with pytest.raises(KeyError):
        _draws()["intercept"]


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        PosteriorDraws({"a": np.zeros(3), "b": np.zeros(4)})


def test_empty_draws_raise():
    with pytest.raises(ValueError):
        PosteriorDraws({})


@pytest.mark.parametrize("prob", [0.0, 1.0])
def test_bad_prob_raises(prob):
    with pytest.raises(ValueError):
        _draws().credible_interval("slope", prob)


def test_summary_has_one_row_per_parameter():
    summary = _draws().summary()
    assert list(summary["Parameter"]) == ["slope", "sigma"]
    assert (summary["CrI Lower"] <= summary["CrI Upper"]).all()


def test_fit_bayesian_uses_default_priors_and_given_sampler(dataset, approx_sampler):
    fit = fit_bayesian(dataset, sampler=approx_sampler, rng=make_rng(1))
    assert approx_sampler.calls == 1
    assert fit.priors.autoscaled
    assert fit.backend == "normal-approx"
    assert set(fit.draws.parameters) == {"intercept", "slope", "sigma"}
    assert list(fit.summary()["R-hat"]) == [1.0, 1.0, 1.0]
    assert list(fit.prior_summary()["Parameter"]) == ["intercept", "slope", "sigma"]


def test_fit_bayesian_keeps_explicit_priors(dataset, approx_sampler):
    priors = RegressionPriors(
        NormalPrior(0.0, 1.0), NormalPrior(0.0, 1.0), ExponentialPrior(1.0)
    )
    fit = fit_bayesian(dataset, priors=priors, sampler=approx_sampler, rng=make_rng(1))
    assert fit.priors is priors


def test_credible_and_confidence_intervals_overlap(dataset, approx_sampler):
    ols = fit_ols(dataset)
    bayes = fit_bayesian(dataset, sampler=approx_sampler, rng=make_rng(2))
    for param in ("intercept", "slope"):
        overlap = interval_overlap(
            ols.confidence_interval(param), bayes.credible_interval(param)
        )
        assert overlap > 0.8
        assert abs(bayes.point_estimate(param) - ols.estimate(param)) < 0.5 * ols.std_error(param)
