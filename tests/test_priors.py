import math

import numpy as np
import pytest

from lmbayes.bayes import (
    ExponentialPrior,
    NormalPrior,
    RegressionPriors,
    default_priors,
    prior_summary,
)


def test_default_priors_are_autoscaled(dataset):
    priors = default_priors(dataset.x, dataset.y)
    sd_x = np.std(dataset.x, ddof=1)
    sd_y = np.std(dataset.y, ddof=1)

    assert priors.autoscaled
    assert math.isclose(priors.intercept.mu, np.mean(dataset.y))
    assert math.isclose(priors.intercept.sigma, 2.5 * sd_y)
    assert priors.slope.mu == 0.0
    assert math.isclose(priors.slope.sigma, 2.5 * sd_y / sd_x)
    assert math.isclose(priors.sigma.rate, 1.0 / sd_y)


def test_default_priors_reject_constant_data():
    with pytest.raises(ValueError):
        default_priors(np.ones(10), np.arange(10.0))


def test_default_priors_need_two_points():
    with pytest.raises(ValueError):
        default_priors(np.array([1.0]), np.array([2.0]))


@pytest.mark.parametrize("scale", [0.0, -1.0, float("inf")])
def test_normal_prior_validates_scale(scale):
    with pytest.raises(ValueError):
        NormalPrior(0.0, scale)


def test_exponential_prior_validates_rate():
    with pytest.raises(ValueError):
        ExponentialPrior(0.0)


def test_prior_summary_table():
    priors = RegressionPriors(
        intercept=NormalPrior(0.0, 10.0),
        slope=NormalPrior(0.0, 2.5),
        sigma=ExponentialPrior(1.0),
    )
    table = prior_summary(priors)
    assert list(table["Parameter"]) == ["intercept", "slope", "sigma"]
    assert list(table["Family"]) == ["normal", "normal", "exponential"]
    assert table.loc[1, "Scale"] == 2.5
    assert table.loc[2, "Rate"] == 1.0
    assert np.isnan(table.loc[2, "Scale"])
    assert table.attrs["autoscaled"] is False
    assert "normal(location = 0, scale = 2.5)" in table.loc[1, "Description"]
