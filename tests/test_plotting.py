import os

import pandas as pd
import pytest

from lmbayes.bayes import BayesianFit, fit_bayesian
from lmbayes.compare import compare_fits
from lmbayes.plotting import plot_fit, plot_interval_comparison, plot_posterior_densities
from lmbayes.simulation import make_rng
from lmbayes.stats import fit_ols


@pytest.fixture
def fits(dataset, approx_sampler):
    return fit_ols(dataset), fit_bayesian(dataset, sampler=approx_sampler, rng=make_rng(6))


def test_plot_fit(dataset, fits, tmp_path):
    ols, bayes = fits
    out = plot_fit(dataset, ols, bayes, output_dir=str(tmp_path), rng=make_rng(0))
    assert out.endswith("regression_fit.png")
    assert os.path.exists(out)


def test_plot_fit_without_posterior(dataset, fits, tmp_path):
    out = plot_fit(dataset, fits[0], None, output_dir=str(tmp_path))
    assert os.path.exists(out)


def test_plot_interval_comparison(fits, tmp_path):
    out = plot_interval_comparison(compare_fits(*fits), output_dir=str(tmp_path))
    assert out.endswith("interval_comparison.png")
    assert os.path.exists(out)


def test_plot_interval_comparison_requires_columns(tmp_path):
    with pytest.raises(KeyError):
        plot_interval_comparison(pd.DataFrame({"Parameter": ["slope"]}), str(tmp_path))


def test_plot_posterior_densities(fits, tmp_path):
    ols, bayes = fits
    out = plot_posterior_densities(bayes, ols, output_dir=str(tmp_path))
    assert os.path.exists(out)


def test_plot_posterior_densities_uses_ols_confidence(dataset, fits, tmp_path, monkeypatch):
    _, bayes = fits
    ols = fit_ols(dataset, confidence=0.9)
    levels = []
    original = BayesianFit.credible_interval

    def recording(self, param, prob=0.95):
        levels.append(prob)
        return original(self, param, prob)

    monkeypatch.setattr(BayesianFit, "credible_interval", recording)
    plot_posterior_densities(bayes, ols, output_dir=str(tmp_path))
    assert levels == [0.9, 0.9, 0.9]
