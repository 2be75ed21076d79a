import numpy as np
import pytest

from lmbayes.bayes import fit_bayesian
from lmbayes.compare import compare_fits
from lmbayes.schema import COLUMNS
from lmbayes.simulation import make_rng
from lmbayes.stats import fit_ols


@pytest.fixture
def fits(dataset, approx_sampler):
    return fit_ols(dataset), fit_bayesian(dataset, sampler=approx_sampler, rng=make_rng(3))


def test_comparison_rows_and_columns(fits):
    table = compare_fits(*fits)
    assert list(table[COLUMNS.parameter]) == ["intercept", "slope", "sigma"]
    for col in (
        COLUMNS.ols_estimate,
        COLUMNS.ci_lower,
        COLUMNS.ci_upper,
        COLUMNS.bayes_median,
        COLUMNS.cri_lower,
        COLUMNS.cri_upper,
        COLUMNS.overlap,
    ):
        assert col in table.columns
    assert table.attrs["level"] == 0.95


def test_comparison_intervals_are_ordered(fits):
    table = compare_fits(*fits)
    coef = table.iloc[:2]
    assert (coef[COLUMNS.ci_lower] <= coef[COLUMNS.ci_upper]).all()
    assert (table[COLUMNS.cri_lower] <= table[COLUMNS.cri_upper]).all()


def test_comparison_reports_values_unchanged(fits):
    ols, bayes = fits
    table = compare_fits(*fits).set_index(COLUMNS.parameter)
    assert table.loc["slope", COLUMNS.ols_estimate] == ols.slope
    assert table.loc["slope", COLUMNS.bayes_median] == bayes.point_estimate("slope")
    assert table.loc["sigma", COLUMNS.ols_estimate] == ols.sigma_hat
    assert np.isnan(table.loc["sigma", COLUMNS.ci_lower])


def test_comparison_level_override(fits):
    ols, bayes = fits
    table = compare_fits(ols, bayes, level=0.5).set_index(COLUMNS.parameter)
    assert table.loc["slope", COLUMNS.cri_lower] == bayes.credible_interval("slope", 0.5).lower


def test_intervals_overlap_substantially(fits):
    table = compare_fits(*fits)
    assert (table[COLUMNS.overlap].iloc[:2] > 0.8).all()
