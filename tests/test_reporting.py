import pandas as pd
import pytest

from lmbayes.bayes import fit_bayesian
from lmbayes.compare import compare_fits
from lmbayes.diagnostic import DiagnosticTestScenario
from lmbayes.reporting import (
    add_formatted_reporting_columns,
    format_estimate,
    render_report,
    uncertainty_decimal_places,
)
from lmbayes.simulation import make_rng
from lmbayes.stats import fit_ols


@pytest.mark.parametrize(
    "value, unc, expected",
    [
        (1.02345, 0.0712, "1.02 ± 0.07"),
        (1.02345, 0.0151, "1.023 ± 0.015"),
        (-0.2468, 0.2, "-0.2 ± 0.2"),
        (123.4, 12.0, "123 ± 12"),
    ],
)
def test_format_estimate_matches_rounded_uncertainty(value, unc, expected):
    assert format_estimate(value, unc) == expected


def test_format_estimate_without_uncertainty():
    assert format_estimate(1.23456, float("nan")) == "1.235"


def test_uncertainty_decimal_places():
    assert uncertainty_decimal_places(0.034) == 2
    assert uncertainty_decimal_places(0.15) == 2
    assert uncertainty_decimal_places(3.0) == 0


def test_formatted_columns_are_added_and_numeric_columns_kept():
    df = pd.DataFrame({"Estimate": [1.0234, 0.5], "Std. Error": [0.03, 0.12]})
    out = add_formatted_reporting_columns(df, [("Estimate", "Std. Error")])
    assert list(out["Estimate (reported)"]) == ["1.02 ± 0.03", "0.50 ± 0.12"]
    assert out["Estimate"].equals(df["Estimate"])


def test_formatting_fails_when_uncertainty_missing():
    df = pd.DataFrame({"Estimate": [1.0, 2.0], "Std. Error": [0.1, None]})
    with pytest.raises(ValueError, match="Uncertainty metadata missing/invalid"):
        add_formatted_reporting_columns(df, [("Estimate", "Std. Error")])


def test_formatting_fails_when_column_missing():
    df = pd.DataFrame({"Estimate": [1.0]})
    with pytest.raises(KeyError):
        add_formatted_reporting_columns(df, [("Estimate", "Std. Error")])


def test_render_report_sections(dataset, approx_sampler):
    ols = fit_ols(dataset)
    bayes = fit_bayesian(dataset, sampler=approx_sampler, rng=make_rng(4))
    table = compare_fits(ols, bayes)
    scenario = DiagnosticTestScenario.from_specificity(0.10, 0.93, 0.98)
    text = render_report(dataset, ols, bayes, table, scenario)

    assert "n = 100, seed = 1234" in text
    assert "Least squares" in text
    assert "Priors" in text
    assert "Interval comparison (95% confidence vs. credible)" in text
    assert "P(condition | positive) = 0.8378" in text
    assert "Expected counts per 1000" in text


def test_render_report_flags_undefined_posterior(dataset):
    ols = fit_ols(dataset)
    scenario = DiagnosticTestScenario(0.5, 0.0, 0.0)
    text = render_report(dataset, ols, None, None, scenario)
    assert "undefined" in text
    assert "Priors" not in text
