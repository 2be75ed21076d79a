import pytest

from lmbayes.coverage import ols_coverage


def test_coverage_near_nominal_level():
    df = ols_coverage(range(400), n=100, beta=1.0, sigma=2.0, confidence=0.95)
    assert len(df) == 400
    assert 0.91 <= df.attrs["coverage"] <= 0.99
    assert (df["ci_lower"] <= df["ci_upper"]).all()


def test_coverage_rows_are_reproducible():
    a = ols_coverage([1, 2, 3])
    b = ols_coverage([1, 2, 3])
    assert a.equals(b)
    assert list(a["seed"]) == [1, 2, 3]


def test_coverage_requires_seeds():
    with pytest.raises(ValueError):
        ols_coverage([])
