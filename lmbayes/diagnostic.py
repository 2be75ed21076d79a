"""
Bayes' rule applied to a binary diagnostic test.

With prevalence ``p``, sensitivity ``se`` and false-positive rate
``fp = 1 - specificity``:

- Law of total probability: P(+) = se * p + fp * (1 - p)
- Bayes' rule:              P(D | +) = se * p / P(+)
- Complement:               P(D | -) = (1 - se) * p / (1 - P(+))

A zero denominator raises ``ZeroDivisionError`` rather than producing NaN.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import pandas as pd


def _check_probability(name: str, value: float) -> float:
    v = float(value)
    if not math.isfinite(v) or v < 0.0 or v > 1.0:
        raise ValueError(f"{name} must be a probability in [0, 1], got {value!r}")
    return v


@dataclass(frozen=True)
class DiagnosticTestScenario:
    prevalence: float
    sensitivity: float
    false_positive_rate: float

    def __post_init__(self) -> None:
        _check_probability("prevalence", self.prevalence)
        _check_probability("sensitivity", self.sensitivity)
        _check_probability("false_positive_rate", self.false_positive_rate)

    @classmethod
    def from_specificity(
        cls, prevalence: float, sensitivity: float, specificity: float
    ) -> "DiagnosticTestScenario":
        spec = _check_probability("specificity", specificity)
        return cls(prevalence, sensitivity, 1.0 - spec)

    @property
    def specificity(self) -> float:
        return 1.0 - self.false_positive_rate


def probability_positive(s: DiagnosticTestScenario) -> float:
    """P(+) by the law of total probability."""
    p = s.prevalence
    return s.sensitivity * p + s.false_positive_rate * (1.0 - p)


def probability_condition_given_positive(s: DiagnosticTestScenario) -> float:
    """Positive predictive value P(D | +).

    Raises:
        ZeroDivisionError: If P(+) is zero, e.g. ``se = fp = 0``.
    """
    denom = probability_positive(s)
    if denom == 0:
        raise ZeroDivisionError(
            "P(positive test) is zero; P(condition | positive) is undefined."
        )
    return s.sensitivity * s.prevalence / denom


def probability_condition_given_negative(s: DiagnosticTestScenario) -> float:
    """P(D | -), the probability of the condition despite a negative test.

    Raises:
        ZeroDivisionError: If P(-) is zero.
    """
    denom = 1.0 - probability_positive(s)
    if denom == 0:
        raise ZeroDivisionError(
            "P(negative test) is zero; P(condition | negative) is undefined."
        )
    return (1.0 - s.sensitivity) * s.prevalence / denom


def natural_frequency_table(
    s: DiagnosticTestScenario, population: int = 1000
) -> pd.DataFrame:
    """Expected counts of condition by test result in ``population`` people."""
    if population <= 0:
        raise ValueError(f"population must be positive, got {population!r}")
    with_condition = population * s.prevalence
    without_condition = population - with_condition
    table = pd.DataFrame(
        {
            "Test +": [
                with_condition * s.sensitivity,
                without_condition * s.false_positive_rate,
            ],
            "Test -": [
                with_condition * (1.0 - s.sensitivity),
                without_condition * (1.0 - s.false_positive_rate),
            ],
        },
        index=pd.Index(["Condition", "No condition"], name="Status"),
    )
    table["Total"] = table["Test +"] + table["Test -"]
    table.loc["Total"] = table.sum(axis=0)
    return table
