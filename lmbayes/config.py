"""Define frozen configuration containers for the regression comparison.

Every tunable constant of the pipeline lives here so the runner, the tests and
the report all read the same values. Containers are immutable; build a new one
with :func:`dataclasses.replace` to override a field.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class SimulationConfig:
    """Generating parameters for the synthetic regression dataset.

    Attributes:
        seed: Integer seed for the single generator that draws x, then noise.
        n: Number of paired observations.
        beta: True slope of the generating line.
        sigma: Standard deviation of the Gaussian noise term.
        intercept: True intercept of the generating line.
        x_low: Lower bound of the uniform x distribution.
        x_high: Upper bound of the uniform x distribution.
    """

    seed: int = 1234
    n: int = 100
    beta: float = 1.0
    sigma: float = 2.0
    intercept: float = 0.0
    x_low: float = -10.0
    x_high: float = 10.0

    @property
    def x_range(self) -> Tuple[float, float]:
        return (self.x_low, self.x_high)


@dataclass(frozen=True)
class SamplerConfig:
    """Settings forwarded to the NUTS sampler.

    ``chains * draws`` posterior draws are kept after ``tune`` warmup
    iterations per chain. ``cores=1`` keeps chains sequential so a seeded run
    is repeatable.
    """

    draws: int = 1000
    tune: int = 1000
    chains: int = 4
    cores: int = 1
    target_accept: float = 0.9
    rhat_threshold: float = 1.01
    progressbar: bool = False


@dataclass(frozen=True)
class DiagnosticConfig:
    """Inputs of the diagnostic-test worked example."""

    prevalence: float = 0.10
    sensitivity: float = 0.93
    specificity: float = 0.98


@dataclass(frozen=True)
class AnalysisConfig:
    """Top-level configuration consumed by ``main.py``."""

    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    sampler: SamplerConfig = field(default_factory=SamplerConfig)
    diagnostic: DiagnosticConfig = field(default_factory=DiagnosticConfig)
    confidence: float = 0.95
    output_dir: str = "output"
    make_plots: bool = True
