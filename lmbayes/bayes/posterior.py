"""Posterior draw container and quantile-based summaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional

import numpy as np
import pandas as pd

from ..stats.intervals import Interval

PARAMETERS: tuple[str, ...] = ("intercept", "slope", "sigma")

# Consistency constant so MAD estimates the SD of a normal distribution.
MAD_TO_SD = 1.4826


def _readonly(values: Iterable[float]) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class PosteriorDraws:
    """Pooled posterior draws keyed by parameter name.

    Arrays are flattened across chains and made read-only at construction.
    """

    draws: Mapping[str, np.ndarray]
    chains: int = 1

    def __post_init__(self) -> None:
        if not self.draws:
            raise ValueError("PosteriorDraws needs at least one parameter.")
        frozen = {name: _readonly(vals) for name, vals in self.draws.items()}
        lengths = {len(v) for v in frozen.values()}
        if len(lengths) != 1:
            raise ValueError(f"All parameters need the same number of draws, got {lengths}")
        if 0 in lengths:
            raise ValueError("PosteriorDraws cannot be empty.")
        object.__setattr__(self, "draws", frozen)

    @property
    def parameters(self) -> tuple[str, ...]:
        return tuple(self.draws)

    @property
    def n_draws(self) -> int:
        return int(len(next(iter(self.draws.values()))))

    def __getitem__(self, param: str) -> np.ndarray:
        if param not in self.draws:
            raise KeyError(f"No posterior draws for parameter '{param}'.")
        return self.draws[param]

    def point_estimate(self, param: str) -> float:
        """Posterior median."""
        return float(np.median(self[param]))

    def mean(self, param: str) -> float:
        return float(np.mean(self[param]))

    def sd(self, param: str) -> float:
        values = self[param]
        return float(np.std(values, ddof=1)) if len(values) > 1 else 0.0

    def mad_sd(self, param: str) -> float:
        """Scaled median absolute deviation from the posterior median."""
        values = self[param]
        return float(MAD_TO_SD * np.median(np.abs(values - np.median(values))))

    def credible_interval(self, param: str, prob: float = 0.95) -> Interval:
        """Equal-tailed credible interval from empirical quantiles.

        Raises:
            ValueError: If ``prob`` is outside ``(0, 1)``.
        """
        if not 0.0 < prob < 1.0:
            raise ValueError(f"prob must be in (0, 1), got {prob!r}")
        tail = (1.0 - prob) / 2.0
        lower, upper = np.quantile(self[param], [tail, 1.0 - tail])
        return Interval(float(lower), float(upper), float(prob))

    def summary(self, prob: float = 0.95) -> pd.DataFrame:
        """One row per parameter with median, MAD_SD, mean, SD and interval."""
        rows = []
        for param in self.parameters:
            ci = self.credible_interval(param, prob)
            rows.append(
                {
                    "Parameter": param,
                    "Median": self.point_estimate(param),
                    "MAD_SD": self.mad_sd(param),
                    "Mean": self.mean(param),
                    "SD": self.sd(param),
                    "CrI Lower": ci.lower,
                    "CrI Upper": ci.upper,
                }
            )
        return pd.DataFrame(rows)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({name: np.array(vals) for name, vals in self.draws.items()})


@dataclass(frozen=True)
class SamplerResult:
    """What a sampler hands back: draws plus optional convergence checks."""

    draws: PosteriorDraws
    rhat: Dict[str, float] = field(default_factory=dict)
    ess: Dict[str, float] = field(default_factory=dict)
    backend: str = "unknown"
    seed: Optional[int] = None
