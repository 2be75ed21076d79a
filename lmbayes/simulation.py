"""Generate the synthetic straight-line dataset shared by both fits.

Draw order is part of the contract: all ``n`` x-values are drawn first, then
all ``n`` noise values, from one generator. Changing the order changes every
downstream number for a given seed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from .config import SimulationConfig


@dataclass(frozen=True, eq=False)
class SyntheticDataset:
    """Paired observations and the parameters that generated them.

    Attributes:
        x: Read-only predictor array of length ``n``.
        y: Read-only response array of length ``n``.
        beta: True slope.
        sigma: True noise standard deviation.
        intercept: True intercept.
        x_range: ``(low, high)`` bounds of the uniform x distribution.
        seed: Seed of the generator when known, else ``None``.
    """

    x: np.ndarray
    y: np.ndarray
    beta: float
    sigma: float
    intercept: float = 0.0
    x_range: Tuple[float, float] = (-10.0, 10.0)
    seed: Optional[int] = None

    @property
    def n(self) -> int:
        return int(len(self.x))

    def to_frame(self) -> pd.DataFrame:
        """Return the observations as a two-column DataFrame."""
        return pd.DataFrame({"x": np.array(self.x), "y": np.array(self.y)})


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the explicit generator handle used for one run."""
    return np.random.default_rng(seed)


def _readonly(arr: np.ndarray) -> np.ndarray:
    out = np.array(arr, dtype=float)
    out.setflags(write=False)
    return out


def simulate_dataset(
    rng: np.random.Generator,
    n: int = 100,
    beta: float = 1.0,
    sigma: float = 2.0,
    x_range: Tuple[float, float] = (-10.0, 10.0),
    intercept: float = 0.0,
    seed: Optional[int] = None,
) -> SyntheticDataset:
    """Draw ``n`` observations of ``y = intercept + beta * x + noise``.

    Args:
        rng (numpy.random.Generator): Generator that supplies every draw.
        n (int, optional): Number of observations. Defaults to ``100``.
        beta (float, optional): True slope. Defaults to ``1.0``.
        sigma (float, optional): Noise standard deviation. Defaults to ``2.0``.
        x_range (tuple[float, float], optional): Uniform bounds for x.
            Defaults to ``(-10, 10)``.
        intercept (float, optional): True intercept. Defaults to ``0.0``.
        seed (int | None, optional): Seed recorded on the dataset for
            provenance only; it is not used to reseed ``rng``.

    Returns:
        SyntheticDataset: Immutable dataset with read-only arrays.

    Raises:
        ValueError: If ``n < 1``, ``sigma < 0`` or the x range is empty.
    """
    n = int(n)
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    if not np.isfinite(sigma) or sigma < 0:
        raise ValueError(f"sigma must be finite and >= 0, got {sigma!r}")
    low, high = float(x_range[0]), float(x_range[1])
    if not low < high:
        raise ValueError(f"x_range must satisfy low < high, got {x_range!r}")

    x = rng.uniform(low, high, size=n)
    noise = rng.normal(0.0, sigma, size=n)
    y = intercept + beta * x + noise

    return SyntheticDataset(
        x=_readonly(x),
        y=_readonly(y),
        beta=float(beta),
        sigma=float(sigma),
        intercept=float(intercept),
        x_range=(low, high),
        seed=seed,
    )


def simulate_from_config(config: SimulationConfig) -> SyntheticDataset:
    """Build a fresh generator from ``config.seed`` and simulate one dataset."""
    rng = make_rng(config.seed)
    return simulate_dataset(
        rng,
        n=config.n,
        beta=config.beta,
        sigma=config.sigma,
        x_range=config.x_range,
        intercept=config.intercept,
        seed=config.seed,
    )
