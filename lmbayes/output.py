"""Write analysis outputs to reproducible CSV and text files.

This module is the output boundary between in-memory fits and the artifacts
left in ``output_dir``.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Optional

import pandas as pd

from .bayes.fit import BayesianFit
from .reporting import add_formatted_reporting_columns
from .simulation import SyntheticDataset
from .stats.regression import OLSFit, coefficient_table

logger = logging.getLogger(__name__)


def save_outputs(
    dataset: SyntheticDataset,
    ols_fit: OLSFit,
    bayes_fit: Optional[BayesianFit] = None,
    comparison: Optional[pd.DataFrame] = None,
    report_text: Optional[str] = None,
    output_dir: str = "output",
) -> Dict[str, str]:
    """Save the dataset, fit tables, posterior draws and report.

    Args:
        dataset (SyntheticDataset): Simulated observations.
        ols_fit (OLSFit): Least-squares fit.
        bayes_fit (BayesianFit | None): Posterior fit, if one was run.
        comparison (pandas.DataFrame | None): Output of ``compare_fits``.
        report_text (str | None): Rendered report from ``render_report``.
        output_dir (str): Directory where outputs are written.

    Returns:
        dict[str, str]: Mapping of artifact name to written path.
    """
    os.makedirs(output_dir, exist_ok=True)
    paths: Dict[str, str] = {}

    def _write_csv(name: str, df: pd.DataFrame) -> None:
        path = os.path.join(output_dir, f"{name}.csv")
        df.to_csv(path, index=False)
        paths[name] = path
        logger.info("Saved %s to %s", name, path)

    _write_csv("dataset", dataset.to_frame())
    _write_csv(
        "ols_coefficients",
        add_formatted_reporting_columns(
            coefficient_table(ols_fit), [("Estimate", "Std. Error")]
        ),
    )

    if bayes_fit is not None:
        _write_csv(
            "posterior_summary",
            add_formatted_reporting_columns(
                bayes_fit.summary(ols_fit.confidence), [("Median", "MAD_SD")]
            ),
        )
        _write_csv("prior_summary", bayes_fit.prior_summary())
        _write_csv("posterior_draws", bayes_fit.draws.to_frame())

    if comparison is not None:
        _write_csv("interval_comparison", comparison)

    if report_text is not None:
        path = os.path.join(output_dir, "report.txt")
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(report_text)
        paths["report"] = path
        logger.info("Saved report to %s", path)

    return paths
