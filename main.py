#!/usr/bin/env python3
"""
Main script for running the OLS vs. Bayesian regression comparison.
"""

from __future__ import annotations

# Pipeline overview (README-style):
# 1) Simulate n (x, y) pairs from one seeded generator: x ~ U(-10, 10) for all
#    n first, then Gaussian noise for all n.
# 2) Fit the line by closed-form least squares with t-based intervals.
# 3) Fit the same line by NUTS under explicit autoscaled priors.
# 4) Report point estimates and confidence vs. credible intervals side by side.
# 5) Work through Bayes' rule for a diagnostic test and export everything.

import argparse
import logging
import os
import sys
import time
from dataclasses import replace

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from lmbayes.bayes import PyMCSampler, fit_bayesian
from lmbayes.compare import compare_fits
from lmbayes.config import AnalysisConfig
from lmbayes.diagnostic import DiagnosticTestScenario
from lmbayes.output import save_outputs
from lmbayes.plotting import plot_fit, plot_interval_comparison, plot_posterior_densities
from lmbayes.reporting import render_report
from lmbayes.simulation import make_rng, simulate_dataset
from lmbayes.stats import fit_ols


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build command-line parser for overriding the default configuration."""
    defaults = AnalysisConfig()
    parser = argparse.ArgumentParser(
        description="Compare OLS and Bayesian fits of a simulated straight line."
    )
    parser.add_argument("--seed", type=int, default=defaults.simulation.seed)
    parser.add_argument("--n", type=int, default=defaults.simulation.n)
    parser.add_argument("--beta", type=float, default=defaults.simulation.beta)
    parser.add_argument("--sigma", type=float, default=defaults.simulation.sigma)
    parser.add_argument(
        "--confidence",
        type=float,
        default=defaults.confidence,
        help="Level of both the confidence and credible intervals.",
    )
    parser.add_argument("--draws", type=int, default=defaults.sampler.draws)
    parser.add_argument("--tune", type=int, default=defaults.sampler.tune)
    parser.add_argument("--chains", type=int, default=defaults.sampler.chains)
    parser.add_argument(
        "--outdir",
        default=defaults.output_dir,
        help=f"Output directory (default: {defaults.output_dir}).",
    )
    parser.add_argument(
        "--no-plots", action="store_true", help="Skip writing figures."
    )
    return parser


def config_from_args(args: argparse.Namespace) -> AnalysisConfig:
    base = AnalysisConfig()
    return replace(
        base,
        simulation=replace(
            base.simulation, seed=args.seed, n=args.n, beta=args.beta, sigma=args.sigma
        ),
        sampler=replace(
            base.sampler, draws=args.draws, tune=args.tune, chains=args.chains
        ),
        confidence=args.confidence,
        output_dir=args.outdir,
        make_plots=not args.no_plots,
    )


def run_pipeline(config: AnalysisConfig, sampler=None) -> dict:
    """Run every step once and return the in-memory results and paths."""
    sim = config.simulation
    rng = make_rng(sim.seed)

    step_start = time.time()
    dataset = simulate_dataset(
        rng,
        n=sim.n,
        beta=sim.beta,
        sigma=sim.sigma,
        x_range=sim.x_range,
        intercept=sim.intercept,
        seed=sim.seed,
    )
    logging.info(
        "Simulated %d observations (seed=%s, beta=%g, sigma=%g) in %.2f seconds",
        dataset.n,
        sim.seed,
        sim.beta,
        sim.sigma,
        time.time() - step_start,
    )

    ols_fit = fit_ols(dataset, confidence=config.confidence)
    logging.info(
        "OLS slope %.4f, %g%% CI (%.4f, %.4f)",
        ols_fit.slope,
        100 * config.confidence,
        ols_fit.slope_ci.lower,
        ols_fit.slope_ci.upper,
    )

    step_start = time.time()
    bayes_fit = fit_bayesian(
        dataset, sampler=sampler or PyMCSampler(config.sampler), rng=rng
    )
    logging.info(
        "Bayesian fit (%s, %d draws) completed in %.2f seconds",
        bayes_fit.backend,
        bayes_fit.draws.n_draws,
        time.time() - step_start,
    )

    comparison = compare_fits(ols_fit, bayes_fit, level=config.confidence)
    for _, row in comparison.iterrows():
        logging.info(
            "%s: OLS %.4f vs. posterior median %.4f",
            row["Parameter"],
            row["OLS Estimate"],
            row["Posterior Median"],
        )

    diag = config.diagnostic
    scenario = DiagnosticTestScenario.from_specificity(
        diag.prevalence, diag.sensitivity, diag.specificity
    )

    report = render_report(dataset, ols_fit, bayes_fit, comparison, scenario)
    paths = save_outputs(
        dataset,
        ols_fit,
        bayes_fit,
        comparison,
        report_text=report,
        output_dir=config.output_dir,
    )

    if config.make_plots:
        paths["regression_fit"] = plot_fit(
            dataset, ols_fit, bayes_fit, config.output_dir, rng=rng
        )
        paths["interval_comparison_plot"] = plot_interval_comparison(
            comparison, config.output_dir
        )
        paths["posterior_densities"] = plot_posterior_densities(
            bayes_fit, ols_fit, config.output_dir
        )

    return {
        "dataset": dataset,
        "ols_fit": ols_fit,
        "bayes_fit": bayes_fit,
        "comparison": comparison,
        "scenario": scenario,
        "report": report,
        "paths": paths,
    }


def main(argv: list[str] | None = None) -> int:
    """Main execution function with step-level logging."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler("regression_analysis.log", mode="w"),
        ],
    )

    args = _build_arg_parser().parse_args(argv)
    start_time = time.time()
    logging.info("Initializing regression comparison pipeline")

    try:
        config = config_from_args(args)
        results = run_pipeline(config)
    except (ValueError, ZeroDivisionError) as exc:
        logging.error("Pipeline failed: %s", exc)
        return 1

    print(results["report"])
    logging.info("Total execution time: %.2f seconds", time.time() - start_time)
    logging.info("Generated output files:")
    for name, path in results["paths"].items():
        logging.info("  - %s: %s", name, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
