import logging
import os
from dataclasses import replace

import main
from lmbayes.config import AnalysisConfig, SimulationConfig


def _config(tmp_path, **kwargs):
    return replace(
        AnalysisConfig(),
        simulation=SimulationConfig(seed=2024, n=60),
        output_dir=str(tmp_path),
        **kwargs,
    )


def test_run_pipeline_produces_all_outputs(tmp_path, approx_sampler, caplog):
    caplog.set_level(logging.INFO)
    results = main.run_pipeline(_config(tmp_path), sampler=approx_sampler)

    assert results["dataset"].n == 60
    assert list(results["comparison"]["Parameter"]) == ["intercept", "slope", "sigma"]
    for key in ("report", "regression_fit", "interval_comparison_plot", "posterior_densities"):
        assert os.path.exists(results["paths"][key])
    assert "OLS slope" in caplog.text


def test_run_pipeline_is_reproducible_for_a_seed(tmp_path, approx_sampler):
    cfg = _config(tmp_path, make_plots=False)
    a = main.run_pipeline(cfg, sampler=approx_sampler)
    b = main.run_pipeline(cfg, sampler=approx_sampler)
    assert a["dataset"].y.tobytes() == b["dataset"].y.tobytes()
    assert a["comparison"].equals(b["comparison"])
    assert "regression_fit" not in a["paths"]


def test_config_from_args_overrides_defaults():
    args = main._build_arg_parser().parse_args(
        ["--seed", "7", "--n", "50", "--sigma", "1.5", "--draws", "200", "--no-plots"]
    )
    cfg = main.config_from_args(args)
    assert cfg.simulation.seed == 7
    assert cfg.simulation.n == 50
    assert cfg.simulation.sigma == 1.5
    assert cfg.simulation.beta == 1.0
    assert cfg.sampler.draws == 200
    assert cfg.make_plots is False


def test_main_returns_nonzero_when_pipeline_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    code = main.main(["--n", "2", "--no-plots", "--outdir", str(tmp_path / "out")])
    assert code == 1
    assert not os.path.exists(tmp_path / "out" / "report.txt")
