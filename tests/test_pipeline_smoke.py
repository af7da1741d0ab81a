"""
Smoke tests for the expansion pipeline.

These validate that the orchestration layer and the CLI run end to end on
the bundled example table.
"""

from pathlib import Path

import pandas as pd
from typer.testing import CliRunner

from genesynth.cli import app
from genesynth.config import SynthConfig
from genesynth.pipeline import expand_dataset
from genesynth.utils.paths import EXAMPLE_CSV
from scripts.expand_dataset import parse_args, run_pipeline


def test_expand_dataset(gene_df):
    result = expand_dataset(gene_df, SynthConfig(n_samples=500, seed=1))
    assert len(result.synthetic) == 500
    assert len(result.combined) == 540
    assert 0 < len(result.pairs) <= 10
    assert result.duplicates >= 0
    assert set(result.stats) == {"G1", "G2", "G3", "G4", "G5", "G6"}


def test_pipeline_writes_outputs(tmp_path):
    args = parse_args(["--output", str(tmp_path), "--rows", "200", "--seed", "3", "--no-run-dir"])
    assert Path(args.input) == EXAMPLE_CSV

    result = run_pipeline(args)

    syn = pd.read_csv(tmp_path / "Train_gene_data.synthetic.csv")
    combined = pd.read_csv(tmp_path / "expanded_genetic_data.csv")
    assert len(syn) == 200
    assert len(combined) == 200 + len(result.original)
    assert list(syn.columns) == list(combined.columns)


def test_cli_generate_and_audit(tmp_path):
    runner = CliRunner()
    res = runner.invoke(app, ["generate", str(EXAMPLE_CSV), "--outdir", str(tmp_path), "--rows", "50"])
    assert res.exit_code == 0, res.output
    syn = tmp_path / "Train_gene_data.synthetic.csv"
    assert syn.exists()

    res = runner.invoke(app, ["audit", str(EXAMPLE_CSV), str(syn)])
    assert res.exit_code == 0, res.output


def test_cli_stats_rejects_bad_config(tmp_path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("epochs: 3\n")
    res = CliRunner().invoke(app, ["stats", str(EXAMPLE_CSV), "--config", str(cfg)])
    assert res.exit_code == 1


def test_cli_audit_and_utility_reject_missing_target(tmp_path):
    bad = tmp_path / "x.csv"
    bad.write_text("A,B\n1,2\n3,4\n")
    runner = CliRunner()
    for cmd in (["audit", str(bad), str(bad)], ["utility", str(bad), str(bad)]):
        res = runner.invoke(app, cmd)
        assert res.exit_code == 1
        assert isinstance(res.exception, SystemExit)
