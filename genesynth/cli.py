# =============================================
# FILE: genesynth/cli.py
# =============================================
from pathlib import Path
from typing import Dict, Optional
import typer
import pandas as pd
from rich.table import Table

from .utils.logging import get_logger, console, set_verbosity
from .utils.paths import OUTPUT_DIR, COMBINED_NAME
from .config import load_config
from .errors import GenesynthError
from .io.loaders import load_dataset
from .io.writers import write_expansion
from .pipeline import expand_dataset
from .synth.stats import FeatureStats, compute_statistics
from .synth.correlation import select_strong_pairs
from .synth.duplicates import audit_duplicates, combine
from .eval.metrics import fidelity_report, ks_summary
from .eval.utility import train_on_synth_test_on_real
from .eval.sizing import SIZE_BANDS, recommend_size

app = typer.Typer(help="Correlation-aware synthetic sample generator for gene-expression tables")
log = get_logger()


def _stats_table(stats: Dict[str, FeatureStats], limit: int = 10) -> Table:
    t = Table(title=f"Statistical Summary (First {limit} Features)")
    t.add_column("Feature", style="cyan")
    for name in ("Mean", "Std Dev", "Min", "Max", "Median"):
        t.add_column(name, justify="right")
    for col, s in list(stats.items())[:limit]:
        t.add_row(col, f"{s.mean:.1f}", f"{s.std:.1f}", f"{s.min:g}", f"{s.max:g}", f"{s.median:.1f}")
    return t


def _preview_table(df: pd.DataFrame, target_col: str, rows: int = 5, cols: int = 10) -> Table:
    features = [c for c in df.columns if c != target_col][:cols]
    t = Table(title=f"Sample Preview (First {rows} Synthetic Samples)")
    for c in features:
        t.add_column(str(c))
    t.add_column("...")
    t.add_column(target_col, style="bold")
    for _, row in df.head(rows).iterrows():
        t.add_row(*[str(row[c]) for c in features], "...", str(row[target_col]))
    return t


def _fail(exc: GenesynthError) -> typer.Exit:
    log.error(str(exc))
    return typer.Exit(code=1)


@app.command("stats")
def stats(
    input_path: Path = typer.Argument(..., help="Input table (.csv or .tsv) with a Target column"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML config"),
    limit: int = typer.Option(10, help="Features shown in the summary table"),
):
    """Summarise features, list strong pairs and recommend a synthetic size."""
    try:
        cfg = load_config(config_path)
        df = load_dataset(input_path, target_col=cfg.target_col)
        feature_stats, matrix = compute_statistics(df, target_col=cfg.target_col)
        pairs = select_strong_pairs(matrix, cfg.corr_threshold, cfg.max_pairs, cfg.pair_order)
    except GenesynthError as exc:
        raise _fail(exc)

    console().print(_stats_table(feature_stats, limit))
    for a, b, r in pairs:
        console().print(f"  {a} ~ {b}: r={r:+.3f}")

    rec = recommend_size(df, target_col=cfg.target_col)
    console().rule("[bold]Dataset size recommendations[/bold]")
    for name, (lo, hi) in SIZE_BANDS.items():
        console().print(f"  {name}: {lo:,}-{hi:,}+ samples")
    console().print(
        f"  Features: {rec.n_features}  Classes: {rec.n_classes}  Original samples: {rec.n_samples}"
    )
    console().print(f"[yellow]{rec.message()}[/yellow]")


@app.command("generate")
def generate(
    input_path: Path = typer.Argument(..., help="Input table (.csv or .tsv) with a Target column"),
    output_dir: Path = typer.Option(OUTPUT_DIR, "--outdir", help="Output directory"),
    rows: Optional[int] = typer.Option(None, "--rows", help="Synthetic samples to generate"),
    seed: Optional[int] = typer.Option(None, help="Random seed"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="YAML config"),
    pair_order: Optional[str] = typer.Option(None, "--pair-order", help="matrix|strength"),
    strict_labels: Optional[bool] = typer.Option(None, "--strict-labels/--fallback-labels"),
    combined_name: str = typer.Option(COMBINED_NAME, help="File name of the combined table"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Generate synthetic samples from INPUT_PATH and export them with the originals."""
    set_verbosity(verbose)
    output_dir.mkdir(parents=True, exist_ok=True)
    try:
        cfg = load_config(config_path).with_overrides(
            n_samples=rows, seed=seed, pair_order=pair_order, strict_labels=strict_labels
        ).validate()
        df = load_dataset(input_path, target_col=cfg.target_col)
        console().rule(f"[bold]Synthesizing[/bold] {input_path.name} ({len(df)} rows -> {cfg.n_samples})")
        result = expand_dataset(df, cfg)
    except GenesynthError as exc:
        raise _fail(exc)

    syn_path, all_path = write_expansion(df, result.synthetic, output_dir, input_path.stem, combined_name)
    log.info(f"Wrote: {syn_path}")
    log.info(f"Wrote: {all_path} ({len(df) + len(result.synthetic)} rows, {result.duplicates} duplicates)")

    console().print(_preview_table(result.synthetic, cfg.target_col))
    report = fidelity_report(df, result.synthetic, target_col=cfg.target_col)
    log.info(
        f"Eval: {ks_summary(report)} label_l1={report['label_l1']} "
        f"pairwise_corr_delta_mean={report['pairwise_corr_delta_mean']}"
    )


@app.command("audit")
def audit(
    real_path: Path = typer.Argument(..., help="Original table"),
    fake_path: Path = typer.Argument(..., help="Synthetic table (from this tool)"),
):
    """Count exact whole-row duplicates across the original and synthetic tables."""
    try:
        real_df = load_dataset(real_path)
        fake_df = load_dataset(fake_path)
    except GenesynthError as exc:
        raise _fail(exc)
    n = audit_duplicates(combine(real_df, fake_df))
    console().print({"rows": len(real_df) + len(fake_df), "duplicates": n})


@app.command("utility")
def utility(
    real_path: Path = typer.Argument(..., help="Original table"),
    fake_path: Path = typer.Argument(..., help="Synthetic table (from this tool)"),
    target: str = typer.Option("Target", help="Label column"),
):
    """Train on synthetic, test on real (scaled LogReg baseline)."""
    try:
        real_df = load_dataset(real_path, target_col=target)
        fake_df = load_dataset(fake_path, target_col=target)
    except GenesynthError as exc:
        raise _fail(exc)
    res = train_on_synth_test_on_real(real_df, fake_df, target)
    console().print(res)


def main() -> None:
    app()
