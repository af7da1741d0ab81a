#!/usr/bin/env python3
"""
expand_dataset.py

Orchestration script for the gene-expression sample expansion pipeline:
load -> statistics -> strong pairs -> synthesis -> duplicate audit -> export.
"""

import argparse
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from genesynth.config import load_config
from genesynth.eval.metrics import fidelity_report, ks_summary
from genesynth.eval.sizing import recommend_size
from genesynth.io.loaders import load_dataset
from genesynth.io.writers import write_expansion
from genesynth.pipeline import ExpansionResult, expand_dataset
from genesynth.utils.paths import COMBINED_NAME, EXAMPLE_CSV, OUTPUT_DIR


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Gene-expression synthetic sample pipeline")

    p.add_argument("--input", default=str(EXAMPLE_CSV))
    p.add_argument("--output", default=str(OUTPUT_DIR))
    p.add_argument("--config", default=None, help="YAML config file")

    p.add_argument("--rows", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--pair-order", choices=["matrix", "strength"], default=None)
    p.add_argument("--strict-labels", action="store_true", default=None)
    p.add_argument("--combined-name", default=COMBINED_NAME)

    # Write directly into --output instead of a timestamped run folder
    p.add_argument("--no-run-dir", action="store_true")

    return p.parse_args(argv)


def run_pipeline(args: argparse.Namespace) -> ExpansionResult:
    print("[INFO] ============================================================")
    print("[INFO] Starting synthetic sample expansion")
    print("[INFO] ============================================================")

    in_path = Path(args.input).resolve()
    outdir = Path(args.output).resolve()

    if args.no_run_dir:
        outdir_run = outdir
    else:
        run_tag = datetime.now().strftime("%Y%m%d_%H%M%S")
        outdir_run = outdir / f"run_{run_tag}"
    outdir_run.mkdir(parents=True, exist_ok=True)

    cfg = load_config(args.config).with_overrides(
        n_samples=args.rows,
        seed=args.seed,
        pair_order=args.pair_order,
        strict_labels=args.strict_labels,
    ).validate()

    print(f"[INFO] Input table     : {in_path}")
    print(f"[INFO] Output directory: {outdir_run}")
    print(f"[INFO] Samples         : {cfg.n_samples} (seed={cfg.seed}, pair order={cfg.pair_order})")

    df = load_dataset(in_path, target_col=cfg.target_col)
    rec = recommend_size(df, target_col=cfg.target_col)
    print(f"[INFO] Loaded {rec.n_samples} rows, {rec.n_features} features, {rec.n_classes} classes")
    if rec.high_dimensional and cfg.n_samples < rec.recommended_min:
        print(f"[WARNING] {rec.message()}")

    # -------------------------------------------------------------
    # Synthesis
    # -------------------------------------------------------------
    print("[INFO] ------------------------------------------------------------")
    print("[INFO] Computing statistics and generating samples")
    print("[INFO] ------------------------------------------------------------")

    result = expand_dataset(df, cfg)
    for a, b, r in result.pairs:
        print(f"[INFO] Strong pair: {a} ~ {b} (r={r:+.3f})")
    print(f"[INFO] Duplicates in combined table: {result.duplicates}")

    # -------------------------------------------------------------
    # Export + evaluation
    # -------------------------------------------------------------
    syn_path, all_path = write_expansion(df, result.synthetic, outdir_run, in_path.stem, args.combined_name)
    print(f"[INFO] Wrote synthetic table: {syn_path}")
    print(f"[INFO] Wrote combined table : {all_path}")

    report = fidelity_report(df, result.synthetic, target_col=cfg.target_col)
    print(f"[INFO] Fidelity: {ks_summary(report)}, label_l1={report['label_l1']}")

    print("[INFO] ============================================================")
    print("[INFO] Expansion completed successfully")
    print("[INFO] ============================================================")
    return result


def main() -> None:
    args = parse_args()
    run_pipeline(args)


if __name__ == "__main__":
    main()
