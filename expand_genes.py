"""
expand_genes.py

Programmatic entry point for the synthetic sample expansion pipeline.

All execution flows through scripts.expand_dataset.run_pipeline() using an
explicitly constructed argparse.Namespace, so notebooks, IDE runs and batch
jobs behave the same as the command line.
"""

from pathlib import Path
from typing import Optional

from scripts.expand_dataset import parse_args, run_pipeline


def run_expansion(
    input_path: str = "example_data/Train_gene_data.csv",
    output_dir: str = "synthetic_data",
    rows: int = 10000,
    seed: Optional[int] = 42,
    config: Optional[str] = None,
    pair_order: Optional[str] = None,
):
    """
    Run the expansion pipeline programmatically.

    Parameters
    ----------
    input_path : str
        Labelled expression table (CSV/TSV with a Target column).
    output_dir : str
        Directory where a timestamped run folder is created.
    rows : int
        Synthetic samples to generate.
    seed : int, optional
        Random seed; None keeps the configured seed.
    """

    args = parse_args([])

    args.input = str(Path(input_path).resolve())
    args.output = str(Path(output_dir).resolve())
    args.rows = rows
    args.seed = seed
    args.config = config
    args.pair_order = pair_order

    return run_pipeline(args)


if __name__ == "__main__":
    run_expansion()
