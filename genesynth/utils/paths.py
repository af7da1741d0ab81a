from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
EXAMPLE_DIR = ROOT / "example_data"
EXAMPLE_CSV = EXAMPLE_DIR / "Train_gene_data.csv"
OUTPUT_DIR = ROOT / "synthetic_data"
COMBINED_NAME = "expanded_genetic_data.csv"
