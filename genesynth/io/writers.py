from pathlib import Path
import pandas as pd

from genesynth.synth.duplicates import combine

def write_csv(df: pd.DataFrame, out_path: Path) -> Path:
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out_path, index=False)
    return out_path

def write_expansion(original: pd.DataFrame, synthetic: pd.DataFrame, out_dir: Path, stem: str, combined_name: str):
    """Write <stem>.synthetic.csv and the combined original + synthetic table."""

    out_dir = Path(out_dir)
    syn_path = write_csv(synthetic, out_dir / f"{stem}.synthetic.csv")
    all_path = write_csv(combine(original, synthetic), out_dir / combined_name)
    return syn_path, all_path
