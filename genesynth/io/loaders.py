from pathlib import Path
from typing import Literal
import pandas as pd

from genesynth.errors import InvalidInputError

FileType = Literal["csv", "tsv"]

def detect_type(path: Path) -> FileType:
    ext = path.suffix.lower()
    if ext == ".csv":
        return "csv"
    if ext in (".tsv", ".txt"):
        return "tsv"
    raise InvalidInputError(f"Unsupported file type: {ext}")

def load_dataset(path: Path, target_col: str = "Target") -> pd.DataFrame:
    """
    Read a labelled expression table.

    Rows whose every cell is empty are dropped. The label column must be
    present; feature cells are left as read (non-numeric values are handled
    by the statistics stage).
    """
    path = Path(path)
    sep = "\t" if detect_type(path) == "tsv" else ","
    df = pd.read_csv(path, sep=sep, skip_blank_lines=True)
    df.columns = [str(c).strip() for c in df.columns]
    df = df.dropna(how="all").reset_index(drop=True)
    # Blank rows force float columns on read; restore integer columns once they are gone
    for c in df.columns:
        s = df[c]
        if pd.api.types.is_float_dtype(s) and s.notna().all() and (s == s.round()).all():
            df[c] = s.astype("int64")
    if df.empty:
        raise InvalidInputError(f"{path.name} contains no data rows")
    if target_col not in df.columns:
        raise InvalidInputError(f"{path.name} has no {target_col!r} column")
    return df
