import numpy as np
import pandas as pd

from genesynth.synth.duplicates import audit_duplicates, canonical_row, combine


# Purpose: Every row of a self-concatenated table is counted once
def test_self_concatenation_counts_every_row(gene_df):
    distinct = gene_df.drop_duplicates()
    assert audit_duplicates(combine(distinct, distinct)) == len(distinct)


def test_empty_synthetic_set(gene_df):
    distinct = gene_df.drop_duplicates()
    assert audit_duplicates(combine(distinct, distinct.iloc[0:0])) == 0


def test_field_order_does_not_matter():
    rows = [{"A": 1, "B": 2, "Target": 0}, {"Target": 0, "B": 2, "A": 1}]
    assert audit_duplicates(rows) == 1


def test_numeric_and_missing_values_normalised():
    rows = [
        {"A": 1, "B": np.nan},
        {"A": 1.0, "B": float("nan")},
        {"A": np.int64(1), "B": None},
        {"A": 2, "B": None},
    ]
    assert audit_duplicates(rows) == 2
    assert canonical_row({"B": np.float64(2.0), "A": 1}) == (("A", 1), ("B", 2.0))


def test_combine_aligns_columns():
    original = pd.DataFrame({"A": [1], "B": [2], "Target": [0]})
    synthetic = pd.DataFrame({"Target": [0], "B": [2], "A": [1]})
    both = combine(original, synthetic)
    assert list(both.columns) == ["A", "B", "Target"]
    assert len(both) == 2
    assert audit_duplicates(both) == 1
