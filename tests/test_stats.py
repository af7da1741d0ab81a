import numpy as np
import pandas as pd
import pytest

from genesynth.errors import InvalidInputError
from genesynth.synth.stats import compute_statistics


# Purpose: Two-row scenario from the generator's documented example
def test_two_row_statistics():
    df = pd.DataFrame([{"A": 1, "B": 2, "Target": 0}, {"A": 3, "B": 4, "Target": 1}])
    stats, matrix = compute_statistics(df)

    a = stats["A"]
    assert a.mean == 2
    assert a.min == 1
    assert a.max == 3
    assert a.median == 2
    assert a.std == pytest.approx(1.41421356, rel=1e-6)
    assert "Target" not in stats
    assert matrix["A"]["B"] == pytest.approx(1.0)


def test_mean_within_range(gene_df):
    stats, _ = compute_statistics(gene_df)
    for s in stats.values():
        assert s.min <= s.q1 <= s.median <= s.q3 <= s.max
        assert s.min <= s.mean <= s.max


def test_matrix_symmetric_with_unit_diagonal(gene_df):
    _, matrix = compute_statistics(gene_df)
    for a, row in matrix.items():
        assert row[a] == 1.0
        for b, r in row.items():
            assert matrix[b][a] == r
            assert -1.0 <= r <= 1.0


def test_matrix_matches_numpy(gene_df):
    _, matrix = compute_statistics(gene_df)
    expected = np.corrcoef(gene_df["G1"], gene_df["G2"])[0, 1]
    assert matrix["G1"]["G2"] == pytest.approx(expected, abs=1e-9)
    assert matrix["G1"]["G3"] < -0.9


def test_zero_variance_feature_correlates_to_zero(gene_df):
    df = gene_df.assign(FLAT=5)
    stats, matrix = compute_statistics(df)
    assert stats["FLAT"].std == 0.0
    assert matrix["FLAT"]["FLAT"] == 0.0
    assert matrix["FLAT"]["G1"] == 0.0


# Purpose: Non-numeric cells drop out of one feature only; mismatched lengths leave the pair absent
def test_non_numeric_values_excluded():
    df = pd.DataFrame({
        "A": [1, 2, "x", 4],
        "B": [2, 4, 6, 8],
        "Target": [0, 1, 0, 1],
    })
    stats, matrix = compute_statistics(df)
    assert stats["A"].count == 3
    assert stats["A"].mean == pytest.approx(7 / 3)
    assert stats["B"].count == 4
    assert "B" not in matrix["A"]
    assert "A" not in matrix["B"]
    assert matrix["A"]["A"] == 1.0


def test_single_value_feature_has_zero_std():
    df = pd.DataFrame({"A": [3, None], "B": [1, 2], "Target": [0, 1]})
    stats, matrix = compute_statistics(df)
    assert stats["A"].std == 0.0
    assert matrix["A"] == {}


def test_constant_float_feature_is_degenerate(gene_df):
    df = gene_df.assign(FLAT=0.1)
    stats, matrix = compute_statistics(df)
    assert stats["FLAT"].std == 0.0
    assert matrix["FLAT"]["FLAT"] == 0.0
    assert matrix["FLAT"]["G2"] == 0.0
    assert matrix["G2"]["FLAT"] == 0.0


def test_perfect_negative_correlation():
    df = pd.DataFrame({"A": [1, 2, 3], "B": [3, 2, 1], "Target": [0, 1, 0]})
    _, matrix = compute_statistics(df)
    assert matrix["A"]["B"] == pytest.approx(-1.0)


def test_empty_dataset_rejected():
    with pytest.raises(InvalidInputError):
        compute_statistics(pd.DataFrame(columns=["A", "Target"]))


def test_feature_without_numbers_rejected():
    df = pd.DataFrame({"A": ["x", "y"], "B": [1, 2], "Target": [0, 1]})
    with pytest.raises(InvalidInputError):
        compute_statistics(df)
