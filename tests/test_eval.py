import numpy as np
import pandas as pd

from genesynth.eval.metrics import fidelity_report, ks_summary
from genesynth.eval.sizing import recommend_size
from genesynth.eval.utility import train_on_synth_test_on_real


def test_identical_frames_report_no_drift(gene_df):
    report = fidelity_report(gene_df, gene_df)
    assert report["n_cols"] == 6
    assert ks_summary(report)["ks_max"] == 0.0
    assert report["label_l1"] == 0.0
    assert report["out_of_range"] == 0
    assert report["pairwise_corr_delta_mean"] == 0.0


def test_out_of_range_counted(gene_df):
    fake = gene_df.copy()
    fake.loc[0, "G4"] = 999
    assert fidelity_report(gene_df, fake)["out_of_range"] == 1


def test_high_dimensional_recommendation():
    wide = pd.DataFrame(np.ones((5, 20)), columns=[f"G{i}" for i in range(20)]).assign(Target=[0, 1, 0, 1, 0])
    rec = recommend_size(wide)
    assert rec.high_dimensional
    assert rec.n_features == 20
    assert rec.n_classes == 2
    assert rec.recommended_min == 10_000
    assert "high-dimensional" in rec.message()


def test_train_on_synthetic_separable():
    rng = np.random.RandomState(0)
    y = np.array([0, 1] * 50)
    X = rng.randn(100, 3) + y[:, None] * 4
    df = pd.DataFrame(X, columns=["A", "B", "C"]).assign(Target=y)
    res = train_on_synth_test_on_real(df, df.sample(frac=1.0, random_state=1), "Target")
    assert res["Accuracy"] > 0.9
    assert res["AUC"] > 0.9


def test_single_class_synthetic_reports_error(gene_df):
    res = train_on_synth_test_on_real(gene_df, gene_df[gene_df["Target"] == 0])
    assert "error" in res
