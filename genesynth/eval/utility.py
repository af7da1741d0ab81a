# =============================================
# Train on synthetic, test on real
# =============================================
from __future__ import annotations
from typing import Dict, Any
import numpy as np
import pandas as pd
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import roc_auc_score, accuracy_score
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import StandardScaler


def train_on_synth_test_on_real(real: pd.DataFrame, fake: pd.DataFrame, target: str = "Target") -> Dict[str, Any]:
    if target not in real or target not in fake:
        return {"error": "target must exist in both real and fake"}
    cols = [c for c in real.columns if c in fake.columns and c != target]
    Xr = real[cols].apply(pd.to_numeric, errors="coerce").fillna(0).to_numpy()
    Xf = fake[cols].apply(pd.to_numeric, errors="coerce").fillna(0).to_numpy()
    yr = real[target].to_numpy()
    yf = fake[target].to_numpy()
    if len(np.unique(yf)) < 2:
        return {"error": "synthetic labels contain a single class"}
    clf = make_pipeline(StandardScaler(), LogisticRegression(max_iter=1000))
    clf.fit(Xf, yf)
    res: Dict[str, Any] = {
        "Accuracy": float(accuracy_score(yr, clf.predict(Xr))),
        "AUC": None,
        "n_train": int(len(yf)),
        "n_test": int(len(yr)),
    }
    # AUC is only defined for a binary label present in both classes of the test set
    if len(clf.classes_) == 2 and len(np.unique(yr)) == 2:
        prob = clf.predict_proba(Xr)[:, 1]
        res["AUC"] = float(roc_auc_score(yr, prob))
    return res
