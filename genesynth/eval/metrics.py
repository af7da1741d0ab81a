from typing import Dict, Any, List, Optional
import pandas as pd
import numpy as np
from scipy.stats import ks_2samp

def fidelity_report(real: pd.DataFrame, fake: pd.DataFrame, target_col: str = "Target") -> Dict[str, Any]:
    """KS per feature, range violations, label-share drift and correlation drift."""
    cols = [c for c in real.columns if c in fake.columns and c != target_col]
    out: Dict[str, Any] = {
        "n_cols": len(cols),
        "per_column": {},
        "out_of_range": 0,
        "label_l1": None,
        "pairwise_corr_delta_mean": None,
    }
    for c in cols:
        r = pd.to_numeric(real[c], errors="coerce").dropna()
        f = pd.to_numeric(fake[c], errors="coerce").dropna()
        if r.empty or f.empty:
            continue
        stat = ks_2samp(r.to_numpy(), f.to_numpy()).statistic
        out["per_column"][c] = {"ks_stat": float(stat)}
        out["out_of_range"] += int(((f < r.min()) | (f > r.max())).sum())
    if target_col in real.columns and target_col in fake.columns:
        rvc = real[target_col].value_counts(normalize=True).to_dict()
        fvc = fake[target_col].value_counts(normalize=True).to_dict()
        keys = set(rvc) | set(fvc)
        out["label_l1"] = float(sum(abs(rvc.get(k, 0) - fvc.get(k, 0)) for k in keys))
    if len(cols) >= 2:
        out["pairwise_corr_delta_mean"] = corr_delta_mean(real[cols], fake[cols])
    return out

def corr_delta_mean(real: pd.DataFrame, fake: pd.DataFrame) -> Optional[float]:
    r_corr = real.apply(pd.to_numeric, errors="coerce").corr().to_numpy()
    f_corr = fake.apply(pd.to_numeric, errors="coerce").corr().to_numpy()
    mask = np.triu(np.ones_like(r_corr, dtype=bool), k=1)
    delta = np.abs(r_corr - f_corr)[mask]
    delta = delta[np.isfinite(delta)]
    return float(delta.mean()) if delta.size else None

def ks_summary(report: Dict[str, Any]) -> Dict[str, float]:
    ks: List[float] = [v["ks_stat"] for v in report["per_column"].values()]
    if not ks:
        return {"ks_mean": float("nan"), "ks_max": float("nan")}
    return {"ks_mean": float(np.mean(ks)), "ks_max": float(np.max(ks))}
