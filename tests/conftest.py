import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def gene_df():
    """40 rows, 6 integer genes: G2 tracks G1, G3 mirrors G1, the rest independent."""
    rng = np.random.RandomState(7)
    g1 = rng.randint(50, 150, size=40)
    return pd.DataFrame({
        "G1": g1,
        "G2": 2 * g1 + rng.randint(-5, 6, size=40),
        "G3": 300 - g1 + rng.randint(-3, 4, size=40),
        "G4": rng.randint(0, 20, size=40),
        "G5": rng.randint(1000, 1100, size=40),
        "G6": rng.randint(5, 9, size=40),
        "Target": np.array([0] * 28 + [1] * 12),
    })
