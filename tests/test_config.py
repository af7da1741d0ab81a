import pytest

from genesynth.config import SynthConfig, load_config
from genesynth.errors import InvalidInputError


def test_defaults_without_file():
    cfg = load_config(None)
    assert cfg == SynthConfig()
    assert cfg.corr_threshold == 0.5
    assert cfg.max_pairs == 10


def test_yaml_section_overrides(tmp_path):
    path = tmp_path / "synth.yaml"
    path.write_text("synth:\n  n_samples: 20000\n  pair_order: strength\n  seed: 7\n")
    cfg = load_config(path)
    assert cfg.n_samples == 20000
    assert cfg.pair_order == "strength"
    assert cfg.seed == 7
    assert cfg.sample_fraction == 0.3


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "synth.yaml"
    path.write_text("n_samples: 10\nepochs: 300\n")
    with pytest.raises(InvalidInputError):
        load_config(path)


@pytest.mark.parametrize("overrides", [
    {"n_samples": 0},
    {"sample_fraction": 1.5},
    {"pair_order": "random"},
    {"max_pairs": -1},
    {"chunk_size": 0},
])
def test_invalid_values_rejected(overrides):
    with pytest.raises(InvalidInputError):
        SynthConfig(**overrides).validate()


def test_none_overrides_are_ignored():
    cfg = SynthConfig(seed=3).with_overrides(seed=None, n_samples=50)
    assert cfg.seed == 3
    assert cfg.n_samples == 50
