import pytest

from typeahead.config import EngineConfig, load_config


def test_defaults():
    config = load_config()
    assert config == EngineConfig()
    assert config.max_edits == 5
    assert config.top_k == 1
    assert config.selection_boost == 5


def test_load_yaml_overrides_and_ignores_unknown(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("engine:\n  max_edits: 2\n  top_k: 3\n  colour: blue\n")
    config = load_config(path)
    assert config.max_edits == 2
    assert config.top_k == 3
    assert config.alpha == 1.0


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("")
    assert load_config(path) == EngineConfig()


def test_invalid_values_rejected():
    with pytest.raises(ValueError):
        EngineConfig(top_k=0)
    with pytest.raises(ValueError):
        EngineConfig(max_edits=-1)


def test_negative_boosts_rejected():
    with pytest.raises(ValueError):
        EngineConfig(prefix_boost=-1.0)
    with pytest.raises(ValueError):
        EngineConfig(suggestion_boost=-0.5)
    with pytest.raises(ValueError):
        EngineConfig(selection_boost=-1)
