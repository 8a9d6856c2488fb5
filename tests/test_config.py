"""Tests for configuration loading and saving."""

import json
import pytest
from shape_record.utils.config import Config, load_config, save_config


def test_config_defaults():
    """Test default configuration values."""
    config = Config()
    config.validate()
    
    assert config.input_path == "features.dat"
    assert config.tag_width == 4
    assert config.byte_order == "little"
    assert config.short_params_policy == "skip"
    assert config.render_mode == "null"


def test_save_load_json(tmp_path):
    """Test a JSON round trip."""
    config = Config(tag_width=2, byte_order="big", render_mode="2d", output_path="out.png", figsize=(3, 4))
    path = tmp_path / "config.json"
    
    save_config(config, str(path))
    loaded = load_config(str(path))
    
    assert loaded == config
    assert json.loads(path.read_text())["figsize"] == [3, 4]


def test_save_load_yaml(tmp_path):
    """Test a YAML round trip."""
    pytest.importorskip("yaml")
    config = Config(short_params_policy="error", log_level="debug")
    path = tmp_path / "config.yaml"
    
    save_config(config, str(path))
    loaded = load_config(str(path))
    
    assert loaded == config
    assert loaded.log_level == "DEBUG"


def test_load_rejects_unknown_keys(tmp_path):
    """Test unknown keys are reported."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"tag_width": 4, "colour": "red"}))
    
    with pytest.raises(ValueError, match="colour"):
        load_config(str(path))


@pytest.mark.parametrize("field, value", [
    ("tag_width", 3),
    ("byte_order", "middle"),
    ("short_params_policy", "ignore"),
    ("render_mode", "3d"),
    ("log_level", "LOUD"),
    ("dpi", 0),
])
def test_validate_rejects_bad_values(field, value):
    """Test invalid values are rejected."""
    config = Config(**{field: value})
    with pytest.raises(ValueError):
        config.validate()


@pytest.mark.parametrize("field, value", [
    ("log_level", None),
    ("log_level", 10),
    ("figsize", 5),
    ("figsize", [6, None]),
    ("byte_order", ["little"]),
    ("tag_width", "4"),
    ("dpi", 1.5),
    ("input_path", None),
    ("output_path", 3),
])
def test_load_rejects_wrong_types(tmp_path, field, value):
    """Test null and wrongly typed values in a config file raise ValueError."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({field: value}))
    
    with pytest.raises(ValueError):
        load_config(str(path))


@pytest.mark.parametrize("content", ["[1, 2]", "5", "\"text\""])
def test_load_rejects_non_mapping(tmp_path, content):
    """Test a config file whose top level is not a mapping."""
    path = tmp_path / "config.json"
    path.write_text(content)
    
    with pytest.raises(ValueError, match="mapping"):
        load_config(str(path))


def test_load_rejects_non_mapping_yaml(tmp_path):
    """Test a YAML config holding a list."""
    pytest.importorskip("yaml")
    path = tmp_path / "config.yaml"
    path.write_text("- 1\n- 2\n")
    
    with pytest.raises(ValueError, match="mapping"):
        load_config(str(path))


def test_unsupported_suffix(tmp_path):
    """Test config files must be .json, .yaml or .yml."""
    path = tmp_path / "config.toml"
    path.write_text("{}")
    
    with pytest.raises(ValueError, match="Unsupported config format"):
        load_config(str(path))
    with pytest.raises(ValueError, match="Unsupported config format"):
        save_config(Config(), str(tmp_path / "config.txt"))
    assert not (tmp_path / "config.txt").exists()
