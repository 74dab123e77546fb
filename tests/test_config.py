import pytest
from pydantic import ValidationError
from palmsignkit.config import AppConfig, load_config

def test_defaults_when_missing(tmp_path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg == AppConfig()
    assert (cfg.camera.width, cfg.camera.height) == (1280, 720)
    assert cfg.tracker.max_hands == 1 and cfg.tracker.min_detection_confidence == 0.6
    assert load_config(None) == AppConfig()

def test_yaml_overrides(tmp_path):
    p = tmp_path / "palmsign.yaml"
    p.write_text("camera:\n  index: 2\ntracker:\n  max_hands: 2\nlog_level: DEBUG\n")
    cfg = load_config(p)
    assert cfg.camera.index == 2 and cfg.camera.width == 1280
    assert cfg.tracker.max_hands == 2
    assert cfg.log_level == "DEBUG"

def test_empty_file_is_defaults(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(p) == AppConfig()

def test_invalid_values_rejected(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("tracker:\n  min_detection_confidence: 1.5\n")
    with pytest.raises(ValidationError):
        load_config(p)
