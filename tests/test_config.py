"""Tests for YAML config loading and settings validation."""

import pytest

from skin_age_analyzer.config.settings import DetectionConfig, ScannerConfig, StabilizerConfig
from skin_age_analyzer.utils import config_loader
from skin_age_analyzer.utils.config_loader import Config, get_config, set_config
from skin_age_analyzer.utils.exceptions import ConfigurationError

CUSTOM_YAML = """
mediapipe:
  detection:
    max_num_faces: 1
    min_detection_confidence: 0.5
stabilizer:
  lock_threshold: 10
  age_tolerance: 5
  unknown_key: 1
scanner:
  camera_id: 2
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CUSTOM_YAML, encoding="utf-8")
    return path


@pytest.fixture
def restore_global_config():
    original = config_loader._global_config
    yield
    config_loader._global_config = original


class TestConfigLoader:

    def test_default_config_values(self):
        config = Config()
        assert config.get('stabilizer.history_size') == 90
        assert config.get('stabilizer.lock_threshold') == 30
        assert config.stabilizer.age_tolerance == 8
        assert config.mediapipe.detection.min_detection_confidence == 0.35

    def test_get_missing_key_returns_default(self):
        assert Config().get('stabilizer.missing', 'fallback') == 'fallback'

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Config(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("stabilizer: [unclosed", encoding="utf-8")
        with pytest.raises(ValueError):
            Config(path)

    def test_env_var(self, config_file, monkeypatch):
        monkeypatch.setenv(config_loader.CONFIG_ENV_VAR, str(config_file))
        assert Config().get('scanner.camera_id') == 2

    def test_set_config_replaces_global(self, config_file, restore_global_config):
        set_config(str(config_file))
        assert get_config().get('stabilizer.lock_threshold') == 10

    def test_missing_attribute(self):
        with pytest.raises(AttributeError):
            Config().nonexistent_section


class TestSettings:

    def test_from_config(self, config_file):
        config = Config(config_file)
        stabilizer = StabilizerConfig.from_config(config)
        assert stabilizer.lock_threshold == 10
        assert stabilizer.age_tolerance == 5
        assert stabilizer.history_size == 90
        assert DetectionConfig.from_config(config).min_detection_confidence == 0.5
        assert ScannerConfig.from_config(config).camera_id == 2

    def test_defaults(self):
        config = StabilizerConfig()
        assert (config.history_size, config.lock_threshold, config.age_tolerance,
                config.unlock_mismatch_frames) == (90, 30, 8, 20)

    @pytest.mark.parametrize("kwargs", [
        {'history_size': 0},
        {'lock_threshold': 0},
        {'lock_threshold': 91},
        {'age_tolerance': -1},
        {'unlock_mismatch_frames': -1},
        {'trim_fraction': 0.5},
    ])
    def test_invalid_stabilizer_config(self, kwargs):
        with pytest.raises(ConfigurationError):
            StabilizerConfig(**kwargs)

    def test_invalid_detection_confidence(self):
        with pytest.raises(ConfigurationError):
            DetectionConfig(min_detection_confidence=1.5)

    def test_invalid_scanner_config(self):
        with pytest.raises(ConfigurationError):
            ScannerConfig(no_face_hint_seconds=-1)


class TestMerge:

    def test_user_file_overrides_only_given_keys(self, config_file):
        config = Config(config_file)
        assert config.get('stabilizer.lock_threshold') == 10
        assert config.get('stabilizer.unlock_mismatch_frames') == 20
        assert config.get('logging.level') == 'INFO'
        assert config.section('mediapipe.detection')['refine_landmarks'] is True

    def test_section_missing(self):
        assert Config().section('nope') == {}
