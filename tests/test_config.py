# ==============================================
# Tests for Configuration
# ==============================================

import pytest

from numerify.config import AppConfig, get_config


class TestGetConfig:
    def test_defaults(self, fresh_config):
        config = get_config()
        assert isinstance(config, AppConfig)
        assert config.detection.sample_size == 30
        assert config.reporting.verbose is True

    def test_environment_overrides(self, fresh_config, monkeypatch):
        monkeypatch.setenv("NUMERIFY_SAMPLE_SIZE", "5")
        monkeypatch.setenv("NUMERIFY_VERBOSE", "false")
        config = get_config()
        assert config.detection.sample_size == 5
        assert config.reporting.verbose is False

    def test_singleton(self, fresh_config):
        assert get_config() is get_config()

    def test_invalid_boolean(self, fresh_config, monkeypatch):
        monkeypatch.setenv("NUMERIFY_VERBOSE", "maybe")
        with pytest.raises(ValueError):
            get_config()
