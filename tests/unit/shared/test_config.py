"""Tests for termline.shared.config module."""

from pathlib import Path
from unittest import mock

import pytest
import yaml

import termline.shared.config as config_module
from termline.shared.config import ProbeSettings, load_config, probe_settings


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_config_returns_none(self, tmp_path):
        with mock.patch.object(config_module, 'CONFIG_PATH', tmp_path / "nonexistent.yaml"):
            assert load_config() is None

    def test_missing_config_returns_fallback(self, tmp_path):
        with mock.patch.object(config_module, 'CONFIG_PATH', tmp_path / "nonexistent.yaml"):
            assert load_config(fallback={'default': True}) == {'default': True}

    def test_missing_config_required_exits(self, tmp_path):
        with mock.patch.object(config_module, 'CONFIG_PATH', tmp_path / "nonexistent.yaml"):
            with pytest.raises(SystemExit):
                load_config(required=True)

    def test_valid_config_loads(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        with open(config_path, 'w') as f:
            yaml.dump({'probe': {'timeout_ms': 500}}, f)

        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            assert load_config()['probe']['timeout_ms'] == 500

    def test_empty_yaml_returns_empty_dict(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("")
        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            assert load_config() == {}

    def test_invalid_yaml_returns_fallback(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("{{invalid: yaml: content::")
        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            assert load_config(fallback={'default': True}) == {'default': True}

    def test_invalid_yaml_required_exits(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("{{invalid: yaml: content::")
        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            with pytest.raises(SystemExit):
                load_config(required=True)

    def test_non_mapping_returns_fallback(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- just\n- a list\n")
        with mock.patch.object(config_module, 'CONFIG_PATH', config_path):
            assert load_config(fallback={}) == {}

    def test_config_path_is_in_home_dir(self):
        assert config_module.CONFIG_PATH == Path.home() / ".termline" / "config.yaml"


class TestProbeSettings:
    """Tests for probe_settings()."""

    def test_defaults(self):
        assert probe_settings() == ProbeSettings(timeout=0.25, fallback_width=80)
        assert probe_settings({}) == ProbeSettings(timeout=0.25, fallback_width=80)

    def test_custom_values(self):
        settings = probe_settings({'probe': {'timeout_ms': 500, 'fallback_width': 120}})
        assert settings.timeout == 0.5
        assert settings.fallback_width == 120

    def test_invalid_timeout_uses_default(self, caplog):
        settings = probe_settings({'probe': {'timeout_ms': 'soon'}})
        assert settings.timeout == 0.25
        assert "timeout_ms" in caplog.text

    def test_non_positive_width_uses_default(self):
        assert probe_settings({'probe': {'fallback_width': 0}}).fallback_width == 80

    def test_non_mapping_section_uses_defaults(self):
        assert probe_settings({'probe': 'fast'}) == ProbeSettings(timeout=0.25, fallback_width=80)

    def test_null_section_uses_defaults(self):
        assert probe_settings({'probe': None}).timeout == 0.25
