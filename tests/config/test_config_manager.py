"""
Tests for Configuration Manager

Tests the ConfigManager class for hierarchical configuration loading,
validation and example generation.
"""

import json

import pytest
import yaml

from hiddenprefs.core.config.manager import ConfigManager
from hiddenprefs.core.config.models import AppConfig
from hiddenprefs.core.exceptions import ConfigurationError, ErrorCode


class TestConfigManager:
    """Test ConfigManager basic functionality."""

    def test_init_default(self):
        manager = ConfigManager()

        assert manager.config_file is None
        assert manager.config is None
        assert len(manager._config_paths) > 0

    def test_load_defaults_only(self):
        config = ConfigManager().load_config()

        assert isinstance(config, AppConfig)
        assert config.viewer.browsing_level == 3
        assert config.filters.show_hidden is False

    def test_discovers_config_in_working_directory(self, tmp_path):
        (tmp_path / "hiddenprefs.yaml").write_text(
            yaml.safe_dump({'viewer': {'user_id': 5, 'browsing_level': 'all'}})
        )

        config = ConfigManager().load_config()

        assert config.viewer.user_id == 5
        assert config.viewer.browsing_level == 31

    def test_explicit_json_file(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({'filters': {'show_hidden': True}}))

        config = ConfigManager(config_file=path).load_config()

        assert config.filters.show_hidden is True

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(config_file=tmp_path / "missing.yaml").load_config()

        assert exc_info.value.error_code == ErrorCode.CONFIG_FILE_NOT_FOUND

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("viewer: [unclosed")

        with pytest.raises(ConfigurationError):
            ConfigManager(config_file=path).load_config()

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text(yaml.safe_dump({'viewer': {'browsing_level': 'spicy'}}))

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(config_file=path).load_config()

        assert exc_info.value.error_code == ErrorCode.CONFIG_SCHEMA_VALIDATION


class TestConfigPrecedence:
    """CLI > environment > file > defaults."""

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({'viewer': {'user_id': 5, 'is_moderator': False}}))
        monkeypatch.setenv("HIDDENPREFS_USER_ID", "6")
        monkeypatch.setenv("HIDDENPREFS_MODERATOR", "yes")

        config = ConfigManager(config_file=path).load_config()

        assert config.viewer.user_id == 6
        assert config.viewer.is_moderator is True

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("HIDDENPREFS_BROWSING_LEVEL", "nsfw")
        monkeypatch.setenv("HIDDENPREFS_SHOW_HIDDEN", "true")

        config = ConfigManager().load_config(cli_args={'browsing_level': 'PG', 'show_hidden': None})

        assert config.viewer.browsing_level == 1
        assert config.filters.show_hidden is True

    def test_cli_args_mapping(self):
        config = ConfigManager().load_config(cli_args={
            'user_id': 9,
            'moderator': True,
            'disabled': True,
            'log_level': 'error',
            'verbose': True,
            'unknown': 'ignored',
        })

        assert config.viewer.user_id == 9
        assert config.viewer.is_moderator is True
        assert config.filters.disabled is True
        assert config.logging.level == "ERROR"
        assert config.verbose is True

    def test_invalid_env_value(self, monkeypatch):
        monkeypatch.setenv("HIDDENPREFS_USER_ID", "abc")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager().load_config()

        assert exc_info.value.error_code == ErrorCode.CONFIG_INVALID_VALUE

    @pytest.mark.parametrize("value, expected", [
        ("true", True), ("1", True), ("On", True), ("no", False), ("", False), (True, True)
    ])
    def test_parse_bool(self, value, expected):
        assert ConfigManager._parse_bool(value) is expected

    def test_deep_merge(self):
        merged = ConfigManager()._deep_merge(
            {'viewer': {'user_id': 1, 'is_moderator': True}, 'debug': False},
            {'viewer': {'user_id': 2}, 'debug': True},
        )

        assert merged == {'viewer': {'user_id': 2, 'is_moderator': True}, 'debug': True}


class TestConfigValidation:
    """Configuration warnings."""

    def test_no_config_loaded(self):
        assert ConfigManager().validate_config() == ["No configuration loaded"]

    def test_clean_config(self):
        manager = ConfigManager()
        manager.load_config()

        assert manager.validate_config() == []

    def test_warnings(self):
        config = AppConfig(
            viewer={'browsing_level': 0, 'is_moderator': True},
            filters={'disabled': True, 'show_hidden': True},
        )

        warnings = ConfigManager().validate_config(config)

        assert len(warnings) == 3
        assert any("Browsing level is 0" in warning for warning in warnings)

    def test_blocked_warning(self):
        config = AppConfig(viewer={'browsing_level': 'sfw,Blocked'})

        assert ConfigManager().validate_config(config) == ["Browsing level includes Blocked content"]


class TestConfigGeneration:
    """Schema and example files."""

    def test_generate_schema(self, tmp_path):
        output = tmp_path / "schema.json"
        schema = ConfigManager().generate_schema(output)

        assert 'viewer' in schema['properties']
        assert json.loads(output.read_text()) == schema

    @pytest.mark.parametrize("profile, moderator, show_hidden", [
        ("default", False, False),
        ("moderator", True, False),
        ("review", True, True),
    ])
    def test_example_config_loads_back(self, tmp_path, profile, moderator, show_hidden):
        output = tmp_path / f"{profile}.yaml"
        ConfigManager().create_example_config(output, profile=profile)

        config = ConfigManager(config_file=output).load_config()

        assert config.viewer.is_moderator is moderator
        assert config.filters.show_hidden is show_hidden
