"""Tests for configuration loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from php_bridge.config.manager import ConfigManager
from php_bridge.config.schema import AppConfig


class TestAppConfig:
    def test_default_config_is_valid(self) -> None:
        config = AppConfig()
        assert config.timezone.php_path == "php"
        assert config.timezone.php_flags == ["-n", "-r"]
        assert config.timezone.cache_lifetime_seconds == 3600
        assert config.timezone.source == "php"
        assert config.logging.level == "INFO"
        assert config.logging.format == "json"

    def test_custom_values(self) -> None:
        config = AppConfig(
            timezone={"php_path": "/opt/php/bin/php", "source": "zoneinfo"},
            logging={"format": "console"},
        )
        assert config.timezone.php_path == "/opt/php/bin/php"
        assert config.timezone.source == "zoneinfo"
        assert config.logging.format == "console"

    def test_unknown_source_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(timezone={"source": "ntp"})

    def test_cache_lifetime_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(timezone={"cache_lifetime_seconds": 0})


class TestConfigManager:
    def test_load_defaults_only(self, tmp_path: Path) -> None:
        defaults_file = tmp_path / "defaults.yaml"
        defaults_file.write_text("timezone:\n  php_path: /usr/local/bin/php\n")
        mgr = ConfigManager(defaults_path=defaults_file, user_path=tmp_path / "user.yaml")
        config = mgr.load()
        assert config.timezone.php_path == "/usr/local/bin/php"
        assert config.timezone.cache_lifetime_seconds == 3600

    def test_user_overrides(self, tmp_path: Path) -> None:
        defaults_file = tmp_path / "defaults.yaml"
        defaults_file.write_text("timezone:\n  php_path: php\n  cache_lifetime_seconds: 600\n")
        user_file = tmp_path / "user.yaml"
        user_file.write_text("timezone:\n  php_path: /usr/bin/php8.2\n")
        mgr = ConfigManager(defaults_path=defaults_file, user_path=user_file)
        config = mgr.load()
        assert config.timezone.php_path == "/usr/bin/php8.2"
        assert mgr.loaded_paths == [defaults_file, user_file]
        # Deep merge keeps sibling keys from defaults
        assert config.timezone.cache_lifetime_seconds == 600

    def test_missing_files_give_defaults(self, tmp_path: Path) -> None:
        mgr = ConfigManager(defaults_path=tmp_path / "a.yaml", user_path=tmp_path / "b.yaml")
        config = mgr.load()
        assert config == AppConfig()
        assert mgr.loaded_paths == []

    def test_non_mapping_yaml_ignored(self, tmp_path: Path) -> None:
        defaults_file = tmp_path / "defaults.yaml"
        defaults_file.write_text("- just\n- a list\n")
        mgr = ConfigManager(defaults_path=defaults_file, user_path=tmp_path / "user.yaml")
        assert mgr.load() == AppConfig()

    def test_config_before_load_raises(self, tmp_path: Path) -> None:
        mgr = ConfigManager(defaults_path=tmp_path / "a.yaml", user_path=tmp_path / "b.yaml")
        with pytest.raises(RuntimeError):
            _ = mgr.config

    def test_fixture_manager_loaded(self, config_manager: ConfigManager) -> None:
        assert config_manager.config.timezone.php_path == "/usr/bin/php"
        assert [p.name for p in config_manager.loaded_paths] == ["config.defaults.yaml"]

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        defaults_file = tmp_path / "defaults.yaml"
        defaults_file.write_text("logging:\n  format: xml\n")
        mgr = ConfigManager(defaults_path=defaults_file, user_path=tmp_path / "user.yaml")
        with pytest.raises(ValidationError):
            mgr.load()
