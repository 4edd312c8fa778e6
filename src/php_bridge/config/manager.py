"""Configuration loading from layered YAML files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from php_bridge.config.schema import AppConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads config from a defaults YAML file plus optional user overrides."""

    def __init__(
        self,
        defaults_path: Path | None = None,
        user_path: Path | None = None,
    ) -> None:
        self._defaults_path = defaults_path or Path("config.defaults.yaml")
        self._user_path = user_path or Path("config.yaml")
        self._config: AppConfig | None = None
        self._loaded_paths: list[Path] = []

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            raise RuntimeError("Config not loaded. Call load() first.")
        return self._config

    @property
    def loaded_paths(self) -> list[Path]:
        """YAML files that existed and were merged by the last load()."""
        return list(self._loaded_paths)

    def load(self) -> AppConfig:
        """Load configuration from defaults + user overrides."""
        self._loaded_paths = []
        merged: dict[str, Any] = {}
        for path in (self._defaults_path, self._user_path):
            data = self._load_yaml(path)
            if data is not None:
                self._loaded_paths.append(path)
                merged = self._deep_merge(merged, data)
        self._config = AppConfig.model_validate(merged)
        logger.debug("Configuration loaded from %s", [str(p) for p in self._loaded_paths])
        return self._config

    @staticmethod
    def _load_yaml(path: Path) -> dict[str, Any] | None:
        if not path.exists():
            return None
        with open(path) as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}

    @staticmethod
    def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Recursively merge override into base, returning a new dict."""
        result = dict(base)
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = ConfigManager._deep_merge(result[key], value)
            else:
                result[key] = value
        return result
