"""Shared test fixtures for PHP Bridge."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from php_bridge.config.manager import ConfigManager
from php_bridge.config.schema import AppConfig
from php_bridge.timezone.resolver import TimezoneResolver
from php_bridge.timezone.sources import PhpOffsetSource


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: int = 1_700_000_000_000) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def config() -> AppConfig:
    """Provide a default test configuration."""
    return AppConfig()


@pytest.fixture
def config_manager(tmp_path: Path) -> ConfigManager:
    """Provide a config manager with test paths."""
    defaults = tmp_path / "config.defaults.yaml"
    defaults.write_text("timezone:\n  php_path: /usr/bin/php\n")
    user = tmp_path / "config.yaml"
    mgr = ConfigManager(defaults_path=defaults, user_path=user)
    mgr.load()
    return mgr


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def source() -> AsyncMock:
    """Offset source that reports +1 hour unless reconfigured."""
    mock = AsyncMock(spec=PhpOffsetSource)
    mock.fetch_offset.return_value = 3600
    return mock


@pytest.fixture
def resolver(source: AsyncMock, clock: FakeClock) -> TimezoneResolver:
    return TimezoneResolver(source, clock=clock)
