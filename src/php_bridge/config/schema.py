"""Pydantic configuration models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TimezoneConfig(BaseModel):
    php_path: str = "php"  # path to the PHP cli interpreter
    php_flags: list[str] = Field(default_factory=lambda: ["-n", "-r"])
    cache_lifetime_seconds: int = Field(3600, gt=0)
    source: Literal["php", "zoneinfo"] = "php"


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "json"
    file: str = ""


class AppConfig(BaseModel):
    """Root configuration model."""

    timezone: TimezoneConfig = TimezoneConfig()
    logging: LoggingConfig = LoggingConfig()
