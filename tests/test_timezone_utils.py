"""Tests for timezone name resolution."""

from __future__ import annotations

from datetime import timedelta, timezone
from unittest.mock import patch
from zoneinfo import ZoneInfoNotFoundError

from php_bridge.timezone.offsets import SUMMER_OFFSETS
from php_bridge.timezone_utils import resolve_timezone


class TestResolveTimezone:
    def test_utc(self) -> None:
        assert resolve_timezone("UTC") is timezone.utc

    def test_iana_zone(self) -> None:
        tz = resolve_timezone("Asia/Tokyo")
        assert tz is not None
        assert tz.utcoffset(None) in (None, timedelta(hours=9))

    def test_fixed_fallback_without_tzdata(self) -> None:
        with patch(
            "php_bridge.timezone_utils.ZoneInfo",
            side_effect=ZoneInfoNotFoundError("no tzdata"),
        ):
            tz = resolve_timezone("Europe/Paris")
        assert tz is not None
        assert tz.utcoffset(None) == timedelta(seconds=SUMMER_OFFSETS["Europe/Paris"])
        assert tz.tzname(None) == "Europe/Paris"

    def test_unknown_zone(self) -> None:
        assert resolve_timezone("Mars/Olympus_Mons") is None

    def test_invalid_key(self) -> None:
        assert resolve_timezone("../etc/passwd") is None
