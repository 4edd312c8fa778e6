"""Cached UTC offsets for PHP timezone names and date helpers built on them.

Offsets come from an :class:`OffsetSource` (by default the PHP interpreter)
and are cached per zone for one hour. When the source fails the bundled
``SUMMER_OFFSETS`` table is used instead, and ``0`` for unknown zones.

Dates are naive ``datetime`` values. A *server* date holds wall-clock time in
the host's local timezone, a *zone* date holds wall-clock time in the named
zone. Aware datetimes are converted to naive first.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable

from php_bridge.config.schema import TimezoneConfig
from php_bridge.timezone.offsets import SUMMER_OFFSETS
from php_bridge.timezone.sources import (
    OffsetComputationError,
    OffsetSource,
    create_offset_source,
)

logger = logging.getLogger(__name__)

CACHE_LIFE_MS = 60 * 60 * 1000  # 1 hour


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class CachedOffset:
    """Offset to UTC (seconds) with the system time (ms) it was stored."""

    offset: int
    captured_at: int

    @classmethod
    def expired(cls, now: int, lifetime: int) -> CachedOffset:
        return cls(offset=0, captured_at=now - lifetime)


def _server_date(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone().replace(tzinfo=None)
    return value


def _zone_date(value: datetime) -> datetime:
    return value.replace(tzinfo=None)


def _server_utc_offset_minutes(value: datetime) -> int:
    """Minutes to add to the host's local time to get UTC at ``value``."""
    offset = value.astimezone().utcoffset()
    return -int(offset.total_seconds() // 60) if offset is not None else 0


class TimezoneResolver:
    """Looks up UTC offsets for PHP timezone names with caching and fallback."""

    def __init__(
        self,
        source: OffsetSource,
        cache_lifetime_ms: int = CACHE_LIFE_MS,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        self._source = source
        self._cache_lifetime = cache_lifetime_ms
        self._clock = clock
        self._cache: dict[str, CachedOffset] = {}

    @classmethod
    def from_config(cls, config: TimezoneConfig) -> TimezoneResolver:
        return cls(
            create_offset_source(config),
            cache_lifetime_ms=config.cache_lifetime_seconds * 1000,
        )

    def cached_zones(self) -> list[str]:
        return list(self._cache)

    async def get_offset(self, zone_name: str) -> int:
        """Get the difference to UTC in seconds.

        A cached value younger than the cache lifetime is returned without
        calling the source. Otherwise the source is asked once; on failure the
        bundled table is used. Concurrent lookups of the same stale zone each
        call the source.
        """
        now = self._clock()
        entry = self._cache.get(zone_name)
        if entry is None:
            entry = CachedOffset.expired(now, self._cache_lifetime)
            self._cache[zone_name] = entry
        if now - entry.captured_at < self._cache_lifetime:
            return entry.offset

        try:
            offset = await self._source.fetch_offset(zone_name)
        except OffsetComputationError as e:
            logger.error("getOffset failed for %s: %s", zone_name, e.reason)
        else:
            entry.offset = offset
            entry.captured_at = now
            logger.debug("getOffset %s: %d (captured at %d)", zone_name, offset, now)
            return offset

        return SUMMER_OFFSETS.get(zone_name, 0)

    @staticmethod
    def is_24_hour_format(zone_name: str) -> bool:
        """Check if the zone uses 24 hour formatting.

        Rough heuristic only: zones containing "America" or "London" use a
        12 hour clock, everything else 24 hour.
        """
        return "America" not in zone_name and "London" not in zone_name

    async def convert_server_time_to_zone_time(
        self, server_date: datetime, zone_name: str
    ) -> datetime:
        """Convert a server date to the wall-clock time of ``zone_name``."""
        server_date = _server_date(server_date)
        # to utc via the host offset, then to the zone via its offset
        return server_date + timedelta(
            minutes=_server_utc_offset_minutes(server_date),
            seconds=await self.get_offset(zone_name),
        )

    async def convert_zone_time_to_server_time(
        self, local_date: datetime, zone_name: str
    ) -> datetime:
        """Convert wall-clock time of ``zone_name`` to a server date."""
        local_date = _zone_date(local_date)
        offset = await self.get_offset(zone_name)
        return (
            local_date
            - timedelta(seconds=offset)
            - timedelta(minutes=_server_utc_offset_minutes(local_date))
        )

    async def convert_zone_time_to_utc(self, local_date: datetime, zone_name: str) -> datetime:
        """Convert wall-clock time of ``zone_name`` to naive UTC."""
        local_date = _zone_date(local_date)
        return local_date - timedelta(seconds=await self.get_offset(zone_name))

    async def format_local_time(
        self, server_date: datetime, zone_name: str, include_seconds: bool = False
    ) -> str:
        """Format a server date as local time of ``zone_name``.

        Returns ``H:mm`` / ``H:mm:ss`` for 24 hour zones and
        ``H:mm am`` / ``H:mm:ss pm`` for 12 hour zones (hour 0 shows as 12).
        """
        local_date = await self.convert_server_time_to_zone_time(server_date, zone_name)
        return self.format_time(local_date, self.is_24_hour_format(zone_name), include_seconds)

    @staticmethod
    def format_time(value: datetime, is_24: bool, include_seconds: bool = False) -> str:
        hours = value.hour if is_24 else (value.hour % 12) or 12
        text = f"{hours}:{value.minute:02d}"
        if include_seconds:
            text += f":{value.second:02d}"
        if not is_24:
            text += " am" if value.hour < 12 else " pm"
        return text
