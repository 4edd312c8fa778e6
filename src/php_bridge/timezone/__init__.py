"""UTC offset lookup for PHP timezone names."""

from php_bridge.timezone.resolver import CachedOffset, TimezoneResolver
from php_bridge.timezone.sources import (
    OffsetComputationError,
    OffsetSource,
    PhpOffsetSource,
    ZoneInfoOffsetSource,
    create_offset_source,
)

__all__ = [
    "CachedOffset",
    "OffsetComputationError",
    "OffsetSource",
    "PhpOffsetSource",
    "TimezoneResolver",
    "ZoneInfoOffsetSource",
    "create_offset_source",
]
