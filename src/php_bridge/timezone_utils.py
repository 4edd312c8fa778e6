"""Timezone resolution helpers with pragmatic fallbacks."""

from __future__ import annotations

from datetime import timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from php_bridge.timezone.offsets import SUMMER_OFFSETS


def resolve_timezone(zone_name: str) -> tzinfo | None:
    """Resolve a PHP/IANA timezone name with safe fallbacks.

    Order:
    1. IANA database via ZoneInfo.
    2. Fixed offset from the bundled offset table (hosts without tzdata).
    3. None when the name is unknown everywhere.
    """
    if zone_name == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError):
        pass

    if zone_name in SUMMER_OFFSETS:
        return timezone(timedelta(seconds=SUMMER_OFFSETS[zone_name]), zone_name)
    return None
