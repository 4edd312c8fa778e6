"""Offset sources: where a live UTC offset for a zone comes from."""

from __future__ import annotations

import asyncio
import re
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from php_bridge import timezone_utils
from php_bridge.config.schema import TimezoneConfig

_INTEGER = re.compile(r"^-?\d+$")


class OffsetComputationError(Exception):
    """A live offset could not be obtained for a zone."""

    def __init__(self, zone_name: str, reason: str) -> None:
        super().__init__(f"{zone_name}: {reason}")
        self.zone_name = zone_name
        self.reason = reason


@runtime_checkable
class OffsetSource(Protocol):
    """Protocol for live offset providers."""

    async def fetch_offset(self, zone_name: str) -> int:
        """Return the current offset to UTC in seconds or raise OffsetComputationError."""
        ...


def build_php_script(zone_name: str) -> str:
    """PHP one-liner echoing the current offset of ``zone_name`` in seconds."""
    quoted = zone_name.replace("\\", "\\\\").replace("'", "\\'")
    return (
        f"echo (new DateTimeZone('{quoted}'))"
        "->getOffset(new DateTime('now', new DateTimeZone('UTC')));"
    )


class PhpOffsetSource:
    """Asks the PHP cli interpreter for the offset, one process per call."""

    def __init__(self, php_path: str = "php", flags: Sequence[str] = ("-n", "-r")) -> None:
        self._php_path = php_path
        self._flags = list(flags)

    @property
    def php_path(self) -> str:
        return self._php_path

    async def fetch_offset(self, zone_name: str) -> int:
        try:
            proc = await asyncio.create_subprocess_exec(
                self._php_path,
                *self._flags,
                build_php_script(zone_name),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except (OSError, ValueError) as e:
            raise OffsetComputationError(zone_name, f"cannot run {self._php_path}: {e}") from e

        err = stderr.decode(errors="replace").strip()
        if err:
            raise OffsetComputationError(zone_name, err)
        if proc.returncode != 0:
            raise OffsetComputationError(zone_name, f"php exited with status {proc.returncode}")

        out = stdout.decode(errors="replace").strip()
        if not _INTEGER.match(out):
            raise OffsetComputationError(zone_name, f"unexpected output {out!r}")
        return int(out)


class ZoneInfoOffsetSource:
    """Computes the offset in-process from the IANA database."""

    async def fetch_offset(self, zone_name: str) -> int:
        tz = timezone_utils.resolve_timezone(zone_name)
        if tz is None:
            raise OffsetComputationError(zone_name, "unknown timezone")
        offset = datetime.now(timezone.utc).astimezone(tz).utcoffset()
        if offset is None:
            raise OffsetComputationError(zone_name, "timezone has no utc offset")
        return int(offset.total_seconds())


def create_offset_source(config: TimezoneConfig) -> OffsetSource:
    """Build the offset source selected in the configuration."""
    if config.source == "php":
        return PhpOffsetSource(config.php_path, config.php_flags)
    if config.source == "zoneinfo":
        return ZoneInfoOffsetSource()
    raise ValueError(f"Unknown offset source: {config.source}")
