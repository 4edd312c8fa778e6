"""Command line entry point: offset lookups and PHP config conversion."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from php_bridge.config.manager import ConfigManager
from php_bridge.config.schema import AppConfig
from php_bridge.logging.structured import setup_logging
from php_bridge.php_config import parse_php_config
from php_bridge.timezone.resolver import TimezoneResolver

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="php-bridge", description=__doc__)
    parser.add_argument("--config", default="config.yaml")
    parser.add_argument("--defaults", default="config.defaults.yaml")
    sub = parser.add_subparsers(dest="command", required=True)

    offset = sub.add_parser("offset", help="print UTC offsets in seconds")
    offset.add_argument("zones", nargs="+", metavar="ZONE")

    local_time = sub.add_parser("time", help="print the current local time of a zone")
    local_time.add_argument("zone", metavar="ZONE")
    local_time.add_argument("--seconds", action="store_true", help="include seconds")

    parse = sub.add_parser("parse-config", help="convert a PHP config file to JSON")
    parse.add_argument("path", type=Path)
    return parser


async def run(args: argparse.Namespace, config: AppConfig) -> int:
    """Execute one subcommand, returning the process exit status."""
    if args.command == "parse-config":
        result = await parse_php_config(args.path)
        if result is False:
            return 1
        print(json.dumps(result, indent=2))
        return 0

    resolver = TimezoneResolver.from_config(config.timezone)
    if args.command == "offset":
        offsets = await asyncio.gather(*(resolver.get_offset(zone) for zone in args.zones))
        for zone, offset in zip(args.zones, offsets):
            print(f"{zone}\t{offset}")
        return 0

    print(await resolver.format_local_time(datetime.now(), args.zone, args.seconds))
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``php-bridge`` script."""
    args = build_parser().parse_args(argv)

    config_manager = ConfigManager(Path(args.defaults), Path(args.config))
    config = config_manager.load()

    setup_logging(
        level=config.logging.level,
        fmt=config.logging.format,
        log_file=config.logging.file,
    )
    logger.debug("Running %s with config from %s", args.command, config_manager.loaded_paths)

    sys.exit(asyncio.run(run(args, config)))


if __name__ == "__main__":
    main()
