"""Regenerate src/php_bridge/timezone/offsets.py from the PHP interpreter."""

from __future__ import annotations

import argparse
import contextlib
import json
import subprocess
import sys
from pathlib import Path

DEFAULT_OUTPUT = Path(__file__).resolve().parent.parent / "src" / "php_bridge" / "timezone" / "offsets.py"

# Prints {"Zone/Name": offset, ...} for the date given as first argument
PHP_SCRIPT = (
    "$d = new DateTime($argv[1], new DateTimeZone('UTC'));"
    "$r = [];"
    "foreach (DateTimeZone::listIdentifiers() as $z) {"
    " $r[$z] = (new DateTimeZone($z))->getOffset($d);"
    "}"
    "echo json_encode($r);"
)

HEADER = '''"""Bundled UTC offsets (seconds) per PHP timezone name.

Both tables were generated by running the PHP interpreter over every
identifier returned by ``DateTimeZone::listIdentifiers()`` on two dates:
``SUMMER_OFFSETS`` from the January run, ``WINTER_OFFSETS`` from the July
run. They are read-only snapshots, not a DST rule set. ``SUMMER_OFFSETS``
is consulted when a live lookup fails; no code path reads
``WINTER_OFFSETS`` yet.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
'''


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--php", default="php")
    # SUMMER_OFFSETS is the fallback table and holds the January snapshot
    parser.add_argument("--summer-date", default="2024-01-15 12:00")
    parser.add_argument("--winter-date", default="2024-07-15 12:00")
    parser.add_argument("--output", default=str(DEFAULT_OUTPUT), help="'-' for stdout")
    return parser.parse_args(argv)


def fetch_offsets(php: str, date: str) -> dict[str, int]:
    out = subprocess.check_output([php, "-n", "-r", PHP_SCRIPT, date], text=True)
    return json.loads(out)


@contextlib.contextmanager
def open_output(path: str):
    if path == "-":
        yield sys.stdout
    else:
        with open(path, "wt") as f:
            yield f


def write_table(fout, name: str, offsets: dict[str, int]) -> None:
    fout.write(f"\n{name}: Mapping[str, int] = MappingProxyType({{\n")
    for zone, offset in sorted(offsets.items()):
        fout.write(f'    "{zone}": {offset},\n')
    fout.write("})\n")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    summer = fetch_offsets(args.php, args.summer_date)
    winter = fetch_offsets(args.php, args.winter_date)
    with open_output(args.output) as fout:
        fout.write(HEADER)
        write_table(fout, "WINTER_OFFSETS", winter)
        write_table(fout, "SUMMER_OFFSETS", summer)


if __name__ == "__main__":
    main()
