"""Parse PHP configuration files that ``return`` a single array literal.

The PHP source is rewritten into JSON with a fixed sequence of regex and
string replacements and then parsed with :mod:`json`. This is best effort,
not a PHP parser. Known limitations:

* the file must contain exactly one top-level ``return [...]`` array;
* values must be literals; nested PHP expressions (constants, function
  calls, concatenation) are quoted as strings at best;
* ``//`` inside a string value (e.g. a URL) is stripped as a comment;
* a value containing an unquoted ``,`` followed by more text on the same
  line is quoted up to the last comma of that line;
* any line containing ``use`` followed later by ``;`` is dropped;
* a single quote inside a bare value (``O'Brien``) is escaped to ``\\'`` and
  then turned into ``\\"`` with every other quote, so it parses as ``O"Brien``.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_BLOCK_COMMENT = re.compile(r"/\*(.|[\r\n])*?\*+/", re.IGNORECASE)
# `.` also consumes a trailing \r on CRLF input; only JSON whitespace changes
_LINE_COMMENT = re.compile(r"//.+", re.IGNORECASE)
_USE_STATEMENT = re.compile(r"use.*;", re.IGNORECASE)
_BARE_VALUE = re.compile(r"=>\s+([^0-9\"'].*),", re.IGNORECASE)
_ARROW_PREFIX = re.compile(r"=>\s+")
_TRAILING_COMMA = re.compile(r",(\s|[\r\n])*?}", re.IGNORECASE)

_LITERALS = ("true", "false", "null")


def _quote_bare_value(match: re.Match[str]) -> str:
    value = _ARROW_PREFIX.sub("", match.group(0), count=1)
    value = value[:-1] if value.endswith(",") else value
    if value not in _LITERALS:
        value = "'" + value.replace("'", "\\'") + "'"
    return "=> " + value + ","


def convert_php_array(text: str) -> str:
    """Rewrite the text of a PHP config file into JSON text."""
    text = _BLOCK_COMMENT.sub("", text)
    text = _LINE_COMMENT.sub("", text)
    text = _USE_STATEMENT.sub("", text)
    # each occurs once, only the first occurrence is removed
    text = text.replace("<?php", "", 1).replace("return ", "", 1).replace(";", "", 1)
    text = _BARE_VALUE.sub(_quote_bare_value, text)
    text = text.replace("[", "{").replace("]", "}").replace("=>", ":")
    text = _TRAILING_COMMA.sub("}", text)
    return text.replace("'", '"')


def parse_php_config_text(text: str) -> Any:
    """Parse PHP config source; raises json.JSONDecodeError when the result is not JSON."""
    return json.loads(convert_php_array(text))


async def parse_php_config(path: str | Path) -> Any:
    """Parse a PHP configuration file.

    Returns the parsed value, or ``False`` when the file cannot be read or
    its converted text is not valid JSON. Failures are logged, not raised.
    """
    try:
        text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
        return parse_php_config_text(text)
    except Exception:
        logger.exception("Failed to parse PHP config %s", path)
        return False
