"""Convert merged PO text into a JSON string table for browser code.

Input is the text ``msgmerge`` prints for a locale catalog. Output maps
every msgid to its translation: a string for singular entries, a list of
plural forms otherwise. The empty msgid is replaced by the parsed header,
keyed by lowercase header name::

    {
        "": {"language": "fr", "plural-forms": "nplurals=2; plural=(n > 1);"},
        "Hello": "Bonjour",
        "1 apple": ["1 pomme", "%1 pommes"]
    }

Python 3.13+.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING

from babel.messages.pofile import unescape

if TYPE_CHECKING:
    from pathlib import Path

__all__ = [
    "StringTable",
    "convert_catalog",
    "parse_headers",
    "write_json_catalog",
]

type StringTable = dict[str, str | list[str] | dict[str, str]]

_KEYWORD_RE = re.compile(r'^(msgid|msgid_plural|msgstr(?:\[\d+\])?)\s+(".*)$')


def parse_headers(text: str) -> dict[str, str]:
    """Parse a PO header block into a lowercase-keyed dict.

    Lines without a colon are ignored; values keep inner colons.
    """
    headers: dict[str, str] = {}
    for line in text.split("\n"):
        name, sep, value = line.partition(":")
        if sep and name.strip():
            headers[name.strip().lower()] = value.strip()
    return headers


def _blocks(text: str) -> list[tuple[str, str]]:
    """Split PO text into (keyword, unescaped value) blocks.

    A keyword line opens a block; quoted continuation lines extend it; any
    other line (blank, comment, obsolete entry) closes it.
    """
    blocks: list[tuple[str, str]] = []
    keyword: str | None = None
    value = ""
    for raw in text.strip().split("\n"):
        line = raw.strip()
        match = _KEYWORD_RE.match(line)
        if match:
            if keyword is not None:
                blocks.append((keyword, value))
            keyword, value = match.group(1), unescape(match.group(2))
        elif line.startswith('"') and keyword is not None:
            value += unescape(line)
        elif keyword is not None:
            blocks.append((keyword, value))
            keyword, value = None, ""
    if keyword is not None:
        blocks.append((keyword, value))
    return blocks


def convert_catalog(text: str) -> StringTable:
    """Convert PO text into a string table.

    Entries without any msgstr are omitted. ``msgid_plural`` lines only
    mark the entry as plural; the key stays the singular msgid.

    Args:
        text: PO catalog text

    Returns:
        String table with the header, when present, under ``""``
    """
    table: StringTable = {}
    key: str | None = None
    values: list[str] = []

    def flush() -> None:
        if key is not None and values:
            table[key] = values[0] if len(values) == 1 else list(values)

    for keyword, value in _blocks(text):
        if keyword == "msgid":
            flush()
            key, values = value, []
        elif keyword.startswith("msgstr"):
            values.append(value)
    flush()

    header = table.get("")
    if isinstance(header, str):
        table[""] = parse_headers(header)
    return table


def write_json_catalog(table: StringTable, path: Path) -> None:
    """Write a string table as pretty-printed UTF-8 JSON."""
    path.write_text(json.dumps(table, indent=4, ensure_ascii=False) + "\n", encoding="utf-8")
