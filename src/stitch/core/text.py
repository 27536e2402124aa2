"""Text helpers shared by payload normalization and step emission."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


# Characters str.splitlines() breaks on, besides \n and \r
_OTHER_LINE_BREAKS = "\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029"
LINE_BREAKS = "\n\r" + _OTHER_LINE_BREAKS


def _escape_line_breaks(text: str) -> str:
    for char in _OTHER_LINE_BREAKS:
        text = text.replace(char, f"\\u{ord(char):04x}")
    return text


def compact_json(value: Any) -> str:
    """Serialize to JSON with no insignificant whitespace, on one line."""
    return _escape_line_breaks(json.dumps(value, separators=(",", ":"), ensure_ascii=False))


def js_string(value: Any) -> str:
    """Render a value the way a JavaScript template literal would.

    Booleans become ``true``/``false``, None becomes ``null``, integral
    floats lose their ``.0`` and containers become compact JSON.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (Mapping, list, tuple)):
        return compact_json(value)
    return str(value)


def collapse_whitespace(text: str) -> str:
    """Fold every whitespace run, newlines included, into one space."""
    return " ".join(text.split())


def quote(value: Any) -> str:
    """Wrap a value in single quotes, escaping what would end the literal."""
    text = js_string(value)
    text = text.replace("\\", "\\\\").replace("'", "\\'")
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    return f"'{_escape_line_breaks(text)}'"


def inline(value: Any) -> str:
    """Render a value for an unquoted position on a single line."""
    return collapse_whitespace(js_string(value))
