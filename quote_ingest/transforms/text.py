"""
Text helpers for quote-ingest: instrument codes and escaped names.
"""

from __future__ import annotations

import re

_SIMPLE_ESCAPES = {
    "\\": "\\",
    '"': '"',
    "'": "'",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# \uXXXX (any number of u's), octal \0..\377, or backslash + any char
_ESCAPE_RE = re.compile(
    r"\\(?:u+([0-9a-fA-F]{4})|([0-3][0-7]{0,2}|[4-7][0-7]?)|(.))",
    re.DOTALL,
)


def _replace_escape(match: re.Match[str]) -> str:
    hex_digits, octal_digits, other = match.groups()
    if hex_digits is not None:
        return chr(int(hex_digits, 16))
    if octal_digits is not None:
        return chr(int(octal_digits, 8))
    return _SIMPLE_ESCAPES.get(other, other)


def unescape_java(text: str) -> str:
    """Undo Java string-literal escaping, leniently.

    Tencent's suggestion endpoint sends names as ``\\u`` escapes, e.g.
    ``\\u817e\\u8baf\\u63a7\\u80a1`` for 腾讯控股. Malformed escapes never
    raise:

    - a backslash before any other character is dropped and the
      character kept, so ``\\uZZZZ`` (no hex digits) becomes ``uZZZZ``;
    - a lone trailing backslash is kept as-is.
    """
    if "\\" not in text:
        return text
    return _ESCAPE_RE.sub(_replace_escape, text)


def normalize_code(raw: str, prefix_length: int = 0) -> str | None:
    """Strip a fixed-width provider prefix and uppercase the remainder.

    The remainder is kept verbatim apart from case; it is not trimmed.

    Returns ``None`` when *raw* is shorter than the prefix, i.e. the
    token cannot possibly hold a code.
    """
    if len(raw) < prefix_length:
        return None
    return raw[prefix_length:].upper()
