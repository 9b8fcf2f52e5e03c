"""
Date-time normalization for quote-ingest.

Providers send timestamps in a few fixed shapes. Each supported shape is
named by its pattern string and pairs a strict full-match regex (fixed
digit widths) with the equivalent ``strptime`` format. ``None`` as the
source pattern means the text is already in its final form and is
passed through untouched.
"""

from __future__ import annotations

import re
from datetime import datetime

from quote_ingest.exceptions import DateTimeFormatError

CANONICAL_PATTERN = "yyyy-MM-dd HH:mm:ss"

# pattern name -> (strict shape check, strptime/strftime format)
_PATTERNS: dict[str, tuple[re.Pattern[str], str]] = {
    "yyyyMMddHHmmss": (re.compile(r"\d{14}"), "%Y%m%d%H%M%S"),
    "yyyy/MM/dd HH:mm": (re.compile(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}"), "%Y/%m/%d %H:%M"),
    "yyyy/MM/dd HH:mm:ss": (
        re.compile(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}:\d{2}"),
        "%Y/%m/%d %H:%M:%S",
    ),
    CANONICAL_PATTERN: (
        re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"),
        "%Y-%m-%d %H:%M:%S",
    ),
}

SUPPORTED_PATTERNS = frozenset(_PATTERNS)


def _lookup(pattern: str) -> tuple[re.Pattern[str], str]:
    try:
        return _PATTERNS[pattern]
    except KeyError:
        raise ValueError(
            f"Unsupported date-time pattern: '{pattern}'. "
            f"Supported patterns: {sorted(_PATTERNS)}"
        ) from None


def normalize_datetime(
    value: str,
    source_pattern: str | None,
    target_pattern: str = CANONICAL_PATTERN,
) -> str:
    """Reformat *value* from *source_pattern* to *target_pattern*.

    Args:
        value: Timestamp text as sent by the provider.
        source_pattern: One of ``SUPPORTED_PATTERNS``, or ``None`` for
            passthrough.
        target_pattern: Output pattern, canonical by default.

    Returns:
        The reformatted timestamp (or *value* itself on passthrough).

    Raises:
        DateTimeFormatError: If *value* does not match *source_pattern*
            or names an impossible date.
        ValueError: If either pattern is not supported.
    """
    if source_pattern is None:
        return value
    shape, source_format = _lookup(source_pattern)
    _, target_format = _lookup(target_pattern)

    text = value.strip()
    if not shape.fullmatch(text):
        raise DateTimeFormatError(
            f"'{value}' does not match pattern '{source_pattern}'"
        )
    try:
        parsed = datetime.strptime(text, source_format)
    except ValueError as exc:
        raise DateTimeFormatError(
            f"'{value}' is not a valid '{source_pattern}' date-time: {exc}"
        ) from exc
    return parsed.strftime(target_format)
