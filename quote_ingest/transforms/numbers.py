"""
Number coercion for quote-ingest.

Provider payloads use a handful of placeholders for "no value"
(``""``, ``"-"``, ``"--"``, ``"N/A"``, ``"null"``) and otherwise plain
decimal text. Both helpers here are total: they return a finite float
or the caller's default and never raise.
"""

from __future__ import annotations

import math
import re

# Placeholders providers send instead of a number (case-sensitive)
MISSING_TOKENS = frozenset({"", "-", "--", "N/A", "null"})

# Plain decimal or scientific notation; rejects nan/inf/hex/underscores
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def safe_float(text: str | None, default: float = 0.0) -> float:
    """Parse *text* as a finite float, falling back to *default*.

    Args:
        text: Raw token, surrounding whitespace allowed.
        default: Returned for placeholders, unparseable text, and values
            that overflow to infinity (e.g. ``"1e999"``).

    Returns:
        The parsed value, or *default*.
    """
    if text is None:
        return default
    cleaned = text.strip()
    if cleaned in MISSING_TOKENS or not _DECIMAL_RE.fullmatch(cleaned):
        return default
    value = float(cleaned)
    if not math.isfinite(value):
        return default
    return value


# How far (in ulps, each side) to look for a float that reads back as its cents
_CENTS_SEARCH_ULPS = 4


def _cents(magnitude: float) -> int:
    """``magnitude * 100`` rounded half up to an integer."""
    scaled = magnitude * 100.0
    whole = math.floor(scaled)
    return whole + 1 if scaled - whole >= 0.5 else whole


def _float_for_cents(cents: int) -> float | None:
    """The float closest to ``cents / 100`` whose own cents are *cents*.

    Above roughly 4e13 the nearest float to ``cents / 100`` can multiply
    back to a neighbouring cent; its neighbours are tried in order of
    distance. ``None`` if no float nearby reads back as *cents*.
    """
    start = cents / 100
    candidates = [start]
    below = above = start
    for _ in range(_CENTS_SEARCH_ULPS):
        below = math.nextafter(below, 0.0)
        above = math.nextafter(above, math.inf)
        candidates += [below, above]
    for candidate in candidates:
        if math.isfinite(candidate * 100.0) and _cents(candidate) == cents:
            return candidate
    return None


def round2(value: float, default: float = 0.0) -> float:
    """Round to two decimals, ties away from zero.

    Works on the cents value: ``|value| * 100`` is rounded half up to an
    integer and mapped back to the float that reads back as that same
    cent count, so ``round2(round2(x)) == round2(x)`` at any magnitude.
    Non-finite input, or an intermediate that overflows, yields
    *default*.
    """
    if not math.isfinite(value):
        return default
    magnitude = abs(value)
    if not math.isfinite(magnitude * 100.0):
        return default
    cents = _cents(magnitude)
    result = _float_for_cents(cents)
    if result is None:
        # No float holds this cent count; settle on the one its nearest float holds
        nearest = cents / 100
        if not math.isfinite(nearest * 100.0):
            return default
        cents = _cents(nearest)
        result = _float_for_cents(cents)
        if result is None:
            result = cents / 100
    # Normalize -0.0
    return math.copysign(result, value) + 0.0
