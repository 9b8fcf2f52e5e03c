"""
Validation gate for quote-ingest.

Every Quote goes through ``rejection_reason`` once, after it is fully
built and before it is added to a parser's output. This is the single
place the record-level invariants are enforced:

- ``current`` is finite and strictly positive
- ``percentage`` is finite
- ``code`` and ``name`` are not blank

Also hosts ``is_valid_code_response``, the check used to decide whether
a provider recognized a code the user typed.
"""

from __future__ import annotations

import math

from quote_ingest.layout_registry import resolve_provider
from quote_ingest.models import Provider, Quote

TENCENT_NO_MATCH = "v_pv_none_match"


def rejection_reason(quote: Quote) -> str | None:
    """Return why *quote* must not be emitted, or ``None`` if it passes."""
    if not math.isfinite(quote.current):
        return "current price is not finite"
    if quote.current <= 0:
        return f"current price {quote.current} is not positive"
    if not math.isfinite(quote.percentage):
        return "percentage is not finite"
    if not quote.code.strip():
        return "code is blank"
    if not quote.name.strip():
        return "name is blank"
    return None


def validate_quote(quote: Quote) -> bool:
    """True if *quote* passes the validation gate."""
    return rejection_reason(quote) is None


def is_valid_code_response(provider: Provider | str, response_text: str) -> bool:
    """Tell whether a single-code quote response names a real instrument.

    - Sina answers unknown codes with an empty ``""`` payload, so the
      first line must hold a non-empty quoted payload with a ``,``.
    - Tencent answers unknown codes with ``v_pv_none_match``.
    """
    provider = resolve_provider(provider)
    if provider is Provider.TENCENT:
        return not response_text.startswith(TENCENT_NO_MATCH)

    first_line = response_text.split("\n", 1)[0]
    start = first_line.find('"')
    end = first_line.rfind('"')
    if start == -1 or start >= end:
        return False
    return "," in first_line[start + 1:end]
