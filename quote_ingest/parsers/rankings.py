"""
Volume-ranking parser for quote-ingest.

Reads the codes out of an East Money ranking payload such as::

    {"data":{"diff":[{"f12":"600000","f14":"浦发银行","f5":123456}, ...]}}

Only the ``"f12"`` code entries matter, so they are picked out with a
regex rather than by walking the JSON; a truncated or otherwise broken
payload still yields whatever codes it contains.
"""

from __future__ import annotations

import logging
import re

from quote_ingest.config import ProviderCatalog, default_config
from quote_ingest.layout_registry import resolve_market
from quote_ingest.models import MarketType

logger = logging.getLogger(__name__)

_CODE_RE = re.compile(r'"f12":"(\w+)"')

DEFAULT_LIMIT = 10


def _with_exchange(code: str) -> str:
    if code.startswith("6"):
        return f"sh{code}"
    if code.startswith(("0", "3")):
        return f"sz{code}"
    return code


def parse_top_volume_codes(response_text: str, limit: int = DEFAULT_LIMIT) -> list[str]:
    """Extract up to *limit* A-share codes, in ranking order, with exchange prefix."""
    codes = [_with_exchange(code) for code in _CODE_RE.findall(response_text)]
    return codes[:limit]


def top_volume_codes(
    market: MarketType | str,
    response_text: str | None = None,
    limit: int = DEFAULT_LIMIT,
    config: ProviderCatalog | None = None,
) -> list[str]:
    """Most active codes of *market*.

    A-shares come from a ranking *response_text*; Hong Kong and US
    markets use the configured active list; crypto has none.
    """
    market = resolve_market(market)
    if market is MarketType.ASHARE:
        if not response_text:
            logger.warning("No volume ranking response for A-shares")
            return []
        return parse_top_volume_codes(response_text, limit)
    active = (config or default_config()).active_codes.get(market, [])
    return list(active[:limit])
