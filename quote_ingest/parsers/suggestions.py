"""
Suggestion (search autocomplete) parsers for quote-ingest.

Sina::

    var suggestvalue="浦发银行,11,600000,sh600000,浦发银行,,浦发银行,99,1,ESG;...";

Items are separated by ``;`` and columns by ``,``. Column 1 is a
category code deciding the market; column 3 is the code and column 4
the name.

Tencent::

    v_hint="sh~600000~\\u6d66\\u53d1\\u94f6\\u884c~pfyh~GP-A^hk~00700~...";

Items are separated by ``^`` and columns by ``~``. Column 0 is the
market, column 1 the code and column 2 the Java-escaped name.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from quote_ingest.layout_registry import resolve_provider
from quote_ingest.models import MarketType, Provider, Suggestion
from quote_ingest.transforms.text import unescape_java

logger = logging.getLogger(__name__)

_SINA_SUGGEST_RE = re.compile(r'var suggestvalue="(.*?)";')

# Sina category code -> market, for categories kept as-is
SINA_CATEGORY_MARKETS: dict[str, MarketType] = {
    "11": MarketType.ASHARE,
    "31": MarketType.HK_STOCKS,
    "41": MarketType.US_STOCKS,
    "71": MarketType.CRYPTO,
    "81": MarketType.ASHARE,
}

# Category "11" names carrying this prefix are special-treatment stocks
SINA_EXCLUDED_NAME_PREFIX = "S*ST"

# Category "22" (exchange funds): exchange prefix by leading digits
SINA_FUND_CATEGORY = "22"
SINA_FUND_EXCHANGES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("SZ", ("15", "16", "18")),
    ("SH", ("50", "51")),
)

# Tencent market code -> market
TENCENT_MARKETS: dict[str, MarketType] = {
    "sh": MarketType.ASHARE,
    "sz": MarketType.ASHARE,
    "hk": MarketType.HK_STOCKS,
    "us": MarketType.US_STOCKS,
}


class SuggestionParser(ABC):
    """Abstract base class for provider suggestion formats."""

    @abstractmethod
    def parse(self, response_text: str) -> list[Suggestion]:
        """Parse one suggestion response into a flat list, input order kept."""


def _fund_code(raw_code: str) -> str | None:
    """Prefix a fund code with its exchange, or ``None`` if neither matches."""
    code = raw_code.replace("of", "")
    for exchange, leading in SINA_FUND_EXCHANGES:
        if code.startswith(leading):
            return f"{exchange}{code}"
    return None


class SinaSuggestionParser(SuggestionParser):
    """Parser for Sina ``var suggestvalue="...";`` responses."""

    min_columns = 5

    def parse(self, response_text: str) -> list[Suggestion]:
        match = _SINA_SUGGEST_RE.search(response_text)
        if match is None:
            logger.warning("Sina suggestion response has no suggestvalue assignment")
            return []
        payload = match.group(1)
        if not payload:
            return []

        result: list[Suggestion] = []
        for item in payload.split(";"):
            columns = item.split(",")
            if len(columns) < self.min_columns:
                continue
            suggestion = self._convert(columns)
            if suggestion is not None:
                result.append(suggestion)
        return result

    def _convert(self, columns: list[str]) -> Suggestion | None:
        category, code, name = columns[1], columns[3], columns[4]
        if category == SINA_FUND_CATEGORY:
            fund_code = _fund_code(code)
            if fund_code is None:
                return None
            return Suggestion(fund_code, name, MarketType.ASHARE)

        market = SINA_CATEGORY_MARKETS.get(category)
        if market is None:
            return None
        if category == "11" and name.startswith(SINA_EXCLUDED_NAME_PREFIX):
            return None
        return Suggestion(code.upper(), name, market)


class TencentSuggestionParser(SuggestionParser):
    """Parser for Tencent ``v_hint="...";`` responses."""

    min_columns = 3

    def parse(self, response_text: str) -> list[Suggestion]:
        if not response_text:
            return []
        payload = response_text.replace('v_hint="', "").replace('"', "")

        result: list[Suggestion] = []
        for item in payload.split("^"):
            columns = item.split("~")
            if len(columns) < self.min_columns:
                continue
            market_code, code = columns[0], columns[1]
            market = TENCENT_MARKETS.get(market_code)
            if market is None:
                continue
            name = unescape_java(columns[2])
            if market is MarketType.ASHARE:
                code = market_code.upper() + code
            elif market is MarketType.US_STOCKS:
                code = code.split(".")[0].upper()
            result.append(Suggestion(code, name, market))
        return result


_PARSERS: dict[Provider, type[SuggestionParser]] = {
    Provider.SINA: SinaSuggestionParser,
    Provider.TENCENT: TencentSuggestionParser,
}


def parse_suggestions(provider: Provider | str, response_text: str) -> list[Suggestion]:
    """Parse one suggestion response from *provider*.

    Raises:
        UnsupportedMarketError: If *provider* is unknown.
    """
    parser = _PARSERS[resolve_provider(provider)]()
    suggestions = parser.parse(response_text)
    logger.info("Parsed %s suggestions: %d", parser.__class__.__name__, len(suggestions))
    return suggestions
