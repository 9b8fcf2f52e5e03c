"""
quote-ingest: normalize raw stock-quote provider responses.

Public API surface:

- ``parse_quotes(provider, market, response_text)`` -- **main entry
  point**. Turns one buffered quote response (Sina or Tencent) into a
  list of validated ``Quote`` records, in input order.

- ``parse_suggestions(provider, response_text)`` -- turns one search
  autocomplete response into ``Suggestion`` records.

- ``quotes_to_frame`` / ``suggestions_to_frame`` -- pandas views of
  either result for display consumers.

Both parse functions are pure and stateless: no I/O, no shared mutable
state, safe to call from any thread. Malformed provider data only ever
shortens the result; an unknown or unsupported (provider, market)
selector raises ``UnsupportedMarketError``.

Examples::

    import quote_ingest

    text = 'var hq_str_sh600000="浦发银行,8.50,8.45,8.52,...";'
    quotes = quote_ingest.parse_quotes("sina", "AShare", text)
    df = quote_ingest.quotes_to_frame(quotes)
"""

from __future__ import annotations

from quote_ingest.exceptions import (
    ConfigValidationError,
    DateTimeFormatError,
    LayoutError,
    ParsingError,
    QuoteIngestError,
    UnsupportedMarketError,
)
from quote_ingest.frame import quotes_to_frame, suggestions_to_frame
from quote_ingest.models import MarketType, Provider, Quote, Suggestion
from quote_ingest.parsers.quotes import QuoteParser, parse_quotes
from quote_ingest.parsers.suggestions import parse_suggestions

__all__ = [
    "parse_quotes",
    "parse_suggestions",
    "quotes_to_frame",
    "suggestions_to_frame",
    "QuoteParser",
    "Quote",
    "Suggestion",
    "MarketType",
    "Provider",
    "QuoteIngestError",
    "UnsupportedMarketError",
    "ConfigValidationError",
    "LayoutError",
    "ParsingError",
    "DateTimeFormatError",
]
