"""
Quote parser for quote-ingest.

Turns one buffered quote response into a list of Quote records, using
the FieldLayout of the requested (provider, market) pair.

Per line:
  1. Skip blank lines.
  2. Extract the token list (regex or delimiter scan, per layout).
  3. Drop lines with fewer than ``min_tokens`` tokens.
  4. Read code (prefix stripped, uppercased) and name.
  5. Coerce prices with ``safe_float``.
  6. Derive change and percentage against the layout's base price.
  7. Normalize the timestamp.
  8. Run the validation gate.

Each step either hands its value on or ends the line with a
``LineResult.drop``. A line never affects its neighbours: an unexpected
exception is caught at the line boundary, logged, and recorded as a
drop.
"""

from __future__ import annotations

import logging
import math

from quote_ingest.exceptions import DateTimeFormatError
from quote_ingest.layout_registry import FieldLayout, get_layout
from quote_ingest.models import MarketType, Provider, Quote
from quote_ingest.parsers.base import LineResult, PayloadExtractor
from quote_ingest.parsers.extractors import make_extractor
from quote_ingest.transforms.numbers import round2, safe_float
from quote_ingest.transforms.text import normalize_code
from quote_ingest.transforms.timestamps import normalize_datetime
from quote_ingest.validation import rejection_reason

logger = logging.getLogger(__name__)


def derive_change(current: float, base: float) -> tuple[float, float]:
    """Return ``(change, percentage)`` of *current* against *base*.

    Both are computed from the raw prices and rounded independently.
    A zero base gives a percentage of ``0.0``.
    """
    change = round2(current - base)
    if base == 0:
        return change, 0.0
    return change, round2((current - base) / base * 100)


class QuoteParser:
    """Parser for one provider/market quote format.

    The parser holds only its layout and extractor, so one instance can
    be reused across calls and threads.
    """

    def __init__(
        self,
        provider: Provider | str,
        market: MarketType | str,
        layout: FieldLayout | None = None,
    ) -> None:
        self.layout = layout or get_layout(provider, market)
        self.extractor: PayloadExtractor = make_extractor(self.layout.extraction)

    def parse(self, response_text: str) -> list[Quote]:
        """Parse a full response into accepted quotes, in input order."""
        results = self.parse_lines(response_text)
        quotes = [r.quote for r in results if r.quote is not None]
        logger.info(
            "Parsed %s/%s response: %d lines, %d quotes, %d dropped",
            self.layout.provider.title,
            self.layout.market.title,
            len(results),
            len(quotes),
            len(results) - len(quotes),
        )
        return quotes

    def parse_lines(self, response_text: str) -> list[LineResult]:
        """Parse every non-blank line, keeping a result per line."""
        results: list[LineResult] = []
        for line_no, line in enumerate(response_text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                result = self._parse_line(line_no, line)
            except Exception as exc:
                logger.warning("Line %d: unexpected error, dropped: %s", line_no, exc)
                result = LineResult.drop(line_no, f"unexpected error: {exc}")
            if not result.ok:
                logger.debug("Line %d dropped: %s", line_no, result.reason)
            results.append(result)
        return results

    def _parse_line(self, line_no: int, line: str) -> LineResult:
        tokens = self.extractor.extract(line)
        if tokens is None:
            return LineResult.drop(line_no, "no payload found")
        if len(tokens) < self.layout.min_tokens:
            return LineResult.drop(
                line_no,
                f"{len(tokens)} tokens, need at least {self.layout.min_tokens}",
            )
        return self._build_quote(line_no, tokens)

    def _build_quote(self, line_no: int, tokens: list[str]) -> LineResult:
        layout = self.layout

        code = normalize_code(tokens[layout.code_index], layout.code_prefix_length)
        if code is None:
            return LineResult.drop(line_no, "code token shorter than its prefix")
        name = tokens[layout.name_index]

        idx = layout.prices
        current = safe_float(tokens[idx.current])
        opening = safe_float(tokens[idx.opening])
        high = safe_float(tokens[idx.high])
        low = safe_float(tokens[idx.low])
        # No previous close: the current price stands in for it
        close = current if idx.close is None else safe_float(tokens[idx.close])
        base = close if layout.base == "close" else opening

        required = [current, base]
        percentage_raw = None
        if layout.percentage_index is not None:
            percentage_raw = safe_float(tokens[layout.percentage_index])
            required.append(percentage_raw)
        if not all(math.isfinite(v) for v in required):
            return LineResult.drop(line_no, "non-finite price")

        change, percentage = derive_change(current, base)
        if percentage_raw is not None:
            percentage = round2(percentage_raw)

        ts = layout.timestamp
        raw_time = " ".join(tokens[i] for i in ts.indices)
        try:
            update_at = normalize_datetime(raw_time, ts.source_pattern)
        except DateTimeFormatError as exc:
            return LineResult.drop(line_no, str(exc))

        quote = Quote(
            code=code,
            name=name,
            current=current,
            opening=opening,
            close=close,
            low=low,
            high=high,
            change=change,
            percentage=percentage,
            update_at=update_at,
        )
        reason = rejection_reason(quote)
        if reason is not None:
            return LineResult.drop(line_no, reason)
        return LineResult.accept(line_no, quote)


def parse_quotes(
    provider: Provider | str,
    market: MarketType | str,
    response_text: str,
) -> list[Quote]:
    """Parse one quote response for a (provider, market) pair.

    Raises:
        UnsupportedMarketError: If the pair has no field layout. Bad
            response data never raises; it only shortens the result.
    """
    return QuoteParser(provider, market).parse(response_text)
