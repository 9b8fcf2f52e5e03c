"""
Parsers sub-package for quote-ingest.

Converts one buffered provider response into normalized records.

Design: Strategy Pattern
- base.py defines the PayloadExtractor ABC and the per-line LineResult.
- extractors.py implements RegexExtractor (Sina) and
  DelimiterScanExtractor (Tencent).
- quotes.py implements QuoteParser, which is provider-agnostic above
  the extraction step and driven entirely by a FieldLayout.
- suggestions.py implements one SuggestionParser per provider.
- rankings.py reads volume-ranking payloads into watch-list codes.

All parsers are stateless per call and absorb bad provider data: the
worst case is an empty result, never an exception.
"""
