"""
Transforms sub-package for quote-ingest.

Small, pure helpers the parsers compose per token:
  - numbers.py: safe text -> float coercion and two-decimal rounding.
  - timestamps.py: provider date-time text -> canonical timestamp.
  - text.py: instrument-code normalization and Java-style unescaping.

None of these raise on bad provider data except ``normalize_datetime``,
whose ``DateTimeFormatError`` tells the caller to drop the record.
"""
