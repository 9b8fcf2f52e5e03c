"""
Custom exception hierarchy for quote-ingest.

Two kinds of failure are kept apart:
- Bad external data (a garbled line, a short record, an unparseable
  timestamp) is absorbed by the parsers and only ever shows up as fewer
  records in the output.
- Bad internal configuration (an unknown market, a broken layout file)
  is raised to the caller immediately.
"""


class QuoteIngestError(Exception):
    """Base exception for all quote-ingest errors."""


class UnsupportedMarketError(QuoteIngestError):
    """Raised when a provider/market selector has no field layout.

    Covers unknown provider or market names as well as known pairs that
    the provider simply does not serve (e.g. Tencent crypto quotes).
    """


class ConfigValidationError(QuoteIngestError):
    """Raised when a bundled or user-supplied YAML config fails validation."""


class LayoutError(ConfigValidationError):
    """Raised when a field-layout YAML file fails to load or validate.

    This can happen if:
    - The file is not valid YAML or misses required keys.
    - A token index is at or beyond the layout's ``min_tokens``.
    - Two files declare the same (provider, market) pair.
    """


class ParsingError(QuoteIngestError):
    """Raised when a single payload line has an unexpected structure."""


class DateTimeFormatError(ParsingError):
    """Raised when timestamp text does not match its source pattern."""
