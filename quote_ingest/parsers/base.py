"""
Base payload-extractor protocol / ABC for quote-ingest.

A PayloadExtractor turns one raw response line into the token list the
field layout indexes into, or ``None`` if the line carries no payload.
Returning ``None`` instead of raising keeps "not a quote line" an
ordinary outcome rather than an error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from quote_ingest.models import Quote


class PayloadExtractor(ABC):
    """Abstract base class for provider payload extraction."""

    delimiter: str

    @abstractmethod
    def extract(self, line: str) -> list[str] | None:
        """Split one response line into tokens.

        Token 0 is always the instrument code as found in the line; the
        provider's payload fields follow from token 1.

        Returns:
            The token list, or ``None`` if the line does not hold a
            well-formed payload.
        """


@dataclass(frozen=True)
class LineResult:
    """Outcome of parsing one response line: a quote or a drop reason."""

    line_no: int
    quote: Quote | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.quote is not None

    @classmethod
    def accept(cls, line_no: int, quote: Quote) -> LineResult:
        return cls(line_no=line_no, quote=quote)

    @classmethod
    def drop(cls, line_no: int, reason: str) -> LineResult:
        return cls(line_no=line_no, reason=reason)
