"""
Data model for quote-ingest.

- MarketType / Provider: closed enums selecting the field layout.
- Quote: one instrument snapshot. Identity is the instrument code, so a
  set or dict keyed by quotes never holds two entries for one code.
- Suggestion: one search-autocomplete match (plain value equality).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MarketType(str, Enum):
    """Listing venue/category; each one has its own token layout."""

    ASHARE = "AShare"
    HK_STOCKS = "HKStocks"
    US_STOCKS = "USStocks"
    CRYPTO = "Crypto"

    @property
    def title(self) -> str:
        return _MARKET_TITLES[self]


class Provider(str, Enum):
    """External quote source with its own wire format."""

    SINA = "sina"
    TENCENT = "tencent"

    @property
    def title(self) -> str:
        return self.value.capitalize()


_MARKET_TITLES = {
    MarketType.ASHARE: "CN",
    MarketType.HK_STOCKS: "HK",
    MarketType.US_STOCKS: "US",
    MarketType.CRYPTO: "Crypto",
}


@dataclass(frozen=True, eq=False)
class Quote:
    """Normalized snapshot of one instrument.

    Attributes:
        code: Uppercased instrument code, provider prefix removed.
        name: Display name as sent by the provider.
        current, opening, close, low, high: Finite prices.
        change: ``current - base`` rounded to two decimals.
        percentage: Change relative to base, in percent, two decimals.
        update_at: Timestamp text, ``YYYY-MM-DD HH:MM:SS`` where the
            provider's format allows it.
    """

    code: str
    name: str
    current: float
    opening: float
    close: float
    low: float
    high: float
    change: float
    percentage: float
    update_at: str

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quote):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


@dataclass(frozen=True)
class Suggestion:
    """One autocomplete match."""

    code: str
    name: str
    market: MarketType
