"""
Provider configuration models and YAML I/O for quote-ingest.

This module defines the Pydantic models that map 1:1 to providers.yaml,
plus the request helpers built on them. No HTTP is performed here; the
transport layer asks these helpers what to fetch and hands the buffered
response back to the parsers.

Key models:
- ProviderSettings: hosts, referer and code conventions of one provider.
- ProviderCatalog: all providers plus index and active watch-lists.

Key functions:
- load_config(path) -> ProviderCatalog: Load and validate from YAML.
- default_config() -> ProviderCatalog: The built-in file, loaded once.
- build_quote_url / build_suggest_url / request_headers.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from quote_ingest.exceptions import ConfigValidationError, UnsupportedMarketError
from quote_ingest.layout_registry import resolve_market, resolve_provider
from quote_ingest.models import MarketType, Provider

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path(__file__).parent / "providers.yaml"


class ProviderSettings(BaseModel):
    """Endpoints and request conventions of one provider."""

    model_config = ConfigDict(frozen=True)

    quote_host: str
    suggest_host: str
    referer: str | None = None
    prefixes: dict[MarketType, str] = Field(
        ..., description="Code prefix per served market; absent = not served"
    )
    uppercase_markets: frozenset[MarketType] = frozenset()


class ProviderCatalog(BaseModel):
    """Top-level configuration; maps 1:1 to providers.yaml."""

    model_config = ConfigDict(frozen=True)

    providers: dict[Provider, ProviderSettings]
    index_codes: dict[MarketType, list[str]] = Field(default_factory=dict)
    active_codes: dict[MarketType, list[str]] = Field(default_factory=dict)

    def settings_for(self, provider: Provider | str) -> ProviderSettings:
        provider = resolve_provider(provider)
        try:
            return self.providers[provider]
        except KeyError:
            raise UnsupportedMarketError(
                f"Provider '{provider.value}' is not configured"
            ) from None


def load_config(path: str | Path) -> ProviderCatalog:
    """Load and validate a providers.yaml file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded provider config from %s", path)
    return ProviderCatalog.model_validate(raw)


@lru_cache(maxsize=None)
def default_config() -> ProviderCatalog:
    """The built-in providers.yaml, loaded once per process."""
    return load_config(_DEFAULT_CONFIG_PATH)


def provider_from_title(title: str) -> Provider:
    """Map a display title ("Sina", "Tencent") to a Provider; defaults to Sina."""
    for provider in Provider:
        if provider.title == title:
            return provider
    return Provider.SINA


def _request_code(settings: ProviderSettings, market: MarketType, code: str) -> str:
    code = code.upper() if market in settings.uppercase_markets else code.lower()
    return f"{settings.prefixes[market]}{code}"


def build_quote_url(
    provider: Provider | str,
    market: MarketType | str,
    codes: list[str],
    config: ProviderCatalog | None = None,
) -> str | None:
    """Build the quote request URL for *codes*.

    Example (Sina, HK): ``["00700"]`` -> ``https://hq.sinajs.cn/list=hk00700``

    Returns:
        The URL, or ``None`` if *codes* is empty (nothing to request).

    Raises:
        UnsupportedMarketError: If the provider does not serve *market*.
    """
    provider = resolve_provider(provider)
    market = resolve_market(market)
    settings = (config or default_config()).settings_for(provider)
    if market not in settings.prefixes:
        raise UnsupportedMarketError(
            f"{provider.title} does not serve {market.title} quotes (market '{market.value}')"
        )
    if not codes:
        return None
    joined = ",".join(_request_code(settings, market, code) for code in codes)
    return f"{settings.quote_host}{joined}"


def build_suggest_url(
    provider: Provider | str,
    key: str,
    config: ProviderCatalog | None = None,
) -> str:
    """Build the suggestion request URL for a search *key*."""
    settings = (config or default_config()).settings_for(provider)
    return f"{settings.suggest_host}{key}"


def request_headers(
    provider: Provider | str,
    config: ProviderCatalog | None = None,
) -> dict[str, str]:
    """Headers a request to *provider* must carry (Sina rejects requests without a Referer)."""
    settings = (config or default_config()).settings_for(provider)
    if settings.referer:
        return {"Referer": settings.referer}
    return {}


def index_codes(market: MarketType | str, config: ProviderCatalog | None = None) -> list[str]:
    """Codes of the headline indices of *market*."""
    market = resolve_market(market)
    return list((config or default_config()).index_codes.get(market, []))
