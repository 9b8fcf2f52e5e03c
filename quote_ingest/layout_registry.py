"""
Field-position table for quote-ingest.

Loads layout YAML files from quote_ingest/layouts/ and exposes them as
frozen Pydantic models keyed by (Provider, MarketType). Each layout
defines:
- extraction: how the payload is cut out of a response line
  (``regex`` for Sina, ``delimiter_scan`` for Tencent)
- min_tokens: records with fewer tokens are dropped before any lookup
- code/name/price/percentage/timestamp token indices (0-based)
- base: which price change and percentage are measured against

The indices are a contract with undocumented provider formats, so they
live in data files next to a comment showing a sample line, and the
validator refuses any index that the ``min_tokens`` gate would not
protect.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Literal, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from quote_ingest.exceptions import LayoutError, UnsupportedMarketError
from quote_ingest.models import MarketType, Provider
from quote_ingest.transforms.timestamps import SUPPORTED_PATTERNS

logger = logging.getLogger(__name__)

# Directory containing layout YAML files (sibling package)
_LAYOUTS_DIR = Path(__file__).parent / "layouts"

LayoutKey = tuple[Provider, MarketType]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ExtractionConfig(_Frozen):
    """How the token list is cut out of one response line."""
    method: Literal["regex", "delimiter_scan"]
    code_offset: int = 0  # delimiter_scan only: code starts here, ends at '='


class PriceIndices(_Frozen):
    """Token index of each price field. ``close=None``: no previous close."""
    current: int
    close: int | None
    opening: int
    high: int
    low: int


class TimestampConfig(_Frozen):
    """Tokens joined with a space, then parsed under ``source_pattern``."""
    indices: tuple[int, ...]
    source_pattern: str | None = None

    @model_validator(mode="after")
    def _check_pattern(self) -> TimestampConfig:
        if not self.indices:
            raise ValueError("timestamp.indices must not be empty")
        if self.source_pattern is not None and self.source_pattern not in SUPPORTED_PATTERNS:
            raise ValueError(
                f"Unsupported timestamp.source_pattern '{self.source_pattern}'. "
                f"Supported: {sorted(SUPPORTED_PATTERNS)}"
            )
        return self


class FieldLayout(_Frozen):
    """A complete field layout loaded from YAML."""
    provider: Provider
    market: MarketType
    description: str = ""
    extraction: ExtractionConfig
    min_tokens: int
    code_index: int = 0
    code_prefix_length: int = 0
    name_index: int
    prices: PriceIndices
    base: Literal["close", "opening"] = "close"
    percentage_index: int | None = None
    timestamp: TimestampConfig

    @property
    def key(self) -> LayoutKey:
        return (self.provider, self.market)

    def token_indices(self) -> list[int]:
        """Every token index this layout reads."""
        indices = [self.code_index, self.name_index]
        indices += [i for i in self.prices.model_dump().values() if i is not None]
        if self.percentage_index is not None:
            indices.append(self.percentage_index)
        indices += list(self.timestamp.indices)
        return indices

    @model_validator(mode="after")
    def _check_indices(self) -> FieldLayout:
        """Every index must be covered by the min_tokens gate."""
        out_of_range = [i for i in self.token_indices() if i < 0 or i >= self.min_tokens]
        if out_of_range:
            raise ValueError(
                f"Token indices {out_of_range} fall outside min_tokens={self.min_tokens}"
            )
        if self.prices.close is None and self.base == "close":
            raise ValueError("base 'close' requires a prices.close index")
        return self


def load_layout(path: Path) -> FieldLayout:
    """Load a single layout YAML file.

    Raises:
        LayoutError: If the file cannot be read or fails validation.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise LayoutError(f"Cannot read layout file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise LayoutError(f"Layout file is empty or not a mapping: {path}")
    try:
        return FieldLayout.model_validate(raw)
    except ValidationError as exc:
        raise LayoutError(f"Invalid layout file {path}:\n{exc}") from exc


def load_all_layouts(layouts_dir: Path | None = None) -> list[FieldLayout]:
    """Load all layout YAML files in *layouts_dir*, sorted by file name.

    Args:
        layouts_dir: Directory to scan for .yaml files. Defaults to
            the built-in layouts/ directory.
    """
    layouts_dir = layouts_dir or _LAYOUTS_DIR
    layouts: list[FieldLayout] = []
    for yaml_path in sorted(layouts_dir.glob("*.yaml")):
        layout = load_layout(yaml_path)
        layouts.append(layout)
        logger.debug(
            "Loaded layout: %s/%s from %s",
            layout.provider.value, layout.market.value, yaml_path.name,
        )
    return layouts


def build_table(layouts: list[FieldLayout]) -> Mapping[LayoutKey, FieldLayout]:
    """Index layouts by (provider, market) into a read-only mapping.

    Raises:
        LayoutError: If two layouts declare the same pair.
    """
    table: dict[LayoutKey, FieldLayout] = {}
    for layout in layouts:
        if layout.key in table:
            raise LayoutError(
                f"Duplicate layout for ({layout.provider.value}, {layout.market.value})"
            )
        table[layout.key] = layout
    return MappingProxyType(table)


@lru_cache(maxsize=None)
def field_position_table() -> Mapping[LayoutKey, FieldLayout]:
    """The built-in field-position table, loaded once per process."""
    table = build_table(load_all_layouts())
    logger.info("Loaded %d field layouts", len(table))
    return table


def resolve_provider(provider: Provider | str) -> Provider:
    try:
        return Provider(provider)
    except ValueError:
        raise UnsupportedMarketError(
            f"Unknown provider: '{provider}'. "
            f"Supported providers: {[p.value for p in Provider]}"
        ) from None


def resolve_market(market: MarketType | str) -> MarketType:
    try:
        return MarketType(market)
    except ValueError:
        raise UnsupportedMarketError(
            f"Unknown market: '{market}'. "
            f"Supported markets: {[m.value for m in MarketType]}"
        ) from None


def get_layout(
    provider: Provider | str,
    market: MarketType | str,
    table: Mapping[LayoutKey, FieldLayout] | None = None,
) -> FieldLayout:
    """Look up the layout for a (provider, market) pair.

    Raises:
        UnsupportedMarketError: If either name is unknown or the pair
            has no layout (e.g. Tencent crypto).
    """
    key = (resolve_provider(provider), resolve_market(market))
    table = field_position_table() if table is None else table
    try:
        return table[key]
    except KeyError:
        raise UnsupportedMarketError(
            f"No field layout for provider '{key[0].value}' and market '{key[1].value}'"
        ) from None
