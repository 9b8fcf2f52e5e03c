"""
Shared test fixtures, path constants and line builders for quote-ingest tests.

All saved provider responses are defined here as module-level constants
for easy discovery. The builders produce synthetic single lines in each
provider's wire format, with chosen values at chosen token indices
(token 0 is the code taken from the variable name, as the parsers see it).
"""

from pathlib import Path

import pytest

from quote_ingest.models import Quote

# ---------------------------------------------------------------------------
# Saved responses -- edit here if files move or new ones are added
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

SINA_ASHARE_TXT = FIXTURES_DIR / "sina_ashare.txt"
SINA_HKSTOCKS_TXT = FIXTURES_DIR / "sina_hkstocks.txt"
SINA_USSTOCKS_TXT = FIXTURES_DIR / "sina_usstocks.txt"
SINA_CRYPTO_TXT = FIXTURES_DIR / "sina_crypto.txt"
TENCENT_ASHARE_TXT = FIXTURES_DIR / "tencent_ashare.txt"
TENCENT_HKSTOCKS_TXT = FIXTURES_DIR / "tencent_hkstocks.txt"
TENCENT_USSTOCKS_TXT = FIXTURES_DIR / "tencent_usstocks.txt"
SINA_SUGGEST_TXT = FIXTURES_DIR / "sina_suggest.txt"
TENCENT_SUGGEST_TXT = FIXTURES_DIR / "tencent_suggest.txt"
EASTMONEY_TOP_VOLUME_JSON = FIXTURES_DIR / "eastmoney_top_volume.json"


# ---------------------------------------------------------------------------
# Line builders
# ---------------------------------------------------------------------------
def _payload(fields: dict[int, str], size: int, filler: str) -> list[str]:
    """Payload tokens for a line of *size* tokens (code included)."""
    payload = [filler] * (size - 1)
    for index, value in fields.items():
        payload[index - 1] = value
    return payload


def sina_line(code: str, fields: dict[int, str], size: int, filler: str = "0") -> str:
    """``var hq_str_<code>="...";`` with ``fields[i]`` at token ``i``."""
    return f'var hq_str_{code}="{",".join(_payload(fields, size, filler))}";'


def tencent_line(head: str, fields: dict[int, str], size: int = 36, filler: str = "0") -> str:
    """``v_<head>="...";`` with ``fields[i]`` at token ``i``."""
    return f'v_{head}="{"~".join(_payload(fields, size, filler))}";'


def make_quote(code: str = "SH600000", current: float = 8.52, **overrides) -> Quote:
    """A valid Quote with chosen fields overridden."""
    values = dict(
        code=code, name="浦发银行", current=current, opening=8.5, close=8.45,
        low=8.4, high=8.6, change=0.07, percentage=0.83, update_at="2025-01-09 15:00:00",
    )
    values.update(overrides)
    return Quote(**values)


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs against saved provider responses)",
    )
