"""
Demo script: parse saved provider responses via the public API.

Usage:
    uv run python scripts/parse_response.py sina AShare tests/fixtures/sina_ashare.txt
    uv run python scripts/parse_response.py tencent suggest tests/fixtures/tencent_suggest.txt

The second argument is a market name (AShare, HKStocks, USStocks,
Crypto) for quote responses, or ``suggest`` for an autocomplete
response. The parsed records are printed as a table.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("parse_response")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import quote_ingest

    if len(sys.argv) != 4:
        print(__doc__)
        return 2

    provider, market, response_path = sys.argv[1:]
    path = Path(response_path)
    if not path.exists():
        log.error("Response file not found: %s", path)
        return 1
    text = path.read_text(encoding="utf-8")

    if market == "suggest":
        df = quote_ingest.suggestions_to_frame(
            quote_ingest.parse_suggestions(provider, text)
        )
    else:
        df = quote_ingest.quotes_to_frame(
            quote_ingest.parse_quotes(provider, market, text)
        )

    log.info("Parsed %d record(s) from %s", len(df), path)
    if not df.empty:
        print(df.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
