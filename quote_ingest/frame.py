"""
Tabular view of parser output for quote-ingest.

Display and alerting consumers sort, filter and colour quotes as a
table; these helpers hand them a pandas DataFrame with one row per
record and columns in model field order.
"""

from __future__ import annotations

from dataclasses import asdict, fields

import pandas as pd

from quote_ingest.models import Quote, Suggestion

QUOTE_COLUMNS = [f.name for f in fields(Quote)]
SUGGESTION_COLUMNS = [f.name for f in fields(Suggestion)]


def quotes_to_frame(quotes: list[Quote]) -> pd.DataFrame:
    """Build a DataFrame from quotes; an empty list gives an empty frame with all columns."""
    return pd.DataFrame([asdict(q) for q in quotes], columns=QUOTE_COLUMNS)


def suggestions_to_frame(suggestions: list[Suggestion]) -> pd.DataFrame:
    """Build a DataFrame from suggestions, with ``market`` as its string value."""
    rows = [
        {"code": s.code, "name": s.name, "market": s.market.value}
        for s in suggestions
    ]
    return pd.DataFrame(rows, columns=SUGGESTION_COLUMNS)
