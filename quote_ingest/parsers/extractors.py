"""
Payload extractors for the two quote wire formats.

Sina (regex)::

    var hq_str_sh600000="浦发银行,8.500,8.450,...";

The captured code is prepended to the data and the result split on ``,``.

Tencent (delimiter scan)::

    v_sh600000="1~浦发银行~600000~8.52~...";

The first ``=``, first ``"`` and last ``"`` are located by scanning.
The code is cut from a fixed offset (which skips ``v_`` or ``v_hk``-like
heads, per market) up to the ``=``, joined to the quoted data with
``~`` and the result split on ``~``.
"""

from __future__ import annotations

import re

from quote_ingest.layout_registry import ExtractionConfig
from quote_ingest.parsers.base import PayloadExtractor

_SINA_QUOTE_RE = re.compile(r'var hq_str_(\w+?)="(.*?)";')


class RegexExtractor(PayloadExtractor):
    """Sina ``var hq_str_<code>="<data>";`` lines."""

    delimiter = ","

    def __init__(self, pattern: re.Pattern[str] = _SINA_QUOTE_RE) -> None:
        self.pattern = pattern

    def extract(self, line: str) -> list[str] | None:
        match = self.pattern.search(line)
        if match is None:
            return None
        code, data = match.groups()
        return f"{code}{self.delimiter}{data}".split(self.delimiter)


class DelimiterScanExtractor(PayloadExtractor):
    """Tencent ``v_<code>="<data>";`` lines."""

    delimiter = "~"

    def __init__(self, code_offset: int) -> None:
        self.code_offset = code_offset

    def extract(self, line: str) -> list[str] | None:
        equal_index = line.find("=")
        first_quote = line.find('"')
        last_quote = line.rfind('"')
        if equal_index == -1 or first_quote == -1 or first_quote >= last_quote:
            return None
        if equal_index < self.code_offset:
            return None
        code = line[self.code_offset:equal_index]
        data = line[first_quote + 1:last_quote]
        return f"{code}{self.delimiter}{data}".split(self.delimiter)


def make_extractor(config: ExtractionConfig) -> PayloadExtractor:
    """Build the extractor a layout's ``extraction`` block asks for."""
    if config.method == "regex":
        return RegexExtractor()
    return DelimiterScanExtractor(code_offset=config.code_offset)
