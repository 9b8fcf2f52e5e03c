"""
Unit tests for payload extractors (quote_ingest.parsers.extractors).
"""

from __future__ import annotations

import pytest

from quote_ingest.layout_registry import ExtractionConfig
from quote_ingest.parsers.extractors import (
    DelimiterScanExtractor,
    RegexExtractor,
    make_extractor,
)


class TestRegexExtractor:
    """Tests for Sina ``var hq_str_...`` extraction."""

    def test_code_prepended(self):
        tokens = RegexExtractor().extract('var hq_str_sh600000="浦发银行,8.50,8.45";')
        assert tokens == ["sh600000", "浦发银行", "8.50", "8.45"]

    def test_empty_payload(self):
        assert RegexExtractor().extract('var hq_str_sh600001="";') == ["sh600001", ""]

    def test_trailing_empty_field_kept(self):
        assert RegexExtractor().extract('var hq_str_sh1="a,b,";') == ["sh1", "a", "b", ""]

    def test_missing_terminator(self):
        assert RegexExtractor().extract('var hq_str_sh600000="浦发银行,8.50,8.45') is None

    def test_missing_closing_semicolon(self):
        assert RegexExtractor().extract('var hq_str_sh600000="浦发银行,8.50"') is None

    @pytest.mark.parametrize(
        "line",
        ["", "garbage", 'v_sh600000="1~x~600000";', 'var hq_str_="a,b";'],
    )
    def test_non_matching_lines(self, line):
        assert RegexExtractor().extract(line) is None

    def test_carriage_return_tolerated(self):
        assert RegexExtractor().extract('var hq_str_hk00700="a,b";\r') == ["hk00700", "a", "b"]


class TestDelimiterScanExtractor:
    """Tests for Tencent ``v_...="..."`` extraction."""

    def test_ashare_offset(self):
        tokens = DelimiterScanExtractor(code_offset=2).extract('v_sh600000="1~浦发银行~600000";')
        assert tokens == ["sh600000", "1", "浦发银行", "600000"]

    def test_hk_offset(self):
        tokens = DelimiterScanExtractor(code_offset=4).extract('v_hk00700="100~腾讯控股~00700";')
        assert tokens == ["00700", "100", "腾讯控股", "00700"]

    def test_us_offset(self):
        tokens = DelimiterScanExtractor(code_offset=4).extract('v_usAAPL="200~苹果~AAPL.OQ";')
        assert tokens[0] == "AAPL"

    def test_no_equal_sign(self):
        assert DelimiterScanExtractor(2).extract('v_sh600000"1~a"') is None

    def test_no_quotes(self):
        assert DelimiterScanExtractor(2).extract("v_sh600000=1~a;") is None

    def test_single_quote_char(self):
        assert DelimiterScanExtractor(2).extract('v_sh600000="1~a;') is None

    def test_equal_sign_before_offset(self):
        assert DelimiterScanExtractor(4).extract('v=="1~a";') is None

    def test_empty_payload(self):
        assert DelimiterScanExtractor(2).extract('v_sh600000="";') == ["sh600000", ""]


def test_make_extractor():
    assert isinstance(make_extractor(ExtractionConfig(method="regex")), RegexExtractor)
    scan = make_extractor(ExtractionConfig(method="delimiter_scan", code_offset=4))
    assert isinstance(scan, DelimiterScanExtractor)
    assert scan.code_offset == 4
