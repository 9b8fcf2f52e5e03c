"""
Unit tests for text helpers (quote_ingest.transforms.text).
"""

from __future__ import annotations

import pytest

from quote_ingest.transforms.text import normalize_code, unescape_java


class TestUnescapeJava:
    """Tests for unescape_java()."""

    def test_unicode_escapes(self):
        assert unescape_java("\\u817e\\u8baf\\u63a7\\u80a1") == "腾讯控股"

    def test_mixed_text_and_escapes(self):
        assert unescape_java("\\u82f9\\u679c Inc") == "苹果 Inc"

    def test_uppercase_hex(self):
        assert unescape_java("\\u00E9") == "é"

    def test_repeated_u(self):
        assert unescape_java("\\uu0041") == "A"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("a\\nb", "a\nb"),
            ("a\\tb", "a\tb"),
            ("a\\rb", "a\rb"),
            ("\\\"q\\\"", '"q"'),
            ("it\\'s", "it's"),
            ("back\\\\slash", "back\\slash"),
        ],
    )
    def test_simple_escapes(self, raw, expected):
        assert unescape_java(raw) == expected

    def test_octal_escapes(self):
        assert unescape_java("\\101\\60") == "A0"

    def test_unknown_escape_drops_backslash(self):
        assert unescape_java("\\q") == "q"

    def test_trailing_backslash_kept(self):
        assert unescape_java("abc\\") == "abc\\"

    @pytest.mark.parametrize(
        "raw, expected",
        [("\\uZZZZ", "uZZZZ"), ("\\u12", "u12"), ("x\\u00G1", "xu00G1")],
    )
    def test_malformed_unicode_escape_is_lenient(self, raw, expected):
        assert unescape_java(raw) == expected

    def test_plain_text_unchanged(self):
        assert unescape_java("浦发银行") == "浦发银行"
        assert unescape_java("") == ""


class TestNormalizeCode:
    """Tests for normalize_code()."""

    def test_uppercases(self):
        assert normalize_code("sh600000") == "SH600000"

    @pytest.mark.parametrize(
        "raw, prefix_length, expected",
        [
            ("hk00700", 2, "00700"),
            ("gb_aapl", 3, "AAPL"),
            ("btc_btcbtcusd", 4, "BTCBTCUSD"),
        ],
    )
    def test_strips_prefix(self, raw, prefix_length, expected):
        assert normalize_code(raw, prefix_length) == expected

    def test_exact_prefix_length_gives_blank_code(self):
        assert normalize_code("hk", 2) == ""

    def test_shorter_than_prefix(self):
        assert normalize_code("gb", 3) is None

    def test_remainder_not_trimmed(self):
        assert normalize_code("hk 00700 ", 2) == " 00700 "
