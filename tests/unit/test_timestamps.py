"""
Unit tests for date-time normalization (quote_ingest.transforms.timestamps).
"""

from __future__ import annotations

import pytest

from quote_ingest.exceptions import DateTimeFormatError, ParsingError
from quote_ingest.transforms.timestamps import (
    CANONICAL_PATTERN,
    SUPPORTED_PATTERNS,
    normalize_datetime,
)


class TestNormalizeDatetime:
    """Tests for normalize_datetime()."""

    def test_compact_pattern(self):
        assert normalize_datetime("20250109150003", "yyyyMMddHHmmss") == "2025-01-09 15:00:03"

    def test_slash_pattern_without_seconds(self):
        assert normalize_datetime("2025/01/09 16:08", "yyyy/MM/dd HH:mm") == "2025-01-09 16:08:00"

    def test_slash_pattern_with_seconds(self):
        assert (
            normalize_datetime("2025/01/09 16:08:29", "yyyy/MM/dd HH:mm:ss")
            == "2025-01-09 16:08:29"
        )

    def test_canonical_to_canonical(self):
        assert normalize_datetime("2025-01-08 16:00:02", CANONICAL_PATTERN) == "2025-01-08 16:00:02"

    def test_passthrough_keeps_text_untouched(self):
        assert normalize_datetime("20250109 15:30:00", None) == "20250109 15:30:00"
        assert normalize_datetime("", None) == ""

    def test_other_target_pattern(self):
        assert (
            normalize_datetime("2025-01-09 15:00:03", CANONICAL_PATTERN, "yyyyMMddHHmmss")
            == "20250109150003"
        )

    def test_surrounding_whitespace_tolerated(self):
        assert normalize_datetime(" 20250109150003 ", "yyyyMMddHHmmss") == "2025-01-09 15:00:03"

    # -----------------------------------------------------------------
    # Mismatches
    # -----------------------------------------------------------------

    @pytest.mark.parametrize(
        "value, pattern",
        [
            ("2025-01-09", "yyyyMMddHHmmss"),
            ("2025010915000", "yyyyMMddHHmmss"),     # one digit short
            ("2025/1/9 16:08", "yyyy/MM/dd HH:mm"),   # no zero padding
            ("2025/01/09 16:08:29", "yyyy/MM/dd HH:mm"),
            ("2025/01/09 16:08", "yyyy/MM/dd HH:mm:ss"),
            ("not-a-date 16:08", "yyyy/MM/dd HH:mm"),
            ("", "yyyyMMddHHmmss"),
        ],
    )
    def test_shape_mismatch_raises(self, value, pattern):
        with pytest.raises(DateTimeFormatError):
            normalize_datetime(value, pattern)

    def test_impossible_date_raises(self):
        with pytest.raises(DateTimeFormatError):
            normalize_datetime("20251341150003", "yyyyMMddHHmmss")

    def test_error_is_a_parsing_error(self):
        with pytest.raises(ParsingError):
            normalize_datetime("garbage", "yyyyMMddHHmmss")

    def test_unsupported_pattern_raises_value_error(self):
        with pytest.raises(ValueError, match="Unsupported date-time pattern"):
            normalize_datetime("2025-01-09", "dd.MM.yyyy")

    def test_supported_patterns(self):
        assert SUPPORTED_PATTERNS == {
            "yyyyMMddHHmmss",
            "yyyy/MM/dd HH:mm",
            "yyyy/MM/dd HH:mm:ss",
            "yyyy-MM-dd HH:mm:ss",
        }
