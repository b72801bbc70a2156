"""
Tests for HTTP status-code validation and reason phrases.

Pure functions, no IO.
"""

import pytest

from error_reporter.domain.reporting.status_codes import reason_phrase, validate_status_code


class TestValidateStatusCode:
    """Tests for validate_status_code."""

    @pytest.mark.parametrize("value", [400, 404, 500, 599, "400", "599", " 418 ", 503.0])
    def test_accepts_error_statuses(self, value) -> None:
        """Ints, integral floats and numeric strings in 400-599 are accepted."""
        assert validate_status_code(value) == int(float(value))

    @pytest.mark.parametrize("value", [399, 600, 200, 0, -404, "399", "600", "1000"])
    def test_rejects_out_of_range(self, value) -> None:
        """Codes outside 400-599 are rejected, both bounds included."""
        assert validate_status_code(value) is None

    @pytest.mark.parametrize(
        "value", [None, "", "abc", "404abc", "4O4", 404.5, True, [404], {"code": 404}]
    )
    def test_rejects_non_numeric(self, value) -> None:
        """Values that are not base-10 integers are rejected."""
        assert validate_status_code(value) is None

    @pytest.mark.parametrize("value", ["4_04", "\uff14\uff10\uff14", "\u0664\u0660\u0664", "0x194"])
    def test_rejects_non_ascii_digit_strings(self, value: str) -> None:
        """Only ASCII decimal digits count, not underscores or other scripts."""
        assert validate_status_code(value) is None

    def test_very_long_digit_string(self) -> None:
        assert validate_status_code("4" * 5000) is None


class TestReasonPhrase:
    """Tests for reason_phrase."""

    def test_known_status(self) -> None:
        assert reason_phrase(404) == "Not Found"
        assert reason_phrase(501) == "Not Implemented"

    def test_unknown_status_is_empty(self) -> None:
        assert reason_phrase(499) == ""
