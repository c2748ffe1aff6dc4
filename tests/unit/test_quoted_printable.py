"""
Unit tests for the quoted-printable decoder
(remember_bday.parsers.quoted_printable).
"""

from __future__ import annotations

import pytest

from remember_bday.exceptions import DecodeError
from remember_bday.parsers.quoted_printable import decode_quoted_printable


class TestDecodeQuotedPrintable:
    """Tests for decode_quoted_printable()."""

    # -----------------------------------------------------------------
    # Valid input
    # -----------------------------------------------------------------

    def test_multibyte_utf8(self):
        """Two-byte sequences (ä = C3 A4) decode to one character."""
        assert decode_quoted_printable("=54=C3=A4=73=74") == "Täst"

    def test_lowercase_hex(self):
        assert decode_quoted_printable("=54=c3=a4=73=74") == "Täst"

    def test_leading_text_is_discarded(self):
        """Everything before the first '=' is dropped."""
        assert decode_quoted_printable("junk=41=42") == "AB"

    def test_no_escape_markers_decodes_to_empty(self):
        assert decode_quoted_printable("Plain Name") == ""

    def test_empty_input(self):
        assert decode_quoted_printable("") == ""

    def test_four_byte_sequence(self):
        assert decode_quoted_printable("=F0=9F=8E=82") == "\U0001F382"

    # -----------------------------------------------------------------
    # Malformed tokens
    # -----------------------------------------------------------------

    def test_non_hex_token_fails(self):
        with pytest.raises(DecodeError, match="=ZZ"):
            decode_quoted_printable("=54=ZZ")

    def test_single_digit_token_fails(self):
        with pytest.raises(DecodeError):
            decode_quoted_printable("=5")

    def test_three_digit_token_fails(self):
        """Literal text after an escape ('=41B') is not accepted."""
        with pytest.raises(DecodeError):
            decode_quoted_printable("=41B")

    def test_trailing_marker_fails(self):
        """A trailing '=' yields an empty token."""
        with pytest.raises(DecodeError):
            decode_quoted_printable("=41=")

    def test_sign_prefixed_token_fails(self):
        with pytest.raises(DecodeError):
            decode_quoted_printable("=+5")

    # -----------------------------------------------------------------
    # Invalid UTF-8
    # -----------------------------------------------------------------

    def test_truncated_utf8_fails(self):
        with pytest.raises(DecodeError, match="UTF-8"):
            decode_quoted_printable("=54=C3")

    def test_invalid_start_byte_fails(self):
        with pytest.raises(DecodeError, match="UTF-8"):
            decode_quoted_printable("=FF")

    def test_decode_error_is_value_error(self):
        """Callers that only know ValueError still catch decoder failures."""
        with pytest.raises(ValueError):
            decode_quoted_printable("=GG")
