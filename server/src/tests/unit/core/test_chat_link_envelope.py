"""
Unit tests for the chat link envelope codec.
"""

import pytest

from common.src.chat_links import FormatError, decode_envelope, encode_envelope


class TestDecodeEnvelope:
    """Tests for unwrapping [&...] chat links."""

    def test_decodes_base64_interior(self):
        """The bracketed base64 should decode to the raw payload."""
        assert decode_envelope("[&CtIEAAA=]") == bytes([0x0A, 0xD2, 0x04, 0x00, 0x00])

    def test_surrounding_whitespace_is_ignored(self):
        """Codes pasted with stray whitespace should still decode."""
        assert decode_envelope("  [&CtIEAAA=]\n") == bytes([0x0A, 0xD2, 0x04, 0x00, 0x00])

    @pytest.mark.parametrize("text", [
        "CtIEAAA=",
        "[CtIEAAA=]",
        "&CtIEAAA=]",
        "[&CtIEAAA=",
        "[&]",
        "",
        "prefix [&CtIEAAA=]",
    ])
    def test_missing_brackets_raise_format_error(self, text):
        """Anything that is not exactly [&...] is rejected."""
        with pytest.raises(FormatError):
            decode_envelope(text)

    @pytest.mark.parametrize("text", ["[&not base64!]", "[&CtIEAAA]", "[&ÄÖÜ]"])
    def test_invalid_base64_raises_format_error(self, text):
        """A bracketed interior that is not base64 is a format error."""
        with pytest.raises(FormatError):
            decode_envelope(text)

    def test_non_string_raises_format_error(self):
        with pytest.raises(FormatError):
            decode_envelope(None)

    def test_format_error_is_a_value_error(self):
        """Callers catching ValueError also catch envelope errors."""
        with pytest.raises(ValueError):
            decode_envelope("garbage")


class TestEncodeEnvelope:
    """Tests for wrapping payloads."""

    def test_wraps_in_brackets(self):
        assert encode_envelope(bytes([0x0A, 0xD2, 0x04, 0x00, 0x00])) == "[&CtIEAAA=]"

    def test_accepts_bytearray(self):
        assert encode_envelope(bytearray(b"\x0f")) == "[&Dw==]"

    def test_decode_inverts_encode(self):
        payload = bytes(range(97))
        assert decode_envelope(encode_envelope(payload)) == payload
