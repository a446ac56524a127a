"""
Envelope codec shared by every chat link type.

A chat link is the base64 form of a binary payload wrapped in ``[&`` and
``]``, e.g. ``[&AgH1WQAA]``. The first payload byte names the link type.
"""

import base64
import binascii
import re

from .errors import FormatError

ENVELOPE_PATTERN = re.compile(r"^\[&(.+)\]$", re.DOTALL)


def decode_envelope(text: str) -> bytes:
    """
    Unwrap a chat link and return its binary payload.

    Args:
        text: Chat link text, surrounding whitespace is ignored

    Returns:
        The base64-decoded payload bytes

    Raises:
        FormatError: If the brackets are missing or the interior is not base64
    """
    if not isinstance(text, str):
        raise FormatError(f"Chat link must be a string, got {type(text).__name__}")

    match = ENVELOPE_PATTERN.match(text.strip())
    if not match:
        raise FormatError("Invalid chat link format: expected [&...]")

    try:
        return base64.b64decode(match.group(1), validate=True)
    except (binascii.Error, ValueError) as e:
        raise FormatError(f"Invalid base64 in chat link: {e}") from e


def encode_envelope(payload: bytes) -> str:
    """Wrap a binary payload into the ``[&<base64>]`` chat link form."""
    return "[&" + base64.b64encode(bytes(payload)).decode("ascii") + "]"
