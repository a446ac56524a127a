"""
Exceptions raised while decoding chat links.

These never cross the public decode boundary: ``decode_fashion_code``
collapses them into ``None``. They are public so that the lower level
helpers (``decode_envelope``, ``parse_fashion_payload``) can be used and
tested on their own.
"""

from typing import Optional


class ChatLinkError(ValueError):
    """Base class for all chat link decoding errors."""


class FormatError(ChatLinkError):
    """The text is not a ``[&<base64>]`` envelope."""


class UnsupportedLinkType(ChatLinkError):
    """The payload has the wrong discriminant byte or is too short."""

    def __init__(self, message: str, link_type: Optional[int] = None, length: int = 0):
        super().__init__(message)
        self.link_type = link_type
        self.length = length
