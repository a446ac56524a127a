"""Chat link codecs shared by the server and offline tooling."""

from .chat_links import (
    # Envelope
    decode_envelope,
    encode_envelope,
    # Errors
    ChatLinkError,
    FormatError,
    UnsupportedLinkType,
    # Fashion template
    FashionSlot,
    FashionSlotEntry,
    SLOT_SPECS,
    WEAPON_SLOTS,
    decode_fashion_code,
    # Wardrobe skin link
    build_skin_chat_link,
    abbreviate_fashion_code,
)

__all__ = [
    "decode_envelope",
    "encode_envelope",
    "ChatLinkError",
    "FormatError",
    "UnsupportedLinkType",
    "FashionSlot",
    "FashionSlotEntry",
    "SLOT_SPECS",
    "WEAPON_SLOTS",
    "decode_fashion_code",
    "build_skin_chat_link",
    "abbreviate_fashion_code",
]
