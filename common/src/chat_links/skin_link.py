"""
Wardrobe skin chat link builder (chat link type 0x0A).

Payload: type byte 0x0A, skin id as 24-bit little-endian, one 0x00 byte.
Pasting the result into the game chat shows the skin tooltip.
"""

from ..constants import MAX_SKIN_ID, SKIN_ID_FIELD_SIZE, WARDROBE_SKIN_LINK_TYPE
from .envelope import encode_envelope


def build_skin_chat_link(skin_id: int) -> str:
    """
    Build the chat link for a single wardrobe skin.

    Args:
        skin_id: Wardrobe skin id in [0, 2^24 - 1]

    Returns:
        The ``[&...]`` link, or an empty string if the id cannot be encoded
    """
    if isinstance(skin_id, bool) or not isinstance(skin_id, int):
        return ""
    if skin_id < 0 or skin_id > MAX_SKIN_ID:
        return ""

    payload = bytearray([WARDROBE_SKIN_LINK_TYPE])
    payload += skin_id.to_bytes(SKIN_ID_FIELD_SIZE, "little")
    payload.append(0)
    return encode_envelope(payload)
