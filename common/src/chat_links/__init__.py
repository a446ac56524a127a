"""
Chat link codecs.

Chat links are the ``[&<base64>]`` strings the game client copies to the
clipboard. Two link types are understood here:

- **0x0F** equipment / fashion template: decoded into per-slot skin and
  dye ids by ``decode_fashion_code``
- **0x0A** wardrobe skin: built by ``build_skin_chat_link``

## Quick Start

```python
from common.src.chat_links import decode_fashion_code, build_skin_chat_link

entries = decode_fashion_code(code)
if entries is None:
    ...  # not a fashion template, skip equipment details

for entry in entries:
    print(entry.slot.value, entry.skin_id, entry.color_ids)

link = build_skin_chat_link(entries[0].skin_id)
```
"""

from ..constants import DEFAULT_ABBREVIATION_LENGTH
from .envelope import decode_envelope, encode_envelope
from .errors import ChatLinkError, FormatError, UnsupportedLinkType
from .fashion_template import (
    NO_COLORS,
    SLOT_SPECS,
    WEAPON_SLOTS,
    FashionSlot,
    FashionSlotEntry,
    SlotSpec,
    decode_fashion_code,
    is_empty_skin,
    normalize_color_id,
    parse_fashion_payload,
)
from .skin_link import build_skin_chat_link


def abbreviate_fashion_code(code: str, max_length: int = DEFAULT_ABBREVIATION_LENGTH) -> str:
    """Shorten a code for list views, appending "..." when truncated."""
    if not code or len(code) <= max_length:
        return code
    return code[:max_length] + "..."


__all__ = [
    # Envelope
    "decode_envelope",
    "encode_envelope",
    # Errors
    "ChatLinkError",
    "FormatError",
    "UnsupportedLinkType",
    # Fashion template
    "FashionSlot",
    "FashionSlotEntry",
    "SlotSpec",
    "SLOT_SPECS",
    "WEAPON_SLOTS",
    "NO_COLORS",
    "decode_fashion_code",
    "parse_fashion_payload",
    "is_empty_skin",
    "normalize_color_id",
    # Wardrobe skin link
    "build_skin_chat_link",
    # Display
    "abbreviate_fashion_code",
]
