"""
Fashion template decoder (chat link type 0x0F).

The equipment template payload is a flat byte layout with no length or
record markers. Every field is a little-endian uint16 at a fixed offset, so
the slot table below is the whole format definition: when the game changes
its template layout every offset moves at once and the table has to be
re-validated against known-good sample links.

Layout (offsets into the decoded payload):

| Slot           | Skin | Dyes (x4)      |
|----------------|------|----------------|
| Helm           | 43   | 45, 47, 49, 51 |
| Shoulders      | 63   | 65, 67, 69, 71 |
| Coat           | 13   | 15, 17, 19, 21 |
| Gloves         | 33   | 35, 37, 39, 41 |
| Leggings       | 53   | 55, 57, 59, 61 |
| Boots          | 23   | 25, 27, 29, 31 |
| Backpack       | 3    | 5, 7, 9, 11    |
| Aquabreather   | 1    |                |
| Outfit         | 73   | 75, 77, 79, 81 |
| WeaponSet1Main | 87   |                |
| WeaponSet1Off  | 89   |                |
| WeaponSet2Main | 91   |                |
| WeaponSet2Off  | 93   |                |
| WeaponAquaticA | 83   |                |
| WeaponAquaticB | 85   |                |
"""

import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from ..constants import (
    EMPTY_ID,
    EQUIPMENT_TEMPLATE_TYPE,
    MIN_TEMPLATE_PAYLOAD_LENGTH,
    NO_DYE_SENTINEL,
    TEMPLATE_FIELD_SIZE,
)
from .envelope import decode_envelope
from .errors import ChatLinkError, UnsupportedLinkType

_UINT16_LE = struct.Struct("<H")

ColorIds = Tuple[Optional[int], Optional[int], Optional[int], Optional[int]]
NO_COLORS: ColorIds = (None, None, None, None)


class FashionSlot(str, Enum):
    """Equipment slots carried by a fashion template."""
    HELM = "Helm"
    SHOULDERS = "Shoulders"
    COAT = "Coat"
    GLOVES = "Gloves"
    LEGGINGS = "Leggings"
    BOOTS = "Boots"
    BACKPACK = "Backpack"
    AQUABREATHER = "Aquabreather"
    OUTFIT = "Outfit"
    WEAPON_SET1_MAIN = "WeaponSet1Main"
    WEAPON_SET1_OFF = "WeaponSet1Off"
    WEAPON_SET2_MAIN = "WeaponSet2Main"
    WEAPON_SET2_OFF = "WeaponSet2Off"
    WEAPON_AQUATIC_A = "WeaponAquaticA"
    WEAPON_AQUATIC_B = "WeaponAquaticB"


# Weapons are never dyed in-game
WEAPON_SLOTS: FrozenSet[FashionSlot] = frozenset({
    FashionSlot.WEAPON_SET1_MAIN,
    FashionSlot.WEAPON_SET1_OFF,
    FashionSlot.WEAPON_SET2_MAIN,
    FashionSlot.WEAPON_SET2_OFF,
    FashionSlot.WEAPON_AQUATIC_A,
    FashionSlot.WEAPON_AQUATIC_B,
})


@dataclass(frozen=True)
class SlotSpec:
    """
    Byte layout of one slot.

    Attributes:
        slot: Slot the offsets belong to
        skin_offset: First byte of the uint16 skin id
        color_offsets: First bytes of the four uint16 dye ids, None for
            slots that cannot be dyed
    """
    slot: FashionSlot
    skin_offset: int
    color_offsets: Optional[Tuple[int, int, int, int]] = None


SLOT_SPECS: Tuple[SlotSpec, ...] = (
    SlotSpec(FashionSlot.HELM, 43, (45, 47, 49, 51)),
    SlotSpec(FashionSlot.SHOULDERS, 63, (65, 67, 69, 71)),
    SlotSpec(FashionSlot.COAT, 13, (15, 17, 19, 21)),
    SlotSpec(FashionSlot.GLOVES, 33, (35, 37, 39, 41)),
    SlotSpec(FashionSlot.LEGGINGS, 53, (55, 57, 59, 61)),
    SlotSpec(FashionSlot.BOOTS, 23, (25, 27, 29, 31)),
    SlotSpec(FashionSlot.BACKPACK, 3, (5, 7, 9, 11)),
    SlotSpec(FashionSlot.AQUABREATHER, 1),
    SlotSpec(FashionSlot.OUTFIT, 73, (75, 77, 79, 81)),
    SlotSpec(FashionSlot.WEAPON_SET1_MAIN, 87),
    SlotSpec(FashionSlot.WEAPON_SET1_OFF, 89),
    SlotSpec(FashionSlot.WEAPON_SET2_MAIN, 91),
    SlotSpec(FashionSlot.WEAPON_SET2_OFF, 93),
    SlotSpec(FashionSlot.WEAPON_AQUATIC_A, 83),
    SlotSpec(FashionSlot.WEAPON_AQUATIC_B, 85),
)


@dataclass(frozen=True)
class FashionSlotEntry:
    """Skin and dye ids decoded for one slot."""
    slot: FashionSlot
    skin_id: int
    color_ids: ColorIds = NO_COLORS

    @property
    def is_empty(self) -> bool:
        return is_empty_skin(self.skin_id)

    @property
    def is_weapon(self) -> bool:
        return self.slot in WEAPON_SLOTS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "slot": self.slot.value,
            "skin_id": self.skin_id,
            "color_ids": list(self.color_ids),
        }


def is_empty_skin(skin_id: int) -> bool:
    """True when a skin id marks an empty slot."""
    return skin_id in (EMPTY_ID, NO_DYE_SENTINEL)


def normalize_color_id(raw: Optional[int]) -> Optional[int]:
    """Map the "no dye" sentinels (and unreadable fields) to None."""
    if raw is None or raw in (EMPTY_ID, NO_DYE_SENTINEL):
        return None
    return raw


def _read_uint16(payload: bytes, offset: int) -> Optional[int]:
    if offset < 0 or offset + TEMPLATE_FIELD_SIZE > len(payload):
        return None
    return _UINT16_LE.unpack_from(payload, offset)[0]


def _read_colors(payload: bytes, spec: SlotSpec) -> ColorIds:
    if spec.color_offsets is None:
        return NO_COLORS
    return tuple(
        normalize_color_id(_read_uint16(payload, offset))
        for offset in spec.color_offsets
    )


def parse_fashion_payload(payload: bytes) -> List[FashionSlotEntry]:
    """
    Interpret a decoded payload as a fashion template.

    Fields are bounds-checked one at a time: a slot whose skin id lies past
    the end of the payload is skipped, a dye past the end reads as unset.

    Raises:
        UnsupportedLinkType: If the payload is too short or not type 0x0F
    """
    if len(payload) < MIN_TEMPLATE_PAYLOAD_LENGTH:
        raise UnsupportedLinkType(
            f"Payload too short for a fashion template: {len(payload)} bytes",
            link_type=payload[0] if payload else None,
            length=len(payload),
        )
    if payload[0] != EQUIPMENT_TEMPLATE_TYPE:
        raise UnsupportedLinkType(
            f"Unsupported chat link type: 0x{payload[0]:02X}",
            link_type=payload[0],
            length=len(payload),
        )

    entries: List[FashionSlotEntry] = []
    for spec in SLOT_SPECS:
        skin_id = _read_uint16(payload, spec.skin_offset)
        if skin_id is None:
            continue
        entries.append(
            FashionSlotEntry(
                slot=spec.slot,
                skin_id=skin_id,
                color_ids=_read_colors(payload, spec),
            )
        )
    return entries


def decode_fashion_code(code: Any) -> Optional[List[FashionSlotEntry]]:
    """
    Decode a fashion template chat link into per-slot skin and dye ids.

    Never raises for malformed input. Anything that is not a well-formed
    type 0x0F link returns None, which callers treat as "unsupported code".

    Args:
        code: Chat link text, e.g. ``[&DwAAAAAA...]``

    Returns:
        Entries in slot table order, or None if the code cannot be decoded
    """
    if not code or not isinstance(code, str):
        return None

    try:
        payload = decode_envelope(code)
        return parse_fashion_payload(payload)
    except ChatLinkError:
        return None
