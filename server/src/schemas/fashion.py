"""
Pydantic schemas for fashion template requests and resolved display entries.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Tuple

from common.src.chat_links import FashionSlot


class FashionCodeRequest(BaseModel):
    """A chat link submitted for decoding."""

    code: str = Field(..., min_length=1, description="Fashion template chat link, e.g. '[&Dw...]'")


class FashionSlotInfo(BaseModel):
    """Raw ids decoded for one slot."""

    slot: FashionSlot
    skin_id: int = Field(..., ge=0, le=0xFFFF)
    color_ids: List[Optional[int]] = Field(..., min_length=4, max_length=4, description="Dye ids, null when unset")


class DecodedTemplateResponse(BaseModel):
    entries: List[FashionSlotInfo]


class ResolvedColor(BaseModel):
    """One dye channel ready for display."""

    id: int = Field(..., description="Dye id")
    name: str
    rgb: Tuple[int, int, int]
    hex: str = Field(..., description="'#rrggbb' for CSS")
    wiki_url: Optional[str] = None


class DisplayEntry(BaseModel):
    """Skin and dyes of one slot, resolved against the catalog."""

    slot: FashionSlot
    skin_id: int
    skin_name: str
    skin_icon: Optional[str] = None
    wiki_url: Optional[str] = None
    chat_link: Optional[str] = Field(default=None, description="Wardrobe skin chat link for copying to the game")
    colors: List[ResolvedColor] = Field(default_factory=list)
    show_colors: bool = Field(default=True, description="False for weapons, which cannot be dyed")
    hidden: bool = Field(default=False, description="Slot is hidden in-game (e.g. helm toggled off)")


class ResolvedTemplateResponse(BaseModel):
    entries: List[DisplayEntry]


class SkinChatLinkResponse(BaseModel):
    skin_id: int
    chat_link: str
