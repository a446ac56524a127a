"""
Pydantic schemas for records returned by the remote skin and dye catalog.

Only the fields the presentation layer uses are modelled; everything else
in the upstream JSON is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple


class MaterialColor(BaseModel):
    """Dye appearance on one material (cloth, leather, metal or fur)."""

    model_config = ConfigDict(extra="ignore")

    rgb: Optional[Tuple[int, int, int]] = Field(default=None, description="Rendered RGB on this material")


class CatalogSkin(BaseModel):
    """Wardrobe skin metadata."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: Optional[str] = Field(default=None, description="Display name, missing for some skins")
    type: Optional[str] = Field(default=None, description="Category: Armor, Weapon, Back or Gathering")
    icon: Optional[str] = Field(default=None, description="Render service icon URL")


class CatalogColor(BaseModel):
    """Dye metadata with per-material RGB variants."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: Optional[str] = Field(default=None, description="Display name, missing for some dyes")
    base_rgb: Tuple[int, int, int] = Field(..., description="Shared base RGB")
    cloth: Optional[MaterialColor] = None
    leather: Optional[MaterialColor] = None
    metal: Optional[MaterialColor] = None
    fur: Optional[MaterialColor] = None
