"""
Fashion template service.

Turns a fashion template chat link into display entries: decode the link,
fetch the referenced skins and dyes from the catalog concurrently, and pick
the presentation RGB for every dye.
"""

import asyncio
from typing import Dict, List

from common.src.chat_links import (
    FashionSlot,
    FashionSlotEntry,
    build_skin_chat_link,
    decode_fashion_code,
)
from server.src.core.colors import FALLBACK_RGB, get_display_rgb, rgb_to_hex
from server.src.core.logging_config import get_logger
from server.src.core.metrics import metrics
from server.src.core.wiki import color_name_to_wiki_url, skin_name_to_wiki_url
from server.src.schemas.catalog import CatalogColor, CatalogSkin
from server.src.schemas.fashion import DisplayEntry, ResolvedColor
from server.src.schemas.service_results import (
    ServiceErrorCodes,
    ServiceResult,
    TemplateServiceResult,
)
from server.src.services.catalog_service import CatalogResolver

logger = get_logger(__name__)


class FashionTemplateService:
    """Decodes fashion templates and resolves them for display."""

    def __init__(self, resolver: CatalogResolver):
        self._resolver = resolver

    @staticmethod
    def decode(code: str) -> ServiceResult[List[FashionSlotEntry]]:
        """Decode a chat link into raw slot entries."""
        entries = decode_fashion_code(code)
        if entries is None:
            metrics.track_decode("undecodable")
            return ServiceResult.failure(
                "Not a decodable fashion template chat link",
                ServiceErrorCodes.UNDECODABLE_LINK,
            )
        metrics.track_decode("decoded")
        return ServiceResult.success_with_data(entries, "Template decoded")

    @staticmethod
    def skin_chat_link(skin_id: int) -> ServiceResult[str]:
        """Build the wardrobe skin chat link for skin_id."""
        link = build_skin_chat_link(skin_id)
        if not link:
            metrics.track_skin_link("out_of_range")
            return ServiceResult.failure(
                f"Skin id {skin_id} cannot be encoded in a chat link",
                ServiceErrorCodes.SKIN_ID_OUT_OF_RANGE,
            )
        metrics.track_skin_link("built")
        return ServiceResult.success_with_data(link)

    async def resolve(self, code: str) -> TemplateServiceResult[List[DisplayEntry]]:
        """
        Decode a chat link and resolve every non-empty slot for display.

        Empty slots are left out. Weapons are kept but never show dyes. The
        outfit id is not a wardrobe skin and gets a synthetic name instead of
        a catalog lookup. Skins and dyes missing from the catalog fall back
        to placeholder names rather than failing the request.

        Args:
            code: Fashion template chat link

        Returns:
            TemplateServiceResult with display entries in slot table order,
            or a failure with UNDECODABLE_LINK
        """
        decoded = self.decode(code)
        if not decoded.success:
            return TemplateServiceResult.failure(decoded.message, decoded.error_code)

        entries = [entry for entry in decoded.data if not entry.is_empty]
        skin_ids = [e.skin_id for e in entries if e.slot != FashionSlot.OUTFIT]
        color_ids = [
            color_id
            for e in entries
            if not e.is_weapon
            for color_id in e.color_ids
            if color_id is not None
        ]

        skins, colors = await asyncio.gather(
            self._resolver.fetch_skins(skin_ids),
            self._resolver.fetch_colors(color_ids),
        )
        skin_map: Dict[int, CatalogSkin] = {skin.id: skin for skin in skins}
        color_map: Dict[int, CatalogColor] = {color.id: color for color in colors}

        display_entries = [
            self._build_display_entry(entry, skin_map, color_map) for entry in entries
        ]

        unresolved_skins = sorted({i for i in skin_ids if i not in skin_map})
        unresolved_colors = sorted({i for i in color_ids if i not in color_map})
        logger.info(
            "Fashion template resolved",
            extra={
                "slot_count": len(display_entries),
                "unresolved_skins": len(unresolved_skins),
                "unresolved_colors": len(unresolved_colors),
            },
        )
        return TemplateServiceResult.success_with_resolution(
            display_entries, unresolved_skins, unresolved_colors
        )

    def _build_display_entry(
        self,
        entry: FashionSlotEntry,
        skin_map: Dict[int, CatalogSkin],
        color_map: Dict[int, CatalogColor],
    ) -> DisplayEntry:
        if entry.slot == FashionSlot.OUTFIT:
            return DisplayEntry(
                slot=entry.slot,
                skin_id=entry.skin_id,
                skin_name=f"Outfit (ID: {entry.skin_id})",
                colors=self._resolve_colors(entry, color_map),
            )

        skin = skin_map.get(entry.skin_id)
        skin_name = skin.name if skin and skin.name else f"Skin {entry.skin_id}"
        return DisplayEntry(
            slot=entry.slot,
            skin_id=entry.skin_id,
            skin_name=skin_name,
            skin_icon=skin.icon if skin else None,
            wiki_url=skin_name_to_wiki_url(skin.name) if skin and skin.name else None,
            chat_link=build_skin_chat_link(entry.skin_id) or None,
            colors=[] if entry.is_weapon else self._resolve_colors(entry, color_map),
            show_colors=not entry.is_weapon,
        )

    @staticmethod
    def _resolve_colors(
        entry: FashionSlotEntry, color_map: Dict[int, CatalogColor]
    ) -> List[ResolvedColor]:
        resolved = []
        for color_id in entry.color_ids:
            if color_id is None:
                continue
            color = color_map.get(color_id)
            rgb = get_display_rgb(color) if color else FALLBACK_RGB
            name = color.name if color and color.name else f"Color {color_id}"
            resolved.append(
                ResolvedColor(
                    id=color_id,
                    name=name,
                    rgb=rgb,
                    hex=rgb_to_hex(rgb),
                    wiki_url=color_name_to_wiki_url(color.name) if color and color.name else None,
                )
            )
        return resolved
