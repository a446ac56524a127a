"""
Wiki page URLs for skins and dyes.

The catalog API carries no wiki links; page titles follow from display
names (spaces become underscores, everything else is URL-quoted).
"""

from typing import Optional
from urllib.parse import quote

from server.src.core.config import settings


def _to_wiki_title(name: str) -> str:
    trimmed = (name or "").strip()
    if not trimmed:
        return ""
    return quote(trimmed, safe="!~*'()").replace("%20", "_")


def skin_name_to_wiki_url(name: str, base_url: Optional[str] = None) -> str:
    """URL of a skin page, e.g. ``.../wiki/Ascalonian_Sentry_Helm_(skin)``."""
    base = (base_url or settings.WIKI_BASE_URL).rstrip("/")
    title = _to_wiki_title(name)
    if not title:
        return base
    return f"{base}/{title}_(skin)"


def color_name_to_wiki_url(name: str, base_url: Optional[str] = None) -> str:
    """URL of a dye page, e.g. ``.../wiki/Abyss_Dye``."""
    base = (base_url or settings.WIKI_BASE_URL).rstrip("/")
    title = _to_wiki_title(name)
    if not title:
        return base
    return f"{base}/{title}"
