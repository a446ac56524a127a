"""
In-process fake of the skin and dye catalog API.

Plugs into ``httpx.MockTransport`` and records every request so tests can
assert on batching, deduplication and cache behaviour.
"""

from typing import Any, Dict, List, Optional, Set

import httpx


def make_skin(skin_id: int, name: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    record = {
        "id": skin_id,
        "name": name or f"Test Skin {skin_id}",
        "type": "Armor",
        "icon": f"https://render.guildwars2.com/file/{skin_id}.png",
        "flags": ["ShowInWardrobe"],
        "rarity": "Exotic",
    }
    record.update(extra)
    return record


def make_color(color_id: int, name: Optional[str] = None, base_rgb=(128, 26, 26), **materials: Any) -> Dict[str, Any]:
    record = {
        "id": color_id,
        "name": name or f"Test Dye {color_id}",
        "base_rgb": list(base_rgb),
        "categories": ["Gray", "Vibrant", "Common"],
    }
    for material, rgb in materials.items():
        record[material] = {"brightness": 0, "contrast": 1, "hue": 0, "rgb": list(rgb)}
    return record


class FakeCatalog:
    """
    Serves ``/v2/skins`` and ``/v2/colors`` from in-memory records.

    Attributes:
        requests: Every request received, in order
        failing_ids: Any chunk containing one of these ids gets a 500
        timeout_ids: Any chunk containing one of these ids times out
    """

    def __init__(self, skins: Optional[List[Dict]] = None, colors: Optional[List[Dict]] = None):
        self.skins = {s["id"]: s for s in (skins or [])}
        self.colors = {c["id"]: c for c in (colors or [])}
        self.requests: List[httpx.Request] = []
        self.failing_ids: Set[int] = set()
        self.timeout_ids: Set[int] = set()

    def requests_for(self, endpoint: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == f"/v2/{endpoint}"]

    def requested_ids(self, endpoint: str) -> List[List[int]]:
        return [
            [int(i) for i in r.url.params["ids"].split(",")]
            for r in self.requests_for(endpoint)
        ]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        ids = [int(i) for i in request.url.params.get("ids", "").split(",") if i]

        if self.timeout_ids.intersection(ids):
            raise httpx.ReadTimeout("catalog timed out", request=request)
        if self.failing_ids.intersection(ids):
            return httpx.Response(500, json={"text": "internal error"})

        if request.url.path == "/v2/skins":
            source = self.skins
        elif request.url.path == "/v2/colors":
            source = self.colors
        else:
            return httpx.Response(404, json={"text": "not found"})

        found = [source[i] for i in ids if i in source]
        if not found:
            return httpx.Response(404, json={"text": "all ids provided are invalid"})
        return httpx.Response(200 if len(found) == len(ids) else 206, json=found)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport())
