from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio

from server.src.services.catalog_service import CatalogResolver
from server.src.tests.utils.fake_catalog import FakeCatalog, make_color, make_skin
from server.src.tests.utils.fashion_samples import (
    SAMPLE_FASHION_CODE,
    SAMPLE_SKIN_IDS,
    TEST_BASE_URL,
    build_template_payload,
)
from server.src.tests.utils.time_mock import FrozenTime, ONE_HOUR, TIMESTAMP_START


@pytest.fixture
def sample_fashion_code() -> str:
    return SAMPLE_FASHION_CODE


@pytest.fixture
def template_payload() -> Callable[..., bytes]:
    """Factory building template payloads from {offset: value} maps."""
    return build_template_payload


@pytest.fixture
def frozen_time() -> FrozenTime:
    return FrozenTime(TIMESTAMP_START)


@pytest.fixture
def fake_catalog() -> FakeCatalog:
    """Catalog knowing every skin and dye of the sample template."""
    skins = [make_skin(skin_id) for skin_id in SAMPLE_SKIN_IDS.values()]
    skins[0] = make_skin(SAMPLE_SKIN_IDS["Backpack"], "Wings of Glory", type="Back")
    colors = [
        make_color(473, "Abyss", base_rgb=(128, 26, 26), cloth=(20, 20, 22), metal=(40, 40, 41)),
        make_color(1118, "Celestial", base_rgb=(128, 26, 26), leather=(220, 220, 225)),
    ]
    return FakeCatalog(skins=skins, colors=colors)


@pytest_asyncio.fixture
async def catalog_resolver(
    fake_catalog: FakeCatalog, frozen_time: FrozenTime
) -> AsyncGenerator[CatalogResolver, None]:
    """Resolver wired to the fake catalog with a frozen clock."""
    async with fake_catalog.client() as http_client:
        yield CatalogResolver(
            http_client,
            base_url=TEST_BASE_URL,
            batch_size=200,
            cache_ttl=ONE_HOUR,
            request_timeout=5.0,
            clock=frozen_time,
        )
