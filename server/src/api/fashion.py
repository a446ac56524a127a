"""
API endpoints for fashion template chat links.

Provides REST endpoints to decode a fashion template, resolve it against
the skin and dye catalog for display, and build wardrobe skin chat links.
Undecodable input is answered with 422; catalog outages only degrade the
resolved names and icons.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from server.src.core.logging_config import get_logger
from server.src.schemas.fashion import (
    DecodedTemplateResponse,
    FashionCodeRequest,
    FashionSlotInfo,
    ResolvedTemplateResponse,
    SkinChatLinkResponse,
)
from server.src.services.catalog_service import CatalogResolver
from server.src.services.fashion_template_service import FashionTemplateService

router = APIRouter()
logger = get_logger(__name__)


def get_catalog_resolver(request: Request) -> CatalogResolver:
    """Return the resolver created in the application lifespan."""
    return request.app.state.catalog_resolver


def get_fashion_service(
    resolver: CatalogResolver = Depends(get_catalog_resolver),
) -> FashionTemplateService:
    return FashionTemplateService(resolver)


@router.post(
    "/fashion/decode",
    response_model=DecodedTemplateResponse,
    summary="Decode a fashion template chat link",
)
async def decode_fashion_template(
    payload: FashionCodeRequest,
    service: FashionTemplateService = Depends(get_fashion_service),
) -> DecodedTemplateResponse:
    """
    Decode a fashion template into raw skin and dye ids per slot.

    - **code**: The `[&...]` chat link copied from the game.
    """
    result = service.decode(payload.code)
    if not result.success:
        logger.info("Rejected undecodable chat link", extra={"code_length": len(payload.code)})
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": result.message, "error_code": result.error_code},
        )

    return DecodedTemplateResponse(
        entries=[
            FashionSlotInfo(slot=e.slot, skin_id=e.skin_id, color_ids=list(e.color_ids))
            for e in result.data
        ]
    )


@router.post(
    "/fashion/resolve",
    response_model=ResolvedTemplateResponse,
    summary="Resolve a fashion template for display",
)
async def resolve_fashion_template(
    payload: FashionCodeRequest,
    service: FashionTemplateService = Depends(get_fashion_service),
) -> ResolvedTemplateResponse:
    """
    Decode a fashion template and resolve skin names, icons and dye colors.

    Ids the catalog does not know are returned with placeholder names.
    """
    result = await service.resolve(payload.code)
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": result.message, "error_code": result.error_code},
        )
    return ResolvedTemplateResponse(entries=result.data)


@router.get(
    "/skins/{skin_id}/chat-link",
    response_model=SkinChatLinkResponse,
    summary="Build a wardrobe skin chat link",
)
async def get_skin_chat_link(skin_id: int) -> SkinChatLinkResponse:
    """Return the chat link that shows skin_id when pasted into the game chat."""
    result = FashionTemplateService.skin_chat_link(skin_id)
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": result.message, "error_code": result.error_code},
        )
    return SkinChatLinkResponse(skin_id=skin_id, chat_link=result.data)
