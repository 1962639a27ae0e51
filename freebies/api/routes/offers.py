from __future__ import annotations

import structlog
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from freebies.catalog.errors import CatalogFetchError
from freebies.catalog.presentation import OfferCard, build_sections
from freebies.catalog.source import fetch_catalog
from freebies.core.config import get_settings

router = APIRouter(tags=["offers"])
logger = structlog.get_logger(__name__)


class OfferCardResponse(BaseModel):
    id: str
    title: str
    description: str
    slug: str
    detail_path: str
    thumbnail_url: str
    badge: str
    date_label: str | None
    kind: str


class OffersResponse(BaseModel):
    current: list[OfferCardResponse]
    upcoming: list[OfferCardResponse]


def _card_response(card: OfferCard) -> OfferCardResponse:
    return OfferCardResponse(**card.as_dict())


@router.get("/api/offers", response_model=OffersResponse)
async def list_offers(q: str = Query(default="")) -> OffersResponse:
    try:
        feed = await fetch_catalog()
    except CatalogFetchError:
        logger.warning("offers_api_catalog_unavailable")
        raise HTTPException(status_code=503, detail={"code": "E_CATALOG_UNAVAILABLE"}) from None

    current, upcoming = build_sections(
        feed,
        term=q,
        placeholder_image_url=get_settings().placeholder_image_url,
    )
    return OffersResponse(
        current=[_card_response(card) for card in current.cards],
        upcoming=[_card_response(card) for card in upcoming.cards],
    )
