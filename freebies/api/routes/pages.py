from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import HTMLResponse

from freebies.api.templating import templates
from freebies.catalog.errors import CatalogFetchError
from freebies.catalog.lookup import find_offer, normalize_search_term
from freebies.catalog.presentation import OfferSection, build_detail, build_sections
from freebies.catalog.source import fetch_catalog
from freebies.catalog.types import CatalogFeed
from freebies.core.config import get_settings
from freebies.summary.service import generate_summary

router = APIRouter(tags=["pages"])
logger = structlog.get_logger(__name__)

CATALOG_ERROR_MESSAGE = "Failed to load game data. Please try again later."
SUMMARY_ERROR_MESSAGE = "Could not generate AI summary at this time."


async def _load_feed() -> tuple[CatalogFeed, str | None]:
    try:
        return await fetch_catalog(), None
    except CatalogFetchError:
        return CatalogFeed.empty(), CATALOG_ERROR_MESSAGE


def _has_no_results(*, term: str, sections: tuple[OfferSection, ...]) -> bool:
    return bool(term) and all(section.is_empty for section in sections)


async def _list_context(raw_term: str) -> dict[str, Any]:
    term = normalize_search_term(raw_term)
    feed, catalog_error = await _load_feed()
    sections = build_sections(
        feed,
        term=term,
        placeholder_image_url=get_settings().placeholder_image_url,
    )
    return {
        "term": term,
        "sections": sections,
        "catalog_error": catalog_error,
        "no_results": catalog_error is None and _has_no_results(term=term, sections=sections),
    }


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, q: str = Query(default="")) -> HTMLResponse:
    context = await _list_context(q)
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/offers/grid", response_class=HTMLResponse)
async def offers_grid(request: Request, q: str = Query(default="")) -> HTMLResponse:
    context = await _list_context(q)
    if request.headers.get("HX-Request"):
        return templates.TemplateResponse(request, "partials/offer_sections.html", context)
    # Direct hits (e.g. a refresh on a pushed URL) get the full page.
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/game/{slug}", response_class=HTMLResponse)
async def game_detail(request: Request, slug: str) -> HTMLResponse:
    feed, _ = await _load_feed()
    offer = find_offer(feed, slug)
    if offer is None:
        logger.info("offer_not_found", slug=slug)
        raise HTTPException(status_code=404, detail={"code": "E_OFFER_NOT_FOUND"})

    settings = get_settings()
    detail = build_detail(
        offer,
        store_host=settings.store_host,
        store_locale=settings.store_locale,
    )

    summary: str | None = None
    summary_error: str | None = None
    try:
        summary = await generate_summary(offer.description)
    except Exception:
        logger.exception("summary_generation_failed", offer_id=offer.id)
        summary_error = SUMMARY_ERROR_MESSAGE

    return templates.TemplateResponse(
        request,
        "detail.html",
        {
            "detail": detail,
            "summary": summary,
            "summary_error": summary_error,
        },
    )
