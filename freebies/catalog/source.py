from __future__ import annotations

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from freebies.catalog.classification import classify_feed
from freebies.catalog.errors import CatalogFetchError, CatalogPayloadError
from freebies.catalog.fixtures import FIXTURE_CATALOG
from freebies.catalog.types import CatalogFeed, Offer, parse_offers
from freebies.core.config import get_settings

logger = structlog.get_logger(__name__)


def _contract_offers(payload: dict[str, Any], key: str) -> tuple[Offer, ...]:
    raw_offers = payload.get(key)
    if raw_offers is not None and not isinstance(raw_offers, list):
        raise CatalogPayloadError(f"catalog payload field {key} must be a list")
    return parse_offers(raw_offers)


def _feed_from_contract(payload: dict[str, Any]) -> CatalogFeed:
    return CatalogFeed(
        current_games=_contract_offers(payload, "currentGames"),
        next_games=_contract_offers(payload, "nextGames"),
    )


def _valid_search_store_offers(elements: list[Any]) -> list[Offer]:
    offers: list[Offer] = []
    for index, element in enumerate(elements):
        try:
            offers.append(Offer.model_validate(element))
        except ValidationError as exc:
            logger.warning(
                "catalog_offer_skipped",
                index=index,
                offer_id=element.get("id") if isinstance(element, dict) else None,
                errors=exc.error_count(),
            )
    return offers


def _search_store_elements(payload: dict[str, Any]) -> list[dict[str, Any]] | None:
    try:
        elements = payload["data"]["Catalog"]["searchStore"]["elements"]
    except (KeyError, TypeError):
        return None
    return elements if isinstance(elements, list) else None


def _feed_from_search_store(elements: list[Any]) -> CatalogFeed:
    offers = _valid_search_store_offers(elements)
    current: list[Offer] = []
    upcoming: list[Offer] = []
    for offer in offers:
        if offer.current_intervals:
            current.append(offer)
        elif offer.upcoming_intervals:
            upcoming.append(offer)
    return CatalogFeed(current_games=tuple(current), next_games=tuple(upcoming))


def parse_catalog_payload(payload: object) -> CatalogFeed:
    """Accepts either the ``currentGames``/``nextGames`` contract or the raw
    Epic ``freeGamesPromotions`` response and returns the unclassified feed.

    Contract offers must all validate. Raw Epic elements that fail validation
    are logged and skipped.
    """
    if not isinstance(payload, dict):
        raise CatalogPayloadError("catalog payload must be a JSON object")

    try:
        if "currentGames" in payload or "nextGames" in payload:
            return _feed_from_contract(payload)
        elements = _search_store_elements(payload)
        if elements is not None:
            return _feed_from_search_store(elements)
    except ValidationError as exc:
        raise CatalogPayloadError("catalog payload failed validation") from exc

    raise CatalogPayloadError("catalog payload has an unknown shape")


async def _fetch_remote_payload(*, url: str, timeout_seconds: float) -> object:
    try:
        async with httpx.AsyncClient(timeout=timeout_seconds) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise CatalogFetchError(f"catalog request failed: {exc.__class__.__name__}") from exc


async def fetch_catalog() -> CatalogFeed:
    settings = get_settings()
    if settings.catalog_source == "remote":
        try:
            payload = await _fetch_remote_payload(
                url=settings.catalog_url,
                timeout_seconds=settings.catalog_timeout_seconds,
            )
            raw_feed = parse_catalog_payload(payload)
        except CatalogFetchError:
            logger.exception("catalog_fetch_failed", source="remote", url=settings.catalog_url)
            raise
    else:
        raw_feed = parse_catalog_payload(FIXTURE_CATALOG)

    feed = classify_feed(raw_feed)
    logger.debug(
        "catalog_loaded",
        source=settings.catalog_source,
        current_games=len(feed.current_games),
        next_games=len(feed.next_games),
    )
    return feed
