from __future__ import annotations

from collections.abc import Iterable

from freebies.catalog.types import CatalogFeed, Offer


def _slug_candidates(offer: Offer) -> tuple[str | None, ...]:
    return (offer.offer_mapping_slug, offer.catalog_slug, offer.id)


def find_offer(feed: CatalogFeed, slug: str) -> Offer | None:
    for offer in feed.all_games:
        if slug in _slug_candidates(offer):
            return offer
    return None


def normalize_search_term(term: str | None) -> str:
    return (term or "").strip()


def filter_by_title(offers: Iterable[Offer], term: str | None) -> tuple[Offer, ...]:
    needle = normalize_search_term(term).lower()
    if not needle:
        return tuple(offers)
    return tuple(offer for offer in offers if needle in offer.title.lower())
