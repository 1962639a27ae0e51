from __future__ import annotations

from collections.abc import Iterable
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any
from urllib.parse import quote

from freebies.catalog.constants import (
    GALLERY_MIN_KEY_IMAGES,
    OFFER_KIND_CURRENT,
    OFFER_KIND_UPCOMING,
    SECTION_BADGES,
    SECTION_TITLES,
    OfferKind,
)
from freebies.catalog.date_labels import date_label
from freebies.catalog.lookup import filter_by_title
from freebies.catalog.resolver import (
    DEFAULT_PLACEHOLDER_IMAGE_URL,
    DEFAULT_STORE_HOST,
    DEFAULT_STORE_LOCALE,
    banner_url,
    category_labels,
    gallery_images,
    offer_type_label,
    resolve_slug,
    store_url,
    thumbnail_url,
)
from freebies.catalog.types import CatalogFeed, Offer


@dataclass(frozen=True, slots=True)
class OfferCard:
    id: str
    title: str
    description: str
    slug: str
    detail_path: str
    thumbnail_url: str
    badge: str
    date_label: str | None
    kind: OfferKind

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class OfferSection:
    title: str
    kind: OfferKind
    cards: tuple[OfferCard, ...]

    @property
    def is_empty(self) -> bool:
        return not self.cards


@dataclass(frozen=True, slots=True)
class OfferDetail:
    id: str
    title: str
    seller_name: str
    description: str
    banner_url: str | None
    store_url: str
    type_label: str | None
    category_labels: tuple[str, ...]
    gallery_urls: tuple[str, ...]


def detail_path(slug: str) -> str:
    return f"/game/{quote(slug, safe='')}"


def build_card(
    offer: Offer,
    kind: OfferKind,
    *,
    now: datetime | None = None,
    placeholder_image_url: str = DEFAULT_PLACEHOLDER_IMAGE_URL,
) -> OfferCard:
    slug = resolve_slug(offer)
    return OfferCard(
        id=offer.id,
        title=offer.title,
        description=offer.description,
        slug=slug,
        detail_path=detail_path(slug),
        thumbnail_url=thumbnail_url(offer, placeholder=placeholder_image_url),
        badge=SECTION_BADGES[kind],
        date_label=date_label(offer, kind, now=now),
        kind=kind,
    )


def build_section(
    offers: Iterable[Offer],
    kind: OfferKind,
    *,
    now: datetime | None = None,
    placeholder_image_url: str = DEFAULT_PLACEHOLDER_IMAGE_URL,
) -> OfferSection:
    return OfferSection(
        title=SECTION_TITLES[kind],
        kind=kind,
        cards=tuple(
            build_card(offer, kind, now=now, placeholder_image_url=placeholder_image_url)
            for offer in offers
        ),
    )


def build_sections(
    feed: CatalogFeed,
    *,
    term: str | None = None,
    now: datetime | None = None,
    placeholder_image_url: str = DEFAULT_PLACEHOLDER_IMAGE_URL,
) -> tuple[OfferSection, OfferSection]:
    return (
        build_section(
            filter_by_title(feed.current_games, term),
            OFFER_KIND_CURRENT,
            now=now,
            placeholder_image_url=placeholder_image_url,
        ),
        build_section(
            filter_by_title(feed.next_games, term),
            OFFER_KIND_UPCOMING,
            now=now,
            placeholder_image_url=placeholder_image_url,
        ),
    )


def _gallery_urls(offer: Offer) -> tuple[str, ...]:
    # A lone key image is already the banner.
    if len(offer.key_images) <= GALLERY_MIN_KEY_IMAGES:
        return ()
    return tuple(image.url for image in gallery_images(offer))


def build_detail(
    offer: Offer,
    *,
    store_host: str = DEFAULT_STORE_HOST,
    store_locale: str = DEFAULT_STORE_LOCALE,
) -> OfferDetail:
    return OfferDetail(
        id=offer.id,
        title=offer.title,
        seller_name=offer.seller.name,
        description=offer.description,
        banner_url=banner_url(offer),
        store_url=store_url(offer, host=store_host, locale=store_locale),
        type_label=offer_type_label(offer),
        category_labels=category_labels(offer),
        gallery_urls=_gallery_urls(offer),
    )
