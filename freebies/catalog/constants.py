from __future__ import annotations

from typing import Literal

OfferKind = Literal["current", "upcoming"]

OFFER_KIND_CURRENT: OfferKind = "current"
OFFER_KIND_UPCOMING: OfferKind = "upcoming"

OFFER_TYPE_BASE_GAME = "BASE_GAME"
OFFER_TYPE_ADD_ON = "ADD_ON"
ADD_ON_CATEGORY_PREFIX = "add"

IMAGE_WIDE = "OfferImageWide"
IMAGE_TALL = "OfferImageTall"
IMAGE_THUMBNAIL = "Thumbnail"
IMAGE_HERO_VIDEO = "heroCarouselVideo"

THUMBNAIL_PREFERENCE: tuple[str, ...] = (IMAGE_WIDE, IMAGE_THUMBNAIL, IMAGE_TALL)
BANNER_PREFERENCE: tuple[str, ...] = (IMAGE_WIDE, IMAGE_THUMBNAIL)
GALLERY_EXCLUDED_TYPES = frozenset({IMAGE_WIDE, IMAGE_TALL, IMAGE_THUMBNAIL, IMAGE_HERO_VIDEO})
GALLERY_EXCLUDED_SUBSTRING = "avatar"
GALLERY_LIMIT = 8
GALLERY_MIN_KEY_IMAGES = 1

INVALID_SLUG_MARKER = "undefined"

# Storefront path segment per product kind. Epic serves both under /p/ today.
STORE_PATH_SEGMENTS: dict[str, str] = {
    "base": "p",
    "add_on": "p",
}

FREE_UPCOMING_DISCOUNT_PERCENTAGE = 100

DATE_INFO_UNAVAILABLE = "Date info unavailable"

SECTION_TITLES: dict[OfferKind, str] = {
    OFFER_KIND_CURRENT: "Currently Free",
    OFFER_KIND_UPCOMING: "Coming Soon",
}
SECTION_BADGES: dict[OfferKind, str] = {
    OFFER_KIND_CURRENT: "Free Now",
    OFFER_KIND_UPCOMING: "Coming Soon",
}
OFFER_TYPE_LABELS: dict[str, str] = {
    OFFER_TYPE_BASE_GAME: "Base Game",
    OFFER_TYPE_ADD_ON: "Add-On",
}
