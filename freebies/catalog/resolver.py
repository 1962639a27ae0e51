from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from freebies.catalog.constants import (
    ADD_ON_CATEGORY_PREFIX,
    BANNER_PREFERENCE,
    GALLERY_EXCLUDED_SUBSTRING,
    GALLERY_EXCLUDED_TYPES,
    GALLERY_LIMIT,
    INVALID_SLUG_MARKER,
    OFFER_TYPE_ADD_ON,
    OFFER_TYPE_LABELS,
    STORE_PATH_SEGMENTS,
    THUMBNAIL_PREFERENCE,
)
from freebies.catalog.types import KeyImage, Offer

T = TypeVar("T")

DEFAULT_STORE_HOST = "epicgames.com"
DEFAULT_STORE_LOCALE = "en-US"
DEFAULT_PLACEHOLDER_IMAGE_URL = "https://picsum.photos/400/225"


def pick_first(candidates: Sequence[tuple[str, T]], preferred: Iterable[str]) -> T | None:
    """Ordered-fallback lookup over named variants.

    Returns the value of the first candidate whose variant matches the earliest
    entry in ``preferred``. When no variant matches, the first candidate wins;
    an empty candidate list yields ``None``.
    """
    for variant in preferred:
        for name, value in candidates:
            if name == variant:
                return value
    if candidates:
        return candidates[0][1]
    return None


def _usable_slug(slug: str | None) -> str | None:
    if not slug or INVALID_SLUG_MARKER in slug:
        return None
    return slug


def resolve_slug(offer: Offer) -> str:
    return _usable_slug(offer.offer_mapping_slug) or _usable_slug(offer.catalog_slug) or offer.id


def is_add_on(offer: Offer) -> bool:
    if offer.offer_type == OFFER_TYPE_ADD_ON:
        return True
    return any(category.path.startswith(ADD_ON_CATEGORY_PREFIX) for category in offer.categories)


def store_url(
    offer: Offer,
    *,
    host: str = DEFAULT_STORE_HOST,
    locale: str = DEFAULT_STORE_LOCALE,
) -> str:
    segment = STORE_PATH_SEGMENTS["add_on" if is_add_on(offer) else "base"]
    return f"https://store.{host}/{locale}/{segment}/{resolve_slug(offer)}"


def _image_candidates(images: Iterable[KeyImage]) -> list[tuple[str, str]]:
    return [(image.type, image.url) for image in images]


def thumbnail_url(offer: Offer, *, placeholder: str = DEFAULT_PLACEHOLDER_IMAGE_URL) -> str:
    url = pick_first(_image_candidates(offer.key_images), THUMBNAIL_PREFERENCE)
    return url if url is not None else placeholder


def banner_url(offer: Offer) -> str | None:
    return pick_first(_image_candidates(offer.key_images), BANNER_PREFERENCE)


def _is_gallery_image(image: KeyImage) -> bool:
    if image.type in GALLERY_EXCLUDED_TYPES:
        return False
    return GALLERY_EXCLUDED_SUBSTRING not in image.type.lower()


def gallery_images(offer: Offer) -> tuple[KeyImage, ...]:
    return tuple(image for image in offer.key_images if _is_gallery_image(image))[:GALLERY_LIMIT]


def category_labels(offer: Offer) -> tuple[str, ...]:
    return tuple(category.path.split("/")[-1] for category in offer.categories)


def offer_type_label(offer: Offer) -> str | None:
    return OFFER_TYPE_LABELS.get(offer.offer_type)
