from __future__ import annotations

from freebies.catalog.constants import FREE_UPCOMING_DISCOUNT_PERCENTAGE, OFFER_TYPE_ADD_ON
from freebies.catalog.types import CatalogFeed, Offer


def is_current_offer(offer: Offer) -> bool:
    # Add-ons are listed whatever their price.
    return offer.price.total_price.discount_price == 0 or offer.offer_type == OFFER_TYPE_ADD_ON


def is_upcoming_offer(offer: Offer) -> bool:
    interval = offer.upcoming_interval
    if interval is not None and interval.discount_setting.discount_percentage == FREE_UPCOMING_DISCOUNT_PERCENTAGE:
        return True
    # Zero-priced offer with any upcoming promotion group.
    return offer.price.total_price.original_price == 0 and len(offer.upcoming_groups) > 0


def classify_feed(feed: CatalogFeed) -> CatalogFeed:
    return CatalogFeed(
        current_games=tuple(offer for offer in feed.current_games if is_current_offer(offer)),
        next_games=tuple(offer for offer in feed.next_games if is_upcoming_offer(offer)),
    )
