from __future__ import annotations

import math
from datetime import datetime, timezone

import structlog

from freebies.catalog.constants import (
    DATE_INFO_UNAVAILABLE,
    OFFER_KIND_CURRENT,
    OFFER_KIND_UPCOMING,
    OfferKind,
)
from freebies.catalog.types import Offer

logger = structlog.get_logger(__name__)

MINUTES_IN_HOUR = 60
MINUTES_IN_DAY = 1440
MINUTES_IN_MONTH = 43200
MINUTES_IN_YEAR = 525600


def parse_timestamp(raw: str) -> datetime:
    value = raw.strip()
    if value.endswith(("Z", "z")):
        value = f"{value[:-1]}+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def _strict_distance(milliseconds: float) -> str:
    minutes = milliseconds / 60000
    if minutes < 1:
        return _pluralize(_round_half_up(milliseconds / 1000), "second")
    if minutes < MINUTES_IN_HOUR:
        return _pluralize(_round_half_up(minutes), "minute")
    if minutes < MINUTES_IN_DAY:
        return _pluralize(_round_half_up(minutes / MINUTES_IN_HOUR), "hour")
    if minutes < MINUTES_IN_MONTH:
        return _pluralize(_round_half_up(minutes / MINUTES_IN_DAY), "day")
    if minutes < MINUTES_IN_YEAR:
        months = _round_half_up(minutes / MINUTES_IN_MONTH)
        if months == 12:
            return "1 year"
        return _pluralize(months, "month")
    return _pluralize(_round_half_up(minutes / MINUTES_IN_YEAR), "year")


def format_distance_strict(target: datetime, *, now: datetime) -> str:
    """Single-unit relative distance such as ``in 3 days`` or ``2 hours ago``.

    Units switch at one minute, one hour, one day, 30 days and 365 days; the
    count is rounded half-up. Targets at or before ``now`` read as past.
    """
    delta_ms = (target - now).total_seconds() * 1000
    distance = _strict_distance(abs(delta_ms))
    if delta_ms > 0:
        return f"in {distance}"
    return f"{distance} ago"


def _resolve_now(now: datetime | None) -> datetime:
    return now if now is not None else datetime.now(timezone.utc)


def _relative_label(prefix: str, raw: str, *, offer: Offer, now: datetime) -> str:
    try:
        moment = parse_timestamp(raw)
    except ValueError:
        logger.warning("offer_date_parse_failed", offer_id=offer.id, raw_value=raw)
        return DATE_INFO_UNAVAILABLE
    return f"{prefix} {format_distance_strict(moment, now=now)}"


def free_now_label(offer: Offer, *, now: datetime | None = None) -> str | None:
    interval = offer.current_interval
    if interval is None or not interval.end_date:
        return None
    return _relative_label("Ends", interval.end_date, offer=offer, now=_resolve_now(now))


def upcoming_label(offer: Offer, *, now: datetime | None = None) -> str | None:
    interval = offer.upcoming_interval
    if interval is not None and interval.start_date:
        return _relative_label("Starts", interval.start_date, offer=offer, now=_resolve_now(now))
    if offer.effective_date:
        return _relative_label("Starts", offer.effective_date, offer=offer, now=_resolve_now(now))
    return None


def date_label(offer: Offer, kind: OfferKind, *, now: datetime | None = None) -> str | None:
    if kind == OFFER_KIND_CURRENT:
        return free_now_label(offer, now=now)
    if kind == OFFER_KIND_UPCOMING:
        return upcoming_label(offer, now=now)
    raise ValueError(f"Unsupported offer kind: {kind}")
