"""
Dynamic pricing: quote for one venue given a guest count and selected optional services.

Linear interpolation on occupancy:
    occupancy_rate = guest_count / capacity
    rental_price   = price - MAX_DISCOUNT * (1 - occupancy_rate)
    total          = rental_price + sum(price of selected services)

Full house (guest_count == capacity) pays the base price; an almost empty event gets up to
MAX_DISCOUNT off. The engine does not clamp guest_count; callers clamp to [1, capacity]
(clamp_guest_count). Pure arithmetic, never raises: capacity <= 0 returns the base price.
"""
from __future__ import annotations

from typing import Iterable

from eventspace.core.constants import MAX_DISCOUNT
from eventspace.services.catalog.types import CamelModel, VenueRecord


class Quote(CamelModel):
    venue_id: str
    guest_count: int
    rental_price: float
    services_total: float
    total: float


def clamp_guest_count(guest_count: int, capacity: int) -> int:
    """Caller-side contract: guest count in [1, capacity]."""
    return max(1, min(guest_count, max(capacity, 1)))


def rental_price(venue: VenueRecord, guest_count: int) -> float:
    if venue.capacity <= 0:
        return float(venue.price)
    occupancy_rate = guest_count / venue.capacity
    return venue.price - MAX_DISCOUNT * (1 - occupancy_rate)


def services_total(venue: VenueRecord, selected_service_ids: Iterable[str]) -> float:
    """Sum of venue services whose id is selected. Ids not offered by the venue are ignored."""
    selected = set(selected_service_ids)
    return sum(s.price for s in venue.services if s.id in selected)


def compute_total(venue: VenueRecord, guest_count: int, selected_service_ids: Iterable[str]) -> float:
    if venue.capacity <= 0:
        return float(venue.price)
    return rental_price(venue, guest_count) + services_total(venue, selected_service_ids)


def quote(venue: VenueRecord, guest_count: int, selected_service_ids: Iterable[str]) -> Quote:
    """compute_total with its breakdown (quote endpoint, booking creation)."""
    selected = list(selected_service_ids)
    if venue.capacity <= 0:
        rent, extras = float(venue.price), 0.0
    else:
        rent, extras = rental_price(venue, guest_count), services_total(venue, selected)
    return Quote(
        venue_id=venue.id,
        guest_count=guest_count,
        rental_price=rent,
        services_total=extras,
        total=compute_total(venue, guest_count, selected),
    )
