"""
Venue search: filter, sort, paginate, recommend.

Pure functions over a snapshot of VenueRecord (no DB, no side effects), so the same
filters over the same venues always give the same page.

- Filtering: BANNED never listed; query is a case-insensitive substring of name OR
  description OR zone; zone/category exact; price bounds inclusive; capacity = minimum guests
  the venue must hold.
- Sorting: FEATURED first, then rating descending. sorted() is stable, so ties keep the
  snapshot (insertion) order.
- Pagination: 1-based pages; a page past the end is empty but total/total_pages stay correct.
"""
from __future__ import annotations

import math
from typing import Iterable, Sequence

from eventspace.core.constants import RECOMMENDED_LIMIT
from eventspace.models.enums import VenueStatus
from eventspace.services.catalog.types import PaginatedResponse, SearchFilters, VenueRecord


def is_listed(venue: VenueRecord) -> bool:
    return venue.status != VenueStatus.BANNED


def _matches_query(venue: VenueRecord, query: str) -> bool:
    q = query.lower()
    return q in venue.name.lower() or q in (venue.description or "").lower() or q in venue.zone.lower()


def matches_filters(venue: VenueRecord, filters: SearchFilters) -> bool:
    """True if the venue is listed and satisfies every filter that is present."""
    if not is_listed(venue):
        return False
    if filters.query and not _matches_query(venue, filters.query):
        return False
    if filters.zone and venue.zone != filters.zone:
        return False
    if filters.category and venue.category != filters.category:
        return False
    if filters.price_min is not None and venue.price < filters.price_min:
        return False
    if filters.price_max is not None and venue.price > filters.price_max:
        return False
    if filters.capacity and venue.capacity < filters.capacity:
        return False
    return True


def filter_venues(venues: Iterable[VenueRecord], filters: SearchFilters) -> list[VenueRecord]:
    return [v for v in venues if matches_filters(v, filters)]


def sort_venues(venues: Iterable[VenueRecord]) -> list[VenueRecord]:
    """FEATURED first, then rating descending; stable for equal keys."""
    return sorted(venues, key=lambda v: (v.status != VenueStatus.FEATURED, -v.rating))


def paginate(items: Sequence[VenueRecord], page: int, page_size: int) -> PaginatedResponse[VenueRecord]:
    total = len(items)
    start = (page - 1) * page_size
    return PaginatedResponse[VenueRecord](
        data=list(items[start : start + page_size]),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )


def search_venues(venues: Iterable[VenueRecord], filters: SearchFilters) -> PaginatedResponse[VenueRecord]:
    """Full listing pipeline: filter -> sort -> paginate."""
    ranked = sort_venues(filter_venues(venues, filters))
    return paginate(ranked, filters.page, filters.page_size)


def recommend_venues(venues: Iterable[VenueRecord], limit: int = RECOMMENDED_LIMIT) -> list[VenueRecord]:
    """Most-favorited listed venues (popularity), top `limit`."""
    listed = [v for v in venues if is_listed(v)]
    return sorted(listed, key=lambda v: -v.favorites)[: max(limit, 0)]
