"""
Catalog: venue search (filter/sort/paginate), recommendations and month availability.

Pure functions over VenueRecord snapshots; eventspace.services.venue_service loads the
snapshot from the DB and applies side effects (view counter).
"""
from eventspace.services.catalog.availability import build_month_availability, catalog_today, month_bounds
from eventspace.services.catalog.search import (
    filter_venues,
    matches_filters,
    paginate,
    recommend_venues,
    search_venues,
    sort_venues,
)
from eventspace.services.catalog.types import (
    CamelModel,
    DateAvailability,
    PaginatedResponse,
    SearchFilters,
    VenueCreate,
    VenueRecord,
    VenueServiceItem,
    VenueUpdate,
)

__all__ = [
    "CamelModel",
    "DateAvailability",
    "PaginatedResponse",
    "SearchFilters",
    "VenueCreate",
    "VenueRecord",
    "VenueServiceItem",
    "VenueUpdate",
    "build_month_availability",
    "catalog_today",
    "filter_venues",
    "matches_filters",
    "month_bounds",
    "paginate",
    "recommend_venues",
    "search_venues",
    "sort_venues",
]
