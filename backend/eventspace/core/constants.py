"""
Centralized constants for catalog, pricing and bookings.

Change limits and pricing knobs here instead of scattering literals across services and routes.
"""

# Pricing: max amount (MXN) the base rental price is discounted when the event is nearly empty.
# rental_price = price - MAX_DISCOUNT * (1 - guests / capacity)
MAX_DISCOUNT = 3000

# A client-submitted quote may differ from the server total by at most this much (float noise)
PRICE_TOLERANCE = 0.01

# Catalog pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100  # cap on GET /api/venues pageSize

# Popularity-based recommendations (top N by favorites)
RECOMMENDED_LIMIT = 4
RECOMMENDED_MAX_LIMIT = 20

# Venue invariants
MIN_RATING = 0.0
MAX_RATING = 5.0

# Generated id prefixes (ids are opaque strings, e.g. "v-3f9a1c...")
VENUE_ID_PREFIX = "v"
BOOKING_ID_PREFIX = "b"
REVIEW_ID_PREFIX = "r"
FAQ_ID_PREFIX = "faq"

# Recently viewed venues kept per user (newest first)
RECENTLY_VIEWED_LIMIT = 5
