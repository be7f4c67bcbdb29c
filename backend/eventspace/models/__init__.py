from eventspace.models.booking import Booking
from eventspace.models.enums import BookingStatus, PaymentMethod, VenueCategory, VenueStatus
from eventspace.models.faq import FAQ
from eventspace.models.favorite import VenueFavorite
from eventspace.models.recently_viewed import RecentlyViewed
from eventspace.models.review import Review
from eventspace.models.venue import Venue

__all__ = [
    "Booking",
    "BookingStatus",
    "FAQ",
    "PaymentMethod",
    "RecentlyViewed",
    "Review",
    "Venue",
    "VenueCategory",
    "VenueFavorite",
    "VenueStatus",
]
