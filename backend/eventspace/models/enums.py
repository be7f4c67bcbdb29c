"""Enumerations shared by ORM rows and API schemas. Stored as their string value."""
from enum import Enum


class VenueCategory(str, Enum):
    SALON_EVENTOS = "SALON_EVENTOS"
    JARDIN = "JARDIN"
    TERRAZA = "TERRAZA"
    HACIENDA = "HACIENDA"
    BODEGA = "BODEGA"
    RESTAURANTE = "RESTAURANTE"
    HOTEL = "HOTEL"


class VenueStatus(str, Enum):
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    FEATURED = "FEATURED"
    BANNED = "BANNED"


class PaymentMethod(str, Enum):
    TRANSFERENCIA = "TRANSFERENCIA"
    EFECTIVO = "EFECTIVO"


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


# Bookings in these states no longer move
TERMINAL_BOOKING_STATUSES = frozenset({BookingStatus.CANCELLED, BookingStatus.COMPLETED})
# Bookings that count toward revenue
REVENUE_BOOKING_STATUSES = frozenset({BookingStatus.CONFIRMED, BookingStatus.COMPLETED})
# Venues that accept new bookings
BOOKABLE_VENUE_STATUSES = frozenset({VenueStatus.ACTIVE, VenueStatus.FEATURED})
