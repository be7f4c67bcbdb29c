"""
Dashboard metrics: provider (own venues) and admin (platform-wide). Computed on read.
"""
from sqlalchemy import func
from sqlalchemy.orm import Session

from eventspace.models.booking import Booking
from eventspace.models.enums import REVENUE_BOOKING_STATUSES, BookingStatus, VenueStatus
from eventspace.models.venue import Venue


def get_provider_metrics(db: Session, provider_id: str) -> dict:
    views, favorites, venue_count = (
        db.query(
            func.coalesce(func.sum(Venue.views), 0),
            func.coalesce(func.sum(Venue.favorites), 0),
            func.count(Venue.id),
        )
        .filter(Venue.provider_id == provider_id)
        .one()
    )
    reservations = db.query(Booking).filter(Booking.provider_id == provider_id).count()
    return {
        "totalViews": int(views),
        "totalReservations": reservations,
        "totalFavorites": int(favorites),
        "totalVenues": int(venue_count),
    }


def get_admin_metrics(db: Session) -> dict:
    """Revenue sums CONFIRMED + COMPLETED bookings."""
    by_status = dict(db.query(Venue.status, func.count(Venue.id)).group_by(Venue.status).all())
    revenue = (
        db.query(func.coalesce(func.sum(Booking.total_price), 0.0))
        .filter(Booking.status.in_([s.value for s in REVENUE_BOOKING_STATUSES]))
        .scalar()
    )
    return {
        "totalVenues": sum(by_status.values()),
        "totalBookings": db.query(Booking).count(),
        "completedBookings": db.query(Booking).filter(Booking.status == BookingStatus.COMPLETED.value).count(),
        "revenue": float(revenue or 0.0),
        "venuesByStatus": {s.value: int(by_status.get(s.value, 0)) for s in VenueStatus},
    }
