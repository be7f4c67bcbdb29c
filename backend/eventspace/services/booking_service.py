"""
Bookings: create (server-side pricing), list, status changes, cancel.

The total is always recomputed here with the pricing engine; a client quote is only
compared against it, never trusted.
"""
import logging
import uuid
from datetime import date, datetime, timezone

from pydantic import Field
from sqlalchemy.orm import Session

from eventspace.core.constants import BOOKING_ID_PREFIX, PRICE_TOLERANCE
from eventspace.core.errors import ConflictError, NotFoundError, ValidationError
from eventspace.models.booking import Booking
from eventspace.models.enums import (
    BOOKABLE_VENUE_STATUSES,
    TERMINAL_BOOKING_STATUSES,
    BookingStatus,
    PaymentMethod,
)
from eventspace.services import venue_service
from eventspace.services.catalog import CamelModel, catalog_today
from eventspace.services.pricing import quote

logger = logging.getLogger(__name__)

MSG_BOOKING_NOT_FOUND = "Booking not found"


class BookingCreate(CamelModel):
    venue_id: str = Field(..., min_length=1)
    date: date
    guest_count: int
    selected_service_ids: list[str] = Field(default_factory=list)
    payment_method: PaymentMethod
    notes: str | None = Field(None, max_length=2000)
    quoted_total: float | None = Field(None, ge=0, allow_inf_nan=False)


class BookingRecord(CamelModel):
    id: str
    venue_id: str
    venue_name: str = ""
    client_id: str
    provider_id: str
    date: date
    status: BookingStatus
    guest_count: int
    selected_service_ids: list[str] = Field(default_factory=list)
    total_price: float
    payment_method: PaymentMethod
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


def _now() -> datetime:
    return datetime.now(timezone.utc)


def new_booking_id() -> str:
    return f"{BOOKING_ID_PREFIX}-{uuid.uuid4().hex[:12]}"


def to_record(row: Booking) -> BookingRecord:
    return BookingRecord.model_validate(row)


def is_date_taken(db: Session, venue_id: str, day: date) -> bool:
    return bool(venue_service.booked_dates(db, venue_id, day, day))


def create_booking(db: Session, client_id: str, data: BookingCreate, today: date | None = None) -> BookingRecord:
    """
    Validate and store a PENDING booking.
    NotFoundError: unknown venue. ConflictError: venue not bookable, date in the past or taken.
    ValidationError: guest count outside [1, capacity], unknown service, payment method not
    accepted, or quoted_total differs from the server total.
    """
    venue = venue_service.get_venue(db, data.venue_id)
    if venue.status not in BOOKABLE_VENUE_STATUSES:
        raise ConflictError(f"Venue is not open for bookings (status {venue.status.value})")
    if not 1 <= data.guest_count <= venue.capacity:
        raise ValidationError(f"guestCount must be between 1 and {venue.capacity}")
    offered = {s.id for s in venue.services}
    unknown = [sid for sid in data.selected_service_ids if sid not in offered]
    if unknown:
        raise ValidationError(f"Unknown service ids for this venue: {unknown}")
    if data.payment_method not in venue.payment_methods:
        raise ValidationError(f"Payment method {data.payment_method.value} not accepted by this venue")

    today = today or catalog_today()
    if data.date < today:
        raise ConflictError("Cannot book a date in the past")
    if is_date_taken(db, venue.id, data.date):
        raise ConflictError(f"Date {data.date.isoformat()} is already booked")

    q = quote(venue, data.guest_count, data.selected_service_ids)
    if data.quoted_total is not None and abs(data.quoted_total - q.total) > PRICE_TOLERANCE:
        logger.warning(
            "create_booking: quote mismatch venue=%s client_total=%s server_total=%s",
            venue.id,
            data.quoted_total,
            q.total,
        )
        raise ValidationError(f"Quoted total {data.quoted_total} does not match current price {q.total:.2f}")

    now = _now()
    row = Booking(
        id=new_booking_id(),
        venue_id=venue.id,
        client_id=client_id,
        provider_id=venue.provider_id,
        date=data.date,
        status=BookingStatus.PENDING.value,
        guest_count=data.guest_count,
        selected_service_ids=list(dict.fromkeys(data.selected_service_ids)),
        total_price=q.total,
        payment_method=data.payment_method.value,
        notes=data.notes,
        created_at=now,
        updated_at=now,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(
        "Booking created: id=%s venue=%s client=%s date=%s total=%.2f",
        row.id,
        row.venue_id,
        client_id,
        row.date,
        row.total_price,
    )
    return to_record(row)


def get_booking(db: Session, booking_id: str) -> BookingRecord:
    row = db.query(Booking).filter(Booking.id == booking_id).first()
    if not row:
        raise NotFoundError(MSG_BOOKING_NOT_FOUND)
    return to_record(row)


def list_client_bookings(db: Session, client_id: str) -> list[BookingRecord]:
    rows = db.query(Booking).filter(Booking.client_id == client_id).order_by(Booking.date.asc()).all()
    return [to_record(r) for r in rows]


def list_provider_bookings(db: Session, provider_id: str) -> list[BookingRecord]:
    rows = db.query(Booking).filter(Booking.provider_id == provider_id).order_by(Booking.date.asc()).all()
    return [to_record(r) for r in rows]


def update_booking_status(db: Session, booking_id: str, user_id: str, status: BookingStatus) -> BookingRecord:
    """Client or provider of the booking may change its status; CANCELLED/COMPLETED are final."""
    row = (
        db.query(Booking)
        .filter(Booking.id == booking_id, (Booking.client_id == user_id) | (Booking.provider_id == user_id))
        .first()
    )
    if not row:
        raise NotFoundError(MSG_BOOKING_NOT_FOUND)
    current = BookingStatus(row.status)
    if current == status:
        return to_record(row)
    if current in TERMINAL_BOOKING_STATUSES:
        raise ConflictError(f"Booking is {current.value} and can no longer change status")
    row.status = status.value
    row.updated_at = _now()
    db.commit()
    db.refresh(row)
    logger.info("Booking status: id=%s %s -> %s by=%s", booking_id, current.value, status.value, user_id)
    return to_record(row)


def cancel_booking(db: Session, booking_id: str, client_id: str) -> None:
    """Client cancels their own booking (soft delete: status CANCELLED, row kept)."""
    row = db.query(Booking).filter(Booking.id == booking_id, Booking.client_id == client_id).first()
    if not row:
        raise NotFoundError(MSG_BOOKING_NOT_FOUND)
    if row.status == BookingStatus.COMPLETED.value:
        raise ConflictError("Completed bookings cannot be cancelled")
    if row.status != BookingStatus.CANCELLED.value:
        row.status = BookingStatus.CANCELLED.value
        row.updated_at = _now()
        db.commit()
        logger.info("Booking cancelled: id=%s client=%s", booking_id, client_id)
