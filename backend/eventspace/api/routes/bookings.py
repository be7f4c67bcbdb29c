"""
Bookings API. Caller identified by X-User-Id (see eventspace.api.deps).
"""
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from eventspace.api.deps import current_user_id
from eventspace.db.session import get_db
from eventspace.models.enums import BookingStatus
from eventspace.services import booking_service
from eventspace.services.booking_service import BookingCreate, BookingRecord
from eventspace.services.catalog import CamelModel

router = APIRouter()


class BookingStatusUpdate(CamelModel):
    status: BookingStatus


@router.post("", response_model=BookingRecord, status_code=201)
def create_booking(
    body: BookingCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    """
    Create a PENDING booking. Total is computed here; a quotedTotal that disagrees with it
    by more than 0.01 is rejected (422). Past or already booked dates -> 409.
    """
    return booking_service.create_booking(db, user_id, body)


@router.get("/me", response_model=list[BookingRecord])
def my_bookings(db: Session = Depends(get_db), user_id: str = Depends(current_user_id)):
    return booking_service.list_client_bookings(db, user_id)


@router.get("/provider", response_model=list[BookingRecord])
def provider_bookings(db: Session = Depends(get_db), user_id: str = Depends(current_user_id)):
    """Bookings on the caller's venues."""
    return booking_service.list_provider_bookings(db, user_id)


@router.get("/{booking_id}", response_model=BookingRecord)
def get_booking(booking_id: str, db: Session = Depends(get_db)):
    return booking_service.get_booking(db, booking_id)


@router.patch("/{booking_id}/status", response_model=BookingRecord)
def update_booking_status(
    booking_id: str,
    body: BookingStatusUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    return booking_service.update_booking_status(db, booking_id, user_id, body.status)


@router.delete("/{booking_id}", status_code=204)
def cancel_booking(
    booking_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    """Soft delete: the booking stays, status becomes CANCELLED and its date frees up."""
    booking_service.cancel_booking(db, booking_id, user_id)
    return Response(status_code=204)
