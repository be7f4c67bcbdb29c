"""
Admin API: every venue regardless of status, and moderation (ban / feature / activate).
Caller identity required (X-User-Id); moderation changes are logged with the acting user.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from eventspace.api.deps import current_user_id
from eventspace.db.session import get_db
from eventspace.models.enums import VenueStatus
from eventspace.services import admin_service
from eventspace.services.catalog import CamelModel, VenueRecord

router = APIRouter()


class VenueStatusUpdate(CamelModel):
    status: VenueStatus


@router.get("/venues", response_model=list[VenueRecord])
def all_venues(db: Session = Depends(get_db), user_id: str = Depends(current_user_id)):
    return admin_service.list_all_venues(db)


@router.patch("/venues/{venue_id}/status", response_model=VenueRecord)
def set_venue_status(
    venue_id: str,
    body: VenueStatusUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    """BANNED hides the venue from listings and recommendations; FEATURED sorts it first."""
    return admin_service.set_venue_status(db, venue_id, body.status, actor=user_id)
