from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from eventspace.api.deps import current_user_id
from eventspace.db.session import get_db
from eventspace.services import metrics_service

router = APIRouter()


@router.get("/provider")
def provider_metrics(
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
) -> dict[str, Any]:
    """Totals over the caller's venues: views, favorites, venue count and reservations."""
    return metrics_service.get_provider_metrics(db, user_id)


@router.get("/admin")
def admin_metrics(
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
) -> dict[str, Any]:
    return metrics_service.get_admin_metrics(db)
