"""
FAQs API: public help center listing; create/update/delete need a caller identity.
"""
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from eventspace.api.deps import current_user_id
from eventspace.db.session import get_db
from eventspace.services import faq_service
from eventspace.services.faq_service import FAQCreate, FAQRecord, FAQUpdate

router = APIRouter()


@router.get("", response_model=list[FAQRecord])
def list_faqs(db: Session = Depends(get_db), category: str | None = Query(None)):
    return faq_service.list_faqs(db, category)


@router.get("/{faq_id}", response_model=FAQRecord)
def get_faq(faq_id: str, db: Session = Depends(get_db)):
    return faq_service.get_faq(db, faq_id)


@router.post("", response_model=FAQRecord, status_code=201)
def create_faq(
    body: FAQCreate,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    return faq_service.create_faq(db, body, actor=user_id)


@router.put("/{faq_id}", response_model=FAQRecord)
def update_faq(
    faq_id: str,
    body: FAQUpdate,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    return faq_service.update_faq(db, faq_id, body, actor=user_id)


@router.delete("/{faq_id}", status_code=204)
def delete_faq(
    faq_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(current_user_id),
):
    faq_service.delete_faq(db, faq_id, actor=user_id)
    return Response(status_code=204)
