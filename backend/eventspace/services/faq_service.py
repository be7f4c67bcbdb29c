"""
Help center FAQs: public listing in insertion order (optional category filter) and editor CRUD.
"""
import logging
import uuid
from datetime import datetime, timezone

from pydantic import Field
from sqlalchemy import func
from sqlalchemy.orm import Session

from eventspace.core.constants import FAQ_ID_PREFIX
from eventspace.core.errors import NotFoundError
from eventspace.models.faq import FAQ
from eventspace.services.catalog import CamelModel

logger = logging.getLogger(__name__)


class FAQCreate(CamelModel):
    question: str = Field(..., min_length=1, max_length=512)
    answer: str = Field(..., min_length=1)
    category: str = Field("", max_length=64)


class FAQUpdate(CamelModel):
    question: str | None = Field(None, min_length=1, max_length=512)
    answer: str | None = Field(None, min_length=1)
    category: str | None = Field(None, max_length=64)


class FAQRecord(CamelModel):
    id: str
    question: str
    answer: str
    category: str


def _faq_row(db: Session, faq_id: str) -> FAQ:
    row = db.get(FAQ, faq_id)
    if row is None:
        raise NotFoundError("FAQ not found")
    return row


def list_faqs(db: Session, category: str | None = None) -> list[FAQRecord]:
    q = db.query(FAQ)
    if category:
        q = q.filter(FAQ.category == category)
    return [FAQRecord.model_validate(r) for r in q.order_by(FAQ.seq).all()]


def get_faq(db: Session, faq_id: str) -> FAQRecord:
    return FAQRecord.model_validate(_faq_row(db, faq_id))


def create_faq(db: Session, data: FAQCreate, actor: str | None = None) -> FAQRecord:
    now = datetime.now(timezone.utc)
    row = FAQ(
        id=f"{FAQ_ID_PREFIX}-{uuid.uuid4().hex[:12]}",
        seq=(db.query(func.max(FAQ.seq)).scalar() or 0) + 1,
        question=data.question,
        answer=data.answer,
        category=data.category,
        created_at=now,
        updated_at=now,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("FAQ created: id=%s category=%s by=%s", row.id, row.category, actor or "-")
    return FAQRecord.model_validate(row)


def update_faq(db: Session, faq_id: str, data: FAQUpdate, actor: str | None = None) -> FAQRecord:
    row = _faq_row(db, faq_id)
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(row, field, value)
    row.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(row)
    logger.info("FAQ updated: id=%s by=%s", faq_id, actor or "-")
    return FAQRecord.model_validate(row)


def delete_faq(db: Session, faq_id: str, actor: str | None = None) -> None:
    db.delete(_faq_row(db, faq_id))
    db.commit()
    logger.info("FAQ deleted: id=%s by=%s", faq_id, actor or "-")
