"""Admin-side quote (lead) management."""

import logging
from datetime import datetime, timedelta, timezone
from typing import List

from fastapi import HTTPException
from sqlalchemy.orm import Session

from sofaclean.models.quote import Quote
from sofaclean.schemas.quote import QUOTE_STATUSES

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def list_quotes(db: Session, status: str = "all", days: int | None = None) -> List[Quote]:
    q = db.query(Quote)
    if status and status != "all":
        if status not in QUOTE_STATUSES:
            raise HTTPException(status_code=400, detail="สถานะไม่ถูกต้อง")
        q = q.filter(Quote.status == status)
    if days is not None:
        if days < 0:
            raise HTTPException(status_code=400, detail="ช่วงวันที่ไม่ถูกต้อง")
        threshold = start_of_day(utcnow() - timedelta(days=days))
        q = q.filter(Quote.created_at >= threshold)
    return q.order_by(Quote.created_at.desc(), Quote.quote_id.desc()).all()


def get_quote_or_404(db: Session, quote_id: int) -> Quote:
    quote = db.query(Quote).filter(Quote.quote_id == quote_id).first()
    if not quote:
        raise HTTPException(status_code=404, detail="ไม่พบใบเสนอราคา")
    return quote


def set_quote_status(db: Session, quote_id: int, status: str) -> Quote:
    quote = get_quote_or_404(db, quote_id)
    quote.status = status
    db.commit()
    db.refresh(quote)
    logger.info("[admin] quote %s status -> %s", quote_id, status)
    return quote


def delete_quote(db: Session, quote_id: int):
    quote = get_quote_or_404(db, quote_id)
    db.delete(quote)
    db.commit()
    logger.info("[admin] deleted quote %s", quote_id)
