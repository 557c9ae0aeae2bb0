"""Admin quote (lead) list, status update and delete API."""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from sofaclean.database import get_db
from sofaclean.middleware.auth_middleware import get_current_admin
from sofaclean.schemas.quote import QuoteOut, QuoteStatusUpdate
from sofaclean.services import quote_service

router = APIRouter(
    prefix="/api/admin/quotes",
    tags=["admin-quotes"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=List[QuoteOut])
def list_quotes(
    status: str = Query("all"),
    days: int | None = Query(None, ge=0),
    db: Session = Depends(get_db),
):
    return quote_service.list_quotes(db, status=status, days=days)


@router.get("/{quote_id}", response_model=QuoteOut)
def get_quote(quote_id: int, db: Session = Depends(get_db)):
    return quote_service.get_quote_or_404(db, quote_id)


@router.patch("/{quote_id}/status", response_model=QuoteOut)
def update_quote_status(quote_id: int, data: QuoteStatusUpdate, db: Session = Depends(get_db)):
    return quote_service.set_quote_status(db, quote_id, data.status)


@router.delete("/{quote_id}")
def delete_quote(quote_id: int, db: Session = Depends(get_db)):
    quote_service.delete_quote(db, quote_id)
    return {"message": "ลบใบเสนอราคาแล้ว"}
