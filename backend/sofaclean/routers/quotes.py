"""Public quote intake and reverse-geocoding endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy.orm import Session

from sofaclean.config import settings
from sofaclean.database import get_db
from sofaclean.schemas.quote import GeocodeOut, QuoteOut
from sofaclean.services import geocode_service
from sofaclean.services.quote_intake import (
    ImageAttachment,
    QuoteIntake,
    QuoteSubmissionError,
    QuoteValidationError,
)

router = APIRouter(prefix="/api", tags=["quotes"])


@router.post("/quotes", response_model=QuoteOut, status_code=201)
def submit_quote(
    name: str = Form(""),
    phone: str = Form(""),
    address: str = Form(""),
    description: str = Form(""),
    images: Optional[List[UploadFile]] = File(None),
    db: Session = Depends(get_db),
):
    uploads = [item for item in (images or []) if item is not None and item.filename]
    if len(uploads) > settings.QUOTE_MAX_IMAGES:
        raise HTTPException(status_code=400, detail=f"แนบรูปภาพได้สูงสุด {settings.QUOTE_MAX_IMAGES} รูป")

    intake = QuoteIntake().open()
    try:
        intake.fill(name=name, phone=phone, address=address, description=description)
        intake.validate()
        for upload in uploads:
            intake.attach(
                ImageAttachment(
                    filename=upload.filename,
                    content=upload.file.read(),
                    content_type=upload.content_type,
                )
            )
        return intake.submit(db)
    except QuoteValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except QuoteSubmissionError as exc:
        raise HTTPException(status_code=500, detail=f"เกิดข้อผิดพลาดในการส่งข้อมูล: {exc}")


@router.get("/geocode/reverse", response_model=GeocodeOut)
def reverse_geocode(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
):
    return geocode_service.reverse_geocode(lat, lon)
