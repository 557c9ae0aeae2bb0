"""Public singleton settings used by the floating contact widget and page shell."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sofaclean.config import ContentDefaults, get_content_defaults
from sofaclean.database import get_db
from sofaclean.schemas.site import ContactSettings, HomePageData
from sofaclean.services import content_service

router = APIRouter(prefix="/api/site", tags=["site"])


@router.get("/contact", response_model=ContactSettings)
def get_contact(db: Session = Depends(get_db), defaults: ContentDefaults = Depends(get_content_defaults)):
    return content_service.get_contact_settings(db, defaults)


@router.get("/home", response_model=HomePageData)
def get_home(db: Session = Depends(get_db), defaults: ContentDefaults = Depends(get_content_defaults)):
    return content_service.get_home_page_data(db, defaults)
