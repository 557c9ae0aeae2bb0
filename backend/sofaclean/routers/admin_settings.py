"""Admin editors for the home page imagery and contact settings documents."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sofaclean.config import ContentDefaults, get_content_defaults
from sofaclean.database import get_db
from sofaclean.middleware.auth_middleware import get_current_admin
from sofaclean.models.admin_user import AdminUser
from sofaclean.schemas.site import ContactSettings, ContactSettingsUpdate, HomePageData, HomePageDataUpdate
from sofaclean.services import content_service, settings_service

router = APIRouter(
    prefix="/api/admin/settings",
    tags=["admin-settings"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("/home", response_model=HomePageData)
def get_home(
    db: Session = Depends(get_db),
    defaults: ContentDefaults = Depends(get_content_defaults),
):
    return content_service.get_home_page_data(db, defaults)


@router.put("/home", response_model=HomePageData)
def update_home(
    data: HomePageDataUpdate,
    db: Session = Depends(get_db),
    defaults: ContentDefaults = Depends(get_content_defaults),
    current_admin: AdminUser = Depends(get_current_admin),
):
    return settings_service.save_home_page_data(db, data, defaults, admin_id=current_admin.admin_id)


@router.get("/contact", response_model=ContactSettings)
def get_contact(
    db: Session = Depends(get_db),
    defaults: ContentDefaults = Depends(get_content_defaults),
):
    return content_service.get_contact_settings(db, defaults)


@router.put("/contact", response_model=ContactSettings)
def update_contact(
    data: ContactSettingsUpdate,
    db: Session = Depends(get_db),
    defaults: ContentDefaults = Depends(get_content_defaults),
    current_admin: AdminUser = Depends(get_current_admin),
):
    return settings_service.save_contact_settings(db, data, defaults, admin_id=current_admin.admin_id)
