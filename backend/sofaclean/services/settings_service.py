"""Admin writes for the singleton site documents (home page imagery, contact settings)."""

from fastapi import HTTPException
from sqlalchemy.orm import Session

from sofaclean.config import ContentDefaults
from sofaclean.models.site_document import SiteDocument
from sofaclean.schemas.site import ContactSettings, ContactSettingsUpdate, HomePageData, HomePageDataUpdate
from sofaclean.services import content_service


def _merge_write(db: Session, document: tuple[str, str], values: dict, admin_id: int | None) -> SiteDocument:
    collection, doc_key = document
    row = content_service.get_site_document(db, collection, doc_key)
    if not row:
        row = SiteDocument(collection=collection, doc_key=doc_key, data=dict(values), updated_by=admin_id)
        db.add(row)
    else:
        merged = dict(row.data or {})
        merged.update(values)
        row.data = merged
        row.updated_by = admin_id
    db.commit()
    db.refresh(row)
    return row


def save_home_page_data(
    db: Session,
    data: HomePageDataUpdate,
    defaults: ContentDefaults,
    admin_id: int | None = None,
) -> HomePageData:
    values = {key: value.strip() for key, value in data.model_dump(exclude_none=True).items()}
    _merge_write(db, content_service.HOME_DOCUMENT, values, admin_id)
    return content_service.get_home_page_data(db, defaults)


def save_contact_settings(
    db: Session,
    data: ContactSettingsUpdate,
    defaults: ContentDefaults,
    admin_id: int | None = None,
) -> ContactSettings:
    values = {key: (value or "").strip() for key, value in data.model_dump().items()}
    if not all(values.values()):
        raise HTTPException(status_code=400, detail="กรุณากรอกข้อมูลให้ครบทุกช่อง")
    _merge_write(db, content_service.CONTACT_DOCUMENT, values, admin_id)
    return content_service.get_contact_settings(db, defaults)
