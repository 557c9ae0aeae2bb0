"""Read-side fetchers feeding the public pages.

Publication filtering happens in the SQL query, so drafts never leave the
database on a public read path. Singleton documents are merged over the
``ContentDefaults`` handed in by the caller and never come back as ``None``.
"""

from typing import List, Optional
from urllib.parse import unquote

from sqlalchemy.orm import Session

from sofaclean.config import ContentDefaults
from sofaclean.models.post import Post
from sofaclean.models.site_document import SiteDocument
from sofaclean.schemas.site import ContactSettings, HomePageData

PUBLISHED = "published"

HOME_DOCUMENT = ("pages", "home")
CONTACT_DOCUMENT = ("settings", "contact")


def _published_query(db: Session):
    return db.query(Post).filter(Post.status == PUBLISHED)


def get_post(db: Session, slug: str) -> Optional[Post]:
    decoded = unquote(slug or "")
    if not decoded:
        return None
    return _published_query(db).filter(Post.slug == decoded).first()


def get_posts(db: Session, limit: int | None = None, exclude_post_id: int | None = None) -> List[Post]:
    q = _published_query(db)
    if exclude_post_id is not None:
        q = q.filter(Post.post_id != exclude_post_id)
    q = q.order_by(Post.date.desc(), Post.post_id.desc())
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def get_recent_posts(db: Session, limit: int = 3) -> List[Post]:
    return get_posts(db, limit=limit)


def get_related_posts(db: Session, current_post_id: int, limit: int = 2) -> List[Post]:
    return get_posts(db, limit=limit, exclude_post_id=current_post_id)


def get_site_document(db: Session, collection: str, doc_key: str) -> Optional[SiteDocument]:
    return (
        db.query(SiteDocument)
        .filter(SiteDocument.collection == collection, SiteDocument.doc_key == doc_key)
        .first()
    )


def _merged(db: Session, document: tuple[str, str], fallback: dict) -> dict:
    row = get_site_document(db, *document)
    merged = dict(fallback)
    if row and isinstance(row.data, dict):
        for key, value in row.data.items():
            if key in merged and value not in (None, ""):
                merged[key] = value
    return merged


def get_home_page_data(db: Session, defaults: ContentDefaults) -> HomePageData:
    return HomePageData(**_merged(db, HOME_DOCUMENT, defaults.home))


def get_contact_settings(db: Session, defaults: ContentDefaults) -> ContactSettings:
    return ContactSettings(**_merged(db, CONTACT_DOCUMENT, defaults.contact))
