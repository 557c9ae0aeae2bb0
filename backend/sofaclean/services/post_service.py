"""Admin-side blog post management."""

import logging
import re
from datetime import date
from typing import List

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sofaclean.config import ContentDefaults
from sofaclean.models.post import Post
from sofaclean.schemas.post import PostCreate, PostUpdate

logger = logging.getLogger(__name__)

REQUIRED_ON_CREATE = ("title", "slug", "content", "description", "category")
REQUIRED_ON_UPDATE = ("title", "slug", "content")
NULLABLE_FIELDS = {"meta_title", "meta_description"}


def slugify(title: str) -> str:
    """Lowercase, hyphenate, keep Thai letters, a-z, 0-9 and ``-``."""
    value = str(title or "").lower().strip()
    value = re.sub(r"\s+", "-", value)
    value = re.sub(r"[^\u0e00-\u0e7fa-z0-9-]", "", value)
    value = re.sub(r"-{2,}", "-", value)
    return value


def list_posts(db: Session) -> List[Post]:
    return db.query(Post).order_by(Post.date.desc(), Post.post_id.desc()).all()


def get_post_or_404(db: Session, post_id: int) -> Post:
    post = db.query(Post).filter(Post.post_id == post_id).first()
    if not post:
        raise HTTPException(status_code=404, detail="ไม่พบบทความ")
    return post


def _ensure_unique_slug(db: Session, slug: str, post_id: int | None = None):
    q = db.query(Post.post_id).filter(Post.slug == slug)
    if post_id is not None:
        q = q.filter(Post.post_id != post_id)
    if q.first():
        raise HTTPException(status_code=409, detail="Slug นี้ถูกใช้งานแล้ว")


def _commit(db: Session):
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Slug นี้ถูกใช้งานแล้ว")


def create_post(db: Session, data: PostCreate, defaults: ContentDefaults) -> Post:
    values = data.model_dump()
    values["title"] = (values.get("title") or "").strip()
    values["slug"] = (values.get("slug") or "").strip() or slugify(values["title"])
    missing = [field for field in REQUIRED_ON_CREATE if not str(values.get(field) or "").strip()]
    if missing:
        raise HTTPException(status_code=400, detail=f"ข้อมูลไม่ครบถ้วน: {', '.join(missing)}")
    _ensure_unique_slug(db, values["slug"])

    post = Post(
        title=values["title"],
        slug=values["slug"],
        image=values.get("image") or defaults.post_image_url,
        image_hint=values.get("image_hint") or "",
        date=date.today().isoformat(),
        category=values["category"],
        description=values["description"],
        content=values["content"],
        status=values.get("status") or "draft",
        meta_title=values.get("meta_title") or "",
        meta_description=values.get("meta_description") or "",
    )
    db.add(post)
    _commit(db)
    db.refresh(post)
    logger.info("[admin] created post %s (%s)", post.post_id, post.status)
    return post


def update_post(db: Session, post_id: int, data: PostUpdate) -> Post:
    post = get_post_or_404(db, post_id)
    payload = data.model_dump(exclude_unset=True)
    for field in REQUIRED_ON_UPDATE:
        if field in payload and not str(payload[field] or "").strip():
            raise HTTPException(status_code=400, detail=f"ข้อมูลไม่ครบถ้วน: {field}")
    payload = {
        key: value
        for key, value in payload.items()
        if value is not None or key in NULLABLE_FIELDS
    }
    if "slug" in payload:
        payload["slug"] = payload["slug"].strip()
        _ensure_unique_slug(db, payload["slug"], post_id=post_id)

    for key, value in payload.items():
        setattr(post, key, value)
    _commit(db)
    db.refresh(post)
    return post


def set_post_status(db: Session, post_id: int, status: str) -> Post:
    post = get_post_or_404(db, post_id)
    post.status = status
    db.commit()
    db.refresh(post)
    logger.info("[admin] post %s status -> %s", post_id, status)
    return post


def delete_post(db: Session, post_id: int):
    post = get_post_or_404(db, post_id)
    db.delete(post)
    db.commit()
    logger.info("[admin] deleted post %s", post_id)
