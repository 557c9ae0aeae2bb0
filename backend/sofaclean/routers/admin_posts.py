"""Admin blog post CRUD API."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from sofaclean.config import ContentDefaults, get_content_defaults
from sofaclean.database import get_db
from sofaclean.middleware.auth_middleware import get_current_admin
from sofaclean.schemas.post import PostCreate, PostOut, PostStatusUpdate, PostUpdate
from sofaclean.services import post_service

router = APIRouter(
    prefix="/api/admin/posts",
    tags=["admin-posts"],
    dependencies=[Depends(get_current_admin)],
)


@router.get("", response_model=List[PostOut])
def list_posts(db: Session = Depends(get_db)):
    return post_service.list_posts(db)


@router.post("", response_model=PostOut, status_code=201)
def create_post(
    data: PostCreate,
    db: Session = Depends(get_db),
    defaults: ContentDefaults = Depends(get_content_defaults),
):
    return post_service.create_post(db, data, defaults)


@router.get("/{post_id}", response_model=PostOut)
def get_post(post_id: int, db: Session = Depends(get_db)):
    return post_service.get_post_or_404(db, post_id)


@router.put("/{post_id}", response_model=PostOut)
def update_post(post_id: int, data: PostUpdate, db: Session = Depends(get_db)):
    return post_service.update_post(db, post_id, data)


@router.patch("/{post_id}/status", response_model=PostOut)
def update_post_status(post_id: int, data: PostStatusUpdate, db: Session = Depends(get_db)):
    return post_service.set_post_status(db, post_id, data.status)


@router.delete("/{post_id}")
def delete_post(post_id: int, db: Session = Depends(get_db)):
    post_service.delete_post(db, post_id)
    return {"message": "ลบบทความแล้ว"}
