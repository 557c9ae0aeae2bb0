"""Blog post request/response schemas."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel

PostStatus = Literal["published", "draft"]


class PostBase(BaseModel):
    title: str
    slug: str
    image: str = ""
    image_hint: str = ""
    date: str
    category: str = ""
    description: str = ""
    content: str = ""
    status: PostStatus = "draft"
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class PostCreate(BaseModel):
    title: str = ""
    slug: str = ""
    image: Optional[str] = None
    image_hint: str = ""
    category: str = ""
    description: str = ""
    content: str = ""
    status: PostStatus = "draft"
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class PostUpdate(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    image: Optional[str] = None
    image_hint: Optional[str] = None
    date: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    content: Optional[str] = None
    status: Optional[PostStatus] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class PostStatusUpdate(BaseModel):
    status: PostStatus


class PostOut(PostBase):
    post_id: int
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class PostSummaryOut(BaseModel):
    post_id: int
    title: str
    slug: str
    image: str
    image_hint: str
    date: str
    category: str
    description: str
    status: PostStatus

    model_config = {"from_attributes": True}
