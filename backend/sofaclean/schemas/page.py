"""Public page payload schemas."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from sofaclean.schemas.post import PostOut, PostSummaryOut
from sofaclean.schemas.site import ContactSettings, HomePageData


class PageMeta(BaseModel):
    title: str
    description: str
    canonical: str
    alternates: Dict[str, str]


class HomePageOut(BaseModel):
    lang: str
    meta: PageMeta
    json_ld: List[Dict[str, Any]]
    recent_posts: List[PostSummaryOut]
    home: HomePageData
    contact: ContactSettings
    dictionary: Dict[str, Any]


class BlogIndexPageOut(BaseModel):
    lang: str
    meta: PageMeta
    posts: List[PostSummaryOut]
    dictionary: Dict[str, Any]


class BlogPostPageOut(BaseModel):
    lang: str
    meta: PageMeta
    json_ld: List[Dict[str, Any]]
    post: PostOut
    related_posts: List[PostSummaryOut]
    published_on: Optional[str] = None
    dictionary: Dict[str, Any]
