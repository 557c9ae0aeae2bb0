"""Admin screen entry points.

Each screen returns the data it loads on mount. The session gate runs once at
the router level; visitors without a session are sent back to ``/admin``.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from sofaclean.config import ContentDefaults, get_content_defaults
from sofaclean.database import get_db
from sofaclean.middleware.auth_middleware import get_optional_admin, require_admin_screen
from sofaclean.models.admin_user import AdminUser
from sofaclean.schemas.auth import AdminOut
from sofaclean.schemas.post import PostOut
from sofaclean.schemas.quote import QUOTE_STATUSES, QuoteOut
from sofaclean.services import analytics_service, content_service, post_service, quote_service

ADMIN_LINKS = {
    "blog": "/admin/blog",
    "quotes": "/admin/quotes",
    "analytics": "/admin/analytics",
    "contact_settings": "/admin/settings/contact",
    "home_settings": "/admin/settings/home",
}

login_router = APIRouter(prefix="/admin", tags=["admin-screens"])
router = APIRouter(
    prefix="/admin",
    tags=["admin-screens"],
    dependencies=[Depends(require_admin_screen)],
)


@login_router.get("")
def login_screen(admin: Optional[AdminUser] = Depends(get_optional_admin)):
    return {
        "screen": "login",
        "authenticated": admin is not None,
        "next": "/admin/dashboard" if admin is not None else None,
    }


@router.get("/dashboard")
def dashboard_screen(admin: AdminUser = Depends(require_admin_screen)):
    return {
        "screen": "dashboard",
        "admin": AdminOut.model_validate(admin),
        "links": ADMIN_LINKS,
    }


@router.get("/blog")
def blog_list_screen(db: Session = Depends(get_db)):
    return {
        "screen": "blog-list",
        "posts": [PostOut.model_validate(row) for row in post_service.list_posts(db)],
    }


@router.get("/blog/new")
def blog_new_screen(defaults: ContentDefaults = Depends(get_content_defaults)):
    return {
        "screen": "blog-new",
        "form": {
            "title": "",
            "slug": "",
            "image": defaults.post_image_url,
            "image_hint": "",
            "category": "",
            "description": "",
            "content": "",
            "status": "draft",
            "meta_title": "",
            "meta_description": "",
        },
    }


@router.get("/blog/edit/{post_id}")
def blog_edit_screen(post_id: int, db: Session = Depends(get_db)):
    return {
        "screen": "blog-edit",
        "post": PostOut.model_validate(post_service.get_post_or_404(db, post_id)),
    }


@router.get("/quotes")
def quotes_screen(
    status: str = Query("all"),
    days: int | None = Query(None, ge=0),
    db: Session = Depends(get_db),
):
    return {
        "screen": "quotes",
        "filters": {"status": status, "days": days},
        "statuses": list(QUOTE_STATUSES),
        "quotes": [QuoteOut.model_validate(row) for row in quote_service.list_quotes(db, status=status, days=days)],
    }


@router.get("/analytics")
def analytics_screen(days: int = Query(7), db: Session = Depends(get_db)):
    return {"screen": "analytics", **analytics_service.build_analytics(db, days=days)}


@router.get("/settings/contact")
def contact_settings_screen(
    db: Session = Depends(get_db),
    defaults: ContentDefaults = Depends(get_content_defaults),
):
    return {
        "screen": "contact-settings",
        "settings": content_service.get_contact_settings(db, defaults),
    }


@router.get("/settings/home")
def home_settings_screen(
    db: Session = Depends(get_db),
    defaults: ContentDefaults = Depends(get_content_defaults),
):
    return {
        "screen": "home-settings",
        "settings": content_service.get_home_page_data(db, defaults),
    }
